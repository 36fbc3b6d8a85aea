"""Logging helpers for i18nx.

Every module gets its logger from `get_logger` so handler setup happens
once per logger name.
"""
import logging
from typing import Optional

from i18nx.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = "i18nx", level: Optional[int] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level if level is not None else Settings().log_level())
    elif level is not None:
        logger.setLevel(level)
    return logger
