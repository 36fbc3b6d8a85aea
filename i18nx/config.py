"""Configuration loader for i18nx.

Settings are read from environment variables (and a .env file via
python-dotenv) when the module is imported. The process-wide dictionary uses
them for its initial locale and log level.
"""
from typing import Optional, List
import logging
import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = ("1", "true", "yes")


class Settings:
    """Minimal settings holder."""

    # Initial current locale of the process-wide dictionary ("" means unset)
    LOCALE: str = os.getenv("I18NX_LOCALE", "")
    LOG_LEVEL: str = os.getenv("I18NX_LOG_LEVEL", "WARNING").upper()
    # Warn when switching to a locale with no registered translations
    STRICT_LOCALES: bool = os.getenv("I18NX_STRICT_LOCALES", "false").lower() in _TRUTHY

    def log_level(self) -> int:
        level = logging.getLevelName(self.LOG_LEVEL)
        return level if isinstance(level, int) else logging.WARNING

    def validate(self, required: Optional[List[str]] = None) -> List[str]:
        """Return a list of configuration problems (empty if all is well).

        Args:
            required: attribute names that must be non-empty. Nothing is
                required by default since every setting has a usable default.
        """
        problems: List[str] = []
        for name in required or []:
            val = getattr(self, name, None)
            if val is None or (isinstance(val, str) and not val.strip()):
                problems.append(name)

        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            problems.append(f"LOG_LEVEL={self.LOG_LEVEL}")

        return problems
