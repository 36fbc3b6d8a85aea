"""Process-wide dictionary and module-level helpers.

The helpers all act on one `Dictionary` created on first use and configured
from `i18nx.config.Settings` (initial locale, strict locale warnings). Use a
`Dictionary` instance directly when isolated state is needed.
"""
from __future__ import annotations

import threading
from typing import Any, Optional

from i18nx.config import Settings
from i18nx.dictionary import Dictionary
from i18nx.utils.models import LoadSummary

_instance: Optional[Dictionary] = None
_lock = threading.Lock()


def get_dictionary() -> Dictionary:
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                settings = Settings()
                _instance = Dictionary(locale=settings.LOCALE, strict_locales=settings.STRICT_LOCALES)
    return _instance


def set_dictionary(dictionary: Optional[Dictionary]) -> None:
    """Replace the process-wide dictionary; None recreates it on next use."""
    global _instance
    with _lock:
        _instance = dictionary


def register(template: str, locale: str, translation: str) -> None:
    get_dictionary().register(template, locale, translation)


def register_default(template: str, translation: str) -> None:
    get_dictionary().register_default(template, translation)


def set_locale(code: str) -> None:
    get_dictionary().set_locale(code)


def get_locale() -> str:
    return get_dictionary().get_locale()


def clear_locale() -> None:
    get_dictionary().clear_locale()


def load(document: Any, locale: Optional[str] = None) -> LoadSummary:
    return get_dictionary().load(document, locale)


def load_yaml(text: str, locale: Optional[str] = None) -> LoadSummary:
    return get_dictionary().load_yaml(text, locale)


def load_json(text: str, locale: Optional[str] = None) -> LoadSummary:
    return get_dictionary().load_json(text, locale)


def replace(document: Any) -> LoadSummary:
    return get_dictionary().replace(document)


def reset() -> None:
    get_dictionary().reset()


def translate_and_format(template: str, /, *args: Any, locale: Optional[str] = None, **kwargs: Any) -> str:
    """Translate `template` with the process-wide dictionary and format it.

    >>> t("No translation for this string.")
    'No translation for this string.'
    """
    return get_dictionary().translate_and_format(template, *args, locale=locale, **kwargs)


t = translate_and_format
