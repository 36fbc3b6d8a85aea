"""In-memory template store.

Maps each template string to its translation table (locale code ->
translation). Single-string dictionary entries live under DEFAULT_LOCALE_TAG
and are only used when the requested locale has no entry of its own.

The store itself is not synchronized; `i18nx.dictionary.Dictionary` holds the
lock around it.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

DEFAULT_LOCALE_TAG = "*"
UNSET_LOCALE = ""
RESERVED_LOCALES = (DEFAULT_LOCALE_TAG, UNSET_LOCALE)

# (template, locale, translation); locale is DEFAULT_LOCALE_TAG for defaults
Entry = Tuple[str, str, str]


def _check_str(value, what: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, not {type(value).__name__}")


class TemplateStore:
    def __init__(self) -> None:
        self._tables: Dict[str, Dict[str, str]] = {}

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, template: object) -> bool:
        return template in self._tables

    def register(self, template: str, locale: str, translation: str) -> None:
        """Insert or overwrite the translation of `template` for `locale`.

        Other locales already registered for the template are kept.
        """
        _check_str(template, "template")
        _check_str(locale, "locale")
        _check_str(translation, "translation")
        if locale in RESERVED_LOCALES:
            raise ValueError(f"locale code {locale!r} is reserved")
        self._tables.setdefault(template, {})[locale] = translation

    def register_default(self, template: str, translation: str) -> None:
        """Register the last-resort translation used when no locale matches."""
        _check_str(template, "template")
        _check_str(translation, "translation")
        self._tables.setdefault(template, {})[DEFAULT_LOCALE_TAG] = translation

    def resolve(self, template: str, locale: str) -> Optional[str]:
        """Return the exact-locale translation, else the default one, else None."""
        table = self._tables.get(template)
        if not table:
            return None
        if locale not in RESERVED_LOCALES and locale in table:
            return table[locale]
        return table.get(DEFAULT_LOCALE_TAG)

    def translations(self, template: str) -> Dict[str, str]:
        return dict(self._tables.get(template, {}))

    def locales(self) -> List[str]:
        """Sorted locale codes that have at least one translation."""
        found = set()
        for table in self._tables.values():
            found.update(table)
        found.discard(DEFAULT_LOCALE_TAG)
        return sorted(found)

    def merge(self, entries: Iterable[Entry]) -> None:
        """Apply entries in order. Validation happens before anything is written."""
        staged = list(entries)
        for template, locale, translation in staged:
            _check_str(template, "template")
            _check_str(locale, "locale")
            _check_str(translation, "translation")
            if locale == UNSET_LOCALE:
                raise ValueError(f"locale code {locale!r} is reserved")
        for template, locale, translation in staged:
            self._tables.setdefault(template, {})[locale] = translation

    def snapshot(self) -> Dict[str, Dict[str, str]]:
        return {template: dict(table) for template, table in self._tables.items()}

    def clear(self) -> None:
        self._tables.clear()
