"""Translation dictionary: template store + current locale + formatting.

A `Dictionary` is an explicit context object. Code that needs isolated
translation state (a test, a per-request locale in a server) creates its own;
`i18nx.utils.i18n` keeps one process-wide instance for convenience.

Example::

    d = Dictionary.from_document({
        "Hello {name}!": {"de": "Hallo {name}!", "fr": "Bonjour {name}!"},
    })
    d.set_locale("fr")
    d.translate_and_format("Hello {name}!", name="Rustaceans")
    # -> "Bonjour Rustaceans!"

All methods are safe to call from several threads. Changes to the locale or
the store are visible to every call that starts afterwards.
"""
from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional

from i18nx.errors import TemplateSyntaxError
from i18nx.utils import formatter, loader
from i18nx.utils.locale import LocaleState
from i18nx.utils.logger import get_logger
from i18nx.utils.models import LoadSummary
from i18nx.utils.store import DEFAULT_LOCALE_TAG, UNSET_LOCALE, TemplateStore

logger = get_logger("i18nx.dictionary")


class Dictionary:
    def __init__(self, locale: str = UNSET_LOCALE, strict_locales: bool = False) -> None:
        self._store = TemplateStore()
        self._locale = LocaleState(locale)
        self._lock = threading.RLock()
        self.strict_locales = strict_locales

    @classmethod
    def from_document(cls, document: Any, locale: str = UNSET_LOCALE) -> "Dictionary":
        """Build a dictionary from one multi-locale document."""
        dictionary = cls(locale=locale)
        dictionary.load(document)
        return dictionary

    def __repr__(self) -> str:
        return f"<Dictionary locale={self.get_locale()!r} templates={len(self)}>"

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, template: object) -> bool:
        with self._lock:
            return template in self._store

    # ----- locale
    def get_locale(self) -> str:
        with self._lock:
            return self._locale.get()

    def set_locale(self, code: str) -> None:
        with self._lock:
            self._locale.set(code)
            unknown = self.strict_locales and self._locale.is_set and code not in self._store.locales()
        if unknown:
            logger.warning("Locale %r has no registered translations", code)
        logger.debug("Locale set to %r", code)

    def clear_locale(self) -> None:
        with self._lock:
            self._locale.clear()

    # ----- registration and loading
    def register(self, template: str, locale: str, translation: str) -> None:
        with self._lock:
            self._store.register(template, locale, translation)

    def register_default(self, template: str, translation: str) -> None:
        with self._lock:
            self._store.register_default(template, translation)

    def load(self, document: Any, locale: Optional[str] = None) -> LoadSummary:
        """Merge a parsed document into the dictionary.

        With `locale`, the document is locale-scoped: each entry must be a
        single string and is registered under that locale. Without it,
        single-string entries become defaults and locale maps are registered
        per locale. Raises DictionaryParseError without changing anything if
        the document is invalid.
        """
        with self._lock:
            return loader.load(self._store, document, locale)

    def load_yaml(self, text: str, locale: Optional[str] = None) -> LoadSummary:
        return self.load(loader.parse_yaml(text), locale)

    def load_json(self, text: str, locale: Optional[str] = None) -> LoadSummary:
        return self.load(loader.parse_json(text), locale)

    def replace(self, document: Any) -> LoadSummary:
        """Swap the whole store for the contents of `document`; keeps the locale."""
        entries = loader.checked_entries(document)
        fresh = TemplateStore()
        fresh.merge(entries)
        with self._lock:
            self._store = fresh
        return loader.summarize(entries)

    def reset(self) -> None:
        """Drop every translation; the current locale is kept."""
        with self._lock:
            self._store = TemplateStore()

    # ----- lookup
    def resolve(self, template: str, locale: Optional[str] = None) -> Optional[str]:
        """Translation of `template` for `locale` (default: current), or None."""
        with self._lock:
            code = self._locale.get() if locale is None else locale
            return self._store.resolve(template, code)

    def translations(self, template: str) -> Dict[str, str]:
        with self._lock:
            return self._store.translations(template)

    def locales(self) -> List[str]:
        with self._lock:
            return self._store.locales()

    def snapshot(self) -> Dict[str, Dict[str, str]]:
        with self._lock:
            return self._store.snapshot()

    def translate_and_format(self, template: str, /, *args: Any, locale: Optional[str] = None, **kwargs: Any) -> str:
        """Translate `template` and substitute the arguments.

        Uses the current locale unless `locale` is given. When there is no
        translation the template itself is formatted. FormatError
        subclasses propagate to the caller.
        """
        chosen = self.resolve(template, locale)
        if chosen is None:
            chosen = template
        return formatter.format_template(chosen, kwargs, args)

    t = translate_and_format

    def check(self) -> List[str]:
        """Report translations whose placeholders differ from their template.

        Returns human-readable problems; an empty list means every
        translation parses and uses the same placeholder names as its
        template.
        """
        problems: List[str] = []
        for template, table in self.snapshot().items():
            try:
                expected = sorted(set(formatter.placeholders(template)))
            except TemplateSyntaxError as exc:
                problems.append(f"{template!r}: {exc}")
                continue
            for code, translation in sorted(table.items()):
                label = "default" if code == DEFAULT_LOCALE_TAG else code
                try:
                    found = sorted(set(formatter.placeholders(translation)))
                except TemplateSyntaxError as exc:
                    problems.append(f"{template!r} [{label}]: {exc}")
                    continue
                if found != expected:
                    problems.append(f"{template!r} [{label}]: placeholders {found} != {expected}")
        return problems
