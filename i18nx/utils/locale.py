"""Current-locale holder.

No validation is done against registered locales: an unknown code simply
finds no translations.
"""
from __future__ import annotations

from i18nx.utils.store import UNSET_LOCALE


class LocaleState:
    def __init__(self, initial: str = UNSET_LOCALE) -> None:
        self._code = UNSET_LOCALE
        self.set(initial)

    def get(self) -> str:
        return self._code

    def set(self, code: str) -> None:
        if not isinstance(code, str):
            raise TypeError(f"locale must be a str, not {type(code).__name__}")
        self._code = code

    def clear(self) -> None:
        self._code = UNSET_LOCALE

    @property
    def is_set(self) -> bool:
        return self._code != UNSET_LOCALE
