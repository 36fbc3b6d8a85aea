"""Exception types raised by i18nx.

Missing translations are not errors and have no exception here; the
untranslated template is used instead.
"""
from __future__ import annotations

from typing import Any, Tuple


class I18nError(Exception):
    """Base class for every error raised by the package."""


class DictionaryParseError(I18nError, ValueError):
    """A dictionary document could not be parsed or failed schema validation.

    `location` is either a path into the document (e.g. ``("Hello", "de")``)
    or a ``(line, column)`` pair for syntax errors in the source text.
    """

    def __init__(self, message: str, location: Tuple[Any, ...] = ()):
        self.message = message
        self.location = tuple(location)
        if self.location:
            where = ".".join(str(part) for part in self.location)
            super().__init__(f"{message} (at {where})")
        else:
            super().__init__(message)


class FormatError(I18nError, ValueError):
    """Placeholder substitution failed."""


class MissingArgumentError(FormatError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"missing argument {name!r}")


class TemplateSyntaxError(FormatError):
    def __init__(self, position: int, description: str):
        self.position = position
        self.description = description
        super().__init__(f"{description} at position {position}")


class InvalidFormatSpecError(FormatError):
    def __init__(self, name: str, spec: str, reason: str = ""):
        self.name = name
        self.spec = spec
        msg = f"invalid format spec {spec!r} for argument {name!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
