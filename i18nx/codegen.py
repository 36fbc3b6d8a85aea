"""Offline generation of registration code.

Turns a dictionary document into Python source that registers the same
translations through the public API, for projects that prefer shipping
translations as code instead of data files.
"""
from __future__ import annotations

from typing import Any, List, Optional

from i18nx.errors import TemplateSyntaxError
from i18nx.utils import formatter, loader
from i18nx.utils.logger import get_logger
from i18nx.utils.store import DEFAULT_LOCALE_TAG

logger = get_logger("i18nx.codegen")

HEADER = "# Generated by scripts/generate_registrations.py; do not edit.\n"


def generate_source(document: Any, locale: Optional[str] = None, source_name: str = "", module: str = "i18nx") -> str:
    """Return Python source registering every entry of `document`.

    Entries are emitted in document order. Translations whose placeholders
    do not parse are still emitted but logged as warnings, since the error
    would otherwise only show up when the string is formatted.
    """
    entries = loader.collect_entries(document, locale)
    lines: List[str] = [HEADER]
    if source_name:
        lines.append(f"# Source: {source_name}\n")
    lines.append(f"import {module}\n\n")
    for template, code, translation in entries:
        for text in (template, translation):
            try:
                formatter.parse(text)
            except TemplateSyntaxError as exc:
                logger.warning("Template %r: %s", text, exc)
        if code == DEFAULT_LOCALE_TAG:
            lines.append(f"{module}.register_default({template!r}, {translation!r})\n")
        else:
            lines.append(f"{module}.register({template!r}, {code!r}, {translation!r})\n")
    return "".join(lines)
