"""Dictionary loading and merging.

Documents are plain mappings produced by any deserializer; `parse_yaml` and
`parse_json` are provided for text sources. Every document is validated in
full before the store is touched, so a bad document leaves the store as it
was.

Loads are cumulative: a document only adds or overwrites the
(template, locale) pairs it mentions.
"""
from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import yaml
from pydantic import ValidationError

from i18nx.errors import DictionaryParseError
from i18nx.utils.logger import get_logger
from i18nx.utils.models import DictionaryDocument, LoadSummary, LocaleDocument
from i18nx.utils.store import DEFAULT_LOCALE_TAG, RESERVED_LOCALES, UNSET_LOCALE, Entry, TemplateStore

logger = get_logger("i18nx.loader")


def parse_yaml(text: str) -> Any:
    """Deserialize YAML (or JSON, which YAML accepts) text.

    An empty document yields an empty mapping.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.MarkedYAMLError as exc:
        mark = exc.problem_mark or exc.context_mark
        location: Tuple[int, ...] = (mark.line + 1, mark.column + 1) if mark else ()
        raise DictionaryParseError(f"invalid YAML: {exc.problem or exc}", location) from exc
    except yaml.YAMLError as exc:
        raise DictionaryParseError(f"invalid YAML: {exc}") from exc
    return {} if data is None else data


def parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DictionaryParseError(f"invalid JSON: {exc.msg}", (exc.lineno, exc.colno)) from exc


def _document_path(document: Any, loc: Sequence[Any]) -> Tuple[Any, ...]:
    """Map a pydantic error location onto keys that exist in the document.

    Pydantic inserts union member tags (``str``, ``dict[str,str]``) and
    ``[key]`` markers into locations; those are dropped.
    """
    path: List[Any] = []
    node = document
    for part in loc:
        if isinstance(node, Mapping) and part in node:
            path.append(part)
            node = node[part]
    return tuple(path)


def _validate(document: Any, scoped: bool) -> dict:
    model = LocaleDocument if scoped else DictionaryDocument
    try:
        return model.model_validate(document).root
    except ValidationError as exc:
        # union members each report an error; the deepest one is the useful one
        located = [(_document_path(document, err.get("loc", ())), err) for err in exc.errors()]
        location, error = max(located, key=lambda pair: len(pair[0]))
        if scoped and isinstance(document, Mapping) and location:
            value = document.get(location[0])
            if isinstance(value, Mapping):
                raise DictionaryParseError(
                    "locale-scoped documents only allow single-string entries", location[:1]
                ) from exc
        if not isinstance(document, Mapping):
            message = f"document must be a mapping, not {type(document).__name__}"
        else:
            message = error.get("msg", "schema violation")
        raise DictionaryParseError(message, location) from exc


def collect_entries(document: Any, locale: Optional[str] = None) -> List[Entry]:
    """Validate `document` and flatten it into (template, locale, translation).

    Single-string entries go under `locale` when given, otherwise under the
    default tag. Raises DictionaryParseError on any schema violation.
    """
    if locale is not None:
        if not isinstance(locale, str):
            raise TypeError(f"locale must be a str, not {type(locale).__name__}")
        if locale in RESERVED_LOCALES:
            raise ValueError(f"locale code {locale!r} is reserved")

    entries: List[Entry] = []
    for template, value in _validate(document, scoped=locale is not None).items():
        if isinstance(value, str):
            entries.append((template, locale or DEFAULT_LOCALE_TAG, value))
            continue
        for code, translation in value.items():
            if code == UNSET_LOCALE:
                raise DictionaryParseError("empty locale code", (template, code))
            entries.append((template, code, translation))
    return entries


def checked_entries(document: Any, locale: Optional[str] = None) -> List[Entry]:
    """Like `collect_entries`, but logs rejected documents."""
    try:
        return collect_entries(document, locale)
    except DictionaryParseError as exc:
        logger.warning("Rejected dictionary document: %s", exc)
        raise


def summarize(entries: Sequence[Entry]) -> LoadSummary:
    locales = {code for _, code, _ in entries if code != DEFAULT_LOCALE_TAG}
    return LoadSummary(
        templates=len({template for template, _, _ in entries}),
        locales=sorted(locales),
        defaults=sum(1 for _, code, _ in entries if code == DEFAULT_LOCALE_TAG),
    )


def load(store: TemplateStore, document: Any, locale: Optional[str] = None) -> LoadSummary:
    """Merge a parsed dictionary document into `store`.

    Args:
        store: the store to update
        document: mapping of template -> translation string or locale map
        locale: when given, the document is locale-scoped and each
            single-string entry is registered under this locale

    Raises:
        DictionaryParseError: the document violates the schema; the store
            is left unmodified
    """
    entries = checked_entries(document, locale)
    store.merge(entries)
    summary = summarize(entries)
    logger.debug(
        "Loaded %d templates (locales=%s, defaults=%d)", summary.templates, summary.locales, summary.defaults
    )
    return summary
