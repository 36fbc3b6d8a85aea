"""Pydantic models for dictionary documents.

A dictionary document maps each template to either a single translation
string or a mapping of locale code -> translation. Locale-scoped documents
(one file per locale) only allow the single-string form.
"""
from __future__ import annotations

from typing import Dict, List, Union

from pydantic import BaseModel, Field, RootModel, StrictStr

LocaleMap = Dict[StrictStr, StrictStr]


class DictionaryDocument(RootModel[Dict[StrictStr, Union[StrictStr, LocaleMap]]]):
    """Multi-locale document, e.g. ``{"Hello": {"de": "Hallo", "fr": "Bonjour"}}``."""


class LocaleDocument(RootModel[Dict[StrictStr, StrictStr]]):
    """Single-locale document, e.g. ``{"Hello": "Hallo"}``."""


class LoadSummary(BaseModel):
    templates: int = 0
    locales: List[str] = Field(default_factory=list)
    defaults: int = 0
