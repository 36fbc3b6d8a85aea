"""i18nx: runtime string localization.

Templates are written in the source language and double as dictionary keys.
At runtime a template is looked up for the current locale and the chosen
string (the translation, or the template itself when there is none) is
formatted with the given arguments::

    import i18nx
    from i18nx import t

    i18nx.load({"Hello {name}!": {"de": "Hallo {name}!", "fr": "Bonjour {name}!"}})
    i18nx.load({"Hello {name}!": "Привет {name}!"}, locale="ru")
    i18nx.set_locale("fr")
    t("Hello {name}!", name="Rustaceans")  # "Bonjour Rustaceans!"
"""

from .dictionary import Dictionary
from .errors import (
    DictionaryParseError,
    FormatError,
    I18nError,
    InvalidFormatSpecError,
    MissingArgumentError,
    TemplateSyntaxError,
)
from .utils.formatter import format_template, placeholders
from .utils.i18n import (
    clear_locale,
    get_dictionary,
    get_locale,
    load,
    load_json,
    load_yaml,
    register,
    register_default,
    replace,
    reset,
    set_dictionary,
    set_locale,
    t,
    translate_and_format,
)
from .utils.loader import parse_json, parse_yaml
from .utils.models import LoadSummary
from .utils.store import DEFAULT_LOCALE_TAG, UNSET_LOCALE

__all__ = (
    "Dictionary",
    "LoadSummary",
    "DEFAULT_LOCALE_TAG",
    "UNSET_LOCALE",
    "I18nError",
    "DictionaryParseError",
    "FormatError",
    "MissingArgumentError",
    "TemplateSyntaxError",
    "InvalidFormatSpecError",
    "format_template",
    "placeholders",
    "parse_yaml",
    "parse_json",
    "get_dictionary",
    "set_dictionary",
    "register",
    "register_default",
    "set_locale",
    "get_locale",
    "clear_locale",
    "load",
    "load_yaml",
    "load_json",
    "replace",
    "reset",
    "translate_and_format",
    "t",
)
