import pytest

from i18nx.errors import DictionaryParseError
from i18nx.utils import loader
from i18nx.utils.store import DEFAULT_LOCALE_TAG, TemplateStore

EXAMPLE = {
    "Hello": {"de": "Hallo", "fr": "Bonjour"},
    "Hello {name}!": {"de": "Hallo {name}!", "fr": "Bonjour {name}!"},
}
EXAMPLE_RU = {"Hello": "Привет", "Hello {name}!": "Привет {name}!"}
EXAMPLE_CN = {"Hello": "你好", "Hello {name}!": "你好 {name}!"}


def test_load_multi_locale_document():
    store = TemplateStore()
    summary = loader.load(store, EXAMPLE)
    assert summary.templates == 2
    assert summary.locales == ["de", "fr"]
    assert summary.defaults == 0
    assert store.resolve("Hello", "fr") == "Bonjour"


def test_single_string_entries_become_defaults():
    store = TemplateStore()
    summary = loader.load(store, {"Hello": "Hi", "Bye": {"de": "Tschüss"}})
    assert summary.defaults == 1
    assert store.translations("Hello") == {DEFAULT_LOCALE_TAG: "Hi"}
    assert store.resolve("Hello", "de") == "Hi"


def test_locale_scoped_loads_are_cumulative():
    store = TemplateStore()
    loader.load(store, EXAMPLE)
    loader.load(store, EXAMPLE_RU, locale="ru")
    loader.load(store, EXAMPLE_CN, locale="cn")
    assert store.translations("Hello") == {"de": "Hallo", "fr": "Bonjour", "ru": "Привет", "cn": "你好"}


def test_merge_patterns_reach_same_state():
    one = TemplateStore()
    loader.load(one, {"Hello": {"de": "Hallo", "ru": "Привет"}})
    many = TemplateStore()
    loader.load(many, {"Hello": "Hallo"}, locale="de")
    loader.load(many, {"Hello": "Привет"}, locale="ru")
    assert one.snapshot() == many.snapshot()


def test_bad_document_leaves_store_untouched():
    store = TemplateStore()
    loader.load(store, EXAMPLE)
    before = store.snapshot()
    bad = {"Good": {"de": "Gut"}, "Hello": {"de": 5}}
    with pytest.raises(DictionaryParseError) as ei:
        loader.load(store, bad)
    assert ei.value.location == ("Hello", "de")
    assert store.snapshot() == before


@pytest.mark.parametrize(
    "document",
    [
        ["not", "a", "mapping"],
        "just a string",
        {"Hello": 3},
        {"Hello": ["a", "b"]},
        {"Hello": {"de": {"nested": "too deep"}}},
        {"Hello": {"": "empty locale"}},
    ],
)
def test_schema_violations(document):
    store = TemplateStore()
    with pytest.raises(DictionaryParseError):
        loader.load(store, document)
    assert len(store) == 0


def test_locale_scoped_document_rejects_maps():
    store = TemplateStore()
    with pytest.raises(DictionaryParseError) as ei:
        loader.load(store, EXAMPLE, locale="ru")
    assert ei.value.location == ("Hello",)
    assert len(store) == 0


def test_reserved_scope_locale():
    with pytest.raises(ValueError):
        loader.load(TemplateStore(), EXAMPLE_RU, locale="")


def test_parse_yaml():
    doc = loader.parse_yaml('"Hello {name}!":\n  de: "Hallo {name}!"\nBye: Tschüss\n')
    assert doc == {"Hello {name}!": {"de": "Hallo {name}!"}, "Bye": "Tschüss"}
    assert loader.parse_yaml("") == {}
    # JSON is valid YAML
    assert loader.parse_yaml('{"a": {"de": "b"}}') == {"a": {"de": "b"}}


def test_parse_yaml_error_has_position():
    with pytest.raises(DictionaryParseError) as ei:
        loader.parse_yaml("a: [unclosed\nb: c\n")
    assert len(ei.value.location) == 2
    assert all(isinstance(x, int) for x in ei.value.location)


def test_parse_json_error_has_position():
    with pytest.raises(DictionaryParseError) as ei:
        loader.parse_json('{"a": "b",\n}')
    assert ei.value.location[0] == 2


def test_yaml_scalars_must_be_strings():
    # unquoted yes/no and numbers are not strings in YAML
    with pytest.raises(DictionaryParseError):
        loader.load(TemplateStore(), loader.parse_yaml("Enabled: yes\n"))
