import pytest

from i18nx.utils.locale import LocaleState
from i18nx.utils.store import DEFAULT_LOCALE_TAG, UNSET_LOCALE, TemplateStore


def test_register_and_resolve():
    store = TemplateStore()
    store.register("Hello", "de", "Hallo")
    assert store.resolve("Hello", "de") == "Hallo"
    # unrelated registrations don't disturb it
    store.register("Bye", "de", "Tschüss")
    store.register("Hello", "fr", "Bonjour")
    assert store.resolve("Hello", "de") == "Hallo"
    assert store.resolve("Hello", "fr") == "Bonjour"


def test_reregistration_replaces_one_pair_only():
    store = TemplateStore()
    store.register("Hello", "de", "Hallo")
    store.register("Hello", "fr", "Bonjour")
    store.register("Hello", "de", "Servus")
    assert store.translations("Hello") == {"de": "Servus", "fr": "Bonjour"}


def test_resolve_missing():
    store = TemplateStore()
    assert store.resolve("Hello", "de") is None
    store.register("Hello", "de", "Hallo")
    assert store.resolve("Hello", "fr") is None
    assert store.resolve("Other", "de") is None


def test_default_entry_is_last_resort():
    store = TemplateStore()
    store.register_default("Hello", "Hi")
    store.register("Hello", "de", "Hallo")
    assert store.resolve("Hello", "de") == "Hallo"
    assert store.resolve("Hello", "fr") == "Hi"
    assert store.resolve("Hello", UNSET_LOCALE) == "Hi"
    # asking for the tag itself does not count as an exact match
    assert store.resolve("Hello", DEFAULT_LOCALE_TAG) == "Hi"


def test_reserved_locales_rejected():
    store = TemplateStore()
    with pytest.raises(ValueError):
        store.register("Hello", UNSET_LOCALE, "x")
    with pytest.raises(ValueError):
        store.register("Hello", DEFAULT_LOCALE_TAG, "x")
    with pytest.raises(TypeError):
        store.register("Hello", "de", 5)
    assert len(store) == 0


def test_locales_and_snapshot():
    store = TemplateStore()
    store.register("a", "fr", "A")
    store.register("b", "de", "B")
    store.register_default("b", "b")
    assert store.locales() == ["de", "fr"]
    snap = store.snapshot()
    snap["a"]["fr"] = "changed"
    assert store.resolve("a", "fr") == "A"
    assert "a" in store and "zzz" not in store


def test_merge_validates_before_writing():
    store = TemplateStore()
    with pytest.raises(ValueError):
        store.merge([("a", "de", "A"), ("b", UNSET_LOCALE, "B")])
    assert len(store) == 0


def test_locale_state():
    state = LocaleState()
    assert state.get() == UNSET_LOCALE
    assert not state.is_set
    state.set("fr")
    assert state.get() == "fr" and state.is_set
    state.clear()
    assert state.get() == UNSET_LOCALE
    with pytest.raises(TypeError):
        state.set(None)
