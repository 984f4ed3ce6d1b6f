"""Tests for infrastructure.i18n.loader module."""

from typing import List

import pytest

from infrastructure.i18n import (
    CatalogLoadError,
    ConfigError,
    Locale,
    LocaleCatalog,
    PluralForms,
    load_catalog,
)
from infrastructure.i18n.loader import locale_from_filename, parse_messages
from infrastructure.storage import (
    ContentStore,
    ContentStoreError,
    FileSystemContentStore,
    InMemoryContentStore,
)
from tests.factories.i18n import make_message_set


class UnreadableStore(ContentStore):
    """Content store whose listing always fails."""

    def read_file(self, path: str) -> bytes:
        raise ContentStoreError("store offline")

    def list_files(self) -> List[str]:
        raise ContentStoreError("store offline")


class TestLocaleFromFilename:
    """Tests for locale_from_filename()."""

    @pytest.mark.parametrize(
        "path,tag",
        [
            ("locales/fr.yml", "fr"),
            ("locales/en-US.yaml", "en-US"),
            ("locales/all.en-US.yml", "en-US"),
            ("locales/admin.fr_CA.json", "fr-CA"),
        ],
    )
    def test_extracts_locale(self, path, tag):
        assert locale_from_filename(path) == Locale.parse(tag)

    @pytest.mark.parametrize(
        "path", ["locales/README.md", "locales/all.x1.yml", "locales/.yml"]
    )
    def test_returns_none_without_locale(self, path):
        assert locale_from_filename(path) is None


class TestParseMessages:
    """Tests for parse_messages()."""

    def test_nested_namespaces_are_flattened(self):
        messages = parse_messages(
            {"welcome": {"title": "Welcome", "nested": {"deep": "Deep"}}}, "x.yml"
        )
        assert messages == {"welcome.title": "Welcome", "welcome.nested.deep": "Deep"}

    def test_plural_mapping_becomes_plural_forms(self):
        messages = parse_messages({"people": {"one": "a", "other": "b"}}, "x.yml")
        assert isinstance(messages["people"], PluralForms)

    def test_list_of_messages(self):
        messages = parse_messages(
            [
                {"id": "greeting", "translation": "Hello, World!"},
                {"id": "people", "translation": {"one": "a", "other": "b"}},
            ],
            "x.yml",
        )
        assert messages["greeting"] == "Hello, World!"
        assert messages["people"].get("one") == "a"

    def test_list_entry_without_translation_fails(self):
        with pytest.raises(CatalogLoadError, match="entry 0"):
            parse_messages([{"id": "greeting"}], "x.yml")

    def test_numbers_are_stringified(self):
        assert parse_messages({"answer": 42}, "x.yml") == {"answer": "42"}

    def test_empty_content(self):
        assert parse_messages(None, "x.yml") == {}

    def test_unsupported_value(self):
        with pytest.raises(CatalogLoadError, match="greeting"):
            parse_messages({"greeting": ["a", "b"]}, "x.yml")

    def test_unsupported_top_level(self):
        with pytest.raises(CatalogLoadError, match="x.yml"):
            parse_messages("just a string", "x.yml")


class TestLoadCatalog:
    """Tests for load_catalog()."""

    def test_loads_every_locale(self, loaded_catalog):
        """load_catalog() indexes one MessageSet per locale."""
        assert [loc.tag for loc in loaded_catalog.available_locales] == ["en-US", "fr"]
        assert loaded_catalog.default_locale == Locale.parse("en-US")

    def test_messages_are_parsed(self, loaded_catalog):
        fr = loaded_catalog.lookup(Locale.parse("fr"))
        assert fr.get("greeting") == "Bonjour à tous !"
        assert fr.get("welcome.title") == "Bienvenue"
        assert fr.get("people").get("one") == "Bonjour, tout seul !"

    def test_sources_recorded(self, loaded_catalog):
        assert loaded_catalog.default_messages.sources == ("locales/all.en-US.yml",)

    def test_files_for_same_locale_are_merged(self, locale_files):
        """Several files for one locale merge, later paths win on clashes."""
        locale_files["locales/extra.fr.yml"] = 'greeting: "Salut !"\nfarewell: "Au revoir"\n'
        catalog = load_catalog(InMemoryContentStore(locale_files), "en-US")

        fr = catalog.lookup(Locale.parse("fr"))
        assert fr.get("farewell") == "Au revoir"
        # all.fr.yml sorts before extra.fr.yml
        assert fr.get("greeting") == "Salut !"
        assert fr.sources == ("locales/all.fr.yml", "locales/extra.fr.yml")

    def test_list_format_file(self, locale_files):
        locale_files["locales/de.yml"] = (
            "- id: greeting\n  translation: Hallo Welt!\n"
        )
        catalog = load_catalog(InMemoryContentStore(locale_files), "en-US")
        assert catalog.lookup(Locale.parse("de")).get("greeting") == "Hallo Welt!"

    def test_ignores_files_outside_directory(self, locale_files):
        locale_files["templates/de.yml"] = "greeting: Hallo"
        catalog = load_catalog(InMemoryContentStore(locale_files), "en-US")
        assert Locale.parse("de") not in catalog

    def test_skips_files_without_locale(self, locale_files):
        locale_files["locales/README.md"] = "# Locales"
        locale_files["locales/all.x1.yml"] = "greeting: ???"
        catalog = load_catalog(InMemoryContentStore(locale_files), "en-US")
        assert len(catalog) == 2

    def test_invalid_yaml_fails_with_path(self, locale_files):
        """A malformed file aborts loading and names the file."""
        locale_files["locales/all.fr.yml"] = "greeting: [unclosed"
        with pytest.raises(CatalogLoadError, match="locales/all.fr.yml") as exc_info:
            load_catalog(InMemoryContentStore(locale_files), "en-US")
        assert exc_info.value.path == "locales/all.fr.yml"

    def test_non_utf8_file_fails(self, locale_files):
        store = InMemoryContentStore(locale_files)
        store.put("locales/de.yml", b"greeting: \xff\xfe")
        with pytest.raises(CatalogLoadError, match="UTF-8"):
            load_catalog(store, "en-US")

    def test_missing_default_locale(self, locale_store):
        with pytest.raises(ConfigError, match="de"):
            load_catalog(locale_store, "de")

    def test_invalid_default_locale(self, locale_store):
        with pytest.raises(ConfigError, match="Invalid default locale"):
            load_catalog(locale_store, "not a tag")

    def test_empty_directory(self):
        with pytest.raises(ConfigError, match="No locale files"):
            load_catalog(InMemoryContentStore(), "en-US")

    def test_unreadable_store(self):
        with pytest.raises(CatalogLoadError, match="store offline"):
            load_catalog(UnreadableStore(), "en-US")

    def test_accepts_locale_instance(self, locale_store):
        catalog = load_catalog(locale_store, Locale.parse("fr"))
        assert catalog.default_locale == Locale.parse("fr")

    def test_custom_directory(self, locale_files):
        store = InMemoryContentStore(
            {path.replace("locales/", "i18n/"): text for path, text in locale_files.items()}
        )
        catalog = load_catalog(store, "en-US", directory="i18n")
        assert len(catalog) == 2

    def test_loads_from_filesystem(self, temp_locales_dir):
        """load_catalog() works with the file-system content store."""
        catalog = load_catalog(FileSystemContentStore(temp_locales_dir), "en-US")
        fr = catalog.lookup(Locale.parse("fr"))
        assert fr.get("greeting") == "Bonjour à tous !"
        assert fr.get("people").get("other") == "Bonjour, {count} personnes !"


class TestLocaleCatalog:
    """Tests for LocaleCatalog."""

    def test_requires_default_locale(self):
        en = make_message_set("en-US", {"greeting": "Hello"})
        with pytest.raises(ConfigError):
            LocaleCatalog({en.locale: en}, Locale.parse("fr"))

    def test_lookup_is_exact(self, catalog):
        """lookup() does not fall back to the language or the default."""
        assert catalog.lookup(Locale.parse("fr")) is not None
        assert catalog.lookup(Locale.parse("fr-FR")) is None
        assert catalog.lookup(Locale.parse("en")) is None

    def test_default_messages(self, catalog):
        assert catalog.default_messages.locale == Locale.parse("en-US")

    def test_contains_and_iter(self, catalog):
        assert Locale.parse("fr") in catalog
        assert Locale.parse("de") not in catalog
        assert [loc.tag for loc in catalog] == ["en-US", "fr"]
