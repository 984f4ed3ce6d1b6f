"""Fixtures for i18n tests."""

import pytest
import yaml

from infrastructure.i18n import LocaleCatalog, Translator, load_catalog
from infrastructure.storage import InMemoryContentStore
from tests.factories.i18n import make_catalog, make_locale

EN_US_YAML = """\
greeting: "Hello, World!"
greeting_name: "Hello {name}!"
people:
  one: "Hello, alone!"
  other: "Hello, {count} people!"
only_default: "Default only"
welcome:
  title: "Welcome"
  signed_in: "{count} users signed in"
"""

FR_YAML = """\
greeting: "Bonjour à tous !"
greeting_name: "Bonjour {{name}} !"
people:
  one: "Bonjour, tout seul !"
  other: "Bonjour, {count} personnes !"
welcome:
  title: "Bienvenue"
"""


@pytest.fixture
def locale_files():
    """Locale files keyed by store path."""
    return {
        "locales/all.en-US.yml": EN_US_YAML,
        "locales/all.fr.yml": FR_YAML,
    }


@pytest.fixture
def locale_store(locale_files):
    """In-memory content store holding the locale files."""
    return InMemoryContentStore(locale_files)


@pytest.fixture
def loaded_catalog(locale_store) -> LocaleCatalog:
    """Catalog loaded from the in-memory locale files."""
    return load_catalog(locale_store, "en-US")


@pytest.fixture
def catalog() -> LocaleCatalog:
    """Catalog built directly from factories (en-US default, fr)."""
    return make_catalog()


@pytest.fixture
def en_translator(catalog) -> Translator:
    return Translator.for_locale(catalog, make_locale("en-US"))


@pytest.fixture
def fr_translator(catalog) -> Translator:
    return Translator.for_locale(catalog, make_locale("fr"))


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Content root on disk with YAML locale files."""
    locales_dir = tmp_path / "locales"
    locales_dir.mkdir()

    en_data = {
        "greeting": "Hello, World!",
        "people": {"one": "Hello, alone!", "other": "Hello, {count} people!"},
    }
    fr_data = {
        "greeting": "Bonjour à tous !",
        "people": {"one": "Bonjour, tout seul !", "other": "Bonjour, {count} personnes !"},
    }

    with open(locales_dir / "en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_data, f, allow_unicode=True)
    with open(locales_dir / "fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_data, f, allow_unicode=True)

    return tmp_path
