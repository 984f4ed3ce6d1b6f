"""Fixtures for application-level tests."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.storage import FileSystemContentStore, InMemoryContentStore
from server.server import create_app

CONTENT_ROOT = Path(__file__).resolve().parents[3] / "content"

EN_US_LOCALE = 'greeting: "Hello, World!"\n'


@pytest.fixture
def bundled_store():
    """File-system store over the bundled app/content directory."""
    return FileSystemContentStore(CONTENT_ROOT)


@pytest.fixture
def client(bundled_store):
    """Client for the application with default settings."""
    with TestClient(create_app(Settings(), bundled_store)) as test_client:
        yield test_client


@pytest.fixture
def localized_client(bundled_store):
    """Client for the application with localized views enabled."""
    settings = Settings(i18n=I18nSettings(I18N_LOCALIZED_VIEWS=True))
    with TestClient(create_app(settings, bundled_store)) as test_client:
        yield test_client


@pytest.fixture
def memory_client_factory():
    """Build a client over an in-memory store with the given files.

    A minimal en-US locale file is always present.
    """

    def _factory(files):
        store = InMemoryContentStore({"locales/en-US.yml": EN_US_LOCALE, **files})
        return TestClient(create_app(Settings(), store))

    return _factory
