"""Fixtures for rendering tests."""

import time

import pytest

from infrastructure.rendering import AssetManifest
from infrastructure.storage import InMemoryContentStore
from tests.factories.rendering import MANIFEST_JSON, make_store

MANIFEST_PATH = "assets/manifest.json"


class SlowContentStore(InMemoryContentStore):
    """In-memory store whose reads take long enough to overlap across threads."""

    def read_file(self, path: str) -> bytes:
        time.sleep(0.05)
        return super().read_file(path)


@pytest.fixture
def manifest_store():
    """Store with a valid asset manifest."""
    return make_store(manifest=MANIFEST_JSON)


@pytest.fixture
def corrupt_store():
    """Store with an unparseable asset manifest."""
    return make_store(manifest="//shdnn Corrupt!")


@pytest.fixture
def manifest(manifest_store) -> AssetManifest:
    return AssetManifest(manifest_store, manifest_path=MANIFEST_PATH)


@pytest.fixture
def slow_store_factory():
    """Build a SlowContentStore holding ``content`` as the manifest."""

    def _factory(content: str) -> SlowContentStore:
        return SlowContentStore({MANIFEST_PATH: content})

    return _factory
