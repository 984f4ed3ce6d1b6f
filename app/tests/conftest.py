"""Shared pytest configuration.

Application packages are importable through the ``pythonpath`` setting in
pyproject.toml, so no sys.path manipulation is needed here.
"""

import pytest
import structlog

from infrastructure.services import get_content_store, get_settings


@pytest.fixture(autouse=True)
def clean_logging_context():
    """Keep structlog context variables from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def reset_singletons():
    """Clear cached settings and content store singletons."""
    get_settings.cache_clear()
    get_content_store.cache_clear()
    yield
    get_settings.cache_clear()
    get_content_store.cache_clear()
