"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_locale,
    make_message_set,
    make_preferences,
)
from tests.factories.rendering import make_renderer, make_store

__all__ = [
    "make_catalog",
    "make_locale",
    "make_message_set",
    "make_preferences",
    "make_renderer",
    "make_store",
]
