"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    LocaleCatalogDep,
    SettingsDep,
    TemplateRendererDep,
    TranslatorDep,
)
from infrastructure.services.providers import (
    get_content_store,
    get_locale_catalog,
    get_request_translator,
    get_settings,
    get_template_renderer,
)

__all__ = [
    "SettingsDep",
    "LocaleCatalogDep",
    "TranslatorDep",
    "TemplateRendererDep",
    "get_settings",
    "get_content_store",
    "get_locale_catalog",
    "get_request_translator",
    "get_template_renderer",
]
