"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleCatalog, Translator
from infrastructure.rendering import TemplateRenderer
from infrastructure.services.providers import (
    get_locale_catalog,
    get_request_translator,
    get_settings,
    get_template_renderer,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Locale catalog shared by all requests
LocaleCatalogDep = Annotated[LocaleCatalog, Depends(get_locale_catalog)]

# Translator for the negotiated request locale
TranslatorDep = Annotated[Translator, Depends(get_request_translator)]

# Template renderer (resolver + asset manifest + Jinja2)
TemplateRendererDep = Annotated[TemplateRenderer, Depends(get_template_renderer)]

__all__ = [
    "SettingsDep",
    "LocaleCatalogDep",
    "TranslatorDep",
    "TemplateRendererDep",
]
