"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
application using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale negotiation settings class
    RenderingSettings: Template and asset settings class
    ServerSettings: Server runtime settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    locales_dir = settings.i18n.I18N_LOCALES_DIR
    templates_dir = settings.rendering.TEMPLATES_DIR
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features import I18nSettings, RenderingSettings
from infrastructure.configuration.infrastructure import ServerSettings

__all__ = ["Settings", "I18nSettings", "RenderingSettings", "ServerSettings"]
