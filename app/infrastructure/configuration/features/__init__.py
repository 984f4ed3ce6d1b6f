"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.i18n import I18nSettings
from infrastructure.configuration.features.rendering import RenderingSettings

__all__ = [
    "I18nSettings",
    "RenderingSettings",
]
