"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for configuration and the
content store, plus request-scoped accessors for the components the
application factory publishes on ``app.state``.
"""

from functools import lru_cache

from fastapi import Request

from infrastructure.configuration import Settings
from infrastructure.i18n import TRANSLATOR_STATE_KEY, LocaleCatalog, Translator
from infrastructure.rendering import TemplateRenderer
from infrastructure.storage import ContentStore, FileSystemContentStore


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_content_store() -> ContentStore:
    """
    Get application-scoped content store singleton.

    Returns:
        ContentStore: File-system store rooted at settings.rendering.CONTENT_ROOT.
    """
    return FileSystemContentStore(get_settings().rendering.CONTENT_ROOT)


def get_locale_catalog(request: Request) -> LocaleCatalog:
    """Locale catalog loaded by the application factory."""
    return request.app.state.locale_catalog


def get_template_renderer(request: Request) -> TemplateRenderer:
    """Template renderer built by the application factory."""
    return request.app.state.template_renderer


def get_request_translator(request: Request) -> Translator:
    """
    Translator negotiated for the current request.

    Falls back to a default-locale translator when the request did not pass
    through the i18n middleware.
    """
    translator = getattr(request.state, TRANSLATOR_STATE_KEY, None)
    if translator is None:
        catalog = get_locale_catalog(request)
        translator = Translator.for_locale(catalog, catalog.default_locale)
    return translator
