"""Factory functions for creating i18n components.

Provides convenience functions for building the catalog and installing the
middleware from application settings.
"""

from typing import Optional

from starlette.applications import Starlette

from infrastructure.configuration import I18nSettings
from infrastructure.i18n.loader import LocaleCatalog, load_catalog
from infrastructure.i18n.middleware import I18nMiddleware
from infrastructure.i18n.plurals import PluralRuleRegistry, default_registry
from infrastructure.logging import get_module_logger
from infrastructure.storage import ContentStore

logger = get_module_logger()


def create_catalog(
    store: ContentStore,
    settings: Optional[I18nSettings] = None,
) -> LocaleCatalog:
    """Load the locale catalog described by ``settings``.

    Args:
        store: Content store holding the locale files.
        settings: i18n settings (defaults read from the environment).

    Returns:
        LocaleCatalog: Loaded catalog.

    Raises:
        ConfigError: If the default locale is missing or invalid.
        CatalogLoadError: If a locale file is unreadable or malformed.
    """
    settings = settings or I18nSettings()
    return load_catalog(
        store,
        default_locale=settings.I18N_DEFAULT_LOCALE,
        directory=settings.I18N_LOCALES_DIR,
    )


def install_i18n(
    app: Starlette,
    catalog: LocaleCatalog,
    settings: Optional[I18nSettings] = None,
    plural_rules: Optional[PluralRuleRegistry] = None,
) -> None:
    """Add I18nMiddleware to ``app`` and expose the catalog on ``app.state``.

    Usage:
        catalog = create_catalog(store, settings.i18n)
        install_i18n(app, catalog, settings.i18n)
    """
    settings = settings or I18nSettings()
    app.state.locale_catalog = catalog
    app.add_middleware(
        I18nMiddleware,
        catalog=catalog,
        plural_rules=plural_rules or default_registry(),
        header_name=settings.I18N_LANGUAGE_HEADER,
        query_param=settings.I18N_QUERY_PARAM or None,
        localized_views=settings.I18N_LOCALIZED_VIEWS,
    )
    logger.info(
        "i18n_middleware_installed",
        default_locale=catalog.default_locale.tag,
        localized_views=settings.I18N_LOCALIZED_VIEWS,
    )
