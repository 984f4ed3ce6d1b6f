from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def _list_configs(settings: Settings, log: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    log.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            log.info("configuration_loaded", config_setting=key, keys=value)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the effective configuration on startup and shutdown events."""
    settings: Settings = app.state.settings
    _list_configs(settings, logger)
    catalog = app.state.locale_catalog
    logger.info(
        "application_startup",
        locales=[locale.tag for locale in catalog.available_locales],
        default_locale=catalog.default_locale.tag,
    )
    yield
    logger.info("application_shutdown")
