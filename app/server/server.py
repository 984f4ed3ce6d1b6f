from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from api.router import api_router
from infrastructure.configuration import Settings
from infrastructure.i18n import create_catalog, install_i18n
from infrastructure.logging import get_module_logger
from infrastructure.rendering import (
    RenderingError,
    TemplateNotFoundError,
    create_renderer,
)
from infrastructure.services import get_content_store, get_settings
from infrastructure.storage import ContentStore, FileSystemContentStore
from server.lifespan import lifespan
from server.middleware import RequestContextMiddleware

logger = get_module_logger()


async def rendering_error_handler(request: Request, exc: RenderingError):
    """Report a failed render as a 500 instead of an empty page."""
    logger.error(
        "render_failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    if isinstance(exc, TemplateNotFoundError):
        message = f"Template not found: {exc.name}"
    else:
        message = "Template rendering failed"
    return PlainTextResponse(message, status_code=500)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ContentStore] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Loads the locale catalog (failing fast on configuration or locale file
    errors), builds the template renderer and installs the middleware stack.

    Args:
        settings: Settings to use, the process-wide singleton when omitted.
        store: Content store for templates, locales and assets. Defaults to
            the file-system store rooted at settings.rendering.CONTENT_ROOT.
    """
    if settings is None:
        settings = get_settings()
        store = store or get_content_store()
    store = store or FileSystemContentStore(settings.rendering.CONTENT_ROOT)

    catalog = create_catalog(store, settings.i18n)
    renderer = create_renderer(store, settings.rendering)

    handler = FastAPI(lifespan=lifespan)
    handler.state.settings = settings
    handler.state.template_renderer = renderer

    install_i18n(handler, catalog, settings.i18n)
    handler.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_production else settings.server.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it wraps everything else
    handler.add_middleware(RequestContextMiddleware)

    handler.add_exception_handler(RenderingError, rendering_error_handler)
    handler.include_router(api_router)
    return handler
