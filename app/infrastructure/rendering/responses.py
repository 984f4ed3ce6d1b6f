"""FastAPI response helpers for server-rendered pages."""

from typing import Any, Mapping, Optional, Sequence

from fastapi import Request
from fastapi.responses import HTMLResponse

from infrastructure.i18n import TRANSLATOR_STATE_KEY, localized_view_for
from infrastructure.rendering.engine import TemplateRenderer


def render_html(
    request: Request,
    renderer: TemplateRenderer,
    name: str,
    data: Optional[Mapping[str, Any]] = None,
    status_code: int = 200,
    suffixes: Optional[Sequence[str]] = None,
) -> HTMLResponse:
    """Render ``name`` for ``request`` and wrap it in an HTMLResponse.

    The request's translator (set by I18nMiddleware) is exposed to the
    template, and the localized variant of ``name`` is tried first when
    localized views are enabled.

    Usage:
        @router.get("/")
        def index(request: Request, renderer: TemplateRendererDep):
            return render_html(request, renderer, "index.html")
    """
    body = renderer.render(
        name,
        data,
        suffixes=suffixes,
        localized_name=localized_view_for(request, name),
        translator=getattr(request.state, TRANSLATOR_STATE_KEY, None),
    )
    return HTMLResponse(content=body, status_code=status_code)
