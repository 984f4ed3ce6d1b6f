"""Template rendering - lookup, partials and fingerprinted asset paths.

Main components:
- resolver: TemplateResolver (suffix overrides, localized variants, partials)
- manifest: AssetManifest (lazily loaded, sticky on failure)
- engine: TemplateRenderer (Jinja2 execution glue)
- responses: render_html for FastAPI routes
"""

from infrastructure.rendering.engine import SUFFIXES_DATA_KEY, TemplateRenderer
from infrastructure.rendering.exceptions import (
    ManifestCorruptError,
    RenderingError,
    TemplateNotFoundError,
    TemplateRenderError,
)
from infrastructure.rendering.factory import create_renderer
from infrastructure.rendering.manifest import AssetManifest
from infrastructure.rendering.resolver import TemplateKey, TemplateResolver, with_suffix
from infrastructure.rendering.responses import render_html

__all__ = [
    "AssetManifest",
    "ManifestCorruptError",
    "RenderingError",
    "SUFFIXES_DATA_KEY",
    "TemplateKey",
    "TemplateNotFoundError",
    "TemplateRenderError",
    "TemplateRenderer",
    "TemplateResolver",
    "create_renderer",
    "render_html",
    "with_suffix",
]
