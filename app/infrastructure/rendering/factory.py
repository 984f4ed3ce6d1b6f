"""Factory functions for creating rendering components."""

from typing import Optional

from infrastructure.configuration import RenderingSettings
from infrastructure.logging import get_module_logger
from infrastructure.rendering.engine import TemplateRenderer
from infrastructure.rendering.manifest import AssetManifest
from infrastructure.rendering.resolver import TemplateResolver
from infrastructure.storage import ContentStore

logger = get_module_logger()


def create_renderer(
    store: ContentStore,
    settings: Optional[RenderingSettings] = None,
) -> TemplateRenderer:
    """Create a TemplateRenderer wired to ``store``.

    Args:
        store: Content store holding templates and the asset manifest.
        settings: Rendering settings (defaults read from the environment).

    Returns:
        TemplateRenderer: Renderer with resolver and asset manifest.
    """
    settings = settings or RenderingSettings()
    resolver = TemplateResolver(
        store,
        templates_dir=settings.TEMPLATES_DIR,
        partial_extension=settings.PARTIAL_EXTENSION,
    )
    assets = AssetManifest(
        store,
        manifest_path=settings.manifest_path,
        prefix=settings.ASSET_PREFIX,
    )
    logger.info(
        "renderer_created",
        templates_dir=settings.TEMPLATES_DIR,
        manifest=settings.manifest_path,
    )
    return TemplateRenderer(resolver, assets)
