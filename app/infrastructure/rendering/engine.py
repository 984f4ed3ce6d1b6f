"""Template execution with Jinja2.

The TemplateRenderer decides which template string and which data reach
Jinja2. While a template executes, ``partial(...)`` calls are resolved
through the TemplateResolver and ``asset_path(...)`` calls through the
AssetManifest.
"""

from functools import lru_cache
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from jinja2 import Environment, Template, TemplateError, select_autoescape
from markupsafe import Markup

from infrastructure.i18n import Translator
from infrastructure.logging import get_module_logger
from infrastructure.rendering.exceptions import TemplateRenderError
from infrastructure.rendering.manifest import AssetManifest
from infrastructure.rendering.resolver import TemplateResolver

logger = get_module_logger()

# Render data key holding per-request suffix overrides
SUFFIXES_DATA_KEY = "template_suffixes"

MAX_PARTIAL_DEPTH = 16


class TemplateRenderer:
    """Renders templates resolved from the content store.

    Attributes:
        resolver: Template and partial lookup.
        assets: Asset manifest used by ``asset_path``.
        env: Jinja2 environment executing the template strings.
    """

    def __init__(
        self,
        resolver: TemplateResolver,
        assets: Optional[AssetManifest] = None,
        cache_size: int = 256,
    ):
        self.resolver = resolver
        self.assets = assets or AssetManifest(resolver.store, manifest_path=None)
        self.env = Environment(
            autoescape=select_autoescape(default_for_string=True, default=True),
            keep_trailing_newline=True,
        )
        self._compile: Callable[[str], Template] = lru_cache(maxsize=cache_size)(
            self.env.from_string
        )

    def render(
        self,
        name: str,
        data: Optional[Mapping[str, Any]] = None,
        suffixes: Optional[Sequence[str]] = None,
        localized_name: Optional[str] = None,
        translator: Optional[Translator] = None,
    ) -> str:
        """Render template ``name`` with ``data``.

        Args:
            name: Template name relative to the templates directory.
            data: Template variables.
            suffixes: Suffix candidates; read from
                ``data["template_suffixes"]`` when omitted.
            localized_name: Localized variant to try before ``name``.
            translator: Request translator; exposes ``t``, ``tp`` and the
                formatting helpers to the template.

        Returns:
            Rendered output.

        Raises:
            TemplateNotFoundError: If the template or a partial is missing.
            ManifestCorruptError: If an asset lookup hits a corrupt manifest.
            TemplateRenderError: If Jinja2 fails to compile or run the template.
        """
        data = dict(data or {})
        if suffixes is None:
            suffixes = data.get(SUFFIXES_DATA_KEY) or ()
        if isinstance(suffixes, str):
            suffixes = (suffixes,)

        resolved_name, content = self.resolver.find(name, suffixes, localized_name)
        return self._execute(resolved_name, content, data, translator, depth=0)

    def _execute(
        self,
        name: str,
        content: str,
        data: Dict[str, Any],
        translator: Optional[Translator],
        depth: int,
    ) -> str:
        try:
            template = self._compile(content)
            return template.render(self._context(data, translator, depth))
        except TemplateError as e:
            logger.error("template_render_failed", template=name, error=str(e))
            raise TemplateRenderError(name, str(e)) from e

    def _context(
        self,
        data: Dict[str, Any],
        translator: Optional[Translator],
        depth: int,
    ) -> Dict[str, Any]:
        def partial(reference: str, **extra: Any) -> Markup:
            if depth >= MAX_PARTIAL_DEPTH:
                raise TemplateRenderError(
                    reference, f"partials nested deeper than {MAX_PARTIAL_DEPTH}"
                )
            resolved_name, content = self.resolver.find_partial(reference)
            sub_data = {**data, **extra}
            return Markup(
                self._execute(resolved_name, content, sub_data, translator, depth + 1)
            )

        helpers: Dict[str, Any] = {
            "partial": partial,
            "asset_path": self.assets.asset_path,
        }
        if translator is not None:
            formatter = translator.formatter
            helpers.update(
                t=translator.translate,
                tp=translator.translate_plural,
                current_locale=translator.current_locale,
                format_number=formatter.format_number,
                format_decimal=formatter.format_decimal,
                format_percent=formatter.format_percent,
                format_currency=formatter.format_currency,
                format_date=formatter.format_date,
                format_datetime=formatter.format_datetime,
                format_list=formatter.format_list,
            )
        return {**data, **helpers}
