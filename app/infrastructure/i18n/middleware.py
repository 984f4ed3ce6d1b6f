"""Starlette middleware that negotiates the request locale.

For each request the middleware parses the language preferences, asks the
LocaleMatcher for a locale, builds a Translator and stores it on
``request.state.translator``. This is the single point where a locale
becomes visible to the rest of the request pipeline.
"""

import posixpath
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from infrastructure.i18n.context import reset_translator, set_translator
from infrastructure.i18n.loader import LocaleCatalog
from infrastructure.i18n.models import Locale, Preference
from infrastructure.i18n.plurals import PluralRuleRegistry, default_registry
from infrastructure.i18n.resolvers import (
    LocaleMatcher,
    MatchStrategy,
    Negotiation,
    parse_accept_language,
)
from infrastructure.i18n.translator import Translator
from infrastructure.logging import bind_locale, get_module_logger

logger = get_module_logger()

# request.state attribute names
TRANSLATOR_STATE_KEY = "translator"
NEGOTIATION_STATE_KEY = "locale_negotiation"
LOCALIZED_VIEWS_STATE_KEY = "localized_views"


def resolve_localized_view(template_name: str, locale: Locale) -> str:
    """Propose a locale-qualified variant of ``template_name``.

    The locale tag goes before the file extension:
    ``"users/index.html"`` with ``fr`` gives ``"users/index.fr.html"``;
    names without an extension get the tag appended. Existence of the
    proposed template is not checked.
    """
    directory, base = posixpath.split(template_name)
    stem, ext = posixpath.splitext(base)
    return posixpath.join(directory, f"{stem}.{locale.tag}{ext}")


def localized_view_for(request: Request, template_name: str) -> Optional[str]:
    """Localized template proposal for the current request.

    Returns None when localized views are disabled, when the request did
    not pass through the i18n middleware, or when negotiation fell back to
    the default locale (no client preference matched).
    """
    if not getattr(request.state, LOCALIZED_VIEWS_STATE_KEY, False):
        return None
    negotiation: Optional[Negotiation] = getattr(
        request.state, NEGOTIATION_STATE_KEY, None
    )
    if negotiation is None or negotiation.is_fallback:
        return None
    return resolve_localized_view(template_name, negotiation.locale)


class I18nMiddleware(BaseHTTPMiddleware):
    """Attach a Translator for the negotiated locale to every request.

    Attributes:
        catalog: Locale catalog shared by all requests.
        matcher: LocaleMatcher over ``catalog``.
        header_name: Header carrying the client's preferences.
        query_param: Query parameter overriding the header, or None.
        localized_views: Whether views may be swapped for localized variants.
    """

    def __init__(
        self,
        app: ASGIApp,
        catalog: LocaleCatalog,
        plural_rules: Optional[PluralRuleRegistry] = None,
        header_name: str = "Accept-Language",
        query_param: Optional[str] = "lang",
        localized_views: bool = False,
    ):
        super().__init__(app)
        self.catalog = catalog
        self.matcher = LocaleMatcher(catalog)
        self.plural_rules = plural_rules or default_registry()
        self.header_name = header_name
        self.query_param = query_param or None
        self.localized_views = localized_views

    def negotiate(self, request: Request) -> Negotiation:
        """Negotiate the locale for ``request``.

        A query parameter naming a locale the catalog can serve takes
        precedence over the header.
        """
        if self.query_param:
            requested = Locale.try_parse(request.query_params.get(self.query_param, ""))
            if requested is not None:
                negotiation = self.matcher.negotiate((Preference(requested),))
                if not negotiation.is_fallback:
                    return negotiation

        header = request.headers.get(self.header_name)
        return self.matcher.negotiate(parse_accept_language(header))

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        negotiation = self.negotiate(request)
        translator = Translator.for_locale(
            self.catalog, negotiation.locale, self.plural_rules
        )

        setattr(request.state, TRANSLATOR_STATE_KEY, translator)
        setattr(request.state, NEGOTIATION_STATE_KEY, negotiation)
        setattr(request.state, LOCALIZED_VIEWS_STATE_KEY, self.localized_views)
        bind_locale(negotiation.locale.tag)

        token = set_translator(translator)
        try:
            response = await call_next(request)
        finally:
            reset_translator(token)

        if "content-language" not in response.headers:
            response.headers["Content-Language"] = negotiation.locale.tag
        if negotiation.strategy is not MatchStrategy.EXACT:
            logger.debug(
                "locale_not_exactly_matched",
                locale=negotiation.locale.tag,
                strategy=negotiation.strategy.value,
            )
        return response
