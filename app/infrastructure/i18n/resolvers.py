"""Locale negotiation from client language preferences.

Parses ``Accept-Language`` style headers and picks the best locale the
catalog can serve.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from infrastructure.i18n.loader import LocaleCatalog
from infrastructure.i18n.models import Locale, Preference, PreferenceList
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def _parse_quality(params: Sequence[str]) -> Optional[float]:
    """Quality value from ``;``-separated parameters, None when malformed."""
    quality = 1.0
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        try:
            quality = float(value.strip())
        except ValueError:
            return None
        # Also rejects NaN
        if not 0.0 <= quality <= 1.0:
            return None
    return quality


def parse_accept_language(header: Optional[str]) -> PreferenceList:
    """Parse a weighted language list into preferences.

    ``"fr-CA,fr;q=0.8,en;q=0.5"`` becomes
    ``(fr-CA 1.0, fr 0.8, en 0.5)``.

    Malformed entries, the ``*`` wildcard and ``q=0`` entries are skipped;
    this function never raises. The result is ordered by descending quality,
    entries with equal quality keep their header order.

    Args:
        header: Raw header value, may be None or empty.

    Returns:
        Tuple of Preference.
    """
    if not header:
        return ()

    preferences: List[Preference] = []
    for part in header.split(","):
        tag, *params = part.split(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue

        locale = Locale.try_parse(tag)
        if locale is None:
            continue

        quality = _parse_quality(params)
        if quality is None or quality == 0.0:
            continue

        preferences.append(Preference(locale=locale, quality=quality))

    # sorted() is stable, ties keep header order
    return tuple(sorted(preferences, key=lambda p: p.quality, reverse=True))


class MatchStrategy(str, Enum):
    """How a negotiated locale was found."""

    EXACT = "exact"
    LANGUAGE = "language"
    DEFAULT = "default"


@dataclass(frozen=True)
class Negotiation:
    """Outcome of locale negotiation.

    Attributes:
        locale: Locale to serve.
        strategy: Which matching pass produced it.
        requested: Client preference that matched, None for the default.
    """

    locale: Locale
    strategy: MatchStrategy
    requested: Optional[Locale] = None

    @property
    def is_fallback(self) -> bool:
        return self.strategy is MatchStrategy.DEFAULT


class LocaleMatcher:
    """Picks the best catalog locale for a preference list.

    Matching runs in two explicit passes over the preferences, in order:

    1. exact tag match ("en-US" serves "en-US");
    2. primary-language match against catalog locales ("fr-CA" serves
       "fr", "fr" serves "fr-FR");

    and falls back to the catalog's default locale. An exact match anywhere
    in the list beats a language-only match of a higher-quality entry.
    """

    def __init__(self, catalog: LocaleCatalog):
        self.catalog = catalog
        self.log = logger.bind(default_locale=catalog.default_locale.tag)

    def negotiate(self, preferences: Iterable[Preference]) -> Negotiation:
        """Negotiate a locale and report how it was matched.

        Args:
            preferences: Preferences in descending quality order.

        Returns:
            Negotiation result.
        """
        preferences = tuple(preferences)

        for preference in preferences:
            if preference.locale in self.catalog:
                return self._resolved(
                    Negotiation(preference.locale, MatchStrategy.EXACT, preference.locale)
                )

        for preference in preferences:
            candidate = self._language_match(preference.locale)
            if candidate is not None:
                return self._resolved(
                    Negotiation(candidate, MatchStrategy.LANGUAGE, preference.locale)
                )

        return self._resolved(
            Negotiation(self.catalog.default_locale, MatchStrategy.DEFAULT)
        )

    def match(self, preferences: Iterable[Preference]) -> Locale:
        """Best locale for ``preferences``."""
        return self.negotiate(preferences).locale

    def match_header(self, header: Optional[str]) -> Locale:
        """Parse ``header`` and return the best locale."""
        return self.match(parse_accept_language(header))

    def _language_match(self, requested: Locale) -> Optional[Locale]:
        """Catalog locale sharing the requested primary language.

        A bare-language catalog locale wins, then the default locale, then
        the first one in catalog order.
        """
        candidates = [
            locale
            for locale in self.catalog.available_locales
            if locale.matches_language(requested)
        ]
        if not candidates:
            return None
        for locale in candidates:
            if locale.region is None:
                return locale
        if self.catalog.default_locale in candidates:
            return self.catalog.default_locale
        return candidates[0]

    def _resolved(self, negotiation: Negotiation) -> Negotiation:
        self.log.debug(
            "locale_negotiated",
            locale=negotiation.locale.tag,
            strategy=negotiation.strategy.value,
            requested=negotiation.requested.tag if negotiation.requested else None,
        )
        return negotiation
