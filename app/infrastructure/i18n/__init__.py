"""i18n system - locale negotiation, translation and formatting.

Main components:
- models: Locale, MessageSet, PluralForms, Preference
- loader: LocaleCatalog and load_catalog
- resolvers: parse_accept_language and LocaleMatcher
- plurals: plural rules and PluralRuleRegistry
- translator: Translator with fallback, interpolation and pluralization
- middleware: I18nMiddleware and localized view proposals
"""

from infrastructure.i18n.context import current_locale, get_translator
from infrastructure.i18n.exceptions import CatalogLoadError, ConfigError, I18nError
from infrastructure.i18n.factory import create_catalog, install_i18n
from infrastructure.i18n.formatting import LocaleFormatter
from infrastructure.i18n.loader import LocaleCatalog, load_catalog
from infrastructure.i18n.middleware import (
    TRANSLATOR_STATE_KEY,
    I18nMiddleware,
    localized_view_for,
    resolve_localized_view,
)
from infrastructure.i18n.models import (
    Locale,
    MessageSet,
    PluralForms,
    Preference,
)
from infrastructure.i18n.plurals import (
    PluralRuleRegistry,
    cldr_rule,
    default_registry,
    one_other,
    zero_or_one,
)
from infrastructure.i18n.resolvers import (
    LocaleMatcher,
    MatchStrategy,
    Negotiation,
    parse_accept_language,
)
from infrastructure.i18n.translator import Translator

__all__ = [
    "CatalogLoadError",
    "ConfigError",
    "I18nError",
    "I18nMiddleware",
    "Locale",
    "LocaleCatalog",
    "LocaleFormatter",
    "LocaleMatcher",
    "MatchStrategy",
    "MessageSet",
    "Negotiation",
    "PluralForms",
    "PluralRuleRegistry",
    "Preference",
    "TRANSLATOR_STATE_KEY",
    "Translator",
    "cldr_rule",
    "create_catalog",
    "current_locale",
    "default_registry",
    "get_translator",
    "install_i18n",
    "load_catalog",
    "localized_view_for",
    "one_other",
    "parse_accept_language",
    "resolve_localized_view",
    "zero_or_one",
]
