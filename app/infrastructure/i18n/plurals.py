"""Plural category selection.

A plural rule maps ``(locale, count)`` to a CLDR plural category name. Rules
are registered per language or per exact tag in a PluralRuleRegistry; the
one/other rule is used when nothing more specific is registered.
"""

from typing import Callable, Dict, Optional

from babel import Locale as BabelLocale
from babel.core import UnknownLocaleError

from infrastructure.i18n.models import PLURAL_CATEGORIES, Locale, Number

PluralRule = Callable[[Locale, Number], str]


def one_other(locale: Locale, count: Number) -> str:
    """English-like rule: exactly one is "one", everything else "other"."""
    return "one" if count == 1 else "other"


def zero_or_one(locale: Locale, count: Number) -> str:
    """French-like rule: zero and one (including fractions below two) are "one"."""
    return "one" if 0 <= abs(count) < 2 else "other"


def cldr_rule(locale: Locale, count: Number) -> str:
    """Rule backed by Babel's CLDR plural data for ``locale``.

    Falls back to one_other for locales Babel does not know.
    """
    try:
        babel_locale = BabelLocale.parse(locale.babel_identifier)
    except (UnknownLocaleError, ValueError):
        return one_other(locale, count)
    return babel_locale.plural_form(count)


class PluralRuleRegistry:
    """Selects the plural rule for a locale.

    Lookup order: exact tag, then primary language, then the default rule.

    Example:
        registry = PluralRuleRegistry()
        registry.register("fr", zero_or_one)
        registry.category(Locale.parse("fr-CA"), 0)  # "one"
    """

    def __init__(self, default: PluralRule = one_other):
        self.default = default
        self._rules: Dict[str, PluralRule] = {}

    def register(self, tag: str, rule: PluralRule) -> None:
        """Register ``rule`` for a language ("fr") or exact tag ("pt-BR").

        Raises:
            ValueError: If ``tag`` does not parse.
        """
        self._rules[Locale.parse(tag).tag] = rule

    def rule_for(self, locale: Locale) -> PluralRule:
        rule: Optional[PluralRule] = self._rules.get(locale.tag)
        if rule is None:
            rule = self._rules.get(locale.language)
        return rule or self.default

    def category(self, locale: Locale, count: Number) -> str:
        """Plural category for ``count``; unknown category names map to "other"."""
        category = self.rule_for(locale)(locale, count)
        return category if category in PLURAL_CATEGORIES else "other"


def default_registry() -> PluralRuleRegistry:
    """Registry with the built-in French rule and the one/other default."""
    registry = PluralRuleRegistry()
    registry.register("fr", zero_or_one)
    return registry
