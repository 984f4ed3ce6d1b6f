"""Tests for infrastructure.i18n.plurals module."""

from decimal import Decimal

import pytest

from infrastructure.i18n import (
    Locale,
    PluralRuleRegistry,
    cldr_rule,
    default_registry,
    one_other,
    zero_or_one,
)

EN = Locale.parse("en-US")
FR = Locale.parse("fr")


class TestRules:
    """Tests for the built-in plural rules."""

    @pytest.mark.parametrize("count,category", [(0, "other"), (1, "one"), (2, "other"), (1.5, "other")])
    def test_one_other(self, count, category):
        assert one_other(EN, count) == category

    @pytest.mark.parametrize(
        "count,category",
        [(0, "one"), (1, "one"), (1.5, "one"), (Decimal("1.9"), "one"), (2, "other"), (5, "other")],
    )
    def test_zero_or_one(self, count, category):
        assert zero_or_one(FR, count) == category

    def test_cldr_rule_uses_babel_data(self):
        ru = Locale.parse("ru")
        assert cldr_rule(ru, 1) == "one"
        assert cldr_rule(ru, 3) == "few"
        assert cldr_rule(ru, 5) == "many"

    def test_cldr_rule_unknown_locale_falls_back(self):
        assert cldr_rule(Locale.parse("xx"), 1) == "one"
        assert cldr_rule(Locale.parse("xx"), 3) == "other"


class TestPluralRuleRegistry:
    """Tests for PluralRuleRegistry."""

    def test_default_rule(self):
        registry = PluralRuleRegistry()
        assert registry.rule_for(Locale.parse("de")) is one_other

    def test_language_rule_applies_to_regions(self):
        registry = PluralRuleRegistry()
        registry.register("fr", zero_or_one)
        assert registry.rule_for(Locale.parse("fr-CA")) is zero_or_one
        assert registry.category(Locale.parse("fr-CA"), 0) == "one"

    def test_exact_tag_beats_language(self):
        registry = PluralRuleRegistry()
        registry.register("pt", one_other)
        registry.register("pt-BR", zero_or_one)
        assert registry.rule_for(Locale.parse("pt-BR")) is zero_or_one
        assert registry.rule_for(Locale.parse("pt-PT")) is one_other

    def test_register_rejects_invalid_tag(self):
        with pytest.raises(ValueError):
            PluralRuleRegistry().register("not a tag", one_other)

    def test_unknown_category_maps_to_other(self):
        registry = PluralRuleRegistry(default=lambda locale, count: "plenty")
        assert registry.category(EN, 3) == "other"

    def test_custom_default(self):
        registry = PluralRuleRegistry(default=cldr_rule)
        assert registry.category(Locale.parse("ru"), 3) == "few"

    def test_default_registry_has_french_rule(self):
        registry = default_registry()
        assert registry.category(FR, 0) == "one"
        assert registry.category(EN, 0) == "other"
