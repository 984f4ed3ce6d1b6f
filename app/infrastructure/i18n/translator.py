"""Per-request translation facade.

A Translator is bound to one negotiated locale. It looks messages up in
that locale's MessageSet, then in the default locale's, and finally
returns the key itself so a missing translation never fails a render.
"""

import re
from typing import Any, Dict, Mapping, Optional

from infrastructure.i18n.formatting import LocaleFormatter
from infrastructure.i18n.loader import LocaleCatalog
from infrastructure.i18n.models import (
    Locale,
    MessageEntry,
    MessageSet,
    Number,
    PluralForms,
)
from infrastructure.i18n.plurals import PluralRuleRegistry, default_registry
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# {{name}} or {name}
PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}|\{(\w+)\}")

# Reserved interpolation variable for translate_plural
COUNT_VARIABLE = "count"


def interpolate(message: str, variables: Mapping[str, Any]) -> str:
    """Substitute ``{name}`` and ``{{name}}`` placeholders.

    Placeholders without a matching variable are left verbatim.
    """
    if not variables:
        return message

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1) or match.group(2)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, message)


class Translator:
    """Translates message keys for one locale.

    Instances are created per request and never mutated.

    Attributes:
        locale: The negotiated locale.
        fallback_locale: Locale of the fallback messages, if any.
        formatter: Babel-backed formatting helpers for ``locale``.
    """

    def __init__(
        self,
        locale: Locale,
        messages: Optional[MessageSet],
        fallback_messages: Optional[MessageSet] = None,
        plural_rules: Optional[PluralRuleRegistry] = None,
    ):
        """Initialize Translator.

        Args:
            locale: Locale the translator serves.
            messages: Messages for ``locale`` (None if the catalog has none).
            fallback_messages: Default-locale messages consulted on a miss.
            plural_rules: Plural rule registry; the built-in one if omitted.
        """
        self.locale = locale
        self._messages = messages
        self._fallback_messages = (
            fallback_messages if fallback_messages is not messages else None
        )
        self.fallback_locale = (
            self._fallback_messages.locale if self._fallback_messages else None
        )
        self.plural_rules = plural_rules or default_registry()
        self.formatter = LocaleFormatter(locale, self.fallback_locale)

    @classmethod
    def for_locale(
        cls,
        catalog: LocaleCatalog,
        locale: Locale,
        plural_rules: Optional[PluralRuleRegistry] = None,
    ) -> "Translator":
        """Build a Translator for ``locale`` backed by ``catalog``."""
        fallback = None
        if locale != catalog.default_locale:
            fallback = catalog.default_messages
        return cls(
            locale=locale,
            messages=catalog.lookup(locale),
            fallback_messages=fallback,
            plural_rules=plural_rules,
        )

    def current_locale(self) -> Locale:
        return self.locale

    def has(self, key: str) -> bool:
        """Check whether ``key`` resolves without falling back to the key."""
        return self._lookup(key) is not None

    def translate(
        self,
        key: str,
        variables: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        """Translate ``key`` and interpolate variables.

        Plural entries render their "other" form here; use
        translate_plural for count-dependent text.

        Args:
            key: Message key (e.g., "greeting" or "users.title").
            variables: Interpolation variables.
            **kwargs: Extra interpolation variables, convenient in templates.

        Returns:
            The translated text, or ``key`` itself if no locale has it.
        """
        entry = self._lookup(key)
        if entry is None:
            return self._missing(key)

        template = entry.get("other") if isinstance(entry, PluralForms) else entry
        if template is None:
            return self._missing(key)
        return interpolate(template, self._variables(variables, kwargs))

    def translate_plural(
        self,
        key: str,
        count: Number,
        variables: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        """Translate the plural variant of ``key`` matching ``count``.

        The category comes from the locale's plural rule. ``count`` is
        available to the message as ``{count}`` and cannot be overridden by
        ``variables``.

        Returns:
            The translated text, or ``key`` itself if no locale has it.
        """
        category = self.plural_rules.category(self.locale, count)
        template = None
        for message_set in self._message_sets():
            entry = message_set.get(key)
            if entry is None:
                continue
            template = entry.get(category) if isinstance(entry, PluralForms) else entry
            if template is not None:
                break

        if template is None:
            return self._missing(key)

        values = self._variables(variables, kwargs)
        values[COUNT_VARIABLE] = count
        return interpolate(template, values)

    def _message_sets(self):
        for message_set in (self._messages, self._fallback_messages):
            if message_set is not None:
                yield message_set

    def _lookup(self, key: str) -> Optional[MessageEntry]:
        for message_set in self._message_sets():
            entry = message_set.get(key)
            if entry is not None:
                if message_set is self._fallback_messages:
                    logger.debug(
                        "used_fallback_translation",
                        key=key,
                        requested_locale=self.locale.tag,
                        fallback_locale=message_set.locale.tag,
                    )
                return entry
        return None

    def _missing(self, key: str) -> str:
        logger.debug("translation_not_found", key=key, locale=self.locale.tag)
        return key

    @staticmethod
    def _variables(
        variables: Optional[Mapping[str, Any]], kwargs: Dict[str, Any]
    ) -> Dict[str, Any]:
        values = dict(variables or {})
        values.update(kwargs)
        return values
