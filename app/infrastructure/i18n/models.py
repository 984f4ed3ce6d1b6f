"""Data models for the i18n system.

Defines the locale value type, message entries and preference lists used
by the catalog, the matcher and the translator.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

# Counts and amounts accepted by plural rules and formatters
Number = Union[int, float, Decimal]

# CLDR plural category names
PLURAL_CATEGORIES = frozenset({"zero", "one", "two", "few", "many", "other"})

# language[-script][-region][-variant...]; script and variants are dropped
TAG_PATTERN = re.compile(
    r"^(?P<language>[a-z]{2,8})"
    r"(?:-[a-z]{4})?"
    r"(?:-(?P<region>[a-z]{2}|[0-9]{3}))?"
    r"(?:-(?:[a-z0-9]{5,8}|[0-9][a-z0-9]{3}))*$",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class Locale:
    """A parsed language tag with an optional region.

    Tags are normalized once when parsed: ``_`` is accepted as separator,
    the language is lower-cased and the region upper-cased, so ``fr_ca``,
    ``FR-ca`` and ``fr-CA`` are the same Locale. Script and variant
    subtags are accepted but not kept: ``zh-Hant-TW`` parses to ``zh-TW``
    and ``sr-Latn`` to ``sr``.

    Attributes:
        language: Primary language subtag (e.g., "en").
        region: Region subtag (e.g., "US"), or None.
    """

    language: str
    region: Optional[str] = None

    @classmethod
    def parse(cls, tag: str) -> "Locale":
        """Parse a language tag.

        Args:
            tag: Tag in ``language[-script][-region][-variant...]`` form.

        Returns:
            Normalized Locale.

        Raises:
            ValueError: If the tag does not have that shape.
        """
        if not isinstance(tag, str):
            raise ValueError(f"Locale tag must be a string: {tag!r}")

        match = TAG_PATTERN.match(tag.strip().replace("_", "-"))
        if match is None:
            raise ValueError(f"Unsupported locale tag: {tag!r}")

        region = match.group("region")
        return cls(
            language=match.group("language").lower(),
            region=region.upper() if region else None,
        )

    @classmethod
    def try_parse(cls, tag: str) -> Optional["Locale"]:
        """Parse a tag, returning None instead of raising."""
        try:
            return cls.parse(tag)
        except ValueError:
            return None

    @property
    def tag(self) -> str:
        """Normalized tag (e.g., "en-US", "fr")."""
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language

    @property
    def babel_identifier(self) -> str:
        """Identifier in the underscore form Babel expects (e.g., "en_US")."""
        if self.region:
            return f"{self.language}_{self.region}"
        return self.language

    def matches_language(self, other: "Locale") -> bool:
        """Check whether both locales share the primary language subtag."""
        return self.language == other.language

    def __str__(self) -> str:
        return self.tag


@dataclass(frozen=True)
class PluralForms:
    """Plural variants of one message, keyed by plural category.

    Attributes:
        forms: Read-only mapping of category (e.g., "one") to template.
    """

    forms: Mapping[str, str]

    @classmethod
    def from_mapping(cls, forms: Mapping[str, str]) -> "PluralForms":
        """Build PluralForms, rejecting unknown category names.

        Raises:
            ValueError: If a key is not a CLDR plural category or a value
                is not a string.
        """
        unknown = set(forms) - PLURAL_CATEGORIES
        if unknown:
            raise ValueError(f"Unknown plural categories: {sorted(unknown)}")
        for category, template in forms.items():
            if not isinstance(template, str):
                raise ValueError(f"Plural form {category!r} must be a string")
        return cls(forms=MappingProxyType(dict(forms)))

    def get(self, category: str) -> Optional[str]:
        """Template for ``category``, falling back to "other"."""
        template = self.forms.get(category)
        if template is None:
            template = self.forms.get("other")
        return template

    @property
    def categories(self) -> Tuple[str, ...]:
        return tuple(self.forms)


MessageEntry = Union[str, PluralForms]


@dataclass(frozen=True)
class MessageSet:
    """All translation messages for a single locale.

    Keys are flat, dot-separated paths (e.g., "greeting" or "users.title").

    Attributes:
        locale: The Locale these messages belong to.
        messages: Read-only mapping of key to MessageEntry.
        sources: Store paths the messages were loaded from.
    """

    locale: Locale
    messages: Mapping[str, MessageEntry] = field(
        default_factory=lambda: MappingProxyType({})
    )
    sources: Tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        locale: Locale,
        messages: Dict[str, MessageEntry],
        sources: Tuple[str, ...] = (),
    ) -> "MessageSet":
        """Create a MessageSet that owns a read-only copy of ``messages``."""
        return cls(locale=locale, messages=MappingProxyType(dict(messages)), sources=sources)

    def get(self, key: str) -> Optional[MessageEntry]:
        """Retrieve a message entry by key, or None if absent."""
        return self.messages.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)


@dataclass(frozen=True)
class Preference:
    """One entry of a client's language preference list.

    Attributes:
        locale: Requested locale.
        quality: Weight in (0, 1]; zero-weight entries never reach this type.
    """

    locale: Locale
    quality: float = 1.0


PreferenceList = Tuple[Preference, ...]
