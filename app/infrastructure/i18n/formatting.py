"""Locale-aware number, date and list formatting backed by Babel."""

from datetime import date, datetime, time, tzinfo
from typing import Iterable, Optional, Union

from babel import Locale as BabelLocale
from babel import dates as babel_dates
from babel import lists as babel_lists
from babel import numbers as babel_numbers
from babel.core import UnknownLocaleError

from infrastructure.i18n.models import Locale, Number


def babel_locale_for(locale: Locale, fallback: Optional[Locale] = None) -> BabelLocale:
    """Babel locale for ``locale``, trying ``fallback`` then English."""
    for candidate in (locale, fallback):
        if candidate is None:
            continue
        try:
            return BabelLocale.parse(candidate.babel_identifier)
        except (UnknownLocaleError, ValueError):
            continue
    return BabelLocale.parse("en")


class LocaleFormatter:
    """Formatting helpers bound to one locale.

    Example:
        formatter = LocaleFormatter(Locale.parse("en-US"))
        formatter.format_decimal(1234.5)  # "1,234.5"
    """

    def __init__(self, locale: Locale, fallback: Optional[Locale] = None):
        self.locale = locale
        self.babel_locale = babel_locale_for(locale, fallback)

    def format_number(self, number: Number) -> str:
        """Locale grouping and decimal separator with default precision."""
        return babel_numbers.format_decimal(number, locale=self.babel_locale)

    def format_decimal(self, number: Number, format: Optional[str] = None) -> str:
        return babel_numbers.format_decimal(number, format=format, locale=self.babel_locale)

    def format_percent(self, number: Number, format: Optional[str] = None) -> str:
        return babel_numbers.format_percent(number, format=format, locale=self.babel_locale)

    def format_currency(
        self, number: Number, currency: str, format: Optional[str] = None
    ) -> str:
        return babel_numbers.format_currency(
            number, currency, format=format, locale=self.babel_locale
        )

    def format_date(
        self, value: Optional[Union[date, datetime]] = None, format: str = "medium"
    ) -> str:
        return babel_dates.format_date(value, format=format, locale=self.babel_locale)

    def format_datetime(
        self,
        value: Optional[Union[datetime, time]] = None,
        format: str = "medium",
        tzinfo: Optional[tzinfo] = None,
    ) -> str:
        return babel_dates.format_datetime(
            value, format=format, tzinfo=tzinfo, locale=self.babel_locale
        )

    def format_list(self, items: Iterable[str], style: str = "standard") -> str:
        """Join items the way the locale writes lists ("a, b, and c")."""
        return babel_lists.format_list(list(items), style=style, locale=self.babel_locale)
