"""Enumerations for localechain type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they can be passed anywhere a
plain category or type name is expected.

Python 3.13+.
"""

from enum import StrEnum


class AdapterType(StrEnum):
    """Kind of locale data a metadata source describes.

    StrEnum provides automatic string conversion: str(AdapterType.CLDR) == "CLDR"
    """

    CLDR = "CLDR"
    """Unicode CLDR locale data."""

    COMPAT = "COMPAT"
    """Legacy, pre-CLDR locale data."""


class LocaleCategory(StrEnum):
    """Named partitions of locale-tag data supplied by metadata sources.

    Categories are opaque identifiers agreed with the metadata source.
    Sources may answer for names outside this enumeration as well.
    """

    AVAILABLE_LOCALES = "AvailableLocales"
    """Every locale with any data at all."""

    FORMAT_DATA = "FormatData"
    """Locales with number and date formatting data."""

    CURRENCY_NAMES = "CurrencyNames"
    """Locales with localized currency names."""

    LOCALE_NAMES = "LocaleNames"
    """Locales with localized language and territory names."""

    TIME_ZONE_NAMES = "TimeZoneNames"
    """Locales with localized time zone names."""

    CALENDAR_DATA = "CalendarData"
    """Locales with calendar data (first day of week, etc.)."""


class ProviderService(StrEnum):
    """Locale-sensitive services a provider adapter may supply."""

    BREAK_ITERATOR = "BreakIterator"
    COLLATOR = "Collator"
    DATE_FORMAT = "DateFormat"
    DECIMAL_FORMAT = "DecimalFormat"
    CURRENCY_NAME = "CurrencyName"
    LOCALE_NAME = "LocaleName"
    TIME_ZONE_NAME = "TimeZoneName"
    CALENDAR_DATA = "CalendarData"


__all__ = [
    "AdapterType",
    "LocaleCategory",
    "ProviderService",
]
