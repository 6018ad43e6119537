"""Public domain surface."""

from __future__ import annotations

from fuzzydate.domain.errors import (
    FuzzyDateError,
    FuzzyDateFormatError,
    InvalidCalendarDateError,
    MissingComponentError,
)
from fuzzydate.domain.fuzzy_date import DEFAULT_VALIDATION_YEAR, DateClock, FuzzyDate
from fuzzydate.domain.locale import (
    DEFAULT_LOCALE,
    DateLocale,
    RussianDateLocale,
    available_locales,
    get_locale,
)

__all__ = [  # noqa: RUF022
    # value object
    "FuzzyDate",
    "DateClock",
    "DEFAULT_VALIDATION_YEAR",
    # errors
    "FuzzyDateError",
    "FuzzyDateFormatError",
    "InvalidCalendarDateError",
    "MissingComponentError",
    # locales
    "DEFAULT_LOCALE",
    "DateLocale",
    "RussianDateLocale",
    "available_locales",
    "get_locale",
]
