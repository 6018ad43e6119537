"""Errors raised while building or parsing fuzzy dates."""

from __future__ import annotations


class FuzzyDateError(ValueError):
    """Base class for invalid fuzzy date input."""


class MissingComponentError(FuzzyDateError):
    """Raised when a required date component is absent."""


class InvalidCalendarDateError(FuzzyDateError):
    """Raised when the known components do not form a real calendar date."""


class FuzzyDateFormatError(FuzzyDateError):
    """Raised when text does not follow the ``YYYY.MM.DD`` canonical grammar."""


__all__ = [
    "FuzzyDateError",
    "FuzzyDateFormatError",
    "InvalidCalendarDateError",
    "MissingComponentError",
]
