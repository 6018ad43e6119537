"""Fuzzy date value object: a calendar date with possibly unknown parts.

The canonical text form is ``YYYY.MM.DD`` where any group may be replaced by question
marks (``????.05.15``, ``1990.??.??``). A year written as three digits followed by ``?``
(``199?``) denotes a whole decade. The canonical string is the identity of the value: it
drives equality, hashing and ordering, and it is what adapters persist.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from functools import cached_property
from typing import TYPE_CHECKING, Final, Protocol

from fuzzydate.domain.errors import (
    FuzzyDateError,
    FuzzyDateFormatError,
    InvalidCalendarDateError,
    MissingComponentError,
)
from fuzzydate.domain.locale import DEFAULT_LOCALE

if TYPE_CHECKING:
    from fuzzydate.domain.locale import DateLocale

log = logging.getLogger(__name__)

# Leap year, so 29 February is accepted when the real year is unknown.
DEFAULT_VALIDATION_YEAR: Final[int] = 2000

UNKNOWN_YEAR: Final[str] = "????"
UNKNOWN_PART: Final[str] = "??"

_CANONICAL_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<year>[0-9]{4}|[0-9]{3}\?|\?{4})\.(?P<month>[0-9]{2}|\?\?)\.(?P<day>[0-9]{2}|\?\?)",
    re.ASCII,
)


class DateClock(Protocol):
    def __call__(self) -> date: ...


def _today() -> date:
    return date.today()


def _parse_group(raw: str) -> int | None:
    if set(raw) == {"?"}:
        return None
    return int(raw)


@dataclass(frozen=True, eq=False)
class FuzzyDate:
    """A (possibly partial) calendar date, optionally known only to the decade.

    ``year`` holds the decade's base year (``1990``) when ``is_decade`` is set. At least one
    component must be known, and a day requires a month. Month and day are validated against
    ``year``, or against the leap year 2000 when the year is unknown.

    Derived strings are memoized on first access; they only depend on the frozen fields, so
    concurrent first access merely computes the same value twice.
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None
    is_decade: bool = False

    def __post_init__(self) -> None:
        if self.year is None and self.month is None and self.day is None:
            raise MissingComponentError("At least one of the date components must be specified")

        if self.day is not None and self.month is None:
            raise MissingComponentError("When day is specified, month must also be specified")

        if self.is_decade:
            if self.year is None:
                raise MissingComponentError("A decade date requires a year")
            if self.year % 10:
                raise InvalidCalendarDateError(
                    f"Decade year must be a multiple of ten, got {self.year}"
                )

        try:
            date(
                self.year if self.year is not None else DEFAULT_VALIDATION_YEAR,
                self.month if self.month is not None else 1,
                self.day if self.day is not None else 1,
            )
        except ValueError as exc:
            raise InvalidCalendarDateError(
                f"Invalid date components: year={self.year}, month={self.month}, day={self.day}"
            ) from exc

    # Construction ----------------------------------------------------------------------------

    @classmethod
    def from_date(cls, value: date) -> FuzzyDate:
        """Build a fully specified fuzzy date from a concrete date."""

        return cls(value.year, value.month, value.day)

    @classmethod
    def parse(cls, raw: str) -> FuzzyDate:
        """Parse a canonical ``YYYY.MM.DD`` string.

        Raises ``FuzzyDateFormatError`` when the text does not match the grammar and the
        usual construction errors when it matches but describes an impossible date.
        """

        if not raw:
            raise FuzzyDateFormatError("Date string must not be empty")

        match = _CANONICAL_RE.fullmatch(raw)
        if match is None:
            raise FuzzyDateFormatError(f"Date string was not in correct format: {raw!r}")

        year_group = match.group("year")
        month = _parse_group(match.group("month"))
        day = _parse_group(match.group("day"))

        if year_group == UNKNOWN_YEAR:
            return cls(None, month, day)
        if year_group.endswith("?"):
            # 199? -> 1990
            return cls(int(year_group[:3]) * 10, month, day, is_decade=True)
        return cls(int(year_group), month, day)

    @classmethod
    def try_parse(cls, raw: str | None) -> FuzzyDate | None:
        """Parse ``raw``, returning ``None`` instead of raising on any invalid input."""

        if not raw:
            return None
        try:
            return cls.parse(raw)
        except FuzzyDateError as exc:
            log.debug("Ignoring invalid fuzzy date %r: %s", raw, exc)
            return None

    # Derived values --------------------------------------------------------------------------

    @cached_property
    def canonical(self) -> str:
        if self.year is None:
            year = UNKNOWN_YEAR
        elif self.is_decade:
            year = f"{self.year // 10:03d}?"
        else:
            year = f"{self.year:04d}"

        month = UNKNOWN_PART if self.month is None else f"{self.month:02d}"
        day = UNKNOWN_PART if self.day is None else f"{self.day:02d}"
        return f"{year}.{month}.{day}"

    @cached_property
    def short_readable_date(self) -> str:
        """Numeric ``DD/MM/YYYY`` form, leaving out unknown leading parts."""

        parts: list[str] = []
        if self.day is not None:
            parts.append(f"{self.day:02d}")
        if self.month is not None:
            parts.append(f"{self.month:02d}")

        if self.year is None:
            parts.append(UNKNOWN_YEAR)
        elif self.is_decade:
            parts.append(f"{self.year // 10}?")
        else:
            parts.append(str(self.year))

        return "/".join(parts)

    @cached_property
    def readable_date(self) -> str:
        return self.to_readable(DEFAULT_LOCALE)

    @property
    def readable_year(self) -> str | None:
        if self.year is None:
            return None
        return DEFAULT_LOCALE.readable_year(self.year, is_decade=self.is_decade)

    @property
    def as_full_date(self) -> date | None:
        """Day and month as a concrete date, e.g. for anniversary lookups.

        An unknown year is replaced by the current one. ``None`` is returned when day or
        month is unknown, or for 29 February of an unknown year when the current year has
        no such day.
        """

        if self.month is None or self.day is None:
            return None

        year = self.year if self.year is not None else _today().year
        try:
            return date(year, self.month, self.day)
        except ValueError:
            return None

    def to_readable(self, locale: DateLocale) -> str:
        """Render the worded form (``15 мая 2000``, ``май, 1990-е``) using ``locale``."""

        text = ""
        if self.day is not None:
            text += f"{self.day} "

        if self.month is not None:
            text += locale.month_name(self.month, with_day=self.day is not None)

        if self.year is not None:
            if self.month is not None:
                text += locale.year_separator(is_decade=self.is_decade)
            text += locale.readable_year(self.year, is_decade=self.is_decade)

        return text

    def get_age(
        self,
        relative: date | None = None,
        *,
        clock: DateClock | None = None,
        locale: DateLocale | None = None,
    ) -> str | None:
        """Describe the number of full years elapsed since this date.

        Returns ``None`` when the year is unknown or not strictly before ``relative``'s
        year. Uncertain results are rendered as a range (``19..30 лет``).
        """

        now = relative if relative is not None else (clock or _today)()
        words = locale or DEFAULT_LOCALE

        if self.year is None or now.year <= self.year:
            return None

        years = now.year - self.year - 1

        if self.is_decade:
            return f"{years - 10}..{years + 1} {words.age_word(years + 1)}"

        if self.month is not None and now.month == self.month and self.day is None:
            return f"{years}..{years + 1} {words.age_word(years + 1)}"

        # birthday already passed this year
        if self.month is not None and (
            now.month > self.month
            or (now.month == self.month and self.day is not None and now.day > self.day)
        ):
            years += 1

        return f"{years} {words.age_word(years)}"

    # Identity --------------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.canonical

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self.canonical == other.canonical

    def __hash__(self) -> int:
        return hash(self.canonical)

    # Comparisons against None are always false rather than an error.

    def __lt__(self, other: object) -> bool:
        if other is None:
            return False
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self.canonical < other.canonical

    def __le__(self, other: object) -> bool:
        if other is None:
            return False
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self.canonical <= other.canonical

    def __gt__(self, other: object) -> bool:
        if other is None:
            return False
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self.canonical > other.canonical

    def __ge__(self, other: object) -> bool:
        if other is None:
            return False
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self.canonical >= other.canonical


__all__ = [
    "DEFAULT_VALIDATION_YEAR",
    "DateClock",
    "FuzzyDate",
]
