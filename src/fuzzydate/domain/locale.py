"""Language rules used when rendering fuzzy dates for humans.

Parsing, canonical encoding and ordering never depend on a locale; only the worded
renderings (``readable_date``, ``readable_year``) and age strings do.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable


@runtime_checkable
class DateLocale(Protocol):
    """Formatting strategy for worded dates and ages."""

    @property
    def name(self) -> str: ...

    def month_name(self, month: int, *, with_day: bool) -> str:
        """Return the month name in the case used with (or without) a day number."""
        ...

    def readable_year(self, year: int, *, is_decade: bool) -> str: ...

    def year_separator(self, *, is_decade: bool) -> str:
        """Return the text placed between the month and the year."""
        ...

    def age_word(self, years: int) -> str:
        """Return the word for ``years`` in the grammatically correct plural form."""
        ...


# Index 0 is unused so the month number can be used directly.
RU_MONTHS_NOMINATIVE: Final[tuple[str, ...]] = (
    "",
    "январь",
    "февраль",
    "март",
    "апрель",
    "май",
    "июнь",
    "июль",
    "август",
    "сентябрь",
    "октябрь",
    "ноябрь",
    "декабрь",
)

RU_MONTHS_GENITIVE: Final[tuple[str, ...]] = (
    "",
    "января",
    "февраля",
    "марта",
    "апреля",
    "мая",
    "июня",
    "июля",
    "августа",
    "сентября",
    "октября",
    "ноября",
    "декабря",
)


@dataclass(frozen=True, slots=True)
class RussianDateLocale:
    """Russian rules: genitive month after a day number, ``-е`` decade suffix."""

    name: str = "ru"
    decade_suffix: str = "-е"
    year_one: str = "год"
    year_few: str = "года"
    year_many: str = "лет"

    def month_name(self, month: int, *, with_day: bool) -> str:
        table = RU_MONTHS_GENITIVE if with_day else RU_MONTHS_NOMINATIVE
        return table[month]

    def readable_year(self, year: int, *, is_decade: bool) -> str:
        return f"{year}{self.decade_suffix}" if is_decade else str(year)

    def year_separator(self, *, is_decade: bool) -> str:
        return ", " if is_decade else " "

    def age_word(self, years: int) -> str:
        ones = years % 10
        tens = (years // 10) % 10

        if tens != 1:
            if ones == 1:
                return self.year_one
            if 2 <= ones <= 4:  # noqa: PLR2004
                return self.year_few

        return self.year_many


DEFAULT_LOCALE: Final[DateLocale] = RussianDateLocale()

_LOCALES: Final[dict[str, DateLocale]] = {DEFAULT_LOCALE.name: DEFAULT_LOCALE}


def available_locales() -> tuple[str, ...]:
    return tuple(sorted(_LOCALES))


def get_locale(name: str) -> DateLocale:
    """Look up a registered locale by name (case-insensitive)."""

    key = name.strip().lower()
    try:
        return _LOCALES[key]
    except KeyError:
        known = ", ".join(available_locales())
        raise LookupError(f"Unknown date locale {name!r} (known: {known})") from None


__all__ = [
    "DEFAULT_LOCALE",
    "RU_MONTHS_GENITIVE",
    "RU_MONTHS_NOMINATIVE",
    "DateLocale",
    "RussianDateLocale",
    "available_locales",
    "get_locale",
]
