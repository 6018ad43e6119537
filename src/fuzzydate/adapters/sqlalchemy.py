"""SQLAlchemy column type storing fuzzy dates as canonical strings."""

from __future__ import annotations

import logging
from typing import Final

from sqlalchemy import Dialect, String, TypeDecorator

from fuzzydate.domain.fuzzy_date import FuzzyDate

log = logging.getLogger(__name__)

CANONICAL_LENGTH: Final[int] = len("YYYY.MM.DD")


class FuzzyDateType(TypeDecorator[FuzzyDate]):
    """Persist ``FuzzyDate`` in a ``VARCHAR(10)`` column.

    The stored text is the canonical form, so ``ORDER BY`` on the column sorts rows the same
    way Python sorts the values.
    """

    impl = String(CANONICAL_LENGTH)
    cache_ok = True

    def process_bind_param(self, value: FuzzyDate | str | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        if isinstance(value, str):
            # literal filters such as ``column == "1990.??.??"``
            return FuzzyDate.parse(value).canonical
        return value.canonical

    def process_result_value(self, value: str | None, dialect: Dialect) -> FuzzyDate | None:
        _ = dialect
        if value is None:
            return None
        try:
            return FuzzyDate.parse(value)
        except ValueError:
            log.exception("Stored fuzzy date %r is not in canonical form", value)
            raise


__all__ = ["FuzzyDateType"]
