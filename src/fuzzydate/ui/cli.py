# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from fuzzydate.config import ConfigurationError, configure_logging, get_formatting_config
from fuzzydate.domain import FuzzyDate

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import FrameType

    from fuzzydate.domain import DateLocale

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect fuzzy genealogical dates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Render dates in every supported format")
    show.add_argument(
        "dates",
        nargs="+",
        help="Dates in canonical YYYY.MM.DD form, e.g. 1990.05.?? or 199?.??.??",
    )

    age = subparsers.add_parser("age", help="Describe the age elapsed since a date")
    age.add_argument("date", help="Date in canonical YYYY.MM.DD form")
    age.add_argument(
        "--at",
        type=str,
        help="ISO-8601 date (YYYY-MM-DD) to measure the age at (defaults to today)",
    )

    sort = subparsers.add_parser("sort", help="Print dates in canonical order")
    sort.add_argument("dates", nargs="+", help="Dates in canonical YYYY.MM.DD form")
    sort.add_argument(
        "--reverse",
        action="store_true",
        help="Sort in descending order",
    )

    return parser.parse_args(list(argv))


def _parse_iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid ISO date: {value}") from exc


def _today() -> date:
    return date.today()


def _show(raw_dates: Sequence[str], locale: DateLocale) -> None:
    for raw in raw_dates:
        value = FuzzyDate.parse(raw)
        print(f"{value.canonical}\t{value.short_readable_date}\t{value.to_readable(locale)}")


def _age(
    raw: str,
    at: str | None,
    locale: DateLocale,
    *,
    today_provider: Callable[[], date] = _today,
) -> None:
    value = FuzzyDate.parse(raw)
    relative = _parse_iso_date(at) if at else today_provider()
    age = value.get_age(relative, locale=locale)
    if age is None:
        log.info("No age for %s relative to %s", value, relative.isoformat())
        return
    print(age)


def _sort(raw_dates: Sequence[str], *, reverse: bool) -> None:
    values = [FuzzyDate.parse(raw) for raw in raw_dates]
    for value in sorted(values, reverse=reverse):
        print(value)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_formatting_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)

    configure_logging(level=config.log_level)
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "show":
            _show(parsed_args.dates, config.locale)
        elif parsed_args.command == "age":
            _age(parsed_args.date, parsed_args.at, config.locale)
        elif parsed_args.command == "sort":
            _sort(parsed_args.dates, reverse=parsed_args.reverse)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ValueError as exc:
        log.error("Invalid input: %s", exc)  # noqa: TRY400
        sys.exit(2)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
