"""Logging setup for the ``fuzzydate`` command line."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Attach a stderr handler to the root logger for CLI runs.

    ``level`` normally comes from ``FUZZYDATE_LOG_LEVEL``; the library modules only create
    loggers and never call this. ``force=True`` replaces handlers installed earlier.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
