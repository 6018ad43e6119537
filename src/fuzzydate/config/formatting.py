"""Settings for human-readable output."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from fuzzydate.domain.locale import get_locale

from .env import optional_env_var
from .errors import ConfigurationError

if TYPE_CHECKING:
    from fuzzydate.domain.locale import DateLocale

LOCALE_ENV_VAR: Final[str] = "FUZZYDATE_LOCALE"
LOG_LEVEL_ENV_VAR: Final[str] = "FUZZYDATE_LOG_LEVEL"

DEFAULT_LOCALE_NAME: Final[str] = "ru"
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO


@dataclass(frozen=True, slots=True)
class FormattingConfig:
    locale: DateLocale
    log_level: int = DEFAULT_LOG_LEVEL


def _resolve_locale(name: str) -> DateLocale:
    try:
        return get_locale(name)
    except LookupError as exc:
        raise ConfigurationError(f"Invalid {LOCALE_ENV_VAR}: {exc}") from exc


def _resolve_log_level(name: str) -> int:
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ConfigurationError(f"Invalid {LOG_LEVEL_ENV_VAR}: {name!r}")
    return level


def get_formatting_config() -> FormattingConfig:
    locale_name = optional_env_var(LOCALE_ENV_VAR) or DEFAULT_LOCALE_NAME
    level_name = optional_env_var(LOG_LEVEL_ENV_VAR)
    return FormattingConfig(
        locale=_resolve_locale(locale_name),
        log_level=_resolve_log_level(level_name) if level_name else DEFAULT_LOG_LEVEL,
    )
