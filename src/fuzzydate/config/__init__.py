"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .formatting import (
    DEFAULT_LOCALE_NAME,
    LOCALE_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    FormattingConfig,
    get_formatting_config,
)
from .logging import configure_logging

__all__ = [
    "DEFAULT_LOCALE_NAME",
    "LOCALE_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "ConfigurationError",
    "FormattingConfig",
    "configure_logging",
    "get_formatting_config",
    "optional_env_var",
]
