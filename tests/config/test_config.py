from __future__ import annotations

import logging

import pytest

from fuzzydate.config import (
    LOCALE_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    ConfigurationError,
    configure_logging,
    get_formatting_config,
    optional_env_var,
)
from fuzzydate.config.logging import LOG_FORMAT
from fuzzydate.domain import DEFAULT_LOCALE


def test_optional_env_var_returns_stripped_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  value ")

    assert optional_env_var("EXAMPLE_VAR") == "value"


def test_optional_env_var_treats_blank_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")
    monkeypatch.delenv("MISSING_VAR", raising=False)

    assert optional_env_var("EXAMPLE_VAR") is None
    assert optional_env_var("MISSING_VAR") is None


def test_formatting_config_defaults() -> None:
    config = get_formatting_config()

    assert config.locale is DEFAULT_LOCALE
    assert config.log_level == logging.INFO


def test_formatting_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOCALE_ENV_VAR, "RU")
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")

    config = get_formatting_config()

    assert config.locale.name == "ru"
    assert config.log_level == logging.DEBUG


def test_formatting_config_rejects_unknown_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOCALE_ENV_VAR, "tlh")

    with pytest.raises(ConfigurationError) as exc:
        get_formatting_config()

    assert LOCALE_ENV_VAR in str(exc.value)
    assert "tlh" in str(exc.value)


def test_formatting_config_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "loud")

    with pytest.raises(ConfigurationError, match=LOG_LEVEL_ENV_VAR):
        get_formatting_config()


def test_configure_logging_applies_configured_level(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")

    configure_logging(level=get_formatting_config().log_level)

    assert captured["level"] == logging.WARNING
    assert captured["format"] == LOG_FORMAT
    assert captured["force"] is False
