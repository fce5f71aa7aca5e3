"""Tests for core configuration module."""

import os

import pytest

from dbdump.core.config import Settings, get_settings


def test_settings_defaults() -> None:
    """Test that settings have correct default values."""
    env_vars = [
        "SQLITE_BINARY",
        "COMMAND_TIMEOUT",
        "JSON_INDENT",
        "LOG_LEVEL",
    ]
    old_values = {}
    for var in env_vars:
        old_values[var] = os.environ.pop(var, None)

    try:
        settings = Settings(_env_file=None)  # type: ignore

        assert settings.app_name == "sqlite-json-dump"
        assert settings.sqlite_binary == "sqlite3"
        assert settings.command_timeout is None
        assert settings.json_indent == 4
        assert settings.output_encoding == "utf-8"
        assert settings.ensure_ascii is False
        assert settings.log_level == "WARNING"
    finally:
        for var, value in old_values.items():
            if value is not None:
                os.environ[var] = value


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that environment variables override defaults."""
    monkeypatch.setenv("SQLITE_BINARY", "/opt/sqlite/bin/sqlite3")
    monkeypatch.setenv("COMMAND_TIMEOUT", "2.5")
    monkeypatch.setenv("JSON_INDENT", "2")

    settings = Settings(_env_file=None)  # type: ignore

    assert settings.sqlite_binary == "/opt/sqlite/bin/sqlite3"
    assert settings.command_timeout == 2.5
    assert settings.json_indent == 2


def test_settings_rejects_negative_indent(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test validation of JSON indentation."""
    monkeypatch.setenv("JSON_INDENT", "-1")

    with pytest.raises(ValueError):
        Settings(_env_file=None)  # type: ignore


def test_get_settings_cached() -> None:
    """Test that get_settings returns cached instance."""
    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2
