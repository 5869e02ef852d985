# SPDX-License-Identifier: MIT
"""Tests for configuration loading."""

from pathlib import Path

import pytest

from version_sync.runtime.settings import load_settings


def test_defaults_without_environment() -> None:
    settings = load_settings()
    assert settings.log_level == "warn"
    assert settings.logfire_token is None


def test_reads_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("VERSION_SYNC_LOG_LEVEL", "INFO")
    monkeypatch.setenv("VERSION_SYNC_LOGFIRE_TOKEN", "token")
    settings = load_settings()
    assert settings.log_level == "info"
    assert settings.logfire_token == "token"
    assert "token" not in repr(settings)


def test_reads_env_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("VERSION_SYNC_LOG_LEVEL=debug\n", encoding="utf-8")
    assert load_settings().log_level == "debug"


def test_environment_wins_over_env_file(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("VERSION_SYNC_LOG_LEVEL=debug\n", encoding="utf-8")
    monkeypatch.setenv("VERSION_SYNC_LOG_LEVEL", "error")
    assert load_settings().log_level == "error"


def test_invalid_level_raises_runtime_error(monkeypatch) -> None:
    monkeypatch.setenv("VERSION_SYNC_LOG_LEVEL", "loud")
    with pytest.raises(RuntimeError, match="log_level"):
        load_settings()
