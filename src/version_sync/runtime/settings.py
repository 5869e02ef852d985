# SPDX-License-Identifier: MIT
"""Runtime configuration for the version sync tool.

This module exposes :class:`Settings`, a ``pydantic-settings`` model read from
``VERSION_SYNC_*`` environment variables and an optional ``.env`` file. Only
logging behaviour is configurable; the synced file names are fixed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["fatal", "error", "warn", "notice", "info", "debug", "trace"]


class Settings(BaseSettings):
    """Logging configuration sourced from the environment."""

    log_level: LogLevel = Field(
        "warn", description="Minimum level for console log output."
    )
    logfire_token: str | None = Field(
        None, description="Logfire authentication token, if available.", repr=False
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _lower_level(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    model_config = SettingsConfigDict(env_prefix="VERSION_SYNC_", extra="ignore")


def load_settings() -> Settings:
    """Load and validate settings.

    A ``.env`` file in the working directory is read when present; real
    environment variables take precedence over it.

    Raises:
        RuntimeError: If a configured value is invalid.
    """
    env_file_path = Path(".env")
    env_file = env_file_path if env_file_path.exists() else None
    try:
        return Settings(_env_file=env_file)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise RuntimeError(f"Invalid configuration: {details}") from exc
