# SPDX-License-Identifier: MIT
"""Helpers for enabling Pydantic Logfire output."""

from __future__ import annotations

import logfire

from ..runtime.settings import LogLevel


def _mask_token(value: str | None) -> str | None:
    """Return a masked representation of ``value`` for safe logging."""

    if not value:
        return None
    return f"{value[:4]}..."


def init_logfire(token: str | None = None, min_log_level: LogLevel = "warn") -> None:
    """Configure Logfire console output.

    Args:
        token: Optional Logfire API token. Without one nothing leaves the
            machine.
        min_log_level: Minimum level printed to the console.
    """

    logfire.configure(
        token=token,
        send_to_logfire="if-token-present",
        service_name="version-sync",
        console=logfire.ConsoleOptions(
            min_log_level=min_log_level,
            show_project_link=False,
        ),
    )
    logfire.debug("Configured logfire", token=_mask_token(token))
