# SPDX-License-Identifier: MIT
"""Logging setup for the version sync tool."""

from .monitoring import init_logfire

__all__ = ["init_logfire"]
