# SPDX-License-Identifier: MIT
"""Project-wide constants.

This module centralises small constants that are imported across the
application. Keep this file minimal and free of side effects.
"""

from __future__ import annotations

SOURCE_FILE_NAME = "package.json"
TARGET_FILE_NAME = "gemini-extension.json"
VERSION_FIELD = "version"

__all__ = [
    "SOURCE_FILE_NAME",
    "TARGET_FILE_NAME",
    "VERSION_FIELD",
]
