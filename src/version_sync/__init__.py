# SPDX-License-Identifier: MIT
"""Keep gemini-extension.json in step with the package.json version."""

from .cli import main

__all__ = ["main"]
