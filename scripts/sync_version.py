#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""Sync gemini-extension.json to the version in package.json."""
from __future__ import annotations

from pathlib import Path

from version_sync import cli

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def main() -> None:
    """CLI entrypoint; takes no arguments."""
    cli.main(["--root", str(PROJECT_ROOT)])


if __name__ == "__main__":
    main()
