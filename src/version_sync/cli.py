# SPDX-License-Identifier: MIT
"""Command-line entry point for syncing the extension version."""

from __future__ import annotations

import argparse
from pathlib import Path

import logfire

from .constants import SOURCE_FILE_NAME, TARGET_FILE_NAME
from .observability.monitoring import init_logfire
from .runtime.settings import LogLevel, Settings, load_settings
from .sync import check, sync

LOG_LEVELS: list[LogLevel] = [
    "fatal",
    "error",
    "warn",
    "notice",
    "info",
    "debug",
    "trace",
]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="version-sync",
        description=(
            f"Copy the version from {SOURCE_FILE_NAME} into {TARGET_FILE_NAME}."
        ),
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root containing both files. Defaults to the working directory.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only verify the versions match; exit with status 1 when they differ.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeatable).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Decrease log verbosity (repeatable).",
    )
    return parser


def _configure_logging(args: argparse.Namespace, settings: Settings) -> None:
    """Configure Logfire from settings adjusted by verbosity flags."""
    index = LOG_LEVELS.index(settings.log_level) + args.verbose - args.quiet
    index = max(0, min(len(LOG_LEVELS) - 1, index))
    init_logfire(settings.logfire_token, LOG_LEVELS[index])


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the sync or the check."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args, load_settings())
    root: Path = args.root or Path.cwd()
    try:
        if args.check:
            if not check(root):
                print(f"{TARGET_FILE_NAME} is out of sync with {SOURCE_FILE_NAME}")
                raise SystemExit(1)
            print(f"{TARGET_FILE_NAME} is in sync")
            return
        sync(root)
    finally:
        logfire.force_flush()


if __name__ == "__main__":
    main()
