# SPDX-License-Identifier: MIT
"""Shared fixtures for the version sync tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import logfire
import pytest

from version_sync.constants import SOURCE_FILE_NAME, TARGET_FILE_NAME

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Run each test from an empty directory without ``VERSION_SYNC_*`` vars."""

    for name in ("VERSION_SYNC_LOG_LEVEL", "VERSION_SYNC_LOGFIRE_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def write_json(path: Path, data: Any) -> Path:
    """Write ``data`` the way a hand-edited project file usually looks."""
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Callable[[Any, Any], Path]:
    """Return a factory that populates a project root with both files.

    Passing ``None`` for either record leaves that file absent.
    """

    root = tmp_path / "project"
    root.mkdir()

    def _make(source: Any, target: Any) -> Path:
        if source is not None:
            write_json(root / SOURCE_FILE_NAME, source)
        if target is not None:
            write_json(root / TARGET_FILE_NAME, target)
        return root

    return _make
