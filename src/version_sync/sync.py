# SPDX-License-Identifier: MIT
"""Copy the project version from ``package.json`` into the extension descriptor."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import logfire

from .constants import SOURCE_FILE_NAME, TARGET_FILE_NAME, VERSION_FIELD
from .records import JsonRecord


@dataclass(frozen=True)
class SyncPlan:
    """Outcome of reading both files, before anything is written."""

    source_version: Any
    previous_version: Any
    target_path: Path
    target: JsonRecord

    @property
    def in_sync(self) -> bool:
        return self.source_version == self.previous_version

    def updated_target(self) -> JsonRecord:
        return self.target.with_field(VERSION_FIELD, self.source_version)


def plan(project_root: Path) -> SyncPlan:
    """Read the source and target files under ``project_root``.

    Both files are loaded and parsed before returning, so any I/O or parse
    failure is raised while the target is still untouched.

    Raises:
        OSError: If either file is missing or unreadable.
        RecordParseError: If either file is not a JSON object.
    """
    source_path = project_root / SOURCE_FILE_NAME
    target_path = project_root / TARGET_FILE_NAME
    source = JsonRecord.load(source_path)
    if VERSION_FIELD not in source:
        logfire.warning(
            "Source has no version field; writing null", path=str(source_path)
        )
    source_version = source.get(VERSION_FIELD)
    target = JsonRecord.load(target_path)
    return SyncPlan(
        source_version=source_version,
        previous_version=target.get(VERSION_FIELD),
        target_path=target_path,
        target=target,
    )


def sync(project_root: Path) -> Any:
    """Write the source version into the target file and return it.

    The target is overwritten in place; every field other than ``version``
    keeps its value and position. Running twice yields identical bytes.
    """
    with logfire.span("version.sync", attributes={"root": str(project_root)}):
        try:
            result = plan(project_root)
        except (OSError, ValueError) as exc:
            logfire.error(f"Unable to read version metadata: {exc}")
            raise
        try:
            result.updated_target().dump(result.target_path)
        except OSError as exc:
            logfire.error(f"Unable to write {result.target_path}: {exc}")
            raise
        logfire.info(
            "Synced version",
            version=result.source_version,
            previous=result.previous_version,
        )
    print(f"Synced {TARGET_FILE_NAME} to v{result.source_version}")
    return result.source_version


def check(project_root: Path) -> bool:
    """Return ``True`` when the target version already matches the source."""
    with logfire.span("version.check", attributes={"root": str(project_root)}):
        result = plan(project_root)
        if not result.in_sync:
            logfire.warning(
                "Version mismatch",
                source=result.source_version,
                target=result.previous_version,
            )
        return result.in_sync


__all__ = ["SyncPlan", "check", "plan", "sync"]
