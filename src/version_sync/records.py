# SPDX-License-Identifier: MIT
"""Ordered JSON object records backed by ``pydantic_core``.

A :class:`JsonRecord` wraps the top-level object of a JSON file. Updates go
through :meth:`JsonRecord.with_field`, which replaces a single value and keeps
every other key in place, so rewriting a file never reorders or drops fields.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import logfire
from pydantic_core import from_json, to_json

JSON_INDENT = 2


class RecordParseError(ValueError):
    """Raised when a file does not contain a JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class JsonRecord(Mapping[str, Any]):
    """Immutable, insertion-ordered view of a JSON object."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    @classmethod
    def loads(cls, text: str | bytes, *, path: Path | None = None) -> JsonRecord:
        """Parse ``text`` into a record.

        Args:
            text: JSON document whose top level must be an object.
            path: Optional source location used in error messages.

        Raises:
            RecordParseError: If ``text`` is malformed or not an object.
        """
        origin = path or Path("<string>")
        try:
            data = from_json(text)
        except ValueError as exc:
            raise RecordParseError(origin, f"invalid JSON ({exc})") from exc
        if not isinstance(data, dict):
            raise RecordParseError(
                origin, f"expected a JSON object, got {type(data).__name__}"
            )
        return cls(data)

    @classmethod
    def load(cls, path: Path) -> JsonRecord:
        """Read and parse the JSON object stored at ``path``.

        Raises:
            OSError: If the file is missing or unreadable.
            RecordParseError: If the contents are not a JSON object.
        """
        with logfire.span("record.load", attributes={"path": str(path)}):
            raw = path.read_bytes()
            record = cls.loads(raw, path=path)
            logfire.debug("Loaded record", path=str(path), keys=len(record))
            return record

    def with_field(self, key: str, value: Any) -> JsonRecord:
        """Return a copy with ``key`` set to ``value``.

        Existing keys keep their position; a new key is appended last.
        """
        data = dict(self._data)
        data[key] = value
        return type(self)(data)

    def dumps(self) -> str:
        """Serialise with two-space indentation and a trailing newline."""
        return to_json(self._data, indent=JSON_INDENT).decode("utf-8") + "\n"

    def dump(self, path: Path) -> None:
        """Overwrite ``path`` with the serialised record."""
        with logfire.span("record.dump", attributes={"path": str(path)}):
            text = self.dumps()
            with path.open("w", encoding="utf-8", newline="\n") as fh:
                fh.write(text)
            logfire.debug("Wrote record", path=str(path), chars=len(text))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


__all__ = ["JSON_INDENT", "JsonRecord", "RecordParseError"]
