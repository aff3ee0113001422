"""
Key-value storage media for Dockets.

The EntryStore persists through a minimal synchronous, string-keyed store with
`get` and `set`. This module defines that surface and ships two media:

- MemoryKeyValueStore: process-local dict, for tests and embedding.
- JsonFileKeyValueStore: one JSON object file on disk.

Design constraints
------------------
- File writes are atomic (temp file + replace); a reader never observes a
  partially written file.
- Values are opaque strings; this module does not know about entries.
- No locking: concurrent processes sharing a file get last-writer-wins.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from .errors import PersistenceFailure, StorageReadError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Synchronous string-keyed storage used by the EntryStore."""

    def get(self, key: str) -> str | None:
        """
        Return the value stored under `key`.

        Returns
        -------
        str | None
            Stored value, or None when the key is absent.

        Raises
        ------
        StorageReadError
            If the medium exists but cannot be read.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """
        Store `value` under `key`, replacing any previous value.

        Raises
        ------
        PersistenceFailure
            If the value could not be durably written.
        """
        ...


@dataclass(slots=True)
class MemoryKeyValueStore:
    """Dict-backed KeyValueStore."""

    data: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        """See KeyValueStore.get."""
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        """See KeyValueStore.set."""
        self.data[key] = value


@dataclass(frozen=True, slots=True)
class JsonFileKeyValueStore:
    """
    KeyValueStore backed by a single JSON object file.

    Parameters
    ----------
    path:
        File holding a JSON object that maps keys to string values. The file
        and its parent directory are created on first write.
    """

    path: Path

    def _read_mapping(self) -> dict[str, Any] | None:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageReadError(f"Failed to read store: {self.path}") from exc
        except UnicodeDecodeError as exc:
            raise StorageReadError(f"Store is not valid UTF-8: {self.path}") from exc

        try:
            payload = json.loads(text)
        except (ValueError, RecursionError) as exc:
            # json.JSONDecodeError is a ValueError subclass.
            raise StorageReadError(f"Invalid JSON in store: {self.path}") from exc

        if not isinstance(payload, dict):
            raise StorageReadError(f"Store root must be a JSON object: {self.path}")
        # Non-string values are kept so that set() writes them back untouched.
        return payload

    def get(self, key: str) -> str | None:
        """See KeyValueStore.get."""
        mapping = self._read_mapping()
        if mapping is None:
            return None
        value = mapping.get(key)
        if value is not None and not isinstance(value, str):
            logger.warning("Ignoring non-string value under %r in %s", key, self.path)
            return None
        return value

    def set(self, key: str, value: str) -> None:
        """See KeyValueStore.set."""
        try:
            mapping = self._read_mapping() or {}
        except StorageReadError:
            logger.warning("Replacing unreadable store file %s", self.path)
            mapping = {}
        mapping[key] = value
        _write_json_atomic(self.path, mapping)


def _write_json_atomic(json_path: Path, payload: dict[str, Any]) -> None:
    json_path = json_path.expanduser()
    temp_path = json_path.with_suffix(json_path.suffix + ".tmp")

    try:
        json_path.parent.mkdir(parents=True, exist_ok=True)
        with temp_path.open("w", encoding="utf-8", newline="\n") as handle:
            json.dump(payload, handle, indent=2, sort_keys=True, ensure_ascii=False)
            handle.write("\n")
        os.replace(temp_path, json_path)
    except OSError as exc:
        try:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
        except OSError:
            pass
        raise PersistenceFailure(f"Failed to write store: {json_path} ({exc!s})") from exc
