"""Data models for Dockets.

This module defines the canonical, typed representation of an entry and the
helpers shared by the store and its presentation adapters.

The models are standard-library-only (dataclasses). An EntryCollection is a
plain tuple so that a collection handed to a callback cannot be mutated in
place by the receiver.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Self, Sequence

_ENTRY_KEYS = {"id", "text", "complete"}


def _require_keys(payload: Mapping[str, Any], keys: set[str], *, context: str) -> None:
    missing = keys.difference(payload.keys())
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ValueError(f"Missing required keys in {context}: {missing_str}")


def is_valid_text(text: object) -> bool:
    """
    Return True if `text` is acceptable entry content.

    Parameters
    ----------
    text:
        Candidate entry text.

    Returns
    -------
    bool
        False for non-strings, empty strings and whitespace-only strings.
    """
    return isinstance(text, str) and bool(text.strip())


@dataclass(frozen=True, slots=True)
class Entry:
    """
    One user-visible list item.

    Attributes
    ----------
    id:
        Positive integer, unique within a collection. Never changes.
    text:
        Non-empty, user-editable content.
    complete:
        Completion flag.
    """

    id: int
    text: str
    complete: bool = False

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Self:
        """
        Construct an :class:`Entry` from a decoded JSON object.

        Raises
        ------
        ValueError
            If keys are missing or any field has the wrong type or value.
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"Entry must be an object, got {type(payload).__name__}")
        _require_keys(payload, _ENTRY_KEYS, context="entry")

        entry_id = payload["id"]
        # bool is an int subclass; reject it explicitly.
        if isinstance(entry_id, bool) or not isinstance(entry_id, int) or entry_id < 1:
            raise ValueError(f"Entry id must be a positive integer, got {entry_id!r}")

        text = payload["text"]
        if not is_valid_text(text):
            raise ValueError(f"Entry {entry_id} has empty or non-string text")

        complete = payload["complete"]
        if not isinstance(complete, bool):
            raise ValueError(f"Entry {entry_id} has non-boolean complete flag")

        return cls(id=entry_id, text=text, complete=complete)

    def to_dict(self) -> dict[str, Any]:
        """Convert this entry to a JSON-serializable dict."""
        return {"id": self.id, "text": self.text, "complete": self.complete}


EntryCollection = tuple[Entry, ...]


def next_entry_id(entries: Iterable[Entry]) -> int:
    """
    Allocate the id for a new entry.

    The id is one past the largest id present (1 for an empty collection), so
    ids freed by deletion are never reused while a larger id survives.
    """
    return max((e.id for e in entries), default=0) + 1


def find_entry(entries: Iterable[Entry], entry_id: int) -> Entry | None:
    """Return the entry with `entry_id`, or None."""
    for entry in entries:
        if entry.id == entry_id:
            return entry
    return None


def collection_from_payload(payload: object) -> EntryCollection:
    """
    Parse a decoded JSON array into an EntryCollection.

    Parameters
    ----------
    payload:
        Decoded JSON value, expected to be a list of entry objects.

    Returns
    -------
    EntryCollection
        Entries in stored order.

    Raises
    ------
    ValueError
        If the payload is not a list, an entry is malformed, or ids repeat.
    """
    if not isinstance(payload, list):
        raise ValueError(f"Entry collection must be a list, got {type(payload).__name__}")

    entries: list[Entry] = []
    seen: set[int] = set()
    for item in payload:
        entry = Entry.from_dict(item)
        if entry.id in seen:
            raise ValueError(f"Duplicate entry id: {entry.id}")
        seen.add(entry.id)
        entries.append(entry)
    return tuple(entries)


def collection_to_payload(entries: Sequence[Entry]) -> list[dict[str, Any]]:
    """Convert entries to a JSON-serializable list, preserving order."""
    return [e.to_dict() for e in entries]
