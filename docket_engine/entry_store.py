"""
EntryStore: sole owner of the entry collection.

The store is the only component that mutates entries, the only writer to
persistent storage, and the only producer of change notifications.

Mutation protocol
-----------------
Every operation runs validate -> build new collection -> persist -> swap ->
notify. A rejected request (invalid text, unknown id) stops at validation: no
write, no notification. A failed write raises PersistenceFailure before the
swap, so observers are never told about state that was not saved.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import Callable, Final

from .data_models import (
    Entry,
    EntryCollection,
    collection_from_payload,
    collection_to_payload,
    find_entry,
    is_valid_text,
    next_entry_id,
)
from .errors import StorageReadError
from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY: Final[str] = "dockets"

ChangeCallback = Callable[[EntryCollection], None]


class EntryStore:
    """
    Authoritative, persisted, ordered collection of entries.

    Parameters
    ----------
    storage:
        Key-value medium holding the serialized collection.
    key:
        Storage key for the collection.
    """

    def __init__(self, storage: KeyValueStore, *, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key
        self._on_change: ChangeCallback | None = None
        self._entries: EntryCollection = self._load()

    @property
    def key(self) -> str:
        """Storage key this store reads and writes."""
        return self._key

    @property
    def entries(self) -> EntryCollection:
        """Current collection, in display order."""
        return self._entries

    def on_change(self, callback: ChangeCallback) -> None:
        """
        Register the change callback.

        Only one callback is held; registering replaces the previous one. The
        callback receives the full collection after every successful mutation.
        """
        self._on_change = callback

    def add(self, text: str) -> Entry | None:
        """
        Append a new incomplete entry.

        Returns
        -------
        Entry | None
            The created entry, or None if `text` is empty or whitespace-only.
        """
        if not is_valid_text(text):
            logger.debug("Rejected add: empty text")
            return None

        entry = Entry(id=next_entry_id(self._entries), text=text, complete=False)
        self._commit((*self._entries, entry))
        logger.debug("Added entry %d", entry.id)
        return entry

    def edit(self, entry_id: int, new_text: str) -> bool:
        """
        Replace the text of an entry, keeping its id, completion and position.

        Returns
        -------
        bool
            True if the entry was updated; False for unknown id or empty text.
        """
        if not is_valid_text(new_text):
            logger.debug("Rejected edit of %s: empty text", entry_id)
            return False
        return self._replace(entry_id, lambda e: replace(e, text=new_text))

    def delete(self, entry_id: int) -> bool:
        """
        Remove an entry; all others keep their fields and relative order.

        Returns
        -------
        bool
            True if an entry was removed.
        """
        if find_entry(self._entries, entry_id) is None:
            logger.debug("Ignored delete of unknown entry %s", entry_id)
            return False

        self._commit(tuple(e for e in self._entries if e.id != entry_id))
        logger.debug("Deleted entry %d", entry_id)
        return True

    def toggle(self, entry_id: int) -> bool:
        """
        Flip the completion flag of an entry.

        Returns
        -------
        bool
            True if the entry was toggled.
        """
        return self._replace(entry_id, lambda e: replace(e, complete=not e.complete))

    def _replace(self, entry_id: int, change: Callable[[Entry], Entry]) -> bool:
        if find_entry(self._entries, entry_id) is None:
            logger.debug("Ignored change to unknown entry %s", entry_id)
            return False

        self._commit(tuple(change(e) if e.id == entry_id else e for e in self._entries))
        logger.debug("Updated entry %d", entry_id)
        return True

    def _commit(self, entries: EntryCollection) -> None:
        # Write first: PersistenceFailure must leave memory and observers untouched.
        self._storage.set(self._key, _serialize(entries))
        self._entries = entries
        if self._on_change is not None:
            self._on_change(entries)

    def _load(self) -> EntryCollection:
        try:
            raw = self._storage.get(self._key)
        except StorageReadError as exc:
            logger.warning("Starting with an empty list: %s", exc)
            return ()

        if raw is None:
            return ()

        try:
            return collection_from_payload(json.loads(raw))
        except (ValueError, RecursionError) as exc:
            # json.JSONDecodeError is a ValueError subclass; deep nesting raises RecursionError.
            logger.warning("Discarding corrupt %r collection: %s", self._key, exc)
            return ()


def _serialize(entries: EntryCollection) -> str:
    return json.dumps(collection_to_payload(entries), separators=(",", ":"), ensure_ascii=False)
