"""
Coordinator: wires a presentation adapter to the EntryStore.

The presentation layer is a replaceable shell. It only has to satisfy the
PresentationAdapter protocol below; the GUI widget and the CLI text view both
do.

Startup order
-------------
1. Construct the EntryStore (loads from storage).
2. Register the store's change callback -> adapter.render.
3. Register the adapter's four gesture handlers -> store operations.
4. Render once, directly, from the store's current collection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from .data_models import EntryCollection
from .entry_store import DEFAULT_STORAGE_KEY, EntryStore
from .kv_store import KeyValueStore

AddHandler = Callable[[str], None]
EditHandler = Callable[[int, str], None]
IdHandler = Callable[[int], None]


class PresentationAdapter(Protocol):
    """
    Boundary contract for anything that paints entries and captures gestures.

    `render` fully replaces the visual representation from the given
    collection, shows a placeholder for an empty collection, and must not
    mutate what it receives.
    """

    def bind_add(self, handler: AddHandler) -> None:
        """Register the submit-new-entry handler."""
        ...

    def bind_edit(self, handler: EditHandler) -> None:
        """Register the edit-entry-text handler."""
        ...

    def bind_delete(self, handler: IdHandler) -> None:
        """Register the delete-entry handler."""
        ...

    def bind_toggle(self, handler: IdHandler) -> None:
        """Register the toggle-entry handler."""
        ...

    def render(self, entries: EntryCollection) -> None:
        """Rebuild the presentation from `entries`."""
        ...


@dataclass(frozen=True, slots=True)
class GestureHandlers:
    """The callables handed to the presentation adapter, captured once."""

    add: AddHandler
    edit: EditHandler
    delete: IdHandler
    toggle: IdHandler


class Coordinator:
    """
    Links user gestures to store mutations and store changes to rendering.

    Parameters
    ----------
    store:
        Already-constructed EntryStore.
    view:
        Presentation adapter to bind.
    """

    def __init__(self, store: EntryStore, view: PresentationAdapter) -> None:
        self.store = store
        self.view = view

        # Bound methods are fresh objects on every attribute access; capture
        # them once so registrations keep a stable identity.
        self._on_changed = self.on_entries_changed
        self.handlers = GestureHandlers(
            add=self.handle_add,
            edit=self.handle_edit,
            delete=self.handle_delete,
            toggle=self.handle_toggle,
        )

        self.store.on_change(self._on_changed)
        self.view.bind_add(self.handlers.add)
        self.view.bind_edit(self.handlers.edit)
        self.view.bind_delete(self.handlers.delete)
        self.view.bind_toggle(self.handlers.toggle)

        self.on_entries_changed(self.store.entries)

    def on_entries_changed(self, entries: EntryCollection) -> None:
        """Forward a changed collection to the view."""
        self.view.render(entries)

    def handle_add(self, text: str) -> None:
        """Submit-new-entry gesture: add an entry."""
        self.store.add(text)

    def handle_edit(self, entry_id: int, text: str) -> None:
        """Edit-entry-text gesture: replace an entry's text."""
        self.store.edit(entry_id, text)

    def handle_delete(self, entry_id: int) -> None:
        """Delete-entry gesture: remove an entry."""
        self.store.delete(entry_id)

    def handle_toggle(self, entry_id: int) -> None:
        """Toggle-entry gesture: flip an entry's completion flag."""
        self.store.toggle(entry_id)


def open_coordinator(
    view: PresentationAdapter,
    storage: KeyValueStore,
    *,
    key: str = DEFAULT_STORAGE_KEY,
) -> Coordinator:
    """
    Construct the store from `storage` and wire it to `view`.

    Returns
    -------
    Coordinator
        A started coordinator; `view` has already rendered once.
    """
    store = EntryStore(storage, key=key)
    return Coordinator(store, view)
