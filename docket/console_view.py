"""
Text presentation adapter used by the CLI.

The view holds the last rendering as text and exposes one method per gesture.
A gesture fired before its handler is bound is ignored, the same way an
unwired widget ignores a click.
"""

from __future__ import annotations

from typing import Final

from docket_engine.coordinator import AddHandler, EditHandler, IdHandler
from docket_engine.data_models import Entry, EntryCollection, is_valid_text

EMPTY_PLACEHOLDER: Final[str] = "Nothing to do! Add a task?"


def format_entry(entry: Entry) -> str:
    """Render one entry as a single line, e.g. ``[x] 3: buy milk``."""
    mark = "x" if entry.complete else " "
    return f"[{mark}] {entry.id}: {entry.text}"


class ConsoleView:
    """PresentationAdapter that renders to a text buffer."""

    def __init__(self) -> None:
        self.text = ""
        self.render_count = 0
        self._add: AddHandler | None = None
        self._edit: EditHandler | None = None
        self._delete: IdHandler | None = None
        self._toggle: IdHandler | None = None

    def bind_add(self, handler: AddHandler) -> None:
        """Register the submit-new-entry handler."""
        self._add = handler

    def bind_edit(self, handler: EditHandler) -> None:
        """Register the edit-entry-text handler."""
        self._edit = handler

    def bind_delete(self, handler: IdHandler) -> None:
        """Register the delete-entry handler."""
        self._delete = handler

    def bind_toggle(self, handler: IdHandler) -> None:
        """Register the toggle-entry handler."""
        self._toggle = handler

    def render(self, entries: EntryCollection) -> None:
        """Replace the text buffer with a rendering of `entries`."""
        if not entries:
            self.text = EMPTY_PLACEHOLDER
        else:
            self.text = "\n".join(format_entry(e) for e in entries)
        self.render_count += 1

    def submit_new_entry(self, text: str) -> None:
        """Fire the submit-new-entry gesture."""
        if self._add is not None:
            self._add(text)

    def edit_entry_text(self, entry_id: int, text: str) -> None:
        """Fire the edit-entry-text gesture."""
        if self._edit is not None:
            self._edit(entry_id, text)

    def delete_entry(self, entry_id: int) -> None:
        """Fire the delete-entry gesture."""
        if self._delete is not None:
            self._delete(entry_id)

    def toggle_entry(self, entry_id: int) -> None:
        """Fire the toggle-entry gesture."""
        if self._toggle is not None:
            self._toggle(entry_id)
