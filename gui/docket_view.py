"""
Docket list widget.

This widget is the desktop PresentationAdapter: it paints the collection and
turns raw Qt signals into the four semantic gestures. It never touches the
EntryStore directly; the Coordinator hands it handlers.

Notes
-----
- Every render rebuilds all rows from the collection it is given.
- An inline edit is committed when its editor finishes (Enter or focus loss)
  and the text actually changed. Blank text is reverted in place.
- Storage failures raised while handling a gesture are shown in a dialog.
"""

from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QStackedLayout,
    QVBoxLayout,
    QWidget,
)

from docket_engine.coordinator import AddHandler, EditHandler, IdHandler
from docket_engine.data_models import Entry, EntryCollection, is_valid_text
from docket_engine.errors import DocketError

EMPTY_MESSAGE = "Nothing to do! Add a task?"


def pending_edit(committed_text: str, text: str) -> str | None:
    """
    Return the text an inline edit should commit, or None to commit nothing.

    Unchanged text is not an edit. Blank text would be rejected by the store,
    so it is not sent either; the caller restores the committed text instead.
    """
    if text == committed_text or not is_valid_text(text):
        return None
    return text


class DocketRow(QWidget):
    """One rendered entry: checkbox, inline editor, delete button."""

    def __init__(
        self,
        entry: Entry,
        *,
        on_toggle: Callable[[int], None],
        on_edit: Callable[[int, str], None],
        on_delete: Callable[[int], None],
    ) -> None:
        super().__init__()
        self.entry_id = entry.id
        self._committed_text = entry.text

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 2, 4, 2)

        self.checkbox = QCheckBox()
        self.checkbox.setChecked(entry.complete)

        self.editor = QLineEdit(entry.text)
        if entry.complete:
            f = self.editor.font()
            f.setStrikeOut(True)
            self.editor.setFont(f)
            self.editor.setStyleSheet("color: #888;")

        self.btn_delete = QPushButton("Delete")

        layout.addWidget(self.checkbox)
        layout.addWidget(self.editor, 1)
        layout.addWidget(self.btn_delete)

        # Connected after initial state is set so rendering never fires gestures.
        self.checkbox.toggled.connect(lambda _checked: on_toggle(self.entry_id))
        self.editor.editingFinished.connect(lambda: self._commit_edit(on_edit))
        self.btn_delete.clicked.connect(lambda: on_delete(self.entry_id))

    def _commit_edit(self, on_edit: Callable[[int, str], None]) -> None:
        text = pending_edit(self._committed_text, self.editor.text())
        if text is None:
            # Keep the editor in step with the store when nothing is committed.
            self.editor.setText(self._committed_text)
            return
        self._committed_text = text
        on_edit(self.entry_id, text)


class DocketView(QWidget):
    """
    Desktop view of the docket list.

    Responsibilities
    ----------------
    - Capture new-entry submissions, inline edits, deletes and toggles.
    - Rebuild the list on every render, with a placeholder for an empty list.
    """

    def __init__(self) -> None:
        super().__init__()
        self._add: AddHandler | None = None
        self._edit: EditHandler | None = None
        self._delete: IdHandler | None = None
        self._toggle: IdHandler | None = None
        self._rendered: EntryCollection = ()

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)

        title = QLabel("Dockets")
        f = title.font()
        f.setPointSize(16)
        f.setBold(True)
        title.setFont(f)
        root.addWidget(title)

        form = QHBoxLayout()
        self.input = QLineEdit()
        self.input.setPlaceholderText("Add docket")
        self.btn_submit = QPushButton("Submit")
        form.addWidget(self.input, 1)
        form.addWidget(self.btn_submit)
        root.addLayout(form)

        self.input.returnPressed.connect(self._submit)
        self.btn_submit.clicked.connect(self._submit)

        self._stack = QStackedLayout()
        self.list_widget = QListWidget()
        self.empty_label = QLabel(EMPTY_MESSAGE)
        self.empty_label.setStyleSheet("color: #666; padding: 8px;")
        self._stack.addWidget(self.list_widget)
        self._stack.addWidget(self.empty_label)
        root.addLayout(self._stack, 1)

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
        """Replace all rows with a rendering of `entries`."""
        self._rendered = entries
        self.list_widget.clear()

        if not entries:
            self._stack.setCurrentWidget(self.empty_label)
            return

        for entry in entries:
            row = DocketRow(
                entry,
                on_toggle=lambda entry_id: self._dispatch(self._toggle, entry_id),
                on_edit=lambda entry_id, text: self._dispatch(self._edit, entry_id, text),
                on_delete=lambda entry_id: self._dispatch(self._delete, entry_id),
            )
            item = QListWidgetItem(self.list_widget)
            item.setSizeHint(row.sizeHint())
            self.list_widget.setItemWidget(item, row)

        self._stack.setCurrentWidget(self.list_widget)

    def _submit(self) -> None:
        text = self.input.text()
        if not text:
            return
        self._dispatch(self._add, text)
        self.input.clear()

    def _dispatch(self, handler: Callable[..., None] | None, *args: object) -> None:
        if handler is None:
            return
        try:
            handler(*args)
        except DocketError as exc:
            QMessageBox.critical(self, "Dockets", f"Could not save changes: {exc}")
            # Widgets may show the unsaved state; repaint the last saved collection.
            self.render(self._rendered)
