from __future__ import annotations

from docket.console_view import EMPTY_PLACEHOLDER, ConsoleView, format_entry
from docket_engine.coordinator import open_coordinator
from docket_engine.data_models import Entry
from docket_engine.kv_store import MemoryKeyValueStore


def test_format_entry_marks_completion() -> None:
    assert format_entry(Entry(id=3, text="buy milk")) == "[ ] 3: buy milk"
    assert format_entry(Entry(id=4, text="call mom", complete=True)) == "[x] 4: call mom"


def test_render_replaces_previous_text() -> None:
    view = ConsoleView()
    view.render((Entry(id=1, text="a"), Entry(id=2, text="b", complete=True)))
    assert view.text == "[ ] 1: a\n[x] 2: b"

    view.render(())
    assert view.text == EMPTY_PLACEHOLDER
    assert view.render_count == 2


def test_unbound_gestures_are_ignored() -> None:
    view = ConsoleView()
    view.submit_new_entry("a")
    view.edit_entry_text(1, "b")
    view.delete_entry(1)
    view.toggle_entry(1)
    assert view.render_count == 0


def test_gestures_drive_the_store() -> None:
    view = ConsoleView()
    coordinator = open_coordinator(view, MemoryKeyValueStore())

    view.submit_new_entry("a")
    view.submit_new_entry("b")
    view.toggle_entry(1)
    view.edit_entry_text(2, "bee")
    view.delete_entry(1)

    assert coordinator.store.entries == (Entry(id=2, text="bee"),)
    assert view.text == "[ ] 2: bee"
