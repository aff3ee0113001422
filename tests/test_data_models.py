from __future__ import annotations

import pytest

from docket_engine.data_models import (
    Entry,
    collection_from_payload,
    collection_to_payload,
    find_entry,
    is_valid_text,
    next_entry_id,
)


@pytest.mark.parametrize("text", ["", " ", "   ", "\t\n", None, 5])
def test_is_valid_text_rejects_blank_and_non_strings(text: object) -> None:
    assert is_valid_text(text) is False


def test_is_valid_text_accepts_text_with_surrounding_space() -> None:
    assert is_valid_text("  buy milk ") is True


def test_next_entry_id_starts_at_one() -> None:
    assert next_entry_id(()) == 1


def test_next_entry_id_uses_max_not_length() -> None:
    entries = (Entry(id=1, text="a"), Entry(id=4, text="b"))
    assert next_entry_id(entries) == 5


def test_find_entry() -> None:
    entries = (Entry(id=1, text="a"), Entry(id=2, text="b"))
    assert find_entry(entries, 2) == Entry(id=2, text="b")
    assert find_entry(entries, 3) is None


def test_entry_to_dict_and_from_dict() -> None:
    entry = Entry(id=3, text="call mom", complete=True)
    assert entry.to_dict() == {"id": 3, "text": "call mom", "complete": True}
    assert Entry.from_dict({"id": 3, "text": "call mom", "complete": True}) == entry


@pytest.mark.parametrize(
    "payload",
    [
        {"id": 1, "text": "a"},
        {"id": 0, "text": "a", "complete": False},
        {"id": -2, "text": "a", "complete": False},
        {"id": True, "text": "a", "complete": False},
        {"id": "1", "text": "a", "complete": False},
        {"id": 1, "text": "", "complete": False},
        {"id": 1, "text": 7, "complete": False},
        {"id": 1, "text": "a", "complete": "yes"},
        ["not", "an", "object"],
    ],
)
def test_entry_from_dict_rejects_malformed(payload: object) -> None:
    with pytest.raises(ValueError):
        Entry.from_dict(payload)  # type: ignore[arg-type]


def test_collection_from_payload_preserves_order() -> None:
    payload = [
        {"id": 5, "text": "e", "complete": False},
        {"id": 2, "text": "b", "complete": True},
    ]
    entries = collection_from_payload(payload)
    assert [e.id for e in entries] == [5, 2]
    assert collection_to_payload(entries) == payload


def test_collection_from_payload_rejects_non_list() -> None:
    with pytest.raises(ValueError):
        collection_from_payload({"id": 1, "text": "a", "complete": False})


def test_collection_from_payload_rejects_duplicate_ids() -> None:
    payload = [
        {"id": 1, "text": "a", "complete": False},
        {"id": 1, "text": "b", "complete": False},
    ]
    with pytest.raises(ValueError, match="Duplicate"):
        collection_from_payload(payload)
