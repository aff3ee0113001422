"""
CLI tests.

Each command runs against a temporary data root; the store file is inspected
directly to check what was persisted.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from docket.cli import main


def _run(tmp_path: Path, *argv: str) -> int:
    return main([*argv, "--data-root", str(tmp_path)])


def _persisted(tmp_path: Path, key: str = "dockets") -> list[dict[str, object]]:
    mapping = json.loads((tmp_path / "dockets.json").read_text(encoding="utf-8"))
    return json.loads(mapping[key])


def test_cli_root_help(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "usage:" in capsys.readouterr().out.lower()


@pytest.mark.parametrize("subcommand", ["list", "add", "edit", "delete", "toggle", "gui"])
def test_cli_subcommand_help(subcommand: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([subcommand, "--help"])
    assert excinfo.value.code == 0
    assert subcommand in capsys.readouterr().out.lower()


def test_list_empty(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "list") == 0
    assert "Nothing to do! Add a task?" in capsys.readouterr().out
    assert not (tmp_path / "dockets.json").exists()


def test_add_toggle_edit_delete(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "add", "buy milk") == 0
    assert _run(tmp_path, "add", "walk dog") == 0
    assert _run(tmp_path, "toggle", "1") == 0
    assert _run(tmp_path, "edit", "2", "walk the dog") == 0
    capsys.readouterr()

    assert _persisted(tmp_path) == [
        {"id": 1, "text": "buy milk", "complete": True},
        {"id": 2, "text": "walk the dog", "complete": False},
    ]

    assert _run(tmp_path, "delete", "1") == 0
    out = capsys.readouterr().out
    assert "[ ] 2: walk the dog" in out
    assert "buy milk" not in out
    assert _persisted(tmp_path) == [{"id": 2, "text": "walk the dog", "complete": False}]


def test_ignored_requests_exit_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "add", "   ") == 1
    assert _run(tmp_path, "toggle", "5") == 1
    assert _run(tmp_path, "delete", "5") == 1
    assert _run(tmp_path, "edit", "5", "x") == 1
    assert "No change" in capsys.readouterr().out
    assert not (tmp_path / "dockets.json").exists()


def test_custom_key(tmp_path: Path) -> None:
    assert _run(tmp_path, "add", "ship release", "--key", "work") == 0
    assert _persisted(tmp_path, key="work") == [
        {"id": 1, "text": "ship release", "complete": False}
    ]


def test_blank_key_is_an_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "list", "--key", " ") == 2
    assert capsys.readouterr().out.startswith("ERROR:")


def test_data_root_that_is_a_file_is_an_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    root = tmp_path / "root"
    root.write_text("", encoding="utf-8")
    assert main(["list", "--data-root", str(root)]) == 2
    assert "not a directory" in capsys.readouterr().out


def test_corrupt_store_lists_empty(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "dockets.json").write_text('{"dockets": "not json"}', encoding="utf-8")
    assert _run(tmp_path, "list") == 0
    assert "Nothing to do!" in capsys.readouterr().out


def test_invalid_utf8_store_lists_empty(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "dockets.json").write_bytes(b"\xff\xfe garbage")
    assert _run(tmp_path, "list") == 0
    assert "Nothing to do!" in capsys.readouterr().out

    assert _run(tmp_path, "add", "buy milk") == 0
    assert _persisted(tmp_path) == [{"id": 1, "text": "buy milk", "complete": False}]
