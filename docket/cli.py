"""
Command-line interface for Dockets.

Notes
-----
The CLI is thin. Each mutating command opens the store, wires it to a
ConsoleView through a Coordinator, fires exactly one gesture on the view, and
prints the resulting list.

Exit codes
----------
- 0: success
- 1: the request was ignored (empty text or unknown id)
- 2: configuration or storage error
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from docket.console_view import ConsoleView
from docket_engine.coordinator import Coordinator, open_coordinator
from docket_engine.entry_store import DEFAULT_STORAGE_KEY
from docket_engine.errors import DocketError
from docket_engine.paths import open_file_store, validate_storage_key

logger = logging.getLogger(__name__)


def _add_store_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--data-root",
        type=Path,
        default=None,
        help="Override the Dockets data root. If omitted, defaults are used.",
    )
    p.add_argument(
        "--key",
        default=DEFAULT_STORAGE_KEY,
        help=f"Storage key holding the list (default: {DEFAULT_STORAGE_KEY}).",
    )


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="dockets",
        description="Dockets: a small persisted to-do list",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    list_p = sub.add_parser("list", help="Print the current list")
    _add_store_args(list_p)

    add_p = sub.add_parser("add", help="Append a new entry")
    add_p.add_argument("text", help="Entry text")
    _add_store_args(add_p)

    edit_p = sub.add_parser("edit", help="Replace the text of an entry")
    edit_p.add_argument("id", type=int, help="Entry id")
    edit_p.add_argument("text", help="New entry text")
    _add_store_args(edit_p)

    delete_p = sub.add_parser("delete", help="Remove an entry")
    delete_p.add_argument("id", type=int, help="Entry id")
    _add_store_args(delete_p)

    toggle_p = sub.add_parser("toggle", help="Flip the completion flag of an entry")
    toggle_p.add_argument("id", type=int, help="Entry id")
    _add_store_args(toggle_p)

    gui_p = sub.add_parser("gui", help="Open the desktop window")
    _add_store_args(gui_p)

    return parser


def _fire_gesture(args: argparse.Namespace, view: ConsoleView) -> None:
    if args.command == "add":
        view.submit_new_entry(args.text)
    elif args.command == "edit":
        view.edit_entry_text(args.id, args.text)
    elif args.command == "delete":
        view.delete_entry(args.id)
    elif args.command == "toggle":
        view.toggle_entry(args.id)


def main(argv: list[str] | None = None) -> int:
    """
    CLI entry point.

    Parameters
    ----------
    argv:
        Optional argument vector. If None, argparse uses sys.argv.

    Returns
    -------
    int
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        key = validate_storage_key(args.key)
        storage = open_file_store(args.data_root)

        if args.command == "gui":
            # Imported lazily so that text commands do not need a Qt runtime.
            from gui.app import main as gui_main

            return gui_main(storage=storage, key=key)

        view = ConsoleView()
        coordinator: Coordinator = open_coordinator(view, storage, key=key)
        before = coordinator.store.entries
        _fire_gesture(args, view)
    except DocketError as exc:
        print(f"ERROR: {exc}")
        return 2

    print(view.text)

    if args.command != "list" and coordinator.store.entries is before:
        logger.info("Request ignored: %s", args.command)
        print("No change: empty text or unknown id.")
        return 1
    return 0
