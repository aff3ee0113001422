"""
Module entrypoint for the Dockets CLI.

This file exists so that `python -m docket ...` works when the console-script
wrapper is not installed. It contains no logic of its own.
"""

from __future__ import annotations

from docket.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
