"""
Filesystem locations for Dockets runtime data.

This module is the single place that decides where the on-disk key-value store
lives. Everything else receives a resolved path or an opened store.

- Runtime data lives under a Dockets "data root".
- `DOCKETS_DATA_ROOT` overrides the platform default.
- The store itself is one JSON file, `dockets.json`, under the data root.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from .errors import ConfigurationError
from .kv_store import JsonFileKeyValueStore

DATA_ROOT_ENV_VAR: Final[str] = "DOCKETS_DATA_ROOT"
STORE_FILENAME: Final[str] = "dockets.json"


def default_data_root() -> Path:
    """
    Resolve the default Dockets data root.

    Preference order:
    1) %DOCKETS_DATA_ROOT% if set
    2) %LOCALAPPDATA%\\dockets, then %APPDATA%\\dockets (Windows)
    3) $XDG_DATA_HOME/dockets, then ~/.local/share/dockets
    """
    override = os.environ.get(DATA_ROOT_ENV_VAR)
    if override:
        return Path(override).expanduser()

    local = os.environ.get("LOCALAPPDATA")
    if local:
        return Path(local) / "dockets"

    roaming = os.environ.get("APPDATA")
    if roaming:
        return Path(roaming) / "dockets"

    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / "dockets"

    return Path.home() / ".local" / "share" / "dockets"


def resolve_store_path(data_root: Path | None = None) -> Path:
    """
    Return the path of the JSON store file.

    Parameters
    ----------
    data_root:
        Optional override for the data root.

    Returns
    -------
    pathlib.Path
        Resolved path to `dockets.json` under the data root.

    Raises
    ------
    ConfigurationError
        If the data root exists but is not a directory.
    """
    root = (data_root or default_data_root()).expanduser().resolve()
    if root.exists() and not root.is_dir():
        raise ConfigurationError(f"Data root is not a directory: {root}")
    return root / STORE_FILENAME


def validate_storage_key(key: str) -> str:
    """Return `key` stripped, or raise ConfigurationError if it is blank."""
    cleaned = key.strip()
    if not cleaned:
        raise ConfigurationError("Storage key must not be empty.")
    return cleaned


def open_file_store(data_root: Path | None = None) -> JsonFileKeyValueStore:
    """Open the file-backed key-value store under `data_root`."""
    return JsonFileKeyValueStore(path=resolve_store_path(data_root))
