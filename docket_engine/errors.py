"""
Domain exceptions for Dockets.

Notes
-----
Engine code avoids raising generic exceptions for expected failure modes.
Validation rejections (empty text, unknown id) are not errors at all: they are
absorbed as no-ops by the EntryStore and never reach this hierarchy.
"""

from __future__ import annotations


class DocketError(RuntimeError):
    """Base exception for all Dockets domain failures."""


class StorageError(DocketError):
    """Base exception for key-value storage failures."""


class StorageReadError(StorageError):
    """Raised when the storage medium exists but cannot be read."""


class PersistenceFailure(StorageError):
    """
    Raised when a collection snapshot cannot be written.

    The mutation that triggered the write is reported as failed: in-memory
    state is left unchanged and no change notification is sent.
    """


class ConfigurationError(DocketError):
    """Raised when the data root cannot be resolved or is unusable."""
