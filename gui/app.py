"""
Dockets GUI app.

Single window hosting the docket list, wired to the engine through a
Coordinator.
"""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication, QVBoxLayout, QWidget

from docket_engine.coordinator import Coordinator, open_coordinator
from docket_engine.entry_store import DEFAULT_STORAGE_KEY
from docket_engine.kv_store import KeyValueStore
from docket_engine.paths import open_file_store
from gui.docket_view import DocketView


class AppWindow(QWidget):
    """
    Main window for the Dockets GUI.

    Responsibilities
    ----------------
    - Host the docket list view
    - Own the coordinator for the window's lifetime
    """

    def __init__(self, storage: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        """
        Initialize the main window and wire the view to the store.

        Parameters
        ----------
        storage:
            Key-value medium holding the list.
        key:
            Storage key for the list.
        """
        super().__init__()
        self.setWindowTitle("Dockets")
        self.resize(480, 640)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.view = DocketView()
        root.addWidget(self.view, 1)

        self.coordinator: Coordinator = open_coordinator(self.view, storage, key=key)


def main(storage: KeyValueStore | None = None, key: str = DEFAULT_STORAGE_KEY) -> int:
    """
    Run the Dockets GUI application.

    Parameters
    ----------
    storage:
        Optional storage medium. If None, the file store under the default
        data root is used.
    key:
        Storage key for the list.

    Returns
    -------
    int
        Qt application exit code.
    """
    app = QApplication.instance() or QApplication(sys.argv)
    w = AppWindow(storage if storage is not None else open_file_store(), key=key)
    w.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
