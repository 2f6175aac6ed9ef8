from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QFileSystemWatcher, QObject

from arcmini.domain.errors import StorageUnavailable
from arcmini.log import logger
from arcmini.services.preference_store import PreferenceStore


class QtSettingsWatcher(QObject):
    """Reloads the store when another process rewrites the settings file."""

    def __init__(self, store: PreferenceStore, path: str | Path, parent: QObject | None = None):
        super().__init__(parent)
        self._store = store
        self._path = str(path)
        self._watcher = QFileSystemWatcher(self)
        self._watcher.fileChanged.connect(self._on_changed)
        if Path(self._path).exists():
            self._watcher.addPath(self._path)

    def _on_changed(self, path: str) -> None:
        # Atomic replace drops the watch; re-add it.
        if path not in self._watcher.files() and Path(path).exists():
            self._watcher.addPath(path)
        try:
            self._store.reload()
        except StorageUnavailable:
            logger.warning("could not reload preferences from %s", path, exc_info=True)
