from __future__ import annotations

from PyQt6.QtCore import QByteArray, QSettings

from arcmini.domain.errors import StorageUnavailable
from arcmini.domain.interfaces import ISettingsService
from arcmini.utils.constants import SETTINGS_GEOMETRY


class SettingsService(ISettingsService):
    """Persist small UI bits (window geometry) and raw values such as the preference record."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    @property
    def file_name(self) -> str:
        return self._s.fileName()

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_raw(self, key: str, default: object = None) -> object:
        self._s.sync()
        self._check_status(f"read {key!r}")
        return self._s.value(key, default)

    def set_raw(self, key: str, value: object) -> None:
        self._s.setValue(key, value)
        self._s.sync()
        self._check_status(f"write {key!r}")

    def _check_status(self, what: str) -> None:
        status = self._s.status()
        if status == QSettings.Status.AccessError:
            raise StorageUnavailable(f"Cannot {what}: settings file is not accessible")
        if status == QSettings.Status.FormatError:
            raise StorageUnavailable(f"Cannot {what}: settings file is malformed")
