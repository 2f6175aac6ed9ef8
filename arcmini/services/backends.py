from __future__ import annotations

from arcmini.domain.errors import StorageUnavailable
from arcmini.domain.interfaces import IPreferenceBackend, ISettingsService
from arcmini.utils.constants import STORAGE_KEY


class InMemoryPreferenceBackend(IPreferenceBackend):
    """Keeps the raw record in memory. Used by tests and headless runs."""

    def __init__(self, raw: str | None = None) -> None:
        self.raw = raw
        self.saves = 0

    def load(self) -> str | None:
        return self.raw

    def save(self, raw: str) -> None:
        self.raw = raw
        self.saves += 1


class SettingsPreferenceBackend(IPreferenceBackend):
    """Stores the record as a JSON string under a single QSettings key."""

    def __init__(self, settings: ISettingsService, key: str = STORAGE_KEY) -> None:
        self._settings = settings
        self.key = key

    def load(self) -> str | None:
        try:
            raw = self._settings.get_raw(self.key, None)
        except OSError as exc:
            raise StorageUnavailable(str(exc)) from exc
        if raw is None or raw == "":
            return None
        if not isinstance(raw, str):
            # Not a record we wrote.
            return None
        return raw

    def save(self, raw: str) -> None:
        try:
            self._settings.set_raw(self.key, raw)
        except OSError as exc:
            raise StorageUnavailable(str(exc)) from exc
