from __future__ import annotations

import os
from pathlib import Path

# Qt must not need a display in CI.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from arcmini.domain.models import CopyRequest, TabInfo
from arcmini.services.backends import InMemoryPreferenceBackend
from arcmini.services.preference_store import PreferenceStore
from arcmini.services.settings_service import SettingsService
from arcmini.services.template_renderer import TemplateRenderer


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def backend() -> InMemoryPreferenceBackend:
    return InMemoryPreferenceBackend()


@pytest.fixture()
def store(backend: InMemoryPreferenceBackend) -> PreferenceStore:
    return PreferenceStore(backend)


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


# --- Fakes for the UI ports ---


class FakeTabs:
    def __init__(self, tab: TabInfo | None = None) -> None:
        self.tab = tab

    def active_tab(self) -> TabInfo | None:
        return self.tab


class FakeClipboard:
    def __init__(self) -> None:
        self.writes: list[tuple[str, str]] = []

    def write(self, text: str, tab_id: str) -> None:
        self.writes.append((text, tab_id))


class FakeNotifier:
    def __init__(self) -> None:
        self.infos: list[tuple[str, str]] = []
        self.errors: list[tuple[str, str]] = []

    def notify(self, title: str, message: str) -> None:
        self.infos.append((title, message))

    def error(self, title: str, message: str) -> None:
        self.errors.append((title, message))


class FakeSearch:
    def __init__(self) -> None:
        self.toggled: list[str] = []
        self.visible = False

    def toggle(self, tab_id: str) -> bool:
        self.toggled.append(tab_id)
        self.visible = not self.visible
        return self.visible


@pytest.fixture()
def fake_tabs() -> FakeTabs:
    return FakeTabs(TabInfo(title="Example", url="https://example.com", tab_id="1"))


@pytest.fixture()
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture()
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def fake_search() -> FakeSearch:
    return FakeSearch()


@pytest.fixture()
def sample_request() -> CopyRequest:
    return CopyRequest(title="A", url="http://b")
