from __future__ import annotations

from .qt_clipboard import QtClipboardWriter
from .qt_notifier import QtNotifier
from .qt_settings_watcher import QtSettingsWatcher
from .qt_shortcuts import QtShortcutBinder
from .qt_tab_inspector import QtTabInspector

__all__ = [
    "QtClipboardWriter",
    "QtNotifier",
    "QtSettingsWatcher",
    "QtShortcutBinder",
    "QtTabInspector",
]
