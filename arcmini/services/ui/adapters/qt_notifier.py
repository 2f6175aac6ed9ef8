from __future__ import annotations

from PyQt6.QtWidgets import QStatusBar, QSystemTrayIcon

from arcmini.log import logger
from arcmini.services.ui.ports.notifier import INotifier
from arcmini.utils.constants import NOTIFY_TIMEOUT_MS


class QtNotifier(INotifier):
    """
    Tray balloon when the platform has a tray, status bar message otherwise.
    With `enabled=False` success messages are only logged; errors still show.
    """

    def __init__(
        self,
        *,
        tray: QSystemTrayIcon | None = None,
        status_bar: QStatusBar | None = None,
        timeout_ms: int = NOTIFY_TIMEOUT_MS,
        enabled: bool = True,
    ) -> None:
        self._tray = tray
        self._status_bar = status_bar
        self._timeout_ms = timeout_ms
        self._enabled = enabled

    def notify(self, title: str, message: str) -> None:
        logger.info("%s: %s", title, message)
        if self._enabled:
            self._show(title, message, QSystemTrayIcon.MessageIcon.Information)

    def error(self, title: str, message: str) -> None:
        self._show(title, message, QSystemTrayIcon.MessageIcon.Warning)

    def _show(self, title: str, message: str, icon: QSystemTrayIcon.MessageIcon) -> None:
        if self._tray is not None and self._tray.isVisible() and QSystemTrayIcon.supportsMessages():
            self._tray.showMessage(title, message, icon, self._timeout_ms)
            return
        if self._status_bar is not None:
            self._status_bar.showMessage(f"{title}: {message}", self._timeout_ms)
