from __future__ import annotations

from PyQt6.QtGui import QClipboard, QGuiApplication

from arcmini.domain.errors import ClipboardWriteFailed
from arcmini.log import logger
from arcmini.services.ui.ports.clipboard import IClipboardWriter


class QtClipboardWriter(IClipboardWriter):
    """Writes to the system clipboard and verifies the text took."""

    def __init__(self, clipboard: QClipboard | None = None) -> None:
        self._clipboard = clipboard

    def _board(self) -> QClipboard:
        board = self._clipboard or QGuiApplication.clipboard()
        if board is None:
            raise ClipboardWriteFailed("No clipboard is available.")
        return board

    def write(self, text: str, tab_id: str) -> None:
        board = self._board()
        board.setText(text, QClipboard.Mode.Clipboard)
        if board.text(QClipboard.Mode.Clipboard) != text:
            raise ClipboardWriteFailed()
        logger.debug("copied %d chars from tab %s", len(text), tab_id)
