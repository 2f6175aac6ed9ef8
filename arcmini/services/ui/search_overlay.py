from __future__ import annotations

from collections.abc import Callable
from urllib.parse import quote_plus

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtWidgets import QHBoxLayout, QLineEdit, QWidget

from arcmini.utils.constants import DEFAULT_SEARCH_URL


def build_search_url(template: str, term: str) -> str:
    return template.replace("{query}", quote_plus(term))


class _SearchEdit(QLineEdit):
    def __init__(self, overlay: SearchOverlay) -> None:
        super().__init__(overlay)
        self._overlay = overlay

    def keyPressEvent(self, e: QKeyEvent) -> None:
        if e.key() == Qt.Key.Key_Escape:
            self._overlay.hide_overlay()
            return
        if e.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self._overlay.submit()
            return
        super().keyPressEvent(e)


class SearchOverlay(QWidget):
    """
    Portable search box (an ISearchOverlay). Esc hides it; Enter opens the
    search in a new tab through `open_url` and clears the box.
    """

    def __init__(
        self,
        open_url: Callable[[str], object],
        parent: QWidget | None = None,
        *,
        search_url: str = DEFAULT_SEARCH_URL,
    ) -> None:
        super().__init__(parent)
        self._open_url = open_url
        self._search_url = search_url
        self._tab_id = ""

        self.edit = _SearchEdit(self)
        self.edit.setPlaceholderText("Type to search…")
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.addWidget(self.edit)
        self.hide()

    @property
    def tab_id(self) -> str:
        return self._tab_id

    def toggle(self, tab_id: str) -> bool:
        if self.isVisible() and tab_id == self._tab_id:
            self.hide_overlay()
            return False
        self._tab_id = tab_id
        self.show()
        self.raise_()
        self.edit.setFocus()
        return True

    def hide_overlay(self) -> None:
        self.hide()

    def submit(self) -> None:
        term = self.edit.text().strip()
        if not term:
            return
        self._open_url(build_search_url(self._search_url, term))
        self.edit.clear()
        self.hide_overlay()
