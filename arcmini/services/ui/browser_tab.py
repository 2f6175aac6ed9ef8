from __future__ import annotations

from itertools import count

from PyQt6.QtCore import QUrl
from PyQt6.QtWebEngineWidgets import QWebEngineView
from PyQt6.QtWidgets import QWidget

_ids = count(1)


class BrowserTab(QWebEngineView):
    """A web page in the tab strip, with a process-unique `tab_id`."""

    def __init__(self, url: str | QUrl | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.tab_id = str(next(_ids))
        if url:
            self.setUrl(QUrl.fromUserInput(url) if isinstance(url, str) else url)
