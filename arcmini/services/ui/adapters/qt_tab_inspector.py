from __future__ import annotations

from PyQt6.QtWidgets import QTabWidget

from arcmini.domain.models import TabInfo
from arcmini.services.ui.ports.tabs import ITabInspector


class QtTabInspector(ITabInspector):
    """
    Reads the current page of a QTabWidget.

    Pages are expected to offer ``title()``, ``url()`` (a QUrl) and a ``tab_id``
    attribute, as BrowserTab does.
    """

    def __init__(self, tabs: QTabWidget) -> None:
        self._tabs = tabs

    def active_tab(self) -> TabInfo | None:
        page = self._tabs.currentWidget()
        if page is None:
            return None
        title = page.title() if hasattr(page, "title") else ""
        url = page.url().toString() if hasattr(page, "url") else ""
        tab_id = str(getattr(page, "tab_id", "") or "")
        # Blank pages carry no real location.
        if url == "about:blank":
            url = ""
        return TabInfo(title=title or "", url=url or "", tab_id=tab_id)
