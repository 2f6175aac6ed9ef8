from __future__ import annotations

from arcmini.domain.errors import (
    CopyActionError,
    IncompleteTabData,
    NoActiveTab,
    StorageUnavailable,
)
from arcmini.domain.interfaces import IPreferenceStore, ITemplateRenderer
from arcmini.domain.models import CopyRequest, PreferenceState, TabInfo
from arcmini.log import logger
from arcmini.services.ui.ports import IClipboardWriter, INotifier, ISearchOverlay, ITabInspector


class CopyActions:
    """
    The functions a shortcut or toolbar button triggers.

    Every failure stops here: it is logged and turned into a notification,
    and the method returns False. Nothing is retried; the user can simply
    press the shortcut again.
    """

    def __init__(
        self,
        *,
        store: IPreferenceStore,
        renderer: ITemplateRenderer,
        tabs: ITabInspector,
        clipboard: IClipboardWriter,
        notifier: INotifier,
        search: ISearchOverlay | None = None,
    ) -> None:
        self._store = store
        self._renderer = renderer
        self._tabs = tabs
        self._clipboard = clipboard
        self._notifier = notifier
        self._search = search

    def set_search_overlay(self, search: ISearchOverlay) -> None:
        self._search = search

    # -------------------- intents --------------------

    def copy_title_url(self) -> bool:
        def run() -> None:
            tab = self._require_tab("title", "url", "tab_id")
            text = self._renderer.render(CopyRequest(title=tab.title, url=tab.url), self._state())
            self._clipboard.write(text, tab.tab_id)
            self._notifier.notify("Copied", "Page title and link copied to the clipboard.")

        return self._guard("copy title and URL", run)

    def copy_url_only(self) -> bool:
        def run() -> None:
            tab = self._require_tab("url", "tab_id")
            self._clipboard.write(tab.url, tab.tab_id)
            self._notifier.notify("Copied", "Link copied to the clipboard.")

        return self._guard("copy URL", run)

    def toggle_search(self) -> bool:
        def run() -> None:
            tab = self._require_tab("tab_id")
            if self._search is None:
                raise CopyActionError("Search is not available in this window.")
            visible = self._search.toggle(tab.tab_id)
            logger.debug("search overlay for tab %s visible=%s", tab.tab_id, visible)

        return self._guard("toggle search", run)

    # -------------------- helpers --------------------

    def _require_tab(self, *fields: str) -> TabInfo:
        tab = self._tabs.active_tab()
        if tab is None:
            raise NoActiveTab()
        missing = tab.missing_fields(*fields)
        if missing:
            raise IncompleteTabData(missing)
        return tab

    def _state(self) -> PreferenceState:
        # Always fetched fresh; a cached copy could be stale.
        try:
            return self._store.get()
        except StorageUnavailable as exc:
            logger.warning("preferences unavailable (%s); using built-in defaults", exc)
            return PreferenceState.default()

    def _guard(self, what: str, run) -> bool:
        try:
            run()
        except CopyActionError as exc:
            logger.info("%s aborted: %s", what, exc.user_message)
            self._notifier.error(exc.title, exc.user_message)
            return False
        except Exception:
            logger.exception("%s failed", what)
            self._notifier.error("Copy failed", f"Could not {what}. See the log for details.")
            return False
        return True
