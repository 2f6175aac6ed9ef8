from __future__ import annotations

from PyQt6.QtCore import QByteArray, Qt, QUrl
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QDockWidget,
    QLineEdit,
    QMainWindow,
    QStatusBar,
    QTabWidget,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from arcmini.domain.interfaces import IPreferenceStore, ISettingsService, ITemplateRenderer
from arcmini.services.ui.browser_tab import BrowserTab
from arcmini.services.ui.format_picker import FormatPicker
from arcmini.services.ui.format_settings import FormatSettingsWidget
from arcmini.services.ui.search_overlay import SearchOverlay
from arcmini.utils.constants import DEFAULT_SEARCH_URL, HOME_URL


class MainWindow(QMainWindow):
    """
    Thin browser window: tabs, an address bar, copy actions and the format
    settings surfaces. Copy behaviour lives in injected services; actions are
    connected by the container.
    """

    def __init__(
        self,
        store: IPreferenceStore,
        renderer: ITemplateRenderer,
        settings: ISettingsService,
        *,
        start_url: str | None = None,
        search_url: str = DEFAULT_SEARCH_URL,
        bindings: dict[str, str] | None = None,
        app_title: str = "Arc Mini",
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(1100, 750)
        self._app_title = app_title
        self.settings = settings

        self.tabs = QTabWidget(self)
        self.tabs.setDocumentMode(True)
        self.tabs.setTabsClosable(True)
        self.tabs.setMovable(True)
        self.tabs.tabCloseRequested.connect(self.close_tab)
        self.tabs.currentChanged.connect(self._on_current_changed)

        self.search = SearchOverlay(self.open_tab, self, search_url=search_url)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.search)
        layout.addWidget(self.tabs)
        self.setCentralWidget(central)

        self.address = QLineEdit(self)
        self.address.setPlaceholderText("Enter address")
        self.address.returnPressed.connect(self._navigate)

        self.format_picker = FormatPicker(store, self)
        self.format_settings = FormatSettingsWidget(store, renderer, self, bindings=bindings)
        self.settings_dock = QDockWidget("Copy format", self)
        self.settings_dock.setObjectName("copyFormatDock")
        self.settings_dock.setWidget(self.format_settings)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.settings_dock)

        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

        self.open_tab(start_url or HOME_URL)

    # ---------- UI creation ----------
    def _build_actions(self) -> None:
        self.act_new_tab = QAction(
            "New Tab", self, shortcut=QKeySequence.StandardKey.AddTab, triggered=self.open_tab
        )
        self.act_back = QAction("Back", self, shortcut=QKeySequence.StandardKey.Back)
        self.act_back.triggered.connect(lambda: self._page_call("back"))
        self.act_forward = QAction("Forward", self, shortcut=QKeySequence.StandardKey.Forward)
        self.act_forward.triggered.connect(lambda: self._page_call("forward"))
        self.act_reload = QAction("Reload", self, shortcut=QKeySequence.StandardKey.Refresh)
        self.act_reload.triggered.connect(lambda: self._page_call("reload"))

        # Triggers are connected by the container to CopyActions.
        self.act_copy_url = QAction("Copy URL", self)
        self.act_copy_title_url = QAction("Copy Title + URL", self)
        self.act_toggle_search = QAction("Search…", self)
        self.act_toggle_settings = self.settings_dock.toggleViewAction()
        self.act_toggle_settings.setText("Copy Format Settings")

        self.act_quit = QAction(
            "Quit", self, shortcut=QKeySequence.StandardKey.Quit, triggered=self.close
        )

    def _build_toolbar(self) -> None:
        tb = QToolBar("Navigation", self)
        tb.setObjectName("navigationToolbar")
        tb.setMovable(False)
        for a in (self.act_back, self.act_forward, self.act_reload):
            tb.addAction(a)
        tb.addWidget(self.address)
        tb.addSeparator()
        tb.addAction(self.act_copy_url)
        tb.addAction(self.act_copy_title_url)
        tb.addWidget(self.format_picker)
        self.addToolBar(tb)

    def _build_menu(self) -> None:
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_new_tab)
        filem.addSeparator()
        filem.addAction(self.act_quit)

        editm = m.addMenu("&Edit")
        editm.addAction(self.act_copy_url)
        editm.addAction(self.act_copy_title_url)
        editm.addSeparator()
        editm.addAction(self.act_toggle_search)

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_toggle_settings)

    # ---------- Tabs ----------
    def open_tab(self, url: str | None = None) -> BrowserTab:
        # QAction.triggered passes a bool
        page = BrowserTab(url if isinstance(url, str) else HOME_URL, self.tabs)
        page.titleChanged.connect(lambda title, p=page: self._on_title_changed(p, title))
        page.urlChanged.connect(lambda u, p=page: self._on_url_changed(p, u))
        index = self.tabs.addTab(page, "New Tab")
        self.tabs.setCurrentIndex(index)
        return page

    def close_tab(self, index: int) -> None:
        page = self.tabs.widget(index)
        self.tabs.removeTab(index)
        if page is not None:
            page.deleteLater()

    def current_page(self) -> BrowserTab | None:
        page = self.tabs.currentWidget()
        return page if isinstance(page, BrowserTab) else None

    def _page_call(self, name: str) -> None:
        page = self.current_page()
        if page is not None:
            getattr(page, name)()

    def _navigate(self) -> None:
        text = self.address.text().strip()
        if not text:
            return
        page = self.current_page()
        if page is None:
            self.open_tab(text)
        else:
            page.setUrl(QUrl.fromUserInput(text))

    def _on_title_changed(self, page: BrowserTab, title: str) -> None:
        index = self.tabs.indexOf(page)
        if index >= 0:
            self.tabs.setTabText(index, title or "Untitled")
            self.tabs.setTabToolTip(index, title)
        if page is self.current_page():
            self.setWindowTitle(f"{title} - {self._app_title}" if title else self._app_title)

    def _on_url_changed(self, page: BrowserTab, url: QUrl) -> None:
        if page is self.current_page():
            self.address.setText(url.toString())

    def _on_current_changed(self, _index: int) -> None:
        page = self.current_page()
        if page is None:
            self.address.clear()
            self.setWindowTitle(self._app_title)
            return
        self.address.setText(page.url().toString())
        title = page.title()
        self.setWindowTitle(f"{title} - {self._app_title}" if title else self._app_title)

    # ---------- Close ----------
    def closeEvent(self, event):
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
