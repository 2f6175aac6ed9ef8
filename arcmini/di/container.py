from __future__ import annotations

from PyQt6.QtCore import QSettings
from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QApplication, QSystemTrayIcon

from arcmini.domain.interfaces import IPreferenceBackend, ISettingsService, ITemplateRenderer
from arcmini.services.backends import SettingsPreferenceBackend
from arcmini.services.commands import CommandDispatcher, Intent, shortcut_bindings
from arcmini.services.config.app_config import AppConfig, build_app_config
from arcmini.services.copy_actions import CopyActions
from arcmini.services.preference_store import PreferenceStore
from arcmini.services.settings_service import SettingsService
from arcmini.services.template_renderer import TemplateRenderer
from arcmini.services.ui.adapters import (
    QtClipboardWriter,
    QtNotifier,
    QtSettingsWatcher,
    QtShortcutBinder,
    QtTabInspector,
)
from arcmini.services.ui.main_window import MainWindow
from arcmini.utils.constants import (
    APP_NAME,
    APP_ORG,
    CMD_COPY_URL,
    CMD_COPY_URL_TITLE,
    CMD_TOGGLE_SEARCH,
)


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Owns the single PreferenceStore every UI surface shares
      - Builds the main window and connects shortcuts/actions to CopyActions
    """

    def __init__(
        self,
        *,
        config: AppConfig | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        backend: IPreferenceBackend | None = None,
        renderer: ITemplateRenderer | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.store = PreferenceStore(backend or SettingsPreferenceBackend(self.settings_service))
        self.renderer: ITemplateRenderer = renderer or TemplateRenderer()
        self.dispatcher = CommandDispatcher()
        self.bindings = shortcut_bindings(self.config)

    # ---------- Class helpers ----------

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        organization: str = APP_ORG,
        application: str = APP_NAME,
        config: AppConfig | None = None,
    ) -> Container:
        """Container over an INI-format QSettings in the user scope."""
        if qsettings is None:
            qsettings = QSettings(
                QSettings.Format.IniFormat,
                QSettings.Scope.UserScope,
                organization,
                application,
            )
        return Container(qsettings=qsettings, config=config)

    # ---------- UI factories ----------

    def build_main_window(
        self,
        *,
        start_url: str | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """Create the window, its adapters and the shortcut wiring."""
        window = MainWindow(
            self.store,
            self.renderer,
            self.settings_service,
            start_url=start_url,
            search_url=self.config.search_url(),
            bindings=self.bindings,
            app_title=app_title,
        )

        tray = None
        if QSystemTrayIcon.isSystemTrayAvailable():
            app = QApplication.instance()
            icon = app.windowIcon() if app is not None else QIcon()
            tray = QSystemTrayIcon(icon, window)
            tray.setToolTip(app_title)
            tray.show()

        notifier = QtNotifier(
            tray=tray,
            status_bar=window.statusBar(),
            timeout_ms=self.config.notify_timeout_ms(),
            enabled=self.config.notifications_enabled(),
        )
        actions = CopyActions(
            store=self.store,
            renderer=self.renderer,
            tabs=QtTabInspector(window.tabs),
            clipboard=QtClipboardWriter(),
            notifier=notifier,
            search=window.search,
        )
        self.bind_actions(actions)

        window.act_copy_url.triggered.connect(lambda: self.dispatcher.dispatch(CMD_COPY_URL))
        window.act_copy_title_url.triggered.connect(
            lambda: self.dispatcher.dispatch(CMD_COPY_URL_TITLE)
        )
        window.act_toggle_search.triggered.connect(
            lambda: self.dispatcher.dispatch(CMD_TOGGLE_SEARCH)
        )

        binder = QtShortcutBinder(self.dispatcher)
        binder.bind(window, self.bindings)
        window.shortcut_binder = binder

        if isinstance(self.settings_service, SettingsService):
            window.settings_watcher = QtSettingsWatcher(
                self.store, self.settings_service.file_name, window
            )

        window.copy_actions = actions
        return window

    def bind_actions(self, actions: CopyActions) -> None:
        self.dispatcher.bind(Intent.COPY_URL, actions.copy_url_only)
        self.dispatcher.bind(Intent.COPY_TITLE_URL, actions.copy_title_url)
        self.dispatcher.bind(Intent.TOGGLE_SEARCH, actions.toggle_search)
