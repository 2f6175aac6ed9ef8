from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtWidgets import QApplication

from arcmini.di.container import Container
from arcmini.log import configure_logging, logger
from arcmini.services.config.app_config import build_app_config
from arcmini.utils.constants import APP_NAME, APP_ORG


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = build_app_config()
    configure_logging(config.log_level())
    logger.info(
        "starting %s %s (config: %s)",
        APP_NAME,
        config.get_version(),
        config.loaded_from or "defaults",
    )

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))
    app.setQuitOnLastWindowClosed(True)

    container = Container.default(config=config)

    # Optional URL to open passed as first CLI argument
    start_url = argv[1] if len(argv) > 1 else None

    win = container.build_main_window(start_url=start_url, app_title=APP_NAME)
    win.show()

    return app.exec()
