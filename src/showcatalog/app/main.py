"""Point d'entrée de l'application desktop ShowCatalog."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from showcatalog.app.browser_controller import CatalogBrowserController
from showcatalog.app.ui_mainwindow import MainWindow
from showcatalog.app.workers import QtFetchRunner
from showcatalog.core.adapters import AdapterRegistry
from showcatalog.core.config import load_config
from showcatalog.core.utils.logging import setup_logging


def main() -> int:
    config = load_config()
    logger = setup_logging(level=config.log_level, log_file=config.log_file)
    logger.info("Starting ShowCatalog")
    app = QApplication(sys.argv)
    app.setApplicationName("ShowCatalog")
    win = MainWindow()
    client = AdapterRegistry.create("tvmaze", config)
    runner = QtFetchRunner(parent=win)
    win.cards.set_image_source(client.fetch_image, runner)
    controller = CatalogBrowserController(client=client, presenter=win, run_fetch=runner)
    win.attach_controller(controller)
    win.show()
    controller.start()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
