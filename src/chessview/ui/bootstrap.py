"""Start-up of the Qt side of Chessview."""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from chessview import __version__
from chessview.ui.settings import AppSettings
from chessview.ui.styles.theme import APP_STYLE

_LOGGER = logging.getLogger(__name__)


def create_application(argv: list[str] | None = None) -> QApplication:
    """Return the QApplication (creating it if needed) with the app style applied."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("Chessview")
    app.setApplicationVersion(__version__)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)
    return app


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Show the main window and block in the Qt event loop; returns its exit code."""
    from chessview.ui.main_window import MainWindow

    app = create_application(argv)
    window = MainWindow(settings)
    window.show()

    _LOGGER.info("Chessview %s started", __version__)
    return app.exec()
