"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from gomoku.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication, settings: AppSettings) -> None:
    """Apply app-wide settings."""
    app.setApplicationName(settings.application)
    app.setOrganizationName(settings.organization)
    app.setStyle("Fusion")


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from gomoku.ui.main_window import MainWindow

    settings = settings or AppSettings()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app, settings)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Window shown; entering event loop")

    return app.exec()
