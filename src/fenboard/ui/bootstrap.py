"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from fenboard.core.store import PositionStore

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from fenboard.ui.styles.theme import APP_STYLE

    app.setApplicationName("fenboard")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from fenboard.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    # The store lives for the whole session and is owned here, not globally.
    store = PositionStore()
    _LOGGER.debug("Starting with %s", store.fen())

    window = MainWindow(store)
    window.show()

    return app.exec()
