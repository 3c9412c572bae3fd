"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_LEVEL_ENV = "DRAUGHTSIE_LOG_LEVEL"


def _configure_logging() -> None:
    """Route library logging to stderr at the level named in the environment."""
    name = os.environ.get(_LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if level == logging.WARNING and name != "WARNING":
        _LOGGER.warning("Unknown log level %r in %s", name, _LOG_LEVEL_ENV)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from draughtsie.ui.styles.theme import APP_STYLE

    app.setApplicationName("Draughtsie")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from draughtsie.ui.main_window import MainWindow

    _configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()
    _LOGGER.debug("Main window shown")

    return app.exec()
