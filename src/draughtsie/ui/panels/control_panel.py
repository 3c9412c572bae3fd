"""ControlPanel — game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from draughtsie.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for game actions: new game and flip."""

    new_game_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._btn_new = QPushButton()
        self._btn_new.setMinimumHeight(36)
        self._btn_new.clicked.connect(self.new_game_clicked)
        layout.addWidget(self._btn_new)

        self._btn_flip = QPushButton()
        self._btn_flip.setMinimumHeight(36)
        self._btn_flip.clicked.connect(self.flip_clicked)
        layout.addWidget(self._btn_flip)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_new.setText(s.btn_new_game)
        self._btn_flip.setText(s.btn_flip)
