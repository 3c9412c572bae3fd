"""Result dialog — announces the winner and offers a rematch."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from draughtsie.core.enums import Side
from draughtsie.ui.i18n import t


class ResultDialog(QDialog):
    """Modal end-of-game dialog with *Play again* and *Exit* buttons."""

    def __init__(self, winner: Side, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self._winner = winner

        layout = QVBoxLayout(self)
        self._header = QLabel()
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._header.setFont(QFont("Sans", 14, QFont.Weight.Bold))
        layout.addWidget(self._header)

        self._winner_label = QLabel()
        self._winner_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._winner_label)

        self._question = QLabel()
        self._question.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._question)

        btn_row = QHBoxLayout()
        self._btn_again = QPushButton()
        self._btn_again.setDefault(True)
        self._btn_again.clicked.connect(self.accept)
        btn_row.addWidget(self._btn_again)

        self._btn_exit = QPushButton()
        self._btn_exit.clicked.connect(self.reject)
        btn_row.addWidget(self._btn_exit)
        layout.addLayout(btn_row)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.game_over_title)
        self._header.setText(s.game_over_header)
        self._winner_label.setText(s.wins.format(side=s.side_name(self._winner)))
        self._question.setText(s.play_again_question)
        self._btn_again.setText(s.btn_play_again)
        self._btn_exit.setText(s.btn_exit)

    @property
    def winner(self) -> Side:
        return self._winner

    @staticmethod
    def ask(winner: Side, parent: QWidget | None = None) -> bool:
        """Show the dialog; ``True`` means the user wants another game."""
        dlg = ResultDialog(winner, parent)
        return dlg.exec() == QDialog.DialogCode.Accepted
