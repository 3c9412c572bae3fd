"""Visual theme constants and QSS styles for Draughtsie."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and the pieces."""

    light_square: QColor
    dark_square: QColor
    light_piece: QColor
    dark_piece: QColor
    piece_outline: QColor
    crown: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal destinations
    highlight_capturer: QColor  # pieces that must capture
    last_move: QColor  # cells of the last applied move

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(245, 245, 220),  # beige
            dark_square=QColor(165, 42, 42),  # brown
            light_piece=QColor(255, 255, 255),
            dark_piece=QColor(220, 20, 20),
            piece_outline=QColor(0, 0, 0),
            crown=QColor(255, 215, 0),  # gold
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 60),
            highlight_capturer=QColor(255, 140, 0, 120),
            last_move=QColor(155, 199, 0, 105),
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 210, 184),
            dark_square=QColor(118, 74, 47),
            light_piece=QColor(240, 234, 220),
            dark_piece=QColor(40, 40, 40),
            piece_outline=QColor(20, 20, 20),
            crown=QColor(255, 215, 0),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 60),
            highlight_capturer=QColor(255, 140, 0, 120),
            last_move=QColor(155, 199, 0, 105),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        factory = BOARD_THEMES.get(name)
        return factory() if factory is not None else cls.default()


BOARD_THEMES = {
    "Classic": BoardTheme.default,
    "Walnut": BoardTheme.walnut,
}


APP_STYLE = """
QMainWindow, QWidget {
    background-color: #f0f0f0;
    color: #202020;
}
QPushButton {
    background-color: #e0e0e0;
    border: 1px solid #b0b0b0;
    border-radius: 4px;
    padding: 4px 10px;
}
QPushButton:hover {
    background-color: #d0d0d0;
}
QListWidget {
    background-color: #ffffff;
    border: 1px solid #c0c0c0;
}
"""
