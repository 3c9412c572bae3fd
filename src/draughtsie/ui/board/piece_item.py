"""PieceItem — draggable draughts piece on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QCursor, QPen
from PyQt6.QtWidgets import QGraphicsEllipseItem, QGraphicsItem

from draughtsie.core.enums import Side
from draughtsie.core.piece import Piece
from draughtsie.core.types import Cell
from draughtsie.ui.styles.theme import BoardTheme


class PieceItem(QGraphicsEllipseItem):
    """A single piece on the board: a disc, plus a gold crown for kings.

    Stores its logical *cell* and piece id and supports drag & drop.
    """

    _RADIUS_RATIO = 0.4
    _CROWN_RATIO = 0.15

    def __init__(self, piece: Piece, cell: Cell, tile_size: int, theme: BoardTheme) -> None:
        super().__init__()
        self.piece = piece
        self.cell = cell
        self._tile_size = tile_size
        self._drag_origin: QPointF | None = None
        self._crown: QGraphicsEllipseItem | None = None

        fill = theme.light_piece if piece.side == Side.LIGHT else theme.dark_piece
        self.setBrush(QBrush(fill))
        self.setPen(QPen(theme.piece_outline, 2))
        self._update_geometry(tile_size)

        if piece.is_king:
            self._crown = QGraphicsEllipseItem(self)
            self._crown.setBrush(QBrush(theme.crown))
            self._crown.setPen(QPen(Qt.PenStyle.NoPen))
            self._update_crown()

        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    @property
    def piece_id(self) -> int:
        return self.piece.id

    @property
    def has_crown(self) -> bool:
        return self._crown is not None

    def enable_drag(self, enabled: bool) -> None:
        """Allow / disallow dragging."""
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, enabled)
        if enabled:
            self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        else:
            self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

    def start_drag(self) -> None:
        """Called at the beginning of a drag gesture."""
        self._drag_origin = self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def cancel_drag(self) -> None:
        """Snap back to original position."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._finish_drag()

    def finish_drag(self) -> None:
        """Cleanup after a successful drop."""
        self._finish_drag()

    def _finish_drag(self) -> None:
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        self.setOpacity(1.0)

    def _update_geometry(self, size: int) -> None:
        # Local coordinates span one tile; the item is positioned at the
        # tile's top-left corner.
        self._tile_size = size
        r = size * self._RADIUS_RATIO
        c = size / 2
        self.setRect(c - r, c - r, 2 * r, 2 * r)

    def _update_crown(self) -> None:
        if self._crown is None:
            return
        r = self._tile_size * self._CROWN_RATIO
        c = self._tile_size / 2
        self._crown.setRect(c - r, c - r, 2 * r, 2 * r)
