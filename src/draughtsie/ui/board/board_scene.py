"""BoardScene — QGraphicsScene that draws the draughts board and pieces."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
)

from draughtsie.core.board import Board
from draughtsie.core.types import BOARD_SIZE, Cell
from draughtsie.game.turn import TurnState
from draughtsie.ui.board.piece_item import PieceItem
from draughtsie.ui.styles.theme import BoardTheme

DestinationProvider = Callable[[int], Iterable[Cell]]


class BoardScene(QGraphicsScene):
    """Renders the board, highlights, and piece items.

    The scene never judges legality: a drop on another cell is forwarded as
    an intent and the piece snaps back unless the board is re-synced.

    Signals:
        move_requested(int, Cell): piece id and the cell it was dropped on.
    """

    move_requested = pyqtSignal(int, object)

    TILE = 80  # px per cell

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._turn: TurnState | None = None
        self._flipped = False

        # Interaction state
        self._selected: PieceItem | None = None
        self._dragging_item: PieceItem | None = None
        self._interactive = True
        self._show_legal_moves = True
        self._destinations: DestinationProvider | None = None

        # Visual layers
        self._tile_items: dict[Cell, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsItem] = []
        self._capturer_items: list[QGraphicsItem] = []
        self._last_move_items: list[QGraphicsItem] = []
        self._legal_dot_items: list[QGraphicsItem] = []
        self._piece_items: dict[Cell, PieceItem] = {}
        self._last_path: tuple[Cell, ...] = ()

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board, turn: TurnState) -> None:
        """Display *board* for the given turn (full redraw of pieces)."""
        self._board = board
        self._turn = turn
        self._clear_selection()
        self._sync_pieces()
        self._highlight_capturers()

    def set_destination_provider(self, provider: DestinationProvider | None) -> None:
        """Set the callable that lists legal landing cells for a piece id."""
        self._destinations = provider

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def is_interactive(self) -> bool:
        return self._interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-destination dots."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def highlight_last_move(self, path: Iterable[Cell] | None) -> None:
        """Highlight every cell visited by the last applied move."""
        self._clear_items(self._last_move_items)
        self._last_path = tuple(path) if path else ()
        for cell in self._last_path:
            rect = self._make_highlight(cell, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_items.append(rect)

    def piece_item_at(self, cell: Cell) -> PieceItem | None:
        return self._piece_items.get(cell)

    @property
    def selected_cell(self) -> Cell | None:
        return self._selected.cell if self._selected is not None else None

    @property
    def legal_dot_count(self) -> int:
        return len(self._legal_dot_items)

    @property
    def capturer_highlight_count(self) -> int:
        return len(self._capturer_items)

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        if self._board is not None:
            self._clear_selection()
            self._sync_pieces()
            self._highlight_capturers()
        self.highlight_last_move(self._last_path)

    def _draw_board(self) -> None:
        """Draw or redraw the 64 tiles."""
        for tile in self._tile_items.values():
            self.removeItem(tile)
        self._tile_items.clear()

        t = self.TILE
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                cell = Cell(x, y)
                vx, vy = self._visual_coords(x, y)
                color = (
                    self._theme.dark_square
                    if cell.is_playable
                    else self._theme.light_square
                )
                rect = QGraphicsRectItem(vx * t, vy * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._tile_items[cell] = rect

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()
        self._dragging_item = None

        if self._board is None:
            return

        t = self.TILE
        for cell, piece in self._board.occupied():
            item = PieceItem(piece, cell, t, self._theme)
            vx, vy = self._visual_coords(cell.x, cell.y)
            item.setPos(vx * t, vy * t)
            self.addItem(item)
            self._piece_items[cell] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._board is None or event is None:
            return super().mousePressEvent(event)

        cell = self._pos_to_cell(event.scenePos())
        if cell is None:
            self._clear_selection()
            return super().mousePressEvent(event)

        # Clicking another cell while a piece is selected → request the move
        if self._selected is not None and cell != self._selected.cell:
            if self._board.is_empty(cell):
                piece_id = self._selected.piece_id
                self._clear_selection()
                self.move_requested.emit(piece_id, cell)
                return

        if self.select_cell(cell):
            item = self._piece_items[cell]
            item.enable_drag(True)
            item.start_drag()
            self._dragging_item = item

        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._dragging_item is not None and event is not None:
            item = self._dragging_item
            self._dragging_item = None
            drop = self._pos_to_cell(event.scenePos())

            if drop is not None and drop != item.cell:
                self._clear_selection()
                self.move_requested.emit(item.piece_id, drop)
                # An accepted move re-syncs the board and drops this item.
                if self._piece_items.get(item.cell) is item:
                    item.cancel_drag()
                    item.enable_drag(False)
                return

            item.cancel_drag()
            item.enable_drag(False)

        super().mouseReleaseEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def select_cell(self, cell: Cell) -> bool:
        """Select the movable piece on *cell*; returns whether one was found."""
        item = self._piece_items.get(cell)
        if item is None or not self._can_move(item):
            self._clear_selection()
            return False

        self._clear_selection()
        self._selected = item
        self._highlight_items.append(
            self._make_highlight(cell, self._theme.highlight_from)
        )

        if self._show_legal_moves and self._destinations is not None:
            for dest in self._destinations(item.piece_id):
                self._legal_dot_items.append(self._make_dot(dest))
        return True

    def _can_move(self, item: PieceItem) -> bool:
        if self._turn is None:
            return False
        if item.piece.side != self._turn.side_to_move:
            return False
        chain = self._turn.chain_piece
        return chain is None or chain == item.piece_id

    def _highlight_capturers(self) -> None:
        self._clear_items(self._capturer_items)
        if self._board is None or self._turn is None:
            return
        for piece_id in self._turn.capturers:
            if piece_id not in self._board:
                continue
            rect = self._make_highlight(
                self._board.cell_of(piece_id), self._theme.highlight_capturer
            )
            rect.setZValue(0.6)
            self._capturer_items.append(rect)

    def _clear_selection(self) -> None:
        self._selected = None
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, x: int, y: int) -> tuple[int, int]:
        """Convert board column/row to visual column/row."""
        if self._flipped:
            return BOARD_SIZE - 1 - x, BOARD_SIZE - 1 - y
        return x, y

    def _pos_to_cell(self, pos: QPointF) -> Cell | None:
        """Scene position → board cell."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        if self._flipped:
            return Cell(BOARD_SIZE - 1 - col, BOARD_SIZE - 1 - row)
        return Cell(col, row)

    def _make_highlight(self, cell: Cell, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a cell."""
        t = self.TILE
        vx, vy = self._visual_coords(cell.x, cell.y)
        rect = QGraphicsRectItem(vx * t, vy * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _make_dot(self, cell: Cell) -> QGraphicsEllipseItem:
        t = self.TILE
        vx, vy = self._visual_coords(cell.x, cell.y)
        r = t * 0.15
        dot = QGraphicsEllipseItem(vx * t + t / 2 - r, vy * t + t / 2 - r, 2 * r, 2 * r)
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(2)
        self.addItem(dot)
        return dot
