"""Board - piece arena and occupancy grid on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from draughtsie.core.enums import Side
from draughtsie.core.piece import Piece
from draughtsie.core.types import BOARD_SIZE, Cell, cell_at, playable_cells

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Board:
    """Mutable board storing piece ids per cell and the pieces by id.

    The board only enforces one piece per cell on dark squares. Move
    legality lives in :mod:`draughtsie.core.validator`.
    """

    __slots__ = ("_grid", "_pieces", "_cells")

    def __init__(self) -> None:
        self._grid: list[int | None] = [None] * _CELL_COUNT
        # id -> current piece value / current cell
        self._pieces: dict[int, Piece] = {}
        self._cells: dict[int, Cell] = {}

    # -- Element access -----------------------------------------------------

    def piece_at(self, cell: Cell) -> Piece | None:
        if not cell.is_valid:
            return None
        piece_id = self._grid[cell.index]
        if piece_id is None:
            return None
        return self._pieces[piece_id]

    def __getitem__(self, cell: Cell) -> Piece | None:
        return self.piece_at(cell)

    def __contains__(self, piece_id: object) -> bool:
        return piece_id in self._pieces

    def get(self, piece_id: int) -> Piece | None:
        return self._pieces.get(piece_id)

    def cell_of(self, piece_id: int) -> Cell:
        """Current cell of *piece_id* (KeyError if not on the board)."""
        return self._cells[piece_id]

    def is_empty(self, cell: Cell) -> bool:
        return self.piece_at(cell) is None

    @staticmethod
    def is_playable(cell: Cell) -> bool:
        return cell.is_playable

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side | None = None) -> list[Piece]:
        """Pieces on the board in reading order, optionally of one *side*."""
        found: list[Piece] = []
        for piece_id in self._grid:
            if piece_id is None:
                continue
            piece = self._pieces[piece_id]
            if side is None or piece.side == side:
                found.append(piece)
        return found

    def count(self, side: Side) -> int:
        return sum(1 for p in self._pieces.values() if p.side == side)

    def occupied(self) -> Iterator[tuple[Cell, Piece]]:
        for index, piece_id in enumerate(self._grid):
            if piece_id is not None:
                yield cell_at(index), self._pieces[piece_id]

    # -- Mutation / copying -------------------------------------------------

    def place(self, piece: Piece, cell: Cell) -> None:
        if not cell.is_playable:
            raise ValueError(f"Cannot place a piece on unplayable cell {cell}")
        if self._grid[cell.index] is not None:
            raise ValueError(f"Cell {cell} is already occupied")
        if piece.id in self._pieces:
            raise ValueError(f"Piece {piece.id} is already on the board")
        self._grid[cell.index] = piece.id
        self._pieces[piece.id] = piece
        self._cells[piece.id] = cell

    def remove(self, cell: Cell) -> Piece:
        piece = self.piece_at(cell)
        if piece is None:
            raise ValueError(f"No piece on {cell}")
        self._grid[cell.index] = None
        del self._pieces[piece.id]
        del self._cells[piece.id]
        return piece

    def move(self, piece_id: int, cell: Cell) -> None:
        """Relocate *piece_id* to the empty playable *cell*."""
        origin = self._cells[piece_id]
        if not cell.is_playable:
            raise ValueError(f"Cannot move a piece to unplayable cell {cell}")
        if self._grid[cell.index] is not None:
            raise ValueError(f"Cell {cell} is already occupied")
        self._grid[origin.index] = None
        self._grid[cell.index] = piece_id
        self._cells[piece_id] = cell

    def promote(self, piece_id: int) -> Piece:
        """Crown *piece_id* in place and return the new value."""
        king = self._pieces[piece_id].crowned()
        self._pieces[piece_id] = king
        return king

    def copy(self) -> Board:
        b = Board()
        b._grid = self._grid.copy()
        b._pieces = self._pieces.copy()
        b._cells = self._cells.copy()
        return b

    def clear(self) -> None:
        self._grid = [None] * _CELL_COUNT
        self._pieces = {}
        self._cells = {}

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: 12 men per side on the dark squares."""
        b = cls()
        next_id = 0
        for cell in playable_cells():
            for side in (Side.DARK, Side.LIGHT):
                if cell.y in side.home_rows:
                    b.place(Piece(next_id, side), cell)
                    next_id += 1
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Build a board from eight text rows, top row first.

        ``l``/``L`` are light man/king, ``d``/``D`` dark man/king; any other
        character is an empty cell. Blank lines and surrounding spaces are
        ignored. Ids are assigned in reading order.
        """
        rows = [line.strip() for line in diagram.strip().splitlines() if line.strip()]
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Diagram must have {BOARD_SIZE} rows, got {len(rows)}")
        b = cls()
        next_id = 0
        for y, row in enumerate(rows):
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Diagram row {y} must have {BOARD_SIZE} cells: {row!r}")
            for x, char in enumerate(row):
                if char not in "lLdD":
                    continue
                b.place(Piece.from_char(next_id, char), Cell(x, y))
                next_id += 1
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid and self._pieces == other._pieces

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(BOARD_SIZE):
            row = []
            for x in range(BOARD_SIZE):
                p = self.piece_at(Cell(x, y))
                row.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - y} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    def to_diagram(self) -> str:
        """Inverse of :meth:`from_diagram` (ids are not preserved)."""
        rows: list[str] = []
        for y in range(BOARD_SIZE):
            rows.append(
                "".join(
                    str(p) if (p := self.piece_at(Cell(x, y))) else "."
                    for x in range(BOARD_SIZE)
                )
            )
        return "\n".join(rows)
