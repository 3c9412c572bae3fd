"""Cell coordinates and diagonal helpers.

Board layout (row 0 is the top of the rendered board)::

    x = 0..7 (columns a..h), y = 0..7 (rows 8..1)
    a cell is playable (a dark square) iff x + y is odd
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))


@dataclass(frozen=True, slots=True, order=True)
class Cell:
    """Board coordinate. May lie off the board; see :attr:`is_valid`."""

    x: int
    y: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE

    @property
    def is_playable(self) -> bool:
        return self.is_valid and (self.x + self.y) % 2 == 1

    @property
    def index(self) -> int:
        """Flat index 0–63 (only meaningful for valid cells)."""
        return self.y * BOARD_SIZE + self.x

    def offset(self, dx: int, dy: int) -> Cell:
        return Cell(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        """Human label, e.g. Cell(2, 5) → 'c3'."""
        if not self.is_valid:
            return f"({self.x},{self.y})"
        return chr(ord("a") + self.x) + str(BOARD_SIZE - self.y)


def cell_at(index: int) -> Cell:
    """Inverse of :attr:`Cell.index`."""
    return Cell(index % BOARD_SIZE, index // BOARD_SIZE)


def playable_cells() -> tuple[Cell, ...]:
    """All 32 dark squares in reading order."""
    return _PLAYABLE


def diagonal_between(start: Cell, end: Cell) -> tuple[Cell, ...] | None:
    """Cells strictly between *start* and *end*, or None if not diagonal."""
    dx = end.x - start.x
    dy = end.y - start.y
    if dx == 0 or abs(dx) != abs(dy):
        return None
    sx = 1 if dx > 0 else -1
    sy = 1 if dy > 0 else -1
    return tuple(start.offset(sx * i, sy * i) for i in range(1, abs(dx)))


def _build_rays() -> dict[Cell, tuple[tuple[Cell, ...], ...]]:
    rays: dict[Cell, tuple[tuple[Cell, ...], ...]] = {}
    for cell in _PLAYABLE:
        cell_rays: list[tuple[Cell, ...]] = []
        for dx, dy in DIAGONALS:
            ray: list[Cell] = []
            nxt = cell.offset(dx, dy)
            while nxt.is_valid:
                ray.append(nxt)
                nxt = nxt.offset(dx, dy)
            cell_rays.append(tuple(ray))
        rays[cell] = tuple(cell_rays)
    return rays


_PLAYABLE: tuple[Cell, ...] = tuple(
    Cell(x, y)
    for y in range(BOARD_SIZE)
    for x in range(BOARD_SIZE)
    if (x + y) % 2 == 1
)

_RAYS = _build_rays()


def diagonal_rays(cell: Cell) -> tuple[tuple[Cell, ...], ...]:
    """The four diagonal rays leaving *cell*, nearest cell first."""
    return _RAYS[cell]
