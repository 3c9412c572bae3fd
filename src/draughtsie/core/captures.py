"""Capture-chain resolution: maximal multi-capture sequences.

The search is a pure recursion over board copies: every branch gets its own
:class:`Board` clone with the captured piece removed and the mover relocated,
so the caller's board is never touched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from draughtsie.core.enums import Rank, Side
from draughtsie.core.move import CaptureSequence
from draughtsie.core.types import Cell
from draughtsie.core.validator import MoveValidator

if TYPE_CHECKING:
    from draughtsie.core.board import Board


class CaptureResolver:
    """Answers capture questions about pieces on *board*."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def has_capture(self, piece_id: int) -> bool:
        """Whether *piece_id* can capture at least one piece right now."""
        return bool(MoveValidator(self._board).capture_hops(piece_id))

    def capturers(self, side: Side) -> frozenset[int]:
        """Ids of *side*'s pieces that have a capture available."""
        return frozenset(
            piece.id for piece in self._board.pieces(side) if self.has_capture(piece.id)
        )

    def all_sequences(self, piece_id: int) -> list[CaptureSequence]:
        """Every complete capture chain of *piece_id*, maximal or not."""
        if piece_id not in self._board:
            return []
        start = self._board.cell_of(piece_id)
        return _search(self._board, piece_id, (start,), ())

    def maximal_sequences(self, piece_id: int) -> list[CaptureSequence]:
        """Chains of *piece_id* that capture the greatest number of pieces.

        Empty when the piece has no capture at all.
        """
        sequences = self.all_sequences(piece_id)
        if not sequences:
            return []
        best = max(seq.capture_count for seq in sequences)
        return [seq for seq in sequences if seq.capture_count == best]


def _search(
    board: Board,
    piece_id: int,
    path: tuple[Cell, ...],
    captured: tuple[int, ...],
) -> list[CaptureSequence]:
    hops = MoveValidator(board).capture_hops(piece_id)
    if not hops:
        if not captured:
            return []
        return [CaptureSequence(piece_id=piece_id, path=path, captured=captured)]

    found: list[CaptureSequence] = []
    for landing, victim in hops:
        branch = board.copy()
        branch.remove(branch.cell_of(victim))
        branch.move(piece_id, landing)
        crown_if_needed(branch, piece_id)
        found.extend(_search(branch, piece_id, path + (landing,), captured + (victim,)))
    return found


def crown_if_needed(board: Board, piece_id: int) -> bool:
    """Promote *piece_id* if it is a man standing on its far row."""
    piece = board.get(piece_id)
    if piece is None or piece.rank != Rank.MAN:
        return False
    if board.cell_of(piece_id).y != piece.side.promotion_row:
        return False
    board.promote(piece_id)
    return True
