"""Per-hop legality: simple moves, king slides and single captures."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from draughtsie.core.enums import MoveKind, RejectReason
from draughtsie.core.move import Classification
from draughtsie.core.types import Cell, diagonal_between, diagonal_rays

if TYPE_CHECKING:
    from draughtsie.core.board import Board


class MoveValidator:
    """Classifies a single hop of one piece on *board*.

    The validator never mutates the board. Whether a capture is pending for
    the side to move is the caller's knowledge and is passed in explicitly.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def classify(
        self,
        piece_id: int,
        destination: Cell,
        *,
        capture_pending: bool = False,
    ) -> Classification:
        board = self._board
        piece = board.get(piece_id)
        if piece is None:
            return Classification.invalid(RejectReason.UNKNOWN_PIECE)

        if not destination.is_valid:
            return Classification.invalid(RejectReason.OUT_OF_BOUNDS)
        if not destination.is_playable:
            return Classification.invalid(RejectReason.UNPLAYABLE_CELL)
        if not board.is_empty(destination):
            return Classification.invalid(RejectReason.OCCUPIED_DESTINATION)

        start = board.cell_of(piece_id)
        between = diagonal_between(start, destination)
        if between is None:
            return Classification.invalid(RejectReason.NON_DIAGONAL_MOVE)

        # Simple one-step move
        if not between:
            dy = destination.y - start.y
            if not piece.is_king and dy != piece.side.forward:
                return Classification.invalid(RejectReason.WRONG_DIRECTION_FOR_MAN)
            if capture_pending:
                return Classification.invalid(RejectReason.MANDATORY_CAPTURE_VIOLATION)
            return Classification.simple()

        # Longer hop: scan the ray for exactly one enemy
        enemies: list[int] = []
        for cell in between:
            occupant = board.piece_at(cell)
            if occupant is None:
                continue
            if occupant.side == piece.side:
                return Classification.invalid(
                    RejectReason.AMBIGUOUS_OR_BLOCKED_CAPTURE_PATH
                )
            enemies.append(occupant.id)

        if len(enemies) > 1:
            return Classification.invalid(RejectReason.AMBIGUOUS_OR_BLOCKED_CAPTURE_PATH)

        if not enemies:
            if not piece.is_king:
                return Classification.invalid(RejectReason.NO_CAPTURE_ALONG_PATH)
            # Flying king slide along an empty diagonal
            if capture_pending:
                return Classification.invalid(RejectReason.MANDATORY_CAPTURE_VIOLATION)
            return Classification.simple()

        if not piece.is_king and len(between) != 1:
            return Classification.invalid(RejectReason.NO_CAPTURE_ALONG_PATH)
        return Classification.capture(enemies[0])

    # ── Enumeration ──────────────────────────────────────────────────────

    def capture_hops(self, piece_id: int) -> list[tuple[Cell, int]]:
        """Every ``(landing cell, captured id)`` hop available to *piece_id*."""
        return [
            (cell, result.captured)
            for cell, result in self._classify_rays(piece_id, capture_pending=True)
            if result.kind == MoveKind.CAPTURE and result.captured is not None
        ]

    def simple_destinations(self, piece_id: int) -> list[Cell]:
        """Every non-capturing destination of *piece_id*."""
        return [
            cell
            for cell, result in self._classify_rays(piece_id, capture_pending=False)
            if result.kind == MoveKind.SIMPLE
        ]

    def has_simple_move(self, piece_id: int) -> bool:
        return any(
            result.kind == MoveKind.SIMPLE
            for _, result in self._classify_rays(piece_id, capture_pending=False)
        )

    def _classify_rays(
        self, piece_id: int, *, capture_pending: bool
    ) -> Iterator[tuple[Cell, Classification]]:
        board = self._board
        if piece_id not in board:
            return
        for ray in diagonal_rays(board.cell_of(piece_id)):
            for cell in ray:
                if not board.is_empty(cell):
                    # Occupied cells are hopped over, never landed on.
                    continue
                result = self.classify(piece_id, cell, capture_pending=capture_pending)
                if result.is_legal:
                    yield cell, result
                elif result.reason == RejectReason.AMBIGUOUS_OR_BLOCKED_CAPTURE_PATH:
                    break
