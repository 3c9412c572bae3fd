"""Side-wide rule queries: material, mobility and loss."""

from __future__ import annotations

from typing import TYPE_CHECKING

from draughtsie.core.captures import CaptureResolver
from draughtsie.core.enums import Side
from draughtsie.core.validator import MoveValidator

if TYPE_CHECKING:
    from draughtsie.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def has_pieces(board: Board, side: Side) -> bool:
        return board.count(side) > 0

    @staticmethod
    def has_legal_move(board: Board, side: Side) -> bool:
        """Whether *side* has any simple move or capture."""
        validator = MoveValidator(board)
        resolver = CaptureResolver(board)
        for piece in board.pieces(side):
            if validator.has_simple_move(piece.id) or resolver.has_capture(piece.id):
                return True
        return False

    @staticmethod
    def is_lost(board: Board, side_to_move: Side) -> bool:
        """The side to move loses with no pieces or no legal move."""
        return not Rules.has_pieces(board, side_to_move) or not Rules.has_legal_move(
            board, side_to_move
        )
