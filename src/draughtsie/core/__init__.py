"""Core domain layer — pure draughts logic with zero external dependencies.

Quick start::

    from draughtsie.core import Board, Cell, MoveValidator, CaptureResolver

    board = Board.initial()
    piece = board.piece_at(Cell(0, 5))
    print(MoveValidator(board).simple_destinations(piece.id))
"""

from draughtsie.core.board import Board
from draughtsie.core.captures import CaptureResolver, crown_if_needed
from draughtsie.core.enums import GameResult, MoveKind, Rank, RejectReason, Side
from draughtsie.core.move import CaptureSequence, Classification
from draughtsie.core.piece import Piece
from draughtsie.core.rules import Rules
from draughtsie.core.types import (
    BOARD_SIZE,
    Cell,
    diagonal_between,
    diagonal_rays,
    playable_cells,
)
from draughtsie.core.validator import MoveValidator

__all__ = [
    # Enums
    "GameResult",
    "MoveKind",
    "Rank",
    "RejectReason",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "Cell",
    "diagonal_between",
    "diagonal_rays",
    "playable_cells",
    # Domain objects
    "Board",
    "CaptureResolver",
    "CaptureSequence",
    "Classification",
    "MoveValidator",
    "Piece",
    "Rules",
    "crown_if_needed",
]
