"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Side(IntEnum):
    """Side colour. LIGHT starts on the bottom rows and moves up."""

    LIGHT = 0
    DARK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a man's simple move."""
        return -1 if self == Side.LIGHT else 1

    @property
    def promotion_row(self) -> int:
        """Row on which a man of this side is crowned."""
        return 0 if self == Side.LIGHT else 7

    @property
    def home_rows(self) -> range:
        """Rows occupied at the start of a standard game."""
        return range(5, 8) if self == Side.LIGHT else range(0, 3)

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank. Promotion is one-way."""

    MAN = 1
    KING = 2


class MoveKind(IntEnum):
    """Outcome of classifying a single hop."""

    INVALID = 0
    SIMPLE = 1
    CAPTURE = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    LIGHT_WINS = 1
    DARK_WINS = 2

    @classmethod
    def win_for(cls, side: Side) -> GameResult:
        return cls.LIGHT_WINS if side == Side.LIGHT else cls.DARK_WINS

    @property
    def winner(self) -> Side | None:
        if self == GameResult.LIGHT_WINS:
            return Side.LIGHT
        if self == GameResult.DARK_WINS:
            return Side.DARK
        return None


class RejectReason(Enum):
    """Why a submitted move was not applied."""

    OUT_OF_BOUNDS = "out_of_bounds"
    UNPLAYABLE_CELL = "unplayable_cell"
    OCCUPIED_DESTINATION = "occupied_destination"
    NON_DIAGONAL_MOVE = "non_diagonal_move"
    WRONG_DIRECTION_FOR_MAN = "wrong_direction_for_man"
    MANDATORY_CAPTURE_VIOLATION = "mandatory_capture_violation"
    NO_CAPTURE_ALONG_PATH = "no_capture_along_path"
    AMBIGUOUS_OR_BLOCKED_CAPTURE_PATH = "ambiguous_or_blocked_capture_path"
    NOT_MAXIMAL_CAPTURE = "not_maximal_capture"
    WRONG_PIECE_CONTINUING_CHAIN = "wrong_piece_continuing_chain"
    NOT_SIDE_TO_MOVE = "not_side_to_move"
    UNKNOWN_PIECE = "unknown_piece"
    MOVE_AFTER_GAME_OVER = "move_after_game_over"

    def __str__(self) -> str:
        return self.value
