"""Turn state and move outcome value objects.

``TurnState`` is a tagged union of three frozen variants; every transition
of :class:`~draughtsie.game.state.GameState` produces a fresh instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias, Union

from draughtsie.core.enums import RejectReason, Side
from draughtsie.core.types import Cell
from draughtsie.game.interfaces import GamePhase


@dataclass(frozen=True, slots=True)
class AwaitingMove:
    """*side* is to move; ``capturers`` must capture if non-empty."""

    side: Side
    capturers: frozenset[int] = field(default_factory=frozenset)

    @property
    def side_to_move(self) -> Side | None:
        return self.side

    @property
    def chain_piece(self) -> int | None:
        return None

    @property
    def capture_pending(self) -> bool:
        return bool(self.capturers)

    @property
    def winner(self) -> Side | None:
        return None

    @property
    def phase(self) -> GamePhase:
        return GamePhase.AWAITING_MOVE


@dataclass(frozen=True, slots=True)
class Continuing:
    """*piece_id* is mid-chain and must keep capturing."""

    side: Side
    piece_id: int

    @property
    def side_to_move(self) -> Side | None:
        return self.side

    @property
    def chain_piece(self) -> int | None:
        return self.piece_id

    @property
    def capturers(self) -> frozenset[int]:
        return frozenset((self.piece_id,))

    @property
    def capture_pending(self) -> bool:
        return True

    @property
    def winner(self) -> Side | None:
        return None

    @property
    def phase(self) -> GamePhase:
        return GamePhase.CONTINUING_CAPTURE


@dataclass(frozen=True, slots=True)
class Terminal:
    """Game over; *winner* won."""

    winner: Side

    @property
    def side_to_move(self) -> Side | None:
        return None

    @property
    def chain_piece(self) -> int | None:
        return None

    @property
    def capturers(self) -> frozenset[int]:
        return frozenset()

    @property
    def capture_pending(self) -> bool:
        return False

    @property
    def phase(self) -> GamePhase:
        return GamePhase.GAME_OVER


TurnState: TypeAlias = Union[AwaitingMove, Continuing, Terminal]


# ── Move outcomes ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Rejected:
    """The move was not applied; the board is unchanged."""

    reason: RejectReason

    @property
    def accepted(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Applied:
    """The move was applied.

    ``path`` holds the visited cells (start first), ``captured`` the removed
    piece ids in capture order. ``winner`` is set only on the move that
    ended the game.
    """

    piece_id: int
    path: tuple[Cell, ...]
    captured: tuple[int, ...]
    promoted: bool
    state: TurnState
    winner: Side | None = None

    @property
    def accepted(self) -> bool:
        return True

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)


MoveOutcome: TypeAlias = Union[Rejected, Applied]
