"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the UI depends on these ABCs, not on the
concrete controller or timer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from draughtsie.core.enums import Side

if TYPE_CHECKING:
    from draughtsie.core.board import Board
    from draughtsie.core.types import Cell
    from draughtsie.game.turn import MoveOutcome, TurnState


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a draughts game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    CONTINUING_CAPTURE = auto()  # same piece must keep capturing
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITurnTimer(ABC):
    """Interface for per-turn elapsed-time bookkeeping."""

    @abstractmethod
    def start(self, side: Side) -> None:
        """Start timing *side*'s turn."""

    @abstractmethod
    def stop(self) -> float | None:
        """Stop the running turn and record it. Returns its duration."""

    @abstractmethod
    def switch(self) -> float | None:
        """Record the running turn and start the other side's."""

    @abstractmethod
    def durations(self, side: Side) -> list[float]:
        """Recorded turn durations of *side*, oldest first."""


class IGameController(ABC):
    """The engine boundary consumed by a rendering/input client."""

    @abstractmethod
    def new_game(
        self,
        first_side: Side = Side.LIGHT,
        board: Board | None = None,
    ) -> tuple[Board, TurnState]:
        """Set up a new game and return its initial snapshot."""

    @abstractmethod
    def submit_move(self, piece_id: int, destination: Cell) -> MoveOutcome:
        """Submit a move intent. Never raises for illegal moves."""

    @abstractmethod
    def legal_destinations(self, piece_id: int) -> frozenset[Cell]:
        """Cells *piece_id* may be dropped on right now."""

    @abstractmethod
    def current_state(self) -> tuple[Board, TurnState]:
        """Read-only snapshot of the board and turn state."""
