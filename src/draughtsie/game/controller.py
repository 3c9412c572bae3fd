"""GameController — the single entry point a client talks to.

Coordinates: GameState, TurnTimer, event listeners.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from draughtsie.core.board import Board
from draughtsie.core.enums import Side
from draughtsie.core.types import Cell
from draughtsie.game.clock import TurnTimer
from draughtsie.game.interfaces import GamePhase, IGameController
from draughtsie.game.state import GameState
from draughtsie.game.turn import Applied, MoveOutcome, Rejected, TurnState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Applied, "GameState"], None]
RejectedCallback = Callable[[int, Rejected], None]  # piece id, rejection
GameOverCallback = Callable[[Side], None]  # winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates and applies moves, times turns, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). Each call runs to completion; a rejected move
    leaves every piece of state untouched.
    """

    __slots__ = ("_state", "_timer", "_game_over_reported", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._timer = TurnTimer()
        self._game_over_reported = False
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def timer(self) -> TurnTimer:
        return self._timer

    @property
    def turn(self) -> TurnState:
        return self._state.turn

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        first_side: Side = Side.LIGHT,
        board: Board | None = None,
    ) -> tuple[Board, TurnState]:
        self._state = GameState()
        self._state.setup(board, first_side)
        self._game_over_reported = False

        self._timer.reset()
        _LOGGER.info("New game, %s to move", first_side)
        _LOGGER.debug("Starting position:\n%s", self._state.board.to_diagram())

        self._emit_phase(self._state.phase)
        if self._state.is_game_over:
            self._report_game_over()
        else:
            self._timer.start(first_side)
        return self.current_state()

    def submit_move(self, piece_id: int, destination: Cell) -> MoveOutcome:
        side_before = self._state.side_to_move
        outcome = self._state.submit_move(piece_id, destination)

        if isinstance(outcome, Rejected):
            _LOGGER.debug(
                "Rejected piece %d -> %s: %s", piece_id, destination, outcome.reason
            )
            for cb in self.events.on_rejected:
                cb(piece_id, outcome)
            return outcome

        _LOGGER.info(
            "Ply %d, %s piece %d: %s%s",
            self._state.ply_count,
            side_before,
            piece_id,
            self._state.move_history[-1].notation,
            " (crowned)" if outcome.promoted else "",
        )

        if self._state.is_game_over:
            self._timer.stop()
        elif self._state.side_to_move != side_before:
            self._timer.switch()

        for cb in self.events.on_move:
            cb(outcome, self._state)
        self._emit_phase(self._state.phase)

        if outcome.winner is not None:
            self._report_game_over()
        return outcome

    def legal_destinations(self, piece_id: int) -> frozenset[Cell]:
        return self._state.legal_destinations(piece_id)

    def current_state(self) -> tuple[Board, TurnState]:
        return self._state.board.copy(), self._state.turn

    # ── Internal helpers ─────────────────────────────────────────────────

    def _report_game_over(self) -> None:
        winner = self._state.turn.winner
        if self._game_over_reported or winner is None:
            return
        self._game_over_reported = True
        _LOGGER.info("Game over, %s wins", winner)
        for cb in self.events.on_game_over:
            cb(winner)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
