"""Game management layer — controller, turn timer, state machine.

Quick start::

    from draughtsie.core import Cell
    from draughtsie.game import GameController

    ctrl = GameController()
    board, turn = ctrl.new_game()
    piece = board.piece_at(Cell(0, 5))
    ctrl.submit_move(piece.id, Cell(1, 4))
"""

from draughtsie.game.clock import TurnTimer, TurnTiming
from draughtsie.game.controller import GameController, GameEvents
from draughtsie.game.interfaces import GamePhase, IGameController, ITurnTimer
from draughtsie.game.state import GameState, MoveRecord
from draughtsie.game.turn import (
    Applied,
    AwaitingMove,
    Continuing,
    MoveOutcome,
    Rejected,
    Terminal,
    TurnState,
)

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "ITurnTimer",
    # Turn state / outcomes
    "Applied",
    "AwaitingMove",
    "Continuing",
    "MoveOutcome",
    "Rejected",
    "Terminal",
    "TurnState",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "TurnTimer",
    "TurnTiming",
]
