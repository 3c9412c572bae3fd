"""Tests for GameController — the orchestrator."""

import logging

import pytest

from draughtsie.core.board import Board
from draughtsie.core.enums import RejectReason, Side
from draughtsie.core.types import Cell
from draughtsie.game.controller import GameController
from draughtsie.game.interfaces import GamePhase
from draughtsie.game.turn import Applied, AwaitingMove, Continuing, Rejected, Terminal

EMPTY = "........"


def _board(*rows: str) -> Board:
    return Board.from_diagram("\n".join(rows))


def _blocking_board() -> Board:
    # Light d4 (id 2) to c5 leaves dark a7 (id 0) without a move.
    return _board(EMPTY, "d.......", ".l......", EMPTY, "...l....", EMPTY, EMPTY, EMPTY)


def _fork() -> Board:
    return _board(
        EMPTY,
        EMPTY,
        EMPTY,
        "..d.....",
        EMPTY,
        "..d.d...",
        "...l....",
        "......l.",
    )


class TestNewGame:
    def test_returns_board_and_turn(self) -> None:
        ctrl = GameController()
        board, turn = ctrl.new_game()
        assert board == Board.initial()
        assert turn == AwaitingMove(Side.LIGHT)
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE

    def test_returned_board_is_a_snapshot(self) -> None:
        ctrl = GameController()
        board, _ = ctrl.new_game()
        board.clear()
        assert ctrl.state.board.count(Side.LIGHT) == 12

    def test_first_side(self) -> None:
        ctrl = GameController()
        _, turn = ctrl.new_game(first_side=Side.DARK)
        assert turn.side_to_move == Side.DARK
        assert ctrl.timer.active_side == Side.DARK

    def test_phase_event(self) -> None:
        ctrl = GameController()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.new_game()
        assert phases == [GamePhase.AWAITING_MOVE]

    def test_lost_start_reports_winner(self) -> None:
        ctrl = GameController()
        winners: list[Side] = []
        ctrl.events.on_game_over.append(winners.append)
        board = _board(EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, "..l.....", EMPTY, EMPTY)
        _, turn = ctrl.new_game(first_side=Side.DARK, board=board)
        assert turn == Terminal(Side.LIGHT)
        assert winners == [Side.LIGHT]
        assert not ctrl.timer.is_running

    def test_new_game_resets(self) -> None:
        ctrl = GameController()
        ctrl.new_game()
        ctrl.submit_move(12, Cell(1, 4))
        ctrl.new_game()
        assert ctrl.state.ply_count == 0
        assert ctrl.timer.durations(Side.LIGHT) == []


class TestSubmitMove:
    def test_legal_move(self) -> None:
        ctrl = GameController()
        ctrl.new_game()
        outcome = ctrl.submit_move(12, Cell(1, 4))
        assert isinstance(outcome, Applied)
        assert outcome.accepted
        assert ctrl.turn == AwaitingMove(Side.DARK)

    def test_illegal_move(self) -> None:
        ctrl = GameController()
        ctrl.new_game()
        outcome = ctrl.submit_move(12, Cell(0, 4))
        assert isinstance(outcome, Rejected)
        assert outcome.reason == RejectReason.UNPLAYABLE_CELL
        assert ctrl.turn == AwaitingMove(Side.LIGHT)

    def test_move_event(self) -> None:
        ctrl = GameController()
        seen: list[Applied] = []
        ctrl.events.on_move.append(lambda outcome, _state: seen.append(outcome))
        ctrl.new_game()
        ctrl.submit_move(12, Cell(1, 4))
        assert len(seen) == 1
        assert seen[0].piece_id == 12

    def test_rejected_event(self) -> None:
        ctrl = GameController()
        seen: list[tuple[int, Rejected]] = []
        ctrl.events.on_rejected.append(lambda pid, outcome: seen.append((pid, outcome)))
        ctrl.new_game()
        ctrl.submit_move(8, Cell(0, 3))
        assert seen == [(8, Rejected(RejectReason.NOT_SIDE_TO_MOVE))]

    def test_phase_follows_chain(self) -> None:
        ctrl = GameController()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.new_game(board=_fork())
        ctrl.submit_move(3, Cell(1, 4))
        assert ctrl.turn == Continuing(Side.LIGHT, 3)
        ctrl.submit_move(3, Cell(3, 2))
        assert phases == [
            GamePhase.AWAITING_MOVE,
            GamePhase.CONTINUING_CAPTURE,
            GamePhase.AWAITING_MOVE,
        ]

    def test_legal_destinations(self) -> None:
        ctrl = GameController()
        ctrl.new_game(board=_fork())
        assert ctrl.legal_destinations(3) == frozenset({Cell(1, 4), Cell(3, 2)})

    def test_current_state_snapshot(self) -> None:
        ctrl = GameController()
        ctrl.new_game()
        board, turn = ctrl.current_state()
        board.move(12, Cell(1, 4))
        assert ctrl.state.board.cell_of(12) == Cell(0, 5)
        assert turn == ctrl.turn


class TestGameOver:
    def test_winner_reported_once(self) -> None:
        ctrl = GameController()
        winners: list[Side] = []
        ctrl.events.on_game_over.append(winners.append)
        ctrl.new_game(board=_blocking_board())

        outcome = ctrl.submit_move(2, Cell(2, 3))
        assert isinstance(outcome, Applied)
        assert outcome.winner == Side.LIGHT

        late = ctrl.submit_move(1, Cell(2, 1))
        assert late == Rejected(RejectReason.MOVE_AFTER_GAME_OVER)
        assert winners == [Side.LIGHT]

    def test_timer_stops(self) -> None:
        ctrl = GameController()
        ctrl.new_game(board=_blocking_board())
        ctrl.submit_move(2, Cell(2, 3))
        assert not ctrl.timer.is_running
        assert len(ctrl.timer.durations(Side.LIGHT)) == 1


class TestTiming:
    def test_chain_is_one_turn(self) -> None:
        ctrl = GameController()
        ctrl.new_game(board=_fork())
        ctrl.submit_move(3, Cell(1, 4))
        assert ctrl.timer.durations(Side.LIGHT) == []
        assert ctrl.timer.active_side == Side.LIGHT
        ctrl.submit_move(3, Cell(3, 2))
        assert len(ctrl.timer.durations(Side.LIGHT)) == 1
        assert ctrl.timer.active_side == Side.DARK

    def test_rejected_move_does_not_switch(self) -> None:
        ctrl = GameController()
        ctrl.new_game()
        ctrl.submit_move(12, Cell(0, 4))
        assert ctrl.timer.active_side == Side.LIGHT
        assert ctrl.timer.durations(Side.LIGHT) == []


class TestLogging:
    def test_applied_move_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        ctrl.new_game()
        with caplog.at_level(logging.INFO, logger="draughtsie.game.controller"):
            ctrl.submit_move(12, Cell(1, 4))
        assert "Ply 1" in caplog.text
        assert "a3-b4" in caplog.text

    def test_rejection_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        ctrl.new_game()
        with caplog.at_level(logging.DEBUG, logger="draughtsie.game.controller"):
            ctrl.submit_move(12, Cell(0, 4))
        records = [r for r in caplog.records if r.levelno == logging.DEBUG]
        assert records
        assert "unplayable" in records[-1].getMessage().lower()

    def test_new_game_logs_position_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        with caplog.at_level(logging.DEBUG, logger="draughtsie.game.controller"):
            ctrl.new_game()
        assert ".d.d.d.d" in caplog.text
