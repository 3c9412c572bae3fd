"""Tests for MainWindow wiring between controller and widgets."""

from __future__ import annotations

import pytest

from draughtsie.core.board import Board
from draughtsie.core.enums import Side
from draughtsie.core.types import Cell
from draughtsie.ui import main_window as main_window_module
from draughtsie.ui.main_window import MainWindow
from draughtsie.ui.settings import AppSettings

EMPTY = "........"


class _ImmediateTimer:
    @staticmethod
    def singleShot(_msec: int, callback) -> None:
        callback()


class TestMainWindow:
    def test_starts_with_light_to_move(self) -> None:
        window = MainWindow()
        assert window.status_text == "White to move"
        assert window.board_view.board_scene.piece_item_at(Cell(0, 5)) is not None

    def test_move_updates_board_times_and_status(self) -> None:
        window = MainWindow()
        window._on_move_requested(12, Cell(1, 4))

        scene = window.board_view.board_scene
        assert scene.piece_item_at(Cell(0, 5)) is None
        assert scene.piece_item_at(Cell(1, 4)) is not None
        assert len(window.times_panel.entries(Side.LIGHT)) == 1
        assert window.status_text == "Red to move"

    def test_rejected_move_shows_reason(self) -> None:
        window = MainWindow()
        window._on_move_requested(12, Cell(0, 4))
        assert window.status_text == "Illegal move: unplayable cell"
        assert window.board_view.board_scene.piece_item_at(Cell(0, 5)) is not None

    def test_language_switch(self) -> None:
        window = MainWindow()
        window._on_language("Polish")
        assert window.windowTitle() == "Warcaby"
        assert window.status_text == "Ruch: Biały"

    def test_settings_applied(self) -> None:
        settings = AppSettings(flipped=True, show_legal_moves=False)
        window = MainWindow(settings=settings)
        scene = window.board_view.board_scene
        assert scene.is_flipped()
        scene.select_cell(Cell(2, 5))
        assert scene.legal_dot_count == 0

    def test_flip_toggles_setting(self) -> None:
        settings = AppSettings()
        window = MainWindow(settings=settings)
        window._on_flip()
        assert settings.flipped
        assert window.board_view.board_scene.is_flipped()

    def test_game_over_play_again(self, monkeypatch: pytest.MonkeyPatch) -> None:
        asked: list[Side] = []

        def _ask(winner: Side, _parent=None) -> bool:
            asked.append(winner)
            return True

        monkeypatch.setattr(main_window_module, "QTimer", _ImmediateTimer)
        monkeypatch.setattr(main_window_module.ResultDialog, "ask", staticmethod(_ask))

        window = MainWindow()
        board = Board.from_diagram(
            "\n".join([EMPTY, "d.......", ".l......", EMPTY, "...l....", EMPTY, EMPTY, EMPTY])
        )
        window.controller.new_game(board=board)
        window._on_move_requested(2, Cell(2, 3))

        assert asked == [Side.LIGHT]
        # A fresh game was started from the dialog.
        assert window.controller.state.board == Board.initial()
        assert window.board_view.board_scene.is_interactive()
