"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from draughtsie.core.enums import Side
from draughtsie.core.types import Cell
from draughtsie.game.controller import GameController
from draughtsie.game.interfaces import GamePhase
from draughtsie.game.state import GameState
from draughtsie.game.turn import Applied, Rejected
from draughtsie.ui.board.board_view import BoardView
from draughtsie.ui.dialogs.result_dialog import ResultDialog
from draughtsie.ui.i18n import LANGUAGES, set_language, t
from draughtsie.ui.panels.control_panel import ControlPanel
from draughtsie.ui.panels.move_times_panel import MoveTimesPanel
from draughtsie.ui.settings import AppSettings
from draughtsie.ui.styles.theme import BOARD_THEMES, BoardTheme

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window for Draughtsie (two players, one board)."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(760, 560)
        self.resize(960, 680)

        self._controller = controller if controller is not None else GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()
        self._apply_settings()

        # Start with a default game
        self._start_new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (left)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._times_panel = MoveTimesPanel()
        right.addWidget(self._times_panel, stretch=1)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(260)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        # Game menu
        self._menu_game = menu_bar.addMenu(s.menu_game)
        assert self._menu_game is not None

        self._act_new_game = QAction(s.menu_new_game, self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._start_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_flip = QAction(s.menu_flip_board, self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # Settings menu
        self._menu_settings = menu_bar.addMenu(s.menu_settings)
        assert self._menu_settings is not None

        self._act_show_legal = QAction(s.menu_show_legal, self)
        self._act_show_legal.setCheckable(True)
        self._act_show_legal.setChecked(self._settings.show_legal_moves)
        self._act_show_legal.toggled.connect(self._on_show_legal_toggled)
        self._menu_settings.addAction(self._act_show_legal)

        self._menu_language = self._menu_settings.addMenu(s.menu_language)
        assert self._menu_language is not None
        self._language_group = QActionGroup(self)
        for language in LANGUAGES:
            act = QAction(language, self)
            act.setCheckable(True)
            act.setChecked(language == self._settings.language)
            act.triggered.connect(lambda checked, lang=language: self._on_language(lang))
            self._language_group.addAction(act)
            self._menu_language.addAction(act)

        self._menu_theme = self._menu_settings.addMenu(s.menu_board_theme)
        assert self._menu_theme is not None
        self._theme_group = QActionGroup(self)
        for name in BOARD_THEMES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setChecked(name == self._settings.board_theme)
            act.triggered.connect(lambda checked, n=name: self._on_theme(n))
            self._theme_group.addAction(act)
            self._menu_theme.addAction(act)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.move_requested.connect(self._on_move_requested)
        self._board_view.board_scene.set_destination_provider(
            self._controller.legal_destinations
        )
        self._control_panel.new_game_clicked.connect(self._start_new_game)
        self._control_panel.flip_clicked.connect(self._on_flip)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks (idempotent)."""
        events = self._controller.events
        self._replace_callback(events.on_move, self._on_game_move)
        self._replace_callback(events.on_rejected, self._on_move_rejected)
        self._replace_callback(events.on_game_over, self._on_game_over)
        self._replace_callback(events.on_phase_changed, self._on_phase_changed)

    def _disconnect_game_events(self) -> None:
        """Detach this window from GameController callbacks."""
        events = self._controller.events
        self._remove_callback(events.on_move, self._on_game_move)
        self._remove_callback(events.on_rejected, self._on_move_rejected)
        self._remove_callback(events.on_game_over, self._on_game_over)
        self._remove_callback(events.on_phase_changed, self._on_phase_changed)

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Game lifecycle ───────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def times_panel(self) -> MoveTimesPanel:
        return self._times_panel

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    def _start_new_game(self) -> None:
        self._connect_game_events()
        board, turn = self._controller.new_game()
        scene = self._board_view.board_scene
        scene.set_board(board, turn)
        scene.highlight_last_move(None)
        scene.set_interactive(not self._controller.state.is_game_over)
        self._times_panel.clear()
        self._update_piece_counts()
        self._update_status()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._disconnect_game_events()
        super().closeEvent(event)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_move_requested(self, piece_id: int, destination: Cell) -> None:
        """Handle a drop from the board UI."""
        self._controller.submit_move(piece_id, destination)

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        self._settings.flipped = not scene.is_flipped()
        scene.set_flipped(self._settings.flipped)

    def _on_show_legal_toggled(self, checked: bool) -> None:
        self._settings.show_legal_moves = checked
        self._board_view.board_scene.set_show_legal_moves(checked)

    def _on_language(self, language: str) -> None:
        self._settings.language = language
        set_language(language)
        self.retranslate_ui()

    def _on_theme(self, name: str) -> None:
        self._settings.board_theme = name
        self._board_view.board_scene.set_theme(BoardTheme.by_name(name))

    def _apply_settings(self) -> None:
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()

        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_flipped(s.flipped)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        self.setWindowTitle(s.window_title)
        # Menu bar
        self._menu_game.setTitle(s.menu_game)
        self._act_new_game.setText(s.menu_new_game)
        self._act_flip.setText(s.menu_flip_board)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._act_show_legal.setText(s.menu_show_legal)
        self._menu_language.setTitle(s.menu_language)
        self._menu_theme.setTitle(s.menu_board_theme)
        # Child widgets
        self._times_panel.retranslate_ui()
        self._control_panel.retranslate_ui()
        self._update_status()

    # ── Game event callbacks ─────────────────────────────────────────────

    def _on_game_move(self, outcome: Applied, state: GameState) -> None:
        """Called after every accepted move or hop."""
        scene = self._board_view.board_scene
        scene.set_board(state.board.copy(), state.turn)
        scene.highlight_last_move(outcome.path)

        # A finished turn leaves a fresh lap for the side that just moved.
        record = state.move_history[-1]
        if state.side_to_move != record.side:
            timing = self._controller.timer.last(record.side)
            if timing is not None:
                self._times_panel.add_timing(timing)

        self._update_piece_counts()
        self._update_status()

    def _on_move_rejected(self, _piece_id: int, outcome: Rejected) -> None:
        reason = outcome.reason.value.replace("_", " ")
        self._status_label.setText(t().status_illegal_move.format(reason=reason))

    def _on_game_over(self, winner: Side) -> None:
        self._board_view.board_scene.set_interactive(False)
        self._update_status()
        # Leave the controller callback before opening a modal dialog.
        QTimer.singleShot(0, lambda: self._ask_play_again(winner))

    def _on_phase_changed(self, phase: GamePhase) -> None:
        self._board_view.board_scene.set_interactive(phase != GamePhase.GAME_OVER)

    def _ask_play_again(self, winner: Side) -> None:
        if ResultDialog.ask(winner, self):
            self._start_new_game()
        else:
            self.close()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _update_piece_counts(self) -> None:
        board = self._controller.state.board
        self._times_panel.set_piece_counts(board.count(Side.LIGHT), board.count(Side.DARK))

    def _update_status(self) -> None:
        s = t()
        turn = self._controller.turn
        if turn.winner is not None:
            text = s.status_game_over.format(side=s.side_name(turn.winner))
        elif turn.side_to_move is None:
            text = s.status_ready
        elif turn.chain_piece is not None:
            text = s.status_continue_capture.format(side=s.side_name(turn.side_to_move))
        else:
            text = s.status_to_move.format(side=s.side_name(turn.side_to_move))
        self._status_label.setText(text)
