"""Internationalisation strings for the Draughtsie UI.

Usage::

    from draughtsie.ui.i18n import t, set_language

    set_language("Polish")
    print(t().btn_new_game)          # "Nowa gra"
    print(t().wins.format(side=t().side_name(Side.DARK)))
"""

from __future__ import annotations

from dataclasses import dataclass

from draughtsie.core.enums import Side


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_flip_board: str
    menu_quit: str
    menu_settings: str
    menu_language: str
    menu_board_theme: str
    menu_show_legal: str

    status_ready: str
    status_to_move: str  # "{side} to move"
    status_continue_capture: str  # "{side} must continue capturing"
    status_game_over: str  # "Game over - {side} wins"
    status_illegal_move: str  # "Illegal move: {reason}"

    # ── Side panel ───────────────────────────────────────────────────────
    times_light: str
    times_dark: str
    time_entry: str  # "Move {n}: {seconds:.3f} s"
    pieces_left: str  # "Pieces: {light} - {dark}"
    btn_new_game: str
    btn_flip: str

    # ── Results dialog ───────────────────────────────────────────────────
    game_over_title: str
    game_over_header: str
    wins: str  # "{side} wins."
    play_again_question: str
    btn_play_again: str
    btn_exit: str

    side_light: str
    side_dark: str

    def side_name(self, side: Side) -> str:
        return self.side_light if side == Side.LIGHT else self.side_dark


_EN = Strings(
    window_title="Draughtsie",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_flip_board="&Flip Board",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_language="Language",
    menu_board_theme="Board theme",
    menu_show_legal="Show legal moves",
    status_ready="Ready",
    status_to_move="{side} to move",
    status_continue_capture="{side} must continue capturing",
    status_game_over="Game over - {side} wins",
    status_illegal_move="Illegal move: {reason}",
    times_light="Move times - White:",
    times_dark="Move times - Red:",
    time_entry="Move {n}: {seconds:.3f} s",
    pieces_left="Pieces: {light} - {dark}",
    btn_new_game="New Game",
    btn_flip="Flip",
    game_over_title="Game over",
    game_over_header="The game has ended!",
    wins="{side} wins.",
    play_again_question="Do you want to play again?",
    btn_play_again="Play again",
    btn_exit="Exit",
    side_light="White",
    side_dark="Red",
)

_PL = Strings(
    window_title="Warcaby",
    menu_game="&Gra",
    menu_new_game="&Nowa gra",
    menu_flip_board="&Obróć planszę",
    menu_quit="&Zakończ",
    menu_settings="&Ustawienia",
    menu_language="Język",
    menu_board_theme="Motyw planszy",
    menu_show_legal="Pokazuj możliwe ruchy",
    status_ready="Gotowe",
    status_to_move="Ruch: {side}",
    status_continue_capture="{side} musi kontynuować bicie",
    status_game_over="Koniec gry - wygrał {side}",
    status_illegal_move="Niedozwolony ruch: {reason}",
    times_light="Czas ruchów BIAŁY:",
    times_dark="Czas ruchów CZERWONY:",
    time_entry="Ruch {n}: {seconds:.3f} s",
    pieces_left="Pionki: {light} - {dark}",
    btn_new_game="Nowa gra",
    btn_flip="Obróć",
    game_over_title="Koniec gry",
    game_over_header="Gra zakończona!",
    wins="Wygrał gracz: {side}",
    play_again_question="Czy chcesz zagrać ponownie?",
    btn_play_again="Zagraj ponownie",
    btn_exit="Wyjście",
    side_light="Biały",
    side_dark="Czerwony",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Polish": _PL,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
