"""MoveTimesPanel — per-side list of completed turn durations."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QListWidget, QVBoxLayout, QWidget

from draughtsie.core.enums import Side
from draughtsie.game.clock import TurnTiming
from draughtsie.ui.i18n import t


class MoveTimesPanel(QWidget):
    """Two headed lists, one per side, plus the remaining piece counts."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._timings: dict[Side, list[TurnTiming]] = {Side.LIGHT: [], Side.DARK: []}
        self._counts: tuple[int, int] | None = None
        self._headers: dict[Side, QLabel] = {}
        self._lists: dict[Side, QListWidget] = {}
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._pieces_label = QLabel()
        self._pieces_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._pieces_label)

        for side in (Side.LIGHT, Side.DARK):
            header = QLabel()
            header.setFont(QFont("Sans", 11, QFont.Weight.Bold))
            layout.addWidget(header)
            lst = QListWidget()
            lst.setSelectionMode(QListWidget.SelectionMode.NoSelection)
            layout.addWidget(lst)
            self._headers[side] = header
            self._lists[side] = lst

    def retranslate_ui(self) -> None:
        s = t()
        self._headers[Side.LIGHT].setText(s.times_light)
        self._headers[Side.DARK].setText(s.times_dark)
        for side, timings in self._timings.items():
            lst = self._lists[side]
            lst.clear()
            for timing in timings:
                lst.addItem(self._format(timing))
        self._update_pieces_label()

    # ── Public API ───────────────────────────────────────────────────────

    def add_timing(self, timing: TurnTiming) -> None:
        self._timings[timing.side].append(timing)
        lst = self._lists[timing.side]
        lst.addItem(self._format(timing))
        lst.scrollToBottom()

    def set_piece_counts(self, light: int, dark: int) -> None:
        self._counts = (light, dark)
        self._update_pieces_label()

    def clear(self) -> None:
        for side in self._timings:
            self._timings[side].clear()
            self._lists[side].clear()
        self._counts = None
        self._update_pieces_label()

    def entries(self, side: Side) -> list[str]:
        lst = self._lists[side]
        return [lst.item(i).text() for i in range(lst.count())]  # type: ignore[union-attr]

    # ── Helpers ──────────────────────────────────────────────────────────

    @staticmethod
    def _format(timing: TurnTiming) -> str:
        return t().time_entry.format(n=timing.number, seconds=timing.seconds)

    def _update_pieces_label(self) -> None:
        if self._counts is None:
            self._pieces_label.clear()
            return
        light, dark = self._counts
        self._pieces_label.setText(t().pieces_left.format(light=light, dark=dark))
