"""Turn timer — records how long each side spent on each turn."""

from __future__ import annotations

import time
from dataclasses import dataclass

from draughtsie.core.enums import Side
from draughtsie.game.interfaces import ITurnTimer


@dataclass(frozen=True, slots=True)
class TurnTiming:
    """One finished turn."""

    side: Side
    number: int  # 1-based, per side
    seconds: float


class TurnTimer(ITurnTimer):
    """Stopwatch over alternating turns.

    Uses monotonic time. A capture chain played hop by hop is one turn: the
    controller only switches the timer when the side to move changes.
    """

    __slots__ = ("_laps", "_active_side", "_turn_start", "_running")

    def __init__(self) -> None:
        self._laps: dict[Side, list[float]] = {Side.LIGHT: [], Side.DARK: []}
        self._active_side: Side | None = None
        self._turn_start: float = 0.0
        self._running: bool = False

    # ── ITurnTimer implementation ────────────────────────────────────────

    def start(self, side: Side) -> None:
        self._active_side = side
        self._turn_start = time.monotonic()
        self._running = True

    def stop(self) -> float | None:
        if not self._running or self._active_side is None:
            return None
        elapsed = self._record()
        self._running = False
        return elapsed

    def switch(self) -> float | None:
        """Record the running turn and start the other side's."""
        if self._active_side is None:
            return None
        elapsed = self._record() if self._running else None
        self._active_side = self._active_side.opposite
        self._turn_start = time.monotonic()
        self._running = True
        return elapsed

    def durations(self, side: Side) -> list[float]:
        return list(self._laps[side])

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def active_side(self) -> Side | None:
        return self._active_side

    def elapsed(self) -> float:
        """Seconds spent on the running turn so far."""
        if not self._running:
            return 0.0
        return time.monotonic() - self._turn_start

    def last(self, side: Side) -> TurnTiming | None:
        laps = self._laps[side]
        if not laps:
            return None
        return TurnTiming(side=side, number=len(laps), seconds=laps[-1])

    def reset(self) -> None:
        self._laps = {Side.LIGHT: [], Side.DARK: []}
        self._active_side = None
        self._turn_start = 0.0
        self._running = False

    # ── Internal ─────────────────────────────────────────────────────────

    def _record(self) -> float:
        assert self._active_side is not None
        elapsed = time.monotonic() - self._turn_start
        self._laps[self._active_side].append(elapsed)
        return elapsed
