"""Hop classification and capture-sequence value objects."""

from __future__ import annotations

from dataclasses import dataclass

from draughtsie.core.enums import MoveKind, RejectReason
from draughtsie.core.types import Cell


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classifying one hop of one piece."""

    kind: MoveKind
    captured: int | None = None
    reason: RejectReason | None = None

    @classmethod
    def invalid(cls, reason: RejectReason) -> Classification:
        return cls(MoveKind.INVALID, reason=reason)

    @classmethod
    def simple(cls) -> Classification:
        return cls(MoveKind.SIMPLE)

    @classmethod
    def capture(cls, captured: int) -> Classification:
        return cls(MoveKind.CAPTURE, captured=captured)

    @property
    def is_legal(self) -> bool:
        return self.kind != MoveKind.INVALID


@dataclass(frozen=True, slots=True)
class CaptureSequence:
    """One capture chain of one piece: visited cells and captured ids.

    ``path[0]`` is the start cell; ``path[i]`` is the landing cell after
    capturing ``captured[i - 1]``.
    """

    piece_id: int
    path: tuple[Cell, ...]
    captured: tuple[int, ...]

    @property
    def start(self) -> Cell:
        return self.path[0]

    @property
    def end(self) -> Cell:
        return self.path[-1]

    @property
    def capture_count(self) -> int:
        return len(self.captured)

    def prefix(self, hops: int) -> CaptureSequence:
        """The first *hops* hops of this chain."""
        return CaptureSequence(
            piece_id=self.piece_id,
            path=self.path[: hops + 1],
            captured=self.captured[:hops],
        )

    def __str__(self) -> str:
        return "x".join(str(cell) for cell in self.path)
