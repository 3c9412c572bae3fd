"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from draughtsie.core.enums import Rank, Side

# Diagram character ↔ (Side, Rank)
_CHAR_MAP: dict[str, tuple[Side, Rank]] = {
    "l": (Side.LIGHT, Rank.MAN),
    "L": (Side.LIGHT, Rank.KING),
    "d": (Side.DARK, Rank.MAN),
    "D": (Side.DARK, Rank.KING),
}

_DIAGRAM_CHARS: dict[tuple[Side, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece value. ``id`` stays the same for the whole game."""

    id: int
    side: Side
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def crowned(self) -> Piece:
        """Same piece (same id) promoted to king."""
        return replace(self, rank=Rank.KING)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (``l``/``L`` light, ``d``/``D`` dark)."""
        return _DIAGRAM_CHARS[(self.side, self.rank)]

    @classmethod
    def from_char(cls, piece_id: int, char: str) -> Piece:
        """Create a piece from a diagram character, e.g. 'D' → dark king."""
        try:
            side, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(piece_id, side, rank)
