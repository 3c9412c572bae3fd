"""Game state machine — turn transitions, capture chains and termination."""

from __future__ import annotations

from dataclasses import dataclass, field

from draughtsie.core.board import Board
from draughtsie.core.captures import CaptureResolver, crown_if_needed
from draughtsie.core.enums import GameResult, MoveKind, RejectReason, Side
from draughtsie.core.move import CaptureSequence
from draughtsie.core.rules import Rules
from draughtsie.core.types import Cell
from draughtsie.core.validator import MoveValidator
from draughtsie.game.interfaces import GamePhase
from draughtsie.game.turn import (
    Applied,
    AwaitingMove,
    Continuing,
    MoveOutcome,
    Rejected,
    Terminal,
    TurnState,
)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single applied move (one hop or one atomic chain) in the history."""

    side: Side
    piece_id: int
    path: tuple[Cell, ...]
    captured: tuple[int, ...] = ()
    promoted: bool = False

    @property
    def notation(self) -> str:
        sep = "x" if self.captured else "-"
        return sep.join(str(cell) for cell in self.path)


@dataclass
class GameState:
    """Owns the board and drives the turn state machine.

    Pure game logic without timing or UI. ``submit_move`` is
    the only mutating entry point; validation always completes before the
    board is touched.
    """

    board: Board = field(default_factory=Board, init=False)
    turn: TurnState = field(default=AwaitingMove(Side.LIGHT), init=False)
    first_side: Side = field(default=Side.LIGHT, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    started: bool = field(default=False, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, first_side: Side = Side.LIGHT) -> None:
        """Initialise (or reset) the game from *board* or the standard start."""
        self.board = board.copy() if board is not None else Board.initial()
        # Men placed on their far row start as kings.
        for piece in self.board.pieces():
            crown_if_needed(self.board, piece.id)
        self.first_side = first_side
        self.move_history.clear()
        self.started = True
        self.turn = self._turn_for(first_side)

    # ── Move submission ──────────────────────────────────────────────────

    def submit_move(self, piece_id: int, destination: Cell) -> MoveOutcome:
        turn = self.turn
        if isinstance(turn, Terminal):
            return Rejected(RejectReason.MOVE_AFTER_GAME_OVER)

        piece = self.board.get(piece_id)
        if piece is None:
            return Rejected(RejectReason.UNKNOWN_PIECE)
        if piece.side != turn.side:
            return Rejected(RejectReason.NOT_SIDE_TO_MOVE)
        if isinstance(turn, Continuing) and piece_id != turn.piece_id:
            return Rejected(RejectReason.WRONG_PIECE_CONTINUING_CHAIN)

        # A capturing piece may name any landing cell of a maximal chain,
        # including cells several hops away.
        if piece_id in turn.capturers:
            sequence = self._match_sequence(piece_id, destination)
            if sequence is not None:
                return self._apply_capture(sequence, piece.side)

        result = MoveValidator(self.board).classify(
            piece_id, destination, capture_pending=turn.capture_pending
        )
        if result.kind == MoveKind.INVALID:
            assert result.reason is not None
            return Rejected(result.reason)
        if result.kind == MoveKind.SIMPLE:
            return self._apply_simple(piece_id, piece.side, destination)
        return Rejected(RejectReason.NOT_MAXIMAL_CAPTURE)

    def legal_destinations(self, piece_id: int) -> frozenset[Cell]:
        """Cells *piece_id* may be dropped on, without mutating anything."""
        turn = self.turn
        piece = self.board.get(piece_id)
        if isinstance(turn, Terminal) or piece is None or piece.side != turn.side:
            return frozenset()
        if turn.capture_pending:
            if piece_id not in turn.capturers:
                return frozenset()
            return frozenset(
                cell
                for seq in CaptureResolver(self.board).maximal_sequences(piece_id)
                for cell in seq.path[1:]
            )
        return frozenset(MoveValidator(self.board).simple_destinations(piece_id))

    def maximal_sequences(self, piece_id: int) -> list[CaptureSequence]:
        """Maximal capture chains of *piece_id* on the current board."""
        return CaptureResolver(self.board).maximal_sequences(piece_id)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Side | None:
        return self.turn.side_to_move

    @property
    def phase(self) -> GamePhase:
        if not self.started:
            return GamePhase.NOT_STARTED
        return self.turn.phase

    @property
    def is_game_over(self) -> bool:
        return isinstance(self.turn, Terminal)

    @property
    def result(self) -> GameResult:
        if isinstance(self.turn, Terminal):
            return GameResult.win_for(self.turn.winner)
        return GameResult.IN_PROGRESS

    @property
    def ply_count(self) -> int:
        """Number of applied moves (a hop-by-hop chain counts each hop)."""
        return len(self.move_history)

    # ── Internal ─────────────────────────────────────────────────────────

    def _match_sequence(self, piece_id: int, destination: Cell) -> CaptureSequence | None:
        """Shortest prefix of a maximal chain that lands on *destination*."""
        sequences = CaptureResolver(self.board).maximal_sequences(piece_id)
        if not sequences:
            return None
        longest = sequences[0].capture_count
        for hops in range(1, longest + 1):
            for seq in sequences:
                if seq.path[hops] == destination:
                    return seq.prefix(hops)
        return None

    def _apply_simple(self, piece_id: int, side: Side, destination: Cell) -> Applied:
        origin = self.board.cell_of(piece_id)
        self.board.move(piece_id, destination)
        promoted = crown_if_needed(self.board, piece_id)
        self.move_history.append(
            MoveRecord(side, piece_id, (origin, destination), promoted=promoted)
        )
        self.turn = self._turn_for(side.opposite)
        return self._applied(piece_id, (origin, destination), (), promoted)

    def _apply_capture(self, sequence: CaptureSequence, side: Side) -> Applied:
        piece_id = sequence.piece_id
        promoted = False
        for landing, victim in zip(sequence.path[1:], sequence.captured):
            self.board.remove(self.board.cell_of(victim))
            self.board.move(piece_id, landing)
            promoted = crown_if_needed(self.board, piece_id) or promoted

        self.move_history.append(
            MoveRecord(side, piece_id, sequence.path, sequence.captured, promoted)
        )
        if CaptureResolver(self.board).has_capture(piece_id):
            self.turn = Continuing(side, piece_id)
        else:
            self.turn = self._turn_for(side.opposite)
        return self._applied(piece_id, sequence.path, sequence.captured, promoted)

    def _applied(
        self,
        piece_id: int,
        path: tuple[Cell, ...],
        captured: tuple[int, ...],
        promoted: bool,
    ) -> Applied:
        winner = self.turn.winner if isinstance(self.turn, Terminal) else None
        return Applied(
            piece_id=piece_id,
            path=path,
            captured=captured,
            promoted=promoted,
            state=self.turn,
            winner=winner,
        )

    def _turn_for(self, side: Side) -> TurnState:
        """Turn state for *side* to move, after the termination check."""
        if Rules.is_lost(self.board, side):
            return Terminal(side.opposite)
        return AwaitingMove(side, CaptureResolver(self.board).capturers(side))
