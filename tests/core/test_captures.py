"""Tests for CaptureResolver — maximal capture chains."""

from draughtsie.core.board import Board
from draughtsie.core.captures import CaptureResolver, crown_if_needed
from draughtsie.core.enums import Side
from draughtsie.core.types import Cell

EMPTY = "........"


def _board(*rows: str) -> Board:
    return Board.from_diagram("\n".join(rows))


def _double_jump() -> Board:
    # id 0: dark e5, id 1: dark c3, id 2: light b2
    return _board(EMPTY, EMPTY, EMPTY, "....d...", EMPTY, "..d.....", ".l......", EMPTY)


def _fork() -> Board:
    # Light d2 (id 3) takes one on the right or two on the left.
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


def _crowning_chain() -> Board:
    # Light d6 (id 1) crowns on b8 and continues as a king over f4.
    return _board(
        EMPTY,
        "..d.....",
        "...l....",
        EMPTY,
        ".....d..",
        EMPTY,
        EMPTY,
        EMPTY,
    )


class TestSequences:
    def test_double_jump(self) -> None:
        seqs = CaptureResolver(_double_jump()).maximal_sequences(2)
        assert len(seqs) == 1
        assert seqs[0].path == (Cell(1, 6), Cell(3, 4), Cell(5, 2))
        assert seqs[0].captured == (1, 0)
        assert str(seqs[0]) == "b2xd4xf6"

    def test_maximal_filters_shorter_branch(self) -> None:
        resolver = CaptureResolver(_fork())
        assert len(resolver.all_sequences(3)) == 2
        maximal = resolver.maximal_sequences(3)
        assert len(maximal) == 1
        assert maximal[0].path == (Cell(3, 6), Cell(1, 4), Cell(3, 2))
        assert maximal[0].capture_count == 2

    def test_no_capture(self) -> None:
        resolver = CaptureResolver(_fork())
        assert resolver.maximal_sequences(4) == []
        assert not resolver.has_capture(4)

    def test_capturers(self) -> None:
        assert CaptureResolver(_fork()).capturers(Side.LIGHT) == frozenset({3})
        # Both dark men beside d2 could take it if it were dark to move.
        assert CaptureResolver(_fork()).capturers(Side.DARK) == frozenset({1, 2})

    def test_search_leaves_board_untouched(self) -> None:
        board = _double_jump()
        before = board.copy()
        CaptureResolver(board).maximal_sequences(2)
        assert board == before

    def test_crowning_mid_chain_extends_sequence(self) -> None:
        seqs = CaptureResolver(_crowning_chain()).maximal_sequences(1)
        assert {seq.end for seq in seqs} == {Cell(6, 5), Cell(7, 6)}
        assert all(seq.captured == (0, 2) for seq in seqs)
        assert all(seq.path[1] == Cell(1, 0) for seq in seqs)

    def test_prefix(self) -> None:
        seq = CaptureResolver(_double_jump()).maximal_sequences(2)[0]
        first = seq.prefix(1)
        assert first.path == (Cell(1, 6), Cell(3, 4))
        assert first.captured == (1,)
        assert first.capture_count == 1


class TestCrowning:
    def test_man_on_far_row_is_crowned(self) -> None:
        board = _board(".l......", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        assert crown_if_needed(board, 0)
        assert board.get(0).is_king

    def test_dark_man_crowned_on_bottom_row(self) -> None:
        board = _board(EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, "d.......")
        assert crown_if_needed(board, 0)

    def test_man_elsewhere_unchanged(self) -> None:
        board = _board(EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, "..l.....", EMPTY, EMPTY)
        assert not crown_if_needed(board, 0)

    def test_king_not_crowned_twice(self) -> None:
        board = _board(".L......", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        assert not crown_if_needed(board, 0)
