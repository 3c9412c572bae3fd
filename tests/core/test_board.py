"""Tests for Board, Piece and Cell."""

import pytest

from draughtsie.core.board import Board
from draughtsie.core.enums import Rank, Side
from draughtsie.core.piece import Piece
from draughtsie.core.types import Cell, diagonal_between, diagonal_rays, playable_cells


class TestCell:
    def test_playable_is_dark_square(self) -> None:
        assert Cell(1, 0).is_playable
        assert not Cell(0, 0).is_playable
        assert not Cell(8, 1).is_playable

    def test_label(self) -> None:
        assert str(Cell(0, 7)) == "a1"
        assert str(Cell(2, 5)) == "c3"
        assert str(Cell(7, 0)) == "h8"

    def test_label_off_board(self) -> None:
        assert str(Cell(-1, 3)) == "(-1,3)"

    def test_playable_cells(self) -> None:
        cells = playable_cells()
        assert len(cells) == 32
        assert all(c.is_playable for c in cells)

    def test_diagonal_between(self) -> None:
        assert diagonal_between(Cell(0, 7), Cell(3, 4)) == (Cell(1, 6), Cell(2, 5))
        assert diagonal_between(Cell(2, 5), Cell(3, 4)) == ()
        assert diagonal_between(Cell(2, 5), Cell(2, 3)) is None
        assert diagonal_between(Cell(2, 5), Cell(2, 5)) is None

    def test_corner_has_one_nonempty_ray(self) -> None:
        rays = [ray for ray in diagonal_rays(Cell(0, 7)) if ray]
        assert len(rays) == 1
        assert rays[0][0] == Cell(1, 6)
        assert rays[0][-1] == Cell(7, 0)


class TestPiece:
    def test_crowned_keeps_id(self) -> None:
        man = Piece(5, Side.DARK)
        king = man.crowned()
        assert king.id == 5
        assert king.side == Side.DARK
        assert king.is_king
        assert not man.is_king

    def test_char_round_trip(self) -> None:
        for char in "lLdD":
            assert str(Piece.from_char(0, char)) == char

    def test_bad_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char(0, "x")


class TestBoardInitial:
    def test_twelve_each(self) -> None:
        board = Board.initial()
        assert board.count(Side.LIGHT) == 12
        assert board.count(Side.DARK) == 12

    def test_home_rows(self) -> None:
        board = Board.initial()
        for cell, piece in board.occupied():
            assert cell.is_playable
            assert cell.y in piece.side.home_rows
            assert piece.rank == Rank.MAN

    def test_middle_rows_empty(self) -> None:
        board = Board.initial()
        for x in range(8):
            assert board[Cell(x, 3)] is None
            assert board[Cell(x, 4)] is None

    def test_ids_in_reading_order(self) -> None:
        board = Board.initial()
        assert board[Cell(1, 0)] == Piece(0, Side.DARK)
        assert board[Cell(7, 2)] == Piece(11, Side.DARK)
        assert board[Cell(0, 5)] == Piece(12, Side.LIGHT)
        assert board[Cell(6, 7)] == Piece(23, Side.LIGHT)

    def test_ids_unique(self) -> None:
        board = Board.initial()
        ids = [p.id for p in board.pieces()]
        assert len(ids) == len(set(ids)) == 24


class TestBoardMutation:
    def test_place_and_lookup(self) -> None:
        board = Board()
        board.place(Piece(7, Side.LIGHT), Cell(2, 5))
        assert board.piece_at(Cell(2, 5)) == Piece(7, Side.LIGHT)
        assert board.cell_of(7) == Cell(2, 5)
        assert 7 in board

    def test_place_unplayable_raises(self) -> None:
        with pytest.raises(ValueError):
            Board().place(Piece(0, Side.LIGHT), Cell(0, 0))

    def test_place_occupied_raises(self) -> None:
        board = Board()
        board.place(Piece(0, Side.LIGHT), Cell(1, 0))
        with pytest.raises(ValueError):
            board.place(Piece(1, Side.DARK), Cell(1, 0))

    def test_place_duplicate_id_raises(self) -> None:
        board = Board()
        board.place(Piece(0, Side.LIGHT), Cell(1, 0))
        with pytest.raises(ValueError):
            board.place(Piece(0, Side.LIGHT), Cell(3, 0))

    def test_remove(self) -> None:
        board = Board()
        board.place(Piece(0, Side.DARK), Cell(3, 4))
        removed = board.remove(Cell(3, 4))
        assert removed.id == 0
        assert board.is_empty(Cell(3, 4))
        assert 0 not in board
        assert board.get(0) is None

    def test_remove_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            Board().remove(Cell(3, 4))

    def test_move(self) -> None:
        board = Board()
        board.place(Piece(0, Side.LIGHT), Cell(2, 5))
        board.move(0, Cell(3, 4))
        assert board.is_empty(Cell(2, 5))
        assert board.cell_of(0) == Cell(3, 4)

    def test_promote_in_place(self) -> None:
        board = Board()
        board.place(Piece(3, Side.LIGHT), Cell(1, 0))
        king = board.promote(3)
        assert king.is_king
        assert board[Cell(1, 0)] == king

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone.move(12, Cell(1, 4))
        assert board.cell_of(12) == Cell(0, 5)
        assert board != clone
        assert board == Board.initial()

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board.pieces() == []


class TestDiagram:
    def test_round_trip(self) -> None:
        diagram = "\n".join(
            [
                ".d.D....",
                "........",
                "........",
                "........",
                "........",
                "..l.....",
                "........",
                "L.......",
            ]
        )
        board = Board.from_diagram(diagram)
        assert board.to_diagram() == diagram
        assert board[Cell(3, 0)] == Piece(1, Side.DARK, Rank.KING)
        assert board[Cell(0, 7)] == Piece(3, Side.LIGHT, Rank.KING)

    def test_initial_diagram(self) -> None:
        assert Board.initial().to_diagram().splitlines()[0] == ".d.d.d.d"
        assert Board.initial().to_diagram().splitlines()[7] == "l.l.l.l."

    def test_wrong_row_count(self) -> None:
        with pytest.raises(ValueError):
            Board.from_diagram("........\n........")

    def test_wrong_row_length(self) -> None:
        rows = ["........"] * 7 + ["....."]
        with pytest.raises(ValueError):
            Board.from_diagram("\n".join(rows))

    def test_piece_on_light_square_rejected(self) -> None:
        rows = ["l......."] + ["........"] * 7
        with pytest.raises(ValueError):
            Board.from_diagram("\n".join(rows))

    def test_repr_has_labels(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0].startswith("8 ")
        assert text.splitlines()[-1].strip() == "a b c d e f g h"
