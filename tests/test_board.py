"""Tests for board snapshots."""

from __future__ import annotations

import pytest

from tileplay.board import Board, Cell
from tileplay.errors import InputError


class TestConstruction:
    def test_non_rectangular_board_is_rejected(self) -> None:
        with pytest.raises(InputError):
            Board([[Cell(0, 0), Cell(0, 1)], [Cell(1, 0)]])

    def test_empty_board_is_rejected(self) -> None:
        with pytest.raises(InputError):
            Board([])

    def test_unknown_bonus_tag(self) -> None:
        with pytest.raises(InputError):
            Cell(0, 0, "QW")

    def test_standard_layout(self, empty_board: Board) -> None:
        assert (empty_board.rows, empty_board.cols) == (15, 15)
        assert empty_board.bonus(7, 7) == "*"
        assert empty_board.bonus(0, 0) == "TW"
        assert empty_board.bonus(1, 5) == "TL"
        assert empty_board.bonus(7, 8) is None
        assert [(c.row, c.col) for c in empty_board.start_cells()] == [(7, 7)]

    def test_from_strings_reads_blanks(self) -> None:
        board = Board.from_strings(["...", ".cA", "..."], layout=None)
        blank = board.get(1, 1)
        assert blank.letter == "C"
        assert blank.is_blank and blank.value == 0
        assert board.get(1, 2).value == 1
        assert board.is_empty(0, 0)

    def test_from_strings_rejects_bad_characters(self) -> None:
        with pytest.raises(InputError):
            Board.from_strings(["..1", "..."], layout=None)


class TestSnapshots:
    def test_with_word_returns_new_board(self, empty_board: Board) -> None:
        board = empty_board.with_word(7, 7, "CAT", "V")
        assert board.letter(9, 7) == "T"
        assert empty_board.is_board_empty()

    def test_with_word_off_board(self, empty_board: Board) -> None:
        with pytest.raises(InputError):
            empty_board.with_word(7, 13, "CAT", "H")

    def test_touches_tile(self, cat_board: Board) -> None:
        assert cat_board.touches_tile(8, 8)
        assert cat_board.touches_tile(7, 10)
        assert not cat_board.touches_tile(8, 10)
