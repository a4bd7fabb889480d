"""Tests for cross-set and anchor-flag computation."""

from __future__ import annotations

from tileplay.board import Board
from tileplay.cross_sets import ALL_LETTERS, compute_cross_sets, cross_set_at


class TestCrossSets:
    def test_empty_board_allows_everything(self, empty_board: Board, small_dictionary) -> None:
        cs = compute_cross_sets(empty_board, small_dictionary.trie)
        assert cs.letters(7, 7, "H") == ALL_LETTERS
        assert cs.letters(0, 14, "V") == ALL_LETTERS
        assert not cs.anchors

    def test_square_below_a_letter(self, cat_board: Board, small_dictionary) -> None:
        trie = small_dictionary.trie
        expected = {l for l in ALL_LETTERS if trie.is_word("A" + l)}
        cs = compute_cross_sets(cat_board, trie)
        # horizontal play under the A forms a vertical "A?" word
        assert cs.letters(8, 8, "H") == expected
        assert "O" not in expected
        assert cs.letters(8, 8, "V") == ALL_LETTERS

    def test_word_end_extensions(self, cat_board: Board, small_dictionary) -> None:
        trie = small_dictionary.trie
        assert cross_set_at(cat_board, 7, 10, "V", trie) == {"S"}
        assert cross_set_at(cat_board, 7, 6, "V", trie) == {"S"}
        assert cross_set_at(cat_board, 7, 10, "H", trie) == ALL_LETTERS

    def test_dead_prefix_gives_empty_set(self, small_dictionary) -> None:
        board = Board.standard().with_word(3, 3, "ZZ", "V")
        assert cross_set_at(board, 5, 3, "H", small_dictionary.trie) == frozenset()

    def test_occupied_squares_are_skipped(self, cat_board: Board, small_dictionary) -> None:
        cs = compute_cross_sets(cat_board, small_dictionary.trie)
        # occupied squares fall back to the default; placement never asks for them
        assert cs.letters(7, 8, "H") == ALL_LETTERS
        assert not cs.is_anchor(7, 8)

    def test_anchor_flags(self, cat_board: Board, small_dictionary) -> None:
        cs = compute_cross_sets(cat_board, small_dictionary.trie)
        assert cs.is_anchor(6, 7)
        assert cs.is_anchor(7, 10)
        assert not cs.is_anchor(8, 10)
        assert len(cs.anchors) == 8
