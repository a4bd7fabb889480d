"""Tests for rack-based candidate generation."""

from __future__ import annotations

from tileplay.tiles import make_rack
from tileplay.word_generator import (
    can_form_word,
    generate_words,
    generate_words_with_board_letter,
)


class TestGenerateWords:
    def test_rack_words(self, small_dictionary) -> None:
        words = generate_words(make_rack("TAC"), small_dictionary.trie)
        assert words == {"ACT", "AT", "CAT", "TA"}

    def test_plain_letters_work_too(self, small_dictionary) -> None:
        assert generate_words(list("TAC"), small_dictionary.trie) == {"ACT", "AT", "CAT", "TA"}

    def test_deterministic(self, small_dictionary) -> None:
        rack = make_rack("STARC")
        first = generate_words(rack, small_dictionary.trie)
        assert first == generate_words(rack, small_dictionary.trie)
        assert "CARTS" not in first
        assert {"STAR", "SCAT", "ARC", "ARTS"} <= first

    def test_duplicate_letters_need_duplicate_tiles(self, small_dictionary) -> None:
        assert "TAT" not in generate_words(make_rack("TA"), small_dictionary.trie)
        assert "TAT" in generate_words(make_rack("TAT"), small_dictionary.trie)

    def test_wildcard(self, small_dictionary) -> None:
        words = generate_words(make_rack("Q?"), small_dictionary.trie)
        assert words == {"QI"}

    def test_max_length(self, small_dictionary) -> None:
        words = generate_words(make_rack("STARC"), small_dictionary.trie, max_length=3)
        assert words
        assert all(len(w) <= 3 for w in words)

    def test_single_letters_are_not_words(self, small_dictionary) -> None:
        assert generate_words(make_rack("A"), small_dictionary.trie) == set()


class TestBoardLetter:
    def test_board_letter_must_be_used(self, small_dictionary) -> None:
        words = generate_words_with_board_letter(make_rack("CAT"), "S", small_dictionary.trie)
        assert {"CATS", "ACTS", "SCAT", "AS"} <= words
        assert "CAT" not in words

    def test_board_run(self, small_dictionary) -> None:
        words = generate_words_with_board_letter(make_rack("S"), "CAT", small_dictionary.trie)
        assert {"CATS", "SCAT"} <= words
        assert "ACTS" not in words

    def test_board_run_longer_than_limit(self, small_dictionary) -> None:
        words = generate_words_with_board_letter(make_rack("S"), "CAT", small_dictionary.trie, max_length=3)
        assert "CATS" not in words


class TestCanFormWord:
    def test_exact_letters(self) -> None:
        assert can_form_word("CAT", make_rack("TACK"))
        assert not can_form_word("TAT", make_rack("TAC"))

    def test_wildcard_fills_gap(self) -> None:
        assert can_form_word("TAT", make_rack("TA?"))
        assert not can_form_word("STAT", make_rack("TA?"))
