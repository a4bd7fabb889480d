"""Tests for the prefix trie."""

from __future__ import annotations

from tileplay.trie import Trie


class TestMembership:
    def test_every_inserted_word_is_found(self, words) -> None:
        trie = Trie.build(words)
        for word in words:
            assert trie.is_word(word)
            assert word in trie

    def test_absent_word_is_rejected(self, words) -> None:
        trie = Trie.build(words)
        assert not trie.is_word("ZZZ")
        assert not trie.is_word("")

    def test_prefix_is_not_a_word(self) -> None:
        trie = Trie.build(["CATS"])
        assert not trie.is_word("CAT")
        assert trie.is_word("CATS")


class TestPrefixes:
    def test_prefix_node_walks_without_end_marker(self, words) -> None:
        trie = Trie.build(words)
        node = trie.prefix_node("CA")
        assert node is not None
        assert not node.is_terminal
        assert set(node.children) == {"R", "T"}

    def test_missing_edge_returns_none(self, words) -> None:
        trie = Trie.build(words)
        assert trie.prefix_node("CQ") is None
        assert not trie.is_prefix("CQ")
        assert trie.is_prefix("QU")

    def test_valid_next_letters(self, words) -> None:
        trie = Trie.build(words)
        assert trie.valid_next_letters("CA") == {"R", "T"}
        assert trie.valid_next_letters("XYZ") == set()

    def test_count_words_ignores_duplicates(self, words) -> None:
        trie = Trie.build(words + ["CAT", "CAT"])
        assert trie.count_words() == len(set(words))
