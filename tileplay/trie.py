"""Prefix trie used to prune word generation and derive cross-sets.

This is a plain trie: shared suffixes are not merged, so memory grows with
the total number of letters in the word list.  Nodes are never modified
after :meth:`Trie.build` returns, which lets one instance be shared between
threads without locking.
"""

from __future__ import annotations

from typing import Iterable


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """Prefix trie for fast word and prefix checks."""

    def __init__(self):
        self.root = TrieNode()

    @classmethod
    def build(cls, words: Iterable[str]) -> Trie:
        """Trie holding every word in *words* (expected uppercase)."""
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_terminal = True

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def prefix_node(self, prefix: str) -> TrieNode | None:
        """Node reached by *prefix*, or None if any edge is missing."""
        return self._walk(prefix)

    def valid_next_letters(self, prefix: str) -> set[str]:
        node = self._walk(prefix)
        if node is None:
            return set()
        return set(node.children)

    def count_words(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_terminal:
                count += 1
            stack.extend(node.children.values())
        return count

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
