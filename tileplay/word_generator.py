"""Rack-based candidate word generation with trie pruning.

Only words spellable from the rack (plus, in the board-aware variant, one
letter already on the board) are produced.  Whether a word actually fits
on the board is decided later by placement search.
"""

from __future__ import annotations

from typing import Sequence

from tileplay.constants import ALPHABET, BLANK
from tileplay.tiles import Tile
from tileplay.trie import Trie, TrieNode


def _letters(rack: Sequence[Tile | str]) -> list[str]:
    return [t.letter if isinstance(t, Tile) else t for t in rack]


def generate_words(rack: Sequence[Tile | str], trie: Trie, max_length: int = 7) -> set[str]:
    """All dictionary words of length >= 2 spellable from *rack*.

    Wildcards try every letter with a matching trie edge.  Recursion depth
    never exceeds *max_length*.
    """
    letters = _letters(rack)
    words: set[str] = set()

    def _extend(prefix: str, node: TrieNode, used: int) -> None:
        if len(prefix) > 1 and node.is_terminal:
            words.add(prefix)
        if len(prefix) >= max_length:
            return
        tried: set[str] = set()
        for i, letter in enumerate(letters):
            if used & (1 << i) or letter in tried:
                continue
            tried.add(letter)
            for ch, child in _edges(node, letter):
                _extend(prefix + ch, child, used | (1 << i))

    _extend("", trie.root, 0)
    return words


def generate_words_with_board_letter(
    rack: Sequence[Tile | str],
    board_letter: str,
    trie: Trie,
    max_length: int = 15,
) -> set[str]:
    """Words built from *rack* plus exactly one use of *board_letter*.

    Used to find extensions of tiles already on the board.  *board_letter*
    may also be a whole run of board letters, placed as one block, so that
    CAT on the board and S on the rack yield CATS.  A word that does not
    use the board letter is not reported.
    """
    letters = _letters(rack)
    words: set[str] = set()

    def _extend(prefix: str, node: TrieNode, used: int, board_used: bool) -> None:
        if board_used and len(prefix) > 1 and node.is_terminal:
            words.add(prefix)
        if len(prefix) >= max_length:
            return
        if not board_used and len(prefix) + len(board_letter) <= max_length:
            child = _walk(node, board_letter)
            if child is not None:
                _extend(prefix + board_letter, child, used, True)
        tried: set[str] = set()
        for i, letter in enumerate(letters):
            if used & (1 << i) or letter in tried:
                continue
            tried.add(letter)
            for ch, child in _edges(node, letter):
                _extend(prefix + ch, child, used | (1 << i), board_used)

    _extend("", trie.root, 0, False)
    return words


def _walk(node: TrieNode, fragment: str) -> TrieNode | None:
    for ch in fragment:
        node = node.children.get(ch)
        if node is None:
            return None
    return node


def _edges(node: TrieNode, letter: str):
    if letter == BLANK:
        for ch in ALPHABET:
            child = node.children.get(ch)
            if child is not None:
                yield ch, child
    else:
        child = node.children.get(letter)
        if child is not None:
            yield letter, child


def can_form_word(word: str, rack: Sequence[Tile | str]) -> bool:
    """True if *word* can be spelled from *rack*, spending wildcards last."""
    available = _letters(rack)
    for letter in word:
        if letter in available:
            available.remove(letter)
        elif BLANK in available:
            available.remove(BLANK)
        else:
            return False
    return True
