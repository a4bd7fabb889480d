"""Cross-set calculation.

For an empty square, the cross-set for a play direction is the set of
letters that keep the perpendicular word through that square valid.  A
horizontal play is checked against the vertical neighbours and vice versa.
Squares with no perpendicular neighbours accept every letter.
"""

from __future__ import annotations

from tileplay.board import Board
from tileplay.constants import ALPHABET, DIRECTIONS, perpendicular, step
from tileplay.trie import Trie

ALL_LETTERS = frozenset(ALPHABET)


class CrossSets:
    """Cross-sets and anchor flags for one board snapshot.

    Built fresh for every engine call and never updated afterwards.
    """

    __slots__ = ("_letters", "_anchors")

    def __init__(self, letters: dict[tuple[int, int, str], frozenset[str]], anchors: frozenset[tuple[int, int]]):
        self._letters = letters
        self._anchors = anchors

    def letters(self, row: int, col: int, direction: str) -> frozenset[str]:
        """Legal letters at (row, col) for a play running in *direction*."""
        return self._letters.get((row, col, direction), ALL_LETTERS)

    def allows(self, row: int, col: int, direction: str, letter: str) -> bool:
        return letter in self.letters(row, col, direction)

    def is_anchor(self, row: int, col: int) -> bool:
        return (row, col) in self._anchors

    @property
    def anchors(self) -> frozenset[tuple[int, int]]:
        return self._anchors


def compute_cross_sets(board: Board, trie: Trie) -> CrossSets:
    """Cross-sets for every empty square of *board*, for both play directions."""
    letters: dict[tuple[int, int, str], frozenset[str]] = {}
    anchors: set[tuple[int, int]] = set()
    for r in range(board.rows):
        for c in range(board.cols):
            if board.is_occupied(r, c):
                continue
            for direction in DIRECTIONS:
                letters[(r, c, direction)] = cross_set_at(board, r, c, direction, trie)
            if board.touches_tile(r, c):
                anchors.add((r, c))
    return CrossSets(letters, frozenset(anchors))


def cross_set_at(board: Board, row: int, col: int, direction: str, trie: Trie) -> frozenset[str]:
    """Letters valid at empty (row, col) when playing along *direction*."""
    dr, dc = step(perpendicular(direction))
    if board.is_empty(row - dr, col - dc) and board.is_empty(row + dr, col + dc):
        return ALL_LETTERS

    before: list[str] = []
    r, c = row - dr, col - dc
    while board.is_occupied(r, c):
        before.append(board.letter(r, c))
        r -= dr
        c -= dc
    prefix = "".join(reversed(before))

    after: list[str] = []
    r, c = row + dr, col + dc
    while board.is_occupied(r, c):
        after.append(board.letter(r, c))
        r += dr
        c += dc
    suffix = "".join(after)

    node = trie.prefix_node(prefix)
    if node is None:
        return frozenset()
    valid = set()
    for letter, child in node.children.items():
        if _ends_word(child, suffix):
            valid.add(letter)
    return frozenset(valid)


def _ends_word(node, suffix: str) -> bool:
    for ch in suffix:
        node = node.children.get(ch)
        if node is None:
            return False
    return node.is_terminal
