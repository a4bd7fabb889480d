"""Placement search: fit one candidate word through one anchor."""

from __future__ import annotations

from typing import Sequence

from tileplay.board import Board
from tileplay.constants import step
from tileplay.cross_sets import CrossSets
from tileplay.move import PlacedTile
from tileplay.tiles import Tile


def try_place_word(
    board: Board,
    word: str,
    rack: Sequence[Tile],
    anchor: tuple[int, int],
    direction: str,
    offset: int,
    cross_sets: CrossSets,
    independent_start: bool = False,
) -> list[PlacedTile] | None:
    """Tiles to add so that *word* runs along *direction* with its letter at
    index *offset* on *anchor*, or None if it does not fit.

    Squares already holding a tile must carry the word's letter; empty
    squares must allow the letter in their cross-set and be fed from the
    rack (exact tile first, then a wildcard bound to the letter).  The rack
    itself is never modified.  Under *independent_start* the word may not
    pass over any existing tile.
    """
    dr, dc = step(direction)
    start_r = anchor[0] - offset * dr
    start_c = anchor[1] - offset * dc
    end_r = start_r + (len(word) - 1) * dr
    end_c = start_c + (len(word) - 1) * dc
    if not (board.in_bounds(start_r, start_c) and board.in_bounds(end_r, end_c)):
        return None

    used = 0
    placed: list[PlacedTile] = []
    for i, letter in enumerate(word):
        r = start_r + i * dr
        c = start_c + i * dc
        existing = board.get(r, c)
        if existing is not None:
            if independent_start or existing.letter != letter:
                return None
            continue
        if not cross_sets.allows(r, c, direction, letter):
            return None
        idx = _take_tile(rack, letter, used)
        if idx is None:
            return None
        used |= 1 << idx
        tile = rack[idx]
        placed.append(PlacedTile(r, c, tile.bind(letter) if tile.is_blank else tile))

    return placed or None


def _take_tile(rack: Sequence[Tile], letter: str, used: int) -> int | None:
    blank_idx = None
    for i, tile in enumerate(rack):
        if used & (1 << i):
            continue
        if not tile.is_blank and tile.letter == letter:
            return i
        if tile.is_blank and blank_idx is None:
            blank_idx = i
    return blank_idx
