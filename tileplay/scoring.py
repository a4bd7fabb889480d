"""Move scoring.

Letter and word bonuses only count on squares covered this turn; tiles
already on the board score their face value.  Wildcards are worth 0.
"""

from __future__ import annotations

from typing import Sequence

from tileplay.board import Board
from tileplay.constants import (
    FULL_RACK_BONUS,
    HAZARD,
    HAZARD_PENALTY,
    LETTER_MULTIPLIERS,
    RACK_SIZE,
    WORD_MULTIPLIERS,
    perpendicular,
)
from tileplay.move import PlacedTile
from tileplay.validation import placement_direction, word_run


def score_run(board: Board, run: Sequence[tuple[int, int, object, bool]]) -> int:
    """Score one word run as returned by :func:`word_run`."""
    if len(run) < 2:
        return 0
    total = 0
    word_mult = 1
    for r, c, tile, is_new in run:
        value = tile.value
        if is_new:
            bonus = board.bonus(r, c)
            value *= LETTER_MULTIPLIERS.get(bonus, 1)
            word_mult *= WORD_MULTIPLIERS.get(bonus, 1)
            if bonus == HAZARD:
                total -= HAZARD_PENALTY
        total += value
    return total * word_mult


def score_move(board: Board, placed: Sequence[PlacedTile], rack_size: int = RACK_SIZE) -> int:
    """Points for adding *placed* to the pre-move *board*."""
    if not placed:
        return 0
    direction = placement_direction(placed) or "H"
    new_tiles = {(p.row, p.col): p.tile for p in placed}
    first = min(placed, key=lambda p: (p.row, p.col))

    total = score_run(board, word_run(board, new_tiles, first.row, first.col, direction))
    cross = perpendicular(direction)
    for p in placed:
        total += score_run(board, word_run(board, new_tiles, p.row, p.col, cross))

    if len(placed) == rack_size:
        total += FULL_RACK_BONUS
    return total
