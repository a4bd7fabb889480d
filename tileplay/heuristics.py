"""Heuristic move evaluation.

The score a move earns never changes here.  These heuristics produce a
separate *selection score* used only to order candidates, so that between
two moves of similar value the engine prefers the one that

  1. leaves a workable rack behind (the "leave"), and
  2. does not hand the opponent an open bonus square.

Both components are weighted small enough that they only break near-ties:
a 20-point move should almost never lose to a 15-point move.
"""

from __future__ import annotations

from typing import Sequence

from tileplay.board import Board
from tileplay.constants import BLANK, DL, DW, TL, TW, VOWELS
from tileplay.move import PlacedTile
from tileplay.tiles import Tile

LEAVE_WEIGHT = 0.3
BOARD_CONTROL_WEIGHT = 0.1

# ── 1. Rack leave ───────────────────────────────────────────────────────
#
# Penalties only; a good leave scores 0.

# letter -> partner it is nearly useless without
_NEEDS_PARTNER: dict[str, str] = {"Q": "U"}
_UNPAIRED_PENALTY = 8.0
_ONE_SIDED_PENALTY = 10.0       # all vowels or all consonants
_DUPLICATE_ALLOWANCE = 2
_DUPLICATE_PENALTY = 3.0        # per duplicate beyond the allowance
_IMBALANCE_PENALTY = 5.0
_MAX_VOWEL_RATIO = 0.7
_MIN_VOWEL_RATIO = 0.15


def evaluate_rack_leave(remaining: Sequence[Tile | str]) -> float:
    """Penalty (<= 0) for the tiles left on the rack after a move."""
    letters = [t.letter if isinstance(t, Tile) else t for t in remaining]
    if not letters:
        return 0.0

    penalty = 0.0
    for letter, partner in _NEEDS_PARTNER.items():
        if letter in letters and partner not in letters:
            penalty -= _UNPAIRED_PENALTY

    vowels = sum(1 for l in letters if l in VOWELS)
    consonants = sum(1 for l in letters if l not in VOWELS and l != BLANK)
    if vowels == len(letters):
        penalty -= _ONE_SIDED_PENALTY
    if consonants == len(letters):
        penalty -= _ONE_SIDED_PENALTY

    duplicates = len(letters) - len(set(letters))
    if duplicates > _DUPLICATE_ALLOWANCE:
        penalty -= (duplicates - _DUPLICATE_ALLOWANCE) * _DUPLICATE_PENALTY

    ratio = vowels / len(letters)
    if ratio > _MAX_VOWEL_RATIO or ratio < _MIN_VOWEL_RATIO:
        penalty -= _IMBALANCE_PENALTY

    return penalty


# ── 2. Board control ────────────────────────────────────────────────────

_OPENED_BONUS_PENALTY: dict[str, float] = {TW: 20.0, DW: 12.0, TL: 6.0, DL: 3.0}
_USED_WORD_BONUS_REWARD = 5.0


def evaluate_board_control(board: Board, placed: Sequence[PlacedTile]) -> float:
    """Negative when the move opens bonus squares to the opponent."""
    covered = {(p.row, p.col) for p in placed}
    score = 0.0
    for p in placed:
        for dr, dc in ((0, 1), (0, -1), (1, 0), (-1, 0)):
            r, c = p.row + dr, p.col + dc
            if not board.in_bounds(r, c) or (r, c) in covered or board.is_occupied(r, c):
                continue
            score -= _OPENED_BONUS_PENALTY.get(board.bonus(r, c), 0.0)
        if board.bonus(p.row, p.col) in (TW, DW):
            score += _USED_WORD_BONUS_REWARD
    return score


# ── Public API ──────────────────────────────────────────────────────────

def selection_score(score: int, leave_score: float, board_control: float) -> float:
    return score + leave_score * LEAVE_WEIGHT + board_control * BOARD_CONTROL_WEIGHT

