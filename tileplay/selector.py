"""Difficulty policy over the accepted candidates."""

from __future__ import annotations

import math
import random
from typing import Sequence

from tileplay.errors import InputError, NoMoveFound
from tileplay.move import Move
from tileplay.tiles import Tile

EASY = "easy"
MEDIUM = "medium"
HARD = "hard"
DIFFICULTIES = (EASY, MEDIUM, HARD)


def normalize_difficulty(difficulty: str) -> str:
    level = str(difficulty).lower()
    if level not in DIFFICULTIES:
        raise InputError(f"unknown difficulty {difficulty!r}; expected one of {', '.join(DIFFICULTIES)}")
    return level


def rank_moves(moves: Sequence[Move], rng: random.Random | None = None) -> list[Move]:
    """Best-first by selection score; ties land in random order."""
    rng = rng or random.Random()
    ranked = list(moves)
    rng.shuffle(ranked)
    ranked.sort(key=lambda m: m.selection_score, reverse=True)
    return ranked


def select_move(moves: Sequence[Move], difficulty: str = HARD, rng: random.Random | None = None) -> Move:
    """Pick one move.

    * hard: the best selection score.
    * medium: uniformly from the better half (rounded up).
    * easy: uniformly from every candidate.

    Raises :class:`NoMoveFound` when *moves* is empty.
    """
    level = normalize_difficulty(difficulty)
    if not moves:
        raise NoMoveFound("no legal move")
    rng = rng or random.Random()
    ranked = rank_moves(moves, rng)
    if level == HARD:
        return ranked[0]
    if level == MEDIUM:
        return ranked[rng.randrange(math.ceil(len(ranked) / 2))]
    return ranked[rng.randrange(len(ranked))]


def estimate_max_score(word: str, rack: Sequence[Tile]) -> int:
    """Loose upper bound used to skip words in hard mode.

    Treats every letter as sitting on a triple letter inside a triple word.
    Letters not on the rack count as 1 point.  The bound is not tight and
    can undershoot moves that gain from cross words or the full-rack bonus.
    """
    total = 0
    for letter in word:
        value = next((t.value for t in rack if t.letter == letter), 1)
        total += (value or 1) * 3
    return total * 3
