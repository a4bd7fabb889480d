"""Tests for difficulty-based selection."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from tileplay.errors import InputError, NoMoveFound
from tileplay.move import Move, PlacedTile
from tileplay.selector import estimate_max_score, rank_moves, select_move
from tileplay.tiles import Tile, make_rack


def _move(score: int) -> Move:
    return Move("AT", ["AT"], [PlacedTile(0, score, Tile("A"))], "H", score)


@pytest.fixture
def moves() -> list[Move]:
    return [_move(1), _move(2), _move(3)]


class TestSelectMove:
    def test_no_moves(self) -> None:
        with pytest.raises(NoMoveFound):
            select_move([], "hard")

    def test_unknown_difficulty(self, moves) -> None:
        with pytest.raises(InputError):
            select_move(moves, "impossible")

    def test_difficulty_is_case_insensitive(self, moves) -> None:
        assert select_move(moves, "HARD").score == 3

    def test_hard_takes_the_best(self, moves) -> None:
        for seed in range(20):
            assert select_move(moves, "hard", random.Random(seed)).score == 3

    def test_medium_stays_in_the_upper_half(self, moves) -> None:
        picked = {select_move(moves, "medium", random.Random(seed)).score for seed in range(100)}
        assert picked == {2, 3}

    def test_easy_can_pick_anything(self, moves) -> None:
        picked = {select_move(moves, "easy", random.Random(seed)).score for seed in range(100)}
        assert picked == {1, 2, 3}

    def test_easy_is_roughly_uniform(self, moves) -> None:
        rng = random.Random(7)
        trials = 3000
        counts = Counter(select_move(moves, "easy", rng).score for _ in range(trials))
        expected = trials / len(moves)
        for score in (1, 2, 3):
            assert abs(counts[score] - expected) <= 0.15 * expected

    def test_selection_score_drives_ranking(self, moves) -> None:
        moves[0].selection_score = 10.0
        assert select_move(moves, "hard").score == 1

    def test_rank_moves_orders_descending(self, moves) -> None:
        ranked = rank_moves(moves, random.Random(0))
        assert [m.score for m in ranked] == [3, 2, 1]


class TestEstimateMaxScore:
    def test_uses_rack_values(self) -> None:
        assert estimate_max_score("CAT", make_rack("CAT")) == (3 + 1 + 1) * 3 * 3

    def test_unknown_letters_count_one(self) -> None:
        assert estimate_max_score("CAT", []) == 27

    def test_wildcard_counts_one(self) -> None:
        assert estimate_max_score("Q", make_rack("?")) == 9
