"""Shared fixtures for engine tests."""

from __future__ import annotations

import pytest

from tileplay.board import Board
from tileplay.constants import STANDARD_LAYOUT
from tileplay.dictionary import Dictionary

WORDS = [
    # 2-letter
    "AA", "AB", "AD", "AE", "AG", "AH", "AI", "AL", "AM", "AN",
    "AR", "AS", "AT", "AW", "AX", "AY", "BE", "QI", "TA", "TO",
    "XI", "ZA",
    # 3-letter
    "ACT", "ARC", "ART", "CAR", "CAT", "DOG", "GOD", "RAT", "TAR", "TAT",
    # 4-letter
    "ACTS", "ARTS", "CART", "CATS", "DOGS", "QUIZ", "RATS", "SCAT",
    "STAR", "TARS",
]


@pytest.fixture
def small_dictionary() -> Dictionary:
    """Hand-picked words loaded from memory.  No file I/O."""
    return Dictionary(words=WORDS)


@pytest.fixture
def empty_board() -> Board:
    return Board.standard()


@pytest.fixture
def cat_board() -> Board:
    """CAT across row 7, columns 7-9 (covering the start square)."""
    return Board.standard().with_word(7, 7, "CAT", "H")


@pytest.fixture
def two_start_layout() -> list[list[str]]:
    """Standard layout with a second start square at (2,2)."""
    layout = [list(row) for row in STANDARD_LAYOUT]
    layout[2][2] = "*"
    return layout


@pytest.fixture
def words() -> list[str]:
    return list(WORDS)
