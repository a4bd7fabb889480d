"""Game constants: tile values, bonus tags and the standard board layout."""

from __future__ import annotations

import string

BOARD_SIZE = 15
CENTER = 7  # 0-indexed center square
RACK_SIZE = 7

ALPHABET = string.ascii_uppercase
BLANK = "_"  # wildcard tile on the rack
VOWELS = frozenset("AEIOU")

# Tile point values; wildcards are always worth 0
TILE_VALUES: dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2,
    "H": 4, "I": 1, "J": 8, "K": 5, "L": 1, "M": 3, "N": 1,
    "O": 1, "P": 3, "Q": 10, "R": 1, "S": 1, "T": 1, "U": 1,
    "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10, BLANK: 0,
}

# Bonus tags
DL = "DL"       # double letter
TL = "TL"       # triple letter
DW = "DW"       # double word
TW = "TW"       # triple word
START = "*"     # start square, scores as a double word
HAZARD = "HZ"   # subtracts HAZARD_PENALTY from the word

BONUS_TAGS = frozenset({DL, TL, DW, TW, START, HAZARD})

LETTER_MULTIPLIERS: dict[str, int] = {DL: 2, TL: 3}
WORD_MULTIPLIERS: dict[str, int] = {DW: 2, START: 2, TW: 3}

FULL_RACK_BONUS = 50  # placing a whole rack in one turn
HAZARD_PENALTY = 10

# Standard layout.  "." = no bonus
# fmt: off
STANDARD_LAYOUT: list[list[str]] = [
    ["TW", ".",  ".",  "DL", ".",  ".",  ".",  "TW", ".",  ".",  ".",  "DL", ".",  ".",  "TW"],
    [".",  "DW", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "DW", "." ],
    [".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DW", ".",  "." ],
    ["DL", ".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  ".",  ".",  "DW", ".",  ".",  "DL"],
    [".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  "." ],
    [".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", "." ],
    [".",  ".",  "DL", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DL", ".",  "." ],
    ["TW", ".",  ".",  "DL", ".",  ".",  ".",  "*",  ".",  ".",  ".",  "DL", ".",  ".",  "TW"],
    [".",  ".",  "DL", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DL", ".",  "." ],
    [".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", "." ],
    [".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  "." ],
    ["DL", ".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  ".",  ".",  "DW", ".",  ".",  "DL"],
    [".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DW", ".",  "." ],
    [".",  "DW", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "DW", "." ],
    ["TW", ".",  ".",  "DL", ".",  ".",  ".",  "TW", ".",  ".",  ".",  "DL", ".",  ".",  "TW"],
]
# fmt: on

DIRECTIONS = ("H", "V")


def step(direction: str) -> tuple[int, int]:
    """(d_row, d_col) for moving one cell along *direction*."""
    return (0, 1) if direction == "H" else (1, 0)


def perpendicular(direction: str) -> str:
    return "V" if direction == "H" else "H"
