"""Placement and move records."""

from __future__ import annotations

from tileplay.constants import RACK_SIZE
from tileplay.tiles import Tile


class PlacedTile:
    """A rack tile proposed for an empty square."""

    __slots__ = ("row", "col", "tile")

    def __init__(self, row: int, col: int, tile: Tile):
        self.row = row
        self.col = col
        self.tile = tile

    @property
    def letter(self) -> str:
        return self.tile.letter

    def __iter__(self):
        return iter((self.row, self.col, self.tile))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlacedTile):
            return NotImplemented
        return (self.row, self.col, self.tile) == (other.row, other.col, other.tile)

    def __hash__(self) -> int:
        return hash((self.row, self.col, self.tile))

    def __repr__(self) -> str:
        ch = self.tile.letter.lower() if self.tile.is_blank else self.tile.letter
        return f"{ch}@({self.row},{self.col})"


class Move:
    """A validated placement, scored once it passes dictionary approval.

    ``score`` is what the move is worth in the game.  ``selection_score``
    only orders candidates and may include heuristic adjustments.
    """

    __slots__ = (
        "word", "words", "placement", "direction", "score",
        "selection_score", "leave_score", "board_control",
    )

    def __init__(
        self,
        word: str,
        words: list[str],
        placement: list[PlacedTile],
        direction: str,
        score: int = 0,
        selection_score: float | None = None,
        leave_score: float = 0.0,
        board_control: float = 0.0,
    ):
        self.word = word            # candidate word that produced the placement
        self.words = words          # every word formed on the board
        self.placement = placement
        self.direction = direction  # 'H' or 'V'
        self.score = score
        self.selection_score = score if selection_score is None else selection_score
        self.leave_score = leave_score
        self.board_control = board_control

    @property
    def is_full_rack(self) -> bool:
        return len(self.placement) == RACK_SIZE

    def key(self) -> tuple:
        """Identity of the board change, ignoring which rack tile supplied a letter."""
        return tuple(sorted((p.row, p.col, p.tile.letter, p.tile.is_blank) for p in self.placement))

    def to_dict(self) -> dict:
        return {
            "formed_words": list(self.words),
            "score": self.score,
            "placement": [
                {"row": p.row, "col": p.col, "letter": p.tile.letter,
                 "blank": p.tile.is_blank, "tile_id": p.tile.id}
                for p in self.placement
            ],
        }

    def __repr__(self) -> str:
        arrow = "→" if self.direction == "H" else "↓"
        first = min(self.placement, key=lambda p: (p.row, p.col))
        sel = f"  selection={self.selection_score:+.1f}" if self.selection_score != self.score else ""
        return f"{', '.join(self.words)} at ({first.row},{first.col}) {arrow} = {self.score} pts{sel}"
