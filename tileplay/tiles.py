"""Tiles and racks."""

from __future__ import annotations

import itertools
from typing import Iterable, Sequence

from tileplay.constants import ALPHABET, BLANK, TILE_VALUES
from tileplay.errors import InputError

_ids = itertools.count()


class Tile:
    """A single tile.  A wildcard has ``letter == BLANK`` until it is bound."""

    __slots__ = ("id", "letter", "value", "is_blank", "owner")

    def __init__(
        self,
        letter: str,
        value: int | None = None,
        is_blank: bool | None = None,
        owner: str | None = None,
        id: str | None = None,
    ):
        self.letter = letter
        self.is_blank = letter == BLANK if is_blank is None else is_blank
        if value is None:
            value = 0 if self.is_blank else TILE_VALUES.get(letter, 0)
        self.value = value
        self.owner = owner
        self.id = id if id is not None else f"tile-{next(_ids)}"

    def bind(self, letter: str) -> Tile:
        """Copy of this wildcard committed to *letter* (same identity)."""
        return Tile(letter, value=0, is_blank=True, owner=self.owner, id=self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return (self.id, self.letter, self.is_blank) == (other.id, other.letter, other.is_blank)

    def __hash__(self) -> int:
        return hash((self.id, self.letter, self.is_blank))

    def __repr__(self) -> str:
        if self.is_blank:
            return f"Tile({self.letter.lower() if self.letter != BLANK else BLANK})"
        return f"Tile({self.letter})"


def make_rack(letters: str | Iterable[str], owner: str | None = None) -> list[Tile]:
    """Rack from a letter string such as ``"CAT_"`` (``_`` or ``?`` = wildcard)."""
    rack: list[Tile] = []
    for ch in letters:
        ch = ch.upper()
        if ch == "?":
            ch = BLANK
        if ch != BLANK and ch not in ALPHABET:
            raise InputError(f"bad rack letter {ch!r}")
        rack.append(Tile(ch, owner=owner))
    return rack


def rack_letters(rack: Sequence[Tile]) -> str:
    return "".join(t.letter for t in rack)


def remaining_rack(rack: Sequence[Tile], placed_ids: Iterable[str]) -> list[Tile]:
    """Tiles of *rack* not used by a placement, matched by tile identity."""
    used = set(placed_ids)
    return [t for t in rack if t.id not in used]
