"""Board snapshot: a rectangular grid of cells with bonus tags and tiles."""

from __future__ import annotations

from typing import Iterable, Sequence

from tileplay.constants import BOARD_SIZE, BONUS_TAGS, START, STANDARD_LAYOUT
from tileplay.errors import InputError
from tileplay.tiles import Tile


class Cell:
    """One board square."""

    __slots__ = ("row", "col", "bonus", "tile")

    def __init__(self, row: int, col: int, bonus: str | None = None, tile: Tile | None = None):
        if bonus is not None and bonus not in BONUS_TAGS:
            raise InputError(f"unknown bonus tag {bonus!r} at ({row},{col})")
        self.row = row
        self.col = col
        self.bonus = bonus
        self.tile = tile

    def __repr__(self) -> str:
        return f"Cell({self.row},{self.col},{self.bonus},{self.tile})"


class Board:
    """Rectangular grid of :class:`Cell`.

    The engine only reads boards.  Applying a move is the caller's job;
    :meth:`with_tiles` returns a new board for that.
    """

    def __init__(self, cells: Sequence[Sequence[Cell]]):
        if not cells or not cells[0]:
            raise InputError("board must have at least one row and one column")
        width = len(cells[0])
        for r, row in enumerate(cells):
            if len(row) != width:
                raise InputError(f"board is not rectangular: row {r} has {len(row)} cells, expected {width}")
            for c, cell in enumerate(row):
                if cell.row != r or cell.col != c:
                    raise InputError(f"cell at index ({r},{c}) reports coordinates ({cell.row},{cell.col})")
        self.cells: list[list[Cell]] = [list(row) for row in cells]
        self.rows = len(cells)
        self.cols = width

    # construction

    @classmethod
    def empty(cls, rows: int = BOARD_SIZE, cols: int = BOARD_SIZE,
              layout: Sequence[Sequence[str]] | None = None) -> Board:
        """Board without tiles.  *layout* uses ``"."`` for plain squares."""
        if layout is not None and (len(layout) != rows or any(len(r) != cols for r in layout)):
            raise InputError("layout does not match board dimensions")
        return cls([
            [Cell(r, c, _bonus_from_layout(layout, r, c)) for c in range(cols)]
            for r in range(rows)
        ])

    @classmethod
    def standard(cls) -> Board:
        """Empty 15x15 board with the standard bonus layout."""
        return cls.empty(BOARD_SIZE, BOARD_SIZE, STANDARD_LAYOUT)

    @classmethod
    def from_strings(cls, lines: Iterable[str],
                     layout: Sequence[Sequence[str]] | None = STANDARD_LAYOUT) -> Board:
        """Parse rows of ``.``/letters.  Lowercase letters are bound wildcards."""
        rows = [line.strip() for line in lines if line.strip()]
        if not rows:
            raise InputError("board text is empty")
        if any(len(r) != len(rows[0]) for r in rows):
            raise InputError("board text is not rectangular")
        if layout is not None and (len(layout) != len(rows) or len(layout[0]) != len(rows[0])):
            layout = None
        board = cls.empty(len(rows), len(rows[0]), layout)
        for r, line in enumerate(rows):
            for c, ch in enumerate(line):
                if ch == ".":
                    continue
                if not ch.isalpha() or not ch.isascii():
                    raise InputError(f"bad board character {ch!r} at ({r},{c})")
                if ch.islower():
                    tile = Tile(ch.upper(), value=0, is_blank=True)
                else:
                    tile = Tile(ch)
                board.cells[r][c].tile = tile
        return board

    def with_tiles(self, placements: Iterable[tuple[int, int, Tile]]) -> Board:
        """New board with *placements* ``(row, col, tile)`` added."""
        cells = [[Cell(c.row, c.col, c.bonus, c.tile) for c in row] for row in self.cells]
        for r, c, tile in placements:
            if not self.in_bounds(r, c):
                raise InputError(f"placement ({r},{c}) is off the board")
            cells[r][c].tile = tile
        return Board(cells)

    def with_word(self, row: int, col: int, word: str, direction: str = "H") -> Board:
        """New board with *word* written from (row, col).  Lowercase letters are wildcards."""
        direction = direction.upper()
        if direction not in ("H", "V"):
            raise InputError(f"direction must be H or V, got {direction!r}")
        d_r, d_c = (0, 1) if direction == "H" else (1, 0)
        placements = []
        for i, ch in enumerate(word):
            if not ch.isalpha() or not ch.isascii():
                raise InputError(f"bad letter {ch!r}")
            tile = Tile(ch.upper(), value=0, is_blank=True) if ch.islower() else Tile(ch)
            placements.append((row + i * d_r, col + i * d_c, tile))
        return self.with_tiles(placements)

    # queries

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def get(self, row: int, col: int) -> Tile | None:
        """Tile at (row, col), or None (also None off the board)."""
        if self.in_bounds(row, col):
            return self.cells[row][col].tile
        return None

    def letter(self, row: int, col: int) -> str | None:
        tile = self.get(row, col)
        return tile.letter if tile is not None else None

    def bonus(self, row: int, col: int) -> str | None:
        return self.cells[row][col].bonus

    def is_empty(self, row: int, col: int) -> bool:
        """True if no tile at (row, col)."""
        return self.get(row, col) is None

    def is_occupied(self, row: int, col: int) -> bool:
        return not self.is_empty(row, col)

    def is_board_empty(self) -> bool:
        return all(cell.tile is None for row in self.cells for cell in row)

    def occupied(self) -> Iterable[Cell]:
        return (cell for row in self.cells for cell in row if cell.tile is not None)

    def start_cells(self) -> list[Cell]:
        return [cell for row in self.cells for cell in row if cell.bonus == START]

    def touches_tile(self, row: int, col: int) -> bool:
        """True if any 4-neighbour of (row, col) holds a tile."""
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            if self.is_occupied(row + dr, col + dc):
                return True
        return False

    def __str__(self) -> str:
        header = "    " + " ".join(f"{c:>2}" for c in range(self.cols))
        sep = "   " + "---" * self.cols
        lines = [header, sep]
        for r in range(self.rows):
            parts = [f"{r:>2} |"]
            for c in range(self.cols):
                cell = self.cells[r][c]
                if cell.tile is not None:
                    ch = cell.tile.letter.lower() if cell.tile.is_blank else cell.tile.letter
                    parts.append(f" {ch} ")
                elif cell.bonus in (None, START):
                    parts.append(f" {cell.bonus or '.'} ")
                else:
                    parts.append(f"{cell.bonus:>3}")
            lines.append("".join(parts))
        return "\n".join(lines)


def _bonus_from_layout(layout: Sequence[Sequence[str]] | None, row: int, col: int) -> str | None:
    if layout is None:
        return None
    tag = layout[row][col]
    return None if tag == "." else tag
