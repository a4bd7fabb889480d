"""Move legality checks and formed-word extraction.

Everything here is read-only with respect to the board.  A legal
placement yields the list of words it forms; those still need dictionary
approval before the move can be accepted.
"""

from __future__ import annotations

from typing import Sequence

from tileplay.board import Board
from tileplay.constants import START, perpendicular, step
from tileplay.errors import Rejection, ValidationRejected
from tileplay.move import PlacedTile
from tileplay.tiles import Tile


def placement_direction(placed: Sequence[PlacedTile]) -> str | None:
    """'H' if all tiles share a row, 'V' if they share a column, else None.

    A single tile counts as horizontal.
    """
    if len({p.row for p in placed}) == 1:
        return "H"
    if len({p.col for p in placed}) == 1:
        return "V"
    return None


def word_run(
    board: Board,
    new_tiles: dict[tuple[int, int], Tile],
    row: int,
    col: int,
    direction: str,
) -> list[tuple[int, int, Tile, bool]]:
    """Contiguous run through (row, col) along *direction*.

    Returns ``(row, col, tile, is_new)`` for each square, in reading order.
    The walk is bounded by the board edge in both directions.
    """
    dr, dc = step(direction)

    def tile_at(r: int, c: int) -> Tile | None:
        tile = board.get(r, c)
        return tile if tile is not None else new_tiles.get((r, c))

    r, c = row, col
    while tile_at(r - dr, c - dc) is not None:
        r -= dr
        c -= dc

    run: list[tuple[int, int, Tile, bool]] = []
    while True:
        tile = tile_at(r, c)
        if tile is None:
            break
        run.append((r, c, tile, (r, c) in new_tiles and board.is_empty(r, c)))
        r += dr
        c += dc
    return run


def formed_words(board: Board, placed: Sequence[PlacedTile], direction: str) -> list[str]:
    """Primary word plus every perpendicular word of two or more letters."""
    new_tiles = {(p.row, p.col): p.tile for p in placed}
    first = min(placed, key=lambda p: (p.row, p.col))
    words: list[str] = []

    primary = word_run(board, new_tiles, first.row, first.col, direction)
    if len(primary) > 1:
        words.append("".join(t.letter for _, _, t, _ in primary))

    cross = perpendicular(direction)
    for p in placed:
        run = word_run(board, new_tiles, p.row, p.col, cross)
        if len(run) > 1:
            words.append("".join(t.letter for _, _, t, _ in run))
    return words


def validate_move(
    board: Board,
    placed: Sequence[PlacedTile],
    is_first_move: bool,
    moves_made: int = 0,
    independent_start: bool = False,
) -> list[str]:
    """Check a placement against the placement rules.

    Returns the formed words.  Raises :class:`ValidationRejected` carrying a
    :class:`Rejection` reason when a rule is broken.

    *independent_start* only applies while the player has not moved yet
    (``moves_made == 0``): the placement must then sit on an open start
    square and keep clear of every tile already on the board.
    """
    if not placed:
        raise ValidationRejected(Rejection.EMPTY)
    if any(board.is_occupied(p.row, p.col) for p in placed):
        raise ValidationRejected(Rejection.OCCUPIED)

    direction = placement_direction(placed)
    if direction is None:
        raise ValidationRejected(Rejection.NOT_LINEAR)

    dr, dc = step(direction)
    positions = {(p.row, p.col) for p in placed}
    first = min(placed, key=lambda p: (p.row, p.col))
    last = max(placed, key=lambda p: (p.row, p.col))

    connected = False
    r, c = first.row, first.col
    while True:
        if board.is_occupied(r, c):
            connected = True
        elif (r, c) not in positions:
            raise ValidationRejected(Rejection.GAP)
        if (r, c) == (last.row, last.col):
            break
        r += dr
        c += dc

    if independent_start and moves_made == 0:
        on_start = any(board.bonus(p.row, p.col) == START and board.is_empty(p.row, p.col) for p in placed)
        touches = connected or any(board.touches_tile(p.row, p.col) for p in placed)
        if not on_start or touches:
            raise ValidationRejected(Rejection.INDEPENDENT_START)
    elif is_first_move:
        if not any(_is_start(board, p.row, p.col) for p in placed):
            raise ValidationRejected(Rejection.MUST_COVER_START)
        if len(placed) < 2:
            raise ValidationRejected(Rejection.TOO_FEW_TILES)
    elif not connected and not any(board.touches_tile(p.row, p.col) for p in placed):
        raise ValidationRejected(Rejection.DISCONNECTED)

    return formed_words(board, placed, direction)


def _is_start(board: Board, row: int, col: int) -> bool:
    """Start squares; a layout without any uses the geometric center."""
    if board.bonus(row, col) == START:
        return True
    return (row, col) == (board.rows // 2, board.cols // 2) and not board.start_cells()
