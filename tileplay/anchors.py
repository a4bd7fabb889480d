"""Anchor finding: the squares a new word must be built through."""

from __future__ import annotations

from tileplay.board import Board


def find_anchors(board: Board, independent_start: bool = False) -> list[tuple[int, int]]:
    """Anchor squares for *board*, sorted by (row, col).

    * With *independent_start*, only open start squares are anchors; the
      move may not lean on tiles already on the board.
    * On an occupied board, every empty square next to a tile is an anchor.
    * On an empty board, the start squares are anchors, falling back to the
      geometric center when the layout has none.
    """
    if independent_start:
        return sorted((cell.row, cell.col) for cell in board.start_cells() if cell.tile is None)

    if board.is_board_empty():
        anchors = {(cell.row, cell.col) for cell in board.start_cells()}
        if not anchors:
            anchors.add((board.rows // 2, board.cols // 2))
        return sorted(anchors)

    anchors = set()
    for cell in board.occupied():
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            r, c = cell.row + dr, cell.col + dc
            if board.in_bounds(r, c) and board.is_empty(r, c):
                anchors.add((r, c))
    return sorted(anchors)
