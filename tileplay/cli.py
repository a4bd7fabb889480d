"""Command-line front end for the move engine."""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time

from tileplay.board import Board
from tileplay.dictionary import Dictionary
from tileplay.engine import MoveEngine
from tileplay.errors import InputError
from tileplay.move import Move
from tileplay.selector import DIFFICULTIES, HARD, rank_moves
from tileplay.tiles import Tile, make_rack

log = logging.getLogger("tileplay")


def read_board(path: str) -> Board:
    """Board from a text file: one row per line, ``.`` for an empty square."""
    with open(path, "r", encoding="utf-8") as f:
        return Board.from_strings(f.read().splitlines())


def manual_board_input() -> tuple[Board, str]:
    """Interactive board + rack entry from the terminal."""
    board = Board.standard()
    print("\n" + "=" * 60)
    print("  TILEPLAY -- Manual Board Entry")
    print("=" * 60)
    print()
    print("Commands:")
    print("  ROW COL WORD H|V      -- place a whole word (e.g. 7 5 HELLO H)")
    print("  show                  -- print the board")
    print("  clear                 -- reset the board")
    print("  done                  -- finish entering tiles")
    print()

    while True:
        try:
            inp = input("  tile> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd = inp.lower()
        if cmd == "done":
            break
        if cmd == "show":
            print(board)
            continue
        if cmd == "clear":
            board = Board.standard()
            print("  Board cleared.")
            continue

        parts = inp.split()
        if len(parts) != 4:
            print("  Format: ROW COL WORD H|V")
            continue
        try:
            board = board.with_word(int(parts[0]), int(parts[1]), parts[2], parts[3])
            print(f"  Placed '{parts[2].upper()}' at ({parts[0]},{parts[1]})")
        except (ValueError, InputError) as exc:
            print(f"  Invalid: {exc}")

    print()
    print(board)

    rack_input = input("\nEnter your rack (e.g. AEIOUQZ, use _ or ? for blanks): ").strip()
    return board, rack_input


def format_moves(moves: list[Move]) -> str:
    lines = [
        "=" * 65,
        f" {'#':>2}  {'Score':>5}  {'Select':>6}  {'Words':<30} Tiles",
        "-" * 65,
    ]
    for i, m in enumerate(moves):
        tiles = " ".join(repr(p) for p in m.placement)
        lines.append(f" {i + 1:>2}  {m.score:>5}  {m.selection_score:>6.1f}  {', '.join(m.words):<30} {tiles}")
    lines.append("=" * 65)
    return "\n".join(lines)


def run_cli(engine: MoveEngine, board: Board, rack: list[Tile], args: argparse.Namespace) -> int:
    """Search, print the ranked candidates and the chosen move."""
    print(f"\nRack: {' '.join(t.letter for t in rack)}")
    print("Searching for moves...\n")

    t0 = time.time()
    moves = engine.find_moves(
        board, rack,
        use_heuristics=args.heuristics,
        moves_made=args.moves_made,
        independent_start=args.independent_start,
        max_attempts=args.max_attempts,
        deadline=args.deadline,
    )
    elapsed = time.time() - t0
    print(f"Found {len(moves)} moves in {elapsed:.2f}s.\n")

    rng = random.Random(args.seed)
    chosen = engine.find_move(
        board, rack,
        difficulty=args.difficulty,
        use_heuristics=args.heuristics,
        moves_made=args.moves_made,
        independent_start=args.independent_start,
        max_attempts=args.max_attempts,
        deadline=args.deadline,
        rng=rng,
    )
    if chosen is None:
        print("No legal move -- pass or resign.")
        return 1

    print(format_moves(rank_moves(moves, rng)[: args.top]))
    print(f"\nCHOSEN ({args.difficulty}): {', '.join(chosen.words)} for {chosen.score} points")
    print("   Tiles to place: " + " ".join(repr(p) for p in chosen.placement))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tileplay -- finds a move for a board and rack",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--board", type=str, default=None,
                        help="Board text file (rows of '.' and letters); interactive entry if omitted")
    parser.add_argument("--rack", type=str, default=None,
                        help="Rack letters, '_' or '?' for blanks")
    parser.add_argument("--difficulty", choices=DIFFICULTIES, default=HARD)
    parser.add_argument("--heuristics", action="store_true",
                        help="Re-rank candidates with leave and board-control heuristics")
    parser.add_argument("--independent-start", action="store_true",
                        help="First move must start on an open start square")
    parser.add_argument("--moves-made", type=int, default=0,
                        help="Moves this player has already made")
    parser.add_argument("--max-attempts", type=int, default=None,
                        help="Stop after this many placement attempts")
    parser.add_argument("--deadline", type=float, default=None,
                        help="Stop searching after this many seconds")
    parser.add_argument("--workers", type=int, default=1,
                        help="Threads used for the placement search")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for tie-breaking and easy/medium picks")
    parser.add_argument("--top", type=int, default=10,
                        help="Number of ranked moves to print")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    dictionary = Dictionary(args.dict)
    engine = MoveEngine(dictionary, workers=args.workers)

    try:
        if args.board:
            board = read_board(args.board)
            rack_text = args.rack or ""
        else:
            board, rack_text = manual_board_input()
            if args.rack:
                rack_text = args.rack
        rack = make_rack(rack_text)
        return run_cli(engine, board, rack, args)
    except InputError as exc:
        log.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
