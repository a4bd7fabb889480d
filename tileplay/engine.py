"""Move engine: anchor-based placement search over rack-generated words.

One call works on a single board/rack snapshot:

  1. derive cross-sets and anchors from the board,
  2. generate candidate words from the rack (plus one board letter),
  3. try every word x direction x anchor x offset placement,
  4. check placement rules, then ask the validator to approve the words,
  5. score, optionally re-rank with heuristics, and pick by difficulty.

The trie only prunes; the validator has the final say on every word.
"""

from __future__ import annotations

import inspect
import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, Sequence

from tileplay.anchors import find_anchors
from tileplay.board import Board
from tileplay.constants import DIRECTIONS, step
from tileplay.cross_sets import compute_cross_sets
from tileplay.dictionary import Dictionary
from tileplay.errors import (
    DictionaryRejected,
    InputError,
    NoMoveFound,
    ValidationRejected,
)
from tileplay.heuristics import evaluate_board_control, evaluate_rack_leave, selection_score
from tileplay.move import Move
from tileplay.placement import try_place_word
from tileplay.scoring import score_move
from tileplay.selector import HARD, estimate_max_score, normalize_difficulty, rank_moves, select_move
from tileplay.tiles import Tile, make_rack, rack_letters, remaining_rack
from tileplay.validation import validate_move
from tileplay.word_generator import generate_words, generate_words_with_board_letter

log = logging.getLogger("tileplay.engine")

_CLOCK_EVERY = 64  # attempts between deadline checks


class SearchBudget:
    """Attempt counter and optional wall-clock deadline for one search."""

    def __init__(self, max_attempts: int | None = None, deadline: float | None = None):
        self.max_attempts = max_attempts
        self.expires = time.monotonic() + deadline if deadline is not None else None
        self.attempts = 0
        self.exhausted = False

    def tick(self) -> bool:
        """Count one placement attempt; False once the budget is spent.

        The call that finds the budget spent is not counted as an attempt.
        """
        if self.exhausted:
            return False
        if self.max_attempts is not None and self.attempts >= self.max_attempts:
            self.exhausted = True
        elif (self.expires is not None and self.attempts % _CLOCK_EVERY == 0
              and time.monotonic() >= self.expires):
            self.exhausted = True
        else:
            self.attempts += 1
        return not self.exhausted

    def split(self, parts: int) -> list[SearchBudget]:
        """Per-worker budgets whose attempt shares add up to this one's."""
        budgets = []
        for i in range(parts):
            share = None
            if self.max_attempts is not None:
                share = self.max_attempts // parts + (1 if i < self.max_attempts % parts else 0)
            b = SearchBudget(share)
            b.expires = self.expires
            budgets.append(b)
        return budgets


class _Bound:
    """Best selection score accepted so far, for hard-mode pruning."""

    __slots__ = ("best", "found")

    def __init__(self):
        self.best = 0.0
        self.found = 0

    def accept(self, move: Move) -> None:
        self.found += 1
        if move.selection_score > self.best:
            self.best = move.selection_score


class _Context:
    """Everything derived from one board/rack snapshot."""

    __slots__ = (
        "board", "rack", "cross_sets", "anchors", "words",
        "is_first_move", "moves_made", "independent", "use_heuristics", "prune",
    )

    def __init__(self, **kwargs):
        for name, value in kwargs.items():
            setattr(self, name, value)


class MoveEngine:
    """Finds, validates, scores and selects moves for one board and rack.

    *validator* is anything with ``approve(words) -> invalid_words``; it
    defaults to the dictionary itself and may return an awaitable when used
    through :meth:`find_move_async`.  With ``workers > 1`` the synchronous
    search is split across a thread pool.
    """

    def __init__(self, dictionary: Dictionary, validator=None, workers: int = 1):
        self.dict = dictionary
        self.trie = dictionary.trie
        self.validator = validator if validator is not None else dictionary
        self.workers = max(1, workers)

    # public API

    def find_move(
        self,
        board: Board,
        rack: Sequence[Tile] | str,
        difficulty: str = HARD,
        use_heuristics: bool = False,
        moves_made: int = 0,
        independent_start: bool = False,
        max_attempts: int | None = None,
        deadline: float | None = None,
        rng: random.Random | None = None,
    ) -> Move | None:
        """One move chosen by *difficulty*, or None when the player must pass."""
        t0 = time.monotonic()
        level = normalize_difficulty(difficulty)
        ctx = self._prepare(board, rack, use_heuristics, moves_made, independent_start, prune=level == HARD)
        moves = self._collect(ctx, SearchBudget(max_attempts, deadline))
        return self._choose(ctx, moves, level, rng, t0)

    async def find_move_async(
        self,
        board: Board,
        rack: Sequence[Tile] | str,
        difficulty: str = HARD,
        use_heuristics: bool = False,
        moves_made: int = 0,
        independent_start: bool = False,
        max_attempts: int | None = None,
        deadline: float | None = None,
        rng: random.Random | None = None,
    ) -> Move | None:
        """Same as :meth:`find_move`, awaiting an asynchronous validator."""
        t0 = time.monotonic()
        level = normalize_difficulty(difficulty)
        ctx = self._prepare(board, rack, use_heuristics, moves_made, independent_start, prune=level == HARD)
        moves = await self._collect_async(ctx, SearchBudget(max_attempts, deadline))
        return self._choose(ctx, moves, level, rng, t0)

    def find_moves(
        self,
        board: Board,
        rack: Sequence[Tile] | str,
        use_heuristics: bool = False,
        moves_made: int = 0,
        independent_start: bool = False,
        max_attempts: int | None = None,
        deadline: float | None = None,
    ) -> list[Move]:
        """Every accepted move (no pruning), in search order."""
        ctx = self._prepare(board, rack, use_heuristics, moves_made, independent_start, prune=False)
        return self._collect(ctx, SearchBudget(max_attempts, deadline))

    def find_best_moves(self, board: Board, rack: Sequence[Tile] | str, top_n: int = 10, **kwargs) -> list[Move]:
        """Top N moves by selection score."""
        return rank_moves(self.find_moves(board, rack, **kwargs))[:top_n]

    # setup

    def _prepare(
        self,
        board: Board,
        rack: Sequence[Tile] | str,
        use_heuristics: bool,
        moves_made: int,
        independent_start: bool,
        prune: bool,
    ) -> _Context:
        if not isinstance(board, Board):
            raise InputError(f"board must be a Board, got {type(board).__name__}")
        if isinstance(rack, str):
            rack = make_rack(rack)
        rack = tuple(rack)
        if not rack:
            raise InputError("rack is empty")
        if not all(isinstance(t, Tile) for t in rack):
            raise InputError("rack must contain Tile objects")

        independent = independent_start and moves_made == 0
        anchors = find_anchors(board, independent)
        cross_sets = compute_cross_sets(board, self.trie)
        is_first_move = board.is_board_empty()

        max_len = max(board.rows, board.cols)
        words = generate_words(rack, self.trie, max_len)
        if not is_first_move and not independent:
            for fragment in board_fragments(board):
                words |= generate_words_with_board_letter(rack, fragment, self.trie, max_len)
        elif independent:
            log.debug("Skipping board-aware words: first move must start independently")

        log.info(
            "Rack %s: %d anchors, %d candidate words",
            rack_letters(rack), len(anchors), len(words),
        )
        return _Context(
            board=board,
            rack=rack,
            cross_sets=cross_sets,
            anchors=anchors,
            words=sorted(words, key=lambda w: (-len(w), w)),
            is_first_move=is_first_move,
            moves_made=moves_made,
            independent=independent,
            use_heuristics=use_heuristics,
            prune=prune,
        )

    # search

    def _search(
        self,
        ctx: _Context,
        words: Sequence[str],
        budget: SearchBudget,
        bound: _Bound,
    ) -> Iterator[Move]:
        """Yield validated, scored moves still awaiting word approval."""
        seen: set[tuple] = set()
        for word in words:
            if ctx.prune and bound.found and estimate_max_score(word, ctx.rack) < bound.best:
                continue
            for direction in DIRECTIONS:
                for anchor in ctx.anchors:
                    for offset in range(len(word)):
                        if not budget.tick():
                            return
                        move = self._attempt(ctx, word, direction, anchor, offset)
                        if move is None:
                            continue
                        key = move.key()
                        if key in seen:
                            continue
                        seen.add(key)
                        yield move

    def _attempt(
        self,
        ctx: _Context,
        word: str,
        direction: str,
        anchor: tuple[int, int],
        offset: int,
    ) -> Move | None:
        placement = try_place_word(
            ctx.board, word, ctx.rack, anchor, direction, offset, ctx.cross_sets, ctx.independent,
        )
        if placement is None:
            return None
        try:
            words = validate_move(ctx.board, placement, ctx.is_first_move, ctx.moves_made, ctx.independent)
        except ValidationRejected as exc:
            log.debug("Rejected %s at %s %s: %s", word, anchor, direction, exc.reason.name)
            return None
        if not words:
            return None

        score = score_move(ctx.board, placement)
        move = Move(word, words, placement, direction, score)
        if ctx.use_heuristics:
            leave = remaining_rack(ctx.rack, (p.tile.id for p in placement))
            move.leave_score = evaluate_rack_leave(leave)
            move.board_control = evaluate_board_control(ctx.board, placement)
            move.selection_score = selection_score(score, move.leave_score, move.board_control)
        return move

    # approval

    def _collect(self, ctx: _Context, budget: SearchBudget) -> list[Move]:
        if self.workers == 1 or len(ctx.words) < 2:
            moves = self._collect_slice(ctx, ctx.words, budget)
        else:
            chunks = [ctx.words[i::self.workers] for i in range(self.workers)]
            budgets = budget.split(self.workers)
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                results = list(pool.map(self._collect_slice, [ctx] * self.workers, chunks, budgets))
            budget.attempts = sum(b.attempts for b in budgets)
            budget.exhausted = any(b.exhausted for b in budgets)
            moves = _merge(results)
        self._log_budget(budget, len(moves))
        return moves

    def _collect_slice(self, ctx: _Context, words: Sequence[str], budget: SearchBudget) -> list[Move]:
        bound = _Bound()
        moves: list[Move] = []
        for move in self._search(ctx, words, budget, bound):
            try:
                invalid = self.validator.approve(move.words)
                if inspect.isawaitable(invalid):
                    _close(invalid)
                    raise InputError("validator is asynchronous; use find_move_async")
                _check_approval(invalid)
            except InputError:
                raise
            except Exception as exc:  # a failed approval only costs this candidate
                log.debug("Discarded %s: %s", move.word, exc)
                continue
            moves.append(move)
            bound.accept(move)
        return moves

    async def _collect_async(self, ctx: _Context, budget: SearchBudget) -> list[Move]:
        bound = _Bound()
        moves: list[Move] = []
        for move in self._search(ctx, ctx.words, budget, bound):
            try:
                invalid = self.validator.approve(move.words)
                if inspect.isawaitable(invalid):
                    invalid = await invalid
                _check_approval(invalid)
            except InputError:
                raise
            except Exception as exc:  # a failed approval only costs this candidate
                log.debug("Discarded %s: %s", move.word, exc)
                continue
            moves.append(move)
            bound.accept(move)
        self._log_budget(budget, len(moves))
        return moves

    # selection

    def _choose(
        self,
        ctx: _Context,
        moves: list[Move],
        level: str,
        rng: random.Random | None,
        t0: float,
    ) -> Move | None:
        elapsed = time.monotonic() - t0
        log.info("Found %d valid moves in %.2fs", len(moves), elapsed)
        try:
            chosen = select_move(moves, level, rng)
        except NoMoveFound:
            log.info("No legal move for rack %s -- pass", rack_letters(ctx.rack))
            log.debug("Anchors: %d  candidate words tried: %d", len(ctx.anchors), len(ctx.words))
            return None
        if ctx.use_heuristics:
            log.debug(
                "Chose %s: score=%d selection=%.1f leave=%.1f board_control=%.1f",
                chosen.word, chosen.score, chosen.selection_score,
                chosen.leave_score, chosen.board_control,
            )
        return chosen

    @staticmethod
    def _log_budget(budget: SearchBudget, found: int) -> None:
        if budget.exhausted:
            log.warning(
                "Search budget spent after %d attempts; using the %d moves found so far",
                budget.attempts, found,
            )


def _check_approval(invalid: Sequence[str]) -> None:
    if invalid:
        raise DictionaryRejected(list(invalid))


def _close(awaitable) -> None:
    close = getattr(awaitable, "close", None)
    if close is not None:
        close()


def _merge(results: Sequence[list[Move]]) -> list[Move]:
    seen: set[tuple] = set()
    merged: list[Move] = []
    for moves in results:
        for move in moves:
            key = move.key()
            if key not in seen:
                seen.add(key)
                merged.append(move)
    return merged


def board_fragments(board: Board) -> list[str]:
    """Distinct single letters and maximal row/column runs on the board."""
    fragments = {cell.tile.letter for cell in board.occupied()}
    for direction in DIRECTIONS:
        dr, dc = step(direction)
        for cell in board.occupied():
            if board.is_occupied(cell.row - dr, cell.col - dc):
                continue
            letters = []
            r, c = cell.row, cell.col
            while board.is_occupied(r, c):
                letters.append(board.letter(r, c))
                r += dr
                c += dc
            if len(letters) > 1:
                fragments.add("".join(letters))
    return sorted(fragments)
