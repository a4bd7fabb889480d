"""Word list with trie-backed prefix search and authoritative word approval."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Iterable

from tileplay.constants import BOARD_SIZE
from tileplay.errors import DictionaryUnavailable
from tileplay.trie import Trie

log = logging.getLogger("tileplay")

DEFAULT_SEARCH_PATHS = (
    "dictionary.txt",
    "sowpods.txt",
    "twl06.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
)

# fmt: off
FALLBACK_WORDS = frozenset({
    "AA", "AB", "AD", "AE", "AG", "AH", "AI", "AL", "AM", "AN",
    "AR", "AS", "AT", "AW", "AX", "AY", "BA", "BE", "BI", "BO",
    "BY", "DA", "DE", "DO", "ED", "EF", "EH", "EL", "EM", "EN",
    "ER", "ES", "ET", "EX", "FA", "FE", "GO", "HA", "HE", "HI",
    "HM", "HO", "ID", "IF", "IN", "IS", "IT", "JO", "KA", "KI",
    "LA", "LI", "LO", "MA", "ME", "MI", "MO", "MU", "MY", "NA",
    "NE", "NO", "NU", "OD", "OE", "OF", "OH", "OI", "OM", "ON",
    "OP", "OR", "OS", "OW", "OX", "OY", "PA", "PE", "PI", "PO",
    "QI", "RE", "SH", "SI", "SO", "TA", "TI", "TO", "UH", "UM",
    "UN", "UP", "US", "UT", "WE", "WO", "XI", "XU", "YA", "YE",
    "YO", "ZA",
    "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "CAN",
    "HER", "WAS", "ONE", "OUR", "OUT", "DAY", "HAD", "HAS", "HIS",
    "HOW", "ITS", "MAY", "NEW", "NOW", "OLD", "SEE", "WAY", "WHO",
    "CAT", "CATS", "DOG", "DOGS", "RUN", "SET", "TOP", "RED", "TEN",
    "WORD", "PLAY", "GAME", "TILE", "BEST", "MOVE", "QUIZ", "JUMP",
    "ZONE", "HELLO", "WORLD", "TEST", "WIN", "LOSE", "YES", "RATE",
    "TEAR", "STAR", "RATS", "ARTS", "EATS", "SEAT", "EAST", "TEAS",
    "STONE", "NOTES", "TONES", "ONSET", "RAISE", "ARISE", "STARE",
})
# fmt: on


class Dictionary:
    """Word list with both set-lookup and trie-based prefix search.

    The trie prunes the search; :meth:`approve` is the authoritative check
    the engine runs on every formed word before accepting a move.  Build
    one instance per process and pass it to every engine that needs it.
    """

    def __init__(
        self,
        dict_path: str | None = None,
        words: Iterable[str] | None = None,
        max_length: int = BOARD_SIZE,
    ):
        self.words: set[str] = set()
        self.max_length = max_length
        self.source: str | None = None
        if words is not None:
            self._add_words(words)
            self.source = "<memory>"
        else:
            try:
                self._load(dict_path)
            except DictionaryUnavailable as exc:
                log.warning("%s -- using built-in minimal word list.", exc)
                log.warning("Save SOWPODS or TWL06 as dictionary.txt for best results.")
                self._add_words(FALLBACK_WORDS)
                self.source = "<fallback>"
        self.trie = Trie.build(sorted(self.words))

    def _load(self, dict_path: str | None) -> None:
        search_paths: list[str] = []
        if dict_path:
            search_paths.append(dict_path)
        search_paths.extend(DEFAULT_SEARCH_PATHS)

        for path in search_paths:
            if os.path.exists(path):
                with open(path, "r", encoding="utf-8") as f:
                    self._add_words(f)
                if self.words:
                    log.info("Loaded %s words from %s", f"{len(self.words):,}", path)
                    self.source = path
                    return

        raise DictionaryUnavailable(search_paths)

    def _add_words(self, lines: Iterable[str]) -> None:
        for line in lines:
            word = line.strip().upper()
            if 2 <= len(word) <= self.max_length and word.isalpha() and word.isascii():
                self.words.add(word)

    def is_valid(self, word: str) -> bool:
        return word.upper() in self.words

    def approve(self, words: Iterable[str]) -> list[str]:
        """Subset of *words* that are not in the word list (empty = all valid)."""
        return [w for w in words if not self.is_valid(w)]

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.words)


class AsyncValidator:
    """Wrap a synchronous validator so ``approve`` becomes awaitable.

    Stands in for a remote word-approval service: each call is pushed to a
    worker thread, so slow lookups never block the event loop.
    """

    def __init__(self, validator):
        self.validator = validator

    async def approve(self, words: Iterable[str]) -> list[str]:
        return await asyncio.to_thread(self.validator.approve, list(words))
