"""Error taxonomy for the move engine.

Only :class:`InputError` and unrecoverable dictionary load failures escape
an engine call.  Everything else is a per-candidate rejection that the
search absorbs before moving on to the next placement.
"""

from __future__ import annotations

from enum import Enum


class TileplayError(Exception):
    """Base class for all engine errors."""


class InputError(TileplayError):
    """Malformed board or rack snapshot supplied by the caller."""


class NoMoveFound(TileplayError):
    """The search produced no legal candidate; the caller must pass or resign."""


class Rejection(Enum):
    EMPTY = "no tiles placed"
    NOT_LINEAR = "tiles must be placed in a straight line"
    OCCUPIED = "tiles may only be placed on empty squares"
    GAP = "tiles must be contiguous (no gaps)"
    INDEPENDENT_START = "first move must start on an open start square without touching other tiles"
    MUST_COVER_START = "first move must cover a start square"
    TOO_FEW_TILES = "first move needs at least two letters"
    DISCONNECTED = "tiles must connect to existing words"


class ValidationRejected(TileplayError):
    """Placement broke a linearity, contiguity, connectivity or first-move rule."""

    def __init__(self, reason: Rejection):
        super().__init__(reason.value)
        self.reason = reason


class DictionaryRejected(TileplayError):
    """One or more formed words failed dictionary approval."""

    def __init__(self, words: list[str]):
        super().__init__(f"invalid words: {', '.join(words)}")
        self.words = words


class DictionaryUnavailable(TileplayError):
    """No word source could be found at any of the searched paths."""

    def __init__(self, paths: list[str]):
        super().__init__(f"no word list found (searched {len(paths)} paths)")
        self.paths = paths
