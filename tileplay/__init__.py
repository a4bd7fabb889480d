"""Tileplay -- move generation, validation and scoring for tile-placement word games."""

from tileplay.anchors import find_anchors
from tileplay.board import Board, Cell
from tileplay.constants import BOARD_SIZE, FULL_RACK_BONUS, RACK_SIZE, STANDARD_LAYOUT, TILE_VALUES
from tileplay.cross_sets import CrossSets, compute_cross_sets
from tileplay.dictionary import AsyncValidator, Dictionary
from tileplay.engine import MoveEngine, SearchBudget
from tileplay.errors import (
    DictionaryRejected,
    DictionaryUnavailable,
    InputError,
    NoMoveFound,
    Rejection,
    TileplayError,
    ValidationRejected,
)
from tileplay.heuristics import evaluate_board_control, evaluate_rack_leave
from tileplay.move import Move, PlacedTile
from tileplay.placement import try_place_word
from tileplay.scoring import score_move
from tileplay.selector import select_move
from tileplay.tiles import Tile, make_rack
from tileplay.trie import Trie, TrieNode
from tileplay.validation import validate_move
from tileplay.word_generator import generate_words, generate_words_with_board_letter

__all__ = [
    "BOARD_SIZE",
    "FULL_RACK_BONUS",
    "RACK_SIZE",
    "STANDARD_LAYOUT",
    "TILE_VALUES",
    "AsyncValidator",
    "Board",
    "Cell",
    "CrossSets",
    "Dictionary",
    "DictionaryRejected",
    "DictionaryUnavailable",
    "InputError",
    "Move",
    "MoveEngine",
    "NoMoveFound",
    "PlacedTile",
    "Rejection",
    "SearchBudget",
    "Tile",
    "TileplayError",
    "Trie",
    "TrieNode",
    "ValidationRejected",
    "compute_cross_sets",
    "evaluate_board_control",
    "evaluate_rack_leave",
    "find_anchors",
    "generate_words",
    "generate_words_with_board_letter",
    "make_rack",
    "score_move",
    "select_move",
    "try_place_word",
    "validate_move",
]
