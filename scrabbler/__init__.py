"""Scrabbler -- best-move engine for Scrabble-style word grids."""

from scrabbler.constants import BINGO_BONUS, DEFAULT_LAYOUT, RACK_CAPACITY, TILE_VALUES
from scrabbler.errors import DataError, InvalidRackInput
from scrabbler.trie import Trie
from scrabbler.dictionary import Dictionary, load_words
from scrabbler.tiles import Tile, load_tiles
from scrabbler.rack import Rack
from scrabbler.move import Move, PlacedTile
from scrabbler.board import BonusType, Cell, Grid, default_grid
from scrabbler.scoring import score_across, score_move
from scrabbler.context import Context, build_context
from scrabbler.engine import MoveEngine, find_best_move

__all__ = [
    "BINGO_BONUS",
    "DEFAULT_LAYOUT",
    "RACK_CAPACITY",
    "TILE_VALUES",
    "BonusType",
    "Cell",
    "Context",
    "DataError",
    "Dictionary",
    "Grid",
    "InvalidRackInput",
    "Move",
    "MoveEngine",
    "PlacedTile",
    "Rack",
    "Tile",
    "Trie",
    "build_context",
    "default_grid",
    "find_best_move",
    "load_tiles",
    "load_words",
    "score_across",
    "score_move",
]
