"""Game constants shared by the engine, loaders and CLI."""

from __future__ import annotations

RACK_CAPACITY = 7
BINGO_BONUS = 50  # 50 points for placing all 7 tiles in one move

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BLANK = "?"
BLANK_MARKERS = frozenset("?*")

# Standard English tile set: letter -> (points, count in a full bag)
TILE_TABLE: dict[str, tuple[int, int]] = {
    "A": (1, 9),  "B": (3, 2),  "C": (3, 2),  "D": (2, 4),  "E": (1, 12),
    "F": (4, 2),  "G": (2, 3),  "H": (4, 2),  "I": (1, 9),  "J": (8, 1),
    "K": (5, 1),  "L": (1, 4),  "M": (3, 2),  "N": (1, 6),  "O": (1, 8),
    "P": (3, 2),  "Q": (10, 1), "R": (1, 6),  "S": (1, 4),  "T": (1, 6),
    "U": (1, 4),  "V": (4, 2),  "W": (4, 2),  "X": (8, 1),  "Y": (4, 2),
    "Z": (10, 1), "?": (0, 2),
}

TILE_VALUES: dict[str, int] = {letter: pts for letter, (pts, _) in TILE_TABLE.items()}

# Board layout symbols
# W = triple word, w = double word, L = triple letter, l = double letter,
# . = regular, x = out of bounds
# fmt: off
DEFAULT_LAYOUT: list[str] = [
    "W..l...W...l..W",
    ".w...L...L...w.",
    "..w...l.l...w..",
    "l..w...l...w..l",
    "....w.....w....",
    ".L...L...L...L.",
    "..l...l.l...l..",
    "W..l...w...l..W",
    "..l...l.l...l..",
    ".L...L...L...L.",
    "....w.....w....",
    "l..w...l...w..l",
    "..w...l.l...w..",
    ".w...L...L...w.",
    "W..l...W...l..W",
]
# fmt: on
