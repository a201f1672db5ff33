"""Tile table: point value and full-set count for every letter and the blank.

The table file holds one ``LETTER POINTS TOTAL`` line per tile type, for
example::

    A 1 9
    B 3 2
    ? 0 2

Either ``?`` or ``*`` names the blank.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from scrabbler.constants import ALPHABET, BLANK, BLANK_MARKERS, TILE_TABLE
from scrabbler.errors import DataError

log = logging.getLogger("scrabbler")


class Tile(NamedTuple):
    letter: str
    points: int
    total: int


def default_tiles() -> dict[str, Tile]:
    return {letter: Tile(letter, pts, total) for letter, (pts, total) in TILE_TABLE.items()}


def parse_tiles(lines) -> dict[str, Tile]:
    """Parse tile-table lines; raises DataError on a malformed line."""
    tiles: dict[str, Tile] = {}
    for lineno, raw in enumerate(lines, 1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != 3:
            raise DataError(f"line {lineno}: expected 'LETTER POINTS TOTAL', got {raw.strip()!r}")
        letter, points, total = parts
        letter = BLANK if letter in BLANK_MARKERS else letter.upper()
        if letter != BLANK and (len(letter) != 1 or letter not in ALPHABET):
            raise DataError(f"line {lineno}: bad tile letter {parts[0]!r}")
        try:
            pts, count = int(points), int(total)
        except ValueError:
            raise DataError(f"line {lineno}: points and total must be integers") from None
        if pts < 0 or count < 0:
            raise DataError(f"line {lineno}: negative value for {letter}")
        tiles[letter] = Tile(letter, pts, count)
    return tiles


def load_tiles(path: str) -> dict[str, Tile]:
    """Read a tile table from *path*; an unreadable file is logged and yields {}."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            tiles = parse_tiles(f)
    except OSError as exc:
        log.error("Could not open %s: %s", path, exc)
        return {}
    log.info("Loaded %d tile types from %s", len(tiles), path)
    return tiles


def tile_values(tiles: dict[str, Tile]) -> dict[str, int]:
    """letter -> points, as expected by :func:`scrabbler.context.build_context`."""
    return {letter: tile.points for letter, tile in tiles.items()}
