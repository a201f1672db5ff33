"""Move scoring.

A move is scored against the board as it was *before* the move is committed:

* every new tile is worth its letter value (0 for a blank) times the letter
  bonus of its square;
* board letters in the main word count at face value;
* the main word is doubled/tripled once per double/triple-word square covered
  (two double-word squares make x4, double plus triple make x6);
* each new tile that touches a board tile above or below also scores that
  vertical cross word, using only its own square's bonuses;
* placing all seven tiles earns the bingo bonus.
"""

from __future__ import annotations

from collections.abc import Sequence

from scrabbler.board import Grid
from scrabbler.constants import BINGO_BONUS, RACK_CAPACITY
from scrabbler.move import Move, PlacedTile


def letter_points(letter: str, values: Sequence[int]) -> int:
    """Face value of a board letter; lowercase (blank) letters are worth 0."""
    if letter.islower():
        return 0
    return values[ord(letter) - ord("A")]


def _column_points(grid: Grid, row: int, col: int, values: Sequence[int]) -> int:
    """Face value of the contiguous tiles directly above and below (row, col)."""
    total = 0
    r = row - 1
    while grid.at(r, col).letter is not None:
        total += letter_points(grid.at(r, col).letter, values)
        r -= 1
    r = row + 1
    while grid.at(r, col).letter is not None:
        total += letter_points(grid.at(r, col).letter, values)
        r += 1
    return total


def score_across(grid: Grid, tiles: Sequence[PlacedTile], values: Sequence[int]) -> int:
    """Score a horizontal placement of *tiles* on *grid*."""
    if not tiles:
        return 0

    main_score = 0
    word_mult = 1
    total_cross = 0

    for tile in tiles:
        cell = grid.at(tile.row, tile.col)
        letter_val = 0 if tile.is_blank else values[ord(tile.letter.upper()) - ord("A")]
        letter_val *= cell.bonus.letter_multiplier
        main_score += letter_val

        cross = 0
        if (
            grid.at(tile.row - 1, tile.col).letter is not None
            or grid.at(tile.row + 1, tile.col).letter is not None
        ):
            cross = _column_points(grid, tile.row, tile.col, values) + letter_val
        total_cross += cross * cell.bonus.word_multiplier
        word_mult *= cell.bonus.word_multiplier

    # board letters before, between and after the new tiles
    row = tiles[0].row
    col = tiles[0].col - 1
    while grid.at(row, col).letter is not None:
        main_score += letter_points(grid.at(row, col).letter, values)
        col -= 1
    for col in range(tiles[0].col, tiles[-1].col + 1):
        letter = grid.at(row, col).letter
        if letter is not None:
            main_score += letter_points(letter, values)
    col = tiles[-1].col + 1
    while grid.at(row, col).letter is not None:
        main_score += letter_points(grid.at(row, col).letter, values)
        col += 1

    total = main_score * word_mult + total_cross
    if len(tiles) >= RACK_CAPACITY:
        total += BINGO_BONUS
    return total


def score_move(grid: Grid, move: Move, values: Sequence[int]) -> int:
    """Score *move* in its own direction; vertical moves go through the transpose."""
    if move.direction == "V":
        return score_across(grid.transposed(), [t.transposed() for t in move.tiles], values)
    return score_across(grid, move.tiles, values)
