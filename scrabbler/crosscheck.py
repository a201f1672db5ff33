"""Cross-check engine.

Annotates every cell of a grid with the two facts the move search prunes on:

* ``cross_check``: which of the 26 letters may be placed on an empty cell
  without breaking the vertical word it would join;
* ``min_length``: how many tiles a horizontal word starting on the cell must
  place before it touches a tile already on the board (-1 if it never can, or
  if the cell cannot be the first square of a word).

Both are recomputed for the whole board whenever its letters change.
"""

from __future__ import annotations

from collections.abc import Set

import numpy as np

from scrabbler.constants import ALPHABET


def _fragment(grid, row: int, col: int, step: int) -> str:
    """Contiguous letters above (step=-1) or below (step=1) a cell, read top to bottom."""
    letters: list[str] = []
    r = row + step
    cell = grid.at(r, col)
    while cell.letter is not None:
        letters.append(cell.letter.upper())
        r += step
        cell = grid.at(r, col)
    if step < 0:
        letters.reverse()
    return "".join(letters)


def update_cross_checks(grid, words: Set[str]) -> None:
    """Recompute the cross-check set of every cell against the exact word set."""
    for cell in grid.all_cells():
        if cell.is_outside or cell.letter is not None:
            cell.cross_check = np.zeros(26, dtype=bool)
            continue
        above = _fragment(grid, cell.row, cell.col, -1)
        below = _fragment(grid, cell.row, cell.col, 1)
        if not above and not below:
            cell.cross_check = np.ones(26, dtype=bool)
            continue
        cell.cross_check = np.fromiter(
            (f"{above}{letter}{below}" in words for letter in ALPHABET),
            dtype=bool,
            count=26,
        )


def update_min_lengths(grid) -> None:
    """Recompute min_length row by row, scanning each row right to left."""
    for cell in grid.all_cells():
        if cell.is_outside:
            cell.min_length = -1
    for row in range(grid.n_rows):
        running = -1
        for col in range(grid.n_cols - 1, -1, -1):
            cell = grid.at(row, col)
            if cell.is_outside:
                cell.min_length = -1
                running = -1
            elif grid.at(row, col - 1).letter is not None:
                # a word starting here would run into the tile on its left
                cell.min_length = -1
            elif (
                cell.letter is not None
                or grid.at(row - 1, col).letter is not None
                or grid.at(row + 1, col).letter is not None
                or grid.at(row, col + 1).letter is not None
            ):
                cell.min_length = 1
                running = 1
            elif running == -1:
                cell.min_length = -1
            else:
                running += 1
                cell.min_length = running


def annotate(grid, words: Set[str]) -> None:
    update_cross_checks(grid, words)
    update_min_lengths(grid)
