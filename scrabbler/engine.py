"""Move engine: anchor-based generation with trie pruning.

Horizontal moves are built left to right from start squares whose minimum
connecting length fits on the rack (a simplified Appel-Jacobson search over a
trie instead of a DAWG). Vertical moves reuse the same search on the
transposed board.
"""

from __future__ import annotations

import logging

import numpy as np

from scrabbler.board import Cell, Grid
from scrabbler.constants import ALPHABET
from scrabbler.context import Context
from scrabbler.move import Move, PlacedTile
from scrabbler.rack import BLANK_SLOT, Rack
from scrabbler.scoring import score_across
from scrabbler.trie import ROOT

log = logging.getLogger("scrabbler.search")


class MoveEngine:
    """Finds the highest-scoring move for a board and rack."""

    def __init__(self, context: Context):
        self.context = context
        self.trie = context.trie

    # public API

    def find_best_move(self, board: Grid, rack: Rack | str) -> Move:
        """Best move in either direction; an empty Move scoring 0 if none."""
        if isinstance(rack, str):
            rack = Rack.from_string(rack)
        rack = rack.copy()

        across_grid = board.copy()
        across_grid.annotate(self.context.words)
        across = self.find_best_across(across_grid, rack)

        down_grid = board.transposed(self.context.words)
        down = self.find_best_across(down_grid, rack).transposed()

        best = down if down and (not across or down.score > across.score) else across
        if best:
            best.word = across_grid.main_word(best)
        log.debug("Best across: %r  best down: %r", across, down)
        return best

    def find_best_across(self, grid: Grid, rack: Rack) -> Move:
        """Best horizontal move on an annotated *grid*."""
        search = _AcrossSearch(grid, rack, self.trie, self.context.values)
        if grid.is_board_empty():
            search.run_opening()
        else:
            search.run()
        log.debug(
            "Across search: %d candidates scored, best %d",
            search.candidates, search.best.score,
        )
        return search.best


class _AcrossSearch:
    """State of one horizontal search: the rack and partial move are mutated
    while recursing and restored before each call returns."""

    def __init__(self, grid: Grid, rack: Rack, trie, values):
        self.grid = grid
        self.rack = rack
        self.trie = trie
        self.values = values
        self.best = Move()
        self.best_score = -1
        self.candidates = 0
        self._partial: list[PlacedTile] = []

    def run(self) -> None:
        tiles = len(self.rack)
        for cell in self.grid.all_cells():
            if 1 <= cell.min_length <= tiles:
                self._extend_right(cell, ROOT, cell.min_length)

    def run_opening(self) -> None:
        """Empty board: the first word must cover the centre with two or more tiles."""
        tiles = len(self.rack)
        mid_row, mid_col = self.grid.center
        for col in range(mid_col + 1):
            min_length = 2 if col == mid_col else mid_col - col + 1
            if min_length <= tiles:
                self._extend_right(self.grid.at(mid_row, col), ROOT, min_length)

    def _extend_right(self, cell: Cell, node: int, min_length: int) -> None:
        """Grow the partial move rightwards from *cell* along trie *node*.

        Reaching the border ring ends the word rather than abandoning it, so a
        word whose last letter sits on the final column is still scored.
        """
        if cell.is_outside:
            self._consider(node, min_length)
            return

        if cell.letter is not None:
            child = self.trie.child(node, cell.letter)
            if child >= 0:
                self._extend_right(self.grid.at(cell.row, cell.col + 1), child, min_length)
            return

        self._consider(node, min_length)

        children = self.trie.children[node]
        next_cell = self.grid.at(cell.row, cell.col + 1)
        for idx in np.flatnonzero((children >= 0) & cell.cross_check):
            idx = int(idx)
            if self.rack.counts[idx] > 0:
                self._place(cell, next_cell, int(children[idx]), idx, idx, min_length)
            elif self.rack.counts[BLANK_SLOT] > 0:
                self._place(cell, next_cell, int(children[idx]), idx, BLANK_SLOT, min_length)

    def _place(self, cell: Cell, next_cell: Cell, child: int, idx: int, slot: int, min_length: int) -> None:
        self.rack.take(slot)
        self._partial.append(PlacedTile(cell.row, cell.col, ALPHABET[idx], slot == BLANK_SLOT))
        try:
            self._extend_right(next_cell, child, min_length)
        finally:
            self._partial.pop()
            self.rack.put_back(slot)

    def _consider(self, node: int, min_length: int) -> None:
        if not self.trie.is_terminal(node) or len(self._partial) < min_length:
            return
        self.candidates += 1
        score = score_across(self.grid, self._partial, self.values)
        if score > self.best_score:
            self.best_score = score
            self.best = Move(list(self._partial), score, "H")


def find_best_move(board: Grid, rack: Rack | str, context: Context) -> Move:
    """Highest-scoring legal move for *rack* on *board*."""
    return MoveEngine(context).find_best_move(board, rack)