"""
Pytest configuration and fixtures for the scrabbler tests.
"""

import pytest

from scrabbler.board import Grid
from scrabbler.constants import TILE_VALUES
from scrabbler.context import build_context


def plain_layout(rows, cols, bonuses=None):
    """Layout rows of regular squares with optional {(row, col): symbol} overrides."""
    grid = [["."] * cols for _ in range(rows)]
    for (r, c), symbol in (bonuses or {}).items():
        grid[r][c] = symbol
    return ["".join(row) for row in grid]


@pytest.fixture
def grid_factory():
    """
    Fixture that provides a factory for small boards.

    Usage:
        def test_something(grid_factory):
            grid = grid_factory(5, 5, bonuses={(2, 2): "w"}, letters={(1, 1): "C"})
    """
    def factory(rows=15, cols=15, bonuses=None, letters=None):
        grid = Grid.from_layout(plain_layout(rows, cols, bonuses))
        for (r, c), letter in (letters or {}).items():
            grid.set_letter(r, c, letter)
        return grid

    return factory


@pytest.fixture
def context_factory():
    """Fixture that builds a Context from a word list with standard tile values."""
    def factory(words):
        return build_context(words, TILE_VALUES)

    return factory


@pytest.fixture
def values():
    """Point values for 'A'..'Z' in the order the scorer expects."""
    return tuple(TILE_VALUES[chr(ord("A") + i)] for i in range(26))
