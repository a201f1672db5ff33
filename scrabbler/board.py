"""Game board: bonus layout, letters on the board and per-cell search data."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Set
from enum import Enum

import numpy as np

from scrabbler.constants import DEFAULT_LAYOUT
from scrabbler.crosscheck import annotate
from scrabbler.errors import DataError
from scrabbler.move import Move

log = logging.getLogger("scrabbler")


class BonusType(Enum):
    """Square kind, keyed by its symbol in a layout file."""

    TRIPLE_WORD = "W"
    DOUBLE_WORD = "w"
    TRIPLE_LETTER = "L"
    DOUBLE_LETTER = "l"
    REGULAR = "."
    OUTSIDE = "x"

    @property
    def letter_multiplier(self) -> int:
        if self is BonusType.TRIPLE_LETTER:
            return 3
        if self is BonusType.DOUBLE_LETTER:
            return 2
        return 1

    @property
    def word_multiplier(self) -> int:
        if self is BonusType.TRIPLE_WORD:
            return 3
        if self is BonusType.DOUBLE_WORD:
            return 2
        return 1


_RENDER = {
    BonusType.TRIPLE_WORD: "TW",
    BonusType.DOUBLE_WORD: "DW",
    BonusType.TRIPLE_LETTER: "TL",
    BonusType.DOUBLE_LETTER: "DL",
    BonusType.REGULAR: ".",
    BonusType.OUTSIDE: "#",
}


class Cell:
    """One square. ``letter`` is None (empty), 'A'-'Z' (tile) or 'a'-'z'
    (blank played as that letter)."""

    __slots__ = ("row", "col", "bonus", "letter", "cross_check", "min_length")

    def __init__(self, row: int, col: int, bonus: BonusType, letter: str | None = None):
        self.row = row
        self.col = col
        self.bonus = bonus
        self.letter = letter
        self.cross_check = np.full(26, bonus is not BonusType.OUTSIDE, dtype=bool)
        self.min_length = -1

    @property
    def is_outside(self) -> bool:
        return self.bonus is BonusType.OUTSIDE

    @property
    def is_empty(self) -> bool:
        return self.letter is None and not self.is_outside

    def copy(self) -> Cell:
        c = Cell(self.row, self.col, self.bonus, self.letter)
        c.cross_check = self.cross_check.copy()
        c.min_length = self.min_length
        return c

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col}, {self.bonus.name}, {self.letter!r})"


class Grid:
    """Rectangular board surrounded by a ring of OUTSIDE cells.

    Board coordinates are 0-based; ``at(row, col)`` also accepts -1 and
    ``n_rows``/``n_cols`` to reach the ring, so neighbour lookups never need a
    bounds check.
    """

    def __init__(self, bonuses: list[list[BonusType]]):
        self.n_rows = len(bonuses)
        self.n_cols = len(bonuses[0]) if bonuses else 0
        self._cells: list[list[Cell]] = []
        for r in range(-1, self.n_rows + 1):
            row: list[Cell] = []
            for c in range(-1, self.n_cols + 1):
                inside = 0 <= r < self.n_rows and 0 <= c < self.n_cols
                bonus = bonuses[r][c] if inside else BonusType.OUTSIDE
                row.append(Cell(r, c, bonus))
            self._cells.append(row)

    # construction

    @classmethod
    def from_layout(cls, rows: list[str]) -> Grid:
        """Build an empty grid from layout rows of W/w/L/l/./x symbols."""
        rows = [line.strip() for line in rows if line.strip()]
        if not rows:
            raise DataError("board layout is empty")
        width = len(rows[0])
        bonuses: list[list[BonusType]] = []
        for r, line in enumerate(rows):
            if len(line) != width:
                raise DataError(f"layout row {r} has {len(line)} squares, expected {width}")
            try:
                bonuses.append([BonusType(ch) for ch in line])
            except ValueError:
                raise DataError(f"unknown square symbol in layout row {r}: {line!r}") from None
        return cls(bonuses)

    @classmethod
    def from_file(cls, path: str) -> Grid:
        return cls.from_layout(_read_rows(path))

    def load_letters(self, rows: list[str]) -> None:
        """Overlay a game state: '.' empty, uppercase tile, lowercase blank."""
        rows = [line.strip() for line in rows if line.strip()]
        if len(rows) != self.n_rows:
            raise DataError(f"game state has {len(rows)} rows, board has {self.n_rows}")
        for r, line in enumerate(rows):
            if len(line) != self.n_cols:
                raise DataError(f"game state row {r} has {len(line)} squares, expected {self.n_cols}")
            for c, ch in enumerate(line):
                if ch == ".":
                    self._cells[r + 1][c + 1].letter = None
                    continue
                if not (ch.isascii() and ch.isalpha()):
                    raise DataError(f"bad letter {ch!r} at ({r},{c})")
                if self._cells[r + 1][c + 1].is_outside:
                    raise DataError(f"letter {ch!r} on out-of-bounds square ({r},{c})")
                self._cells[r + 1][c + 1].letter = ch

    def load_letters_file(self, path: str) -> None:
        self.load_letters(_read_rows(path))

    # access

    def at(self, row: int, col: int) -> Cell:
        return self._cells[row + 1][col + 1]

    def all_cells(self) -> Iterator[Cell]:
        """In-board cells, row by row."""
        for row in self._cells[1:-1]:
            yield from row[1:-1]

    @property
    def center(self) -> tuple[int, int]:
        return self.n_rows // 2, self.n_cols // 2

    def is_board_empty(self) -> bool:
        return all(cell.letter is None for cell in self.all_cells())

    def count_tiles(self) -> int:
        return sum(1 for cell in self.all_cells() if cell.letter is not None)

    def set_letter(self, row: int, col: int, letter: str | None) -> None:
        """Place a letter (lowercase for a blank) or clear the cell with None or '.'."""
        if not (0 <= row < self.n_rows and 0 <= col < self.n_cols):
            raise ValueError(f"({row},{col}) is off the board")
        cell = self.at(row, col)
        if letter is None or letter == ".":
            cell.letter = None
            return
        if len(letter) != 1 or not (letter.isascii() and letter.isalpha()):
            raise ValueError(f"bad letter {letter!r}")
        if cell.is_outside:
            raise ValueError(f"({row},{col}) is out of bounds")
        cell.letter = letter

    # derived grids

    def annotate(self, words: Set[str]) -> None:
        """Recompute cross-checks and minimum connecting lengths."""
        annotate(self, words)

    def copy(self) -> Grid:
        g = Grid.__new__(Grid)
        g.n_rows, g.n_cols = self.n_rows, self.n_cols
        g._cells = [[cell.copy() for cell in row] for row in self._cells]
        return g

    def transposed(self, words: Set[str] | None = None) -> Grid:
        """Grid with rows and columns swapped; annotated against *words* if given."""
        g = Grid.__new__(Grid)
        g.n_rows, g.n_cols = self.n_cols, self.n_rows
        g._cells = []
        for c in range(len(self._cells[0])):
            row: list[Cell] = []
            for r in range(len(self._cells)):
                src = self._cells[r][c]
                row.append(Cell(src.col, src.row, src.bonus, src.letter))
            g._cells.append(row)
        if words is not None:
            g.annotate(words)
        return g

    # moves

    def commit(self, move: Move, words: Set[str]) -> None:
        """Write the move's tiles onto the board and re-annotate."""
        for tile in move.tiles:
            cell = self.at(tile.row, tile.col)
            if not cell.is_empty:
                raise ValueError(f"square ({tile.row},{tile.col}) is not free")
        for tile in move.tiles:
            self.at(tile.row, tile.col).letter = tile.board_letter
        self.annotate(words)

    def main_word(self, move: Move) -> str:
        """Word the move spells along its direction, board letters included."""
        if not move.tiles:
            return ""
        dr, dc = (1, 0) if move.direction == "V" else (0, 1)
        placed = {(t.row, t.col): t.letter for t in move.tiles}
        r, c = move.tiles[0].row, move.tiles[0].col
        while self.at(r - dr, c - dc).letter is not None:
            r, c = r - dr, c - dc
        letters: list[str] = []
        while True:
            if (r, c) in placed:
                letters.append(placed[(r, c)])
            elif self.at(r, c).letter is not None:
                letters.append(self.at(r, c).letter.upper())
            else:
                break
            r, c = r + dr, c + dc
        return "".join(letters)

    # rendering

    def letter_rows(self) -> list[str]:
        """Game state as overlay rows ('.' for empty squares)."""
        return [
            "".join(self.at(r, c).letter or "." for c in range(self.n_cols))
            for r in range(self.n_rows)
        ]

    def __str__(self) -> str:
        header = "    " + "".join(f"{c:>3}" for c in range(self.n_cols))
        sep = "    " + "---" * self.n_cols
        lines = [header, sep]
        for r in range(self.n_rows):
            parts = [f"{r:>2} |"]
            for c in range(self.n_cols):
                cell = self.at(r, c)
                if cell.letter:
                    parts.append(f"  {cell.letter}")
                else:
                    parts.append(f"{_RENDER[cell.bonus]:>3}")
            lines.append("".join(parts))
        return "\n".join(lines)


def _read_rows(path: str) -> list[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().split()
    except OSError as exc:
        log.error("Could not open %s: %s", path, exc)
        return []


def default_grid() -> Grid:
    """Empty standard 15x15 board."""
    return Grid.from_layout(DEFAULT_LAYOUT)
