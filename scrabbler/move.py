"""Move representation."""

from __future__ import annotations

from typing import NamedTuple

from scrabbler.constants import RACK_CAPACITY


class PlacedTile(NamedTuple):
    """One new tile: board position, the letter it plays as, and whether it is a blank."""

    row: int
    col: int
    letter: str
    is_blank: bool = False

    @property
    def board_letter(self) -> str:
        """How the tile is written on the board (lowercase for a blank)."""
        return self.letter.lower() if self.is_blank else self.letter.upper()

    def transposed(self) -> PlacedTile:
        return self._replace(row=self.col, col=self.row)


class Move:
    """A placement of new tiles on one line, with its score.

    An empty move (no tiles, score 0) means no legal placement exists.
    """

    __slots__ = ("tiles", "score", "direction", "word")

    def __init__(
        self,
        tiles: list[PlacedTile] | None = None,
        score: int = 0,
        direction: str = "H",
        word: str = "",
    ):
        self.tiles = list(tiles or [])  # ordered by increasing row/col
        self.score = score
        self.direction = direction  # 'H' or 'V'
        self.word = word

    @property
    def is_bingo(self) -> bool:
        return len(self.tiles) >= RACK_CAPACITY

    def rack_letters(self) -> str:
        """Tiles the move takes from the rack, blanks as '?'."""
        return "".join("?" if t.is_blank else t.letter for t in self.tiles)

    def transposed(self) -> Move:
        """Same move with rows and columns swapped."""
        return Move(
            [t.transposed() for t in self.tiles],
            self.score,
            "V" if self.direction == "H" else "H",
            self.word,
        )

    def __len__(self) -> int:
        return len(self.tiles)

    def __bool__(self) -> bool:
        return bool(self.tiles)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return (self.tiles, self.score, self.direction) == (other.tiles, other.score, other.direction)

    def __repr__(self) -> str:
        if not self.tiles:
            return "<no move>"
        bingo = " +BINGO!" if self.is_bingo else ""
        arrow = "→" if self.direction == "H" else "↓"
        first = self.tiles[0]
        label = self.word or "".join(t.board_letter for t in self.tiles)
        return f"{label} at ({first.row},{first.col}) {arrow} = {self.score} pts{bingo}"
