"""Rack of tiles held by the player."""

from __future__ import annotations

import logging

import numpy as np

from scrabbler.constants import ALPHABET, BLANK, BLANK_MARKERS, RACK_CAPACITY
from scrabbler.errors import InvalidRackInput

log = logging.getLogger("scrabbler")

BLANK_SLOT = 26


class Rack:
    """Tile counts: slots 0-25 for 'A'-'Z', slot 26 for blanks."""

    __slots__ = ("counts",)

    def __init__(self, counts=None):
        self.counts = np.zeros(27, dtype=np.int64)
        if counts is not None:
            self.counts[:] = counts
        if (self.counts < 0).any():
            raise ValueError("rack counts cannot be negative")

    @classmethod
    def from_string(cls, letters: str, strict: bool = False) -> Rack:
        """Parse a rack such as ``"CEDARS?"``.

        Only uppercase A-Z and the blank markers (``?`` or ``*``) count, and
        only the first seven characters are read. Anything else is skipped
        with a warning, or raises InvalidRackInput when *strict* is set.
        """
        rack = cls()
        if strict and len(letters) > RACK_CAPACITY:
            raise InvalidRackInput(f"rack holds at most {RACK_CAPACITY} tiles, got {len(letters)}")
        if len(letters) > RACK_CAPACITY:
            log.warning("Rack %r longer than %d tiles; extra ignored", letters, RACK_CAPACITY)
        for ch in letters[:RACK_CAPACITY]:
            if ch in BLANK_MARKERS:
                rack.counts[BLANK_SLOT] += 1
            elif len(ch) == 1 and ch in ALPHABET:
                rack.counts[ord(ch) - ord("A")] += 1
            elif strict:
                raise InvalidRackInput(f"invalid rack character {ch!r}")
            else:
                log.warning("Ignoring invalid rack character %r", ch)
        return rack

    @property
    def blanks(self) -> int:
        return int(self.counts[BLANK_SLOT])

    def count(self, letter: str) -> int:
        if letter in BLANK_MARKERS:
            return self.blanks
        return int(self.counts[ord(letter.upper()) - ord("A")])

    def take(self, slot: int) -> None:
        """Remove one tile from *slot* (a letter index or BLANK_SLOT)."""
        if self.counts[slot] <= 0:
            raise ValueError(f"no tile left in rack slot {slot}")
        self.counts[slot] -= 1

    def put_back(self, slot: int) -> None:
        self.counts[slot] += 1

    def copy(self) -> Rack:
        return Rack(self.counts)

    def __len__(self) -> int:
        return int(self.counts.sum())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rack):
            return NotImplemented
        return bool((self.counts == other.counts).all())

    def __str__(self) -> str:
        letters = "".join(ALPHABET[i] * int(n) for i, n in enumerate(self.counts[:26]))
        return letters + BLANK * self.blanks

    def __repr__(self) -> str:
        return f"Rack({str(self)!r})"
