"""Read-only data shared by every search: dictionary, trie and tile values."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from scrabbler.constants import ALPHABET
from scrabbler.dictionary import Dictionary
from scrabbler.errors import DataError

log = logging.getLogger("scrabbler")


@dataclass(frozen=True)
class Context:
    dictionary: Dictionary
    values: tuple[int, ...]  # points for 'A'..'Z'

    @property
    def words(self) -> set[str]:
        return self.dictionary.words

    @property
    def trie(self):
        return self.dictionary.trie

    def points(self, letter: str) -> int:
        return self.values[ord(letter.upper()) - ord("A")]


def build_context(words: Iterable[str], tile_values: Mapping[str, int]) -> Context:
    """Build the dictionary and point table once for any number of searches.

    Raises DataError if there are no usable words, or if a letter that
    appears in the dictionary has no (non-negative integer) point value.
    """
    dictionary = words if isinstance(words, Dictionary) else Dictionary(words)
    if not dictionary.words:
        raise DataError("dictionary is empty")

    normalized: dict[str, int] = {}
    for letter, points in tile_values.items():
        if isinstance(points, bool) or not isinstance(points, int) or points < 0:
            raise DataError(f"bad point value {points!r} for tile {letter!r}")
        normalized[letter.upper()] = points

    needed = set().union(*dictionary.words)
    missing = sorted(needed - normalized.keys())
    if missing:
        raise DataError(f"no tile value for letter(s): {', '.join(missing)}")

    values = tuple(normalized.get(letter, 0) for letter in ALPHABET)
    log.debug("Context ready: %d words, %d trie nodes", len(dictionary), len(dictionary.trie))
    return Context(dictionary, values)
