"""Dictionary / word list with trie-backed prefix search."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from scrabbler.trie import Trie

log = logging.getLogger("scrabbler")

MIN_SEARCH_LENGTH = 3  # shorter words only count as cross words


def _is_plain_word(word: str) -> bool:
    return word.isascii() and word.isalpha()


class Dictionary:
    """Word list with both set-lookup and trie-based prefix search.

    ``words`` holds every alphabetic entry and answers exact membership for
    cross words of any length. ``trie`` only holds the words long enough to be
    built by the move search.
    """

    def __init__(self, words: Iterable[str] = ()):
        self.words: set[str] = set()
        self.trie = Trie()
        for word in words:
            self.add(word)

    def add(self, word: str) -> None:
        word = word.strip().upper()
        if not _is_plain_word(word):
            return
        self.words.add(word)
        if len(word) >= MIN_SEARCH_LENGTH:
            self.trie.insert(word)

    def is_valid(self, word: str) -> bool:
        return word.upper() in self.words

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.words)


def load_words(path: str) -> set[str]:
    """Read whitespace-separated words from *path*.

    An unreadable file is logged and yields an empty set.
    """
    words: set[str] = set()
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                for token in line.split():
                    token = token.upper()
                    if _is_plain_word(token):
                        words.add(token)
    except OSError as exc:
        log.error("Could not open %s: %s", path, exc)
        return set()
    log.info("Loaded %s words from %s", f"{len(words):,}", path)
    return words


def find_word_list(dict_path: str | None = None) -> str | None:
    """First existing word list among *dict_path* and the usual names."""
    search_paths: list[str] = []
    if dict_path:
        search_paths.append(dict_path)
    search_paths.extend([
        "dictionary.txt",
        "twl06.txt",
        "sowpods.txt",
        "words.txt",
        os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "dictionary.txt"),
        "/usr/share/dict/words",
    ])
    for path in search_paths:
        if os.path.exists(path):
            return path
    return None


def minimal_words() -> set[str]:
    """Built-in fallback word list."""
    two_letter = {
        "AA", "AB", "AD", "AE", "AG", "AH", "AI", "AL", "AM", "AN",
        "AR", "AS", "AT", "AW", "AX", "AY", "BA", "BE", "BI", "BO",
        "BY", "DA", "DE", "DO", "ED", "EF", "EH", "EL", "EM", "EN",
        "ER", "ES", "ET", "EX", "FA", "FE", "GO", "HA", "HE", "HI",
        "HM", "HO", "ID", "IF", "IN", "IS", "IT", "JO", "KA", "KI",
        "LA", "LI", "LO", "MA", "ME", "MI", "MO", "MU", "MY", "NA",
        "NE", "NO", "NU", "OD", "OE", "OF", "OH", "OI", "OM", "ON",
        "OP", "OR", "OS", "OW", "OX", "OY", "PA", "PE", "PI", "PO",
        "QI", "RE", "SH", "SI", "SO", "TA", "TI", "TO", "UH", "UM",
        "UN", "UP", "US", "UT", "WE", "WO", "XI", "XU", "YA", "YE",
        "YO", "ZA",
    }
    common = {
        "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "CAN",
        "HER", "WAS", "ONE", "OUR", "OUT", "DAY", "HAD", "HAS", "HIS",
        "HOW", "ITS", "MAY", "NEW", "NOW", "OLD", "SEE", "WAY", "WHO",
        "BOY", "DID", "GET", "HIM", "LET", "SAY", "SHE", "TOO", "USE",
        "CAT", "DOG", "RUN", "SET", "TOP", "RED", "WORD", "PLAY", "GAME",
        "TILE", "BEST", "MOVE", "QUIZ", "QUAY", "JINX", "ZERO", "ZONE",
        "RACK", "BOARD", "SCORE", "BLANK", "TRIPLE", "DOUBLE", "LETTER",
        "ENTIRE", "RETINA", "RETAIN", "TRAINEE", "CEDAR", "CEDARS",
        "HAVE", "GAVE", "SAVE", "WAVE", "CAVE", "DOVE", "FIVE", "GIVE",
        "LIVE", "LOVE", "OVEN", "OVER", "VERY", "VIEW", "EVEN", "EVER",
        "RATE", "TEAR", "TIRE", "TREE", "TIER", "RENT", "TERN", "NEAR",
        "EARN", "NEAT", "ANTE", "INTER", "RINSE", "STARE", "TEARS",
    }
    return two_letter | common
