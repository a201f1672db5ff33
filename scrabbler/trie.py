"""Prefix trie stored as a node arena for O(1) child lookups."""

from __future__ import annotations

import numpy as np

from scrabbler.constants import ALPHABET

ROOT = 0
ABSENT = -1
NO_LETTER = -1  # letter slot of the root node

_INITIAL_CAPACITY = 1024


def letter_index(letter: str) -> int:
    """0..25 for 'A'..'Z' (either case)."""
    return ord(letter.upper()) - ord("A")


class Trie:
    """Prefix trie for fast word and prefix checks.

    Nodes are integer ids into three parallel arrays: ``children`` (one row of
    26 child ids per node, ``ABSENT`` where there is no child), ``terminal``
    and ``letters``. Node 0 is the root.
    """

    def __init__(self):
        self._children = np.full((_INITIAL_CAPACITY, 26), ABSENT, dtype=np.int32)
        self._terminal = np.zeros(_INITIAL_CAPACITY, dtype=bool)
        self._letters = np.full(_INITIAL_CAPACITY, NO_LETTER, dtype=np.int8)
        self._size = 1

    def __len__(self) -> int:
        """Number of nodes, root included."""
        return self._size

    @property
    def children(self) -> np.ndarray:
        return self._children[: self._size]

    def insert(self, word: str) -> None:
        node = ROOT
        for ch in word:
            idx = letter_index(ch)
            child = self._children[node, idx]
            if child == ABSENT:
                child = self._new_node(idx)
                self._children[node, idx] = child
            node = int(child)
        self._terminal[node] = True

    def child(self, node: int, letter: str) -> int:
        """Child of *node* for *letter*, or ``ABSENT``."""
        return int(self._children[node, letter_index(letter)])

    def letter(self, node: int) -> str | None:
        """Letter stored on *node*; None for the root."""
        idx = int(self._letters[node])
        return None if idx == NO_LETTER else ALPHABET[idx]

    def is_terminal(self, node: int) -> bool:
        return bool(self._terminal[node])

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node != ABSENT and self.is_terminal(node)

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) != ABSENT

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def _walk(self, s: str) -> int:
        node = ROOT
        for ch in s:
            if not (ch.isascii() and ch.isalpha()):
                return ABSENT
            node = self.child(node, ch)
            if node == ABSENT:
                return ABSENT
        return node

    def _new_node(self, idx: int) -> int:
        if self._size == len(self._terminal):
            self._grow()
        node = self._size
        self._letters[node] = idx
        self._size += 1
        return node

    def _grow(self) -> None:
        capacity = len(self._terminal) * 2
        children = np.full((capacity, 26), ABSENT, dtype=np.int32)
        children[: self._size] = self._children[: self._size]
        terminal = np.zeros(capacity, dtype=bool)
        terminal[: self._size] = self._terminal[: self._size]
        letters = np.full(capacity, NO_LETTER, dtype=np.int8)
        letters[: self._size] = self._letters[: self._size]
        self._children, self._terminal, self._letters = children, terminal, letters
