"""Transposition table and mate-distance helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from argochess.move import NO_MOVE, Move

MATE_SCORE = 49_000
# Bytes taken by one entry in the packed table layout.
ENTRY_SIZE = 48
_KEY_MASK = (1 << 64) - 1


def win_in(height: int) -> int:
    """Score for giving mate at the given height."""
    return MATE_SCORE - height


def loss_in(height: int) -> int:
    """Score for being mated at the given height."""
    return -MATE_SCORE + height


class TTFlag(IntEnum):
    """Kind of score held in an entry."""

    EXACT = 0  # score within the alpha-beta window
    ALPHA = 1  # upper bound: failed low
    BETA = 2  # lower bound: failed high


@dataclass(frozen=True)
class TTEntry:
    """One stored search result."""

    key: int = 0
    depth: int = 0
    score: int = 0
    flag: TTFlag = TTFlag.EXACT
    best_move: Move = NO_MOVE
    age: int = 0


_EMPTY_ENTRY = TTEntry()


class TranspositionTable:
    """Fixed-size hash table of search results indexed by position key."""

    def __init__(self, size_in_mb: int) -> None:
        count = (size_in_mb * 1024 * 1024) // ENTRY_SIZE
        if count <= 0:
            raise ValueError(f"table size too small: {size_in_mb} MB")
        self.size = count
        self.age = 0
        self._entries: list[TTEntry | None] = [None] * count

    def new_search(self) -> None:
        """Advance the age so that older entries become replaceable."""
        self.age = (self.age + 1) & 0xFF

    def clear(self) -> None:
        self._entries = [None] * self.size

    def _index(self, key: int) -> int:
        return (key & _KEY_MASK) % self.size

    def store(
        self, key: int, score: int, depth: int, flag: TTFlag, best_move: Move
    ) -> None:
        """Store a result, replacing empty, older or shallower entries."""
        index = self._index(key)
        entry = self._entries[index] or _EMPTY_ENTRY
        if entry.key == 0 or entry.age < self.age or depth >= entry.depth:
            self._entries[index] = TTEntry(
                key=key & _KEY_MASK,
                depth=depth,
                score=score,
                flag=TTFlag(flag),
                best_move=Move(best_move),
                age=self.age,
            )

    def probe(self, key: int) -> TTEntry | None:
        """Return the entry stored for key, or None."""
        entry = self._entries[self._index(key)] or _EMPTY_ENTRY
        if entry.key == key & _KEY_MASK:
            return entry
        return None