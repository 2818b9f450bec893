"""
Per-window follower statistics.

A `FrequencyTable` collects the characters observed right after one window of
the corpus. Counting happens through `record`; `finalize` turns the counts into
probabilities and cumulative probabilities, after which `sample` maps a uniform
draw in [0, 1) to a character.

Iteration order is newest-first: the most recently first-seen character comes
first. The order only affects which character a given draw maps to, never the
distribution itself.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class CharEntry:
    """
    One observed follower of a window. Immutable; the table swaps in a
    new entry whenever the count or probabilities change.

    Attributes:
        character: The follower character
        count: Number of times it was observed (always >= 1)
        p: count / table total, None until the table is finalized
        cp: Cumulative probability in table order, None until finalized
    """
    character: str
    count: int = 1
    p: float | None = None
    cp: float | None = None

    def __str__(self) -> str:
        if self.p is None:
            return f"({self.character} {self.count})"
        return f"({self.character} {self.count} {self.p} {self.cp})"


class FrequencyTable:
    """Followers of a single window with their counts and derived probabilities."""

    def __init__(self) -> None:
        # Insertion order is oldest-first; iteration reverses it.
        self._entries: dict[str, CharEntry] = {}
        self._characters: list[str] = []
        self._cumulative: np.ndarray | None = None

    @property
    def finalized(self) -> bool:
        return self._cumulative is not None

    @property
    def total(self) -> int:
        return sum(entry.count for entry in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharEntry]:
        return reversed(self._entries.values())

    def __contains__(self, character: object) -> bool:
        return character in self._entries

    def __str__(self) -> str:
        return "(" + " ".join(str(entry) for entry in self) + ")"

    def __repr__(self) -> str:
        return f"FrequencyTable{self}"

    def to_list(self) -> list[CharEntry]:
        return list(self)

    def first(self) -> CharEntry | None:
        return next(iter(self), None)

    def find(self, character: str) -> CharEntry | None:
        """Return the entry for `character`, or None if it was never recorded."""
        return self._entries.get(character)

    def index_of(self, character: str) -> int:
        """Position of `character` in iteration order, -1 if absent."""
        for i, entry in enumerate(self):
            if entry.character == character:
                return i
        return -1

    def get(self, index: int) -> CharEntry:
        if index < 0 or index >= len(self._entries):
            raise IndexError(f"index {index} out of range for table of size {len(self._entries)}")
        for i, entry in enumerate(self):
            if i == index:
                return entry
        raise IndexError(index)

    def record(self, character: str) -> None:
        """
        Count one more occurrence of `character`.

        Increments the existing entry, or inserts a new one with count 1 at
        the front of the iteration order.

        Raises:
            ValueError: If `character` is not a single character
            RuntimeError: If the table was already finalized
        """
        if not isinstance(character, str) or len(character) != 1:
            raise ValueError(f"expected a single character, got {character!r}")
        if self.finalized:
            raise RuntimeError("cannot record into a finalized table")

        entry = self._entries.get(character)
        if entry is None:
            self._entries[character] = CharEntry(character)
        else:
            self._entries[character] = replace(entry, count=entry.count + 1)

    def remove(self, character: str) -> bool:
        """Drop the entry for `character`. Returns False if there was none."""
        if self.finalized:
            raise RuntimeError("cannot remove from a finalized table")
        return self._entries.pop(character, None) is not None

    def finalize(self) -> None:
        """
        Set `p` and `cp` on every entry.

        `p` is count / total and `cp` is the running sum of `p` in iteration
        order, so the last entry ends at 1.0 (up to rounding). Runs exactly
        once per table, after the last `record`.

        Raises:
            RuntimeError: If the table is empty or already finalized
        """
        if self.finalized:
            raise RuntimeError("table is already finalized")
        if not self._entries:
            raise RuntimeError("cannot finalize an empty table")

        entries = list(self)
        counts = np.fromiter((entry.count for entry in entries), dtype=np.float64, count=len(entries))
        probabilities = counts / counts.sum()
        cumulative = np.cumsum(probabilities)

        for entry, p, cp in zip(entries, probabilities, cumulative):
            self._entries[entry.character] = replace(entry, p=float(p), cp=float(cp))

        self._characters = [entry.character for entry in entries]
        self._cumulative = cumulative

    def sample(self, random_unit: float) -> str:
        """
        Map a uniform draw in [0, 1) to a follower character.

        Returns the character of the first entry whose `cp` is strictly
        greater than `random_unit`. When rounding leaves the last `cp` below
        the draw, the last entry's character is returned.

        Raises:
            RuntimeError: If the table has not been finalized
        """
        if self._cumulative is None:
            raise RuntimeError("table must be finalized before sampling")

        # side="right" gives the first index whose cp is > random_unit
        index = int(np.searchsorted(self._cumulative, random_unit, side="right"))
        if index >= len(self._characters):
            return self._characters[-1]
        return self._characters[index]
