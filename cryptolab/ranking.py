"""Candidate keys kept in decreasing order of score."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterator

KEY_MAX_LENGTH = 49


@dataclass(frozen=True)
class ScoredKey:
    """A candidate key with its score."""

    key: str
    score: int


class RankedKeys:
    """Keys ordered by decreasing score; equal scores keep insertion order."""

    def __init__(self) -> None:
        self._items: list[ScoredKey] = []

    def add(self, key: str, score: int) -> ScoredKey:
        """Insert a key, truncated to KEY_MAX_LENGTH characters, at its rank."""
        entry = ScoredKey(key[:KEY_MAX_LENGTH], score)
        bisect.insort_right(self._items, entry, key=lambda item: -item.score)
        return entry

    def __iter__(self) -> Iterator[ScoredKey]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        """One 'Key: <key>, Score: <score>' line per entry."""
        return "".join(f"Key: {entry.key}, Score: {entry.score}\n" for entry in self)