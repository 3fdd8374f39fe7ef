# cost-ordered frontier of candidate paths
# src/nav/frontier.py
"""
Frontier: binary heap of Paths ordered by (f, insertion sequence).

The sequence number makes ordering stable: among paths with equal f the
one inserted first is popped first, so identical inputs always expand in
the same order.
"""

from __future__ import annotations

import heapq
from itertools import count
from typing import Iterable, Iterator, List, Tuple

from .path import Path


class Frontier:
    def __init__(self, paths: Iterable[Path] = ()) -> None:
        self._heap: List[Tuple[int, int, Path]] = []
        self._seq: Iterator[int] = count()
        self.insert_all(paths)

    def insert(self, path: Path) -> None:
        heapq.heappush(self._heap, (path.f, next(self._seq), path))

    def insert_all(self, paths: Iterable[Path]) -> None:
        """Add a batch of candidates, keeping batch order for ties."""
        for path in paths:
            self.insert(path)

    def pop_best(self) -> Path:
        """
        Remove and return the path with the lowest f.

        Raises IndexError if the frontier is empty.
        """
        if not self._heap:
            raise IndexError("pop_best() from an empty frontier")
        _, _, path = heapq.heappop(self._heap)
        return path

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
