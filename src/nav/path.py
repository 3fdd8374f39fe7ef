# partial path candidates held in the frontier
# src/nav/path.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .grid import Point
from .heuristic import estimate


@dataclass(frozen=True)
class Path:
    """
    Immutable partial path from the start cell to `current`.

    - locs: visited points in order, start first, no duplicates.
    - g: cost so far (one per step).
    - f: g + estimate(current, goal).

    Paths are never changed in place; extend() returns a new one.
    """

    locs: Tuple[Point, ...]
    g: int
    f: int

    @property
    def current(self) -> Point:
        return self.locs[-1]

    @classmethod
    def start_at(cls, start: Point, goal: Point) -> "Path":
        """Trivial single-point path used to seed a search."""
        return cls(locs=(start,), g=0, f=estimate(start, goal))

    def extend(self, nxt: Point, goal: Point) -> "Path":
        g = self.g + 1
        return Path(locs=self.locs + (nxt,), g=g, f=g + estimate(nxt, goal))
