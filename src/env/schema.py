# MapProfile dataclass
# src/env/schema.py

from __future__ import annotations

from dataclasses import dataclass

from nav.grid import GridMap, Point
from nav.pathfinder import SearchConfig


@dataclass
class MapProfile:
    """A named map plus the start and goal to search between."""
    name: str
    grid: GridMap
    start: Point
    goal: Point

    def to_search_config(self, max_expansions: int | None = None) -> SearchConfig:
        return SearchConfig(
            grid=self.grid,
            start=self.start,
            goal=self.goal,
            max_expansions=max_expansions,
        )
