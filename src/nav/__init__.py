"""
Grid path search.

Provides:
- GridMap / Point / CellState: traversability lookup over a rectangular map
- manhattan / estimate: admissible distance heuristic
- expand: successor generation for a partial Path
- Frontier: cost-ordered, insertion-stable candidate queue
- SearchEngine / find_path: A* driven to success or failure
- render_path / print_path: draw a found path over its map
"""

from __future__ import annotations

from .grid import CellState, GridMap, Point
from .heuristic import estimate, manhattan
from .path import Path
from .successors import expand, legal_neighbors, neighbors_4dir
from .frontier import Frontier
from .pathfinder import (
    PathfindingResult,
    SearchConfig,
    SearchEngine,
    SearchState,
    SearchStatus,
    find_path,
    search,
)
from .render import print_path, render_path

__all__ = [
    "CellState",
    "GridMap",
    "Point",
    "estimate",
    "manhattan",
    "Path",
    "expand",
    "legal_neighbors",
    "neighbors_4dir",
    "Frontier",
    "PathfindingResult",
    "SearchConfig",
    "SearchEngine",
    "SearchState",
    "SearchStatus",
    "find_path",
    "search",
    "print_path",
    "render_path",
]
