# neighbour expansion of a partial path
# src/nav/successors.py
"""
Successor generation for A*.

Given a Path and the current visited set, produce the child paths that
step one cell North, South, East or West (in that order). Neighbours that
are not open on the grid, or that were already visited, are skipped.

This module is pure: it never touches the visited set or the frontier.
"""

from __future__ import annotations

from typing import AbstractSet, List, Tuple

from .grid import GridMap, Point
from .path import Path

# (dx, dy) in expansion order: North, South, East, West.
# North is y - 1 because row 0 is the top of the map.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, -1),
    (0, 1),
    (1, 0),
    (-1, 0),
)


def neighbors_4dir(p: Point) -> List[Point]:
    """All four orthogonal neighbours of p, open or not."""
    x, y = p
    return [Point(x + dx, y + dy) for dx, dy in DIRECTIONS]


def legal_neighbors(grid: GridMap, p: Point) -> List[Point]:
    """Neighbours of p that the grid reports as open."""
    return [n for n in neighbors_4dir(p) if grid.is_open(n)]


def expand(
    path: Path,
    grid: GridMap,
    goal: Point,
    visited: AbstractSet[Point],
) -> List[Path]:
    """
    Return the new paths obtained by stepping from path.current.

    Each child has g = parent.g + 1 and f = g + estimate(child, goal).
    """
    return [
        path.extend(n, goal)
        for n in legal_neighbors(grid, path.current)
        if n not in visited
    ]
