# src/nav/testing.py
"""
Testing helpers for nav.

Provides:
  - grid_from_strings: build a GridMap from ASCII art ('.' open, '#' blocked)
  - bfs_distance: reference shortest step count, independent of A*
  - assert_valid_path: structural checks every returned path must pass
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, Optional, Sequence

from .grid import CellState, GridMap, Point

OPEN_CHAR = "."
BLOCKED_CHAR = "#"


def grid_from_strings(rows: Iterable[str]) -> GridMap:
    """
    Build a GridMap from lines like "..#.". Spaces are ignored.
    """
    table = []
    for line in rows:
        row = []
        for ch in line.replace(" ", ""):
            if ch == OPEN_CHAR:
                row.append(CellState.OPEN)
            elif ch == BLOCKED_CHAR:
                row.append(CellState.BLOCKED)
            else:
                raise ValueError(f"Unexpected map character {ch!r}")
        table.append(row)
    return GridMap.from_rows(table)


def _bfs_steps(grid: GridMap, p: Point) -> Iterable[Point]:
    """Open orthogonal neighbours, read straight from the cell table."""
    x, y = p
    for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
        if 0 <= nx < grid.width and 0 <= ny < grid.height:
            if grid.cells[ny][nx] is CellState.OPEN:
                yield Point(nx, ny)


def bfs_distance(grid: GridMap, start: Point, goal: Point) -> Optional[int]:
    """Breadth-first shortest step count, or None when unreachable."""
    start, goal = Point(*start), Point(*goal)
    if start == goal:
        return 0
    dist: Dict[Point, int] = {start: 0}
    queue = deque([start])
    while queue:
        p = queue.popleft()
        for n in _bfs_steps(grid, p):
            if n in dist:
                continue
            dist[n] = dist[p] + 1
            if n == goal:
                return dist[n]
            queue.append(n)
    return None


def assert_valid_path(
    grid: GridMap, path: Sequence[Point], start: Point, goal: Point
) -> None:
    """Endpoints match, steps are unit N/S/E/W moves, no point repeats."""
    assert path, "path is empty"
    assert path[0] == tuple(start)
    assert path[-1] == tuple(goal)
    assert len(set(path)) == len(path), "path revisits a point"
    for a, b in zip(path, path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1, f"{a} -> {b} is not a unit step"
        assert grid.is_open(b), f"{b} is not open"
