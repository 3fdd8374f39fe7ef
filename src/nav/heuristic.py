# distance estimate used to order the frontier
# src/nav/heuristic.py
"""
Manhattan distance heuristic.

On a 4-connected grid with unit step cost this never overestimates the
remaining cost (admissible) and changes by at most one per step
(consistent).
"""

from __future__ import annotations

from .grid import Point


def manhattan(p: Point, goal: Point) -> int:
    """Sum of absolute coordinate differences between p and goal."""
    return abs(p[0] - goal[0]) + abs(p[1] - goal[1])


def estimate(p: Point, goal: Point) -> int:
    """Estimated remaining cost from p to goal."""
    return manhattan(p, goal)
