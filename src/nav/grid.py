# traversability grid for path search
# src/nav/grid.py
"""
GridMap: immutable 2-D traversability lookup.

This module only answers "can a walker stand here?". It does not know
anything about search order, costs or rendering.

Coordinates are (x, y) with x as the column and y as the row, so a grid
built from rows is indexed as rows[y][x].
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, NamedTuple, Sequence, Tuple


class Point(NamedTuple):
    """Integer grid coordinate. Equality and hashing are by value."""

    x: int
    y: int


class CellState(Enum):
    """Traversability of a single cell."""

    BLOCKED = 0
    OPEN = 1

    @classmethod
    def from_value(cls, value: Any) -> "CellState":
        """
        Map a raw map literal onto a CellState.

        Accepts CellState members, bools and the ints 0 / 1.
        """
        if isinstance(value, CellState):
            return value
        if isinstance(value, bool):
            return cls.OPEN if value else cls.BLOCKED
        if value in (0, 1):
            return cls(int(value))
        raise ValueError(f"Unknown cell value {value!r}; expected 0 or 1")


@dataclass(frozen=True)
class GridMap:
    """
    Fixed-size rectangular table of cell states.

    Responsibilities:
    - Answer is_open() for any coordinate, in bounds or not.
    - Expose the raw row values for rendering.

    Out-of-bounds coordinates are reported as not open, exactly like
    blocked cells, so neighbour generation needs no bounds special-casing.
    """

    width: int
    height: int
    cells: Tuple[Tuple[CellState, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> "GridMap":
        """
        Build a GridMap from row-major values (rows[y][x]).

        Raises ValueError for an empty or non-rectangular table.
        """
        table = tuple(
            tuple(CellState.from_value(v) for v in row) for row in rows
        )
        if not table or not table[0]:
            raise ValueError("Grid must have at least one row and one column")

        width = len(table[0])
        for y, row in enumerate(table):
            if len(row) != width:
                raise ValueError(
                    f"Grid is not rectangular: row {y} has {len(row)} cells, "
                    f"expected {width}"
                )

        return cls(width=width, height=len(table), cells=table)

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    def in_bounds(self, p: Point) -> bool:
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def is_open(self, p: Point) -> bool:
        """True iff p lies within bounds and its cell is OPEN."""
        if not self.in_bounds(p):
            return False
        x, y = p
        return self.cells[y][x] is CellState.OPEN

    def value_at(self, p: Point) -> int:
        """Raw map value (1 open / 0 blocked) at an in-bounds point."""
        x, y = p
        return self.cells[y][x].value
