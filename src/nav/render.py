# text rendering of a path over its grid
# src/nav/render.py
"""
Render a found path on top of the map it was found on.

Path cells are drawn as '*', every other cell keeps its map value
(1 open, 0 blocked).
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from rich.console import Console
from rich.text import Text

from .grid import GridMap, Point

PATH_MARKER = "*"
CELL_SEPARATOR = "  "


def render_path(grid: GridMap, path: Iterable[Point]) -> List[str]:
    """One string per grid row, cells separated by two spaces."""
    on_path = {Point(*p) for p in path}
    lines: List[str] = []
    for y in range(grid.height):
        cells = [
            PATH_MARKER if Point(x, y) in on_path else str(grid.value_at(Point(x, y)))
            for x in range(grid.width)
        ]
        lines.append(CELL_SEPARATOR.join(cells))
    return lines


def path_to_text(grid: GridMap, path: Iterable[Point]) -> Text:
    """
    Styled version of render_path for rich consoles.

    Path cells are bold green, blocked cells dim red.
    """
    on_path = {Point(*p) for p in path}
    txt = Text()
    for y in range(grid.height):
        for x in range(grid.width):
            p = Point(x, y)
            if x:
                txt.append(CELL_SEPARATOR)
            if p in on_path:
                txt.append(PATH_MARKER, style="bold green")
            elif grid.is_open(p):
                txt.append(str(grid.value_at(p)))
            else:
                txt.append(str(grid.value_at(p)), style="dim red")
        txt.append("\n")
    return txt


def print_path(
    grid: GridMap,
    path: Iterable[Point],
    console: Optional[Console] = None,
) -> None:
    console = console or Console()
    console.print(path_to_text(grid, path), end="")
