# tests/test_nav_render.py

from __future__ import annotations

import io

from rich.console import Console

from nav.grid import GridMap, Point
from nav.pathfinder import find_path
from nav.render import path_to_text, print_path, render_path


def test_render_marks_path_cells() -> None:
    grid = GridMap.from_rows([[1, 1, 1], [1, 0, 1], [1, 1, 1]])
    path = [Point(0, 0), Point(0, 1), Point(0, 2), Point(1, 2), Point(2, 2)]

    assert render_path(grid, path) == [
        "*  1  1",
        "*  0  1",
        "*  *  *",
    ]


def test_render_without_path_shows_raw_map() -> None:
    grid = GridMap.from_rows([[1, 0], [0, 1]])

    assert render_path(grid, []) == ["1  0", "0  1"]


def test_rich_text_matches_plain_rendering() -> None:
    grid = GridMap.from_rows([[1, 1], [0, 1]])
    result = find_path(grid, (0, 0), (1, 1))

    text = path_to_text(grid, result.path)

    assert text.plain == "\n".join(render_path(grid, result.path)) + "\n"


def test_print_path_writes_to_console() -> None:
    grid = GridMap.from_rows([[1, 1, 1]])
    buf = io.StringIO()
    console = Console(file=buf, width=120, color_system=None)

    print_path(grid, [(0, 0), (1, 0)], console=console)

    assert buf.getvalue().splitlines() == ["*  *  1"]
