# tests/test_cli_find_path.py
"""
End-to-end tests for the find-path CLI against the bundled and temporary
map configs.
"""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest
from rich.console import Console

from cli.find_path import EXIT_CONFIG_ERROR, EXIT_NO_PATH, EXIT_OK, main


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def make_console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=120, color_system=None), buf


def test_open_profile_prints_path_and_cost() -> None:
    console, buf = make_console()

    code = main(["--profile", "open_3x3"], console=console)

    lines = buf.getvalue().splitlines()
    assert code == EXIT_OK
    assert lines[:3] == ["*  1  1", "*  1  1", "*  *  *"]
    assert "cost=4 steps" in lines[3]


def test_default_profile() -> None:
    console, buf = make_console()

    assert main([], console=console) == EXIT_OK
    assert "cost=32 steps" in buf.getvalue()


def test_walled_profile_reports_no_path() -> None:
    console, buf = make_console()

    code = main(["--profile", "walled"], console=console)

    assert code == EXIT_NO_PATH
    assert "no path found (no_path_found)" in buf.getvalue()


def test_budget_flag() -> None:
    console, buf = make_console()

    code = main(["--max-expansions", "3"], console=console)

    assert code == EXIT_NO_PATH
    assert "max_expansions_exhausted" in buf.getvalue()


def test_config_errors_exit_nonzero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    console, _ = make_console()

    code = main(["--config", str(tmp_path / "missing.yaml")], console=console)

    assert code == EXIT_CONFIG_ERROR
    assert "Configuration error" in capsys.readouterr().err


def test_unknown_profile_exit_nonzero() -> None:
    console, _ = make_console()

    assert main(["--profile", "nope"], console=console) == EXIT_CONFIG_ERROR


def test_events_written_as_jsonl(tmp_path: Path) -> None:
    console, _ = make_console()
    events_path = tmp_path / "logs" / "events.log"

    code = main(["--profile", "open_3x3", "--events", str(events_path)], console=console)

    events = [json.loads(line) for line in events_path.read_text(encoding="utf-8").splitlines()]
    assert code == EXIT_OK
    assert events[0]["event_type"] == "SEARCH_STARTED"
    assert events[-1]["event_type"] == "SEARCH_SUCCEEDED"
