#tests/test_monitoring_logger.py
"""
Tests for monitoring.logger.JsonFileLogger and log_event.

Covers:
- JSON structure validity
- Parent directory creation
- A full search written as JSON lines
"""

from __future__ import annotations

import json
from pathlib import Path

from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import JsonFileLogger, log_event
from nav.pathfinder import find_path
from nav.testing import grid_from_strings


def test_json_file_logger_writes_valid_json(tmp_path: Path) -> None:
    bus = EventBus()
    log_path = tmp_path / "events.log"

    logger = JsonFileLogger(log_path, bus)
    log_event(
        bus=bus,
        module="test.module",
        event_type=EventType.LOG,
        message="hello world",
        payload={"a": 1, "b": "x"},
        correlation_id="search-123",
    )
    logger.close()

    lines = log_path.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1

    data = json.loads(lines[0])
    assert data["module"] == "test.module"
    assert data["event_type"] == "LOG"
    assert data["message"] == "hello world"
    assert data["payload"] == {"a": 1, "b": "x"}
    assert data["correlation_id"] == "search-123"
    assert isinstance(data["ts"], (int, float))


def test_logger_parent_dir_created(tmp_path: Path) -> None:
    log_path = tmp_path / "nested" / "logs" / "events.log"
    bus = EventBus()

    with JsonFileLogger(log_path, bus):
        log_event(bus=bus, module="m", event_type=EventType.LOG, message="hi")

    assert log_path.exists()
    assert log_path.read_text(encoding="utf-8").strip()


def test_close_unsubscribes(tmp_path: Path) -> None:
    bus = EventBus()
    logger = JsonFileLogger(tmp_path / "events.log", bus)

    logger.close()

    assert len(bus) == 0
    # Publishing after close must not touch the closed file.
    log_event(bus=bus, module="m", event_type=EventType.LOG, message="late")


def test_search_events_logged_as_jsonl(tmp_path: Path) -> None:
    bus = EventBus()
    log_path = tmp_path / "search.log"
    grid = grid_from_strings(["...", ".#.", "..."])

    with JsonFileLogger(log_path, bus):
        result = find_path(grid, (0, 0), (2, 2), bus=bus)

    events = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert events[0]["event_type"] == "SEARCH_STARTED"
    assert events[-1]["event_type"] == "SEARCH_SUCCEEDED"
    assert events[-1]["payload"]["cost"] == result.cost == 4
    assert len({e["correlation_id"] for e in events}) == 1
