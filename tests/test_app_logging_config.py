# tests/test_app_logging_config.py

from __future__ import annotations

import io
import logging

import pytest

from app.logging_config import configure_logging, parse_level


def test_parse_level() -> None:
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Warning ") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR

    with pytest.raises(ValueError):
        parse_level("loud")


def test_configure_logging_is_idempotent() -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    stream = io.StringIO()

    # pytest attaches its own capture handlers; start from a bare root.
    root.handlers.clear()
    try:
        configure_logging("INFO", stream=stream)
        configure_logging("DEBUG", stream=stream)

        handlers = list(root.handlers)
        level = root.level
        logging.getLogger("nav.pathfinder").info("Search abc started")
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    assert len(handlers) == 1
    assert level == logging.DEBUG
    assert "[INFO] nav.pathfinder: Search abc started" in stream.getvalue()
