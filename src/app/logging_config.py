# src/app/logging_config.py
"""
Central logging configuration for the path finder.

Call configure_logging() from your main entrypoint once:

    from app.logging_config import configure_logging
    configure_logging("DEBUG")

INFO shows one line per search (start / finish); DEBUG adds one line per
expansion from nav.pathfinder.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def parse_level(level: Union[int, str]) -> int:
    """
    Accept either a logging constant or its name ("debug", "INFO", ...).

    Raises ValueError for unknown names.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Attach a single stream handler to the root logger.

    Does nothing except adjust the level when handlers are already
    attached, so repeated calls never duplicate output.
    """
    root = logging.getLogger()
    root.setLevel(parse_level(level))

    if root.handlers:
        return

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
