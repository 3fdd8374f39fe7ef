# JSON-lines sink for search events
"""
Writes every MonitoringEvent on a bus to a JSONL file, one search event
per line, so a run can be replayed or grepped afterwards.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from .bus import EventBus
from .events import EventType, MonitoringEvent

logger = logging.getLogger(__name__)


class JsonFileLogger:
    """
    Bus subscriber appending events to `path` (UTF-8, parent dirs created).

    Use as a context manager, or call close() to detach from the bus.
    """

    def __init__(self, path: Path, bus: EventBus) -> None:
        self._path = path
        self._bus = bus
        path.parent.mkdir(parents=True, exist_ok=True)
        self._file = path.open("a", encoding="utf-8")
        bus.subscribe(self._write)

    @property
    def path(self) -> Path:
        return self._path

    def _write(self, event: MonitoringEvent) -> None:
        try:
            self._file.write(json.dumps(event.to_dict(), ensure_ascii=False) + "\n")
            self._file.flush()
        except (OSError, ValueError):
            logger.warning("Dropped %s event for %s", event.event_type.name, self._path, exc_info=True)

    def close(self) -> None:
        self._bus.unsubscribe(self._write)
        self._file.close()

    def __enter__(self) -> "JsonFileLogger":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def log_event(
    bus: EventBus,
    module: str,
    event_type: EventType,
    message: str,
    payload: Optional[Dict[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> None:
    """Stamp a MonitoringEvent with the current time and publish it on bus."""
    bus.publish(
        MonitoringEvent(
            ts=time.time(),
            module=module,
            event_type=event_type,
            message=message,
            payload=payload or {},
            correlation_id=correlation_id,
        )
    )
