# path: src/monitoring/logger.py
"""
JSONL persistence for path-finding events.

Provides:
- JsonFileLogger: bus subscriber appending one JSON object per event
- read_event_log: load such a file back into MonitoringEvents
- log_event: build and publish a MonitoringEvent in one call

    bus = EventBus()
    with JsonFileLogger(Path("logs/pathfinding/events.log"), bus):
        runner = MovementScriptRunner(terrain, bus=bus)
        runner.move_object_to_coords(obj, 12, 7)
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .bus import EventBus
from .events import EventType, MonitoringEvent

log = logging.getLogger(__name__)


class JsonFileLogger:
    """
    Append MonitoringEvents to `path` as JSON lines.

    The parent directory is created on construction. Write errors are
    logged as warnings and never reach the publisher.
    """

    def __init__(
        self,
        path: Path,
        bus: EventBus,
        event_types: Optional[Iterable[EventType]] = None,
    ) -> None:
        self._path = path
        self._bus = bus
        path.parent.mkdir(parents=True, exist_ok=True)
        self._file = path.open("a", encoding="utf-8")
        bus.subscribe(self._write, event_types=event_types)

    @property
    def path(self) -> Path:
        return self._path

    def _write(self, event: MonitoringEvent) -> None:
        line = json.dumps(event.to_dict(), ensure_ascii=False)
        try:
            self._file.write(line + "\n")
            self._file.flush()
        except (OSError, ValueError):
            log.warning("JsonFileLogger could not write to %s", self._path)

    def close(self) -> None:
        """Stop listening and close the file. Safe to call twice."""
        self._bus.unsubscribe(self._write)
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "JsonFileLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def read_event_log(path: Path) -> List[MonitoringEvent]:
    """
    Parse a JsonFileLogger file. Blank lines are skipped; a malformed line
    raises ValueError naming its line number.
    """
    events: List[MonitoringEvent] = []
    with path.open("r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                events.append(MonitoringEvent.from_dict(json.loads(line)))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{path}:{lineno}: bad event record") from exc
    return events


def log_event(
    bus: EventBus,
    module: str,
    event_type: EventType,
    message: str,
    payload: Optional[Dict[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> None:
    """
    Create and publish a MonitoringEvent stamped with the current time.

    Parameters
    ----------
    module:
        Emitting module ("scripting.move_to_coords", "cli").
    payload:
        JSON-safe details (target, budget, generated actions).
    correlation_id:
        Shared by every event of one request.
    """
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
