# path: src/monitoring/events.py
"""
Events emitted around move-to-coords requests.

Every request produces PATH_REQUESTED followed by either PATH_FOUND, or
PATH_FAILED plus FAILURE_CUE. All events of one request share a
correlation_id.

MonitoringEvent round-trips through plain dicts (`to_dict` / `from_dict`)
so JSONL event logs can be read back by tools and tests.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional


class EventType(Enum):
    PATH_REQUESTED = auto()
    PATH_FOUND = auto()
    # No path within the node budget, or no search context could be built
    PATH_FAILED = auto()
    # Player-facing "can't get there" sound
    FAILURE_CUE = auto()
    # Free-form messages from tools
    LOG = auto()


# Events that close a request.
TERMINAL_EVENT_TYPES = frozenset({EventType.PATH_FOUND, EventType.PATH_FAILED})


@dataclass
class MonitoringEvent:
    """
    One monitoring record. Payload values must be JSON-safe.
    """

    ts: float                   # UNIX timestamp (seconds)
    module: str                 # emitting module, e.g. "scripting.move_to_coords"
    event_type: EventType
    message: str
    payload: Dict[str, Any] = field(default_factory=dict)
    correlation_id: Optional[str] = None  # shared by all events of one request

    @property
    def is_terminal(self) -> bool:
        return self.event_type in TERMINAL_EVENT_TYPES

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["event_type"] = self.event_type.name
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MonitoringEvent":
        """Inverse of to_dict; raises ValueError on unknown event types."""
        try:
            event_type = EventType[data["event_type"]]
        except KeyError as exc:
            raise ValueError(f"Unknown event type in {data!r}") from exc

        return cls(
            ts=float(data.get("ts", 0.0)),
            module=str(data.get("module", "")),
            event_type=event_type,
            message=str(data.get("message", "")),
            payload=dict(data.get("payload") or {}),
            correlation_id=data.get("correlation_id"),
        )
