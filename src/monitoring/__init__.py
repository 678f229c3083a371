# src/monitoring/__init__.py
"""
Monitoring for path-finding requests.

Provides:
- EventBus: in-process pub/sub for MonitoringEvents
- MonitoringEvent / EventType
- JsonFileLogger, read_event_log and log_event
"""

from __future__ import annotations

from .events import TERMINAL_EVENT_TYPES, EventType, MonitoringEvent
from .bus import EventBus
from .logger import JsonFileLogger, log_event, read_event_log

__all__ = [
    "TERMINAL_EVENT_TYPES",
    "EventType",
    "MonitoringEvent",
    "EventBus",
    "JsonFileLogger",
    "log_event",
    "read_event_log",
]
