# path: src/monitoring/bus.py
"""
In-process pub/sub for path-finding MonitoringEvents.

Subscribers are plain callables. A subscriber can ask for only some
event types, which is how failure-cue hooks (sound, UI flashes) attach
without seeing every request:

    bus.subscribe(play_sound, event_types={EventType.FAILURE_CUE})

Publishing never raises because of a subscriber: a failing subscriber is
logged and the remaining ones still run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Callable, FrozenSet, Iterable, List, Optional

from .events import EventType, MonitoringEvent

log = logging.getLogger(__name__)

SubscriberFn = Callable[[MonitoringEvent], None]


@dataclass(frozen=True)
class _Subscription:
    fn: SubscriberFn
    event_types: Optional[FrozenSet[EventType]] = None

    def wants(self, event: MonitoringEvent) -> bool:
        return self.event_types is None or event.event_type in self.event_types


class EventBus:
    """
    Thread-safe event bus.

    Subscriptions are guarded by a lock; publish() delivers to a snapshot
    taken under the lock, so subscribers may (un)subscribe from inside a
    callback.
    """

    def __init__(self) -> None:
        self._subscriptions: List[_Subscription] = []
        self._lock = Lock()

    def subscribe(
        self,
        fn: SubscriberFn,
        event_types: Optional[Iterable[EventType]] = None,
    ) -> None:
        """Deliver events to `fn`; all of them unless `event_types` is given."""
        types = frozenset(event_types) if event_types is not None else None
        with self._lock:
            self._subscriptions.append(_Subscription(fn, types))

    def unsubscribe(self, fn: SubscriberFn) -> None:
        """Drop every subscription of `fn`. Unknown callables are ignored."""
        with self._lock:
            self._subscriptions = [s for s in self._subscriptions if s.fn != fn]

    def publish(self, event: MonitoringEvent) -> None:
        with self._lock:
            targets = [s for s in self._subscriptions if s.wants(event)]

        for sub in targets:
            try:
                sub.fn(event)
            except Exception:
                log.exception(
                    "EventBus subscriber %r failed on %s", sub.fn, event.event_type.name
                )

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def clear(self) -> None:
        """Remove all subscribers (mostly for tests)."""
        with self._lock:
            self._subscriptions.clear()

