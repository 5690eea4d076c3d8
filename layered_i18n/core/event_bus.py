#!/usr/bin/env python3
"""
Event Bus - queued dispatcher for locale store notifications.

Stores emit without blocking; subscribers run when the owner calls
process_events().
"""

import itertools
import queue
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from layered_i18n.core.events import EventType
from layered_i18n.core.logging_utils import setup_logger

__all__ = ["EventBus", "EventType", "Event", "get_event_bus"]

logger = setup_logger("layered_i18n.event_bus")

# Only the latest pending event of these types is delivered
COALESCED_EVENTS = {
    EventType.CACHE_INVALIDATED,
}


@dataclass
class Event:
    """Event with type, payload, and metadata."""

    type: EventType
    payload: dict[str, Any]
    timestamp: float = 0.0
    source: str = "unknown"
    sequence: int = 0

    def __post_init__(self):
        if self.timestamp == 0:
            self.timestamp = time.time()


class EventBus:
    """Bounded event queue with per-type subscribers."""

    def __init__(self, max_queue_size: int = 1000):
        self._queue: queue.Queue[Event] = queue.Queue(maxsize=max_queue_size)
        self._subscribers: dict[EventType, list[Callable[[Event], None]]] = {}
        self._pending: dict[EventType, Event] = {}
        self._lock = threading.Lock()
        self._running = True
        self.dropped = 0
        self._sequence = itertools.count(1)

    def emit(
        self,
        event_type: EventType,
        payload: dict[str, Any] | None = None,
        source: str = "unknown",
    ):
        """Queue an event (non-blocking).

        Args:
            event_type: Type of event
            payload: Event data
            source: Source identifier (e.g., 'locale_store')
        """
        if not self._running:
            return

        with self._lock:
            sequence = next(self._sequence)
        event = Event(type=event_type, payload=payload or {}, source=source, sequence=sequence)

        if event_type in COALESCED_EVENTS:
            with self._lock:
                self._pending[event_type] = event
            return

        try:
            self._queue.put_nowait(event)
        except queue.Full:
            self.dropped += 1
            logger.warning(f"Event queue full, dropped {event_type.name} (total drops: {self.dropped})")

    def subscribe(self, event_type: EventType, handler: Callable[[Event], None]):
        """Register handler(event) for event_type."""
        with self._lock:
            self._subscribers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: EventType, handler: Callable[[Event], None]):
        with self._lock:
            handlers = self._subscribers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

    def process_events(self, max_events: int = 100) -> int:
        """Dispatch pending events to subscribers.

        Events are delivered in emission order; a coalesced event takes the
        position of its latest emission.

        Args:
            max_events: Maximum queued events to process per call

        Returns:
            Number of events dispatched
        """
        with self._lock:
            events = list(self._pending.values())
            self._pending.clear()

        while len(events) < max_events:
            try:
                events.append(self._queue.get_nowait())
            except queue.Empty:
                break

        for event in sorted(events, key=lambda e: e.sequence):
            self._dispatch(event)
        return len(events)

    def _dispatch(self, event: Event):
        with self._lock:
            handlers = list(self._subscribers.get(event.type, []))

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type.name}: {e}")

    def shutdown(self):
        """Stop accepting events and drop anything still queued."""
        self._running = False
        with self._lock:
            self._pending.clear()
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break


# Global event bus instance
_event_bus: EventBus | None = None


def get_event_bus() -> EventBus:
    """Get global event bus instance."""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus()
    return _event_bus
