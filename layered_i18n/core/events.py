#!/usr/bin/env python3
"""Event types emitted by locale stores."""

from enum import Enum, auto

__all__ = ["EventType"]


class EventType(Enum):
    """Lifecycle events of a LocaleStore."""

    # Configuration changes
    LOCALE_CHANGED = auto()
    LOCALE_PATH_APPENDED = auto()

    # Cache lifecycle
    CACHE_INVALIDATED = auto()  # Coalesced; delivered at its latest emission
    CACHE_REBUILT = auto()
    CACHE_REBUILD_FAILED = auto()
