"""Event system: bus and event types for sync lifecycle."""

from designsync.events.bus import EventBus
from designsync.events.types import DynamicStyleApplied, PatchEmitted, PendingEditsCancelled

__all__ = [
    "EventBus",
    "DynamicStyleApplied",
    "PatchEmitted",
    "PendingEditsCancelled",
]
