"""Synchronization engine: target resolution, write paths, debounced writes."""

from designsync.sync.debounce import Debouncer
from designsync.sync.engine import DesignSync, PropertyUpdate
from designsync.sync.resolver import resolve_text_style_key
from designsync.sync.scheduling import ManualScheduler, Scheduler, ThreadingScheduler

__all__ = [
    "Debouncer",
    "DesignSync",
    "ManualScheduler",
    "PropertyUpdate",
    "Scheduler",
    "ThreadingScheduler",
    "resolve_text_style_key",
]
