"""Per-key debouncing over a pluggable scheduler."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from designsync.sync.scheduling import Cancellable, Scheduler

log = logging.getLogger(__name__)


class Debouncer:
    """One independent timer per key.

    Calling again with the same key supersedes the earlier timer. Keys never
    interfere with one another. A timer that fires after being superseded or
    cancelled does nothing, which covers timers already running on another
    thread when ``cancel`` is called.
    """

    def __init__(self, scheduler: Scheduler, delay: float) -> None:
        self._scheduler = scheduler
        self._delay = delay
        self._lock = threading.Lock()
        self._timers: dict[str, tuple[object, Cancellable]] = {}

    def call(self, key: str, fn: Callable[..., Any], *args: Any) -> None:
        ticket = object()
        with self._lock:
            previous = self._timers.pop(key, None)
            if previous is not None:
                previous[1].cancel()
            handle = self._scheduler.call_later(self._delay, self._fire, key, ticket, fn, args)
            self._timers[key] = (ticket, handle)

    def _fire(self, key: str, ticket: object, fn: Callable[..., Any], args: tuple[Any, ...]) -> None:
        with self._lock:
            current = self._timers.get(key)
            if current is None or current[0] is not ticket:
                log.debug("Ignoring superseded timer for %s", key)
                return
            del self._timers[key]
        fn(*args)

    def cancel(self, key: str) -> bool:
        with self._lock:
            entry = self._timers.pop(key, None)
        if entry is None:
            return False
        entry[1].cancel()
        return True

    def cancel_all(self) -> list[str]:
        """Cancel every pending timer without running it; returns the cancelled keys."""
        with self._lock:
            entries = list(self._timers.items())
            self._timers.clear()
        for _, (_, handle) in entries:
            handle.cancel()
        return [key for key, _ in entries]

    @property
    def pending(self) -> list[str]:
        with self._lock:
            return list(self._timers)
