"""Synchronous event bus for design sync lifecycle events."""

from __future__ import annotations

from typing import Any, Callable


class EventBus:
    """Publish-subscribe bus dispatching in registration order.

    Listeners subscribe to one event type or to everything. ``subscribe`` and
    ``on_all`` return a callable that removes the listener again.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable[[Any], None]]] = {}
        self._global_listeners: list[Callable[[Any], None]] = []

    def subscribe(self, event_type: type, callback: Callable[[Any], None]) -> Callable[[], None]:
        listeners = self._listeners.setdefault(event_type, [])
        listeners.append(callback)
        return lambda: self._discard(listeners, callback)

    def on_all(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        self._global_listeners.append(callback)
        return lambda: self._discard(self._global_listeners, callback)

    def emit(self, event: Any) -> None:
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)

    @staticmethod
    def _discard(listeners: list[Callable[[Any], None]], callback: Callable[[Any], None]) -> None:
        if callback in listeners:
            listeners.remove(callback)
