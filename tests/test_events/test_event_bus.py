"""Tests for the event bus."""

from designsync.events import EventBus, PatchEmitted, PendingEditsCancelled


class TestEventBus:
    def test_subscribe_by_type(self) -> None:
        bus = EventBus()
        seen: list = []
        bus.subscribe(PatchEmitted, seen.append)
        bus.emit(PatchEmitted(element_id="a", fields=("design",)))
        bus.emit(PendingEditsCancelled(element_id="a", properties=("width",), reason="closed"))
        assert seen == [PatchEmitted(element_id="a", fields=("design",))]

    def test_on_all(self) -> None:
        bus = EventBus()
        seen: list = []
        bus.on_all(seen.append)
        bus.emit(PatchEmitted(element_id="a", fields=()))
        bus.emit(PendingEditsCancelled(element_id=None, properties=(), reason="closed"))
        assert len(seen) == 2

    def test_global_listeners_run_first(self) -> None:
        bus = EventBus()
        order: list[str] = []
        bus.subscribe(PatchEmitted, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("global"))
        bus.emit(PatchEmitted(element_id="a", fields=()))
        assert order == ["global", "typed"]

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        seen: list = []
        unsubscribe = bus.subscribe(PatchEmitted, seen.append)
        unsubscribe()
        unsubscribe()
        bus.emit(PatchEmitted(element_id="a", fields=()))
        assert seen == []
