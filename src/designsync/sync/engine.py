"""DesignSync: keeps an element's design object and class list in agreement."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence, Union

from designsync.codec.cascade import get_inherited_value
from designsync.codec.conflicts import remove_property_classes, set_breakpoint_class
from designsync.codec.decode import decode_class_value
from designsync.codec.mapper import property_to_class
from designsync.config import SyncConfig
from designsync.editing.base import TextEditingSession
from designsync.events.bus import EventBus
from designsync.events.types import DynamicStyleApplied, PatchEmitted, PendingEditsCancelled
from designsync.model.element import (
    ACTIVE_FLAG,
    Design,
    Element,
    StyleOverrides,
    TextStyle,
    join_classes,
    normalize_classes,
)
from designsync.model.variants import Breakpoint, UIState
from designsync.styles.overrides import track_style_overrides
from designsync.styles.text_styles import DEFAULT_TEXT_STYLES, get_text_style
from designsync.sync.debounce import Debouncer
from designsync.sync.resolver import resolve_text_style_key
from designsync.sync.scheduling import Scheduler, ThreadingScheduler

log = logging.getLogger(__name__)

UpdateCallback = Callable[[str, dict[str, Any]], None]
OverrideTracker = Callable[[Element, Element], Union[StyleOverrides, None]]
ValueEncoder = Callable[[str, str, Union[str, None]], Union[str, None]]

# (design, classes) as seen after a write.
SyncResult = tuple[Design, list[str]]


@dataclass(frozen=True)
class PropertyUpdate:
    """One entry of a batch write."""

    category: str
    property: str
    value: str | None


def _copy_design(design: Design) -> Design:
    return {
        category: dict(section) if isinstance(section, dict) else section
        for category, section in design.items()
    }


def _as_update(entry: PropertyUpdate | Sequence[Any]) -> PropertyUpdate:
    if isinstance(entry, PropertyUpdate):
        return entry
    category, property_name, value = entry
    return PropertyUpdate(category, property_name, value)


class DesignSync:
    """Synchronization engine for one element at a time.

    The engine keeps its own mirror of the element and computes every write
    from it, never from a snapshot captured when a deferred write was
    scheduled. Writes are pushed to *on_update* as narrow patches holding only
    the fields that changed.

    Args:
        element: Element being edited, or None when nothing is selected.
        on_update: Receives ``(element_id, fields)`` for every write.
        breakpoint: Active breakpoint; defaults to ``config.default_breakpoint``.
        ui_state: Active UI state; defaults to ``config.default_ui_state``.
        text_style_key: Named text style to edit instead of the element.
        editor: In-place text editing session consulted by the target resolver.
        config: Engine settings.
        scheduler: Timer backend for debounced writes.
        event_bus: Receives lifecycle events; a private bus is created if omitted.
        value_to_class: Encodes one design value as a class token.
        override_tracker: Recomputes style-override bookkeeping after element writes.
    """

    def __init__(
        self,
        element: Element | None,
        on_update: UpdateCallback,
        *,
        breakpoint: Breakpoint | None = None,
        ui_state: UIState | None = None,
        text_style_key: str | None = None,
        editor: TextEditingSession | None = None,
        config: SyncConfig | None = None,
        scheduler: Scheduler | None = None,
        event_bus: EventBus | None = None,
        value_to_class: ValueEncoder = property_to_class,
        override_tracker: OverrideTracker = track_style_overrides,
    ) -> None:
        self.config = config or SyncConfig()
        self.event_bus = event_bus or EventBus()
        self._lock = threading.RLock()
        self._element = element
        self._on_update = on_update
        self._breakpoint = breakpoint or self.config.default_breakpoint
        self._ui_state = ui_state or self.config.default_ui_state
        self._text_style_key = text_style_key
        self._editor = editor
        self._value_to_class = value_to_class
        self._override_tracker = override_tracker
        self._debouncer = Debouncer(scheduler or ThreadingScheduler(), self.config.debounce_delay)
        self._generation = 0
        self._closed = False

    def __enter__(self) -> DesignSync:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # --- ambient state --------------------------------------------------------

    @property
    def element(self) -> Element | None:
        """The optimistic mirror of the element."""
        with self._lock:
            return self._element

    @property
    def breakpoint(self) -> Breakpoint:
        return self._breakpoint

    @property
    def ui_state(self) -> UIState:
        return self._ui_state

    @property
    def text_style_key(self) -> str | None:
        return self._text_style_key

    @property
    def pending_properties(self) -> list[str]:
        return self._debouncer.pending

    def set_breakpoint(self, breakpoint: Breakpoint) -> None:
        with self._lock:
            self._breakpoint = breakpoint

    def set_ui_state(self, ui_state: UIState) -> None:
        with self._lock:
            self._ui_state = ui_state

    def set_text_style_key(self, key: str | None) -> None:
        """Target another text style (or the element with None); drops pending edits."""
        with self._lock:
            if key == self._text_style_key:
                return
            self._switch_target("text-style-changed")
            self._text_style_key = key

    def observe(self, element: Element | None) -> None:
        """Replace the mirror with an externally observed snapshot.

        A snapshot of a different element (or None) is a target switch and
        drops every pending edit.
        """
        with self._lock:
            current = self._element
            if current is None or element is None or element.id != current.id:
                self._switch_target("element-changed")
            self._element = element

    def close(self) -> None:
        """Cancel every pending edit. Deferred writes are refused afterwards."""
        with self._lock:
            self._switch_target("closed")
            self._closed = True

    def _switch_target(self, reason: str) -> None:
        self._generation += 1
        cancelled = self._debouncer.cancel_all()
        if not cancelled:
            return
        element_id = self._element.id if self._element else None
        log.debug("Cancelled pending edits %s for %s (%s)", cancelled, element_id, reason)
        self.event_bus.emit(
            PendingEditsCancelled(element_id=element_id, properties=tuple(cancelled), reason=reason)
        )

    # --- writes ---------------------------------------------------------------

    def update_property(self, category: str, property_name: str, value: str | None) -> SyncResult | None:
        """Write one property on the resolved target and regenerate its classes."""
        with self._lock:
            if self._element is None:
                return None
            key = self._resolve_target()
            design, classes = self._read_source(key)
            design = _copy_design(design)
            classes = self._merge_property(design, classes, category, property_name, value)
            log.debug(
                "Set %s.%s=%r on %s at %s/%s",
                category,
                property_name,
                value,
                key or self._element.id,
                self._breakpoint.value,
                self._ui_state.value,
            )
            return self._commit(key, design, classes)

    def update_properties(self, updates: Iterable[PropertyUpdate | Sequence[Any]]) -> SyncResult | None:
        """Apply several property writes as one patch; later entries win."""
        entries = [_as_update(entry) for entry in updates]
        with self._lock:
            if self._element is None:
                return None
            if not entries:
                design, classes = self._read_source(self._text_style_key)
                return _copy_design(design), classes
            key = self._resolve_target()
            design, classes = self._read_source(key)
            design = _copy_design(design)
            for entry in entries:
                classes = self._merge_property(design, classes, entry.category, entry.property, entry.value)
            log.debug("Applied %d property updates to %s", len(entries), key or self._element.id)
            return self._commit(key, design, classes)

    def reset_category(self, category: str) -> SyncResult | None:
        """Remove a whole category and every token its properties produced."""
        with self._lock:
            if self._element is None:
                return None
            key = self._text_style_key
            design, classes = self._read_source(key)
            section = design.get(category)
            properties = [name for name in section or {} if name != ACTIVE_FLAG]
            if not properties:
                return None
            design = _copy_design(design)
            for name in properties:
                classes = remove_property_classes(classes, name)
            del design[category]
            log.debug("Reset category %s (%s) on %s", category, ", ".join(properties), key or self._element.id)
            return self._commit(key, design, classes)

    def sync_classes(self, classes: str | Sequence[str]) -> SyncResult | None:
        """Replace the target's class list verbatim, leaving its design untouched."""
        with self._lock:
            if self._element is None:
                return None
            key = self._text_style_key
            design, _ = self._read_source(key)
            return self._commit(key, _copy_design(design), normalize_classes(classes))

    def debounced_update_property(self, category: str, property_name: str, value: str | None) -> None:
        """Schedule ``update_property`` behind this property's own timer.

        The write runs against whatever target, breakpoint and state are active
        when the timer fires. A newer call for the same property supersedes this
        one; switching target drops it.
        """
        with self._lock:
            if self._closed:
                log.debug("Ignoring deferred write to %s after close", property_name)
                return
            if self._element is None:
                return
            self._debouncer.call(
                property_name,
                self._fire_debounced,
                self._generation,
                category,
                property_name,
                value,
            )

    def _fire_debounced(self, generation: int, category: str, property_name: str, value: str | None) -> None:
        with self._lock:
            if generation != self._generation:
                log.debug("Dropping stale deferred write to %s", property_name)
                return
            self.update_property(category, property_name, value)

    # --- reads ----------------------------------------------------------------

    def get_property(self, category: str, property_name: str) -> Any:
        """Return the effective value of a property at the active breakpoint and state.

        A target with no classes at all reads its design object. Otherwise the
        class cascade is authoritative: when no token applies the result is
        None even if the design object holds a value.
        """
        with self._lock:
            if self._element is None:
                return None
            design, classes = self._read_source(self._text_style_key)
            if not classes:
                return (design.get(category) or {}).get(property_name)
            inherited = get_inherited_value(classes, property_name, self._breakpoint, self._ui_state)
            if inherited is None:
                return None
            return decode_class_value(inherited.value, property_name)

    # --- internals ------------------------------------------------------------

    def _resolve_target(self) -> str | None:
        key = resolve_text_style_key(self._text_style_key, self._editor)
        if key and key != self._text_style_key:
            log.info("Editing dynamic text style %s on %s", key, self._element.id)
            self.event_bus.emit(DynamicStyleApplied(element_id=self._element.id, style_key=key))
        return key

    def _read_source(self, key: str | None) -> tuple[Design, list[str]]:
        element = self._element
        if key is None:
            return element.design, element.class_list
        style = get_text_style(element.text_styles, key) or TextStyle()
        return style.design, normalize_classes(style.classes)

    def _merge_property(
        self,
        design: Design,
        classes: list[str],
        category: str,
        property_name: str,
        value: str | None,
    ) -> list[str]:
        section = dict(design.get(category) or {})
        section[property_name] = value
        section[ACTIVE_FLAG] = True
        if not value:
            del section[property_name]
        design[category] = section

        if not value:
            return remove_property_classes(classes, property_name)
        token = self._value_to_class(category, property_name, value)
        return set_breakpoint_class(classes, property_name, token, self._breakpoint, self._ui_state)

    def _commit(self, key: str | None, design: Design, classes: list[str]) -> SyncResult:
        element = self._element
        joined = join_classes(classes)
        if key is None:
            fields: dict[str, Any] = {"design": design, "classes": joined}
            updated = element.with_patch(fields)
            overrides = self._override_tracker(element, updated)
            if overrides is not element.style_overrides:
                fields["style_overrides"] = overrides
                updated = updated.with_patch({"style_overrides": overrides})
        else:
            base = element.text_styles if element.text_styles is not None else DEFAULT_TEXT_STYLES
            text_styles = dict(base)
            text_styles[key] = TextStyle(design=design, classes=joined)
            fields = {"text_styles": text_styles}
            updated = element.with_patch(fields)

        self._element = updated
        self._on_update(element.id, fields)
        self.event_bus.emit(PatchEmitted(element_id=element.id, fields=tuple(fields), text_style_key=key))
        return design, classes
