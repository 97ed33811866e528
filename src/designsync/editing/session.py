"""TextEditor: an in-memory text editing session with dynamic style marks."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Callable

log = logging.getLogger(__name__)


def _dynamic_key() -> str:
    return f"dynamic-{uuid.uuid4().hex[:8]}"


@dataclass(frozen=True)
class StyleMark:
    """A text-style layer spanning ``[start, end)`` of the edited text."""

    start: int
    end: int
    key: str

    def covers(self, position: int) -> bool:
        if self.start == self.end:
            return position == self.start
        return self.start <= position < self.end


class TextEditor:
    """Tracks editing state, the selection, and the style marks applied so far.

    Marks stack: applying a style to a selection always adds a new mark on top
    of whatever already covers that range.
    """

    def __init__(self, key_factory: Callable[[], str] | None = None) -> None:
        self._key_factory = key_factory or _dynamic_key
        self._editing = False
        self._cursor = 0
        self._selection: tuple[int, int] | None = None
        self._marks: list[StyleMark] = []

    # --- session lifecycle ----------------------------------------------------

    @property
    def is_editing(self) -> bool:
        return self._editing

    def begin(self, cursor: int = 0) -> None:
        self._editing = True
        self._cursor = cursor
        self._selection = None

    def finish(self) -> None:
        self._editing = False
        self._selection = None

    # --- cursor / selection ---------------------------------------------------

    def select(self, start: int, end: int) -> None:
        if end < start:
            start, end = end, start
        self._selection = (start, end)
        self._cursor = end

    def move_cursor(self, position: int) -> None:
        """Place the cursor, collapsing any selection."""
        self._cursor = position
        self._selection = None

    def has_text_selection(self) -> bool:
        return self._selection is not None and self._selection[0] != self._selection[1]

    # --- marks ----------------------------------------------------------------

    @property
    def marks(self) -> list[StyleMark]:
        return list(self._marks)

    @property
    def active_style_key(self) -> str | None:
        """Key of the innermost (most recent) mark at the cursor, if any."""
        for mark in reversed(self._marks):
            if mark.covers(self._cursor):
                return mark.key
        return None

    def ensure_dynamic_style_applied(self) -> str | None:
        if not self._editing:
            return None
        if self.has_text_selection():
            start, end = self._selection  # type: ignore[misc]
            return self._apply_mark(start, end)
        existing = self.active_style_key
        if existing:
            return existing
        return self._apply_mark(self._cursor, self._cursor)

    def _apply_mark(self, start: int, end: int) -> str:
        mark = StyleMark(start=start, end=end, key=self._key_factory())
        self._marks.append(mark)
        log.info("Applied dynamic style %s over [%d, %d)", mark.key, start, end)
        return mark.key
