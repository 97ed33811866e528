"""Text editing session protocol."""

from __future__ import annotations

from typing import Protocol


class TextEditingSession(Protocol):
    """In-place text editing state the target resolver consults.

    ``ensure_dynamic_style_applied`` marks the current selection (or the
    cursor position) with a style layer and returns its text-style key, or
    None if no layer could be applied.
    """

    @property
    def is_editing(self) -> bool: ...

    def has_text_selection(self) -> bool: ...

    def ensure_dynamic_style_applied(self) -> str | None: ...
