"""Target resolution: the element itself or one of its named text styles."""

from __future__ import annotations

from designsync.editing.base import TextEditingSession


def resolve_text_style_key(
    explicit_key: str | None,
    editor: TextEditingSession | None = None,
) -> str | None:
    """Return the text-style key a write should land on, or None for the element.

    While an in-place editing session is active, a selection always gets a
    fresh style layer stacked on whatever already applies. A bare cursor gets
    a fresh layer only when no key is targeted yet, otherwise the targeted key
    is edited in place. Outside editing the explicit key wins. If the session
    cannot apply a layer, the explicit key (or the element) is used.
    """
    if editor is None or not editor.is_editing:
        return explicit_key
    if editor.has_text_selection() or not explicit_key:
        return editor.ensure_dynamic_style_applied() or explicit_key
    return explicit_key
