"""Style-override bookkeeping for elements linked to a shared style template."""

from __future__ import annotations

from designsync.model.element import Element, StyleOverrides, join_classes


def track_style_overrides(previous: Element, updated: Element) -> StyleOverrides | None:
    """Recompute the overrides of *previous* after its design/classes became *updated*'s.

    Elements without a template keep whatever they had. Linked elements record
    their own design and classes as the divergence from the template. The
    previous object is returned unchanged when nothing moved, so callers can
    detect a change by identity.
    """
    if previous.style_id is None:
        return previous.style_overrides
    overrides = StyleOverrides(design=updated.design, classes=join_classes(updated.classes))
    if overrides == previous.style_overrides:
        return previous.style_overrides
    return overrides
