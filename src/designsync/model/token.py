"""Parsed class token: variant prefixes plus a property-specific body."""

from __future__ import annotations

from dataclasses import dataclass

from designsync.model.variants import BREAKPOINT_VARIANTS, STATE_VARIANTS, Breakpoint, UIState


@dataclass(frozen=True)
class ClassToken:
    """A single utility class split into its facets.

    ``variants`` holds the prefix names without their trailing colon, in
    source order (``max-md:hover:w-full`` -> ``("max-md", "hover")``).
    """

    raw: str
    body: str
    variants: tuple[str, ...] = ()

    def variant_key(self) -> tuple[Breakpoint, UIState] | None:
        """Return the (breakpoint, state) pair this token applies to.

        Returns None when the token carries prefixes outside the breakpoint and
        state axes (``dark:``, ``group-hover:``), or carries them out of order.
        """
        remaining = list(self.variants)
        breakpoint = Breakpoint.DESKTOP
        state = UIState.NEUTRAL
        if remaining and remaining[0] in BREAKPOINT_VARIANTS:
            breakpoint = BREAKPOINT_VARIANTS[remaining.pop(0)]
        if remaining and remaining[0] in STATE_VARIANTS:
            state = STATE_VARIANTS[remaining.pop(0)]
        if remaining:
            return None
        return breakpoint, state

    def __str__(self) -> str:
        return self.raw
