"""Breakpoint and UI-state axes, and the class prefixes that encode them."""

from __future__ import annotations

from enum import Enum


class Breakpoint(Enum):
    """Responsive viewport tier, widest first."""

    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"

    @property
    def prefix(self) -> str:
        return _BREAKPOINT_PREFIXES[self]

    def cascade(self) -> list[Breakpoint]:
        """Return this tier followed by every broader tier it inherits from."""
        order = list(Breakpoint)
        return list(reversed(order[: order.index(self) + 1]))


class UIState(Enum):
    """Interaction state gating which classes apply."""

    NEUTRAL = "neutral"
    HOVER = "hover"
    FOCUS = "focus"
    ACTIVE = "active"
    DISABLED = "disabled"
    VISITED = "visited"

    @property
    def prefix(self) -> str:
        if self is UIState.NEUTRAL:
            return ""
        return f"{self.value}:"


_BREAKPOINT_PREFIXES: dict[Breakpoint, str] = {
    Breakpoint.DESKTOP: "",
    Breakpoint.TABLET: "max-lg:",
    Breakpoint.MOBILE: "max-md:",
}

# Variant names (without the trailing colon) as they appear in class tokens.
BREAKPOINT_VARIANTS: dict[str, Breakpoint] = {
    "max-lg": Breakpoint.TABLET,
    "max-md": Breakpoint.MOBILE,
}

STATE_VARIANTS: dict[str, UIState] = {
    state.value: state for state in UIState if state is not UIState.NEUTRAL
}


def variant_prefix(breakpoint: Breakpoint, state: UIState) -> str:
    """Return the combined prefix: breakpoint first, then state."""
    return breakpoint.prefix + state.prefix
