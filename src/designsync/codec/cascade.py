"""Cascade lookup: the token that actually applies at a breakpoint and UI state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from designsync.codec.properties import property_of
from designsync.model.variants import Breakpoint, UIState
from designsync.parser import parse_classes


@dataclass(frozen=True)
class InheritedValue:
    """A resolved token and the tier/state it was found at."""

    value: str
    breakpoint: Breakpoint
    state: UIState


def get_inherited_value(
    classes: str | Sequence[str] | None,
    property_name: str,
    breakpoint: Breakpoint = Breakpoint.DESKTOP,
    state: UIState = UIState.NEUTRAL,
) -> InheritedValue | None:
    """Resolve the effective token for *property_name*.

    Walks from *breakpoint* out to desktop (mobile -> tablet -> desktop). At
    each tier a token for *state* wins over the neutral one. State-specific
    tokens are ignored entirely when *state* is neutral. When several tokens
    share a tier and state, the last one in the list wins.
    """
    found: dict[tuple[Breakpoint, UIState], str] = {}
    for token in parse_classes(classes):
        if property_of(token.body) != property_name:
            continue
        key = token.variant_key()
        if key is not None:
            found[key] = token.raw

    states = [UIState.NEUTRAL] if state is UIState.NEUTRAL else [state, UIState.NEUTRAL]
    for tier in breakpoint.cascade():
        for candidate in states:
            raw = found.get((tier, candidate))
            if raw:
                return InheritedValue(value=raw, breakpoint=tier, state=candidate)
    return None
