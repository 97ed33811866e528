"""Conflict resolution: keep at most one token per (property, breakpoint, state)."""

from __future__ import annotations

from typing import Sequence

from designsync.codec.properties import property_of
from designsync.model.token import ClassToken
from designsync.model.variants import Breakpoint, UIState, variant_prefix
from designsync.parser import parse_classes


def _belongs_to(token: ClassToken, property_name: str) -> bool:
    return property_of(token.body) == property_name


def replace_conflicting_classes(
    classes: str | Sequence[str] | None,
    property_name: str,
    new_class: str | None,
) -> list[str]:
    """Drop every token of *property_name*, whatever its prefixes, then append *new_class*.

    Passing ``None`` removes the property from every breakpoint and state.
    """
    result = [t.raw for t in parse_classes(classes) if not _belongs_to(t, property_name)]
    if new_class:
        result.append(new_class)
    return result


def remove_property_classes(classes: str | Sequence[str] | None, property_name: str) -> list[str]:
    return replace_conflicting_classes(classes, property_name, None)


def set_breakpoint_class(
    classes: str | Sequence[str] | None,
    property_name: str,
    new_class: str | None,
    breakpoint: Breakpoint = Breakpoint.DESKTOP,
    state: UIState = UIState.NEUTRAL,
) -> list[str]:
    """Replace the token for one (property, breakpoint, state) triple.

    *new_class* is the unprefixed token; the breakpoint and state prefixes are
    applied here. Tokens for the same property under other prefixes are left
    alone. The new token takes the position of the one it replaces, or goes
    last if there was none. ``None`` only removes.
    """
    target = (breakpoint, state)
    result: list[str] = []
    insert_at: int | None = None
    for token in parse_classes(classes):
        if _belongs_to(token, property_name) and token.variant_key() == target:
            if insert_at is None:
                insert_at = len(result)
            continue
        result.append(token.raw)
    if new_class:
        prefixed = variant_prefix(breakpoint, state) + new_class
        if insert_at is None:
            result.append(prefixed)
        else:
            result.insert(insert_at, prefixed)
    return result
