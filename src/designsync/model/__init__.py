"""designsync model layer -- public type re-exports."""

from designsync.model.element import (
    ACTIVE_FLAG,
    Design,
    Element,
    StyleOverrides,
    TextStyle,
    join_classes,
    normalize_classes,
)
from designsync.model.token import ClassToken
from designsync.model.variants import Breakpoint, UIState, variant_prefix

__all__ = [
    # element
    "ACTIVE_FLAG",
    "Design",
    "Element",
    "StyleOverrides",
    "TextStyle",
    "join_classes",
    "normalize_classes",
    # token
    "ClassToken",
    # variants
    "Breakpoint",
    "UIState",
    "variant_prefix",
]
