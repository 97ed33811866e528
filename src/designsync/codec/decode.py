"""Reverse value decoding: resolved class token -> design value."""

from __future__ import annotations

import re

from designsync.codec.properties import (
    FONT_SIZES,
    FONT_WEIGHTS,
    PROPERTY_SPECS,
    ValueKind,
    get_spec,
    variable_name,
)

# Leading breakpoint and state prefixes, at most one of each.
_PREFIX_RE = re.compile(r"^(max-lg:|max-md:|lg:|md:)?(hover:|focus:|active:|disabled:|visited:)?")

_ARBITRARY_RE = re.compile(r"\[([^\]]+)\]")

_BG_VARIABLE_RE = re.compile(r"(?:^|:)bg-\(image:(--[\w-]+)\)$")

# Type hints that disambiguate arbitrary literals under a shared prefix.
_TYPE_HINTS = ("length:", "color:", "number:", "image:", "family-name:")

# Properties whose classes are complete values (``inline-block``, ``line-through``).
ATOMIC_PROPERTIES = frozenset(s.name for s in PROPERTY_SPECS if s.kind is ValueKind.ATOMIC)

_GRID_SPAN_PREFIXES = {"gridColumnSpan": "col-span-", "gridRowSpan": "row-span-"}

NAMED_MAPPINGS: dict[str, dict[str, str]] = {
    "fontWeight": FONT_WEIGHTS,
    "fontSize": FONT_SIZES,
    "flexDirection": {
        "row": "row",
        "col": "column",
        "row-reverse": "row-reverse",
        "col-reverse": "column-reverse",
    },
    "flexWrap": {
        "wrap": "wrap",
        "wrap-reverse": "wrap-reverse",
        "nowrap": "nowrap",
    },
}


def extract_arbitrary_value(class_name: str) -> str | None:
    """Return the content of a bracketed literal (``w-[120px]`` -> ``120px``)."""
    match = _ARBITRARY_RE.search(class_name)
    if not match:
        return None
    content = match.group(1)
    for hint in _TYPE_HINTS:
        if content.startswith(hint):
            content = content[len(hint):]
            break
    if content.startswith("url("):
        return content
    # Underscores stand for spaces inside arbitrary literals.
    return content.replace("_", " ")


def extract_bg_img_var_name(class_name: str) -> str | None:
    """Return the variable behind a background-image token (``bg-(image:--hero)``)."""
    match = _BG_VARIABLE_RE.search(class_name)
    return match.group(1) if match else None


def map_class_to_design_value(class_name: str, property_name: str) -> str | None:
    """Map a class back to its design value.

    ``text-3xl`` -> ``1.875rem``, ``font-bold`` -> ``700``, ``flex-col`` ->
    ``column``, ``bg-blue-500`` -> ``blue-500``. Unknown bodies come back as
    they are.
    """
    clean = _PREFIX_RE.sub("", class_name, count=1)

    if property_name in ATOMIC_PROPERTIES:
        return clean

    spec = get_spec(property_name)
    span_prefix = _GRID_SPAN_PREFIXES.get(property_name)
    if span_prefix and clean.startswith(span_prefix):
        value = clean[len(span_prefix):]
    elif spec is not None and spec.prefix and clean.startswith(spec.prefix):
        value = clean[len(spec.prefix):]
    else:
        parts = clean.split("-", 1)
        if len(parts) < 2 or not parts[1]:
            return None
        value = parts[1]

    variable = variable_name(value)
    if variable:
        return variable

    return NAMED_MAPPINGS.get(property_name, {}).get(value, value)


def decode_class_value(class_name: str, property_name: str) -> str | None:
    """Decode a resolved token: bracketed literal, background variable, then named value."""
    arbitrary = extract_arbitrary_value(class_name)
    if arbitrary is not None:
        return arbitrary
    bg_variable = extract_bg_img_var_name(class_name)
    if bg_variable:
        return bg_variable
    return map_class_to_design_value(class_name, property_name)
