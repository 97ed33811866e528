"""Structured value -> class token encoding."""

from __future__ import annotations

import logging

from designsync.codec.properties import (
    FONT_SIZES,
    FONT_WEIGHTS,
    PropertySpec,
    ValueKind,
    get_spec,
    is_fraction,
    is_number,
    is_palette_name,
    property_of,
)

log = logging.getLogger(__name__)

_SIZE_BY_LENGTH = {length: name for name, length in FONT_SIZES.items()}
_WEIGHT_BY_NUMBER = {number: name for name, number in FONT_WEIGHTS.items()}


def property_to_class(category: str, property_name: str, value: str | None) -> str | None:
    """Encode one design value as an unprefixed class token.

    Returns None for empty values, unsupported properties, and values the
    property cannot express (an unknown ``display`` keyword, say).
    """
    if not value:
        return None
    spec = get_spec(property_name)
    if spec is None:
        log.debug("No class mapping for %s.%s", category, property_name)
        return None
    if spec.category != category:
        log.debug(
            "Property %s encoded under category %s (declared %s)",
            property_name,
            category,
            spec.category,
        )

    value = str(value).strip()
    value = spec.aliases.get(value, value)

    if value.startswith("--"):
        return _variable(spec, value)
    if spec.kind is ValueKind.ATOMIC:
        return value if value in spec.keywords else None
    if spec.kind is ValueKind.KEYWORD:
        return spec.prefix + value if value in spec.keywords else None
    if spec.kind is ValueKind.IMAGE:
        return _image(spec, value)

    named = _named(spec, value)
    if named is not None and property_of(named) == spec.name:
        return named
    literal = _arbitrary_literal(spec, value)
    arbitrary = _arbitrary(spec, literal)
    if property_of(arbitrary) == spec.name:
        return arbitrary
    if spec.var_hint:
        # Literals the shared prefix cannot attribute get an explicit type hint.
        hinted = _arbitrary(spec, f"{spec.var_hint}:{literal}")
        if property_of(hinted) == spec.name:
            return hinted
    log.debug("Value %r cannot be expressed for %s", value, property_name)
    return None


def _named(spec: PropertySpec, value: str) -> str | None:
    if spec.name == "fontSize":
        name = value if value in FONT_SIZES else _SIZE_BY_LENGTH.get(value)
        return spec.prefix + name if name else None
    if spec.name == "fontWeight":
        name = value if value in FONT_WEIGHTS else _WEIGHT_BY_NUMBER.get(value)
        return spec.prefix + name if name else None
    if spec.kind is ValueKind.COLOR:
        return spec.prefix + value if is_palette_name(value) else None
    if value in spec.keywords or is_number(value) or is_fraction(value):
        return spec.prefix + value
    return None


def _arbitrary_literal(spec: PropertySpec, value: str) -> str:
    # A bare number is a pixel length wherever no numeric scale applies.
    if spec.name in ("fontSize", "borderWidth") and is_number(value):
        return f"{value}px"
    return value


def _arbitrary(spec: PropertySpec, literal: str) -> str:
    return f"{spec.prefix}[{literal.replace(' ', '_')}]"


def _variable(spec: PropertySpec, name: str) -> str | None:
    if spec.kind in (ValueKind.ATOMIC, ValueKind.KEYWORD):
        return None
    hint = f"{spec.var_hint}:" if spec.var_hint else ""
    return f"{spec.prefix}({hint}{name})"


def _image(spec: PropertySpec, value: str) -> str:
    if value in spec.keywords:
        return spec.prefix + value
    if not value.startswith(("url(", "linear-gradient(", "radial-gradient(")):
        value = f"url({value})"
    return _arbitrary(spec, value)
