"""Property table: which class bodies belong to which design property.

Every supported design property is described by a PropertySpec naming its
category, its class prefix and the shape of the values it encodes. Several
properties share a prefix (``text-`` is font size, text alignment and text
color); the first spec whose matcher accepts a body owns it, and the spec
marked ``fallback`` owns whatever its siblings do not claim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache


class ValueKind(Enum):
    """How a property's values map onto class bodies."""

    ATOMIC = "atomic"  # the whole body is the value: ``flex``, ``uppercase``
    KEYWORD = "keyword"  # prefix + one of a fixed keyword set: ``text-center``
    SCALE = "scale"  # prefix + scale name, number or fraction, else arbitrary
    COLOR = "color"  # prefix + palette name, else arbitrary literal
    IMAGE = "image"  # background image: url/gradient literal or variable


_NUMBER_RE = re.compile(r"^\d+(\.\d+)?$")
_FRACTION_RE = re.compile(r"^\d+/\d+$")
_LENGTH_RE = re.compile(r"^-?\d*\.?\d+(px|rem|em|%|vw|vh|svh|dvh|ch|pt)$")
_PALETTE_RE = re.compile(r"^[a-z]+(-\d{2,3})?$")
_VARIABLE_RE = re.compile(r"^\((?:(?P<hint>[a-z-]+):)?(?P<name>--[\w-]+)\)$")
_ARBITRARY_RE = re.compile(r"^\[(?P<content>[^\]]+)\]$")

FONT_WEIGHTS: dict[str, str] = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

FONT_SIZES: dict[str, str] = {
    "xs": "0.75rem",
    "sm": "0.875rem",
    "base": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
    "3xl": "1.875rem",
    "4xl": "2.25rem",
    "5xl": "3rem",
    "6xl": "3.75rem",
    "7xl": "4.5rem",
    "8xl": "6rem",
    "9xl": "8rem",
}

_SIZING_KEYWORDS = frozenset(
    {"auto", "full", "screen", "fit", "min", "max", "px", "none", "svh", "dvh", "prose"}
    | {"xs", "sm", "md", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl", "7xl"}
)


@dataclass(frozen=True)
class PropertySpec:
    """How one design property is encoded as a class token.

    Attributes:
        name: Design property name (``fontSize``).
        category: Design category the property lives in (``typography``).
        prefix: Class prefix including its trailing dash; empty for atomic
            properties.
        kind: Value shape, see ValueKind.
        keywords: Named values the property accepts without brackets.
        aliases: Design values rewritten before encoding (``column`` -> ``col``).
        bare: Body that carries the property's default (``rounded``), if any.
        var_hint: Type hint written into variable references (``color``).
        fallback: Owns every body under ``prefix`` its siblings do not claim.
    """

    name: str
    category: str
    prefix: str
    kind: ValueKind
    keywords: frozenset[str] = frozenset()
    aliases: dict[str, str] = field(default_factory=dict)
    bare: str | None = None
    var_hint: str | None = None
    fallback: bool = False

    def matches(self, body: str) -> bool:
        """Return True if *body* could have been written for this property."""
        if self.kind is ValueKind.ATOMIC:
            return body in self.keywords
        if self.bare is not None and body == self.bare:
            return True
        if not body.startswith(self.prefix):
            return False
        if self.fallback:
            return True
        rest = body[len(self.prefix):]
        return _CLAIMS[self.name](self, rest)


# --- claim predicates for properties sharing a prefix -----------------------


def _claims_keyword(spec: PropertySpec, rest: str) -> bool:
    return rest in spec.keywords


def _claims_scale(spec: PropertySpec, rest: str) -> bool:
    return bool(rest)


def _claims_font_size(spec: PropertySpec, rest: str) -> bool:
    if rest in FONT_SIZES:
        return True
    return _arbitrary_is_length(rest) or _variable_hint(rest) == "length"


def _claims_font_weight(spec: PropertySpec, rest: str) -> bool:
    if rest in FONT_WEIGHTS or _variable_hint(rest) == "number":
        return True
    match = _ARBITRARY_RE.match(rest)
    return bool(match and _NUMBER_RE.match(match.group("content")))


def _claims_border_width(spec: PropertySpec, rest: str) -> bool:
    return bool(_NUMBER_RE.match(rest)) or _arbitrary_is_length(rest) or (
        _variable_hint(rest) == "length"
    )


def _claims_background_image(spec: PropertySpec, rest: str) -> bool:
    if rest == "none" or rest.startswith(("gradient-", "linear-", "radial-", "conic-")):
        return True
    if _variable_hint(rest) == "image":
        return True
    match = _ARBITRARY_RE.match(rest)
    if not match:
        return False
    content = match.group("content")
    return content.startswith(("url(", "image:", "linear-gradient(", "radial-gradient("))


def _arbitrary_is_length(rest: str) -> bool:
    match = _ARBITRARY_RE.match(rest)
    if not match:
        return False
    content = match.group("content")
    if content.startswith("length:"):
        return True
    return bool(_LENGTH_RE.match(content))


def _variable_hint(rest: str) -> str | None:
    match = _VARIABLE_RE.match(rest)
    if not match:
        return None
    return match.group("hint") or ""


# --- the table --------------------------------------------------------------


def _atomic(name: str, category: str, values: set[str], **kwargs) -> PropertySpec:
    return PropertySpec(name, category, "", ValueKind.ATOMIC, frozenset(values), **kwargs)


def _keyword(name: str, category: str, prefix: str, values: set[str], **kwargs) -> PropertySpec:
    return PropertySpec(name, category, prefix, ValueKind.KEYWORD, frozenset(values), **kwargs)


def _scale(
    name: str, category: str, prefix: str, values: set[str] | frozenset[str] = frozenset(), **kwargs
) -> PropertySpec:
    kwargs.setdefault("var_hint", "length")
    return PropertySpec(name, category, prefix, ValueKind.SCALE, frozenset(values), **kwargs)


def _color(name: str, category: str, prefix: str) -> PropertySpec:
    return PropertySpec(name, category, prefix, ValueKind.COLOR, var_hint="color", fallback=True)


PROPERTY_SPECS: tuple[PropertySpec, ...] = (
    # layout
    _atomic(
        "display",
        "layout",
        {"block", "inline-block", "inline", "flex", "inline-flex", "grid", "inline-grid", "hidden", "contents"},
        aliases={"none": "hidden"},
    ),
    _keyword(
        "flexDirection",
        "layout",
        "flex-",
        {"row", "col", "row-reverse", "col-reverse"},
        aliases={"column": "col", "column-reverse": "col-reverse"},
    ),
    _keyword("flexWrap", "layout", "flex-", {"wrap", "wrap-reverse", "nowrap"}),
    _keyword("justifyContent", "layout", "justify-", {"start", "center", "end", "between", "around", "evenly", "stretch"}),
    _keyword("alignItems", "layout", "items-", {"start", "center", "end", "baseline", "stretch"}),
    _scale("gap", "layout", "gap-"),
    _scale("gridTemplateColumns", "layout", "grid-cols-", {"none", "subgrid"}),
    _scale("gridTemplateRows", "layout", "grid-rows-", {"none", "subgrid"}),
    _scale("gridColumnSpan", "layout", "col-span-", {"full"}),
    _scale("gridRowSpan", "layout", "row-span-", {"full"}),
    # typography
    _atomic("textTransform", "typography", {"uppercase", "lowercase", "capitalize", "normal-case"}),
    _atomic("textDecoration", "typography", {"underline", "overline", "line-through", "no-underline"}),
    _atomic("fontStyle", "typography", {"italic", "not-italic"}, aliases={"normal": "not-italic"}),
    PropertySpec("fontSize", "typography", "text-", ValueKind.SCALE, frozenset(FONT_SIZES), var_hint="length"),
    _keyword("textAlign", "typography", "text-", {"left", "center", "right", "justify", "start", "end"}),
    _color("color", "typography", "text-"),
    PropertySpec("fontWeight", "typography", "font-", ValueKind.SCALE, frozenset(FONT_WEIGHTS), var_hint="number"),
    PropertySpec(
        "fontFamily", "typography", "font-", ValueKind.SCALE, frozenset({"sans", "serif", "mono"}),
        var_hint="family-name", fallback=True,
    ),
    _scale("lineHeight", "typography", "leading-", {"none", "tight", "snug", "normal", "relaxed", "loose"}),
    _scale("letterSpacing", "typography", "tracking-", {"tighter", "tight", "normal", "wide", "wider", "widest"}),
    # spacing
    _scale("paddingTop", "spacing", "pt-"),
    _scale("paddingRight", "spacing", "pr-"),
    _scale("paddingBottom", "spacing", "pb-"),
    _scale("paddingLeft", "spacing", "pl-"),
    _scale("marginTop", "spacing", "mt-", {"auto"}),
    _scale("marginRight", "spacing", "mr-", {"auto"}),
    _scale("marginBottom", "spacing", "mb-", {"auto"}),
    _scale("marginLeft", "spacing", "ml-", {"auto"}),
    # sizing
    _scale("width", "sizing", "w-", _SIZING_KEYWORDS),
    _scale("height", "sizing", "h-", _SIZING_KEYWORDS),
    _scale("minWidth", "sizing", "min-w-", _SIZING_KEYWORDS),
    _scale("maxWidth", "sizing", "max-w-", _SIZING_KEYWORDS),
    _scale("minHeight", "sizing", "min-h-", _SIZING_KEYWORDS),
    _scale("maxHeight", "sizing", "max-h-", _SIZING_KEYWORDS),
    # borders
    _scale("borderRadius", "borders", "rounded-", {"none", "xs", "sm", "md", "lg", "xl", "2xl", "3xl", "full"}, bare="rounded"),
    PropertySpec("borderWidth", "borders", "border-", ValueKind.SCALE, bare="border", var_hint="length"),
    _keyword("borderStyle", "borders", "border-", {"solid", "dashed", "dotted", "double", "hidden", "none"}),
    _color("borderColor", "borders", "border-"),
    # backgrounds
    PropertySpec("backgroundImage", "backgrounds", "bg-", ValueKind.IMAGE, frozenset({"none"}), var_hint="image"),
    _color("backgroundColor", "backgrounds", "bg-"),
    # effects
    _scale("opacity", "effects", "opacity-", var_hint="number"),
    _scale("boxShadow", "effects", "shadow-", {"xs", "sm", "md", "lg", "xl", "2xl", "inner", "none"}, bare="shadow", var_hint=None),
    # positioning
    _atomic("position", "positioning", {"static", "fixed", "absolute", "relative", "sticky"}),
    _scale("top", "positioning", "top-", {"auto", "full"}),
    _scale("right", "positioning", "right-", {"auto", "full"}),
    _scale("bottom", "positioning", "bottom-", {"auto", "full"}),
    _scale("left", "positioning", "left-", {"auto", "full"}),
    _scale("zIndex", "positioning", "z-", {"auto"}, var_hint=None),
)

_CLAIMS = {spec.name: _claims_scale for spec in PROPERTY_SPECS}
_CLAIMS.update(
    {
        spec.name: _claims_keyword
        for spec in PROPERTY_SPECS
        if spec.kind is ValueKind.KEYWORD
    }
)
_CLAIMS.update(
    {
        "fontSize": _claims_font_size,
        "fontWeight": _claims_font_weight,
        "borderWidth": _claims_border_width,
        "backgroundImage": _claims_background_image,
    }
)

_SPECS_BY_NAME: dict[str, PropertySpec] = {spec.name: spec for spec in PROPERTY_SPECS}

# Specific matchers are consulted before the prefix fallbacks.
_MATCH_ORDER: tuple[PropertySpec, ...] = tuple(
    [s for s in PROPERTY_SPECS if not s.fallback] + [s for s in PROPERTY_SPECS if s.fallback]
)


def get_spec(property_name: str) -> PropertySpec | None:
    """Return the spec for a design property name, or None if unsupported."""
    return _SPECS_BY_NAME.get(property_name)


@lru_cache(maxsize=4096)
def property_of(body: str) -> str | None:
    """Return the design property a class body belongs to, or None."""
    for spec in _MATCH_ORDER:
        if spec.matches(body):
            return spec.name
    return None


def is_number(value: str) -> bool:
    return bool(_NUMBER_RE.match(value))


def is_fraction(value: str) -> bool:
    return bool(_FRACTION_RE.match(value))


def is_palette_name(value: str) -> bool:
    return bool(_PALETTE_RE.match(value))


def variable_name(rest: str) -> str | None:
    """Return ``--name`` from a ``(hint:--name)`` variable reference body."""
    match = _VARIABLE_RE.match(rest)
    return match.group("name") if match else None
