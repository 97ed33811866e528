"""Element and TextStyle models: the two kinds of object a design edit can target."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Sequence

# category -> property -> value; each category may also carry an ``isActive`` flag.
Design = dict[str, dict[str, Any]]

ACTIVE_FLAG = "isActive"


def normalize_classes(classes: str | Sequence[str] | None) -> list[str]:
    """Return *classes* as a list of tokens, accepting a joined string or a sequence."""
    if not classes:
        return []
    if isinstance(classes, str):
        return classes.split()
    return [c for c in classes if c]


def join_classes(classes: str | Sequence[str] | None) -> str:
    return " ".join(normalize_classes(classes))


@dataclass(frozen=True)
class TextStyle:
    """A named, reusable design + classes bundle attached to an element."""

    design: Design = field(default_factory=dict)
    classes: str | list[str] = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TextStyle:
        return cls(
            design=dict(data.get("design") or {}),
            classes=data.get("classes") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"design": self.design, "classes": join_classes(self.classes)}


@dataclass(frozen=True)
class StyleOverrides:
    """Divergence of an element from the shared style template it uses."""

    design: Design = field(default_factory=dict)
    classes: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StyleOverrides:
        return cls(design=dict(data.get("design") or {}), classes=data.get("classes") or "")

    def to_dict(self) -> dict[str, Any]:
        return {"design": self.design, "classes": self.classes}


@dataclass(frozen=True)
class Element:
    """The unit being styled.

    Attributes:
        id: Identifier in the owning element graph.
        design: Structured category -> property -> value representation.
        classes: Class tokens, either space-joined or as a list.
        text_styles: Named text styles owned by the element, or None if the
            element never customized any (defaults apply).
        style_id: Shared style template the element is linked to, if any.
        style_overrides: Bookkeeping of divergence from that template.
    """

    id: str
    design: Design = field(default_factory=dict)
    classes: str | list[str] = ""
    text_styles: dict[str, TextStyle] | None = None
    style_id: str | None = None
    style_overrides: StyleOverrides | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Element id must be a non-empty string")

    @property
    def class_list(self) -> list[str]:
        return normalize_classes(self.classes)

    def with_patch(self, fields: dict[str, Any]) -> Element:
        """Return a copy with only the fields present in *fields* replaced."""
        return replace(self, **fields)

    # --- serialization --------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Element:
        """Build an Element from the element-graph JSON shape (camelCase keys)."""
        raw_styles = data.get("textStyles")
        text_styles = None
        if raw_styles is not None:
            text_styles = {key: TextStyle.from_dict(value) for key, value in raw_styles.items()}
        raw_overrides = data.get("styleOverrides")
        return cls(
            id=str(data.get("id") or ""),
            design=dict(data.get("design") or {}),
            classes=data.get("classes") or "",
            text_styles=text_styles,
            style_id=data.get("styleId"),
            style_overrides=StyleOverrides.from_dict(raw_overrides) if raw_overrides else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "design": self.design,
            "classes": join_classes(self.classes),
        }
        if self.text_styles is not None:
            data["textStyles"] = {key: style.to_dict() for key, style in self.text_styles.items()}
        if self.style_id is not None:
            data["styleId"] = self.style_id
        if self.style_overrides is not None:
            data["styleOverrides"] = self.style_overrides.to_dict()
        return data
