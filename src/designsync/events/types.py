"""Event types emitted by the sync engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PatchEmitted:
    element_id: str
    fields: tuple[str, ...]
    text_style_key: str | None = None


@dataclass(frozen=True)
class PendingEditsCancelled:
    element_id: str | None
    properties: tuple[str, ...]
    reason: str


@dataclass(frozen=True)
class DynamicStyleApplied:
    element_id: str
    style_key: str
