"""In-memory element store: the owner of the element graph that receives patches."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from designsync.model.element import Element, StyleOverrides, TextStyle

log = logging.getLogger(__name__)


class ElementStore:
    """Holds elements by id and applies narrow patches to them.

    A patch replaces only the fields it names; everything else on the stored
    element is left as it was. ``patches`` is an audit log of every applied
    patch in arrival order; it keeps the most recent ``history_limit``
    entries (all of them when the limit is None).
    """

    def __init__(self, elements: list[Element] | None = None, history_limit: int | None = 1000) -> None:
        self._elements: dict[str, Element] = {}
        self.patches: list[tuple[str, dict[str, Any]]] = []
        self._history_limit = history_limit
        for element in elements or []:
            self.put(element)

    def __contains__(self, element_id: str) -> bool:
        return element_id in self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._elements.values()))

    def get(self, element_id: str) -> Element | None:
        return self._elements.get(element_id)

    def put(self, element: Element) -> None:
        self._elements[element.id] = element

    def apply_patch(self, element_id: str, fields: dict[str, Any]) -> None:
        current = self._elements.get(element_id)
        if current is None:
            log.warning("Dropping patch for unknown element %s", element_id)
            return
        self._elements[element_id] = current.with_patch(fields)
        self.patches.append((element_id, dict(fields)))
        if self._history_limit is not None and len(self.patches) > self._history_limit:
            del self.patches[: -self._history_limit]

    # --- JSON files -----------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path) -> ElementStore:
        """Load a JSON file holding one element object or a list of them."""
        data = json.loads(Path(path).read_text())
        items = data if isinstance(data, list) else [data]
        return cls([Element.from_dict(item) for item in items])

    def dump(self, path: str | Path) -> None:
        items = [element.to_dict() for element in self._elements.values()]
        payload: Any = items[0] if len(items) == 1 else items
        Path(path).write_text(json.dumps(payload, indent=2, default=_encode) + "\n")


def _encode(obj: Any) -> Any:
    if isinstance(obj, (TextStyle, StyleOverrides)):
        return obj.to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
