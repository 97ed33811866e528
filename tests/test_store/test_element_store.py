"""Tests for the in-memory element store."""

import json

from designsync.model import Element, TextStyle
from designsync.store import ElementStore


def _store() -> ElementStore:
    return ElementStore([Element(id="a", design={"layout": {"display": "flex"}}, classes="flex", style_id="card")])


class TestApplyPatch:
    def test_replaces_named_fields_only(self) -> None:
        store = _store()
        store.apply_patch("a", {"classes": "grid"})
        element = store.get("a")
        assert element.classes == "grid"
        assert element.design == {"layout": {"display": "flex"}}
        assert element.style_id == "card"

    def test_records_patches(self) -> None:
        store = _store()
        store.apply_patch("a", {"classes": "grid"})
        assert store.patches == [("a", {"classes": "grid"})]

    def test_unknown_element_dropped(self) -> None:
        store = _store()
        store.apply_patch("missing", {"classes": "grid"})
        assert store.patches == []
        assert "missing" not in store

    def test_history_is_capped(self) -> None:
        store = ElementStore([Element(id="a")], history_limit=2)
        for name in ["flex", "grid", "block"]:
            store.apply_patch("a", {"classes": name})
        assert store.patches == [("a", {"classes": "grid"}), ("a", {"classes": "block"})]
        assert store.get("a").classes == "block"

    def test_unlimited_history(self) -> None:
        store = ElementStore([Element(id="a")], history_limit=None)
        for index in range(5):
            store.apply_patch("a", {"classes": f"z-{index}"})
        assert len(store.patches) == 5


class TestFiles:
    def test_load_single_object(self, tmp_path) -> None:
        path = tmp_path / "element.json"
        path.write_text(json.dumps({"id": "hero", "classes": "w-full"}))
        store = ElementStore.load(path)
        assert len(store) == 1
        assert store.get("hero").class_list == ["w-full"]

    def test_load_list(self, tmp_path) -> None:
        path = tmp_path / "elements.json"
        path.write_text(json.dumps([{"id": "a"}, {"id": "b"}]))
        store = ElementStore.load(path)
        assert [e.id for e in store] == ["a", "b"]

    def test_dump_round_trip(self, tmp_path) -> None:
        path = tmp_path / "element.json"
        store = ElementStore([Element(id="a", classes="flex", text_styles={"bold": TextStyle(classes="font-bold")})])
        store.dump(path)
        data = json.loads(path.read_text())
        assert data == {
            "id": "a",
            "design": {},
            "classes": "flex",
            "textStyles": {"bold": {"design": {}, "classes": "font-bold"}},
        }
