"""Tests for the DesignSync engine write and read paths."""

from designsync import DesignSync, Element
from designsync.editing import TextEditor
from designsync.events import DynamicStyleApplied, EventBus, PatchEmitted
from designsync.model import Breakpoint, StyleOverrides, TextStyle, UIState
from designsync.store import ElementStore
from designsync.styles import DEFAULT_TEXT_STYLES
from designsync.sync import ManualScheduler, PropertyUpdate


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _element(**kwargs) -> Element:
    kwargs.setdefault("id", "el-1")
    return Element(**kwargs)


def _sync(element: Element | None = None, **kwargs) -> tuple[DesignSync, ElementStore]:
    element = element or _element()
    store = ElementStore([element])
    kwargs.setdefault("scheduler", ManualScheduler())
    return DesignSync(element, store.apply_patch, **kwargs), store


# ---------------------------------------------------------------------------
# Property write path
# ---------------------------------------------------------------------------


class TestUpdateProperty:
    def test_writes_design_and_class(self) -> None:
        sync, store = _sync()
        design, classes = sync.update_property("sizing", "width", "full")
        assert design == {"sizing": {"width": "full", "isActive": True}}
        assert classes == ["w-full"]
        assert store.get("el-1").classes == "w-full"

    def test_patch_is_narrow(self) -> None:
        sync, store = _sync()
        sync.update_property("sizing", "width", "full")
        [(element_id, fields)] = store.patches
        assert element_id == "el-1"
        assert set(fields) == {"design", "classes"}

    def test_replaces_prior_token_for_same_triple(self) -> None:
        sync, _ = _sync(_element(classes="flex w-full"))
        _, classes = sync.update_property("sizing", "width", "1/2")
        assert classes == ["flex", "w-1/2"]

    def test_one_token_per_triple_after_many_writes(self) -> None:
        sync, _ = _sync()
        for value in ["full", "1/2", "120px", "auto"]:
            sync.update_property("sizing", "width", value)
        sync.set_breakpoint(Breakpoint.MOBILE)
        sync.set_ui_state(UIState.HOVER)
        for value in ["full", "1/3"]:
            sync.update_property("sizing", "width", value)
        assert sync.element.class_list == ["w-auto", "max-md:hover:w-1/3"]

    def test_preserves_other_categories(self) -> None:
        sync, _ = _sync(_element(design={"layout": {"display": "flex", "isActive": True}}, classes="flex"))
        design, classes = sync.update_property("sizing", "height", "screen")
        assert design["layout"] == {"display": "flex", "isActive": True}
        assert classes == ["flex", "h-screen"]

    def test_removal_clears_every_breakpoint_and_state(self) -> None:
        sync, _ = _sync(
            _element(
                design={"sizing": {"width": "full", "height": "full", "isActive": True}},
                classes="w-full h-full max-lg:w-1/2 max-md:hover:w-auto",
            )
        )
        design, classes = sync.update_property("sizing", "width", None)
        assert design == {"sizing": {"height": "full", "isActive": True}}
        assert classes == ["h-full"]
        assert sync.get_property("sizing", "width") is None

    def test_removal_keeps_active_flag(self) -> None:
        sync, _ = _sync()
        sync.update_property("effects", "opacity", "50")
        design, classes = sync.update_property("effects", "opacity", "")
        assert design == {"effects": {"isActive": True}}
        assert classes == []

    def test_arbitrary_value_kept_raw_in_design(self) -> None:
        sync, _ = _sync()
        design, classes = sync.update_property("sizing", "width", "calc(100% - 2rem)")
        assert design["sizing"]["width"] == "calc(100% - 2rem)"
        assert classes == ["w-[calc(100%_-_2rem)]"]

    def test_breakpoint_prefix_applied(self) -> None:
        sync, _ = _sync(breakpoint=Breakpoint.TABLET, ui_state=UIState.FOCUS)
        _, classes = sync.update_property("typography", "fontSize", "xl")
        assert classes == ["max-lg:focus:text-xl"]

    def test_no_element_is_noop(self) -> None:
        store = ElementStore()
        sync = DesignSync(None, store.apply_patch, scheduler=ManualScheduler())
        assert sync.update_property("sizing", "width", "full") is None
        assert sync.get_property("sizing", "width") is None
        assert store.patches == []

    def test_read_after_write_uses_mirror(self) -> None:
        patches: list = []
        sync = DesignSync(_element(), lambda element_id, fields: patches.append(fields), scheduler=ManualScheduler())
        sync.update_property("sizing", "width", "full")
        sync.update_property("sizing", "height", "full")
        assert patches[-1]["classes"] == "w-full h-full"
        assert sync.get_property("sizing", "width") == "full"

    def test_emits_patch_event(self) -> None:
        bus = EventBus()
        seen: list = []
        bus.subscribe(PatchEmitted, seen.append)
        sync, _ = _sync(event_bus=bus)
        sync.update_property("sizing", "width", "full")
        assert seen == [PatchEmitted(element_id="el-1", fields=("design", "classes"))]


# ---------------------------------------------------------------------------
# Style overrides
# ---------------------------------------------------------------------------


class TestStyleOverrides:
    def test_linked_element_emits_overrides(self) -> None:
        sync, store = _sync(_element(style_id="card"))
        sync.update_property("sizing", "width", "full")
        [(_, fields)] = store.patches
        assert fields["style_overrides"] == StyleOverrides(
            design={"sizing": {"width": "full", "isActive": True}},
            classes="w-full",
        )
        assert store.get("el-1").style_overrides == fields["style_overrides"]

    def test_unlinked_element_omits_overrides(self) -> None:
        sync, store = _sync()
        sync.update_property("sizing", "width", "full")
        assert "style_overrides" not in store.patches[0][1]

    def test_custom_tracker(self) -> None:
        marker = StyleOverrides(classes="tracked")
        sync, store = _sync(override_tracker=lambda previous, updated: marker)
        sync.update_property("sizing", "width", "full")
        assert store.patches[0][1]["style_overrides"] is marker


# ---------------------------------------------------------------------------
# Batch write path
# ---------------------------------------------------------------------------


class TestUpdateProperties:
    def test_later_entry_wins(self) -> None:
        batch, batch_store = _sync()
        batch.update_properties([("typography", "fontSize", "3xl"), ("typography", "fontSize", "xl")])
        single, single_store = _sync()
        single.update_property("typography", "fontSize", "xl")
        assert batch_store.get("el-1") == single_store.get("el-1")

    def test_single_patch(self) -> None:
        sync, store = _sync()
        design, classes = sync.update_properties(
            [
                PropertyUpdate("layout", "display", "flex"),
                PropertyUpdate("layout", "flexDirection", "column"),
                PropertyUpdate("layout", "gap", "4"),
            ]
        )
        assert len(store.patches) == 1
        assert classes == ["flex", "flex-col", "gap-4"]
        assert design["layout"] == {
            "display": "flex",
            "flexDirection": "column",
            "gap": "4",
            "isActive": True,
        }

    def test_batch_removal(self) -> None:
        sync, _ = _sync(_element(design={"sizing": {"width": "full", "isActive": True}}, classes="w-full"))
        _, classes = sync.update_properties([("sizing", "width", None), ("sizing", "height", "full")])
        assert classes == ["h-full"]

    def test_empty_batch_emits_nothing(self) -> None:
        sync, store = _sync(_element(classes="flex"))
        design, classes = sync.update_properties([])
        assert classes == ["flex"]
        assert store.patches == []

    def test_batch_resolves_target_once(self) -> None:
        editor = TextEditor(key_factory=iter(["dynamic-a", "dynamic-b"]).__next__)
        editor.begin()
        editor.select(0, 4)
        sync, store = _sync(editor=editor)
        sync.update_properties([("typography", "fontWeight", "700"), ("typography", "fontStyle", "italic")])
        text_styles = store.get("el-1").text_styles
        assert text_styles["dynamic-a"].classes == "font-bold italic"
        assert "dynamic-b" not in text_styles


# ---------------------------------------------------------------------------
# Category reset path
# ---------------------------------------------------------------------------


class TestResetCategory:
    def test_removes_category_and_tokens(self) -> None:
        sync, store = _sync(
            _element(
                design={
                    "typography": {"color": "red-500", "fontSize": "xl", "isActive": True},
                    "layout": {"display": "flex", "isActive": True},
                },
                classes="flex text-red-500 text-xl max-md:hover:text-blue-500 max-lg:text-sm",
            )
        )
        design, classes = sync.reset_category("typography")
        assert design == {"layout": {"display": "flex", "isActive": True}}
        assert classes == ["flex"]
        assert len(store.patches) == 1

    def test_absent_category_is_noop(self) -> None:
        sync, store = _sync(_element(classes="flex"))
        assert sync.reset_category("typography") is None
        assert store.patches == []

    def test_only_active_flag_is_noop(self) -> None:
        sync, store = _sync(_element(design={"effects": {"isActive": True}}))
        assert sync.reset_category("effects") is None
        assert store.patches == []


# ---------------------------------------------------------------------------
# Class sync path
# ---------------------------------------------------------------------------


class TestSyncClasses:
    def test_replaces_classes_verbatim(self) -> None:
        sync, store = _sync(_element(design={"layout": {"display": "flex"}}, classes="flex"))
        design, classes = sync.sync_classes("grid  gap-2 custom-thing")
        assert classes == ["grid", "gap-2", "custom-thing"]
        assert design == {"layout": {"display": "flex"}}
        assert store.get("el-1").classes == "grid gap-2 custom-thing"


# ---------------------------------------------------------------------------
# Cascade read path
# ---------------------------------------------------------------------------


class TestGetProperty:
    def test_cascade_fallback(self) -> None:
        sync, _ = _sync(_element(classes="w-full max-md:hover:w-1/2"))
        sync.set_breakpoint(Breakpoint.MOBILE)
        assert sync.get_property("sizing", "width") == "full"
        sync.set_ui_state(UIState.HOVER)
        assert sync.get_property("sizing", "width") == "1/2"

    def test_empty_classes_read_design(self) -> None:
        sync, _ = _sync(_element(design={"sizing": {"width": "full"}}))
        assert sync.get_property("sizing", "width") == "full"
        assert sync.get_property("sizing", "height") is None

    def test_failed_cascade_does_not_read_design(self) -> None:
        sync, _ = _sync(_element(design={"sizing": {"width": "stale"}}, classes="flex"))
        assert sync.get_property("sizing", "width") is None

    def test_decodes_named_values(self) -> None:
        sync, _ = _sync(_element(classes="text-3xl font-bold flex-col"))
        assert sync.get_property("typography", "fontSize") == "1.875rem"
        assert sync.get_property("typography", "fontWeight") == "700"
        assert sync.get_property("layout", "flexDirection") == "column"

    def test_decodes_background_variable(self) -> None:
        sync, _ = _sync()
        sync.update_property("backgrounds", "backgroundImage", "--hero")
        assert sync.element.class_list == ["bg-(image:--hero)"]
        assert sync.get_property("backgrounds", "backgroundImage") == "--hero"

    def test_round_trip(self) -> None:
        cases = [
            ("sizing", "width", "full", "full"),
            ("sizing", "width", "120px", "120px"),
            ("typography", "color", "blue-500", "blue-500"),
            ("typography", "fontWeight", "600", "600"),
            ("typography", "fontSize", "2xl", "1.5rem"),
            ("layout", "display", "inline-flex", "inline-flex"),
            ("layout", "flexDirection", "column", "column"),
            ("backgrounds", "backgroundColor", "--surface", "--surface"),
            ("layout", "gridColumnSpan", "--span", "--span"),
            ("layout", "gridRowSpan", "--rows", "--rows"),
            ("sizing", "width", "calc(100% - 2rem)", "calc(100% - 2rem)"),
        ]
        for category, prop, value, expected in cases:
            sync, _ = _sync()
            sync.update_property(category, prop, value)
            assert sync.get_property(category, prop) == expected, prop


# ---------------------------------------------------------------------------
# Text style targets
# ---------------------------------------------------------------------------


class TestTextStyleTarget:
    def test_writes_text_style_from_defaults(self) -> None:
        sync, store = _sync(text_style_key="bold")
        sync.update_property("typography", "color", "red-500")
        [(_, fields)] = store.patches
        assert set(fields) == {"text_styles"}
        bold = fields["text_styles"]["bold"]
        assert bold.classes == "font-bold text-red-500"
        assert bold.design["typography"] == {"fontWeight": "700", "color": "red-500", "isActive": True}
        assert fields["text_styles"]["italic"] is DEFAULT_TEXT_STYLES["italic"]

    def test_element_untouched(self) -> None:
        sync, store = _sync(_element(classes="flex"), text_style_key="bold")
        sync.update_property("typography", "color", "red-500")
        assert store.get("el-1").classes == "flex"

    def test_existing_styles_preserved(self) -> None:
        styles = {"custom": TextStyle(design={}, classes="underline")}
        sync, store = _sync(_element(text_styles=styles), text_style_key="headline")
        sync.update_property("typography", "fontSize", "4xl")
        text_styles = store.get("el-1").text_styles
        assert set(text_styles) == {"custom", "headline"}
        assert text_styles["headline"].classes == "text-4xl"

    def test_reads_text_style(self) -> None:
        sync, _ = _sync(text_style_key="bold")
        assert sync.get_property("typography", "fontWeight") == "700"

    def test_reset_text_style_category(self) -> None:
        sync, store = _sync(text_style_key="code")
        sync.reset_category("backgrounds")
        code = store.get("el-1").text_styles["code"]
        assert code.classes == "font-mono text-sm"
        assert "backgrounds" not in code.design


# ---------------------------------------------------------------------------
# Dynamic style layers from text editing
# ---------------------------------------------------------------------------


class TestDynamicStyles:
    def test_selection_materializes_new_layer(self) -> None:
        editor = TextEditor(key_factory=iter(["dynamic-a", "dynamic-b"]).__next__)
        editor.begin()
        editor.select(0, 3)
        bus = EventBus()
        applied: list = []
        bus.subscribe(DynamicStyleApplied, applied.append)
        sync, store = _sync(editor=editor, text_style_key="bold", event_bus=bus)
        sync.update_property("typography", "color", "red-500")
        sync.update_property("typography", "fontSize", "xl")
        text_styles = store.get("el-1").text_styles
        assert text_styles["dynamic-a"].classes == "text-red-500"
        assert text_styles["dynamic-b"].classes == "text-xl"
        assert [e.style_key for e in applied] == ["dynamic-a", "dynamic-b"]

    def test_cursor_with_targeted_key_edits_in_place(self) -> None:
        editor = TextEditor()
        editor.begin()
        sync, store = _sync(editor=editor, text_style_key="bold")
        sync.update_property("typography", "color", "red-500")
        assert store.get("el-1").text_styles["bold"].classes == "font-bold text-red-500"
        assert editor.marks == []

    def test_cursor_without_key_materializes_once(self) -> None:
        editor = TextEditor(key_factory=iter(["dynamic-a", "dynamic-b"]).__next__)
        editor.begin(cursor=2)
        sync, store = _sync(editor=editor)
        sync.update_property("typography", "color", "red-500")
        sync.update_property("typography", "fontSize", "xl")
        assert store.get("el-1").text_styles["dynamic-a"].classes == "text-red-500 text-xl"

    def test_finished_session_targets_element(self) -> None:
        editor = TextEditor()
        sync, store = _sync(editor=editor)
        sync.update_property("typography", "color", "red-500")
        assert store.get("el-1").classes == "text-red-500"
