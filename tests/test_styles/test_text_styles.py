"""Tests for default text styles and style-override tracking."""

from designsync.model import Element, StyleOverrides, TextStyle
from designsync.styles import DEFAULT_TEXT_STYLES, get_text_style, track_style_overrides


# ---------------------------------------------------------------------------
# Text style lookup
# ---------------------------------------------------------------------------


class TestGetTextStyle:
    def test_default_when_element_has_none(self) -> None:
        assert get_text_style(None, "bold") is DEFAULT_TEXT_STYLES["bold"]

    def test_element_style_wins(self) -> None:
        custom = TextStyle(design={}, classes="font-black")
        assert get_text_style({"bold": custom}, "bold") is custom

    def test_default_fills_missing_key(self) -> None:
        assert get_text_style({"other": TextStyle()}, "italic") is DEFAULT_TEXT_STYLES["italic"]

    def test_unknown_key(self) -> None:
        assert get_text_style(None, "dynamic-1234") is None

    def test_defaults_are_active(self) -> None:
        for style in DEFAULT_TEXT_STYLES.values():
            for section in style.design.values():
                assert section["isActive"] is True


# ---------------------------------------------------------------------------
# Style overrides
# ---------------------------------------------------------------------------


class TestTrackStyleOverrides:
    def test_unlinked_element_keeps_previous(self) -> None:
        previous = Element(id="a", classes="flex")
        updated = previous.with_patch({"classes": "grid"})
        assert track_style_overrides(previous, updated) is None

    def test_linked_element_records_divergence(self) -> None:
        previous = Element(id="a", classes="flex", style_id="card")
        updated = previous.with_patch({"classes": ["grid", "gap-4"], "design": {"layout": {"gap": "4"}}})
        result = track_style_overrides(previous, updated)
        assert result == StyleOverrides(design={"layout": {"gap": "4"}}, classes="grid gap-4")

    def test_unchanged_returns_same_object(self) -> None:
        overrides = StyleOverrides(design={}, classes="flex")
        previous = Element(id="a", classes="flex", style_id="card", style_overrides=overrides)
        assert track_style_overrides(previous, previous) is overrides
