"""Default text styles applied when an element has not customized its own."""

from __future__ import annotations

from designsync.model.element import TextStyle

DEFAULT_TEXT_STYLES: dict[str, TextStyle] = {
    "bold": TextStyle(
        design={"typography": {"fontWeight": "700", "isActive": True}},
        classes="font-bold",
    ),
    "italic": TextStyle(
        design={"typography": {"fontStyle": "italic", "isActive": True}},
        classes="italic",
    ),
    "underline": TextStyle(
        design={"typography": {"textDecoration": "underline", "isActive": True}},
        classes="underline",
    ),
    "strikethrough": TextStyle(
        design={"typography": {"textDecoration": "line-through", "isActive": True}},
        classes="line-through",
    ),
    "code": TextStyle(
        design={
            "typography": {"fontFamily": "mono", "fontSize": "0.875rem", "isActive": True},
            "backgrounds": {"backgroundColor": "gray-100", "isActive": True},
        },
        classes="font-mono text-sm bg-gray-100",
    ),
    "link": TextStyle(
        design={
            "typography": {"color": "blue-600", "textDecoration": "underline", "isActive": True},
        },
        classes="text-blue-600 underline",
    ),
}


def get_text_style(text_styles: dict[str, TextStyle] | None, key: str) -> TextStyle | None:
    """Return the element's style for *key*, falling back to the default table."""
    if text_styles and key in text_styles:
        return text_styles[key]
    return DEFAULT_TEXT_STYLES.get(key)
