from designsync.styles.overrides import track_style_overrides
from designsync.styles.text_styles import DEFAULT_TEXT_STYLES, get_text_style

__all__ = ["DEFAULT_TEXT_STYLES", "get_text_style", "track_style_overrides"]
