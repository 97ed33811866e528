"""In-place text editing sessions."""

from designsync.editing.base import TextEditingSession
from designsync.editing.session import StyleMark, TextEditor

__all__ = ["StyleMark", "TextEditingSession", "TextEditor"]
