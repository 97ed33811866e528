"""designsync: keeps an element's design object and its utility classes in agreement."""

__version__ = "0.1.0"

from designsync.config import SyncConfig
from designsync.model import Breakpoint, Element, TextStyle, UIState
from designsync.sync import DesignSync

__all__ = [
    "__version__",
    "Breakpoint",
    "DesignSync",
    "Element",
    "SyncConfig",
    "TextStyle",
    "UIState",
]
