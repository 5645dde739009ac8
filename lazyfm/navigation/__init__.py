"""Navigation primitives: cursor/viewport model and path stepping helpers."""

from __future__ import annotations

from .cursor import SCROLL_MARGIN, Cursor
from .paths import SEPARATOR, child_path, is_root, split_parent

__all__ = [
    "Cursor",
    "SCROLL_MARGIN",
    "SEPARATOR",
    "child_path",
    "is_root",
    "split_parent",
]
