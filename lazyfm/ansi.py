"""Display-width measurement and clipping for plain entry names.

Keeps rows aligned when names contain wide or combining characters.
"""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two and control characters are drawn as one replacement cell.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def printable(text: str) -> str:
    """Replace control characters so names cannot inject escape sequences."""
    return "".join("?" if not ch.isprintable() else ch for ch in text)


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


__all__ = ["char_display_width", "clip_text", "display_width", "printable"]
