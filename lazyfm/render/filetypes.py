"""Filename classification used to colour source files in the listing.

Pygments is loaded lazily on first use so startup stays fast; when it is
missing every file is treated as a plain file.
"""

from __future__ import annotations

from functools import lru_cache

_PYGMENTS_READY = False
_PYGMENTS_AVAILABLE = False
_PYGMENTS_FIND_LEXER_CLASS = None
_PYGMENTS_TEXT_LEXER = None


def _ensure_pygments_loaded() -> bool:
    global _PYGMENTS_READY
    global _PYGMENTS_AVAILABLE
    global _PYGMENTS_FIND_LEXER_CLASS
    global _PYGMENTS_TEXT_LEXER

    if _PYGMENTS_READY:
        return _PYGMENTS_AVAILABLE

    _PYGMENTS_READY = True
    try:
        from pygments.lexers import TextLexer, find_lexer_class_for_filename
    except ImportError:
        _PYGMENTS_AVAILABLE = False
        return False

    _PYGMENTS_FIND_LEXER_CLASS = find_lexer_class_for_filename
    _PYGMENTS_TEXT_LEXER = TextLexer
    _PYGMENTS_AVAILABLE = True
    return True


@lru_cache(maxsize=4096)
def is_source_file(name: str) -> bool:
    """Return whether Pygments knows a non-plain-text lexer for ``name``."""
    if not _ensure_pygments_loaded():
        return False
    try:
        assert _PYGMENTS_FIND_LEXER_CLASS is not None
        lexer_class = _PYGMENTS_FIND_LEXER_CLASS(name)
    except Exception:
        return False
    if lexer_class is None:
        return False
    return lexer_class is not _PYGMENTS_TEXT_LEXER


__all__ = ["is_source_file"]
