"""Wrap-around incremental search over directory entry names.

Matching is case-sensitive substring containment on ``Entry.name``. The
first hit in scan order wins; there is no ranking. Searching never touches
the cursor: callers move it only when a match comes back.
"""

from __future__ import annotations

from collections.abc import Sequence

from .directory import Entry

FORWARD = 1
BACKWARD = -1


def name_matches(name: str, query: str) -> bool:
    """Return whether ``query`` occurs in ``name``; empty queries never match."""
    if not query or len(query) > len(name):
        return False
    return query in name


def _scan(entries: Sequence[Entry], query: str, start: int, stop: int) -> int | None:
    """Scan inclusively from ``start`` to ``stop`` in whichever direction they imply."""
    step = 1 if start <= stop else -1
    for idx in range(start, stop + step, step):
        if 0 <= idx < len(entries) and name_matches(entries[idx].name, query):
            return idx
    return None


def find_entry(
    entries: Sequence[Entry],
    query: str,
    direction: int = FORWARD,
    start: int = 0,
) -> int | None:
    """Return the index of the next entry whose name contains ``query``.

    Forward search scans ``start+1 .. N-1`` and then wraps to ``0 .. start``
    when nothing was found or ``start`` was already the last row. Backward
    search mirrors this: ``start-1 .. 0`` then ``N-1 .. start``.
    """
    size = len(entries)
    if not query or size == 0:
        return None

    if direction >= 0:
        at_edge = start + 1 >= size
        found = None if at_edge else _scan(entries, query, start + 1, size - 1)
        if found is None or at_edge:
            found = _scan(entries, query, 0, start)
        return found

    at_edge = start - 1 < 0
    found = None if at_edge else _scan(entries, query, start - 1, 0)
    if found is None or at_edge:
        found = _scan(entries, query, size - 1, start)
    return found


__all__ = ["BACKWARD", "FORWARD", "find_entry", "name_matches"]
