"""Cross-directory selection of entries pending a bulk operation."""

from __future__ import annotations

from collections.abc import Iterator

from .directory import Entry


class SelectionSet:
    """Insertion-ordered set of entries keyed by ``(containing_path, name)``.

    Entries from any directory visited during the session can coexist; two
    entries sharing a name in different directories are independent members.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str], Entry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries.values()))

    def __contains__(self, entry: object) -> bool:
        return isinstance(entry, Entry) and entry.identity in self._entries

    def toggle(self, entry: Entry) -> bool:
        """Add ``entry`` if absent, else remove it. Return ``True`` when added."""
        key = entry.identity
        if key in self._entries:
            del self._entries[key]
            return False
        self._entries[key] = entry
        return True

    def clear(self) -> None:
        self._entries.clear()

    def drain(self) -> list[Entry]:
        """Return every member in insertion order and empty the set."""
        entries = list(self._entries.values())
        self._entries.clear()
        return entries


__all__ = ["SelectionSet"]
