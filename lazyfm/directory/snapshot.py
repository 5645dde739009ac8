"""Point-in-time listing of the directory currently being browsed."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .entry import Entry
from .service import DirectoryService, sort_directories_first

logger = logging.getLogger(__name__)


@dataclass
class DirectorySnapshot:
    """Current path plus its entries, refreshed wholesale from the service.

    ``entries`` is replaced atomically on every refresh; a listing failure
    leaves an empty list rather than stale rows.
    """

    path: str
    service: DirectoryService
    show_hidden: bool = False
    entries: list[Entry] = field(default_factory=list)

    def refresh(self) -> None:
        try:
            entries = self.service.list(self.path, self.show_hidden)
        except OSError as exc:
            logger.debug("listing %s failed: %s", self.path, exc)
            entries = []
        self.entries = sort_directories_first(entries)

    def toggle_hidden(self) -> None:
        self.show_hidden = not self.show_hidden
        self.refresh()

    def change_path(self, path: str) -> None:
        """Point the snapshot at ``path`` and relist it."""
        logger.debug("entering %s", path)
        self.path = path
        self.refresh()

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def index_of(self, name: str) -> int | None:
        """Return the first index whose entry is called ``name``."""
        for idx, entry in enumerate(self.entries):
            if entry.name == name:
                return idx
        return None


__all__ = ["DirectorySnapshot"]
