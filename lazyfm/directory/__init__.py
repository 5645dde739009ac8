"""Directory domain model: entries, snapshots and the service seam.

This package contains non-UI primitives:
- the immutable ``Entry`` row type
- the ``DirectoryService`` protocol with local and in-memory backends
- ``DirectorySnapshot`` holding the listing for the current path
"""

from __future__ import annotations

from .entry import Entry
from .memory import InMemoryDirectoryService
from .service import DirectoryService, DirectoryServiceError, LocalDirectoryService, sort_directories_first
from .snapshot import DirectorySnapshot

__all__ = [
    "Entry",
    "DirectoryService",
    "DirectoryServiceError",
    "LocalDirectoryService",
    "InMemoryDirectoryService",
    "DirectorySnapshot",
    "sort_directories_first",
]
