"""Directory service seam plus the local filesystem implementation.

The browser core never touches the filesystem directly. Every listing and
mutation goes through a ``DirectoryService`` so tests can swap in a fake.
"""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path
from typing import Protocol

from .entry import Entry


class DirectoryServiceError(OSError):
    """Raised when a listing or mutation cannot be carried out."""


class DirectoryService(Protocol):
    """Filesystem operations consumed by the browser core."""

    def list(self, path: str, include_hidden: bool) -> list[Entry]: ...

    def resolve_absolute(self, path: str) -> str: ...

    def rename(self, path: str, old_name: str, new_name: str) -> None: ...

    def delete(self, path: str, name: str) -> None: ...

    def create_file(self, path: str, name: str) -> None: ...

    def create_directory(self, path: str, name: str) -> None: ...

    def move(self, entry: Entry, destination_path: str) -> None: ...

    def copy(self, entry: Entry, destination_path: str) -> None: ...

    def is_executable(self, entry: Entry) -> bool: ...


def sort_directories_first(entries: list[Entry]) -> list[Entry]:
    """Stable sort placing directories ahead of files, keeping listing order."""
    return sorted(entries, key=lambda entry: not entry.is_directory)


class LocalDirectoryService:
    """``DirectoryService`` backed by ``os``/``shutil`` on the local machine."""

    def list(self, path: str, include_hidden: bool) -> list[Entry]:
        """List children of ``path`` directories-first, then by name."""
        entries: list[Entry] = []
        try:
            with os.scandir(path) as children:
                for child in children:
                    try:
                        is_dir = child.is_dir()
                    except OSError:
                        is_dir = False
                    entry = Entry(name=child.name, containing_path=path, is_directory=is_dir)
                    if include_hidden or not entry.is_hidden:
                        entries.append(entry)
        except OSError as exc:
            raise DirectoryServiceError(exc.errno, f"cannot list {path}: {exc.strerror}") from exc

        entries.sort(key=lambda item: item.name)
        return sort_directories_first(entries)

    def resolve_absolute(self, path: str) -> str:
        try:
            return str(Path(path).resolve(strict=True))
        except OSError as exc:
            raise DirectoryServiceError(exc.errno, f"cannot resolve {path}: {exc.strerror}") from exc

    def rename(self, path: str, old_name: str, new_name: str) -> None:
        os.rename(os.path.join(path, old_name), os.path.join(path, new_name))

    def delete(self, path: str, name: str) -> None:
        target = os.path.join(path, name)
        if os.path.isdir(target) and not os.path.islink(target):
            shutil.rmtree(target)
        else:
            os.remove(target)

    def create_file(self, path: str, name: str) -> None:
        Path(path, name).touch()

    def create_directory(self, path: str, name: str) -> None:
        Path(path, name).mkdir()

    def move(self, entry: Entry, destination_path: str) -> None:
        shutil.move(entry.full_path, os.path.join(destination_path, entry.name))

    def copy(self, entry: Entry, destination_path: str) -> None:
        target = os.path.join(destination_path, entry.name)
        if entry.is_directory:
            shutil.copytree(entry.full_path, target, symlinks=True)
        else:
            shutil.copy2(entry.full_path, target)

    def is_executable(self, entry: Entry) -> bool:
        """Return whether a non-directory entry has its owner-execute bit set."""
        if entry.is_directory:
            return False
        try:
            mode = os.stat(entry.full_path).st_mode
        except OSError:
            return False
        return bool(mode & stat.S_IXUSR)


__all__ = [
    "DirectoryService",
    "DirectoryServiceError",
    "LocalDirectoryService",
    "sort_directories_first",
]
