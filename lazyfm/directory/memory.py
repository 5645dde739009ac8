"""In-memory ``DirectoryService`` used for deterministic browser tests."""

from __future__ import annotations

import posixpath

from .entry import Entry
from .service import DirectoryServiceError, sort_directories_first


class InMemoryDirectoryService:
    """Dictionary-backed directory tree.

    ``tree`` maps absolute directory paths to ``{name: is_directory}`` in
    listing order. Operations named in ``failing`` raise
    ``DirectoryServiceError`` without mutating anything; every call is
    appended to ``calls`` for assertions.
    """

    def __init__(self, tree: dict[str, dict[str, bool]] | None = None) -> None:
        self.tree: dict[str, dict[str, bool]] = {"/": {}}
        self.executables: set[str] = set()
        self.failing: set[str] = set()
        self.calls: list[tuple] = []
        for path, children in (tree or {}).items():
            self.add_directory(path)
            for name, is_dir in children.items():
                self._add_child(path, name, is_dir)

    def add_directory(self, path: str) -> None:
        """Create ``path`` and all its ancestors."""
        if path in self.tree:
            return
        parent = posixpath.dirname(path)
        self.add_directory(parent)
        self.tree[parent].setdefault(posixpath.basename(path), True)
        self.tree[path] = {}

    def _add_child(self, path: str, name: str, is_dir: bool) -> None:
        self.tree[path][name] = is_dir
        if is_dir:
            self.tree.setdefault(posixpath.join(path, name), {})

    def _check(self, operation: str, *args: object) -> None:
        self.calls.append((operation, *args))
        if operation in self.failing:
            raise DirectoryServiceError(f"{operation} failed")

    def _children(self, path: str) -> dict[str, bool]:
        children = self.tree.get(path)
        if children is None:
            raise DirectoryServiceError(f"no such directory: {path}")
        return children

    def _remove_subtree(self, path: str) -> dict[str, dict[str, bool]]:
        removed = {key: value for key, value in self.tree.items() if key == path or key.startswith(path + "/")}
        for key in removed:
            del self.tree[key]
        return removed

    def list(self, path: str, include_hidden: bool) -> list[Entry]:
        self._check("list", path)
        entries = [
            Entry(name=name, containing_path=path, is_directory=is_dir)
            for name, is_dir in self._children(path).items()
        ]
        entries = [entry for entry in entries if include_hidden or not entry.is_hidden]
        return sort_directories_first(entries)

    def resolve_absolute(self, path: str) -> str:
        self._check("resolve_absolute", path)
        resolved = posixpath.normpath(path) if path.startswith("/") else posixpath.normpath("/" + path)
        if resolved.startswith("//"):
            resolved = "/" + resolved.lstrip("/")
        if resolved not in self.tree:
            raise DirectoryServiceError(f"no such directory: {path}")
        return resolved

    def rename(self, path: str, old_name: str, new_name: str) -> None:
        self._check("rename", path, old_name, new_name)
        children = self._children(path)
        if old_name not in children:
            raise DirectoryServiceError(f"no such entry: {old_name}")
        is_dir = children.pop(old_name)
        children[new_name] = is_dir
        if is_dir:
            old_root = posixpath.join(path, old_name)
            new_root = posixpath.join(path, new_name)
            for key, value in self._remove_subtree(old_root).items():
                self.tree[new_root + key[len(old_root):]] = value

    def delete(self, path: str, name: str) -> None:
        self._check("delete", path, name)
        children = self._children(path)
        if name not in children:
            raise DirectoryServiceError(f"no such entry: {name}")
        if children.pop(name):
            self._remove_subtree(posixpath.join(path, name))

    def create_file(self, path: str, name: str) -> None:
        self._check("create_file", path, name)
        self._children(path).setdefault(name, False)

    def create_directory(self, path: str, name: str) -> None:
        self._check("create_directory", path, name)
        children = self._children(path)
        if name in children:
            raise DirectoryServiceError(f"already exists: {name}")
        self._add_child(path, name, True)

    def move(self, entry: Entry, destination_path: str) -> None:
        self._check("move", entry, destination_path)
        source = self._children(entry.containing_path)
        if entry.name not in source:
            raise DirectoryServiceError(f"no such entry: {entry.name}")
        target = self._children(destination_path)
        is_dir = source.pop(entry.name)
        target[entry.name] = is_dir
        if is_dir:
            old_root = entry.full_path
            new_root = posixpath.join(destination_path, entry.name)
            for key, value in self._remove_subtree(old_root).items():
                self.tree[new_root + key[len(old_root):]] = value

    def copy(self, entry: Entry, destination_path: str) -> None:
        self._check("copy", entry, destination_path)
        source = self._children(entry.containing_path)
        if entry.name not in source:
            raise DirectoryServiceError(f"no such entry: {entry.name}")
        self._children(destination_path)[entry.name] = source[entry.name]
        if source[entry.name]:
            old_root = entry.full_path
            new_root = posixpath.join(destination_path, entry.name)
            copied = {key: dict(value) for key, value in self.tree.items() if key == old_root or key.startswith(old_root + "/")}
            for key, value in copied.items():
                self.tree[new_root + key[len(old_root):]] = value

    def is_executable(self, entry: Entry) -> bool:
        return entry.full_path in self.executables


__all__ = ["InMemoryDirectoryService"]
