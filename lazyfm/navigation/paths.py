"""String helpers for stepping into and out of directories.

Paths are plain absolute strings using ``/``; no trailing separator except
for the root itself.
"""

from __future__ import annotations

SEPARATOR = "/"


def is_root(path: str) -> bool:
    return len(path) <= 1


def child_path(path: str, name: str) -> str:
    """Append ``name`` to ``path``, adding a separator unless ``path`` is root."""
    if is_root(path):
        return f"{path}{name}" if path else f"{SEPARATOR}{name}"
    return f"{path}{SEPARATOR}{name}"


def split_parent(path: str) -> tuple[str, str]:
    """Return ``(parent, departed_name)`` by truncating at the last separator.

    ``/usr`` becomes ``("/", "usr")``; the root has no parent and returns
    ``(path, "")``.
    """
    if is_root(path):
        return path, ""
    trimmed = path.rstrip(SEPARATOR) or SEPARATOR
    cut = trimmed.rfind(SEPARATOR)
    if cut < 0:
        return trimmed, ""
    parent = trimmed[:cut] or SEPARATOR
    return parent, trimmed[cut + 1 :]


__all__ = ["SEPARATOR", "child_path", "is_root", "split_parent"]
