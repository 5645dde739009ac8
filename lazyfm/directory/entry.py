"""Domain datatype for one listed filesystem item."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """One file or directory row observed in a directory listing.

    ``name`` never carries a trailing separator; renderers decorate
    directories themselves.
    """

    name: str
    containing_path: str
    is_directory: bool = False

    @property
    def identity(self) -> tuple[str, str]:
        """Return the ``(containing_path, name)`` key used for comparisons."""
        return (self.containing_path, self.name)

    @property
    def full_path(self) -> str:
        """Join containing path and name without doubling the root separator."""
        if self.containing_path.endswith("/"):
            return f"{self.containing_path}{self.name}"
        return f"{self.containing_path}/{self.name}"

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


__all__ = ["Entry"]
