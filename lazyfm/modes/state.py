"""Session context shared by every mode handler."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from ..directory import DirectoryService, DirectorySnapshot, Entry
from ..input_buffer import InputBuffer
from ..navigation import Cursor
from ..selection import SelectionSet


class Mode(Enum):
    """Interpretation context for the next keystroke."""

    NORMAL = "normal"
    SEARCH = "search"
    RENAME = "rename"
    CREATE = "create"
    DELETE = "delete"

    @property
    def uses_input_buffer(self) -> bool:
        return self in {Mode.SEARCH, Mode.RENAME, Mode.CREATE}


@dataclass(frozen=True)
class Transition:
    """Outcome of one key: the mode to continue in and whether to quit."""

    mode: Mode
    quit: bool = False


def _noop_launch(_path: str) -> str | None:
    return None


@dataclass(frozen=True)
class SessionHooks:
    """Out-of-core collaborators invoked by normal-mode actions."""

    launch_shell: Callable[[str], str | None] = _noop_launch
    launch_editor: Callable[[str], str | None] = _noop_launch
    save_last_directory: Callable[[str], None] = lambda _path: None
    save_show_hidden: Callable[[bool], None] = lambda _show_hidden: None


@dataclass
class Session:
    """All mutable browser state, owned by the single control loop."""

    snapshot: DirectorySnapshot
    cursor: Cursor = field(default_factory=Cursor)
    selection: SelectionSet = field(default_factory=SelectionSet)
    buffer: InputBuffer = field(default_factory=InputBuffer)
    mode: Mode = Mode.NORMAL
    last_mode: Mode = Mode.NORMAL
    last_query: str = ""
    status_message: str = ""
    viewport_height: int = 20
    hooks: SessionHooks = field(default_factory=SessionHooks)
    dirty: bool = True

    @property
    def service(self) -> DirectoryService:
        return self.snapshot.service

    @property
    def path(self) -> str:
        return self.snapshot.path

    @property
    def size(self) -> int:
        return len(self.snapshot)

    def current_entry(self) -> Entry | None:
        if not 0 <= self.cursor.position < self.size:
            return None
        return self.snapshot[self.cursor.position]


__all__ = ["Mode", "Session", "SessionHooks", "Transition"]
