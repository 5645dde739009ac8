"""Session operations bound to keys by the mode handlers.

Filesystem mutations are best-effort: any ``OSError`` from the directory
service is logged and dropped, and the listing is refreshed regardless so the
screen reflects whatever actually happened on disk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..directory import Entry
from ..navigation import child_path, is_root, split_parent
from ..search import BACKWARD, FORWARD, find_entry
from .state import Mode, Session

logger = logging.getLogger(__name__)


def _attempt(description: str, operation: Callable[..., object], *args: object) -> bool:
    """Run one service mutation, swallowing and logging failures."""
    try:
        operation(*args)
    except OSError as exc:
        logger.debug("%s failed: %s", description, exc)
        return False
    return True


def move_up(session: Session) -> None:
    session.cursor.move_up(session.size, session.viewport_height)


def move_down(session: Session) -> None:
    session.cursor.move_down(session.size, session.viewport_height)


def go_home(session: Session) -> None:
    session.cursor.home(session.size, session.viewport_height)


def go_end(session: Session) -> None:
    session.cursor.end(session.size, session.viewport_height)


def refresh(session: Session) -> None:
    """Relist the current directory, pulling the cursor back if rows vanished."""
    session.snapshot.refresh()
    session.cursor.clamp_after_shrink(session.size, session.viewport_height)


def toggle_hidden(session: Session) -> None:
    session.cursor.reset()
    session.snapshot.toggle_hidden()
    session.hooks.save_show_hidden(session.snapshot.show_hidden)


def descend(session: Session) -> None:
    """Enter the directory under the cursor; files are left alone."""
    entry = session.current_entry()
    if entry is None or not entry.is_directory:
        return
    target = child_path(session.path, entry.name)
    try:
        resolved = session.service.resolve_absolute(target)
    except OSError as exc:
        logger.debug("cannot enter %s: %s", target, exc)
        return
    session.snapshot.change_path(resolved)
    session.cursor.reset()


def ascend(session: Session) -> None:
    """Go to the parent directory and re-select the directory just left."""
    if is_root(session.path):
        return
    parent, departed = split_parent(session.path)
    try:
        resolved = session.service.resolve_absolute(parent)
    except OSError as exc:
        logger.debug("cannot enter %s: %s", parent, exc)
        return
    session.snapshot.change_path(resolved)
    session.cursor.reset()
    idx = session.snapshot.index_of(departed)
    if idx is not None:
        session.cursor.set_position(idx, session.size, session.viewport_height)


def toggle_selection(session: Session) -> None:
    """Toggle the entry under the cursor, then step down unless on the last row."""
    entry = session.current_entry()
    if entry is None:
        return
    session.selection.toggle(entry)
    if session.cursor.position + 1 < session.size:
        move_down(session)


def clear_selection(session: Session) -> None:
    session.selection.clear()


def _bulk_transfer(session: Session, verb: str, operation: Callable[[Entry, str], None]) -> None:
    if not session.selection:
        return
    destination = session.path
    for entry in session.selection.drain():
        _attempt(f"{verb} {entry.full_path} -> {destination}", operation, entry, destination)
    refresh(session)


def move_selection_here(session: Session) -> None:
    _bulk_transfer(session, "move", session.service.move)


def copy_selection_here(session: Session) -> None:
    _bulk_transfer(session, "copy", session.service.copy)


def run_search(session: Session, query: str, direction: int = FORWARD) -> bool:
    """Jump to the next match for ``query``; report a miss in the status line."""
    found = find_entry(session.snapshot.entries, query, direction, session.cursor.position)
    if found is None:
        if query:
            session.status_message = f"couldn't find {query}"
        return False
    session.cursor.set_position(found, session.size, session.viewport_height)
    session.status_message = ""
    return True


def repeat_search(session: Session, direction: int) -> bool:
    """Repeat the last committed search, only if searching was the last mode."""
    if session.last_mode is not Mode.SEARCH:
        return False
    return run_search(session, session.last_query, direction)


def repeat_search_forward(session: Session) -> bool:
    return repeat_search(session, FORWARD)


def repeat_search_backward(session: Session) -> bool:
    return repeat_search(session, BACKWARD)


def commit_rename(session: Session, new_name: str) -> None:
    """Rename the entry under the cursor and restore the old cursor verbatim.

    The restored cursor is not re-validated against the refreshed list.
    """
    entry = session.current_entry()
    saved = session.cursor.snapshot()
    if entry is not None:
        _attempt(f"rename {entry.full_path} -> {new_name}", session.service.rename, session.path, entry.name, new_name)
    session.snapshot.refresh()
    session.cursor.restore(saved)


def commit_create(session: Session, text: str) -> None:
    """Create a directory when ``text`` ends with ``/``, else an empty file."""
    saved = session.cursor.snapshot()
    if text.endswith("/"):
        name = text.rstrip("/")
        if name:
            _attempt(f"mkdir {name}", session.service.create_directory, session.path, name)
    else:
        _attempt(f"touch {text}", session.service.create_file, session.path, text)
    session.snapshot.refresh()
    session.cursor.restore(saved)


def commit_delete(session: Session) -> None:
    """Delete the whole selection, or the entry under the cursor when none."""
    saved = session.cursor.snapshot()
    if session.selection:
        for entry in session.selection.drain():
            _attempt(f"delete {entry.full_path}", session.service.delete, entry.containing_path, entry.name)
    else:
        entry = session.current_entry()
        if entry is not None:
            _attempt(f"delete {entry.full_path}", session.service.delete, session.path, entry.name)
    session.snapshot.refresh()
    session.cursor.restore(saved)
    session.cursor.clamp_after_shrink(session.size, session.viewport_height)


def describe_current(session: Session) -> None:
    """Put ``dir``/``exec``/``file`` plus the full path in the status line."""
    entry = session.current_entry()
    if entry is None:
        return
    if entry.is_directory:
        kind = "dir"
    elif session.service.is_executable(entry):
        kind = "exec"
    else:
        kind = "file"
    session.status_message = f"{kind} {entry.full_path}"


def open_shell(session: Session) -> None:
    error = session.hooks.launch_shell(session.path)
    if error:
        session.status_message = error
    refresh(session)


def edit_current(session: Session) -> None:
    entry = session.current_entry()
    if entry is None:
        return
    error = session.hooks.launch_editor(entry.full_path)
    if error:
        session.status_message = error
    refresh(session)


def quit_session(session: Session) -> None:
    session.hooks.save_last_directory(session.path)


__all__ = [
    "ascend",
    "clear_selection",
    "commit_create",
    "commit_delete",
    "commit_rename",
    "copy_selection_here",
    "descend",
    "describe_current",
    "edit_current",
    "go_end",
    "go_home",
    "move_down",
    "move_selection_here",
    "move_up",
    "open_shell",
    "quit_session",
    "refresh",
    "repeat_search",
    "repeat_search_backward",
    "repeat_search_forward",
    "run_search",
    "toggle_hidden",
    "toggle_selection",
]
