"""Prompt-mode handlers: search, rename, create and delete confirmation.

Search, rename and create share one line-editing key table over the session
input buffer; ``ENTER`` commits and ``CTRL_C`` cancels. Delete mode consumes
exactly one key as a yes/no answer.
"""

from __future__ import annotations

from ..input import KeyBinding, KeyBindingTable
from . import actions
from .state import Mode, Session, Transition

CONFIRM_KEYS = frozenset({"y", "Y", "d", "D", "ENTER"})

PROMPT_LABELS: dict[Mode, str] = {
    Mode.SEARCH: "search: ",
    Mode.RENAME: "rename: ",
    Mode.CREATE: "create: ",
}


def line_editing_table(session: Session) -> KeyBindingTable:
    """Build the buffer-editing bindings shared by every text prompt."""
    buffer = session.buffer
    return KeyBindingTable(
        (
            KeyBinding(("CTRL_X",), buffer.reset),
            KeyBinding(("DELETE",), buffer.delete),
            KeyBinding(("BACKSPACE",), buffer.backspace),
            KeyBinding(("HOME", "UP", "CTRL_A"), buffer.move_home),
            KeyBinding(("END", "DOWN", "CTRL_E"), buffer.move_end),
            KeyBinding(("LEFT",), buffer.move_left),
            KeyBinding(("RIGHT",), buffer.move_right),
        )
    )


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character token."""
    return len(key) == 1 and key.isprintable()


class TextPromptHandler:
    """Line editor for one prompt mode with a mode-specific commit step."""

    def __init__(self, session: Session, mode: Mode) -> None:
        self.session = session
        self.mode = mode
        self.editing = line_editing_table(session)

    def handle(self, key: str) -> Transition:
        if key == "CTRL_C":
            return Transition(Mode.NORMAL)
        if key == "ENTER":
            self.commit(self.session.buffer.text)
            return Transition(Mode.NORMAL)
        if self.editing.dispatch(key) is None and is_text_key(key):
            self.session.buffer.insert(key)
        return Transition(self.mode)

    def commit(self, text: str) -> None:
        raise NotImplementedError


class SearchPromptHandler(TextPromptHandler):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Mode.SEARCH)

    def commit(self, text: str) -> None:
        self.session.last_mode = Mode.SEARCH
        self.session.last_query = text
        actions.run_search(self.session, text)


class RenamePromptHandler(TextPromptHandler):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Mode.RENAME)

    def commit(self, text: str) -> None:
        if not text:
            return
        self.session.last_mode = Mode.RENAME
        actions.commit_rename(self.session, text)


class CreatePromptHandler(TextPromptHandler):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Mode.CREATE)

    def commit(self, text: str) -> None:
        if not text:
            return
        self.session.last_mode = Mode.CREATE
        actions.commit_create(self.session, text)


class DeleteConfirmHandler:
    """Consume one key: confirm keys delete, anything else cancels."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def prompt(self) -> str:
        if self.session.selection:
            return "delete selection? [y/n] "
        entry = self.session.current_entry()
        if entry is None:
            return "nothing to delete "
        return f"delete {entry.name}? [y/n] "

    def handle(self, key: str) -> Transition:
        self.session.last_mode = Mode.DELETE
        if key in CONFIRM_KEYS:
            actions.commit_delete(self.session)
        return Transition(Mode.NORMAL)


__all__ = [
    "CONFIRM_KEYS",
    "PROMPT_LABELS",
    "CreatePromptHandler",
    "DeleteConfirmHandler",
    "RenamePromptHandler",
    "SearchPromptHandler",
    "TextPromptHandler",
    "is_text_key",
    "line_editing_table",
]
