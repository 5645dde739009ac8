"""Top-level modal controller: one key in, one transition out."""

from __future__ import annotations

from typing import Protocol

from .normal import NormalKeyHandler
from .prompt import (
    PROMPT_LABELS,
    CreatePromptHandler,
    DeleteConfirmHandler,
    RenamePromptHandler,
    SearchPromptHandler,
)
from .state import Mode, Session, Transition


class ModeHandler(Protocol):
    def handle(self, key: str) -> Transition: ...


class ModeStateMachine:
    """Dispatch key tokens to the handler for the session's current mode.

    Every mode other than ``NORMAL`` is entered from ``NORMAL`` and returns to
    it after exactly one completed or cancelled interaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.delete_handler = DeleteConfirmHandler(session)
        self.handlers: dict[Mode, ModeHandler] = {
            Mode.NORMAL: NormalKeyHandler(session),
            Mode.SEARCH: SearchPromptHandler(session),
            Mode.RENAME: RenamePromptHandler(session),
            Mode.CREATE: CreatePromptHandler(session),
            Mode.DELETE: self.delete_handler,
        }

    @property
    def mode(self) -> Mode:
        return self.session.mode

    def transition(self, key: str) -> Transition:
        """Apply ``key`` in the current mode and record the resulting mode."""
        result = self.handlers[self.session.mode].handle(key)
        self.session.mode = result.mode
        self.session.dirty = True
        return result

    def handle_key(self, key: str) -> bool:
        """Handle one key token and return ``True`` when the app should quit."""
        return self.transition(key).quit

    def prompt_text(self) -> str | None:
        """Return the bottom-line prompt for the current mode, if any."""
        mode = self.session.mode
        if mode is Mode.DELETE:
            return self.delete_handler.prompt()
        return PROMPT_LABELS.get(mode)


__all__ = ["ModeHandler", "ModeStateMachine"]
