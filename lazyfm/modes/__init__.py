"""Modal browser core: session context, mode handlers and the state machine."""

from __future__ import annotations

from . import actions
from .machine import ModeHandler, ModeStateMachine
from .normal import NormalKeyHandler
from .prompt import (
    CONFIRM_KEYS,
    CreatePromptHandler,
    DeleteConfirmHandler,
    RenamePromptHandler,
    SearchPromptHandler,
)
from .state import Mode, Session, SessionHooks, Transition

__all__ = [
    "actions",
    "CONFIRM_KEYS",
    "CreatePromptHandler",
    "DeleteConfirmHandler",
    "Mode",
    "ModeHandler",
    "ModeStateMachine",
    "NormalKeyHandler",
    "RenamePromptHandler",
    "SearchPromptHandler",
    "Session",
    "SessionHooks",
    "Transition",
]
