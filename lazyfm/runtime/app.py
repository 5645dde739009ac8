"""Runtime wiring: build the session, its collaborators and run the loop."""

from __future__ import annotations

import sys
from functools import partial

from ..directory import DirectoryService, DirectorySnapshot, LocalDirectoryService
from ..modes import ModeStateMachine, Session, SessionHooks
from ..render import viewport_rows
from ..ui_theme import resolve_theme
from . import config
from .loop import run_main_loop
from .process import launch_editor, launch_shell
from .terminal import TerminalController


def build_session(
    path: str,
    service: DirectoryService,
    *,
    show_hidden: bool = False,
    hooks: SessionHooks | None = None,
    viewport_height: int = 20,
) -> Session:
    """Create the session for ``path`` with its first listing loaded."""
    snapshot = DirectorySnapshot(path=service.resolve_absolute(path), service=service, show_hidden=show_hidden)
    snapshot.refresh()
    return Session(
        snapshot=snapshot,
        hooks=hooks if hooks is not None else SessionHooks(),
        viewport_height=viewport_height,
    )


def run_browser(
    path: str,
    *,
    show_hidden: bool | None = None,
    theme_name: str | None = None,
    no_color: bool = False,
) -> None:
    """Launch the interactive browser on ``path`` until the user quits."""
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    hooks = SessionHooks(
        launch_shell=partial(launch_shell, suspend=terminal.suspended),
        launch_editor=partial(launch_editor, suspend=terminal.suspended),
        save_last_directory=config.save_last_directory,
        save_show_hidden=config.save_show_hidden,
    )
    session = build_session(
        path,
        LocalDirectoryService(),
        show_hidden=config.load_show_hidden() if show_hidden is None else show_hidden,
        hooks=hooks,
        viewport_height=viewport_rows(24),
    )
    theme = resolve_theme(theme_name or config.load_theme_name(), no_color=no_color)
    run_main_loop(session, ModeStateMachine(session), terminal, stdin_fd, theme)


__all__ = ["build_session", "run_browser"]
