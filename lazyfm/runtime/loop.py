"""Main interactive event loop for the terminal UI.

One iteration: sync the viewport height with the terminal, repaint when
dirty, then block on exactly one key and hand it to the mode state machine.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable

from ..input import read_key
from ..modes import ModeStateMachine, Session
from ..render import RenderContext, render_frame, viewport_rows
from ..ui_theme import UITheme
from .terminal import TerminalController


def build_render_context(
    session: Session,
    machine: ModeStateMachine,
    width: int,
    height: int,
    theme: UITheme,
) -> RenderContext:
    """Snapshot session state into the renderer's input."""
    prompt = machine.prompt_text()
    uses_buffer = session.mode.uses_input_buffer
    return RenderContext(
        path=session.path,
        entries=session.snapshot.entries,
        position=session.cursor.position,
        scroll_offset=session.cursor.scroll_offset,
        width=width,
        height=height,
        selected=session.selection,
        is_executable=session.service.is_executable,
        prompt=prompt,
        input_text=session.buffer.text if uses_buffer else "",
        input_cursor=session.buffer.cursor if uses_buffer else 0,
        status_message=session.status_message,
        theme=theme,
    )


def run_main_loop(
    session: Session,
    machine: ModeStateMachine,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
    read: Callable[[int], str] = read_key,
    paint: Callable[[RenderContext], None] = render_frame,
) -> None:
    """Run until a quit key is handled or stdin reaches end of file."""
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            rows = viewport_rows(term.lines)
            if rows != session.viewport_height:
                session.viewport_height = rows
                if session.size:
                    session.cursor.keep_visible(rows)
                session.dirty = True

            if session.dirty:
                paint(build_render_context(session, machine, term.columns, term.lines, theme))
                session.dirty = False

            try:
                key = read(stdin_fd)
            except KeyboardInterrupt:
                continue
            if key == "":
                break
            if machine.handle_key(key):
                break


__all__ = ["build_render_context", "run_main_loop"]
