"""Rendering engine for the single-pane directory listing.

Defines render context data and writes fully composed ANSI frames.
Frame composition is pure so it can be asserted in tests without a tty.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

from ..ansi import clip_text, display_width, printable
from ..directory import Entry
from ..selection import SelectionSet
from ..ui_theme import DEFAULT_THEME, UITheme
from .filetypes import is_source_file

HEADER_ROWS = 2
FOOTER_ROWS = 1
EMPTY_PLACEHOLDER = " empty "


def viewport_rows(terminal_lines: int) -> int:
    """Return how many listing rows fit between header and prompt line."""
    return max(1, terminal_lines - HEADER_ROWS - FOOTER_ROWS)


@dataclass
class RenderContext:
    path: str
    entries: list[Entry]
    position: int
    scroll_offset: int
    width: int
    height: int
    selected: SelectionSet = field(default_factory=SelectionSet)
    is_executable: Callable[[Entry], bool] = lambda _entry: False
    prompt: str | None = None
    input_text: str = ""
    input_cursor: int = 0
    status_message: str = ""
    theme: UITheme = DEFAULT_THEME


def format_entry_label(entry: Entry, executable: bool) -> str:
    suffix = "/" if entry.is_directory else ("*" if executable else "")
    return f"{printable(entry.name)}{suffix}"


def _entry_color(entry: Entry, executable: bool, theme: UITheme) -> str:
    if entry.is_directory:
        return theme.directory
    if executable:
        return theme.executable
    if is_source_file(entry.name):
        return theme.file_source
    return theme.file_default


def _counter(context: RenderContext) -> str:
    shown = context.position + 1 if context.entries else 0
    return f" {shown}:{len(context.entries)} [{len(context.selected)}] "


def _prompt_line(context: RenderContext, max_cols: int) -> str:
    """Render prompt text with the input cursor cell highlighted."""
    theme = context.theme
    prompt = context.prompt or ""
    text = printable(context.input_text)
    cursor = max(0, min(context.input_cursor, len(text)))
    before = text[:cursor]
    under = text[cursor] if cursor < len(text) else " "
    after = text[cursor + 1 :]
    head = clip_text(prompt + before, max_cols)
    if display_width(head) >= max_cols:
        return f"{theme.prompt}{head}{theme.reset}"
    remaining = max_cols - display_width(head) - 1
    return (
        f"{theme.prompt}{head}{theme.reset}"
        f"{theme.prompt_cursor}{under}{theme.reset}"
        f"{theme.prompt}{clip_text(after, remaining)}{theme.reset}"
    )


def build_frame(context: RenderContext) -> str:
    """Compose one full-screen ANSI frame for ``context``."""
    theme = context.theme
    width = max(1, context.width)
    rows = viewport_rows(context.height)
    out: list[str] = ["\033[H\033[J"]

    header = clip_text(f"{printable(context.path)} =>", width)
    out.append(f"\033[1;1H{theme.header}{header}{theme.reset}")

    if not context.entries:
        out.append(f"\033[{HEADER_ROWS + 1};1H{theme.empty_placeholder}{EMPTY_PLACEHOLDER}{theme.reset}")
    else:
        start = max(0, context.scroll_offset)
        for screen_row, idx in enumerate(range(start, min(len(context.entries), start + rows))):
            entry = context.entries[idx]
            marker = "+" if entry in context.selected else " "
            executable = not entry.is_directory and context.is_executable(entry)
            label = clip_text(format_entry_label(entry, executable), width - 1)
            color = _entry_color(entry, executable, theme)
            if idx == context.position:
                color = f"{color}{theme.reverse}"
            out.append(f"\033[{HEADER_ROWS + 1 + screen_row};1H")
            out.append(f"{theme.selection_marker}{marker}{theme.reset}{color}{label}{theme.reset}")

    counter = _counter(context)
    left_cols = max(0, width - display_width(counter))
    out.append(f"\033[{context.height};1H")
    if context.prompt is not None:
        out.append(_prompt_line(context, left_cols))
    elif context.status_message:
        status = clip_text(printable(context.status_message), left_cols)
        out.append(f"{theme.status}{status}{theme.reset}")
    out.append(f"\033[{context.height};{left_cols + 1}H{theme.status}{clip_text(counter, width)}{theme.reset}")
    return "".join(out)


def render_frame(context: RenderContext) -> None:
    os.write(sys.stdout.fileno(), build_frame(context).encode("utf-8", errors="replace"))


__all__ = [
    "EMPTY_PLACEHOLDER",
    "FOOTER_ROWS",
    "HEADER_ROWS",
    "RenderContext",
    "build_frame",
    "format_entry_label",
    "render_frame",
    "viewport_rows",
]
