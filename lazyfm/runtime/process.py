"""Interactive child processes: ``$EDITOR`` on a file, ``$SHELL`` in a directory.

Both run while the TUI is suspended and return an error message string
instead of raising, for UI-friendly handling.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from collections.abc import Callable
from contextlib import AbstractContextManager

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "/bin/sh"


def _command_from_env(variable: str, fallback: str | None = None) -> list[str] | str:
    """Return argv from ``$variable`` or an error message when unusable."""
    raw = os.environ.get(variable, "").strip() or (fallback or "")
    if not raw:
        return f"Cannot run: ${variable} is not set."
    try:
        cmd = shlex.split(raw)
    except ValueError as exc:
        return f"Cannot run: ${variable} is malformed ({exc})."
    if not cmd:
        return f"Cannot run: ${variable} is empty."
    return cmd


def run_interactive(
    cmd: list[str],
    cwd: str,
    suspend: Callable[[], AbstractContextManager[object]],
) -> str | None:
    """Run ``cmd`` in ``cwd`` with the terminal handed back to the child."""
    logger.debug("running %s in %s", cmd, cwd)
    with suspend():
        try:
            subprocess.run(cmd, cwd=cwd, check=False)
        except OSError as exc:
            return f"Failed to launch {cmd[0]}: {exc}"
    return None


def launch_editor(
    target: str,
    suspend: Callable[[], AbstractContextManager[object]],
) -> str | None:
    cmd = _command_from_env("EDITOR")
    if isinstance(cmd, str):
        return cmd
    return run_interactive([*cmd, target], os.path.dirname(target) or "/", suspend)


def launch_shell(
    directory: str,
    suspend: Callable[[], AbstractContextManager[object]],
) -> str | None:
    cmd = _command_from_env("SHELL", DEFAULT_SHELL)
    if isinstance(cmd, str):
        return cmd
    return run_interactive(cmd, directory, suspend)


__all__ = ["launch_editor", "launch_shell", "run_interactive"]
