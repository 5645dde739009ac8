"""Runtime orchestration package for the interactive browser.

This package wires terminal control, child processes, persisted config and
the main loop around the modal core.
"""

from .app import build_session, run_browser

__all__ = ["build_session", "run_browser"]
