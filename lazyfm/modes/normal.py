"""Normal-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable

from ..input import KeyBinding, KeyBindingTable
from . import actions
from .state import Mode, Session, Transition


class NormalKeyHandler:
    """Key table for browsing: movement, selection, prompts and shell-outs."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self._next_mode = Mode.NORMAL

        def bound(action: Callable[[Session], object]) -> Callable[[], bool]:
            def run() -> bool:
                action(session)
                return False

            return run

        self.bindings = KeyBindingTable(
            (
                KeyBinding(("q", "Q", "CTRL_Q"), self._quit),
                KeyBinding((".",), bound(actions.toggle_hidden)),
                KeyBinding(("/", "CTRL_F"), self._begin_search),
                KeyBinding(("n",), bound(actions.repeat_search_forward)),
                KeyBinding(("N",), bound(actions.repeat_search_backward)),
                KeyBinding(("R", "CTRL_R"), bound(actions.refresh)),
                KeyBinding(("r",), self._begin_rename),
                KeyBinding(("d", "D"), self._begin_delete),
                KeyBinding(("f", "F"), self._begin_create),
                KeyBinding((" ",), bound(actions.toggle_selection)),
                KeyBinding(("v",), bound(actions.move_selection_here)),
                KeyBinding(("p",), bound(actions.copy_selection_here)),
                KeyBinding(("u", "U"), bound(actions.clear_selection)),
                KeyBinding(("s", "S"), bound(actions.open_shell)),
                KeyBinding(("e",), bound(actions.edit_current)),
                KeyBinding(("i",), bound(actions.describe_current)),
                KeyBinding(("HOME", "g"), bound(actions.go_home)),
                KeyBinding(("END", "G"), bound(actions.go_end)),
                KeyBinding(("UP", "k"), bound(actions.move_up)),
                KeyBinding(("DOWN", "j"), bound(actions.move_down)),
                KeyBinding(("LEFT", "h", "BACKSPACE"), bound(actions.ascend)),
                KeyBinding(("RIGHT", "l", "ENTER"), bound(actions.descend)),
            )
        )

    def _enter(self, mode: Mode) -> None:
        self.session.last_mode = Mode.NORMAL
        self._next_mode = mode

    def _quit(self) -> bool:
        actions.quit_session(self.session)
        return True

    def _begin_search(self) -> bool:
        self.session.status_message = ""
        self.session.buffer.reset()
        self._enter(Mode.SEARCH)
        return False

    def _begin_rename(self) -> bool:
        entry = self.session.current_entry()
        if entry is None:
            return False
        self.session.buffer.seed(entry.name)
        self._enter(Mode.RENAME)
        return False

    def _begin_delete(self) -> bool:
        self.session.buffer.reset()
        self._enter(Mode.DELETE)
        return False

    def _begin_create(self) -> bool:
        self.session.buffer.reset()
        self._enter(Mode.CREATE)
        return False

    def handle(self, key: str) -> Transition:
        """Handle one normal-mode key; unbound keys are ignored."""
        self._next_mode = Mode.NORMAL
        should_quit = self.bindings.dispatch(key)
        return Transition(self._next_mode, quit=bool(should_quit))


__all__ = ["NormalKeyHandler"]
