"""Key-binding tables used by the mode handlers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single action callback."""

    keys: tuple[str, ...]
    action: Callable[[], bool | None]


class KeyBindingTable:
    """Exact-match key dispatch table.

    Later bindings overwrite earlier ones for the same token.
    """

    def __init__(self, bindings: Iterable[KeyBinding] = ()) -> None:
        self._actions: dict[str, Callable[[], bool | None]] = {}
        for binding in bindings:
            self.bind(binding.keys, binding.action)

    def bind(self, keys: Iterable[str], action: Callable[[], bool | None]) -> KeyBindingTable:
        for key in keys:
            self._actions[key] = action
        return self

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``.

        Returns ``None`` for unbound keys, otherwise the action's result
        (``True`` means the application should quit).
        """
        action = self._actions.get(key)
        if action is None:
            return None
        return bool(action())


__all__ = ["KeyBinding", "KeyBindingTable"]
