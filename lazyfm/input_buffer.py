"""Single-line editable text buffer used by the prompt modes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InputBuffer:
    """Characters plus an insertion cursor with ``0 <= cursor <= len(text)``."""

    chars: list[str] = field(default_factory=list)
    cursor: int = 0

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def __len__(self) -> int:
        return len(self.chars)

    def reset(self) -> None:
        self.chars = []
        self.cursor = 0

    def seed(self, text: str) -> None:
        """Replace contents with ``text`` and park the cursor at the end."""
        self.chars = list(text)
        self.cursor = len(self.chars)

    def insert(self, text: str) -> None:
        for ch in text:
            self.chars.insert(self.cursor, ch)
            self.cursor += 1

    def backspace(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1
            del self.chars[self.cursor]

    def delete(self) -> None:
        if self.cursor < len(self.chars):
            del self.chars[self.cursor]

    def move_left(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_right(self) -> None:
        if self.cursor < len(self.chars):
            self.cursor += 1

    def move_home(self) -> None:
        self.cursor = 0

    def move_end(self) -> None:
        self.cursor = len(self.chars)


__all__ = ["InputBuffer"]
