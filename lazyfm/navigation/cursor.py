"""Cursor position and viewport scrolling over a directory listing.

Every operation takes the current list size and viewport height so the
cursor stays a plain value object with no UI concerns.
"""

from __future__ import annotations

from dataclasses import dataclass

SCROLL_MARGIN = 4


@dataclass
class Cursor:
    """Selected row plus the first visible row of the viewport."""

    position: int = 0
    scroll_offset: int = 0

    def snapshot(self) -> tuple[int, int]:
        return (self.position, self.scroll_offset)

    def restore(self, saved: tuple[int, int]) -> None:
        """Put back a ``snapshot()`` verbatim, without re-validating it."""
        self.position, self.scroll_offset = saved

    def reset(self) -> None:
        self.position = 0
        self.scroll_offset = 0

    def scroll_center(self, height: int) -> None:
        """Coarse re-centering: jump to mid-screen once near the bottom edge."""
        if self.position > height - 1 - SCROLL_MARGIN:
            self.scroll_offset = max(0, self.position - height // 2)
        else:
            self.scroll_offset = 0

    def scroll_up(self) -> None:
        if self.position - self.scroll_offset < SCROLL_MARGIN and self.scroll_offset > 0:
            self.scroll_offset -= 1

    def scroll_down(self, height: int) -> None:
        if self.position - self.scroll_offset + SCROLL_MARGIN > height - 1 - SCROLL_MARGIN // 2:
            self.scroll_offset += 1

    def keep_visible(self, height: int) -> None:
        """Pull the offset back over the cursor when the margins overshoot.

        Only viewports shorter than the scroll margins ever need this.
        """
        rows = max(1, height)
        if self.position < self.scroll_offset:
            self.scroll_offset = self.position
        elif self.position >= self.scroll_offset + rows:
            self.scroll_offset = self.position - rows + 1
        self.scroll_offset = max(0, self.scroll_offset)

    def set_position(self, index: int, size: int, height: int) -> bool:
        """Move to ``index`` when in range and re-center; return whether it moved."""
        if not 0 <= index < size:
            return False
        self.position = index
        self.scroll_center(height)
        self.keep_visible(height)
        return True

    def move_up(self, size: int, height: int) -> None:
        if size <= 0:
            return
        self.position -= 1
        if self.position < 0:
            self.position = size - 1
            self.scroll_center(height)
        self.scroll_up()
        self.keep_visible(height)

    def move_down(self, size: int, height: int) -> None:
        if size <= 0:
            return
        self.position += 1
        if self.position >= size:
            self.position = 0
            self.scroll_center(height)
        self.scroll_down(height)
        self.keep_visible(height)

    def home(self, size: int, height: int) -> None:
        self.set_position(0, size, height)

    def end(self, size: int, height: int) -> None:
        self.set_position(size - 1, size, height)

    def clamp_after_shrink(self, size: int, height: int) -> None:
        """Walk upward until the cursor is back inside a shrunken list.

        An empty list resets the cursor to the origin.
        """
        if size <= 0:
            self.reset()
            return
        while self.position >= size:
            self.move_up(size, height)


__all__ = ["Cursor", "SCROLL_MARGIN"]
