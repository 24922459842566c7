"""Windowed rendering of long choice lists."""

from __future__ import annotations


class Paginator:
    """Show *page_size* lines around the active line.

    The window keeps the active line a third of the way down once the
    pointer has moved past that point, like a scrolling menu.
    """

    def __init__(self, hint: str = "(Move up and down to reveal more choices)") -> None:
        self.hint = hint

    def paginate(self, lines: list[str], active: int, page_size: int) -> list[str]:
        if len(lines) <= page_size:
            return lines
        middle = page_size // 3
        start = min(max(active - middle, 0), len(lines) - page_size)
        return lines[start:start + page_size] + [self.hint]
