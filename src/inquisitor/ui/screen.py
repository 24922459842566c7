"""In-place redraw of a bounded terminal region."""

from __future__ import annotations

import math

import click
from prompt_toolkit.utils import get_cwidth

from inquisitor.ui.base import HIDE_CURSOR, SHOW_CURSOR, BaseUI


def visible_width(text: str) -> int:
    """Display width of *text* with ANSI styling removed."""
    return get_cwidth(click.unstyle(text))


def line_count(text: str, columns: int) -> int:
    """Number of terminal rows *text* occupies once soft-wrapped at *columns*.

    A line exactly *columns* wide stays on one row; the cursor waits in
    the last column until the next character arrives.
    """
    columns = max(columns, 1)
    rows = 0
    for line in text.split("\n"):
        rows += max(1, math.ceil(visible_width(line) / columns))
    return rows


def erase_lines(rows_above: int) -> str:
    """Escape sequence moving up *rows_above* rows and clearing to end of screen."""
    seq = f"\x1b[{rows_above}A" if rows_above > 0 else ""
    return seq + "\r\x1b[J"


class ScreenManager:
    """Redraws a prompt's content (and optional content below it) in place.

    After :meth:`render` the cursor sits at the end of *content*; any
    bottom content is printed underneath and the cursor moved back up.
    Row counts are measured after soft-wrapping at the terminal width.
    """

    def __init__(self, ui: BaseUI) -> None:
        self.ui = ui
        self.height = 0
        self._cursor_row = 0
        self._extra_rows = 0

    def render(self, content: str, bottom_content: str = "", *, hide_cursor: bool = False) -> None:
        columns = self.ui.columns()
        out = [self._clean_sequence()]
        if hide_cursor:
            out.append(HIDE_CURSOR)

        content_rows = line_count(content, columns)
        out.append(content)
        self._cursor_row = content_rows - 1
        self._extra_rows = 0
        if bottom_content:
            self._extra_rows = line_count(bottom_content, columns)
            out.append("\n" + bottom_content)
            out.append(f"\x1b[{self._extra_rows}A\r")
            width = visible_width(content.split("\n")[-1])
            # A full last row leaves the cursor parked in the last column.
            column = width % columns or (columns if width else 0)
            if column:
                out.append(f"\x1b[{column}C")
        self.height = content_rows + self._extra_rows
        self.ui.write("".join(out))

    def _clean_sequence(self) -> str:
        if not self.height:
            return ""
        return erase_lines(self._cursor_row)

    def clean(self) -> None:
        """Erase the last render."""
        if self.height:
            self.ui.write(self._clean_sequence())
        self.height = 0
        self._cursor_row = 0
        self._extra_rows = 0

    def done(self) -> None:
        """Leave the last render on screen and move below it."""
        out = []
        if self._extra_rows:
            out.append(f"\x1b[{self._extra_rows}B")
        out.append("\n")
        out.append(SHOW_CURSOR)
        self.ui.write("".join(out))
        self.height = 0
        self._cursor_row = 0
        self._extra_rows = 0
