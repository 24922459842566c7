"""BottomBar: a status region pinned below streaming log output."""

from __future__ import annotations

import logging
import re
from typing import Any, TextIO

from prompt_toolkit.input import Input

from inquisitor.config import UIConfig
from inquisitor.ui.base import BaseUI
from inquisitor.ui.screen import erase_lines, line_count

_TRAILING_LF = re.compile(r"[\r\n]$")


class BottomBar(BaseUI):
    """Sticky bottom bar user interface.

    The bar is always the last thing written: every log write erases it,
    prints the log text, and prints the bar again underneath. All terminal
    writes go through one re-entrant lock so log writers on other threads
    never interleave with an erase/redraw sequence.
    """

    def __init__(
        self,
        bottom_bar: str = "",
        *,
        input: Input | None = None,
        output: TextIO | None = None,
        config: UIConfig | None = None,
    ) -> None:
        super().__init__(input=input, output=output, config=config)
        self.bottom_bar = bottom_bar
        self.height = 0
        self.log = _BottomBarLog(self)
        self.render()

    def render(self) -> BottomBar:
        """Draw the bar at the cursor position."""
        with self._write_lock:
            self.write(self.bottom_bar)
            self.height = line_count(self.bottom_bar, self.columns()) if self.bottom_bar else 0
        return self

    def clean(self) -> BottomBar:
        """Erase the rows the bar currently occupies."""
        with self._write_lock:
            if self.height:
                self.write(erase_lines(self.height - 1))
            self.height = 0
        return self

    def update_bottom_bar(self, bottom_bar: str) -> BottomBar:
        """Replace the bar content and redraw it."""
        with self._write_lock:
            self.clean()
            self.bottom_bar = bottom_bar
            self.render()
        return self

    def write_log(self, data: Any) -> BottomBar:
        """Print *data* above the bar, then redraw the bar beneath it."""
        with self._write_lock:
            self.clean()
            self.write(self.enforce_lf(str(data)))
            self.render()
        return self

    @staticmethod
    def enforce_lf(text: str) -> str:
        """Make sure *text* ends with a line feed."""
        return text if _TRAILING_LF.search(text) else text + "\n"

    def close(self) -> None:
        """Move below the bar and release the terminal."""
        with self._write_lock:
            if not self.closed and self.height:
                self.write("\n")
            super().close()


class _BottomBarLog:
    """Writable stream that routes text through :meth:`BottomBar.write_log`."""

    def __init__(self, bar: BottomBar) -> None:
        self._bar = bar
        self._buffer = ""

    def write(self, data: str) -> int:
        # Complete lines go out immediately; a partial line waits for flush().
        self._buffer += data
        if "\n" in self._buffer:
            head, _, self._buffer = self._buffer.rpartition("\n")
            self._bar.write_log(head + "\n")
        return len(data)

    def flush(self) -> None:
        if self._buffer:
            text, self._buffer = self._buffer, ""
            self._bar.write_log(text)


class BottomBarLogHandler(logging.Handler):
    """Logging handler writing formatted records above a bottom bar."""

    def __init__(self, bar: BottomBar, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.bar = bar

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.bar.write_log(self.format(record))
        except Exception:
            self.handleError(record)
