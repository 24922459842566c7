"""BaseUI: terminal input subscription, keypress channel and teardown."""

from __future__ import annotations

import asyncio
import logging
import shutil
import signal
import sys
import threading
from collections.abc import Iterable, Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import replace
from typing import Any, TextIO

import click
from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress

from inquisitor.config import UIConfig
from inquisitor.errors import ForceClosed
from inquisitor.model.key import Key, key_from_press

logger = logging.getLogger("inquisitor")

SHOW_CURSOR = "\x1b[?25h"
HIDE_CURSOR = "\x1b[?25l"

# Delay before a lone escape byte is flushed as an Escape keypress.
FLUSH_TIMEOUT = 0.05

_CLOSED = object()


class BaseUI:
    """Owns the raw keyboard subscription and the output stream.

    Keypresses read from the terminal are converted to :class:`Key` events
    and queued on a single-consumer channel. The active prompt holds the
    channel through :meth:`acquire` and awaits keys with :meth:`read_key`.
    Ctrl-C (or SIGTERM) force-closes the UI: listeners are detached, the
    terminal mode is restored, and any pending :meth:`read_key` raises
    :class:`ForceClosed`.
    """

    def __init__(
        self,
        *,
        input: Input | None = None,
        output: TextIO | None = None,
        config: UIConfig | None = None,
    ) -> None:
        self.config = config or UIConfig()
        self.input = input
        self.output: TextIO = output or sys.stdout
        self._write_lock = threading.RLock()
        self._keys: asyncio.Queue[Any] = asyncio.Queue()
        self._stack: ExitStack | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._flush_handle: asyncio.TimerHandle | None = None
        self._owner: object | None = None
        self._closed = False
        self._forced = False

    # --- lifecycle -------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def force_closed(self) -> bool:
        return self._forced

    def open(self) -> None:
        """Put the terminal in raw mode and start reading keypresses.

        Must be called from inside a running event loop.
        """
        if self._stack is not None or self._closed:
            return
        if self.input is None:
            self.input = create_input()
        self._loop = asyncio.get_running_loop()
        stack = ExitStack()
        try:
            stack.enter_context(self.input.raw_mode())
            stack.enter_context(self.input.attach(self._on_input_ready))
            if self.config.handle_signals:
                self._install_signal_handlers(stack)
        except BaseException:
            stack.close()
            raise
        self._stack = stack

    def _install_signal_handlers(self, stack: ExitStack) -> None:
        loop = self._loop
        assert loop is not None
        try:
            loop.add_signal_handler(signal.SIGTERM, self.on_force_close)
        except (NotImplementedError, RuntimeError, ValueError):
            logger.debug("SIGTERM handler not available on this platform/thread")
            return
        stack.callback(loop.remove_signal_handler, signal.SIGTERM)

    def close(self) -> None:
        """Detach listeners and restore the terminal. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        if self._flush_handle is not None:
            self._flush_handle.cancel()
            self._flush_handle = None
        if self._stack is not None:
            stack, self._stack = self._stack, None
            stack.close()
            self.write(SHOW_CURSOR)
        self._keys.put_nowait(_CLOSED)

    def on_force_close(self) -> None:
        """Handle Ctrl-C / SIGTERM: tear down synchronously, then wake the reader."""
        if self._closed:
            return
        logger.debug("Force closing %s", type(self).__name__)
        self._forced = True
        while not self._keys.empty():
            self._keys.get_nowait()
        self.close()
        self.write("\n")

    # --- keypress channel ------------------------------------------------------

    def _on_input_ready(self) -> None:
        assert self.input is not None
        self.dispatch_presses(self.input.read_keys())
        if self._closed:
            return
        if self.input.closed:
            self.on_force_close()
            return
        if self._flush_handle is not None:
            self._flush_handle.cancel()
        if self._loop is not None:
            self._flush_handle = self._loop.call_later(FLUSH_TIMEOUT, self._flush_keys)

    def _flush_keys(self) -> None:
        self._flush_handle = None
        if self._closed or self.input is None:
            return
        self.dispatch_presses(self.input.flush_keys())

    def dispatch_presses(self, key_presses: Iterable[KeyPress]) -> None:
        """Convert one batch of key presses and dispatch them in order.

        An escape press followed by another press in the same batch is the
        terminal encoding of Alt+key; the pair becomes one key with ``meta``
        set. A trailing escape is dispatched on its own.
        """
        escape: Key | None = None
        for key_press in key_presses:
            key = key_from_press(key_press)
            if escape is not None:
                key = replace(key, sequence=escape.sequence + key.sequence, meta=True)
                escape = None
            elif key.name == "escape":
                escape = key
                continue
            self.on_keypress(key)
            if self._closed:
                return
        if escape is not None:
            self.on_keypress(escape)

    def on_keypress(self, key: Key) -> None:
        """Dispatch one keypress: Ctrl-C force-closes, anything else is queued."""
        if key.is_interrupt:
            self.on_force_close()
            return
        self._keys.put_nowait(key)

    @contextmanager
    def acquire(self, owner: object) -> Iterator[None]:
        """Hold the keypress channel exclusively for *owner*."""
        if self._owner is not None:
            raise RuntimeError(f"Keypress stream is already held by {self._owner!r}")
        self._owner = owner
        try:
            yield
        finally:
            self._owner = None

    async def read_key(self) -> Key:
        """Suspend until the next keypress; raises ForceClosed once the UI is closed."""
        if self._owner is None:
            raise RuntimeError("read_key() called without holding the keypress stream")
        if self._closed and self._keys.empty():
            raise ForceClosed()
        item = await self._keys.get()
        if item is _CLOSED:
            raise ForceClosed()
        return item

    # --- output ----------------------------------------------------------------

    def write(self, text: str) -> None:
        with self._write_lock:
            self.output.write(text)
            self.output.flush()

    def columns(self) -> int:
        if self.config.columns:
            return self.config.columns
        return shutil.get_terminal_size((80, 24)).columns

    def style(self, text: str, **styles: Any) -> str:
        """click.style when color is enabled, plain text otherwise."""
        if not self.config.color:
            return text
        return click.style(text, **styles)
