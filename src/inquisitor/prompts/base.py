"""Prompt contract and the shared base for built-in prompt implementations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Protocol

from inquisitor.model.key import Key
from inquisitor.model.question import ResolvedQuestion
from inquisitor.ui.base import BaseUI
from inquisitor.ui.screen import ScreenManager


class Prompt(Protocol):
    """What the session needs from a prompt implementation.

    ``collect`` is one render cycle: draw the question (with *error* when
    re-asking) and suspend until one raw value is submitted. ``finish``
    draws the committed answer and releases the screen region.
    """

    async def collect(self, error: str | None = None) -> Any: ...

    def finish(self, answer: Any) -> None: ...


PromptFactory = Callable[[ResolvedQuestion, BaseUI, Mapping[str, Any]], Prompt]

# Returned by on_keypress while the prompt keeps waiting for input.
PENDING = object()


class BasePrompt:
    """Render loop shared by the built-in prompts.

    Subclasses implement :meth:`render` and :meth:`on_keypress`; the latter
    returns :data:`PENDING` until the user submits, then the raw value.
    """

    show_default = True

    def __init__(self, question: ResolvedQuestion, ui: BaseUI, answers: Mapping[str, Any]) -> None:
        self.question = question
        self.ui = ui
        self.answers = answers
        self.screen = ScreenManager(ui)
        self.status = "pending"
        self.render_count = 0

    async def collect(self, error: str | None = None) -> Any:
        with self.ui.acquire(self):
            self.render_count += 1
            self.render(error)
            while True:
                key = await self.ui.read_key()
                value = self.on_keypress(key)
                if value is not PENDING:
                    return value

    def finish(self, answer: Any) -> None:
        self.status = "answered"
        self.answer_display = self.format_answer(answer)
        self.render()
        self.screen.done()

    def format_answer(self, answer: Any) -> str:
        return "" if answer is None else str(answer)

    def get_question(self) -> str:
        """The '? message (default)' head line."""
        ui = self.ui
        text = f"{ui.style(ui.config.prefix, fg='green')} {ui.style(self.question.message, bold=True)} "
        if self.show_default and self.question.default is not None and self.status != "answered":
            text += ui.style(f"({self.question.default}) ", dim=True)
        return text

    def answered_line(self) -> str:
        return self.get_question() + self.ui.style(self.answer_display, fg="cyan")

    def error_line(self, error: str | None) -> str:
        if not error:
            return ""
        return self.ui.style(">> ", fg="red") + error

    def render(self, error: str | None = None) -> None:
        raise NotImplementedError

    def on_keypress(self, key: Key) -> Any:
        raise NotImplementedError
