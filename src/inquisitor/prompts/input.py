"""Free text input prompt."""

from __future__ import annotations

from typing import Any

from inquisitor.model.key import Key
from inquisitor.prompts.base import PENDING, BasePrompt


class InputPrompt(BasePrompt):
    """Single line of text. Enter on an empty line submits the default.

    The typed line survives a rejected submission so the user can fix it.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.line = ""

    def display_line(self) -> str:
        return self.line

    def render(self, error: str | None = None) -> None:
        if self.status == "answered":
            self.screen.render(self.answered_line())
            return
        self.screen.render(self.get_question() + self.display_line(), self.error_line(error))

    def on_keypress(self, key: Key) -> Any:
        if key.name == "enter":
            return self.submit()
        if key.name == "backspace":
            self.line = self.line[:-1]
        elif key.ctrl and key.name == "u":
            self.line = ""
        elif not key.ctrl and not key.meta and len(key.sequence) == 1 and key.sequence.isprintable():
            self.line += key.sequence
        else:
            return PENDING
        self.render()
        return PENDING

    def submit(self) -> Any:
        if self.line:
            return self.line
        return "" if self.question.default is None else self.question.default
