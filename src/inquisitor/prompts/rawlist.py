"""Numbered list prompt: type the index of a choice and press enter."""

from __future__ import annotations

from typing import Any

from inquisitor.model.choice import Separator
from inquisitor.model.key import Key
from inquisitor.prompts.base import PENDING
from inquisitor.prompts.list import ListPrompt


class RawListPrompt(ListPrompt):
    """Choices are numbered from 1; separators and disabled choices get no number."""

    hint = ""
    invalid_index_message = "Please enter a valid index"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.line = ""

    def get_question(self) -> str:
        head = super().get_question()
        if self.status == "answered":
            return head
        return head + self.ui.style(f"({self.pointer + 1}) ", dim=True)

    def _typed_index(self) -> int | None:
        if not self.line:
            return self.pointer
        if not self.line.isdigit():
            return None
        index = int(self.line) - 1
        if 0 <= index < self.choices.real_length:
            return index
        return None

    def choice_lines(self) -> tuple[list[str], int]:
        lines: list[str] = []
        active = 0
        highlighted = self._typed_index()
        number = 0
        for item in self.choices:
            if isinstance(item, Separator):
                lines.append("   " + self.ui.style(str(item), dim=True))
                continue
            if item.is_disabled:
                reason = item.disabled if isinstance(item.disabled, str) else "Disabled"
                lines.append(f"  -) {item.name} " + self.ui.style(f"({reason})", dim=True))
                continue
            number += 1
            text = f"  {number}) {item.name}"
            if number - 1 == highlighted:
                active = len(lines)
                text = self.ui.style(text, fg="cyan")
            lines.append(text)
        return lines, active

    def render(self, error: str | None = None) -> None:
        if self.status == "answered":
            self.screen.render(self.answered_line())
            return
        lines, active = self.choice_lines()
        if self.question.paginated:
            lines = self.paginator.paginate(lines, active, self.page_size)
        content = self.get_question() + "\n" + "\n".join(lines) + "\n  Answer: " + self.line
        self.screen.render(content, self.error_line(error))

    def on_keypress(self, key: Key) -> Any:
        if key.name == "enter":
            index = self._typed_index()
            if index is None:
                self.render(self.invalid_index_message)
                return PENDING
            self.pointer = index
            return self.selected.value
        if key.name == "backspace":
            self.line = self.line[:-1]
        elif len(key.sequence) == 1 and key.sequence.isprintable() and not key.ctrl:
            self.line += key.sequence
        else:
            return PENDING
        self.render()
        return PENDING
