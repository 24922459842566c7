"""Multi-select checkbox prompt."""

from __future__ import annotations

from typing import Any

from inquisitor.model.choice import Separator
from inquisitor.model.key import Key
from inquisitor.prompts.base import PENDING
from inquisitor.prompts.list import POINTER, ListPrompt

CHECKED = "◉"
UNCHECKED = "◯"


class CheckboxPrompt(ListPrompt):
    """Space toggles the active choice, ``a`` toggles all, ``i`` inverts.

    Submits the list of checked values in display order. Choices start
    checked when flagged ``checked`` or listed in the default.
    """

    hint = "(Press <space> to select, <a> to toggle all, <i> to invert selection)"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        default = self.question.default if isinstance(self.question.default, (list, tuple)) else ()
        self.checked: set[int] = {
            index
            for index, choice in enumerate(self.choices.real_choices)
            if choice.checked or choice.value in default
        }

    def _initial_pointer(self) -> int:
        return 0

    def choice_lines(self) -> tuple[list[str], int]:
        lines: list[str] = []
        active = 0
        positions = {id(c): i for i, c in enumerate(self.choices.real_choices)}
        for item in self.choices:
            if isinstance(item, Separator):
                lines.append(" " + self.ui.style(str(item), dim=True))
                continue
            if item.is_disabled:
                reason = item.disabled if isinstance(item.disabled, str) else "Disabled"
                lines.append(f" - {item.name} " + self.ui.style(f"({reason})", dim=True))
                continue
            index = positions[id(item)]
            mark = self.ui.style(CHECKED, fg="green") if index in self.checked else UNCHECKED
            if index == self.pointer:
                active = len(lines)
                lines.append(self.ui.style(POINTER, fg="cyan") + mark + " " + item.name)
            else:
                lines.append(" " + mark + " " + item.name)
        return lines, active

    def on_keypress(self, key: Key) -> Any:
        total = self.choices.real_length
        if key.name == "enter":
            real = self.choices.real_choices
            return [real[i].value for i in sorted(self.checked)]
        if key.name == "space":
            self.checked ^= {self.pointer}
        elif key.name == "a":
            self.checked = set() if len(self.checked) == total else set(range(total))
        elif key.name == "i":
            self.checked = set(range(total)) - self.checked
        elif key.name in ("up", "k"):
            self.move(-1)
        elif key.name in ("down", "j"):
            self.move(1)
        else:
            return PENDING
        self.render()
        return PENDING

    def finish(self, answer: Any) -> None:
        real = self.choices.real_choices
        self.answer_display = ", ".join(real[i].short for i in sorted(self.checked))
        self.status = "answered"
        self.render()
        self.screen.done()
