"""Single-select list prompt navigated with the arrow keys."""

from __future__ import annotations

from typing import Any

from inquisitor.errors import ConfigurationError
from inquisitor.model.choice import Choice, Choices, Separator
from inquisitor.model.key import Key
from inquisitor.prompts.base import PENDING, BasePrompt
from inquisitor.prompts.paginator import Paginator

POINTER = "❯"


class ListPrompt(BasePrompt):
    """Arrow keys (or j/k) move over selectable choices; enter submits.

    Separators and disabled choices are drawn but never selectable. The
    default may be a selectable index or a choice value.
    """

    show_default = False
    hint = "(Use arrow keys)"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if self.question.choices is None or not self.question.choices.real_length:
            raise ConfigurationError(
                f"Question {self.question.name!r} has no selectable choices"
            )
        self.choices: Choices = self.question.choices
        self.pointer = self._initial_pointer()
        self.paginator = Paginator()
        self.first_render = True

    def _initial_pointer(self) -> int:
        default = self.question.default
        real = self.choices.real_choices
        if isinstance(default, int) and not isinstance(default, bool) and 0 <= default < len(real):
            return default
        for index, choice in enumerate(real):
            if default is not None and choice.value == default:
                return index
        return 0

    @property
    def selected(self) -> Choice:
        return self.choices.get_choice(self.pointer)

    @property
    def page_size(self) -> int:
        return self.question.page_size or self.ui.config.page_size

    def choice_lines(self) -> tuple[list[str], int]:
        """Render every item; returns the lines and the active line index."""
        lines: list[str] = []
        active = 0
        selected = self.selected
        for item in self.choices:
            if isinstance(item, Separator):
                lines.append("  " + self.ui.style(str(item), dim=True))
            elif item.is_disabled:
                reason = item.disabled if isinstance(item.disabled, str) else "Disabled"
                lines.append(f"  - {item.name} " + self.ui.style(f"({reason})", dim=True))
            elif item is selected:
                active = len(lines)
                lines.append(self.ui.style(f"{POINTER} {item.name}", fg="cyan"))
            else:
                lines.append(f"  {item.name}")
        return lines, active

    def render(self, error: str | None = None) -> None:
        if self.status == "answered":
            self.screen.render(self.answered_line())
            return
        head = self.get_question()
        if self.first_render and self.hint:
            head += self.ui.style(self.hint, dim=True)
        lines, active = self.choice_lines()
        if self.question.paginated:
            lines = self.paginator.paginate(lines, active, self.page_size)
        self.first_render = False
        self.screen.render(head + "\n" + "\n".join(lines), self.error_line(error), hide_cursor=True)

    def move(self, step: int) -> None:
        self.pointer = (self.pointer + step) % self.choices.real_length

    def on_keypress(self, key: Key) -> Any:
        if key.name == "enter":
            return self.selected.value
        if key.name in ("up", "k"):
            self.move(-1)
        elif key.name in ("down", "j"):
            self.move(1)
        else:
            return PENDING
        self.render()
        return PENDING

    def finish(self, answer: Any) -> None:
        self.answer_display = self.selected.short
        self.status = "answered"
        self.render()
        self.screen.done()
