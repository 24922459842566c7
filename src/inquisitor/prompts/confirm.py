"""Yes/no confirmation prompt."""

from __future__ import annotations

from typing import Any

from inquisitor.prompts.input import InputPrompt


class ConfirmPrompt(InputPrompt):
    """Answers True/False. Empty input yields the default (True unless False)."""

    show_default = False

    def get_question(self) -> str:
        head = super().get_question()
        if self.status == "answered":
            return head
        hint = "(y/N)" if self.question.default is False else "(Y/n)"
        return head + self.ui.style(hint, dim=True) + " "

    def submit(self) -> Any:
        default = self.question.default is not False
        answer = self.line.strip()
        if not answer:
            return default
        return answer[0].lower() == "y"

    def format_answer(self, answer: Any) -> str:
        return "Yes" if answer else "No"
