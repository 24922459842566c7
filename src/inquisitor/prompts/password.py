"""Masked password prompt."""

from __future__ import annotations

from typing import Any

from inquisitor.prompts.input import InputPrompt


class PasswordPrompt(InputPrompt):
    """Text input whose characters are echoed as the ``mask`` character."""

    show_default = False

    @property
    def mask(self) -> str:
        return str(self.question.metadata.get("mask", "*"))

    def display_line(self) -> str:
        return self.mask * len(self.line)

    def format_answer(self, answer: Any) -> str:
        return self.mask * len(str(answer or ""))
