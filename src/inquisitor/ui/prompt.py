"""PromptUI: drives a question list through the registered prompts."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, TextIO

from prompt_toolkit.input import Input

from inquisitor.config import UIConfig
from inquisitor.errors import ForceClosed
from inquisitor.events import types as events
from inquisitor.events.bus import EventBus
from inquisitor.model.answers import Answers
from inquisitor.model.question import Question, ResolvedQuestion
from inquisitor.ui.base import BaseUI
from inquisitor.validation import validate_or_raise

if TYPE_CHECKING:
    from inquisitor.prompts.base import Prompt
    from inquisitor.registry import PromptRegistry

logger = logging.getLogger("inquisitor")


def normalize_questions(questions: Any) -> list[Question]:
    """Accept one question, one mapping, or an iterable of either."""
    if isinstance(questions, (Question, Mapping)):
        questions = [questions]
    if not isinstance(questions, Iterable) or isinstance(questions, str):
        raise TypeError(f"Expected questions, got {type(questions).__name__}")
    return [q if isinstance(q, Question) else Question.from_dict(q) for q in questions]


class PromptUI(BaseUI):
    """One prompt session.

    For each question in order: resolve ``when`` (skip on false), resolve
    message, default and choices against the answers so far, dispatch to
    the registered prompt, filter the raw value, validate the raw value
    (re-asking until accepted), then commit the filtered value. The
    question list is checked against the registry before the terminal is
    touched.
    """

    def __init__(
        self,
        prompts: PromptRegistry | None = None,
        *,
        input: Input | None = None,
        output: TextIO | None = None,
        config: UIConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        super().__init__(input=input, output=output, config=config)
        if prompts is None:
            from inquisitor.registry import get_default_registry

            prompts = get_default_registry()
        self.prompts = prompts
        self.event_bus = event_bus or EventBus()
        self.answers = Answers()
        self.active_prompt: Prompt | None = None
        self.current_index = 0

    async def run(self, questions: Any, answers: Mapping[str, Any] | None = None) -> Answers:
        """Ask every question and return the answers.

        Raises a :class:`~inquisitor.errors.ConfigurationError` for a broken
        question list, and :class:`~inquisitor.errors.ForceClosed` when
        interrupted; neither delivers answers.
        """
        question_list = normalize_questions(questions)
        self.check_questions(question_list)

        self.answers = Answers(answers)
        self.event_bus.emit(events.SessionStarted(question_count=len(question_list)))
        current: Question | None = None
        self.open()
        try:
            for index, current in enumerate(question_list):
                self.current_index = index
                if self.force_closed:
                    raise ForceClosed()
                await self.process_question(current)
            if self.force_closed:
                raise ForceClosed()
        except ForceClosed:
            self.event_bus.emit(
                events.SessionInterrupted(name=current.name if current else None)
            )
            raise
        finally:
            self.active_prompt = None
            self.close()
        return self.on_completion()

    def check_questions(self, questions: list[Question]) -> None:
        """Fail fast on configuration errors; runs before any terminal I/O."""
        for question in questions:
            self.prompts.resolve(question.effective_type)
        for diagnostic in validate_or_raise(questions, self.prompts):
            logger.warning("%s", diagnostic)

    async def process_question(self, question: Question) -> None:
        if not self.filter_if_runnable(question):
            logger.debug("Skipping question %r", question.name)
            self.event_bus.emit(events.QuestionSkipped(name=question.name))
            return
        resolved = question.resolve(self.answers)
        value = await self.fetch_answer(question, resolved)
        self.answers.commit(question.name, value)
        self.event_bus.emit(events.AnswerCommitted(name=question.name, value=value))

    def filter_if_runnable(self, question: Question) -> bool:
        return question.is_runnable(self.answers)

    async def fetch_answer(self, question: Question, resolved: ResolvedQuestion) -> Any:
        """Collect one accepted value for *resolved*, re-asking on rejection."""
        factory = self.prompts.resolve(resolved.type)
        prompt = factory(resolved, self, self.answers)
        self.active_prompt = prompt
        self.event_bus.emit(events.QuestionAsked(name=resolved.name, type=resolved.type))

        error: str | None = None
        attempt = 0
        while True:
            attempt += 1
            raw = await prompt.collect(error)
            value = question.apply_filter(raw)
            verdict = question.check(raw)
            if verdict is True:
                break
            error = verdict if isinstance(verdict, str) else self.config.invalid_message
            self.event_bus.emit(
                events.ValidationFailed(name=resolved.name, message=error, attempt=attempt)
            )

        prompt.finish(value)
        self.active_prompt = None
        return value

    def on_completion(self) -> Answers:
        self.event_bus.emit(events.SessionCompleted(answers=self.answers.to_dict()))
        return self.answers
