"""Event types emitted during a prompt session."""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class SessionStarted:
    question_count: int


@dataclass(frozen=True)
class QuestionSkipped:
    name: str


@dataclass(frozen=True)
class QuestionAsked:
    name: str
    type: str


@dataclass(frozen=True)
class ValidationFailed:
    name: str
    message: str
    attempt: int


@dataclass(frozen=True)
class AnswerCommitted:
    name: str
    value: Any


@dataclass(frozen=True)
class SessionCompleted:
    answers: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SessionInterrupted:
    name: str | None = None


SessionEvent = Union[
    SessionStarted,
    QuestionSkipped,
    QuestionAsked,
    ValidationFailed,
    AnswerCommitted,
    SessionCompleted,
    SessionInterrupted,
]
