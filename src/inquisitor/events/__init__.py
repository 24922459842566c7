"""Session event bus, event types and the logging listener."""

from inquisitor.events.bus import EventBus
from inquisitor.events.logger import logging_listener
from inquisitor.events.types import (
    AnswerCommitted,
    QuestionAsked,
    QuestionSkipped,
    SessionCompleted,
    SessionEvent,
    SessionInterrupted,
    SessionStarted,
    ValidationFailed,
)

__all__ = [
    "EventBus",
    "logging_listener",
    "AnswerCommitted",
    "QuestionAsked",
    "QuestionSkipped",
    "SessionCompleted",
    "SessionEvent",
    "SessionInterrupted",
    "SessionStarted",
    "ValidationFailed",
]
