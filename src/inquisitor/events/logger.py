"""Event listener that mirrors session events onto a logger."""
from __future__ import annotations

import logging
from typing import Any, Callable

from inquisitor.events import types as events


def logging_listener(logger: logging.Logger | None = None) -> Callable[[Any], None]:
    """Create an ``EventBus.on_all`` callback that logs session events."""
    log = logger or logging.getLogger("inquisitor")

    def listener(event: Any) -> None:
        if isinstance(event, events.SessionStarted):
            log.info("Session started: questions=%d", event.question_count)
        elif isinstance(event, events.QuestionSkipped):
            log.debug("Question skipped: name=%s", event.name)
        elif isinstance(event, events.QuestionAsked):
            log.debug("Question asked: name=%s type=%s", event.name, event.type)
        elif isinstance(event, events.ValidationFailed):
            log.info(
                "Validation failed: name=%s attempt=%d message=%s",
                event.name,
                event.attempt,
                event.message,
            )
        elif isinstance(event, events.AnswerCommitted):
            log.debug("Answer committed: name=%s", event.name)
        elif isinstance(event, events.SessionCompleted):
            log.info("Session completed: answers=%d", len(event.answers))
        elif isinstance(event, events.SessionInterrupted):
            log.warning("Session interrupted: name=%s", event.name)

    return listener
