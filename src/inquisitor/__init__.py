"""Inquisitor: interactive command-line question/answer sessions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from inquisitor import ui
from inquisitor.config import UIConfig
from inquisitor.errors import (
    ConfigurationError,
    DerivationError,
    ForceClosed,
    InquisitorError,
    InvalidChoiceError,
    QuestionValidationError,
    UnknownPromptTypeError,
)
from inquisitor.events import EventBus, logging_listener
from inquisitor.model import (
    Answers,
    Choice,
    Choices,
    Derived,
    Fixed,
    Question,
    Separator,
    exclude,
    normalize_choice,
)
from inquisitor.registry import (
    PromptRegistry,
    create_prompt_module,
    get_default_registry,
    register_prompt,
    restore_default_prompts,
)

__version__ = "0.1.0"


def prompt(
    questions: Any,
    callback: Callable[[Answers], Any] | None = None,
    *,
    answers: Mapping[str, Any] | None = None,
    **ui_options: Any,
) -> Answers:
    """Ask *questions* using the default registry (see :meth:`PromptRegistry.prompt`)."""
    return get_default_registry().prompt(questions, callback, answers=answers, **ui_options)


async def prompt_async(
    questions: Any,
    *,
    answers: Mapping[str, Any] | None = None,
    **ui_options: Any,
) -> Answers:
    """Coroutine form of :func:`prompt` for use inside a running event loop."""
    return await get_default_registry().prompt_async(questions, answers=answers, **ui_options)


__all__ = [
    "__version__",
    "prompt",
    "prompt_async",
    "ui",
    "UIConfig",
    "ConfigurationError",
    "DerivationError",
    "ForceClosed",
    "InquisitorError",
    "InvalidChoiceError",
    "QuestionValidationError",
    "UnknownPromptTypeError",
    "EventBus",
    "logging_listener",
    "Answers",
    "Choice",
    "Choices",
    "Derived",
    "Fixed",
    "Question",
    "Separator",
    "exclude",
    "normalize_choice",
    "PromptRegistry",
    "create_prompt_module",
    "get_default_registry",
    "register_prompt",
    "restore_default_prompts",
]
