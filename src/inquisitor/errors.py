"""Error hierarchy for inquisitor sessions."""
from __future__ import annotations

from typing import Any


class InquisitorError(Exception):
    """Base error for all inquisitor errors."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(InquisitorError):
    """A question list cannot be run as given.

    Configuration errors abort the whole session; they are never turned
    into a skipped question.
    """


class UnknownPromptTypeError(ConfigurationError):
    """No prompt implementation is registered under the requested type."""

    def __init__(self, type_name: str, **kwargs: Any) -> None:
        super().__init__(f"No prompt registered for type {type_name!r}", **kwargs)
        self.type_name = type_name


class InvalidChoiceError(ConfigurationError):
    """A choice entry could not be normalized."""

    def __init__(self, message: str, *, entry: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.entry = entry


class DerivationError(ConfigurationError):
    """A derivation function (when/default/choices/message/filter) failed."""

    def __init__(
        self,
        message: str,
        *,
        question: str = "",
        field: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.question = question
        self.field = field


class QuestionValidationError(ConfigurationError):
    """Raised when question list validation produces ERROR diagnostics."""

    def __init__(self, diagnostics: list[Any]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Question validation failed with {len(messages)} error(s): "
            + "; ".join(messages)
        )


class ForceClosed(InquisitorError):
    """The session was interrupted and its terminal resources released."""

    def __init__(self, message: str = "Session interrupted", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
