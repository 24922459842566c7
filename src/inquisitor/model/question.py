"""Question model: question specifications and their per-session resolution."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar, Union

from inquisitor.conditions import evaluate_condition
from inquisitor.errors import ConfigurationError, DerivationError
from inquisitor.model.choice import Choices

T = TypeVar("T")

DEFAULT_TYPE = "input"


@dataclass(frozen=True)
class Fixed(Generic[T]):
    """A field given as a literal value."""

    value: T

    def resolve(self, answers: Mapping[str, Any]) -> T:
        return self.value


@dataclass(frozen=True)
class Derived(Generic[T]):
    """A field computed from the answers collected so far.

    ``expression`` holds the condition text when the field was given as a
    ``when`` expression string.
    """

    fn: Callable[[Mapping[str, Any]], T]
    expression: str | None = None

    def resolve(self, answers: Mapping[str, Any]) -> T:
        return self.fn(answers)


Dynamic = Union[Fixed[T], Derived[T]]


def dynamic(value: Any) -> Dynamic:
    """Wrap a literal or a callable as Fixed/Derived. Already-wrapped values pass through."""
    if isinstance(value, (Fixed, Derived)):
        return value
    if callable(value):
        return Derived(value)
    return Fixed(value)


def condition(value: Any) -> Dynamic:
    """Like :func:`dynamic`, but a string is parsed as a condition expression.

    None means the question is always asked.
    """
    if value is None:
        return Fixed(True)
    if isinstance(value, str):
        expr = value
        return Derived(lambda answers: evaluate_condition(expr, answers), expression=expr)
    return dynamic(value)


@dataclass(frozen=True)
class ResolvedQuestion:
    """A question with every dynamic field resolved against the current answers.

    This is what prompt implementations receive.
    """

    name: str
    type: str
    message: str
    default: Any = None
    choices: Choices | None = None
    paginated: bool = False
    page_size: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


_QUESTION_KEYS = frozenset({
    "name",
    "type",
    "message",
    "default",
    "choices",
    "validate",
    "filter",
    "when",
    "paginated",
    "page_size",
    "metadata",
})


@dataclass(frozen=True)
class Question:
    """A question specification.

    ``message``, ``default``, ``choices`` and ``when`` accept either a
    literal or a function of the answers collected so far; they are stored
    as :class:`Fixed` or :class:`Derived`. A string ``when`` is a condition
    expression such as ``"ok=true && lang!=rust"``.
    """

    name: str
    type: str | None = None
    message: Any = None
    default: Any = None
    choices: Any = None
    validate: Callable[[Any], bool | str] | None = None
    filter: Callable[[Any], Any] | None = None
    when: Any = True
    paginated: bool = False
    page_size: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", dynamic(self.message))
        object.__setattr__(self, "default", dynamic(self.default))
        if self.choices is not None:
            object.__setattr__(self, "choices", dynamic(self.choices))
        object.__setattr__(self, "when", condition(self.when))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Question:
        """Build a question from a plain mapping; unknown keys go to ``metadata``."""
        kwargs = {k: v for k, v in data.items() if k in _QUESTION_KEYS}
        metadata = dict(kwargs.pop("metadata", None) or {})
        metadata.update({k: v for k, v in data.items() if k not in _QUESTION_KEYS})
        kwargs.setdefault("name", "")
        return cls(metadata=metadata, **kwargs)

    @property
    def effective_type(self) -> str:
        return self.type or DEFAULT_TYPE

    # --- resolution ------------------------------------------------------------

    def _derive(self, field_name: str, answers: Mapping[str, Any]) -> Any:
        dyn: Dynamic = getattr(self, field_name)
        try:
            return dyn.resolve(answers)
        except ConfigurationError:
            raise
        except Exception as exc:
            raise DerivationError(
                f"{field_name!r} of question {self.name!r} failed: {exc}",
                question=self.name,
                field=field_name,
                cause=exc,
            ) from exc

    def is_runnable(self, answers: Mapping[str, Any]) -> bool:
        """Resolve ``when`` against *answers*."""
        return bool(self._derive("when", answers))

    def resolve(self, answers: Mapping[str, Any]) -> ResolvedQuestion:
        """Resolve message, default and choices against *answers*."""
        choices = None
        if self.choices is not None:
            choices = self._resolve_choices(answers)
        message = self._derive("message", answers)
        return ResolvedQuestion(
            name=self.name,
            type=self.effective_type,
            message=str(message) if message is not None else f"{self.name}:",
            default=self._derive("default", answers),
            choices=choices,
            paginated=self.paginated,
            page_size=self.page_size,
            metadata=dict(self.metadata),
        )

    def _resolve_choices(self, answers: Mapping[str, Any]) -> Choices:
        raw = self._derive("choices", answers) or []
        try:
            return Choices(raw, answers)
        except ConfigurationError:
            raise
        except Exception as exc:
            # A derived choice field (disabled) failed during normalization.
            raise DerivationError(
                f"'choices' of question {self.name!r} failed: {exc}",
                question=self.name,
                field="choices",
                cause=exc,
            ) from exc

    def apply_filter(self, raw: Any) -> Any:
        if self.filter is None:
            return raw
        try:
            return self.filter(raw)
        except Exception as exc:
            raise DerivationError(
                f"'filter' of question {self.name!r} failed: {exc}",
                question=self.name,
                field="filter",
                cause=exc,
            ) from exc

    def check(self, raw: Any) -> bool | str:
        """Run ``validate`` on a raw input: True accepts, False or a message rejects."""
        if self.validate is None:
            return True
        try:
            verdict = self.validate(raw)
        except Exception as exc:
            raise DerivationError(
                f"'validate' of question {self.name!r} failed: {exc}",
                question=self.name,
                field="validate",
                cause=exc,
            ) from exc
        if isinstance(verdict, str):
            return verdict or False
        return bool(verdict)
