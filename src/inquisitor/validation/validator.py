"""Question list validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from collections.abc import Container, Sequence
from typing import Callable

from inquisitor.errors import QuestionValidationError
from inquisitor.model.diagnostic import Diagnostic
from inquisitor.model.question import Question
from inquisitor.validation.rules import ALL_RULES

RuleFunc = Callable[[Sequence[Question], Container[str]], list[Diagnostic]]


def validate(
    questions: Sequence[Question],
    types: Container[str],
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *questions*.

    *types* is anything supporting ``in`` over registered prompt type
    names, typically a :class:`~inquisitor.registry.PromptRegistry`.
    Returns the full list of diagnostics (errors, warnings, info).
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(questions, types))
    return diagnostics


def validate_or_raise(
    questions: Sequence[Question],
    types: Container[str],
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`QuestionValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(questions, types, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise QuestionValidationError(errors)
    return diagnostics
