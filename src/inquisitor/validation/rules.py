"""Validation rules for question lists.

Each rule is a function taking the question list and the set of
registered prompt types, returning a list of Diagnostic objects.
"""

from __future__ import annotations

from collections.abc import Container, Sequence

from inquisitor.conditions import parse_condition
from inquisitor.model.choice import choice_shape_error
from inquisitor.model.diagnostic import Diagnostic, Severity
from inquisitor.model.question import Derived, Fixed, Question

# Prompt types that cannot be asked without a choice list.
CHOICE_TYPES = frozenset({"list", "rawlist", "checkbox"})


def check_name_present(questions: Sequence[Question], types: Container[str]) -> list[Diagnostic]:
    """Every question needs a non-empty name to store its answer under."""
    diagnostics: list[Diagnostic] = []
    for index, q in enumerate(questions):
        if not q.name or not str(q.name).strip():
            diagnostics.append(
                Diagnostic(
                    rule="check_name_present",
                    severity=Severity.ERROR,
                    message=f"Question #{index + 1} has no name.",
                    fix="Give the question a unique 'name'.",
                )
            )
    return diagnostics


def check_type_registered(questions: Sequence[Question], types: Container[str]) -> list[Diagnostic]:
    """The question type (default 'input') must resolve to a registered prompt."""
    diagnostics: list[Diagnostic] = []
    for q in questions:
        if q.effective_type not in types:
            diagnostics.append(
                Diagnostic(
                    rule="check_type_registered",
                    severity=Severity.ERROR,
                    message=f"Unknown prompt type '{q.effective_type}'.",
                    question=q.name,
                    fix="Register the prompt type before running the session.",
                )
            )
    return diagnostics


def check_duplicate_names(questions: Sequence[Question], types: Container[str]) -> list[Diagnostic]:
    """A repeated name overwrites the earlier answer."""
    seen: set[str] = set()
    diagnostics: list[Diagnostic] = []
    for q in questions:
        if not q.name:
            continue
        if q.name in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_duplicate_names",
                    severity=Severity.WARNING,
                    message=f"Name '{q.name}' is used more than once; the later answer wins.",
                    question=q.name,
                )
            )
        seen.add(q.name)
    return diagnostics


def check_choices(questions: Sequence[Question], types: Container[str]) -> list[Diagnostic]:
    """Choice-based types need choices, and literal choice entries must be well formed."""
    diagnostics: list[Diagnostic] = []
    for q in questions:
        if q.choices is None:
            if q.effective_type in CHOICE_TYPES:
                diagnostics.append(
                    Diagnostic(
                        rule="check_choices",
                        severity=Severity.ERROR,
                        message=f"Prompt type '{q.effective_type}' requires choices.",
                        question=q.name,
                        fix="Add a 'choices' list or function.",
                    )
                )
            continue
        if not isinstance(q.choices, Fixed):
            continue
        for entry in q.choices.value or []:
            # Shape only: derived fields such as disabled need the session answers.
            problem = choice_shape_error(entry)
            if problem:
                diagnostics.append(
                    Diagnostic(
                        rule="check_choices",
                        severity=Severity.ERROR,
                        message=f"Invalid choice {entry!r}: {problem}",
                        question=q.name,
                    )
                )
    return diagnostics


def check_when_syntax(questions: Sequence[Question], types: Container[str]) -> list[Diagnostic]:
    """``when`` expression strings must parse."""
    diagnostics: list[Diagnostic] = []
    for q in questions:
        if not isinstance(q.when, Derived) or q.when.expression is None:
            continue
        try:
            parse_condition(q.when.expression)
        except ValueError as exc:
            diagnostics.append(
                Diagnostic(
                    rule="check_when_syntax",
                    severity=Severity.ERROR,
                    message=f"Invalid 'when' expression '{q.when.expression}': {exc}",
                    question=q.name,
                    fix="Use 'key', '!key', 'key=value' or 'key!=value' joined by '&&'.",
                )
            )
    return diagnostics


def check_page_size(questions: Sequence[Question], types: Container[str]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for q in questions:
        if q.page_size is not None and q.page_size < 1:
            diagnostics.append(
                Diagnostic(
                    rule="check_page_size",
                    severity=Severity.ERROR,
                    message=f"page_size must be positive, got {q.page_size}.",
                    question=q.name,
                )
            )
    return diagnostics


ALL_RULES = [
    check_name_present,
    check_type_registered,
    check_duplicate_names,
    check_choices,
    check_when_syntax,
    check_page_size,
]
