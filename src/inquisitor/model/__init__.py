"""Data model: questions, choices, answers, keys and diagnostics."""

from inquisitor.model.answers import Answers
from inquisitor.model.choice import Choice, ChoiceItem, Choices, Separator, exclude, normalize_choice
from inquisitor.model.diagnostic import Diagnostic, Severity
from inquisitor.model.key import Key, key_from_press
from inquisitor.model.question import (
    DEFAULT_TYPE,
    Derived,
    Dynamic,
    Fixed,
    Question,
    ResolvedQuestion,
    condition,
    dynamic,
)

__all__ = [
    "Answers",
    "Choice",
    "ChoiceItem",
    "Choices",
    "Separator",
    "exclude",
    "normalize_choice",
    "Diagnostic",
    "Severity",
    "Key",
    "key_from_press",
    "DEFAULT_TYPE",
    "Derived",
    "Dynamic",
    "Fixed",
    "Question",
    "ResolvedQuestion",
    "condition",
    "dynamic",
]
