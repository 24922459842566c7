"""Question list validation run before any terminal I/O."""

from inquisitor.validation.rules import ALL_RULES, CHOICE_TYPES
from inquisitor.validation.validator import RuleFunc, validate, validate_or_raise

__all__ = ["ALL_RULES", "CHOICE_TYPES", "RuleFunc", "validate", "validate_or_raise"]
