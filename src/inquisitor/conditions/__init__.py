"""Condition expression evaluator for ``when`` clauses.

Grammar:
    ConditionExpr = Clause ( '&&' Clause )*
    Clause        = Key Operator Literal | Key | '!' Key
    Operator      = '=' | '!='
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["evaluate_condition", "parse_condition", "resolve_key"]


def resolve_key(key: str, answers: Mapping[str, Any]) -> str:
    """Resolve an answer name to its string form.

    Booleans render as 'true'/'false', lists join with ','; missing keys
    resolve to the empty string.
    """
    value = answers.get(key)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def _parse_clause(clause: str) -> tuple[str, str, str]:
    """Parse a single clause like 'lang=python', 'lang!=rust', 'ok' or '!ok'.

    Returns (key, operator, literal). Bare keys use the pseudo operators
    'truthy' and 'falsy'.
    """
    clause = clause.strip()

    # Try '!=' first (longer operator) to avoid partial match on '='
    if "!=" in clause:
        idx = clause.index("!=")
        key, literal = clause[:idx].strip(), clause[idx + 2:].strip()
        operator = "!="
    elif "=" in clause:
        idx = clause.index("=")
        key, literal = clause[:idx].strip(), clause[idx + 1:].strip()
        operator = "="
    elif clause.startswith("!"):
        key, literal, operator = clause[1:].strip(), "", "falsy"
    else:
        key, literal, operator = clause, "", "truthy"

    if not key or not key.replace("_", "").replace("-", "").replace(".", "").isalnum():
        raise ValueError(f"Invalid clause: {clause!r}")
    return key, operator, literal


def parse_condition(expr: str) -> list[tuple[str, str, str]]:
    """Parse *expr* into clauses without evaluating it."""
    if not expr or not expr.strip():
        return []
    return [_parse_clause(c) for c in expr.split("&&")]


def evaluate_condition(expr: str, answers: Mapping[str, Any]) -> bool:
    """Evaluate a condition expression against the answers collected so far.

    Empty/whitespace-only expressions return True (unconditional).
    Clauses joined by '&&' are AND-combined.
    """
    for key, operator, literal in parse_condition(expr):
        resolved = resolve_key(key, answers)

        if operator == "=":
            if resolved != literal:
                return False
        elif operator == "!=":
            if resolved == literal:
                return False
        elif operator == "truthy":
            if not answers.get(key):
                return False
        elif operator == "falsy":
            if answers.get(key):
                return False

    return True
