"""CLI command: inquisitor validate -- check a question file without asking it."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from inquisitor.cli.ask import load_questions
from inquisitor.model.diagnostic import Severity
from inquisitor.registry import get_default_registry
from inquisitor.validation import validate as run_validate


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def validate(file: str) -> None:
    """Validate a JSON question file.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    path = Path(file)

    try:
        questions = load_questions(path)
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(questions, get_default_registry())

    if not diagnostics:
        click.echo(f"OK: {path.name} is valid ({len(questions)} question(s))")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
