"""CLI command: inquisitor ask -- run a JSON question file."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

import click

from inquisitor.config import UIConfig
from inquisitor.errors import ConfigurationError, ForceClosed
from inquisitor.events import EventBus, logging_listener
from inquisitor.model.question import Question
from inquisitor.registry import get_default_registry
from inquisitor.ui.prompt import PromptUI, normalize_questions


def load_questions(path: Path) -> list[Question]:
    """Read a question list from JSON: a list, or an object with a 'questions' list."""
    data: Any = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("questions", [])
    if not isinstance(data, list):
        raise click.BadParameter("expected a list of questions", param_hint="FILE")
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise click.BadParameter(
                f"question #{index + 1} must be an object, got {type(entry).__name__}",
                param_hint="FILE",
            )
    return normalize_questions(data)


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "output_path", default=None, help="Write answers JSON to this file")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", is_flag=True, help="Log session events to stderr")
def ask(file: str, output_path: str | None, no_color: bool, verbose: bool) -> None:
    """Ask the questions in FILE and print the answers as JSON."""
    try:
        questions = load_questions(Path(file))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc}", err=True)
        sys.exit(1)

    config = UIConfig.from_env()
    if no_color:
        config = replace(config, color=False)

    event_bus = EventBus()
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
        event_bus.on_all(logging_listener())

    ui = PromptUI(get_default_registry(), config=config, event_bus=event_bus)
    try:
        answers = asyncio.run(ui.run(questions))
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)
    except ForceClosed:
        click.echo("Aborted.", err=True)
        sys.exit(130)

    payload = json.dumps(answers.to_dict(), indent=2, default=str)
    if output_path:
        Path(output_path).write_text(payload + "\n", encoding="utf-8")
        click.echo(f"Answers written to {output_path}")
    else:
        click.echo(payload)
