"""Shared fixtures: scripted terminal input and captured output."""

import asyncio
import io

import pytest
from prompt_toolkit.input import create_pipe_input

from inquisitor.config import UIConfig
from inquisitor.registry import create_prompt_module, restore_default_prompts
from inquisitor.ui.prompt import PromptUI

# Upper bound for one scripted session; a missing keypress fails instead of hanging.
SESSION_TIMEOUT = 5

PLAIN = UIConfig(color=False, handle_signals=False, columns=80)


@pytest.fixture(autouse=True)
def _restore_default_registry():
    yield
    restore_default_prompts()


@pytest.fixture
def run_session():
    """Run questions against scripted keypresses.

    Returns ``(answers, output_text)``; extra keyword arguments go to
    :class:`PromptUI`.
    """

    def _run(questions, keys="", *, answers=None, prompts=None, **ui_options):
        output = io.StringIO()
        ui_options.setdefault("config", PLAIN)
        with create_pipe_input() as inp:
            inp.send_text(keys)
            ui = PromptUI(
                prompts if prompts is not None else create_prompt_module(),
                input=inp,
                output=output,
                **ui_options,
            )
            result = asyncio.run(
                asyncio.wait_for(ui.run(questions, answers=answers), SESSION_TIMEOUT)
            )
        return result, output.getvalue()

    return _run
