"""Built-in prompt implementations and the prompt contract."""

from inquisitor.prompts.base import PENDING, BasePrompt, Prompt, PromptFactory
from inquisitor.prompts.checkbox import CheckboxPrompt
from inquisitor.prompts.confirm import ConfirmPrompt
from inquisitor.prompts.input import InputPrompt
from inquisitor.prompts.list import ListPrompt
from inquisitor.prompts.paginator import Paginator
from inquisitor.prompts.password import PasswordPrompt
from inquisitor.prompts.rawlist import RawListPrompt

BUILTIN_PROMPTS: dict[str, PromptFactory] = {
    "input": InputPrompt,
    "password": PasswordPrompt,
    "confirm": ConfirmPrompt,
    "list": ListPrompt,
    "rawlist": RawListPrompt,
    "checkbox": CheckboxPrompt,
}

__all__ = [
    "BUILTIN_PROMPTS",
    "PENDING",
    "BasePrompt",
    "Prompt",
    "PromptFactory",
    "CheckboxPrompt",
    "ConfirmPrompt",
    "InputPrompt",
    "ListPrompt",
    "Paginator",
    "PasswordPrompt",
    "RawListPrompt",
]
