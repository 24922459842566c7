"""Prompt registry: maps question types to prompt implementations."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Callable

from inquisitor.errors import ForceClosed, UnknownPromptTypeError
from inquisitor.model.answers import Answers
from inquisitor.prompts import BUILTIN_PROMPTS, PromptFactory


class PromptRegistry:
    """Mapping from prompt type name to prompt factory.

    A registry is also a prompt module: :meth:`prompt` and
    :meth:`prompt_async` run a session whose questions dispatch through
    this registry. Latest registration wins on a name collision.
    """

    def __init__(self, prompts: Mapping[str, PromptFactory] | None = None) -> None:
        self._prompts: dict[str, PromptFactory] = dict(
            BUILTIN_PROMPTS if prompts is None else prompts
        )

    def register(self, name: str, factory: PromptFactory) -> PromptRegistry:
        """Bind *name* to *factory*, replacing any existing binding."""
        self._prompts[name] = factory
        return self

    def restore_defaults(self) -> None:
        """Reset to exactly the built-in prompts, dropping custom registrations."""
        self._prompts = dict(BUILTIN_PROMPTS)

    def resolve(self, type_name: str) -> PromptFactory:
        """Look up the factory for *type_name*; unknown names are a configuration error."""
        try:
            return self._prompts[type_name]
        except KeyError:
            raise UnknownPromptTypeError(type_name) from None

    @property
    def prompts(self) -> Mapping[str, PromptFactory]:
        """Read-only view of the current bindings."""
        return MappingProxyType(self._prompts)

    def names(self) -> list[str]:
        return list(self._prompts)

    def __contains__(self, name: object) -> bool:
        return name in self._prompts

    def __iter__(self) -> Iterator[str]:
        return iter(self._prompts)

    # --- running sessions ------------------------------------------------------

    async def prompt_async(
        self,
        questions: Any,
        *,
        answers: Mapping[str, Any] | None = None,
        **ui_options: Any,
    ) -> Answers:
        """Ask *questions* and return the collected answers.

        Raises :class:`~inquisitor.errors.ForceClosed` if the user interrupts.
        """
        from inquisitor.ui.prompt import PromptUI

        ui = PromptUI(self, **ui_options)
        return await ui.run(questions, answers=answers)

    def prompt(
        self,
        questions: Any,
        callback: Callable[[Answers], Any] | None = None,
        *,
        answers: Mapping[str, Any] | None = None,
        **ui_options: Any,
    ) -> Answers:
        """Run a session on a fresh event loop.

        *callback* receives the answers on normal completion only. An
        interruption surfaces as ``KeyboardInterrupt``.
        """
        try:
            result = asyncio.run(self.prompt_async(questions, answers=answers, **ui_options))
        except ForceClosed:
            raise KeyboardInterrupt from None
        if callback is not None:
            callback(result)
        return result

    __call__ = prompt


def create_prompt_module() -> PromptRegistry:
    """Return a fresh registry holding only the built-in prompts."""
    return PromptRegistry()


_default_registry = PromptRegistry()


def get_default_registry() -> PromptRegistry:
    return _default_registry


def register_prompt(name: str, factory: PromptFactory) -> None:
    """Register a prompt type on the process-wide default registry."""
    _default_registry.register(name, factory)


def restore_default_prompts() -> None:
    """Reset the process-wide default registry to the built-in prompts."""
    _default_registry.restore_defaults()
