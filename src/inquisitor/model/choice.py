"""Choice normalization: strings, mappings and separators to canonical records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

from inquisitor.errors import InvalidChoiceError

DEFAULT_SEPARATOR_LINE = "─" * 14

# Marks a Choice built without a value; None is a legitimate stored value.
_NO_VALUE: Any = object()


class Separator:
    """Non-selectable, display-only entry in a choice list."""

    type = "separator"

    def __init__(self, line: str | None = None) -> None:
        self.line = line if line is not None else DEFAULT_SEPARATOR_LINE

    def __str__(self) -> str:
        return self.line

    def __repr__(self) -> str:
        return f"Separator({self.line!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Separator) and other.line == self.line

    def __hash__(self) -> int:
        return hash(("separator", self.line))

    @staticmethod
    def exclude(obj: Any) -> bool:
        """Return False for separators, True for anything else."""
        return not is_separator(obj)


@dataclass(frozen=True)
class Choice:
    """A selectable choice.

    Attributes:
        name: Text displayed in the list.
        value: Value stored in the answers (defaults to *name*).
        short: Text shown once answered (defaults to *name*).
        key: Optional shortcut key.
        checked: Pre-selected in multi-select prompts.
        disabled: False, True, or a reason string.
        extra: Free-form data carried along for custom prompts.
    """

    name: str
    value: Any = _NO_VALUE
    short: str = ""
    key: str = ""
    checked: bool = False
    disabled: bool | str = False
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    type = "choice"

    def __post_init__(self) -> None:
        if self.value is _NO_VALUE:
            object.__setattr__(self, "value", self.name)
        if not self.short:
            object.__setattr__(self, "short", self.name)

    @property
    def is_disabled(self) -> bool:
        return bool(self.disabled)


ChoiceItem = Choice | Separator


def is_separator(obj: Any) -> bool:
    if isinstance(obj, Separator):
        return True
    return isinstance(obj, Mapping) and obj.get("type") == "separator"


def exclude(obj: Any) -> bool:
    """Predicate for filtering separators out of a choice list."""
    return Separator.exclude(obj)


def choice_shape_error(raw: Any) -> str | None:
    """Describe what is wrong with the shape of a raw choice entry, or None.

    Never calls derived fields, so it is safe to run before any answers exist.
    """
    if isinstance(raw, (str, Choice, Separator)):
        return None
    if not isinstance(raw, Mapping):
        return f"Choice must be a string, mapping or Separator, got {type(raw).__name__}"
    if raw.get("type") == "separator" or "name" in raw or "value" in raw:
        return None
    return "Choice mapping needs a 'name' or a 'value'"


def normalize_choice(raw: Any, answers: Mapping[str, Any] | None = None) -> ChoiceItem:
    """Turn one raw choice entry into a Choice or Separator.

    Accepts a plain string, a Choice, a Separator, or a mapping with at
    least one of ``name``/``value``. A mapping tagged ``type: separator``
    becomes a Separator. A callable ``disabled`` is resolved against
    *answers*.
    """
    problem = choice_shape_error(raw)
    if problem:
        raise InvalidChoiceError(problem, entry=raw)
    if isinstance(raw, (Choice, Separator)):
        return raw
    if isinstance(raw, str):
        return Choice(name=raw, value=raw, short=raw)
    if raw.get("type") == "separator":
        return Separator(raw.get("line"))

    value = raw["value"] if "value" in raw else raw["name"]
    name = raw.get("name")
    if name is None:
        name = value
    name = str(name)
    disabled = raw.get("disabled", False)
    if callable(disabled):
        disabled = disabled(answers if answers is not None else {})
    if not isinstance(disabled, str):
        disabled = bool(disabled)

    known = {"name", "value", "short", "key", "checked", "disabled", "type"}
    extra = dict(raw.get("extra") or {})
    extra.update({k: v for k, v in raw.items() if k not in known and k != "extra"})
    return Choice(
        name=name,
        value=value,
        short=str(raw.get("short") or name),
        key=str(raw.get("key") or ""),
        checked=bool(raw.get("checked", False)),
        disabled=disabled,
        extra=extra,
    )


class Choices:
    """Normalized choice list with helpers over the selectable subset."""

    def __init__(self, raw: Iterable[Any], answers: Mapping[str, Any] | None = None) -> None:
        self._items: list[ChoiceItem] = [normalize_choice(c, answers) for c in raw]

    @property
    def real_choices(self) -> list[Choice]:
        """Choices that can be navigated to and selected."""
        return [c for c in self._items if exclude(c) and not c.is_disabled]  # type: ignore[union-attr]

    @property
    def real_length(self) -> int:
        return len(self.real_choices)

    def get_choice(self, index: int) -> Choice:
        """Return a selectable choice by its position among real choices."""
        return self.real_choices[index]

    def get(self, index: int) -> ChoiceItem:
        """Return any item (separator included) by raw position."""
        return self._items[index]

    def index_of(self, item: ChoiceItem) -> int:
        return self._items.index(item)

    def pluck(self, attr: str) -> list[Any]:
        return [getattr(c, attr) for c in self.real_choices]

    def where(self, predicate: Callable[[Choice], bool] | None = None, **attrs: Any) -> list[Choice]:
        matches = []
        for choice in self.real_choices:
            if predicate is not None and not predicate(choice):
                continue
            if all(getattr(choice, k) == v for k, v in attrs.items()):
                matches.append(choice)
        return matches

    def __iter__(self) -> Iterator[ChoiceItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Choices({self._items!r})"
