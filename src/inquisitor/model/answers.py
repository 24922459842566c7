"""Ordered answer store shared across one prompt session."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


class Answers(Mapping[str, Any]):
    """Ordered mapping from question name to committed value.

    Read-only through the Mapping interface; only the session commits
    new entries. Committing an existing name replaces its value in place.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial) if initial else {}

    def commit(self, name: str, value: Any) -> None:
        """Store *value* under *name*."""
        self._data[name] = value

    def __getitem__(self, name: str) -> Any:
        return self._data[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy as a plain dict."""
        return dict(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Answers({self._data!r})"
