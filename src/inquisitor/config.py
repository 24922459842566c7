from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class UIConfig:
    prefix: str = "?"
    invalid_message: str = "Please enter a valid value"
    page_size: int = 7
    columns: int | None = None  # None: measure the terminal
    color: bool = True
    handle_signals: bool = True

    @classmethod
    def from_env(cls) -> UIConfig:
        """Build a config honouring NO_COLOR, INQUISITOR_PAGE_SIZE and COLUMNS."""
        kwargs: dict = {}
        if os.environ.get("NO_COLOR"):
            kwargs["color"] = False
        page_size = os.environ.get("INQUISITOR_PAGE_SIZE", "")
        if page_size.isdigit() and int(page_size) > 0:
            kwargs["page_size"] = int(page_size)
        columns = os.environ.get("COLUMNS", "")
        if columns.isdigit() and int(columns) > 0:
            kwargs["columns"] = int(columns)
        return cls(**kwargs)
