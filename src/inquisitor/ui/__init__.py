"""Terminal UI layer: base input handling, bottom bar, screen redraw, sessions."""

from inquisitor.ui.base import BaseUI
from inquisitor.ui.bottom_bar import BottomBar, BottomBarLogHandler
from inquisitor.ui.prompt import PromptUI, normalize_questions
from inquisitor.ui.screen import ScreenManager, line_count, visible_width

Prompt = PromptUI

__all__ = [
    "BaseUI",
    "BottomBar",
    "BottomBarLogHandler",
    "Prompt",
    "PromptUI",
    "ScreenManager",
    "line_count",
    "normalize_questions",
    "visible_width",
]
