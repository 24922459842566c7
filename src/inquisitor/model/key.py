"""Structured keypress events built from prompt_toolkit key presses."""

from __future__ import annotations

from dataclasses import dataclass

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys


@dataclass(frozen=True)
class Key:
    """One keypress as dispatched to the active prompt."""

    sequence: str
    name: str
    meta: bool = False
    shift: bool = False
    ctrl: bool = False

    @property
    def is_interrupt(self) -> bool:
        return self.ctrl and self.name == "c"


_NAMED_KEYS: dict[Keys, str] = {
    Keys.ControlM: "enter",
    Keys.ControlJ: "enter",
    Keys.ControlI: "tab",
    Keys.BackTab: "tab",
    Keys.ControlH: "backspace",
    Keys.Escape: "escape",
    Keys.Delete: "delete",
    Keys.PageUp: "pageup",
    Keys.PageDown: "pagedown",
}


def key_from_press(key_press: KeyPress) -> Key:
    """Convert a prompt_toolkit KeyPress into a :class:`Key`.

    Named keys keep their logical name; ``c-x`` and ``s-up`` style names
    are split into modifier flags. Printable characters use the lowercase
    character as name, with ``shift`` set for uppercase letters.
    """
    data = key_press.data
    key = key_press.key
    if isinstance(key, Keys):
        if key in _NAMED_KEYS:
            return Key(sequence=data, name=_NAMED_KEYS[key], shift=key is Keys.BackTab)
        name = key.value
        ctrl = name.startswith("c-")
        if ctrl:
            name = name[2:]
        shift = name.startswith("s-")
        if shift:
            name = name[2:]
        return Key(sequence=data, name=name, ctrl=ctrl, shift=shift)

    if key == " ":
        return Key(sequence=data or key, name="space")
    return Key(sequence=data or key, name=key.lower(), shift=key.isupper())
