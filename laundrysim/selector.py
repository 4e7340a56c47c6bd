"""Choosing a washing mode with up, down and enter keys."""

from __future__ import annotations

from enum import Enum

from laundrysim.modes import MODES


class Key(str, Enum):
    """Keys understood by the selector, with their console key codes."""

    UP = "H"
    DOWN = "P"
    ENTER = "\r"


class ModeSelect:
    """Menu of washing modes moved through one key press at a time."""

    def __init__(self, modes=MODES, on_change=None):
        self.modes = tuple(modes)
        if not self.modes:
            raise ValueError("at least one mode is required")
        self.index = 0
        self.on_change = on_change

    @property
    def current_mode(self) -> str:
        """Name of the highlighted mode."""
        return self.modes[self.index].name

    def press(self, key) -> bool:
        """Handle one key; return True when the selection is confirmed."""
        try:
            key = Key(key)
        except ValueError:
            return False
        if key is Key.ENTER:
            return True
        if key is Key.UP and self.index > 0:
            self.index -= 1
        elif key is Key.DOWN and self.index < len(self.modes) - 1:
            self.index += 1
        else:
            return False
        if self.on_change is not None:
            self.on_change(self.current_mode)
        return False

    def select(self, keys) -> str:
        """Consume keys up to and including Enter; return the chosen mode name."""
        for key in keys:
            if self.press(key):
                return self.current_mode
        raise ValueError("key sequence ended before the mode was confirmed")

    def strategy(self):
        """The strategy of the highlighted mode."""
        return self.modes[self.index]