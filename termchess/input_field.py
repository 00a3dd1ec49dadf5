"""Bounded text field for typing a move."""
from __future__ import annotations

from enum import Enum


class InputState(Enum):
    EMPTY = "empty"
    ACCUMULATING = "accumulating"
    SUBMITTED = "submitted"


class MoveInput:
    """Keystroke buffer for one move.

    The buffer never grows past ``char_limit``. A failed submission leaves it
    untouched so the user can fix the move; a successful one calls ``clear``.
    """

    def __init__(self, char_limit: int = 10):
        if char_limit < 1:
            raise ValueError(f"char_limit must be at least 1, got {char_limit}")
        self.char_limit = char_limit
        self._buffer = ""
        self.state = InputState.EMPTY

    @property
    def value(self) -> str:
        return self._buffer

    def __len__(self) -> int:
        return len(self._buffer)

    def insert(self, ch: str) -> bool:
        """Append one printable character; return False if it was dropped."""
        if len(ch) != 1 or not ch.isprintable() or ch.isspace():
            return False
        if len(self._buffer) >= self.char_limit:
            return False
        self._buffer += ch
        self.state = InputState.ACCUMULATING
        return True

    def backspace(self) -> bool:
        if not self._buffer:
            return False
        self._buffer = self._buffer[:-1]
        self.state = InputState.ACCUMULATING if self._buffer else InputState.EMPTY
        return True

    def take(self) -> str:
        return self._buffer

    def clear(self):
        self._buffer = ""
        self.state = InputState.SUBMITTED
