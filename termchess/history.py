"""
Move history panel.

Accepted moves are kept in order and re-formatted into numbered turn pairs on
every append ("1. e4 e5", "2. Nf3 ..."). The text is shown through a
``Viewport`` which scrolls to the newest turn after each append. Reformatting
the whole list is linear in the game length, which stays small.
"""
from __future__ import annotations

from typing import List, Sequence


def format_turns(moves: Sequence[str], first_number: int = 1, black_first: bool = False) -> str:
    """Pair moves into numbered turns.

    >>> format_turns(["e4", "e5", "Nf3"])
    '1. e4 e5\\n2. Nf3'

    When the game started with black to move the first turn reads "1... e5".
    """
    lines = []
    number = first_number
    rest = list(moves)
    if black_first and rest:
        lines.append(f"{number}... {rest.pop(0)}")
        number += 1
    for i in range(0, len(rest), 2):
        lines.append(f"{number}. " + " ".join(rest[i:i + 2]))
        number += 1
    return "\n".join(lines)


class Viewport:
    """Fixed-height window over a list of text lines."""

    def __init__(self, height: int = 0):
        self.lines: List[str] = []
        self.offset = 0
        self.height = max(0, height)

    def set_content(self, text: str):
        self.lines = text.splitlines()
        self._clamp()

    def set_height(self, height: int):
        # zero or negative sizes degrade to an empty window
        self.height = max(0, height)
        self._clamp()

    @property
    def max_offset(self) -> int:
        return max(0, len(self.lines) - self.height)

    @property
    def at_bottom(self) -> bool:
        return self.offset >= self.max_offset

    def _clamp(self):
        self.offset = min(max(0, self.offset), self.max_offset)

    def scroll_up(self, n: int = 1):
        self.offset -= n
        self._clamp()

    def scroll_down(self, n: int = 1):
        self.offset += n
        self._clamp()

    def page_up(self):
        self.scroll_up(max(1, self.height))

    def page_down(self):
        self.scroll_down(max(1, self.height))

    def goto_bottom(self):
        self.offset = self.max_offset

    def visible(self) -> List[str]:
        return self.lines[self.offset:self.offset + self.height]


class MoveHistory:
    def __init__(self, height: int = 0, first_number: int = 1, black_first: bool = False):
        self.moves: List[str] = []
        self.first_number = first_number
        self.black_first = black_first
        self.viewport = Viewport(height)

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self):
        return iter(self.moves)

    def append(self, move: str):
        self.moves.append(move)
        self.viewport.set_content(self.text())
        self.viewport.goto_bottom()

    def text(self) -> str:
        return format_turns(self.moves, self.first_number, self.black_first)

    def reset(self, first_number: int = 1, black_first: bool = False):
        self.moves.clear()
        self.first_number = first_number
        self.black_first = black_first
        self.viewport.set_content("")
