"""Terminal chess front-end on top of python-chess."""

__version__ = "0.1.0"

from .config import Settings, Theme, THEMES, get_theme
from .game import Game
from .history import MoveHistory, Viewport, format_turns
from .input_field import InputState, MoveInput
from .render import BOARD_LINES, Line, Span, render_board, render_text
from .rules import InvalidMoveError, Outcome

__all__ = [
    "Settings",
    "Theme",
    "THEMES",
    "get_theme",
    "Game",
    "MoveHistory",
    "Viewport",
    "format_turns",
    "InputState",
    "MoveInput",
    "BOARD_LINES",
    "Line",
    "Span",
    "render_board",
    "render_text",
    "InvalidMoveError",
    "Outcome",
]
