"""
Settings and board themes.

`Settings` follows the small mutable dataclass the terminal game has always
used, filled from ``TERMCHESS_*`` environment variables and then overridden by
command-line flags (see ``termchess.cli``). Themes are immutable and looked up
by name; they are passed around explicitly rather than read from globals.
"""
from __future__ import annotations

import curses
import logging
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import chess

# --------- Themes ---------

UNICODE_GLYPHS: Dict[str, str] = {
    'P': '♙', 'N': '♘', 'B': '♗', 'R': '♖', 'Q': '♕', 'K': '♔',
    'p': '♟', 'n': '♞', 'b': '♝', 'r': '♜', 'q': '♛', 'k': '♚',
}

ASCII_GLYPHS: Dict[str, str] = {s: s for s in "PNBRQKpnbrqk"}


@dataclass(frozen=True)
class Theme:
    """Glyphs and colours for one board style.

    Colours are curses colour numbers. Values of 8 and above need a 256-colour
    terminal; the ``*_fallback`` fields are used when fewer colours exist.
    """
    name: str
    glyphs: Mapping[str, str]
    empty: str
    light: int
    dark: int
    white: int
    black: int
    label: int
    light_fallback: int = curses.COLOR_WHITE
    dark_fallback: int = curses.COLOR_BLACK

    def glyph(self, piece: Optional[chess.Piece]) -> str:
        if piece is None:
            return self.empty
        symbol = piece.symbol()
        return self.glyphs.get(symbol, symbol)


THEMES: Dict[str, Theme] = {
    "classic": Theme(
        name="classic",
        glyphs=UNICODE_GLYPHS,
        empty=" ",
        light=curses.COLOR_YELLOW,
        dark=curses.COLOR_GREEN,
        white=curses.COLOR_WHITE,
        black=curses.COLOR_BLACK,
        label=curses.COLOR_CYAN,
    ),
    "brown": Theme(
        name="brown",
        glyphs=UNICODE_GLYPHS,
        empty=" ",
        light=223,
        dark=94,
        white=curses.COLOR_WHITE,
        black=curses.COLOR_BLACK,
        label=curses.COLOR_YELLOW,
        light_fallback=curses.COLOR_YELLOW,
        dark_fallback=curses.COLOR_RED,
    ),
    "ascii": Theme(
        name="ascii",
        glyphs=ASCII_GLYPHS,
        empty=".",
        light=curses.COLOR_WHITE,
        dark=curses.COLOR_BLUE,
        white=curses.COLOR_RED,
        black=curses.COLOR_BLACK,
        label=curses.COLOR_YELLOW,
    ),
}

DEFAULT_THEME = "classic"


def get_theme(name: str) -> Theme:
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(f"unknown theme {name!r} (choose from {', '.join(sorted(THEMES))})") from None


# --------- Settings ---------

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean, got {raw!r}")


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    theme: str = DEFAULT_THEME
    show_history: bool = True
    flip: bool = False  # draw black at the bottom
    char_limit: int = 10  # longest SAN, e.g. "Qh4xe1+", is 7 characters
    history_width: int = 18
    mouse: bool = True
    use_color: bool = True
    clear_screen: bool = True
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        get_theme(self.theme)
        if self.char_limit < 1:
            raise ValueError(f"char_limit must be at least 1, got {self.char_limit}")
        if self.history_width < 0:
            raise ValueError(f"history_width must not be negative, got {self.history_width}")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        use_color = _env_bool(env, "TERMCHESS_COLOR", True)
        if env.get("NO_COLOR"):
            use_color = False
        return cls(
            theme=env.get("TERMCHESS_THEME") or DEFAULT_THEME,
            show_history=_env_bool(env, "TERMCHESS_HISTORY", True),
            flip=_env_bool(env, "TERMCHESS_FLIP", False),
            char_limit=_env_int(env, "TERMCHESS_CHAR_LIMIT", 10),
            history_width=_env_int(env, "TERMCHESS_HISTORY_WIDTH", 18),
            mouse=_env_bool(env, "TERMCHESS_MOUSE", True),
            use_color=use_color,
            clear_screen=_env_bool(env, "TERMCHESS_CLEAR", True),
            log_level=env.get("TERMCHESS_LOG_LEVEL") or "WARNING",
            log_file=env.get("TERMCHESS_LOG_FILE") or None,
        )

    @property
    def board_theme(self) -> Theme:
        return get_theme(self.theme)
