"""
Full-screen curses front-end.

Layout::

    termchess
        a  b  c ...          Moves
    8  ♜  ♞  ♝ ...  8        1. e4 e5
    ...                      2. Nf3
    White to move
    <error from the rules library>
    White> Nc6_

``ChessApp.handle_key`` owns every state change and never touches the screen,
so the key handling can be exercised without a terminal. ``ChessApp.main`` is
the curses loop: read a key, dispatch it, redraw.
"""
from __future__ import annotations

import curses
import logging
import os
from typing import Optional, Union

from .config import Settings, Theme
from .game import Game
from .input_field import MoveInput
from .render import BOARD_LINES, LABEL, LIGHT, NATURAL_WIDTH, PAD, Span, render_board

Key = Union[str, int]

# ── Keys ────────────────────────────────────────────────────────────
KEY_ESCAPE = "\x1b"
KEY_CTRL_C = "\x03"
KEY_CTRL_N = "\x0e"
QUIT_KEYS = {KEY_ESCAPE, KEY_CTRL_C}
ENTER_KEYS = {"\n", "\r", curses.KEY_ENTER}
BACKSPACE_KEYS = {"\x7f", "\b", curses.KEY_BACKSPACE}

# ── Color pair IDs ──────────────────────────────────────────────────
PAIR_LABEL = 1
PAIR_TITLE = 2
PAIR_STATUS = 3
PAIR_ERROR = 4
PAIR_LIGHT = 5
PAIR_DARK = 6
PAIR_WHITE_ON_LIGHT = 7
PAIR_BLACK_ON_LIGHT = 8
PAIR_WHITE_ON_DARK = 9
PAIR_BLACK_ON_DARK = 10

# ── Layout ──────────────────────────────────────────────────────────
MARGIN_X = 2
TITLE_Y = 0
BOARD_Y = 2
STATUS_Y = BOARD_Y + BOARD_LINES + 1
ERROR_Y = STATUS_Y + 1
PROMPT_Y = ERROR_Y + 2
HELP_Y = PROMPT_Y + 2
PANEL_GAP = 3

HELP_TEXT = "Enter: play  Esc/Ctrl-C: quit  PgUp/PgDn: moves  Ctrl-N: new game"


class TerminalError(RuntimeError):
    """The terminal could not be put into full-screen mode."""


def init_colors(theme: Theme):
    """Initialize curses color pairs for ``theme``."""
    curses.start_color()
    curses.use_default_colors()
    light = theme.light if theme.light < curses.COLORS else theme.light_fallback
    dark = theme.dark if theme.dark < curses.COLORS else theme.dark_fallback
    curses.init_pair(PAIR_LABEL, theme.label, -1)
    curses.init_pair(PAIR_TITLE, curses.COLOR_CYAN, -1)
    curses.init_pair(PAIR_STATUS, curses.COLOR_WHITE, -1)
    curses.init_pair(PAIR_ERROR, curses.COLOR_RED, -1)
    curses.init_pair(PAIR_LIGHT, theme.black, light)
    curses.init_pair(PAIR_DARK, theme.white, dark)
    curses.init_pair(PAIR_WHITE_ON_LIGHT, theme.white, light)
    curses.init_pair(PAIR_BLACK_ON_LIGHT, theme.black, light)
    curses.init_pair(PAIR_WHITE_ON_DARK, theme.white, dark)
    curses.init_pair(PAIR_BLACK_ON_DARK, theme.black, dark)


def span_attr(span: Span) -> int:
    if span.role == PAD:
        return 0
    if span.role == LABEL:
        return curses.color_pair(PAIR_LABEL) | curses.A_BOLD
    light = span.role == LIGHT
    if span.owner is None:
        return curses.color_pair(PAIR_LIGHT if light else PAIR_DARK)
    if span.owner:
        pair = PAIR_WHITE_ON_LIGHT if light else PAIR_WHITE_ON_DARK
    else:
        pair = PAIR_BLACK_ON_LIGHT if light else PAIR_BLACK_ON_DARK
    return curses.color_pair(pair) | curses.A_BOLD


def safe_addstr(win, y, x, text, attr=0):
    """addstr that silently ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


class ChessApp:
    def __init__(self, settings: Settings, game: Optional[Game] = None):
        self.settings = settings
        self.theme = settings.board_theme
        self.game = game or Game()
        self.input = MoveInput(settings.char_limit)
        self.height = 0
        self.width = 0
        self.running = True

    # -- Geometry ---------------------------------------------------------------
    def resize(self, height: int, width: int):
        # zero or negative sizes degrade to a blank screen
        self.height = max(0, height)
        self.width = max(0, width)
        # the panel stops above the status line; rows below belong to status/prompt/help
        self.game.history.viewport.set_height(min(self.height, STATUS_Y) - (BOARD_Y + 1))

    @property
    def panel_width(self) -> int:
        return self.settings.history_width if self.settings.show_history else 0

    @property
    def board_width(self) -> int:
        """Columns available to the board, used to centre it."""
        if not self.panel_width:
            return self.width - 2 * MARGIN_X
        return self.width - 2 * MARGIN_X - PANEL_GAP - self.panel_width

    # -- Events -----------------------------------------------------------------
    def handle_key(self, key: Key) -> bool:
        """Apply one key press. Return False once the app should exit."""
        if key in QUIT_KEYS:
            self.running = False
            return False
        if key == KEY_CTRL_N:
            self.new_game()
        elif key in ENTER_KEYS:
            self.submit()
        elif key in BACKSPACE_KEYS:
            self.input.backspace()
        elif key == curses.KEY_PPAGE:
            self.game.history.viewport.page_up()
        elif key == curses.KEY_NPAGE:
            self.game.history.viewport.page_down()
        elif isinstance(key, str):
            self.input.insert(key)
        return True

    def submit(self):
        if self.game.is_over:
            return
        if self.game.submit(self.input.take()):
            self.input.clear()

    def new_game(self):
        self.game.new_game()
        self.input = MoveInput(self.settings.char_limit)
        self.resize(self.height, self.width)

    # -- Drawing ----------------------------------------------------------------
    def draw(self, stdscr):
        stdscr.erase()
        x0 = MARGIN_X
        safe_addstr(stdscr, TITLE_Y, x0, "termchess", curses.color_pair(PAIR_TITLE) | curses.A_BOLD)

        lines = render_board(self.game.board, self.board_width, self.theme, self.settings.flip)
        for i, line in enumerate(lines):
            x = x0
            for span in line.spans:
                safe_addstr(stdscr, BOARD_Y + i, x, span.text, span_attr(span))
                x += len(span.text)

        if self.panel_width:
            self.draw_history(stdscr, x0 + max(NATURAL_WIDTH, self.board_width) + PANEL_GAP)

        status_attr = curses.color_pair(PAIR_STATUS)
        if self.game.is_over:
            status_attr = curses.color_pair(PAIR_TITLE) | curses.A_BOLD
        safe_addstr(stdscr, STATUS_Y, x0, self.game.status_line(), status_attr)
        if self.game.error:
            safe_addstr(stdscr, ERROR_Y, x0, f"Invalid move: {self.game.error}",
                        curses.color_pair(PAIR_ERROR) | curses.A_BOLD)

        prompt = f"{self.game.prompt} {self.input.value}"
        safe_addstr(stdscr, PROMPT_Y, x0, prompt, curses.A_BOLD)
        safe_addstr(stdscr, HELP_Y, x0, HELP_TEXT, curses.A_DIM)
        if 0 <= PROMPT_Y < self.height and x0 + len(prompt) < self.width:
            stdscr.move(PROMPT_Y, x0 + len(prompt))
        stdscr.refresh()

    def draw_history(self, stdscr, x: int):
        width = self.panel_width
        safe_addstr(stdscr, BOARD_Y, x, "Moves".ljust(width), curses.color_pair(PAIR_LABEL) | curses.A_BOLD)
        for i, text in enumerate(self.game.history.viewport.visible()):
            safe_addstr(stdscr, BOARD_Y + 1 + i, x, text[:width])

    # -- Loop -------------------------------------------------------------------
    def main(self, stdscr):
        """Main curses loop, run under ``curses.wrapper``."""
        curses.raw()
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        if self.settings.use_color and curses.has_colors():
            init_colors(self.theme)
        stdscr.keypad(True)
        if self.settings.mouse:
            curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        self.resize(*stdscr.getmaxyx())

        while self.running:
            self.draw(stdscr)
            try:
                key = stdscr.get_wch()
            except curses.error:
                continue
            if key == curses.KEY_RESIZE:
                self.resize(*stdscr.getmaxyx())
                continue
            if key == curses.KEY_MOUSE:
                # mouse events are reported but not used
                try:
                    curses.getmouse()
                except curses.error:
                    pass
                continue
            self.handle_key(key)


def run(settings: Settings, game: Optional[Game] = None) -> Game:
    """Run the full-screen UI until the user quits and return the game.

    Raises TerminalError when curses cannot take over the terminal.
    """
    app = ChessApp(settings, game)
    # keep Esc responsive; curses waits a full second by default
    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(app.main)
    except curses.error as e:
        logging.error("Terminal setup failed: %s", e)
        raise TerminalError(f"could not start the terminal UI: {e}") from e
    return app.game
