"""
Line-mode front-end.

Prints the board, prompts ``White>`` or ``Black>`` and reads one move per
line until the game ends or input runs out, then prints the result. The same
command handling drives ``run_script`` so that a list of moves can be played
without a terminal (``--script`` / ``--demo``).
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Iterable, List, Optional, TextIO

from .config import Settings
from .game import Game
from .render import render_board, render_text

HELP = """
Commands:
  - Enter a move in UCI (e2e4, g1f3) or SAN (e4, Nf3, O-O, exd5, e8=Q, etc.)
  - moves <square>       : list legal moves from that square (e.g., `moves e2`)
  - fen                  : print current FEN
  - new                  : start a new game
  - help                 : show this help
  - exit                 : quit
"""


def _clear_screen(enabled: bool):
    if not enabled:
        return
    os.system('cls' if os.name == 'nt' else 'clear')


def print_board(game: Game, settings: Settings, out: TextIO):
    theme = settings.board_theme
    lines = render_board(game.board, theme=theme, flip=settings.flip)
    print(render_text(lines, theme, color=settings.use_color), file=out)


def handle_line(game: Game, cmd: str, out: TextIO) -> bool:
    """Run one command or move. Return False when the user asked to exit."""
    if cmd in {"exit", "quit"}:
        return False
    if cmd in {"help", "?"}:
        print(HELP, file=out)
        return True
    if cmd == "fen":
        print(game.fen(), file=out)
        return True
    if cmd == "new":
        game.new_game()
        return True
    if cmd.startswith("moves"):
        parts = cmd.split()
        if len(parts) != 2:
            print("Usage: moves <square>", file=out)
            return True
        moves = game.legal_moves_from(parts[1])
        if moves:
            print("Legal from", parts[1] + ":", ", ".join(moves), file=out)
        else:
            print("No legal moves from", parts[1], file=out)
        return True

    # Otherwise try to interpret as a move
    # a finished game ignores the move and leaves error empty
    if not game.submit(cmd) and game.error:
        print("Invalid move:", game.error, file=out)
    return True


def run_interactive(game: Game, settings: Settings, stdin: Optional[TextIO] = None,
                    stdout: Optional[TextIO] = None):
    stdin = stdin or sys.stdin
    out = stdout or sys.stdout
    _clear_screen(settings.clear_screen)

    while not game.is_over:
        print_board(game, settings, out)
        print(game.status_line(), file=out)
        print(game.prompt, end="", file=out)
        out.flush()

        line = stdin.readline()
        if not line:
            logging.info("Input closed")
            print(file=out)
            break

        _clear_screen(settings.clear_screen)
        cmd = line.strip()
        if not cmd:
            continue
        if not handle_line(game, cmd, out):
            break

    print_board(game, settings, out)
    print(game.result_line(), file=out)


def run_script(game: Game, commands: Iterable[str], stdout: Optional[TextIO] = None):
    """Execute commands/moves without prompting (safe for no-stdin environments)."""
    out = stdout or sys.stdout
    for raw in commands:
        if game.is_over:
            break
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        if not handle_line(game, line, out):
            break


def demo_moves() -> List[str]:
    # 1. e4 e5 2. Bc4 Nc6 3. Qh5 Nf6 4. Qxf7#
    return ["e4", "e5", "Bc4", "Nc6", "Qh5", "Nf6", "Qxf7#"]
