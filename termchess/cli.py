"""
Command-line entry point.

    termchess                      # full-screen UI when attached to a terminal
    termchess --mode plain         # prompt-per-move line mode
    termchess --demo               # play Scholar's Mate without any input
    termchess --script moves.txt   # one move or command per line
    termchess --run-tests          # run the bundled unit tests

Settings come from TERMCHESS_* environment variables first; flags given on
the command line win.
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
import unittest
from typing import List, Optional

from . import __version__
from .app import TerminalError
from .app import run as run_tui
from .config import THEMES, Settings
from .console import demo_moves, print_board, run_interactive, run_script
from .game import Game

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="termchess", description="Two-player chess in the terminal")
    p.add_argument('--mode', choices=['auto', 'tui', 'plain'], default='auto',
                   help='Full-screen UI, line mode, or pick by whether a terminal is attached')
    p.add_argument('--theme', choices=sorted(THEMES), help='Board colours and glyphs')
    p.add_argument('--fen', type=str, help='Start from a FEN position')
    p.add_argument('--flip', action='store_true', default=None, help='Draw the board from black\'s side')
    p.add_argument('--no-history', action='store_true', help='Hide the move history panel')
    p.add_argument('--no-color', action='store_true', help='Plain text board in line mode')
    p.add_argument('--no-mouse', action='store_true', help='Do not enable mouse reporting')
    p.add_argument('--no-clear', action='store_true', help='Do not clear the screen between positions')
    p.add_argument('--char-limit', type=int, help='Longest move that can be typed')
    p.add_argument('--script', type=str, help='Run commands/moves from a text file')
    p.add_argument('--demo', action='store_true', help="Run a built-in demo game (Scholar's Mate)")
    p.add_argument('--log-level', type=str, help='DEBUG, INFO, WARNING, ...')
    p.add_argument('--log-file', type=str, help='Write log records to this file')
    p.add_argument('--run-tests', action='store_true', help='Run unit tests and exit')
    p.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return p


def apply_args_to_settings(args: argparse.Namespace, base: Settings) -> Settings:
    changes = {}
    if args.theme:
        changes['theme'] = args.theme
    if args.flip:
        changes['flip'] = True
    if args.no_history:
        changes['show_history'] = False
    if args.no_color:
        changes['use_color'] = False
    if args.no_mouse:
        changes['mouse'] = False
    if args.no_clear:
        changes['clear_screen'] = False
    if args.char_limit is not None:
        changes['char_limit'] = args.char_limit
    if args.log_level:
        changes['log_level'] = args.log_level
    if args.log_file:
        changes['log_file'] = args.log_file
    return dataclasses.replace(base, **changes)


def configure_logging(settings: Settings, full_screen: bool):
    level = logging.getLevelName(settings.log_level)
    if settings.log_file:
        logging.basicConfig(filename=settings.log_file, level=level, format=LOG_FORMAT, force=True)
    elif full_screen:
        # anything written to stderr would land on top of the curses screen
        logging.basicConfig(handlers=[logging.NullHandler()], level=level, force=True)
    else:
        logging.basicConfig(stream=sys.stderr, level=level, format=LOG_FORMAT, force=True)


def _stdio_is_tty() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def _run_tests_via_unittest() -> int:
    here = os.path.dirname(os.path.abspath(__file__))
    suite = unittest.defaultTestLoader.discover(os.path.join(here, 'tests'), top_level_dir=os.path.dirname(here))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return 0 if result.wasSuccessful() else 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.run_tests:
        return _run_tests_via_unittest()

    try:
        settings = apply_args_to_settings(args, Settings.from_env())
    except ValueError as e:
        parser.error(str(e))

    scripted = bool(args.script or args.demo)
    if args.mode == 'tui' and scripted:
        parser.error("--script and --demo run in line mode")
    full_screen = args.mode == 'tui' or (args.mode == 'auto' and not scripted and _stdio_is_tty())
    configure_logging(settings, full_screen)

    try:
        game = Game(args.fen)
    except ValueError as e:
        parser.error(f"invalid FEN: {e}")

    if full_screen:
        try:
            game = run_tui(settings, game)
        except TerminalError as e:
            print(f"termchess: {e}", file=sys.stderr)
            return 1
        print(game.result_line())
        return 0

    if args.script:
        try:
            with open(args.script, 'r', encoding='utf-8') as f:
                run_script(game, f.readlines())
        except OSError as e:
            logging.error("Cannot read script %s: %s", args.script, e)
            print(f"termchess: cannot read {args.script}: {e.strerror}", file=sys.stderr)
            return 1
    elif args.demo:
        run_script(game, demo_moves())
    else:
        run_interactive(game, settings)
        return 0

    print_board(game, settings, sys.stdout)
    print(game.result_line())
    return 0


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nBye!")
