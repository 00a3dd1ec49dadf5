"""
Thin adapter over python-chess.

Nothing here decides legality or results on its own: moves are parsed and
checked by ``chess.Board`` and outcomes come from ``chess.Board.outcome``.
This module only turns the library's answers into the small vocabulary the
front-ends use.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

import chess


class InvalidMoveError(ValueError):
    """A move string was rejected by the rules library."""


class Outcome(Enum):
    ONGOING = "*"
    WHITE_WINS = "1-0"
    BLACK_WINS = "0-1"
    DRAW = "1/2-1/2"

    @property
    def is_over(self) -> bool:
        return self is not Outcome.ONGOING


def _library_message(board: chess.Board, err: ValueError) -> str:
    # python-chess appends " in <fen>" to most of its messages
    msg = str(err)
    suffix = f" in {board.fen()}"
    if msg.endswith(suffix):
        msg = msg[: -len(suffix)]
    return msg or "invalid move"


def parse_move(board: chess.Board, text: str) -> chess.Move:
    """Parse UCI (e2e4) or SAN (e4, Nf3, O-O) into a legal move.

    Raises InvalidMoveError with the library's message when the text is not a
    legal move in the current position.
    """
    text = text.strip()
    if not text:
        raise InvalidMoveError("empty move")
    # Try UCI first, then SAN
    try:
        move = chess.Move.from_uci(text)
    except ValueError:
        move = None
    if move and move in board.legal_moves:
        return move
    try:
        move = board.parse_san(text)
    except ValueError as e:
        raise InvalidMoveError(_library_message(board, e)) from e
    if not move:
        raise InvalidMoveError(f"null move not allowed: {text!r}")
    return move


def apply_move(board: chess.Board, text: str) -> str:
    """Push the move described by ``text`` and return its SAN."""
    move = parse_move(board, text)
    san = board.san(move)
    board.push(move)
    return san


def outcome_of(board: chess.Board) -> Outcome:
    # Only automatic endings count; threefold/fifty-move draws must be claimed
    result = board.outcome()
    if result is None:
        return Outcome.ONGOING
    return Outcome(result.result())


def termination_of(board: chess.Board) -> Optional[str]:
    result = board.outcome()
    if result is None:
        return None
    return result.termination.name.replace("_", " ").capitalize()


def claimable_draws(board: chess.Board) -> List[str]:
    hints = []
    if board.can_claim_threefold_repetition():
        hints.append("(3-fold repetition claim available)")
    if board.can_claim_fifty_moves():
        hints.append("(50-move claim available)")
    return hints


def legal_moves_from(board: chess.Board, square_str: str) -> List[str]:
    try:
        square = chess.parse_square(square_str.strip().lower())
    except ValueError:
        return []
    return [m.uci() for m in board.legal_moves if m.from_square == square]


def side_name(color: chess.Color) -> str:
    return "White" if color == chess.WHITE else "Black"
