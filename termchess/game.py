"""The one in-memory game: position, accepted moves, outcome and last error."""
from __future__ import annotations

import logging
from typing import List, Optional

import chess

from .history import MoveHistory
from .rules import (
    InvalidMoveError,
    Outcome,
    apply_move,
    claimable_draws,
    legal_moves_from,
    outcome_of,
    side_name,
    termination_of,
)


class Game:
    def __init__(self, fen: Optional[str] = None):
        self.board = chess.Board()
        self.history = MoveHistory()
        self.error = ""
        self._outcome = Outcome.ONGOING
        self.new_game(fen)

    def new_game(self, fen: Optional[str] = None):
        """Start again from the initial position or from ``fen``.

        Raises ValueError for a malformed FEN.
        """
        board = chess.Board(fen) if fen else chess.Board()
        self.board = board
        self.history.reset(first_number=board.fullmove_number,
                           black_first=board.turn == chess.BLACK)
        self.error = ""
        self._outcome = outcome_of(board)
        logging.info("New game from %s", board.fen())

    # -- State ------------------------------------------------------------------
    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self._outcome.is_over

    @property
    def turn_name(self) -> str:
        return side_name(self.board.turn)

    @property
    def prompt(self) -> str:
        return f"{self.turn_name}>"

    def fen(self) -> str:
        return self.board.fen()

    def legal_moves_from(self, square: str) -> List[str]:
        return legal_moves_from(self.board, square)

    # -- Moves ------------------------------------------------------------------
    def submit(self, text: str) -> bool:
        """Try to play ``text``. Return True if the move was accepted.

        A finished game ignores submissions entirely. A rejected move leaves
        the position alone and stores the library's message in ``error``.
        """
        if self.is_over:
            logging.info("Ignoring %r: game is over (%s)", text, self._outcome.value)
            return False
        try:
            san = apply_move(self.board, text)
        except InvalidMoveError as e:
            self.error = str(e) or "invalid move"
            logging.info("Rejected %r: %s", text, self.error)
            return False
        self.history.append(san)
        self.error = ""
        # the outcome only ever leaves ONGOING once
        self._outcome = outcome_of(self.board)
        logging.info("Played %s", san)
        if self.is_over:
            logging.info("Game over: %s by %s", self._outcome.value, termination_of(self.board))
        return True

    # -- Text -------------------------------------------------------------------
    def result_line(self) -> str:
        method = termination_of(self.board) if self.is_over else None
        return f"Game over. Result: {self._outcome.value} Method: {method or 'None'}"

    def status_line(self) -> str:
        if self.is_over:
            return self.result_line()
        state = []
        if self.board.is_check():
            state.append("CHECK!")
        state.extend(claimable_draws(self.board))
        state.append(f"{self.turn_name} to move")
        return " ".join(state)
