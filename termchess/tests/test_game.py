import unittest

from termchess.console import demo_moves
from termchess.game import Game
from termchess.rules import Outcome

AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"


class TestGameSubmit(unittest.TestCase):
    def setUp(self):
        self.game = Game()

    def test_legal_move_appends_history(self):
        self.game.error = "stale"
        self.assertTrue(self.game.submit("e2e4"))
        self.assertEqual(list(self.game.history), ["e4"])
        self.assertEqual(self.game.error, "")
        self.assertEqual(self.game.prompt, "Black>")

    def test_invalid_move_keeps_position(self):
        fen = self.game.fen()
        for text in ("e5", "hello", "", "0000"):
            with self.subTest(text=text):
                self.assertFalse(self.game.submit(text))
                self.assertEqual(self.game.fen(), fen)
                self.assertTrue(self.game.error)
                self.assertEqual(len(self.game.history), 0)

    def test_history_counts_accepted_moves_only(self):
        for text in ["e4", "e4", "e5", "Qh9", "Nf3"]:
            self.game.submit(text)
        self.assertEqual(list(self.game.history), ["e4", "e5", "Nf3"])
        self.assertEqual(self.game.history.text(), "1. e4 e5\n2. Nf3")

    def test_game_over_ignores_moves(self):
        for text in demo_moves():
            self.assertTrue(self.game.submit(text))
        self.assertIs(self.game.outcome, Outcome.WHITE_WINS)
        fen = self.game.fen()
        self.assertFalse(self.game.submit("a6"))
        self.assertFalse(self.game.submit("Ke7"))
        self.assertEqual(self.game.fen(), fen)
        self.assertEqual(len(self.game.history), 7)
        self.assertEqual(self.game.error, "")
        self.assertIs(self.game.outcome, Outcome.WHITE_WINS)

    def test_result_line(self):
        self.assertEqual(self.game.result_line(), "Game over. Result: * Method: None")
        for text in demo_moves():
            self.game.submit(text)
        self.assertEqual(self.game.result_line(), "Game over. Result: 1-0 Method: Checkmate")
        self.assertEqual(self.game.status_line(), self.game.result_line())

    def test_status_line(self):
        self.assertEqual(self.game.status_line(), "White to move")
        for text in ["e4", "f5", "Qh5+"]:
            self.game.submit(text)
        self.assertEqual(self.game.status_line(), "CHECK! Black to move")

    def test_new_game_resets(self):
        for text in demo_moves():
            self.game.submit(text)
        self.game.new_game()
        self.assertIs(self.game.outcome, Outcome.ONGOING)
        self.assertEqual(len(self.game.history), 0)
        self.assertTrue(self.game.submit("d4"))


class TestGameFromFen(unittest.TestCase):
    def test_black_to_move(self):
        game = Game(AFTER_E4)
        self.assertEqual(game.prompt, "Black>")
        game.submit("e5")
        game.submit("Nf3")
        self.assertEqual(game.history.text(), "1... e5\n2. Nf3")

    def test_finished_position(self):
        game = Game("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
        self.assertTrue(game.is_over)
        self.assertIs(game.outcome, Outcome.DRAW)
        self.assertFalse(game.submit("Kh7"))

    def test_bad_fen(self):
        with self.assertRaises(ValueError):
            Game("not a fen")


if __name__ == '__main__':
    unittest.main()
