import random
import unittest

import chess

from termchess.config import get_theme
from termchess.render import (
    BOARD_LINES,
    DARK,
    LABEL,
    LIGHT,
    NATURAL_WIDTH,
    PAD,
    render_board,
    render_text,
    square_role,
)

ASCII = get_theme("ascii")


def random_board(seed, plies=40):
    rng = random.Random(seed)
    board = chess.Board()
    for _ in range(plies):
        moves = list(board.legal_moves)
        if not moves:
            break
        board.push(rng.choice(moves))
    return board


class TestRenderShape(unittest.TestCase):
    def assertRectangular(self, lines, width):
        self.assertEqual(len(lines), BOARD_LINES)
        for line in lines:
            self.assertEqual(line.width, width)
            self.assertEqual(len(line.text), width)

    def test_start_position_natural_width(self):
        self.assertRectangular(render_board(chess.Board()), NATURAL_WIDTH)

    def test_many_positions_and_widths(self):
        boards = [chess.Board(), chess.Board(None)] + [random_board(seed) for seed in range(5)]
        for board in boards:
            for width in (-10, 0, 5, NATURAL_WIDTH, NATURAL_WIDTH + 1, 40, 81):
                for flip in (False, True):
                    with self.subTest(fen=board.fen(), width=width, flip=flip):
                        self.assertRectangular(render_board(board, width, flip=flip),
                                               max(width, NATURAL_WIDTH))

    def test_padding_is_centred(self):
        lines = render_board(chess.Board(), NATURAL_WIDTH + 5, ASCII)
        first = lines[0].spans
        self.assertEqual(first[0].role, PAD)
        self.assertEqual(first[0].text, "  ")
        self.assertEqual(first[-1].role, PAD)
        self.assertEqual(first[-1].text, "   ")

    def test_narrow_width_has_no_padding(self):
        for line in render_board(chess.Board(), 3, ASCII):
            self.assertNotIn(PAD, [s.role for s in line.spans])


class TestRenderContent(unittest.TestCase):
    def test_labels_and_ranks(self):
        lines = render_board(chess.Board(), theme=ASCII)
        self.assertEqual(lines[0].text, "   a  b  c  d  e  f  g  h   ")
        self.assertEqual(lines[-1].text, lines[0].text)
        self.assertEqual(lines[1].text, "8  r  n  b  q  k  b  n  r  8")
        self.assertEqual(lines[4].text, "5  .  .  .  .  .  .  .  .  5")
        self.assertEqual(lines[8].text, "1  R  N  B  Q  K  B  N  R  1")

    def test_flipped(self):
        lines = render_board(chess.Board(), theme=ASCII, flip=True)
        self.assertEqual(lines[0].text, "   h  g  f  e  d  c  b  a   ")
        self.assertEqual(lines[1].text, "1  R  N  B  K  Q  B  N  R  1")
        self.assertEqual(lines[8].text, "8  r  n  b  k  q  b  n  r  8")

    def test_unicode_glyphs(self):
        lines = render_board(chess.Board())
        self.assertIn("♔", lines[8].text)
        self.assertIn("♚", lines[1].text)

    def test_square_parity(self):
        self.assertEqual(square_role(chess.A1), DARK)
        self.assertEqual(square_role(chess.H1), LIGHT)
        self.assertEqual(square_role(chess.A8), LIGHT)
        lines = render_board(chess.Board())
        rank1 = lines[8].spans
        self.assertEqual(rank1[0].role, LABEL)
        self.assertEqual(rank1[1].role, DARK)
        self.assertEqual(rank1[2].role, LIGHT)
        self.assertEqual(rank1[8].role, LIGHT)

    def test_piece_owner(self):
        lines = render_board(chess.Board())
        self.assertEqual(lines[8].spans[1].owner, chess.WHITE)
        self.assertEqual(lines[1].spans[1].owner, chess.BLACK)
        self.assertIsNone(lines[4].spans[1].owner)

    def test_render_is_pure(self):
        board = chess.Board()
        fen = board.fen()
        render_board(board, 50)
        self.assertEqual(board.fen(), fen)
        self.assertEqual(render_board(board, 50), render_board(board, 50))


class TestRenderText(unittest.TestCase):
    def test_plain(self):
        lines = render_board(chess.Board(), theme=ASCII)
        text = render_text(lines, ASCII, color=False)
        self.assertEqual(text.splitlines(), [line.text for line in lines])
        self.assertNotIn("\033[", text)

    def test_ansi(self):
        lines = render_board(chess.Board(), theme=ASCII)
        text = render_text(lines, ASCII, color=True)
        self.assertIn("\033[", text)
        self.assertEqual(len(text.splitlines()), BOARD_LINES)

    def test_ansi_256_colours(self):
        brown = get_theme("brown")
        text = render_text(render_board(chess.Board(), theme=brown), brown, color=True)
        self.assertIn("\033[48;5;223m", text)
        self.assertIn("\033[48;5;94m", text)


if __name__ == '__main__':
    unittest.main()
