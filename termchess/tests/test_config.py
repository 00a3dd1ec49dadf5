import unittest

import chess

from termchess.config import THEMES, Settings, get_theme


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        s = Settings.from_env({})
        self.assertEqual(s.theme, "classic")
        self.assertTrue(s.show_history)
        self.assertFalse(s.flip)
        self.assertEqual(s.char_limit, 10)
        self.assertEqual(s.log_level, "WARNING")
        self.assertIsNone(s.log_file)

    def test_from_env(self):
        s = Settings.from_env({
            "TERMCHESS_THEME": "ascii",
            "TERMCHESS_FLIP": "yes",
            "TERMCHESS_HISTORY": "off",
            "TERMCHESS_CHAR_LIMIT": "6",
            "TERMCHESS_LOG_LEVEL": "debug",
            "TERMCHESS_LOG_FILE": "/tmp/termchess.log",
        })
        self.assertEqual(s.board_theme.name, "ascii")
        self.assertTrue(s.flip)
        self.assertFalse(s.show_history)
        self.assertEqual(s.char_limit, 6)
        self.assertEqual(s.log_level, "DEBUG")
        self.assertEqual(s.log_file, "/tmp/termchess.log")

    def test_no_color(self):
        self.assertFalse(Settings.from_env({"NO_COLOR": "1"}).use_color)
        self.assertFalse(Settings.from_env({"TERMCHESS_COLOR": "0"}).use_color)

    def test_bad_values(self):
        for env in ({"TERMCHESS_FLIP": "maybe"},
                    {"TERMCHESS_CHAR_LIMIT": "ten"},
                    {"TERMCHESS_CHAR_LIMIT": "0"},
                    {"TERMCHESS_THEME": "neon"},
                    {"TERMCHESS_LOG_LEVEL": "chatty"},
                    {"TERMCHESS_HISTORY_WIDTH": "-1"}):
            with self.subTest(env=env):
                with self.assertRaises(ValueError):
                    Settings.from_env(env)


class TestThemes(unittest.TestCase):
    def test_registry(self):
        self.assertEqual(set(THEMES), {"classic", "brown", "ascii"})
        with self.assertRaises(ValueError):
            get_theme("missing")

    def test_glyphs(self):
        ascii_theme = get_theme("ascii")
        self.assertEqual(ascii_theme.glyph(None), ".")
        self.assertEqual(ascii_theme.glyph(chess.Piece.from_symbol("k")), "k")
        self.assertEqual(get_theme("classic").glyph(chess.Piece.from_symbol("Q")), "♕")

    def test_every_theme_has_single_column_glyphs(self):
        for theme in THEMES.values():
            for symbol in "PNBRQKpnbrqk":
                self.assertEqual(len(theme.glyph(chess.Piece.from_symbol(symbol))), 1)
            self.assertEqual(len(theme.empty), 1)


if __name__ == '__main__':
    unittest.main()
