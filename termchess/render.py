"""
Board to text.

``render_board`` is a pure function of a position, a target width and a theme.
It always returns ``BOARD_LINES`` lines of equal width: a file label row, the
eight ranks (rank digit on both edges) and a second file label row. Each line
is a tuple of styled spans so that the curses front-end and the line-mode
front-end can colour it in their own way.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import chess

from .config import Theme, get_theme, DEFAULT_THEME

FILES = "abcdefgh"
CELL_W = 3
LABEL_W = 2
BOARD_LINES = 10
NATURAL_WIDTH = 2 * LABEL_W + 8 * CELL_W

# Span roles
LABEL = "label"
LIGHT = "light"
DARK = "dark"
PAD = "pad"


@dataclass(frozen=True)
class Span:
    text: str
    role: str
    owner: Optional[chess.Color] = None  # colour of the piece drawn, if any


@dataclass(frozen=True)
class Line:
    spans: Tuple[Span, ...]

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.spans)

    @property
    def width(self) -> int:
        return sum(len(s.text) for s in self.spans)


def square_role(square: chess.Square) -> str:
    """a1 is dark; colour alternates with the parity of file + rank."""
    return LIGHT if (chess.square_file(square) + chess.square_rank(square)) % 2 else DARK


def _file_label_spans(files: Sequence[int]) -> List[Span]:
    text = " " * LABEL_W + "".join(f" {FILES[f]} " for f in files) + " " * LABEL_W
    return [Span(text, LABEL)]


def _rank_spans(board: chess.BaseBoard, rank: int, files: Sequence[int], theme: Theme) -> List[Span]:
    spans = [Span(f"{rank + 1} ", LABEL)]
    for file in files:
        square = chess.square(file, rank)
        piece = board.piece_at(square)
        owner = piece.color if piece else None
        spans.append(Span(f" {theme.glyph(piece)} ", square_role(square), owner))
    spans.append(Span(f" {rank + 1}", LABEL))
    return spans


def render_board(board: chess.BaseBoard, width: int = 0, theme: Optional[Theme] = None,
                 flip: bool = False) -> List[Line]:
    """Render ``board`` as BOARD_LINES lines.

    Lines are centred in ``width`` columns when it is wider than the board;
    narrower, zero or negative widths fall back to the natural board width.
    """
    theme = theme or get_theme(DEFAULT_THEME)
    files = range(7, -1, -1) if flip else range(8)
    ranks = range(8) if flip else range(7, -1, -1)

    rows = [_file_label_spans(files)]
    for rank in ranks:
        rows.append(_rank_spans(board, rank, files, theme))
    rows.append(_file_label_spans(files))

    extra = max(0, width) - NATURAL_WIDTH
    left = extra // 2 if extra > 0 else 0
    right = extra - left if extra > 0 else 0

    lines = []
    for spans in rows:
        if left:
            spans.insert(0, Span(" " * left, PAD))
        if right:
            spans.append(Span(" " * right, PAD))
        lines.append(Line(tuple(spans)))
    return lines


# --------- ANSI output for line mode ---------

RESET = "\033[0m"
BOLD = "\033[1m"


def _fg(color: int) -> str:
    return f"\033[{30 + color}m" if color < 8 else f"\033[38;5;{color}m"


def _bg(color: int) -> str:
    return f"\033[{40 + color}m" if color < 8 else f"\033[48;5;{color}m"


def ansi_span(span: Span, theme: Theme) -> str:
    if span.role == PAD:
        return span.text
    if span.role == LABEL:
        return f"{BOLD}{_fg(theme.label)}{span.text}{RESET}"
    bg = _bg(theme.light if span.role == LIGHT else theme.dark)
    if span.owner is None:
        return f"{bg}{span.text}{RESET}"
    fg = _fg(theme.white if span.owner == chess.WHITE else theme.black)
    return f"{bg}{BOLD}{fg}{span.text}{RESET}"


def render_text(lines: Sequence[Line], theme: Optional[Theme] = None, color: bool = False) -> str:
    """Join rendered lines into one string, with ANSI colours if asked."""
    if not color:
        return "\n".join(line.text for line in lines)
    theme = theme or get_theme(DEFAULT_THEME)
    return "\n".join("".join(ansi_span(s, theme) for s in line.spans) for line in lines)
