from __future__ import annotations
from typing import Literal, Optional, List, Tuple

from tictactoe.config import SIZE
from tictactoe.core.board import Board
from tictactoe.types import Player, Coord

Line = Tuple[int, int, int]
Outcome = Literal["in_progress", "won", "drawn"]

# Rows, then columns, then the two diagonals.
LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def line_coords(line: Line) -> List[Coord]:
    return [divmod(i, SIZE) for i in line]


def winner_with_line(board: Board) -> Optional[Tuple[Player, Line]]:
    g = board.cells
    for line in LINES:
        a, b, c = line
        p = g[a]
        if p and p == g[b] == g[c]:
            return p, line
    return None


def winner(board: Board) -> Optional[Player]:
    res = winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and winner(board) is None


def outcome(board: Board) -> Outcome:
    # A move that both fills the board and completes a line is a win.
    if winner(board) is not None:
        return "won"
    if board.is_full():
        return "drawn"
    return "in_progress"
