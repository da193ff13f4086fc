from __future__ import annotations
from typing import Optional, Iterable, List, Set

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.types import Cell, Coord
from tictactoe.ui.colors import c, BOLD, DIM, FG_CYAN, FG_RED, FG_YELLOW, REVERSE

ROW_RULE = "+".join(["---"] * config.SIZE)


def _piece(cell: Cell, color: bool) -> str:
    glyph = config.GLYPHS[cell]
    if cell == "X":
        return c(glyph, FG_RED, color)
    if cell == "O":
        return c(glyph, FG_YELLOW, color)
    return glyph


def format_board(board: Board, highlight: Optional[Iterable[Coord]] = None, color: bool = False) -> str:
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines: List[str] = []
    for r in range(config.SIZE):
        parts = []
        for col in range(config.SIZE):
            cell = board.get(r, col)
            if color and (r, col) in hl:
                # reverse-video the whole cell, glyph uncoloured
                p = c(f" {config.GLYPHS[cell]} ", REVERSE + BOLD, color)
            else:
                p = f" {_piece(cell, color)} "
            parts.append(p)
        lines.append("|".join(parts))
    return f"\n{ROW_RULE}\n".join(lines)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(
    board: Board,
    status: str = "",
    highlight: Optional[Iterable[Coord]] = None,
    prompt_hint: bool = True,
) -> None:
    clear_screen()

    print(c("TIC-TAC-TOE", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    print(format_board(board, highlight, color=config.USE_COLOR))
    if prompt_hint:
        print(c("Enter row then column, e.g. 13 for the top-right space.", DIM))
