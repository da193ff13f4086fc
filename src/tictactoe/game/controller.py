from __future__ import annotations
from typing import Callable, Optional

from tictactoe.core.rules import line_coords, outcome, winner_with_line
from tictactoe.errors import MalformedInput, OccupiedCell
from tictactoe.game.state import GameState
from tictactoe.ui.prompts import parse_move, read_move_line
from tictactoe.ui.render import render

Reader = Callable[[str], str]


def run_game(reader: Optional[Reader] = None, state: Optional[GameState] = None) -> GameState:
    """
    Play one game to a win or a draw and return the final state.

    InputStreamFailure from the reader is not handled here; it propagates
    to the caller, which decides how the process ends.
    """
    if reader is None:
        reader = input
    if state is None:
        state = GameState()
    board = state.board

    while True:
        render(board, state.last_status)

        raw = read_move_line(board.current, reader)
        try:
            row, col = parse_move(raw)
            mark = board.apply_move(row, col)
        except (MalformedInput, OccupiedCell) as e:
            state.last_status = str(e)
            continue

        result = outcome(board)
        if result == "won":
            player, line = winner_with_line(board)
            state.last_status = f"{player} wins!"
            render(board, state.last_status, highlight=line_coords(line), prompt_hint=False)
            return state

        if result == "drawn":
            state.last_status = "The board is full. It's a draw."
            render(board, state.last_status, prompt_hint=False)
            return state

        state.last_status = f"Player {mark} played {row + 1}{col + 1}. Player {board.current}'s turn."
