from __future__ import annotations
from dataclasses import dataclass, field

from tictactoe.core.board import Board


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    last_status: str = "Player X starts."
