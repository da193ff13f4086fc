
# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from tictactoe.config import SIZE
from tictactoe.errors import OccupiedCell
from tictactoe.types import Cell, Player, Move


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"


@dataclass(slots=True)
class Board:
    cells: List[Cell] = field(default_factory=list)
    current: Player = "X"

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [None] * (SIZE * SIZE)
        elif len(self.cells) != SIZE * SIZE:
            raise ValueError(f"Board needs exactly {SIZE * SIZE} cells.")
        else:
            self.cells = list(self.cells)

    @classmethod
    def new(cls) -> "Board":
        return cls()

    @staticmethod
    def index(row: int, col: int) -> int:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise ValueError("Row/column out of range.")
        return row * SIZE + col

    def get(self, row: int, col: int) -> Cell:
        return self.cells[self.index(row, col)]

    def empty_cells(self) -> List[Move]:
        return [divmod(i, SIZE) for i, cell in enumerate(self.cells) if cell is None]

    def counts(self) -> Tuple[int, int]:
        return self.cells.count("X"), self.cells.count("O")

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def apply_move(self, row: int, col: int) -> Player:
        """
        Place the current player's mark at (row, col) and pass the turn.
        An occupied cell raises OccupiedCell and leaves the board untouched.
        """
        i = self.index(row, col)
        if self.cells[i] is not None:
            raise OccupiedCell(row, col)

        mark = self.current
        self.cells[i] = mark
        self.current = other(mark)
        return mark
