# src/tictactoe/types.py

from __future__ import annotations
from typing import Literal, Optional, Tuple

Player = Literal["X", "O"]
Cell = Optional[Player]
Move = Tuple[int, int]   # (row, col), 0-based
Coord = Tuple[int, int]
