# src/tictactoe/config.py

from __future__ import annotations

SIZE = 3

# Board glyphs (None is an empty cell)
GLYPHS = {None: " ", "X": "X", "O": "O"}

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True
