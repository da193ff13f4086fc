from __future__ import annotations
from typing import Callable, Optional

from tictactoe.config import SIZE
from tictactoe.errors import InputStreamFailure, MalformedInput
from tictactoe.types import Move, Player

_DIGITS = "".join(str(i + 1) for i in range(SIZE))


def parse_move(raw: str) -> Move:
    s = raw.strip()
    if len(s) != 2:
        raise MalformedInput("Must only input row and column, e.g. 12.")
    if not all(ch in "0123456789" for ch in s):
        raise MalformedInput("Row and column must be numbers.")
    if not all(ch in _DIGITS for ch in s):
        raise MalformedInput(f"Row and column values must be between 1 and {SIZE}.")
    return int(s[0]) - 1, int(s[1]) - 1


def read_move_line(player: Player, reader: Optional[Callable[[str], str]] = None) -> str:
    if reader is None:
        reader = input
    try:
        return reader(f"Player {player}, what's your move? ")
    except EOFError as e:
        raise InputStreamFailure("input stream closed") from e
    except UnicodeDecodeError as e:
        raise InputStreamFailure(f"undecodable input: {e}") from e
    except OSError as e:
        raise InputStreamFailure(str(e)) from e
