from __future__ import annotations


class MalformedInput(ValueError):
    """Raw move text that is not two digits 1-3."""


class OccupiedCell(ValueError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__("That space has already been played.")
        self.row = row
        self.col = col


class InputStreamFailure(RuntimeError):
    """
    Reading the terminal failed (stdin closed or unreadable).
    Not recoverable: the entry point reports it and exits non-zero.
    """
