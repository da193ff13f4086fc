from __future__ import annotations

from tictactoe import config

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"


def c(s: str, code: str, enabled: bool | None = None) -> str:
    if enabled is None:
        enabled = config.USE_COLOR
    if not enabled:
        return s
    return f"{code}{s}{RESET}"
