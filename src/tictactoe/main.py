from __future__ import annotations

import argparse
import sys

from tictactoe import config
from tictactoe.errors import InputStreamFailure
from tictactoe.game.controller import run_game


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tictactoe",
        description="Two-player tic-tac-toe in the terminal. X moves first.",
    )
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours.")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns.")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    try:
        run_game()
    except InputStreamFailure as e:
        print(f"Something went wrong reading stdin: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
