import pytest

from tictactoe.errors import InputStreamFailure
from tictactoe.game.controller import run_game
from tictactoe.game.state import GameState


def test_top_row_win(scripted, capsys):
    state = run_game(scripted(["11", "22", "12", "33", "13"]))
    assert state.last_status == "X wins!"
    assert not state.board.is_full()
    out = capsys.readouterr().out
    assert "X wins!" in out
    # no move hint once the game is over
    final = out[out.rindex("X wins!"):]
    assert "Enter row" not in final
    assert "Enter row" in out


def test_draw(scripted, capsys):
    state = run_game(scripted(["11", "12", "13", "22", "21", "31", "23", "33", "32"]))
    assert state.board.is_full()
    assert "draw" in state.last_status
    out = capsys.readouterr().out
    assert "wins" not in out
    assert "Enter row" not in out[out.rindex("draw"):]


def test_win_on_last_cell_only_announces_the_win(scripted, capsys):
    state = run_game(scripted(["11", "12", "13", "21", "23", "22", "32", "31", "33"]))
    assert state.last_status == "X wins!"
    assert "draw" not in capsys.readouterr().out


def test_bad_input_reprompts_without_touching_board(scripted, capsys):
    state = run_game(scripted(["44", "1a", "", "11", "11", "21", "12", "22", "13"]))
    assert state.last_status == "X wins!"
    out = capsys.readouterr().out
    assert "between 1 and 3" in out
    assert "must be numbers" in out
    assert "That space has already been played." in out
    # the occupied attempt did not hand the turn to X
    assert state.board.get(1, 0) == "O"


def test_closed_stdin_propagates(scripted):
    state = GameState()
    with pytest.raises(InputStreamFailure):
        run_game(scripted(["11"]), state)
    assert state.board.get(0, 0) == "X"
    assert state.board.current == "O"
