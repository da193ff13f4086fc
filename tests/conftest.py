import pytest

from tictactoe import config


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    # No ANSI codes in captured output
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)


@pytest.fixture
def scripted():
    """Reader that replays lines, then behaves like a closed stdin."""

    def make(lines):
        it = iter(lines)

        def reader(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        return reader

    return make
