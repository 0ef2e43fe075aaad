"""Test game module."""

from __future__ import annotations

import io
import random
from typing import TYPE_CHECKING

import pytest

from tictactoe import game
from tictactoe.computer_player import ComputerPlayer
from tictactoe.game import GameClient, keypad
from tictactoe.state import Cell, State, position_to_number

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from tictactoe.state import Pos


def scripted(lines: Iterable[str]) -> Callable[[str], str]:
    """Return input function answering with lines, then end of file."""
    iterator = iter(lines)

    def input_func(prompt: str) -> str:
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError from None

    return input_func


class FirstCellPlayer(ComputerPlayer):
    """Computer player that always takes the first empty cell."""

    __slots__ = ()

    def perform_turn(self, board: State) -> Pos | None:
        moves = board.available_moves()
        return moves[0] if moves else None


class StuckPlayer(ComputerPlayer):
    """Computer player that never finds a move."""

    __slots__ = ()

    def perform_turn(self, board: State) -> Pos | None:
        return None


def make_client(
    inputs: Iterable[str],
    computer: ComputerPlayer | None = None,
) -> tuple[GameClient, list[str]]:
    output: list[str] = []
    client = GameClient(
        ComputerPlayer(random.Random(467)) if computer is None else computer,
        scripted(inputs),
        output.append,
    )
    return client, output


def test_keypad() -> None:
    assert keypad() == "\n".join(
        (
            "-------------",
            "| 1 | 2 | 3 |",
            "-------------",
            "| 4 | 5 | 6 |",
            "-------------",
            "| 7 | 8 | 9 |",
            "-------------",
        ),
    )


def test_welcome() -> None:
    client, output = make_client(())
    client.run()
    assert output[0] == "Welcome to Tic-Tac-Toe!"
    assert output[1] == "You are Player X, Computer is Player O."
    assert keypad() in output
    assert output[-1] == "Game Over."


def test_person_wins() -> None:
    client, output = make_client(("1", "4", "7"), FirstCellPlayer())
    assert client.run() == Cell.PLAYER
    assert "Congratulations! You (X) win!" in output
    assert "Computer chose cell 2" in output
    assert "Computer chose cell 3" in output
    assert output[-1] == "Game Over."


def test_computer_wins_against_blunders() -> None:
    output: list[str] = []
    client = GameClient(ComputerPlayer(random.Random(467)), output=output.append)

    def lowest_cell(prompt: str) -> str:
        numbers = map(position_to_number, client.board.available_moves())
        return str(min(numbers))

    client.input_func = lowest_cell
    assert client.run() == Cell.COMPUTER
    assert [line for line in output if line.startswith("Computer chose")] == [
        "Computer chose cell 5",
        "Computer chose cell 3",
        "Computer chose cell 7",
    ]
    assert "Computer (O) wins!" in output
    assert output.count("Computer's turn (O)...") == 3


def test_draw() -> None:
    client, output = make_client(("9",))
    client.board = State(
        {
            (0, 0): Cell.PLAYER,
            (0, 1): Cell.COMPUTER,
            (0, 2): Cell.PLAYER,
            (1, 0): Cell.PLAYER,
            (1, 1): Cell.COMPUTER,
            (1, 2): Cell.COMPUTER,
            (2, 0): Cell.COMPUTER,
            (2, 1): Cell.PLAYER,
        },
    )
    client.set_state("player_turn")
    while client.running:
        client.think()
    assert client.winner is None
    assert client.board.is_full()
    assert output[-1] == "It's a draw!"


def test_invalid_input_reprompts() -> None:
    client, output = make_client(("abc", "0", "10", "", "1", "5"))
    assert client.run() is None
    invalid = "Invalid input. Please enter a number between 1 and 9."
    assert output.count(invalid) == 4
    assert "Cell already taken. Choose an empty cell." in output
    assert client.board.pieces == {
        (0, 0): Cell.PLAYER,
        (1, 1): Cell.COMPUTER,
    }
    assert output[-1] == "Game Over."


def test_computer_without_move_ends_game() -> None:
    client, output = make_client(("1",), StuckPlayer())
    assert client.run() is None
    assert (
        "Computer couldn't determine a move. Game ends unexpectedly."
        in output
    )
    assert output[-1] == "Game Over."
    assert client.board.pieces == {(0, 0): Cell.PLAYER}


def test_cli_run(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    game.cli_run()
    captured = capsys.readouterr()
    assert captured.out.startswith(f"{game.__title__} v{game.__version__}")
    assert "Computer's turn (O)..." in captured.out
    assert "Game Over." in captured.out


def test_cli_run_prints_traceback(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def broken_run(rng: random.Random | None = None) -> None:
        raise RuntimeError("board on fire")

    monkeypatch.setattr(game, "run", broken_run)
    game.cli_run()
    captured = capsys.readouterr()
    assert "RuntimeError: board on fire" in captured.err
