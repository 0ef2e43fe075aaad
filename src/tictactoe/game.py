#!/usr/bin/env python3
# Tic-Tac-Toe against the computer in a text console.

"""Tic-Tac-Toe Game."""

# Programmed by CoolCat467

from __future__ import annotations

# Tic-Tac-Toe Game
# Copyright (C) 2023-2025  CoolCat467
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

__title__ = "Tic-Tac-Toe"
__author__ = "CoolCat467"
__version__ = "0.0.0"
__license__ = "GNU General Public License Version 3"

import traceback
from typing import TYPE_CHECKING, Final

from tictactoe.computer_player import ComputerPlayer
from tictactoe.state import (
    SYMBOLS,
    Cell,
    has_won,
    is_full,
    new_board,
    number_to_position,
    position_to_number,
    render_grid,
)
from tictactoe.statemachine import State as MachineState, StateMachine

if TYPE_CHECKING:
    import random
    from collections.abc import Callable

    from tictactoe.state import Pos, State

PLAYER_SYMBOL: Final = SYMBOLS[Cell.PLAYER]
COMPUTER_SYMBOL: Final = SYMBOLS[Cell.COMPUTER]

PROMPT: Final = "Enter your move (number 1-9): "


def keypad() -> str:
    """Return board with every cell showing its keypad number."""
    return render_grid(
        lambda row, col: str(position_to_number((row, col))),
    )


class HaltState(MachineState["GameClient"]):
    """Halt state to set state to None so running becomes False."""

    __slots__ = ()

    def __init__(self) -> None:
        """Initialize Halt State."""
        super().__init__("Halt")

    def check_conditions(self) -> None:
        """Set active state to None."""
        self.machine.set_state(None)


class InitializeState(MachineState["GameClient"]):
    """Print welcome text."""

    __slots__ = ()

    def __init__(self) -> None:
        """Initialize the Initialize State."""
        super().__init__("initialize")

    def entry_actions(self) -> None:
        """Explain how to play."""
        output = self.machine.output
        output("Welcome to Tic-Tac-Toe!")
        output(
            f"You are Player {PLAYER_SYMBOL}, "
            f"Computer is Player {COMPUTER_SYMBOL}.",
        )
        output("Enter a number (1-9) corresponding to the cell:")
        output(keypad())

    def check_conditions(self) -> str:
        """Person moves first."""
        return "player_turn"


class TurnState(MachineState["GameClient"]):
    """Base class for a turn of either side."""

    __slots__ = ("mark", "move", "next_turn")

    def __init__(self, name: str, mark: Cell, next_turn: str) -> None:
        """Initialize turn for mark."""
        super().__init__(name)
        self.mark = mark
        self.next_turn = next_turn
        self.move: Pos | None = None

    def entry_actions(self) -> None:
        """Show the board and forget last move."""
        self.move = None
        self.machine.output("\n" + str(self.machine.board) + "\n")

    def check_conditions(self) -> str:
        """Play move and return the name of the next state."""
        if self.move is None:
            return "Halt"
        machine = self.machine
        machine.board = machine.board.place(self.move, self.mark)
        if has_won(machine.board, self.mark):
            machine.winner = self.mark
            return "game_over"
        if is_full(machine.board):
            return "game_over"
        return self.next_turn


class PlayerTurnState(TurnState):
    """Read person's move from the console."""

    __slots__ = ()

    def __init__(self) -> None:
        """Initialize Player Turn State."""
        super().__init__("player_turn", Cell.PLAYER, "computer_turn")

    def do_actions(self) -> None:
        """Ask until a valid move is entered."""
        self.move = self.machine.read_player_move()


class ComputerTurnState(TurnState):
    """Let the computer pick a move."""

    __slots__ = ()

    def __init__(self) -> None:
        """Initialize Computer Turn State."""
        super().__init__("computer_turn", Cell.COMPUTER, "player_turn")

    def do_actions(self) -> None:
        """Search for best move."""
        output = self.machine.output
        output(f"Computer's turn ({COMPUTER_SYMBOL})...")
        self.move = self.machine.computer.perform_turn(self.machine.board)
        if self.move is None:
            output(
                "Computer couldn't determine a move. Game ends unexpectedly.",
            )
            return
        output(f"Computer chose cell {position_to_number(self.move)}")


class GameOverState(MachineState["GameClient"]):
    """Announce result."""

    __slots__ = ()

    def __init__(self) -> None:
        """Initialize Game Over State."""
        super().__init__("game_over")

    def entry_actions(self) -> None:
        """Print final board and who won."""
        machine = self.machine
        machine.output("\n" + str(machine.board) + "\n")
        if machine.winner == Cell.PLAYER:
            machine.output(f"Congratulations! You ({PLAYER_SYMBOL}) win!")
        elif machine.winner == Cell.COMPUTER:
            machine.output(f"Computer ({COMPUTER_SYMBOL}) wins!")
        else:
            machine.output("It's a draw!")

    def check_conditions(self) -> str:
        """Stop."""
        return "Halt"


class GameClient(StateMachine):
    """Tic-Tac-Toe Game Client."""

    __slots__ = ("board", "computer", "input_func", "output", "winner")

    def __init__(
        self,
        computer: ComputerPlayer | None = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], object] = print,
    ) -> None:
        """Initialize Game Client."""
        super().__init__()
        self.computer = ComputerPlayer() if computer is None else computer
        self.input_func = input_func
        self.output = output

        self.board: State = new_board()
        self.winner: Cell | None = None

        self.add_states(
            (
                HaltState(),
                InitializeState(),
                PlayerTurnState(),
                ComputerTurnState(),
                GameOverState(),
            ),
        )

    def read_player_move(self) -> Pos | None:
        """Return empty position chosen by person or None if input ended."""
        while True:
            try:
                text = self.input_func(PROMPT)
            except EOFError:
                self.output("")
                return None
            try:
                position = number_to_position(int(text.strip()))
            except ValueError:
                self.output(
                    "Invalid input. Please enter a number between 1 and 9.",
                )
                continue
            if self.board.get(*position) != Cell.EMPTY:
                self.output("Cell already taken. Choose an empty cell.")
                continue
            return position

    def run(self) -> Cell | None:
        """Play one game and return the winning mark, if any."""
        self.set_state("initialize")
        while self.running:
            self.think()
        self.output("Game Over.")
        return self.winner


def run(rng: random.Random | None = None) -> None:
    """Play a game in the console."""
    GameClient(ComputerPlayer(rng)).run()


def cli_run() -> None:
    """Start game."""
    print(f"{__title__} v{__version__}\nProgrammed by {__author__}.\n")
    try:
        run()
    except Exception:
        traceback.print_exc()


if __name__ == "__main__":
    cli_run()
