"""Tic-Tac-Toe Minimax."""

# Programmed by CoolCat467

from __future__ import annotations

# Tic-Tac-Toe Minimax
# Copyright (C) 2024-2025  CoolCat467
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

__title__ = "Tic-Tac-Toe Minimax"
__author__ = "CoolCat467"
__version__ = "0.0.0"
__license__ = "GNU General Public License Version 3"

from typing import TYPE_CHECKING, Final

from tictactoe.minimax import Minimax, Player
from tictactoe.state import Cell, Pos, State

if TYPE_CHECKING:
    from collections.abc import Iterable

WIN_SCORE: Final = 10
LOSS_SCORE: Final = -WIN_SCORE
DRAW_SCORE: Final = 0

# Player:
# PLAYER   = Person  = MIN
# COMPUTER = AI (Us) = MAX


def evaluate(board: State) -> int:
    """Return score of board from the computer's point of view.

    +10 if the computer has a line, -10 if the person has one, else 0.
    Depth is not taken into account.
    """
    winner = board.get_winner()
    if winner == Cell.COMPUTER:
        return WIN_SCORE
    if winner == Cell.PLAYER:
        return LOSS_SCORE
    return DRAW_SCORE


# Minimax[State, Pos]
class TicTacToeMinimax(Minimax[State, Pos]):
    """Minimax Algorithm for Tic-Tac-Toe."""

    __slots__ = ()

    @classmethod
    def value(cls, state: State) -> int:
        """Return value of given game state."""
        return evaluate(state)

    @classmethod
    def terminal(cls, state: State) -> bool:
        """Return if game state is terminal."""
        return evaluate(state) != DRAW_SCORE or state.is_full()

    @classmethod
    def terminal_value(cls, state: State) -> int | None:
        """Return score of given state if terminal, evaluating it once."""
        score = evaluate(state)
        if score != DRAW_SCORE or state.is_full():
            return score
        return None

    @classmethod
    def player(cls, state: State) -> Player:
        """Return Player enum from current state's turn."""
        return Player.MAX if state.turn == Cell.COMPUTER else Player.MIN

    @classmethod
    def actions(cls, state: State) -> Iterable[Pos]:
        """Return all empty positions in row-major order."""
        return state.available_moves()

    @classmethod
    def result(cls, state: State, action: Pos) -> State:
        """Return new state after current turn's mark is placed at action."""
        # Actions are always empty cells
        return state.place_unchecked(action, state.turn)


def search(board: State, maximizing: bool) -> int:
    """Return game-theoretic value of board.

    If maximizing, the computer is to move, otherwise the person.
    Explores the complete game tree with no pruning. Board is not modified.
    """
    turn = Cell.COMPUTER if maximizing else Cell.PLAYER
    value = TicTacToeMinimax.minimax(board.with_turn(turn)).value
    return int(value)


if __name__ == "__main__":
    print(f"{__title__} v{__version__}\nProgrammed by {__author__}.\n")
