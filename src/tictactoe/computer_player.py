"""Minimax Tic-Tac-Toe Computer Player."""

# Programmed by CoolCat467

from __future__ import annotations

# Minimax Tic-Tac-Toe Computer Player
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

__title__ = "Minimax Computer Player"
__author__ = "CoolCat467"
__version__ = "0.0.0"
__license__ = "GNU General Public License Version 3"

import random
import sys
from math import inf as infinity
from typing import TYPE_CHECKING

from tictactoe.state import BOARD_SIZE, Cell
from tictactoe.tictactoe_minimax import search

if TYPE_CHECKING:
    from tictactoe.state import Pos, State


def best_move(board: State, rng: random.Random) -> Pos | None:
    """Return best position for the computer to place its mark.

    On an empty board the opening move is picked at random from all
    cells, otherwise every candidate is searched and the first move with
    the highest score wins. Returns None if there are no empty cells.
    """
    moves = board.available_moves()

    # Minimax always picks the same opening, so vary it
    if len(moves) == BOARD_SIZE**2:
        # No need for cryptographic secure random
        return rng.choice(moves)

    best_score: int | float = -infinity
    best: Pos | None = None
    for move in moves:
        score = search(board.place(move, Cell.COMPUTER), maximizing=False)
        if score > best_score:
            best_score = score
            best = move

    if best is None:
        if not moves:
            return None
        print(
            "Error: No best move found, picking random available move.",
            file=sys.stderr,
        )
        return rng.choice(moves)
    return best


class ComputerPlayer:
    """Minimax Player."""

    __slots__ = ("rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize minimax player.

        Random source defaults to one seeded from the system.
        """
        self.rng = random.Random() if rng is None else rng  # noqa: S311

    def perform_turn(self, board: State) -> Pos | None:
        """Return position to play on given board, or None if full."""
        return best_move(board, self.rng)


if __name__ == "__main__":
    print(f"{__title__} v{__version__}\nProgrammed by {__author__}.\n")
