"""Tic-Tac-Toe State."""

# Programmed by CoolCat467

from __future__ import annotations

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

__title__ = "Tic-Tac-Toe State"
__author__ = "CoolCat467"
__license__ = "GNU General Public License Version 3"
__version__ = "0.0.0"

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Final, TypeAlias

from mypy_extensions import u8

if TYPE_CHECKING:
    from collections.abc import Callable

    from typing_extensions import Self

Pos: TypeAlias = tuple[u8, u8]

BOARD_SIZE: Final = 3

# Note: cells are numbered like a phone keypad when talking to people
# 1 2 3
# 4 5 6
# 7 8 9


class Cell(IntEnum):
    """Contents of a board cell."""

    __slots__ = ()
    EMPTY = 0
    PLAYER = 1
    COMPUTER = 2

    def opposite(self) -> Cell:
        """Return the other mark."""
        if self == Cell.PLAYER:
            return Cell.COMPUTER
        if self == Cell.COMPUTER:
            return Cell.PLAYER
        raise ValueError("Empty cell has no opposite mark")


SYMBOLS: Final = {
    Cell.EMPTY: " ",
    Cell.PLAYER: "X",
    Cell.COMPUTER: "O",
}


def generate_lines() -> tuple[tuple[Pos, Pos, Pos], ...]:
    """Return every row, column, and diagonal of the board."""
    span = range(BOARD_SIZE)
    rows = [tuple((row, col) for col in span) for row in span]
    columns = [tuple((row, col) for row in span) for col in span]
    diagonals = [
        tuple((i, i) for i in span),
        tuple((i, BOARD_SIZE - 1 - i) for i in span),
    ]
    lines = tuple(rows + columns + diagonals)
    assert len(lines) == 8
    return lines  # type: ignore[return-value]


LINES: Final = generate_lines()

POSITIONS: Final = tuple(
    (u8(row), u8(col))
    for row in range(BOARD_SIZE)
    for col in range(BOARD_SIZE)
)


def render_grid(get_symbol: Callable[[int, int], str]) -> str:
    """Return boxed text grid of symbols returned for each row and column."""
    rule = "-" * (BOARD_SIZE * 4 + 1)
    lines = [rule]
    for row in range(BOARD_SIZE):
        symbols = (get_symbol(row, col) for col in range(BOARD_SIZE))
        lines.append("| " + " | ".join(symbols) + " |")
        lines.append(rule)
    return "\n".join(lines)


def position_to_number(position: Pos) -> int:
    """Return keypad number (1-9) of given position."""
    row, col = position
    return row * BOARD_SIZE + col + 1


def number_to_position(number: int) -> Pos:
    """Return position of given keypad number (1-9)."""
    if not 1 <= number <= BOARD_SIZE**2:
        raise ValueError(f"{number} is not a cell number between 1 and 9")
    row, col = divmod(number - 1, BOARD_SIZE)
    return (u8(row), u8(col))


@dataclass(slots=True)
class State:
    """Represents state of Tic-Tac-Toe game.

    Only occupied positions are stored in pieces, so the number of
    pieces is always the number of moves played.
    """

    pieces: dict[Pos, Cell] = field(default_factory=dict)
    turn: Cell = Cell.PLAYER  # Person moves first

    def __str__(self) -> str:
        """Return text representation of game board state."""
        return render_grid(lambda row, col: SYMBOLS[self.get(row, col)])

    def get(self, row: int, col: int) -> Cell:
        """Return cell at given row and column."""
        return self.pieces.get((row, col), Cell.EMPTY)

    def count(self, mark: Cell) -> int:
        """Return number of cells holding given mark."""
        if mark == Cell.EMPTY:
            return BOARD_SIZE**2 - len(self.pieces)
        return sum(1 for piece in self.pieces.values() if piece == mark)

    def available_moves(self) -> tuple[Pos, ...]:
        """Return every empty position in row-major order."""
        pieces = self.pieces
        return tuple(pos for pos in POSITIONS if pos not in pieces)

    def has_won(self, mark: Cell) -> bool:
        """Return if given mark has completed any of the eight lines."""
        pieces = self.pieces
        for first, second, third in LINES:
            if (
                pieces.get(first) == mark
                and pieces.get(second) == mark
                and pieces.get(third) == mark
            ):
                return True
        return False

    def get_winner(self) -> Cell | None:
        """Return mark that has completed a line or None.

        Scans every line once for both marks. Both marks having a line
        cannot happen with alternating turns.
        """
        winner: Cell | None = None
        pieces = self.pieces
        for first, second, third in LINES:
            mark = pieces.get(first)
            if (
                mark is not None
                and pieces.get(second) == mark
                and pieces.get(third) == mark
            ):
                assert winner in {None, mark}, "Both marks have a line"
                winner = mark
        return winner

    def is_full(self) -> bool:
        """Return if there are no empty cells left."""
        return len(self.pieces) == BOARD_SIZE**2

    def is_terminal(self) -> bool:
        """Return if either mark has won or the board is full."""
        return self.get_winner() is not None or self.is_full()

    def with_turn(self, mark: Cell) -> Self:
        """Return copy of self with given mark to move."""
        if mark == Cell.EMPTY:
            raise ValueError("Turn must belong to a player")
        return self.__class__(dict(self.pieces), mark)

    def place(self, position: Pos, mark: Cell) -> Self:
        """Return new state with mark placed at position.

        Turn passes to the other mark.
        """
        row, col = position
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise ValueError(f"{position} is not on the board")
        if mark == Cell.EMPTY:
            raise ValueError("Cannot place an empty mark")
        if position in self.pieces:
            raise ValueError(f"{position} is already taken")

        return self.place_unchecked(position, mark)

    def place_unchecked(self, position: Pos, mark: Cell) -> Self:
        """Return new state with mark placed at position, without validation.

        Position must be empty and mark must be a player mark.
        """
        pieces_copy = dict(self.pieces)
        pieces_copy[position] = mark
        return self.__class__(pieces_copy, mark.opposite())

    def perform_action(self, position: Pos) -> Self:
        """Return new state after current turn's mark is placed at position."""
        return self.place(position, self.turn)


def new_board() -> State:
    """Return empty board with the person to move."""
    return State()


def available_moves(board: State) -> tuple[Pos, ...]:
    """Return every empty position of board in row-major order."""
    return board.available_moves()


def has_won(board: State, mark: Cell) -> bool:
    """Return if mark has completed a line on board."""
    return board.has_won(mark)


def is_full(board: State) -> bool:
    """Return if board has no empty cells."""
    return board.is_full()
