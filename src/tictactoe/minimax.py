"""Minimax - Boilerplate code for Minimax AIs."""

from __future__ import annotations

# Programmed by CoolCat467

# Minimax - Boilerplate code for Minimax AIs
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

__title__ = "Minimax"
__author__ = "CoolCat467"
__version__ = "0.0.0"
__license__ = "GNU General Public License Version 3"

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from math import inf as infinity
from typing import TYPE_CHECKING, Generic, NamedTuple, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable


class Player(IntEnum):
    """Enum for player status."""

    __slots__ = ()
    MIN = auto()
    MAX = auto()


State = TypeVar("State")
Action = TypeVar("Action")


class MinimaxResult(NamedTuple, Generic[Action]):
    """Minimax Result."""

    value: int | float
    action: Action | None


class Minimax(ABC, Generic[State, Action]):
    """Base class for Minimax AIs.

    Searches the full game tree below a state unless a depth limit is
    given. There is no pruning, so every action of every node is visited.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def value(cls, state: State) -> int | float:
        """Return the value of a given game state."""

    @classmethod
    @abstractmethod
    def terminal(cls, state: State) -> bool:
        """Return if given game state is terminal."""

    @classmethod
    @abstractmethod
    def player(cls, state: State) -> Player:
        """Return player status given the state of the game.

        Must return either Player.MIN or Player.MAX.
        """

    @classmethod
    @abstractmethod
    def actions(cls, state: State) -> Iterable[Action]:
        """Return a collection of all possible actions in a given game state."""

    @classmethod
    @abstractmethod
    def result(cls, state: State, action: Action) -> State:
        """Return new game state after performing action on given state."""

    @classmethod
    def terminal_value(cls, state: State) -> int | float | None:
        """Return value of given state if it is terminal, otherwise None.

        Override when terminal and value share work so it is only done
        once per node.
        """
        if cls.terminal(state):
            return cls.value(state)
        return None

    @classmethod
    def minimax(
        cls,
        state: State,
        depth: int | None = None,
    ) -> MinimaxResult[Action]:
        """Return minimax result best action for a given state for the current player.

        On ties the first action reaching the best value is kept.
        """
        terminal_value = cls.terminal_value(state)
        if terminal_value is not None:
            return MinimaxResult(terminal_value, None)
        if depth is not None and depth <= 0:
            return MinimaxResult(cls.value(state), None)
        next_down = None if depth is None else depth - 1

        current_player = cls.player(state)
        value: int | float
        if current_player == Player.MAX:
            value = -infinity
            best = max
        elif current_player == Player.MIN:
            value = infinity
            best = min
        else:
            raise ValueError(f"Unexpected player type {current_player!r}")

        best_action: Action | None = None
        for action in cls.actions(state):
            result = cls.minimax(cls.result(state, action), next_down)
            new_value = best(value, result.value)
            if new_value != value:
                best_action = action
            value = new_value
        return MinimaxResult(value, best_action)


if __name__ == "__main__":
    print(f"{__title__}\nProgrammed by {__author__}.\n")
