"""Tic-Tac-Toe Game Module."""

# nopycln: file


from . import (
    computer_player,
    game,
    minimax,
    state,
    statemachine,
    tictactoe_minimax,
)
