"""Test computer player module."""

from __future__ import annotations

import random
from collections import Counter
from math import inf as infinity

import pytest

from tictactoe import computer_player
from tictactoe.computer_player import ComputerPlayer, best_move
from tictactoe.state import Cell, State, has_won, new_board

MARKS = {"_": Cell.EMPTY, "X": Cell.PLAYER, "O": Cell.COMPUTER}


def board_from(text: str) -> State:
    """Return board from rows separated by slashes, like "XO_/___/___"."""
    pieces = {}
    for row, line in enumerate(text.split("/")):
        for col, char in enumerate(line):
            if MARKS[char] != Cell.EMPTY:
                pieces[(row, col)] = MARKS[char]
    return State(pieces, Cell.COMPUTER)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(467)


def test_takes_win(rng: random.Random) -> None:
    assert best_move(board_from("OO_/XX_/___"), rng) == (0, 2)


def test_blocks_column(rng: random.Random) -> None:
    assert best_move(board_from("X__/X__/_O_"), rng) == (2, 0)


def test_blocks_row(rng: random.Random) -> None:
    assert best_move(board_from("XX_/_O_/___"), rng) == (0, 2)


def test_prefers_win_over_block(rng: random.Random) -> None:
    assert best_move(board_from("XX_/OO_/X__"), rng) == (1, 2)


def test_double_threat_picks_first_block(rng: random.Random) -> None:
    board = board_from("XOX/OXO/___")
    move = best_move(board, rng)
    # Every move loses, first of the tied moves is kept
    assert move == (2, 0)
    after = board.place(move, Cell.COMPUTER)
    assert not has_won(after, Cell.COMPUTER)
    assert has_won(after.place((2, 2), Cell.PLAYER), Cell.PLAYER)


def test_answers_corner_with_center(rng: random.Random) -> None:
    assert best_move(board_from("X__/___/___"), rng) == (1, 1)


def test_deterministic_after_first_move() -> None:
    board = board_from("X__/_O_/__X")
    moves = {best_move(board, random.Random(seed)) for seed in range(5)}
    assert len(moves) == 1


def test_does_not_modify_board(rng: random.Random) -> None:
    board = board_from("X__/_O_/__X")
    before = dict(board.pieces)
    best_move(board, rng)
    assert board.pieces == before


def test_full_board_no_move(rng: random.Random) -> None:
    assert best_move(board_from("XOX/XOO/OXX"), rng) is None


def test_one_cell_left(rng: random.Random) -> None:
    assert best_move(board_from("XOX/XOO/OX_"), rng) == (2, 2)


def test_random_opening_uniform() -> None:
    rng = random.Random(1234)
    board = new_board()
    trials = 9000
    counts = Counter(best_move(board, rng) for _ in range(trials))
    assert set(counts) == set(board.available_moves())
    for count in counts.values():
        assert 800 < count < 1200


def test_random_opening_seeded() -> None:
    board = new_board()
    first = best_move(board, random.Random(99))
    assert first == best_move(board, random.Random(99))


def test_no_best_move_falls_back_to_random(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    rng: random.Random,
) -> None:
    def never_better(board: State, maximizing: bool) -> float:
        return -infinity

    monkeypatch.setattr(computer_player, "search", never_better)
    board = board_from("X__/_O_/__X")
    move = best_move(board, rng)
    assert move in board.available_moves()
    captured = capsys.readouterr()
    assert "No best move found" in captured.err


def test_computer_player_perform_turn() -> None:
    player = ComputerPlayer(random.Random(5))
    assert player.perform_turn(board_from("OO_/XX_/___")) == (0, 2)
    assert player.perform_turn(board_from("XOX/XOO/OXX")) is None


def test_computer_player_default_rng() -> None:
    player = ComputerPlayer()
    assert isinstance(player.rng, random.Random)
    assert player.perform_turn(new_board()) in new_board().available_moves()
