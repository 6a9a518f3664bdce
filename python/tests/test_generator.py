"""Shuffle generator — recorded histories and solvability by construction."""

from __future__ import annotations

import random

import pytest

from backend.config import PuzzleConfig
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamemoves import MoveEngine
from backend.engine.gamesolver import Solver
from backend.models.board import Board


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_zero_moves_is_solved(size: int) -> None:
    result = GameGenerator.shuffle(size, 0)
    assert result.board == Board.solved(size)
    assert result.history == ()


def test_negative_moves_rejected() -> None:
    with pytest.raises(ValueError):
        GameGenerator.shuffle(3, -1)


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
@pytest.mark.parametrize("moves_count", [1, 2, 7, 50, 300])
def test_history_unwinds_to_solved(size: int, moves_count: int) -> None:
    rng = random.Random(size * 1000 + moves_count)
    result = GameGenerator.shuffle(size, moves_count, rng)

    assert len(result.history) == moves_count
    assert MoveEngine.replay(Board.solved(size), result.history) == result.board

    board = result.board
    for tile in Solver.unwind(result.history):
        nxt = MoveEngine.apply(board, tile)
        assert nxt is not None
        board = nxt
    assert board.is_solved()


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_shuffle_never_undoes_previous_move(size: int) -> None:
    result = GameGenerator.shuffle(size, 500, random.Random(size))
    for prev, cur in zip(result.history, result.history[1:]):
        assert prev != cur


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_shuffled_boards_are_solvable(size: int) -> None:
    rng = random.Random(99)
    for _ in range(20):
        result = GameGenerator.shuffle(size, rng.randint(0, 200), rng)
        assert Solver.is_solvable(result.board)


def test_seeded_shuffles_are_reproducible() -> None:
    a = GameGenerator.shuffle(4, 100, random.Random(7))
    b = GameGenerator.shuffle(4, 100, random.Random(7))
    assert a == b


def test_solved_matches_board_model() -> None:
    assert GameGenerator.solved(5) == Board.solved(5)


# -- generate -----------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4])
def test_generate_is_never_solved(size: int, rng: random.Random) -> None:
    config = PuzzleConfig()
    for _ in range(10):
        result = GameGenerator.generate(size, config.shuffle_moves(size), rng)
        assert not result.board.is_solved()


def test_generate_escapes_the_2x2_cycle(rng: random.Random) -> None:
    # Twelve non-reversing moves on a 2×2 board always return to solved.
    assert GameGenerator.shuffle(2, 12, rng).board.is_solved()

    result = GameGenerator.generate(2, 12, rng)
    assert not result.board.is_solved()
    assert len(result.history) == 13


@pytest.mark.parametrize("moves_count", [0, -4])
def test_generate_rejects_non_positive_moves(moves_count: int) -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(3, moves_count)


def test_generate_requires_explicit_length() -> None:
    with pytest.raises(TypeError):
        GameGenerator.generate(3)  # type: ignore[call-arg]
