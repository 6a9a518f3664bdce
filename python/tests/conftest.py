"""Shared fixtures for the puzzle test suite."""

from __future__ import annotations

import random

import pytest

from backend.models.board import Board


@pytest.fixture
def rng() -> random.Random:
    """A seeded generator so shuffles are reproducible."""
    return random.Random(1234)


@pytest.fixture
def solved_2x2() -> Board:
    return Board.solved(2)


@pytest.fixture
def solved_3x3() -> Board:
    return Board.solved(3)


@pytest.fixture
def unsolvable_3x3() -> Board:
    """Solved board with tiles 1 and 2 swapped (odd permutation)."""
    return Board.from_flat(3, [2, 1, 3, 4, 5, 6, 7, 8, 0])
