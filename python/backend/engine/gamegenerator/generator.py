"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from backend.engine.gamemoves import MoveEngine
from backend.models.board import Board

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Shuffle:
    """A scrambled board and the exact moves that produced it."""

    board: Board
    history: tuple[int, ...]


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def shuffle(
        size: int,
        moves_count: int,
        rng: random.Random | None = None,
    ) -> Shuffle:
        """Scramble a solved board with *moves_count* random legal moves.

        The tile moved on the previous step is never picked again straight
        away unless it is the only candidate, so the walk does not undo
        itself.  Every result is reachable from the solved board and is
        therefore solvable.
        """
        if moves_count < 0:
            raise ValueError(f"moves_count must not be negative, got {moves_count}.")
        rng = rng or random.Random()

        board = Board.solved(size)
        history: list[int] = []
        prev: int | None = None

        for _ in range(moves_count):
            candidates = MoveEngine.legal_tiles(board)
            filtered = [t for t in candidates if t != prev]
            tile = rng.choice(filtered or candidates)
            nxt = MoveEngine.apply(board, tile)
            assert nxt is not None, "legal tile rejected by the move engine"
            board = nxt
            history.append(tile)
            prev = tile

        logger.debug(
            "Shuffled %d×%d board with %d moves (solved=%s)",
            size, size, moves_count, board.is_solved(),
        )
        return Shuffle(board=board, history=tuple(history))

    @staticmethod
    def generate(
        size: int,
        moves_count: int,
        rng: random.Random | None = None,
    ) -> Shuffle:
        """Return a random *unsolved* scramble of the given size.

        Callers pick the length, usually ``PuzzleConfig.shuffle_moves(size)``.
        """
        if moves_count < 1:
            raise ValueError(
                f"Cannot generate an unsolved board with {moves_count} moves."
            )

        while True:
            result = GameGenerator.shuffle(size, moves_count, rng)
            # Ensure the board is not already solved
            if not result.board.is_solved():
                return result
            # A 2×2 walk without reversals is a fixed cycle, so the same
            # length would land on the solved state again.
            moves_count += 1
            logger.debug("Scramble landed on the solved state, retrying")
