"""Tuning parameters for a puzzle session."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_EXPANSIONS = 10_000
DEFAULT_SHUFFLE_FACTOR = 3
DEFAULT_REPLAY_DELAY = 0.15


@dataclass(frozen=True)
class PuzzleConfig:
    """Session configuration, passed explicitly to the engine.

    ``max_expansions`` caps the A* search, ``shuffle_factor`` scales the
    default scramble length (``cells² × factor``) and ``replay_delay`` is the
    pause callers put between animated steps.
    """

    max_expansions: int = DEFAULT_MAX_EXPANSIONS
    shuffle_factor: int = DEFAULT_SHUFFLE_FACTOR
    replay_delay: float = DEFAULT_REPLAY_DELAY

    def __post_init__(self) -> None:
        if self.max_expansions < 1:
            raise ValueError("max_expansions must be positive.")
        if self.shuffle_factor < 1:
            raise ValueError("shuffle_factor must be positive.")
        if self.replay_delay < 0:
            raise ValueError("replay_delay must not be negative.")

    def shuffle_moves(self, size: int) -> int:
        """Number of random moves used to scramble a *size*×*size* board."""
        cells = size * size
        return cells * cells * self.shuffle_factor
