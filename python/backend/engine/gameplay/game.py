"""Core gameplay logic — processes moves, auto-solves and checks win condition."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator, Sequence

from backend.config import PuzzleConfig
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamemoves import IllegalMoveError, MoveEngine
from backend.engine.gamesolver import Solver, SolveStrategy
from backend.engine.gamestate import GameState, Phase
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single puzzle session.

    The session starts idle on a solved board.  Shuffling records the move
    history; manual moves extend it, so unwinding the history always leads
    back to the solved board.
    """

    def __init__(
        self,
        size: int,
        config: PuzzleConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or PuzzleConfig()
        self.rng = rng or random.Random()
        self.state = GameState(GameGenerator.solved(size))
        self._history_known = True

    @classmethod
    def from_board(
        cls,
        board: Board,
        config: PuzzleConfig | None = None,
        history: Sequence[int] | None = None,
    ) -> GamePlay:
        """Create a session from an existing board (e.g. loaded from file).

        Without *history* only the search strategy can solve it.
        """
        obj = cls(board.size, config)
        obj.state.reset(board, tuple(history or ()))
        obj._history_known = history is not None
        return obj

    # -- session configuration ------------------------------------------------

    @property
    def size(self) -> int:
        return self.state.board.size

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def history(self) -> tuple[int, ...] | None:
        if not self._history_known:
            return None
        return tuple(self.state.history)

    def shuffle(self, moves_count: int | None = None) -> Board:
        """Start a new scramble at the current size."""
        if moves_count is None:
            result = GameGenerator.generate(
                self.size, self.config.shuffle_moves(self.size), self.rng
            )
        else:
            result = GameGenerator.shuffle(self.size, moves_count, self.rng)
        self.state.reset(result.board, result.history)
        self._history_known = True
        logger.info(
            "New %d×%d scramble (%d moves)", self.size, self.size, len(result.history)
        )
        return result.board

    def resize(self, size: int) -> Board:
        """Discard the current board and history and start solved at *size*."""
        self.state.reset(GameGenerator.solved(size))
        self._history_known = True
        logger.debug("Board resized to %d×%d", size, size)
        return self.state.board

    # -- movement -------------------------------------------------------------

    def move_tile(self, tile: int) -> bool:
        """Move *tile* into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.  Manual moves are ignored while auto-solving.
        """
        if self.state.phase == Phase.SOLVING:
            return False
        return self._apply(tile)

    def move(self, direction: Direction) -> bool:
        """Slide the tile that travels in *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        tile = MoveEngine.tile_for(self.state.board, direction)
        if tile is None:
            return False
        return self.move_tile(tile)

    def slide_tile(self, tile: int) -> list[int]:
        """Slide the row/column segment between *tile* and the blank.

        Returns the single moves applied (empty if *tile* is not in line).
        """
        if self.state.phase == Phase.SOLVING:
            return []
        moves = MoveEngine.slide(self.state.board, tile) or []
        for t in moves:
            self._apply(t)
        return moves

    # -- auto-solve -----------------------------------------------------------

    def auto_solve(self, strategy: SolveStrategy = SolveStrategy.SEARCH) -> list[int] | None:
        """Plan a solution and enter the solving phase.

        Returns the moves to feed to :meth:`play_out`, ``[]`` if already
        solved, or ``None`` when *strategy* has no answer.
        """
        if self.state.is_solved:
            return []
        moves = Solver.plan(
            self.state.board,
            self.history,
            strategy,
            self.config.max_expansions,
        )
        if moves is None:
            logger.info("No solution found with strategy %s", strategy)
            return None
        self.state.phase = Phase.SOLVING
        logger.debug("Solving with %s: %d moves", strategy, len(moves))
        return moves

    def play_out(self, moves: Sequence[int]) -> Iterator[Board]:
        """Apply *moves* one per iteration, yielding each new board.

        The caller decides the pace between iterations.  Iteration stops
        early if the session was reshuffled, resized or cancelled.
        """
        epoch = self.state.epoch
        for tile in moves:
            if self.state.epoch != epoch or self.state.phase != Phase.SOLVING:
                logger.debug("Replay interrupted")
                return
            self._apply(tile, strict=True)
            yield self.state.board
        if self.state.phase == Phase.SOLVING:
            self.state.phase = (
                Phase.SOLVED if self.state.is_solved else Phase.SHUFFLED
            )

    def cancel_solve(self) -> None:
        if self.state.phase == Phase.SOLVING:
            self.state.phase = Phase.SHUFFLED

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- helpers --------------------------------------------------------------

    def _apply(self, tile: int, strict: bool = False) -> bool:
        board = MoveEngine.apply(self.state.board, tile)
        if board is None:
            if strict:
                raise IllegalMoveError(f"Planned move {tile} is not legal.")
            return False
        self.state.record(tile, board)
        if board.is_solved():
            # The path back from a solved board is empty.
            self.state.history.clear()
            self._history_known = True
        if self.state.phase == Phase.SOLVING:
            return True
        if board.is_solved():
            self.state.phase = Phase.SOLVED
            logger.info("Puzzle solved in %d moves", self.state.moves)
        else:
            self.state.phase = Phase.SHUFFLED
        return True
