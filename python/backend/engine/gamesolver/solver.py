"""Sliding puzzle solver.

Two independent ways back to the goal state:

- *unwind*: reverse the recorded shuffle history (no search needed);
- *search*: A* over board states with the Manhattan-distance heuristic,
  capped at a fixed number of node expansions.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.config import DEFAULT_MAX_EXPANSIONS
from backend.engine.gamemoves import MoveEngine
from backend.models.board import Board

logger = logging.getLogger(__name__)


class SolveStrategy(StrEnum):
    REPLAY = "replay"
    SEARCH = "search"


class SearchOutcome(StrEnum):
    SOLVED = "solved"
    CAP = "cap"
    EXHAUSTED = "exhausted"
    UNSOLVABLE = "unsolvable"


@dataclass(frozen=True)
class SearchResult:
    moves: list[int] | None
    expanded: int
    outcome: SearchOutcome

    @property
    def found(self) -> bool:
        return self.moves is not None


@dataclass(frozen=True)
class _Node:
    board: Board
    g: int
    tile: int | None = None
    parent: _Node | None = None

    def path(self) -> list[int]:
        moves: list[int] = []
        node: _Node | None = self
        while node is not None and node.tile is not None:
            moves.append(node.tile)
            node = node.parent
        moves.reverse()
        return moves


class Solver:
    """Stateless solver — all methods are static."""

    # -- heuristics -----------------------------------------------------------

    @staticmethod
    def manhattan(board: Board) -> int:
        """Sum of grid distances from every numbered tile to its goal cell."""
        n = board.size
        dist = 0
        for cell, tile in enumerate(board.tiles):
            if tile == 0:
                continue
            r, c = divmod(cell, n)
            gr, gc = divmod(tile - 1, n)
            dist += abs(r - gr) + abs(c - gc)
        return dist

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Odd widths need an even number of inversions.  Even widths also
        count the rows between the blank and the bottom row.
        """
        seq = [t for t in board.tiles if t != 0]
        inversions = sum(
            1
            for i, a in enumerate(seq)
            for b in seq[i + 1 :]
            if a > b
        )
        if board.size % 2 == 1:
            return inversions % 2 == 0
        blank_row = board.blank_cell // board.size
        return (inversions + board.size - 1 - blank_row) % 2 == 0

    # -- strategies -----------------------------------------------------------

    @staticmethod
    def unwind(history: Sequence[int]) -> list[int]:
        """Return the moves that undo *history*, most recent first.

        Every move is its own inverse, so replaying the reversed history
        from the shuffled board reaches the solved board.
        """
        return list(reversed(history))

    @staticmethod
    def search(
        board: Board,
        max_expansions: int = DEFAULT_MAX_EXPANSIONS,
    ) -> SearchResult:
        """A* search from *board* to the solved state."""
        if board.is_solved():
            return SearchResult(moves=[], expanded=0, outcome=SearchOutcome.SOLVED)
        if not Solver.is_solvable(board):
            logger.debug("Board has odd parity, skipping search")
            return SearchResult(
                moves=None, expanded=0, outcome=SearchOutcome.UNSOLVABLE
            )

        counter = itertools.count()
        start = _Node(board=board, g=0)
        h0 = Solver.manhattan(board)
        open_heap: list[tuple[int, int, int, _Node]] = [
            (h0, h0, next(counter), start)
        ]
        closed: set[tuple[int, ...]] = set()
        expanded = 0

        while open_heap:
            _, _, _, node = heapq.heappop(open_heap)
            if node.board.key in closed:
                continue
            if node.board.is_solved():
                moves = node.path()
                logger.debug(
                    "Search solved in %d moves after %d expansions",
                    len(moves), expanded,
                )
                return SearchResult(
                    moves=moves, expanded=expanded, outcome=SearchOutcome.SOLVED
                )
            if expanded >= max_expansions:
                logger.debug("Search hit the cap of %d expansions", max_expansions)
                return SearchResult(
                    moves=None, expanded=expanded, outcome=SearchOutcome.CAP
                )

            closed.add(node.board.key)
            expanded += 1

            for tile, nxt in MoveEngine.successors(node.board):
                if nxt.key in closed:
                    continue
                g = node.g + 1
                h = Solver.manhattan(nxt)
                child = _Node(board=nxt, g=g, tile=tile, parent=node)
                heapq.heappush(open_heap, (g + h, h, next(counter), child))

        logger.debug("Open set exhausted after %d expansions", expanded)
        return SearchResult(
            moves=None, expanded=expanded, outcome=SearchOutcome.EXHAUSTED
        )

    @staticmethod
    def solve(
        board: Board,
        max_expansions: int = DEFAULT_MAX_EXPANSIONS,
    ) -> list[int] | None:
        """Return a move sequence that solves *board*, or ``None`` if none found.

        ``None`` means the expansion cap was hit (or the board is not
        solvable); it is not a proof that no solution exists.
        """
        return Solver.search(board, max_expansions).moves

    @staticmethod
    def hint(
        board: Board,
        max_expansions: int = DEFAULT_MAX_EXPANSIONS,
    ) -> int | None:
        """Return the single best next move, or ``None`` if solved / not found."""
        if board.is_solved():
            return None
        moves = Solver.solve(board, max_expansions)
        return moves[0] if moves else None

    @staticmethod
    def plan(
        board: Board,
        history: Sequence[int] | None,
        strategy: SolveStrategy,
        max_expansions: int = DEFAULT_MAX_EXPANSIONS,
    ) -> list[int] | None:
        """Return the moves *strategy* would play from *board*.

        ``REPLAY`` needs the history that produced *board*; without it there
        is nothing to unwind and ``None`` is returned.
        """
        if strategy == SolveStrategy.REPLAY:
            if history is None:
                return None
            return Solver.unwind(history)
        return Solver.solve(board, max_expansions)
