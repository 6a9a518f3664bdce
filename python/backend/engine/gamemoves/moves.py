"""Move rules — pure functions from a board and a tile label to a new board."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from backend.models.board import Board, Direction, neighbors_of

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when a recorded move sequence contains an illegal step."""


# The offset points to the tile that will slide into the blank.
# UP   → tile below the blank moves up
# DOWN → tile above the blank moves down
# LEFT → tile right of the blank moves left
# RIGHT→ tile left of the blank moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class MoveEngine:
    """Stateless move rules — all methods are static and never mutate."""

    @staticmethod
    def is_legal(board: Board, tile: int) -> bool:
        if tile == 0:
            return False
        cell = board.cell_of(tile)
        if cell is None:
            return False
        return cell in neighbors_of(board.blank_cell, board.size)

    @staticmethod
    def apply(board: Board, tile: int) -> Board | None:
        """Move *tile* into the adjacent blank.

        Returns the new board, or ``None`` if *tile* is not next to the blank.
        """
        if not MoveEngine.is_legal(board, tile):
            return None
        return board.swapped(board.blank_cell, board.tiles.index(tile))

    @staticmethod
    def legal_tiles(board: Board) -> list[int]:
        """Return the labels of every tile adjacent to the blank."""
        return [board.tiles[c] for c in neighbors_of(board.blank_cell, board.size)]

    @staticmethod
    def successors(board: Board) -> list[tuple[int, Board]]:
        """Return ``(tile, next_board)`` for every legal move from *board*."""
        blank = board.blank_cell
        return [
            (board.tiles[c], board.swapped(blank, c))
            for c in neighbors_of(blank, board.size)
        ]

    @staticmethod
    def tile_for(board: Board, direction: Direction) -> int | None:
        """Return the tile that would travel in *direction*, if any."""
        br, bc = divmod(board.blank_cell, board.size)
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return None
        return board.get_tile(tr, tc)

    # -- multi-tile slides ----------------------------------------------------

    @staticmethod
    def slide(board: Board, tile: int) -> list[int] | None:
        """Decompose a row/column slide into single moves.

        A tile in the same row or column as the blank pushes every tile
        between itself and the blank one cell toward the blank.  The result
        lists those tiles nearest-to-blank first, so applying them in order
        with :meth:`apply` performs the slide.  Returns ``None`` when *tile*
        is not in line with the blank.
        """
        if tile == 0:
            return None
        cell = board.cell_of(tile)
        if cell is None:
            return None

        n = board.size
        br, bc = divmod(board.blank_cell, n)
        tr, tc = divmod(cell, n)
        if br == tr:
            step = 1 if tc > bc else -1
            cells = [br * n + c for c in range(bc + step, tc + step, step)]
        elif bc == tc:
            step = 1 if tr > br else -1
            cells = [r * n + bc for r in range(br + step, tr + step, step)]
        else:
            return None
        return [board.tiles[c] for c in cells]

    # -- sequences ------------------------------------------------------------

    @staticmethod
    def replay(board: Board, moves: Iterable[int]) -> Board:
        """Apply *moves* in order and return the final board.

        Raises :class:`IllegalMoveError` on the first move that is not legal
        from the board reached so far.
        """
        for i, tile in enumerate(moves):
            nxt = MoveEngine.apply(board, tile)
            if nxt is None:
                logger.debug("Replay stopped at step %d: tile %d", i, tile)
                raise IllegalMoveError(
                    f"Move {i} (tile {tile}) is not adjacent to the blank "
                    f"at cell {board.blank_cell}."
                )
            board = nxt
        return board
