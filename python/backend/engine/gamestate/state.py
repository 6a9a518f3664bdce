"""Tracks the mutable state of a puzzle session."""

from __future__ import annotations

from enum import StrEnum

from backend.models.board import Board


class Phase(StrEnum):
    IDLE = "idle"
    SHUFFLED = "shuffled"
    SOLVING = "solving"
    SOLVED = "solved"


class GameState:
    """Holds the current board, move history, move counter and phase.

    ``epoch`` increases whenever the board is replaced wholesale (new
    shuffle, new size), which lets an in-flight replay notice that its moves
    belong to a board that no longer exists.
    """

    def __init__(self, board: Board, history: tuple[int, ...] = ()) -> None:
        self.board = board
        self.history: list[int] = list(history)
        self.moves: int = 0
        self.epoch: int = 0
        self.phase = Phase.IDLE if board.is_solved() else Phase.SHUFFLED

    # -- board replacement ----------------------------------------------------

    def reset(self, board: Board, history: tuple[int, ...] = ()) -> None:
        self.board = board
        self.history = list(history)
        self.moves = 0
        self.epoch += 1
        self.phase = Phase.IDLE if board.is_solved() else Phase.SHUFFLED

    # -- moves ----------------------------------------------------------------

    def record(self, tile: int, board: Board) -> None:
        self.board = board
        self.history.append(tile)
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
