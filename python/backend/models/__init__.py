from backend.models.board import (
    MAX_SIZE,
    MIN_SIZE,
    Board,
    Direction,
    InvalidBoardError,
    neighbors_of,
)

__all__ = [
    "MAX_SIZE",
    "MIN_SIZE",
    "Board",
    "Direction",
    "InvalidBoardError",
    "neighbors_of",
]
