from backend.engine.gamemoves.moves import IllegalMoveError, MoveEngine

__all__ = ["IllegalMoveError", "MoveEngine"]
