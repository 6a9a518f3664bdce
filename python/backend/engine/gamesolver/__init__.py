from backend.engine.gamesolver.solver import (
    SearchOutcome,
    SearchResult,
    Solver,
    SolveStrategy,
)

__all__ = ["SearchOutcome", "SearchResult", "Solver", "SolveStrategy"]
