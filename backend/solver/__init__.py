"""Solver module exports."""

from .backtracking import (
    InvalidGridError,
    Outcome,
    Position,
    SearchBudgetExceeded,
    SolveResult,
    SudokuSolver,
    solve,
)

__all__ = [
    "InvalidGridError",
    "Outcome",
    "Position",
    "SearchBudgetExceeded",
    "SolveResult",
    "SudokuSolver",
    "solve",
]
