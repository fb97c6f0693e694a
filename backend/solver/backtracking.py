"""Sudoku solver using backtracking algorithm."""

from __future__ import annotations

import copy
import enum
import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

_LOGGER = logging.getLogger(__name__)

Grid = List[List[int]]

GRID_SIZE = 9
BOX_SIZE = 3
EMPTY = 0


class Position(NamedTuple):
    """A (row, col) cell address, both in 0-8."""

    row: int
    col: int

    @property
    def box(self) -> Tuple[int, int]:
        """Index of the 3x3 box containing this cell."""
        return self.row // BOX_SIZE, self.col // BOX_SIZE


class Outcome(enum.Enum):
    """Terminal outcome of a solve invocation."""

    SOLVED = "SOLVED"
    UNSOLVABLE = "UNSOLVABLE"


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a solve plus the grid handed back to the caller.

    On ``SOLVED`` the grid is the completed board. On ``UNSOLVABLE`` it is an
    unmodified copy of the input, never a partially backtracked board.
    """

    outcome: Outcome
    grid: Grid
    steps: int = 0

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.SOLVED


class InvalidGridError(ValueError):
    """Raised when a grid is not 9 rows of 9 integers in 0-9."""


class SearchBudgetExceeded(RuntimeError):
    """Raised when the search uses more placements than ``max_steps`` allows."""

    def __init__(self, max_steps: int):
        super().__init__(f"Search exceeded budget of {max_steps} placements")
        self.max_steps = max_steps


def is_valid_placement(grid: Grid, position: Position, digit: int) -> bool:
    """
    Check if placing digit at position is valid.

    The target cell itself is ignored, so an already placed value can be
    rechecked against the rest of the board.

    Args:
        grid: Current grid state
        position: Cell to place into
        digit: Number to place (1-9)

    Returns:
        True if placement is valid, False otherwise
    """
    row, col = position

    # Check row
    for c in range(GRID_SIZE):
        if c != col and grid[row][c] == digit:
            return False

    # Check column
    for r in range(GRID_SIZE):
        if r != row and grid[r][col] == digit:
            return False

    # Check 3x3 box
    box_row = (row // BOX_SIZE) * BOX_SIZE
    box_col = (col // BOX_SIZE) * BOX_SIZE

    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            if (r, c) != (row, col) and grid[r][c] == digit:
                return False

    return True


def find_next_empty_cell(grid: Grid) -> Optional[Position]:
    """
    Find the next empty cell (contains 0) in row-major order.

    Args:
        grid: Current grid state

    Returns:
        Position of the first empty cell, None if the grid is full
    """
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if grid[r][c] == EMPTY:
                return Position(r, c)
    return None


def is_well_formed_grid(grid: Grid) -> bool:
    """Check the grid is 9 rows of 9 integers in 0-9."""
    if not isinstance(grid, list) or len(grid) != GRID_SIZE:
        return False

    for row in grid:
        if not isinstance(row, list) or len(row) != GRID_SIZE:
            return False
        for cell in row:
            # bool is an int subclass but never a cell value
            if isinstance(cell, bool) or not isinstance(cell, int):
                return False
            if cell < EMPTY or cell > GRID_SIZE:
                return False

    return True


def is_consistent_grid(grid: Grid) -> bool:
    """Check existing non-zero givens are mutually consistent."""
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            num = grid[r][c]
            if num == EMPTY:
                continue
            if not is_valid_placement(grid, Position(r, c), num):
                return False
    return True


def is_valid_grid(grid: Grid) -> bool:
    """
    Validate that a grid has correct structure and initial values.

    Args:
        grid: 9x9 grid to validate

    Returns:
        True if grid is valid, False otherwise
    """
    return is_well_formed_grid(grid) and is_consistent_grid(grid)


def is_solved_grid(grid: Grid) -> bool:
    """Check the grid is completely filled and obeys every constraint."""
    if not is_valid_grid(grid):
        return False
    return find_next_empty_cell(grid) is None


class SudokuSolver:
    """Solves Sudoku puzzles using backtracking."""

    def __init__(self, max_steps: Optional[int] = None):
        if max_steps is not None and max_steps < 0:
            raise ValueError("max_steps must be non-negative")
        self.max_steps = max_steps or None
        self.steps = 0

    def solve(self, grid: Grid) -> SolveResult:
        """
        Solve a Sudoku puzzle.

        The input grid is never mutated; the search runs on a private copy.

        Args:
            grid: 9x9 list of lists with 0 for empty cells

        Returns:
            SolveResult holding the solved grid, or a copy of the input
            when no solution exists

        Raises:
            InvalidGridError: grid is not 9x9 with values in 0-9
            SearchBudgetExceeded: search needed more than max_steps placements
        """
        if not is_well_formed_grid(grid):
            raise InvalidGridError("Grid must be 9 rows of 9 integers in 0-9")

        self.steps = 0
        snapshot = copy.deepcopy(grid)
        grid_copy = copy.deepcopy(grid)

        if is_consistent_grid(grid_copy) and self._solve_recursive(grid_copy):
            _LOGGER.debug("Solved puzzle in %d placements", self.steps)
            return SolveResult(Outcome.SOLVED, grid_copy, self.steps)

        _LOGGER.debug("Puzzle unsolvable after %d placements", self.steps)
        return SolveResult(Outcome.UNSOLVABLE, snapshot, self.steps)

    def _solve_recursive(self, grid: Grid) -> bool:
        """Recursively solve the puzzle using backtracking."""
        empty = find_next_empty_cell(grid)
        if empty is None:
            return True

        row, col = empty

        for num in range(1, GRID_SIZE + 1):
            if not is_valid_placement(grid, empty, num):
                continue

            self._count_step()
            grid[row][col] = num

            if self._solve_recursive(grid):
                return True

            grid[row][col] = EMPTY

        return False

    def _count_step(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise SearchBudgetExceeded(self.max_steps)


def solve(grid: Grid) -> Tuple[bool, Grid]:
    """Convenience function to solve a Sudoku grid."""
    result = SudokuSolver().solve(grid)
    return result.success, result.grid
