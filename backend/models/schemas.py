"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_EXAMPLE_GRID = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    model_config = ConfigDict(json_schema_extra={"example": {"cells": _EXAMPLE_GRID}})

    cells: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    message: str = Field(description="Status message")


class BoardRequest(BaseModel):
    """Request body of the board endpoint used by the web client."""

    model_config = ConfigDict(json_schema_extra={"example": {"board": _EXAMPLE_GRID}})

    board: list[list[int]] = Field(description="9x9 board (0 for empty cells)")


class BoardResponse(BaseModel):
    """Board endpoint response: the solution, or the original board on failure."""

    model_config = ConfigDict(populate_by_name=True)

    solved_board: list[list[int]] = Field(
        alias="solvedBoard", description="Solved board, or the input when unsolved"
    )
    status: str = Field(description="SOLVED, INVALID_PUZZLE or BUDGET_EXCEEDED")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    max_steps: int | None = Field(
        default=None, description="Placement budget per solve (None if unbounded)"
    )
