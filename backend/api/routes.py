"""API routes for the Sudoku solver application."""

from __future__ import annotations

import logging
import os
from typing import TypeVar

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from ..models.schemas import (
    BoardRequest,
    BoardResponse,
    HealthResponse,
    SolveRequest,
    SolveResponse,
)
from ..solver.backtracking import (
    SearchBudgetExceeded,
    SolveResult,
    SudokuSolver,
    is_well_formed_grid,
)

router = APIRouter()
_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T", int, float)

DEFAULT_MAX_STEPS = 2_000_000

STATUS_SOLVED = "SOLVED"
STATUS_INVALID_PUZZLE = "INVALID_PUZZLE"
STATUS_BUDGET_EXCEEDED = "BUDGET_EXCEEDED"


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


def _get_solver_settings() -> tuple[int | None, str | None]:
    """Return the configured placement budget (None means unbounded)."""
    max_steps = _env("SOLVER_MAX_STEPS", DEFAULT_MAX_STEPS)
    if max_steps < 0:
        return None, f"SOLVER_MAX_STEPS must be >= 0, got {max_steps}"
    return max_steps or None, None


def _run_solver(grid: list[list[int]]) -> SolveResult:
    max_steps, _ = _get_solver_settings()
    return SudokuSolver(max_steps=max_steps).solve(grid)


def _board_response(board: list[list[int]], status_text: str, code: int) -> JSONResponse:
    body = BoardResponse(solved_board=board, status=status_text)
    return JSONResponse(status_code=code, content=body.model_dump(by_alias=True))


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    max_steps, error = _get_solver_settings()

    return HealthResponse(
        status="healthy" if error is None else "misconfigured",
        max_steps=max_steps,
    )


@router.post("/api/solve", response_model=BoardResponse, tags=["Sudoku"])
def solve_board(request: BoardRequest):
    """
    Solve a board posted by the web client.

    Returns 200 with status SOLVED and the completed board, or 400 with
    status INVALID_PUZZLE and the original board.
    """
    board = request.board

    if not is_well_formed_grid(board):
        _LOGGER.info("Rejected malformed board")
        return _board_response(board, STATUS_INVALID_PUZZLE, status.HTTP_400_BAD_REQUEST)

    try:
        result = _run_solver(board)
    except SearchBudgetExceeded as e:
        _LOGGER.warning("Board search aborted: %s", e)
        return _board_response(
            board, STATUS_BUDGET_EXCEEDED, status.HTTP_422_UNPROCESSABLE_ENTITY
        )

    if not result.success:
        _LOGGER.info("Board has no solution (%d placements tried)", result.steps)
        return _board_response(
            result.grid, STATUS_INVALID_PUZZLE, status.HTTP_400_BAD_REQUEST
        )

    return _board_response(result.grid, STATUS_SOLVED, status.HTTP_200_OK)


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
def solve_sudoku(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        }
    }
    Where each row is a list of 9 integers (0 for empty).
    """
    grid = request.grid.cells

    # Validate grid format
    if not is_well_formed_grid(grid):
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message="Invalid Sudoku grid format",
        )

    try:
        result = _run_solver(grid)
    except SearchBudgetExceeded as e:
        _LOGGER.warning("Grid search aborted: %s", e)
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message="Search budget exceeded",
        )
    except Exception as e:
        _LOGGER.exception("Unexpected solver failure")
        raise HTTPException(status_code=500, detail=str(e))

    if not result.success:
        return SolveResponse(
            success=False, original=grid, solved=None, message="Puzzle has no solution"
        )

    return SolveResponse(
        success=True,
        original=grid,
        solved=result.grid,
        message="Puzzle solved successfully",
    )
