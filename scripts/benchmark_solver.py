"""Benchmark backtracking solver runtime on a set of puzzles."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from backend.solver.backtracking import (
    Grid,
    SearchBudgetExceeded,
    SolveResult,
    SudokuSolver,
    is_solved_grid,
)

BUILTIN_PUZZLES = {
    "classic": (
        "530070000600195000098000060800060003400803001"
        "700020006060000280000419005000080079"
    ),
    "seventeen": (
        "000050709008000200006010000200700300050600000"
        "000804000000000060700000000030000000"
    ),
    "empty": "0" * 81,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark Sudoku solver runtime")
    parser.add_argument(
        "--puzzles",
        nargs="+",
        default=sorted(BUILTIN_PUZZLES),
        help="Built-in puzzle names, 81-char strings or files with one puzzle per line",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=3,
        help="Number of rounds for each puzzle",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=0,
        help="Placement budget per solve (0 for unbounded)",
    )
    args = parser.parse_args(argv)
    if args.rounds < 1:
        parser.error("--rounds must be at least 1")
    return args


def parse_puzzle(text: str) -> Grid:
    """Parse an 81-character puzzle string; '.' and '0' mark empty cells."""
    digits = [0 if ch == "." else int(ch) for ch in text.strip() if ch == "." or ch.isdigit()]
    if len(digits) != 81:
        raise ValueError(f"Puzzle must have 81 cells, got {len(digits)}")
    return [digits[r * 9 : (r + 1) * 9] for r in range(9)]


def load_puzzles(refs: list[str]) -> dict[str, Grid]:
    puzzles: dict[str, Grid] = {}
    for ref in refs:
        if ref in BUILTIN_PUZZLES:
            puzzles[ref] = parse_puzzle(BUILTIN_PUZZLES[ref])
            continue

        path = Path(ref)
        if path.is_file():
            lines = [line for line in path.read_text().splitlines() if line.strip()]
            for idx, line in enumerate(lines):
                puzzles[f"{path.name}:{idx + 1}"] = parse_puzzle(line)
            continue

        puzzles[ref[:12]] = parse_puzzle(ref)
    return puzzles


def run_benchmark(
    solver: SudokuSolver, grid: Grid, rounds: int
) -> tuple[SolveResult, float]:
    start = time.perf_counter()

    for _ in range(rounds):
        result = solver.solve(grid)

    elapsed = time.perf_counter() - start
    return result, elapsed / rounds


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    puzzles = load_puzzles(args.puzzles)
    solver = SudokuSolver(max_steps=args.max_steps)

    print("Solver benchmark results")
    print(f"puzzles={len(puzzles)} rounds={args.rounds} max_steps={args.max_steps}")

    failures = 0
    for name, grid in puzzles.items():
        try:
            result, avg = run_benchmark(solver, grid, args.rounds)
        except SearchBudgetExceeded:
            failures += 1
            print(f"{name}: outcome=BUDGET_EXCEEDED max_steps={args.max_steps}")
            continue

        valid = result.success and is_solved_grid(result.grid)
        if result.success and not valid:
            failures += 1
        print(
            f"{name}: outcome={result.outcome.value} steps={result.steps} "
            f"avg={avg * 1000.0:.2f}ms"
        )

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
