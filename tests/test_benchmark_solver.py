"""Tests for the solver benchmark script helpers."""

import pytest

from backend.solver.backtracking import SudokuSolver
from scripts.benchmark_solver import (
    BUILTIN_PUZZLES,
    load_puzzles,
    main,
    parse_args,
    parse_puzzle,
    run_benchmark,
)


def test_parse_puzzle_accepts_dots_and_zeros():
    grid = parse_puzzle("." * 40 + "5" + "0" * 40)

    assert len(grid) == 9
    assert all(len(row) == 9 for row in grid)
    assert grid[4][4] == 5
    assert sum(cell for row in grid for cell in row) == 5


def test_parse_puzzle_rejects_wrong_length():
    with pytest.raises(ValueError, match="81 cells"):
        parse_puzzle("123")


def test_load_puzzles_from_builtin_and_file(tmp_path):
    puzzle_file = tmp_path / "puzzles.txt"
    puzzle_file.write_text(BUILTIN_PUZZLES["classic"] + "\n\n" + "0" * 81 + "\n")

    puzzles = load_puzzles(["classic", str(puzzle_file)])

    assert list(puzzles) == ["classic", "puzzles.txt:1", "puzzles.txt:2"]
    assert puzzles["classic"] == puzzles["puzzles.txt:1"]


def test_run_benchmark_reports_result():
    grid = parse_puzzle(BUILTIN_PUZZLES["classic"])
    result, avg = run_benchmark(SudokuSolver(), grid, rounds=2)

    assert result.success is True
    assert avg >= 0.0


def test_main_reports_budget_exceeded_row(capsys):
    exit_code = main(["--puzzles", "classic", "--rounds", "1", "--max-steps", "5"])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "classic: outcome=BUDGET_EXCEEDED" in out


def test_main_succeeds_without_budget(capsys):
    exit_code = main(["--puzzles", "classic", "--rounds", "1"])

    assert exit_code == 0
    assert "classic: outcome=SOLVED" in capsys.readouterr().out


def test_parse_args_rejects_zero_rounds():
    with pytest.raises(SystemExit):
        parse_args(["--rounds", "0"])
