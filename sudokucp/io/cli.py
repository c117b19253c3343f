"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from ..config import BOX_SIZE, EMPTY, VALIDATE_GIVENS
from ..core.csp import SudokuSolver
from ..core.model import Grid, InvalidPuzzleError
from ..logging_utils import set_level
from . import parser


def format_grid(grid: Grid) -> str:
    lines = []
    for r, row in enumerate(grid):
        if r and r % BOX_SIZE == 0:
            lines.append("------+-------+------")
        chunks = []
        for start in range(0, len(row), BOX_SIZE):
            chunk = row[start:start + BOX_SIZE]
            chunks.append(" ".join("." if v == EMPTY else str(v) for v in chunk))
        lines.append(" | ".join(chunks))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Sudoku solver (AC-3 + backtracking with forward checking)")
    ap.add_argument("puzzle", type=Path, help="Path to puzzle YAML")
    ap.add_argument("--no-validate", action="store_true", help="Skip the up-front check of the givens")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log search details")
    args = ap.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    try:
        puz = parser.load_puzzle(args.puzzle)
        validate = VALIDATE_GIVENS and puz.options.get("validate", True) and not args.no_validate
        solver = SudokuSolver(puz.grid, validate=validate)
    except InvalidPuzzleError as exc:
        print(f"Invalid puzzle: {exc}", file=sys.stderr)
        return 2
    except (OSError, yaml.YAMLError) as exc:
        print(f"Cannot read puzzle {args.puzzle}: {exc}", file=sys.stderr)
        return 2

    print(f"Loaded puzzle '{puz.name}'")
    print(format_grid(puz.grid))
    print()

    solved = solver.solve()
    stats = solver.stats
    if solved:
        print(format_grid(puz.grid))
    else:
        print("No solution found.")
    print(f"Assignments: {stats.assignments}, Backtracks: {stats.backtracks}, Revisions: {stats.revisions}")
    return 0 if solved else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
