"""Backtracking constraint solver with forward checking.

``SudokuSolver`` owns the state of one solve: the caller's grid, the domain
store built from it and the search counters. The grid is filled in place;
when no solution exists every placement is undone so the caller gets back
exactly the board it passed in.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..config import EMPTY, VALIDATE_GIVENS
from ..logging_utils import get_logger
from .constraints import is_valid, neighbors
from .domains import initial_domains
from .grid import find_empty_cell, validate_givens
from .model import Cell, Domains, Grid, SearchStats
from .propagation import ac3

logger = get_logger("csp")

Removal = Tuple[Cell, int]


def undo_removals(domains: Domains, removals: List[Removal]) -> None:
    """Put back the values recorded in ``removals``, newest first."""
    for (row, col), value in reversed(removals):
        domains[row][col].add(value)


def forward_check(grid: Grid, domains: Domains, cell: Cell, value: int) -> Optional[List[Removal]]:
    """Remove ``value`` from the domains of the open neighbors of ``cell``.

    Returns the list of removals so the caller can undo them on backtrack, or
    ``None`` when a neighbor runs out of candidates. On failure the removals
    made by this call have already been reverted.
    """
    removals: List[Removal] = []
    for row, col in neighbors(cell):
        if grid[row][col] != EMPTY:
            continue
        domain = domains[row][col]
        if value not in domain:
            continue
        domain.discard(value)
        removals.append(((row, col), value))
        if not domain:
            undo_removals(domains, removals)
            return None
    return removals


class SudokuSolver:
    """One solve session over a caller-owned grid."""

    def __init__(self, grid: Grid, validate: bool = VALIDATE_GIVENS) -> None:
        if validate:
            validate_givens(grid)
        self.grid = grid
        self.domains: Domains = initial_domains(grid)
        self.stats = SearchStats()

    def propagate(self) -> bool:
        """Run AC-3 over the domain store."""
        return ac3(self.grid, self.domains, self.stats)

    def backtrack(self) -> bool:
        """Depth-first search from the first empty cell.

        Candidates are tried in ascending order. Each failing candidate is
        fully undone: the grid cell, the cell's own domain and every neighbor
        value pruned by forward checking.
        """
        cell = find_empty_cell(self.grid)
        if cell is None:
            return True

        row, col = cell
        for value in sorted(self.domains[row][col]):
            if not is_valid(self.grid, cell, value):
                continue

            saved_domain = self.domains[row][col]
            self.grid[row][col] = value
            self.domains[row][col] = {value}
            self.stats.assignments += 1

            removals = forward_check(self.grid, self.domains, cell, value)
            if removals is None:
                self.stats.forward_check_failures += 1
            else:
                if self.backtrack():
                    return True
                undo_removals(self.domains, removals)

            self.grid[row][col] = EMPTY
            self.domains[row][col] = saved_domain
            self.stats.backtracks += 1

        return False

    def solve(self) -> bool:
        """Propagate, then search. ``False`` leaves the grid as it was given."""
        if not self.propagate():
            logger.debug("AC-3 found an empty domain; board is unsatisfiable")
            logger.info("No solution (rejected by propagation)")
            return False
        logger.debug(
            "AC-3 done: %d arcs, %d revisions",
            self.stats.arcs_processed,
            self.stats.revisions,
        )

        solved = self.backtrack()
        logger.info(
            "%s after %d assignments, %d backtracks",
            "Solved" if solved else "No solution",
            self.stats.assignments,
            self.stats.backtracks,
        )
        return solved


def solve(grid: Grid, validate: bool = VALIDATE_GIVENS) -> bool:
    """Solve ``grid`` in place.

    Raises ``InvalidPuzzleError`` when ``validate`` is set and the givens are
    malformed or conflicting.
    """
    return SudokuSolver(grid, validate=validate).solve()
