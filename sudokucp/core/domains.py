"""Candidate sets for every cell of the board."""

from __future__ import annotations

from ..config import DIGITS, EMPTY, GRID_SIZE
from .constraints import neighbors
from .model import Domains, Grid


def initial_domains(grid: Grid) -> Domains:
    """Build the starting domain of each cell from the given board.

    A given cell gets the singleton of its value. An empty cell gets 1..9
    minus every value already placed among its row, column and box neighbors.
    The grid itself is left untouched.
    """
    domains: Domains = []
    for row in range(GRID_SIZE):
        domain_row = []
        for col in range(GRID_SIZE):
            value = grid[row][col]
            if value != EMPTY:
                domain_row.append({value})
                continue
            used = {grid[r][c] for r, c in neighbors((row, col))}
            domain_row.append({v for v in DIGITS if v not in used})
        domains.append(domain_row)
    return domains


def copy_domains(domains: Domains) -> Domains:
    return [[set(d) for d in row] for row in domains]
