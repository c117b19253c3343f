"""Neighbor relation and value-consistency checks for the Sudoku graph.

Every constraint on the board is a binary "not equal" between two cells that
share a row, a column or a 3x3 box. The graph is never stored explicitly; the
neighbor lists below are enough to walk it.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..config import BOX_SIZE, GRID_SIZE
from .model import Cell, Grid


def box_of(cell: Cell) -> Tuple[int, int]:
    row, col = cell
    return row // BOX_SIZE, col // BOX_SIZE


def shares_unit(a: Cell, b: Cell) -> bool:
    """True when ``a`` and ``b`` are in the same row, column or box."""
    return a[0] == b[0] or a[1] == b[1] or box_of(a) == box_of(b)


def _compute_neighbors(cell: Cell) -> Tuple[Cell, ...]:
    row, col = cell
    found = set()
    for i in range(GRID_SIZE):
        found.add((row, i))
        found.add((i, col))
    box_row, box_col = box_of(cell)
    for r in range(box_row * BOX_SIZE, box_row * BOX_SIZE + BOX_SIZE):
        for c in range(box_col * BOX_SIZE, box_col * BOX_SIZE + BOX_SIZE):
            found.add((r, c))
    found.discard(cell)
    return tuple(sorted(found))


_NEIGHBORS: Dict[Cell, Tuple[Cell, ...]] = {
    (r, c): _compute_neighbors((r, c))
    for r in range(GRID_SIZE)
    for c in range(GRID_SIZE)
}


def neighbors(cell: Cell) -> Tuple[Cell, ...]:
    """The 20 distinct cells constrained against ``cell``, in row-major order."""
    return _NEIGHBORS[cell]


def is_consistent(x: int, y: int, source: Cell, target: Cell) -> bool:
    """Whether ``source = x`` and ``target = y`` can hold together."""
    if shares_unit(source, target):
        return x != y
    return True


def is_valid(grid: Grid, cell: Cell, value: int) -> bool:
    """Check ``value`` against the values currently placed around ``cell``."""
    for row, col in _NEIGHBORS[cell]:
        if grid[row][col] == value:
            return False
    return True
