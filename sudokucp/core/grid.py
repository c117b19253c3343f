"""Board helpers: copying, scanning and validating the givens."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..config import BOX_SIZE, DIGITS, EMPTY, GRID_SIZE
from .model import Cell, Grid, InvalidPuzzleError, Unit


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def find_empty_cell(grid: Grid) -> Optional[Cell]:
    """First empty cell in row-major order, or ``None`` on a full board."""
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            if grid[row][col] == EMPTY:
                return (row, col)
    return None


def unit_cells(unit: Unit, index: int) -> List[Cell]:
    if unit is Unit.ROW:
        return [(index, c) for c in range(GRID_SIZE)]
    if unit is Unit.COLUMN:
        return [(r, index) for r in range(GRID_SIZE)]
    r0 = BOX_SIZE * (index // BOX_SIZE)
    c0 = BOX_SIZE * (index % BOX_SIZE)
    return [(r0 + i, c0 + j) for i in range(BOX_SIZE) for j in range(BOX_SIZE)]


def all_units() -> Iterable[tuple[Unit, int, List[Cell]]]:
    for unit in Unit:
        for index in range(GRID_SIZE):
            yield unit, index, unit_cells(unit, index)


def check_shape(grid: Grid) -> None:
    """Raise ``InvalidPuzzleError`` unless ``grid`` is 9x9 with ints in 0..9."""
    if not isinstance(grid, list) or len(grid) != GRID_SIZE:
        raise InvalidPuzzleError(f"grid must have {GRID_SIZE} rows")
    for r, row in enumerate(grid):
        if not isinstance(row, list) or len(row) != GRID_SIZE:
            raise InvalidPuzzleError(f"row {r} must have {GRID_SIZE} cells")
        for c, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidPuzzleError(f"cell ({r}, {c}) is not an integer: {value!r}")
            if value != EMPTY and value not in DIGITS:
                raise InvalidPuzzleError(f"cell ({r}, {c}) out of range: {value}")


def validate_givens(grid: Grid) -> None:
    """Reject boards whose given cells already break a row, column or box."""
    check_shape(grid)
    for unit, index, cells in all_units():
        seen = set()
        for row, col in cells:
            value = grid[row][col]
            if value == EMPTY:
                continue
            if value in seen:
                raise InvalidPuzzleError(
                    f"duplicate given {value} in {unit.value} {index}",
                    unit=unit,
                    index=index,
                    value=value,
                )
            seen.add(value)


def is_solved(grid: Grid) -> bool:
    """True when every row, column and box is a permutation of 1..9."""
    expected = set(DIGITS)
    for _, _, cells in all_units():
        if {grid[r][c] for r, c in cells} != expected:
            return False
    return True
