from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from ..config import BLANK_CHARS, DIGITS, EMPTY, GRID_SIZE
from ..core.model import Grid, InvalidPuzzleError


@dataclass
class Puzzle:
    name: str
    grid: Grid
    solution: Optional[Grid] = None
    options: Dict[str, Any] = field(default_factory=dict)


def _parse_row(row: Any, index: int) -> List[int]:
    if isinstance(row, str):
        cells = [ch for ch in row if not ch.isspace() and ch != "|"]
        if len(cells) != GRID_SIZE:
            raise InvalidPuzzleError(f"row {index} must have {GRID_SIZE} cells: {row!r}")
        values = []
        for ch in cells:
            if ch in BLANK_CHARS:
                values.append(EMPTY)
            elif ch in "123456789":
                values.append(int(ch))
            else:
                raise InvalidPuzzleError(f"row {index} has an invalid character {ch!r}")
        return values

    if isinstance(row, list):
        if len(row) != GRID_SIZE:
            raise InvalidPuzzleError(f"row {index} must have {GRID_SIZE} cells")
        for col, v in enumerate(row):
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidPuzzleError(f"row {index} has a non-integer cell at column {col}: {v!r}")
            if v != EMPTY and v not in DIGITS:
                raise InvalidPuzzleError(f"row {index} has an out-of-range cell at column {col}: {v}")
        return list(row)

    raise InvalidPuzzleError(f"row {index} must be a string or a list, got {type(row).__name__}")


def parse_grid(rows: Sequence[Any]) -> Grid:
    """Turn nine row strings (or lists of ints) into a grid.

    ``.`` and ``0`` mark blanks in string rows; spaces and ``|`` are ignored.
    """
    if not isinstance(rows, (list, tuple)) or len(rows) != GRID_SIZE:
        raise InvalidPuzzleError(f"grid must have {GRID_SIZE} rows")
    return [_parse_row(row, i) for i, row in enumerate(rows)]


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a YAML puzzle description into a Puzzle object."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or "grid" not in data:
        raise InvalidPuzzleError(f"{path}: missing 'grid'")

    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise InvalidPuzzleError(f"{path}: 'options' must be a mapping")
    if not isinstance(options.get("validate", True), bool):
        raise InvalidPuzzleError(f"{path}: option 'validate' must be true or false")

    solution = data.get("solution")
    return Puzzle(
        name=str(data.get("name", path.stem)),
        grid=parse_grid(data["grid"]),
        solution=parse_grid(solution) if solution is not None else None,
        options=dict(options),
    )
