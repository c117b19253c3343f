from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set, Tuple

Cell = Tuple[int, int]
Grid = List[List[int]]
Domains = List[List[Set[int]]]
Arc = Tuple[Cell, Cell]


class Unit(str, Enum):
    """A house of the board; every unit must hold each digit once."""
    ROW = "row"
    COLUMN = "column"
    BOX = "box"


@dataclass
class SearchStats:
    """Counters collected during a single solve."""
    assignments: int = 0
    backtracks: int = 0
    revisions: int = 0
    arcs_processed: int = 0
    forward_check_failures: int = 0


class InvalidPuzzleError(ValueError):
    """Raised when a board is malformed or its givens already conflict."""

    def __init__(
        self,
        message: str,
        unit: Optional[Unit] = None,
        index: Optional[int] = None,
        value: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.unit = unit
        self.index = index
        self.value = value
