"""Shared settings for the solver package."""

from __future__ import annotations

import os

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------

GRID_SIZE: int = 9
BOX_SIZE: int = 3
EMPTY: int = 0
DIGITS = range(1, GRID_SIZE + 1)

# Characters accepted as blanks in row strings of a puzzle file.
BLANK_CHARS: str = ".0"

# ---------------------------------------------------------------------------
# Solver behaviour
# ---------------------------------------------------------------------------

# Reject boards whose givens already conflict before any search starts.
VALIDATE_GIVENS: bool = True

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOGGER_NAME: str = "sudokucp"
LOG_LEVEL: str = os.environ.get("SUDOKUCP_LOG_LEVEL", "INFO").upper()
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
