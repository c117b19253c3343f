"""AC-3 arc-consistency pass over the cell domains.

Propagation only shrinks domains. The grid is read to decide which cells are
still open but is never written here.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from ..config import EMPTY, GRID_SIZE
from ..logging_utils import get_logger
from .constraints import is_consistent, neighbors
from .model import Arc, Cell, Domains, Grid, SearchStats

logger = get_logger("propagation")


def initial_arcs(grid: Grid) -> List[Arc]:
    """One arc (cell, neighbor) per neighbor of every empty cell."""
    arcs: List[Arc] = []
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            if grid[row][col] != EMPTY:
                continue
            cell = (row, col)
            arcs.extend((cell, n) for n in neighbors(cell))
    return arcs


def revise(domains: Domains, source: Cell, target: Cell) -> bool:
    """Drop every value of ``source`` with no support in ``target``.

    Returns ``True`` when the source domain changed.
    """
    source_domain = domains[source[0]][source[1]]
    target_domain = domains[target[0]][target[1]]
    unsupported = {
        x
        for x in source_domain
        if not any(is_consistent(x, y, source, target) for y in target_domain)
    }
    if not unsupported:
        return False
    source_domain -= unsupported
    return True


def ac3(grid: Grid, domains: Domains, stats: Optional[SearchStats] = None) -> bool:
    """Prune ``domains`` to arc consistency.

    Returns ``False`` as soon as some domain is wiped out, which means the
    board has no solution from its current state.
    """
    queue: Deque[Arc] = deque(initial_arcs(grid))
    while queue:
        source, target = queue.popleft()
        if stats is not None:
            stats.arcs_processed += 1
        if not revise(domains, source, target):
            continue
        if stats is not None:
            stats.revisions += 1
        if not domains[source[0]][source[1]]:
            logger.debug("domain of %s emptied by arc from %s", source, target)
            return False
        for neighbor in neighbors(source):
            if neighbor != target:
                queue.append((neighbor, source))
    return True
