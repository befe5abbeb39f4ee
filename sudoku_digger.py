"""
Turn a complete sudoku grid into a puzzle by removing cells.

``PuzzleDigger`` only commits a removal when the grid keeps exactly one
solution. ``carve`` is the quick variant that clears random cells without
checking uniqueness.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from sudoku_grid import EMPTY, Cell, Grid, eraser_budget
from sudoku_solver import is_unique


@dataclass
class DigReport:
    budget: int
    removed: List[Cell] = field(default_factory=list)
    rejected: List[Cell] = field(default_factory=list)

    @property
    def exhausted(self) -> bool:
        """True when digging stopped before spending the whole budget."""
        return len(self.removed) < self.budget


class PuzzleDigger:
    """Remove cells one at a time while the puzzle stays uniquely solvable."""

    def __init__(
        self,
        grid: Grid,
        difficulty: int,
        *,
        randomizer: Optional[random.Random] = None,
    ) -> None:
        self.grid = grid
        self.budget = eraser_budget(grid.size, difficulty)
        self.random = randomizer or random.Random()

    def dig(self) -> DigReport:
        report = DigReport(budget=self.budget)
        remaining = self.budget

        not_visited = list(self.grid.cells())
        self.random.shuffle(not_visited)
        not_visited.reverse()  # pop() from the end takes the shuffled front

        while remaining > 0 and not_visited:
            cell = not_visited.pop()
            backup = self.grid[cell]
            if backup == EMPTY:
                continue

            self.grid[cell] = EMPTY
            if is_unique(self.grid):
                report.removed.append(cell)
                remaining -= 1
            else:
                self.grid[cell] = backup
                report.rejected.append(cell)

        logger.debug(
            "dig size={size} budget={budget} removed={removed} rejected={rejected}",
            size=self.grid.size,
            budget=self.budget,
            removed=len(report.removed),
            rejected=len(report.rejected),
        )
        return report


def dig(grid: Grid, difficulty: int, *, rng: Optional[random.Random] = None) -> None:
    """Dig ``grid`` in place; fewer than the budgeted cells may be removed."""
    PuzzleDigger(grid, difficulty, randomizer=rng).dig()


def carve(grid: Grid, difficulty: int, *, rng: Optional[random.Random] = None) -> List[Cell]:
    """
    Clear ``eraser_budget(size, difficulty)`` random cells without any
    uniqueness check. The result is solvable but may have several solutions.

    Returns:
        list: the coordinates that were cleared.
    """
    rng = rng or random.Random()
    budget = eraser_budget(grid.size, difficulty)
    cells = list(grid.cells())
    rng.shuffle(cells)

    cleared = cells[:budget]
    for cell in cleared:
        grid[cell] = EMPTY

    logger.debug("carve size={} cleared={}", grid.size, len(cleared))
    return cleared


__all__ = ["DigReport", "PuzzleDigger", "carve", "dig"]
