"""
Backtracking search over a square sudoku grid.

One engine serves three purposes:

- filling an empty grid with a random complete solution (shuffled candidates)
- solving a partial grid in place (first solution wins)
- counting solutions with an early exit, which is what uniqueness checks use

The search walks empty cells in row-major order and keeps its own stack of
frames instead of recursing, so large boards do not hit the recursion limit.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from loguru import logger

from sudoku_grid import EMPTY, Grid

StepObserver = Callable[[Grid], None]

UNIQUENESS_LIMIT = 2


class SudokuSearchError(RuntimeError):
    """Raised when a grid that must be fillable cannot be completed."""


@dataclass
class _Frame:
    row: int
    col: int
    remaining: Iterator[int]


class SudokuSolver:
    """Depth-first search that mutates ``grid`` in place."""

    def __init__(
        self,
        grid: Grid,
        *,
        randomizer: Optional[random.Random] = None,
        observer: Optional[StepObserver] = None,
    ) -> None:
        self.grid = grid
        self.random = randomizer
        self.observer = observer
        self.steps = 0

    def solve(self) -> bool:
        """
        Complete the grid with the first solution found.

        Returns:
            bool: True if the grid now holds a complete solution. On False the
            grid is back to the state it had on entry.
        """
        found = self._search(limit=1)
        logger.debug(
            "solve size={size} solved={solved} steps={steps}",
            size=self.grid.size,
            solved=found == 1,
            steps=self.steps,
        )
        return found == 1

    def fill(self) -> bool:
        """Alias of :meth:`solve` for empty grids; randomness comes from ``randomizer``."""
        return self.solve()

    def count_solutions(self, limit: int = UNIQUENESS_LIMIT) -> int:
        """
        Count completions of the grid, stopping once ``limit`` are found.

        The grid is restored to its entry state before returning.
        """
        if limit < 1:
            raise ValueError("limit must be >= 1.")

        empties = self.grid.empty_cells()
        try:
            found = self._search(limit=limit)
        finally:
            for cell in empties:
                self.grid[cell] = EMPTY
        logger.debug(
            "count_solutions size={size} empty={empty} found={found} limit={limit}",
            size=self.grid.size,
            empty=len(empties),
            found=found,
            limit=limit,
        )
        return found

    # Internal helpers -----------------------------------------------------

    def _candidate_list(self, row: int, col: int) -> List[int]:
        candidates = self.grid.candidates(row, col)
        if self.random:
            self.random.shuffle(candidates)
        return candidates

    def _open(self, row: int, col: int) -> _Frame:
        return _Frame(row, col, iter(self._candidate_list(row, col)))

    def _assign(self, frame: _Frame, value: int) -> None:
        self.grid[frame.row, frame.col] = value
        self.steps += 1
        if self.observer is not None:
            self.observer(self.grid)

    def _search(self, limit: int) -> int:
        self.steps = 0
        if not self.grid.is_consistent():
            return 0

        empties = self.grid.empty_cells()
        if not empties:
            return 1

        found = 0
        frames = [self._open(*empties[0])]
        while frames:
            frame = frames[-1]
            value = next(frame.remaining, None)
            if value is None:
                # Dead end: undo this cell and resume the previous frame.
                self._assign(frame, EMPTY)
                frames.pop()
                continue

            self._assign(frame, value)
            if len(frames) == len(empties):
                found += 1
                if found >= limit:
                    return found
                continue

            frames.append(self._open(*empties[len(frames)]))

        return found


# ----------------------------------------------------------------------
# Public operations
# ----------------------------------------------------------------------
def fill_random(
    size: int,
    *,
    rng: Optional[random.Random] = None,
    observer: Optional[StepObserver] = None,
) -> Grid:
    """Build a complete random solution of the given size."""

    grid = Grid(size)
    solver = SudokuSolver(grid, randomizer=rng or random.Random(), observer=observer)
    if not solver.fill():
        raise SudokuSearchError(f"Failed to generate a complete {size}x{size} solution.")
    return grid


def solve(grid: Grid, *, observer: Optional[StepObserver] = None) -> bool:
    return SudokuSolver(grid, observer=observer).solve()


def count_solutions_capped(grid: Grid) -> int:
    """Return 0, 1 or 2, where 2 means "two or more"."""
    return SudokuSolver(grid).count_solutions(limit=UNIQUENESS_LIMIT)


def is_unique(grid: Grid) -> bool:
    return count_solutions_capped(grid) == 1


__all__ = [
    "SudokuSearchError",
    "SudokuSolver",
    "count_solutions_capped",
    "fill_random",
    "is_unique",
    "solve",
]
