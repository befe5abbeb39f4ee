"""
Square sudoku grid and the constraint checks built on top of it.

A grid of size N holds values in ``0..N`` where ``0`` marks an empty cell.
N must be a perfect square so the board splits into sqrt(N) x sqrt(N) blocks.
"""

from __future__ import annotations

import math
from typing import Iterator, List, Sequence, Tuple

EMPTY = 0

Cell = Tuple[int, int]
Board = List[List[int]]


class SudokuConfigError(ValueError):
    """Raised when a grid size, grid shape or generator setting is unusable."""


def box_size_for(size: int) -> int:
    """Return the block side for ``size`` or raise if it is not a perfect square."""

    if isinstance(size, bool) or not isinstance(size, int):
        raise SudokuConfigError(f"Board size must be an integer, got {size!r}.")
    if size <= 0:
        raise SudokuConfigError(f"Board size must be positive, got {size}.")
    box_size = math.isqrt(size)
    if box_size * box_size != size:
        raise SudokuConfigError(
            f"Board size {size} is not a perfect square; cannot form boxes."
        )
    return box_size


def eraser_budget(size: int, difficulty: int) -> int:
    """Number of cells the digger tries to clear: ``min(difficulty * size, size**2)``."""

    box_size_for(size)
    if difficulty < 0:
        raise SudokuConfigError(f"Difficulty must be >= 0, got {difficulty}.")
    return min(difficulty * size, size * size)


class Grid:
    """Mutable N x N board with block geometry helpers."""

    def __init__(self, size: int) -> None:
        self.box_size = box_size_for(size)
        self.size = size
        self._cells: Board = [[EMPTY] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        if not rows:
            raise SudokuConfigError("Sudoku board must not be empty.")

        size = len(rows)
        if any(len(row) != size for row in rows):
            raise SudokuConfigError("Sudoku board must be square.")

        grid = cls(size)
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if isinstance(value, bool) or not isinstance(value, int):
                    raise SudokuConfigError(
                        f"Cell ({r}, {c}) holds non-integer value {value!r}."
                    )
                if not EMPTY <= value <= size:
                    raise SudokuConfigError(
                        f"Cell ({r}, {c}) contains invalid value {value} for size {size}."
                    )
                grid._cells[r][c] = value
        return grid

    # Cell access ---------------------------------------------------------

    def __getitem__(self, cell: Cell) -> int:
        row, col = cell
        return self._cells[row][col]

    def __setitem__(self, cell: Cell, value: int) -> None:
        row, col = cell
        self._cells[row][col] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, filled={self.filled_count()})"

    def row(self, index: int) -> List[int]:
        return list(self._cells[index])

    def column(self, index: int) -> List[int]:
        return [self._cells[r][index] for r in range(self.size)]

    def rows(self) -> Board:
        """Return a deep copy of the board as nested lists."""
        return [row[:] for row in self._cells]

    def copy(self) -> "Grid":
        return Grid.from_rows(self._cells)

    # Geometry ------------------------------------------------------------

    def box_origin(self, row: int, col: int) -> Cell:
        return (row // self.box_size) * self.box_size, (col // self.box_size) * self.box_size

    def box_cells(self, row: int, col: int) -> Iterator[Cell]:
        """Yield every coordinate of the block containing ``(row, col)``."""
        start_row, start_col = self.box_origin(row, col)
        for r in range(start_row, start_row + self.box_size):
            for c in range(start_col, start_col + self.box_size):
                yield r, c

    def cells(self) -> Iterator[Cell]:
        for r in range(self.size):
            for c in range(self.size):
                yield r, c

    def empty_cells(self) -> List[Cell]:
        return [(r, c) for r, c in self.cells() if self._cells[r][c] == EMPTY]

    def filled_count(self) -> int:
        return sum(1 for row in self._cells for value in row if value != EMPTY)

    def is_complete(self) -> bool:
        return all(value != EMPTY for row in self._cells for value in row)

    # Constraints ---------------------------------------------------------

    def is_valid(self, row: int, col: int, value: int) -> bool:
        return is_valid(self, row, col, value)

    def candidates(self, row: int, col: int) -> List[int]:
        return candidates(self, row, col)

    def conflicts(self) -> List[Tuple[Cell, Cell]]:
        """
        Find pairs of filled cells that share a row, column or block and
        hold the same value. Each pair is reported once.
        """
        clashes: List[Tuple[Cell, Cell]] = []
        seen = set()
        for r, c in self.cells():
            value = self._cells[r][c]
            if value == EMPTY:
                continue
            peers = [(r, i) for i in range(self.size)]
            peers += [(i, c) for i in range(self.size)]
            peers += list(self.box_cells(r, c))
            for peer in peers:
                if peer == (r, c) or self[peer] != value:
                    continue
                pair = tuple(sorted(((r, c), peer)))
                if pair not in seen:
                    seen.add(pair)
                    clashes.append(pair)
        return clashes

    def is_consistent(self) -> bool:
        return not self.conflicts()

    def is_solved(self) -> bool:
        return self.is_complete() and self.is_consistent()


def is_valid(grid: Grid, row: int, col: int, value: int) -> bool:
    """
    Check whether ``value`` may be placed at ``(row, col)``.

    The whole row, the whole column and the whole block are scanned; filled
    cells can sit before or after ``(row, col)`` in scan order. The cell
    itself is part of the scan, so callers check empty cells.
    """
    for i in range(grid.size):
        if grid[row, i] == value or grid[i, col] == value:
            return False

    for cell in grid.box_cells(row, col):
        if grid[cell] == value:
            return False

    return True


def candidates(grid: Grid, row: int, col: int) -> List[int]:
    """Legal values for an empty cell in ascending order."""
    return [value for value in range(1, grid.size + 1) if is_valid(grid, row, col, value)]


__all__ = [
    "EMPTY",
    "Board",
    "Cell",
    "Grid",
    "SudokuConfigError",
    "box_size_for",
    "candidates",
    "eraser_budget",
    "is_valid",
]
