"""
Text rendering for sudoku grids.

Renderers only read the grid. ``StepPrinter`` is a solver observer that
redraws the board after every search step, optionally slowed down.
"""

from __future__ import annotations

import sys
import time
from typing import Optional, TextIO

from sudoku_grid import EMPTY, Grid

CLEAR_SCREEN = "\x1b[2J\x1b[H"


def _cell_text(value: int, width: int) -> str:
    text = "." if value == EMPTY else str(value)
    return text.ljust(width)


def format_board(grid: Grid) -> str:
    """Render the grid with ``|`` between block columns and a rule between block rows."""

    width = len(str(grid.size))
    rule = " " + "-" * (grid.size * (width + 2) + grid.box_size - 1)
    lines = []
    for r in range(grid.size):
        if r % grid.box_size == 0 and r != 0:
            lines.append(rule)
        parts = []
        for c in range(grid.size):
            parts.append(" | " if c % grid.box_size == 0 and c != 0 else "  ")
            parts.append(_cell_text(grid[r, c], width))
        lines.append("".join(parts).rstrip())
    return "\n".join(lines)


def board_to_line(grid: Grid) -> str:
    """One-line form of the grid, ``.`` for empty cells."""
    separator = " " if grid.size > 9 else ""
    return separator.join(
        "." if value == EMPTY else str(value) for row in grid.rows() for value in row
    )


class StepPrinter:
    """Redraw the board on every search step, sleeping ``delay_ms`` in between."""

    def __init__(self, delay_ms: int = 0, stream: Optional[TextIO] = None) -> None:
        self.delay_ms = delay_ms
        self.stream = stream or sys.stdout

    @property
    def enabled(self) -> bool:
        return self.delay_ms >= 0

    def __call__(self, grid: Grid) -> None:
        if not self.enabled:
            return
        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000)
        self.stream.write(CLEAR_SCREEN)
        self.stream.write(format_board(grid) + "\n")
        self.stream.flush()


__all__ = ["StepPrinter", "board_to_line", "format_board"]
