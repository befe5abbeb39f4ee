"""
Generate a sudoku puzzle with a unique solution and solve it again.

Usage examples
--------------

Standard 9x9 puzzle, difficulty 2 (up to 18 cells removed):

    python sudoku_cli.py 9 2

16x16 puzzle, redrawing every search step with a 5 ms pause:

    python sudoku_cli.py 16 6 5

Reproducible run that skips the uniqueness check while removing cells:

    python sudoku_cli.py 9 4 --seed 2024 --quick
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from loguru import logger

from sudoku_digger import PuzzleDigger, carve
from sudoku_grid import SudokuConfigError, box_size_for, eraser_budget
from sudoku_render import StepPrinter, board_to_line, format_board
from sudoku_solver import SudokuSearchError, fill_random, solve

DEFAULT_SIZE = 9
DEFAULT_DIFFICULTY = 2
DEFAULT_DELAY_MS = -1


@dataclass(frozen=True)
class GeneratorConfig:
    size: int = DEFAULT_SIZE
    difficulty: int = DEFAULT_DIFFICULTY
    delay_ms: int = DEFAULT_DELAY_MS
    seed: Optional[int] = None
    quick: bool = False

    def validate(self) -> "GeneratorConfig":
        box_size_for(self.size)
        eraser_budget(self.size, self.difficulty)
        return self

    @property
    def budget(self) -> int:
        return eraser_budget(self.size, self.difficulty)


def _int_or_default(raw: Optional[str], default: int, name: str) -> int:
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(
            "Invalid {name} argument {raw!r}. Using default {name}: {default}",
            name=name,
            raw=raw,
            default=default,
        )
        return default


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a uniquely solvable sudoku puzzle and solve it."
    )
    parser.add_argument(
        "size",
        nargs="?",
        default=None,
        help=f"Board size, a perfect square (default: {DEFAULT_SIZE}).",
    )
    parser.add_argument(
        "difficulty",
        nargs="?",
        default=None,
        help=(
            "Removal factor; up to difficulty*size cells are cleared "
            f"(default: {DEFAULT_DIFFICULTY})."
        ),
    )
    parser.add_argument(
        "delay",
        nargs="?",
        default=None,
        help=(
            "Milliseconds to pause between search steps while redrawing the board; "
            f"-1 disables step display (default: {DEFAULT_DELAY_MS})."
        ),
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible boards.",
    )
    parser.add_argument(
        "--quick",
        action="store_true",
        help="Clear random cells without checking that the solution stays unique.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for console output (default: INFO).",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    return GeneratorConfig(
        size=_int_or_default(args.size, DEFAULT_SIZE, "size"),
        difficulty=_int_or_default(args.difficulty, DEFAULT_DIFFICULTY, "difficulty"),
        delay_ms=_int_or_default(args.delay, DEFAULT_DELAY_MS, "delay"),
        seed=args.seed,
        quick=args.quick,
    )


def _timed(label: str, func: Callable, *args, **kwargs):
    start = time.perf_counter()
    result = func(*args, **kwargs)
    logger.info("{} finished in {:.3f}s", label, time.perf_counter() - start)
    return result


def run(config: GeneratorConfig, *, out=None) -> bool:
    """Fill, dig and re-solve one board. Returns True if the re-solve succeeded."""

    out = out or sys.stdout
    rng = random.Random(config.seed)
    printer = StepPrinter(config.delay_ms)
    observer = printer if printer.enabled else None

    logger.info(
        "Generating {size}x{size} board (difficulty={difficulty}, budget={budget}, seed={seed})",
        size=config.size,
        difficulty=config.difficulty,
        budget=config.budget,
        seed=config.seed,
    )

    grid = _timed("fill", fill_random, config.size, rng=rng, observer=observer)
    out.write(format_board(grid) + "\n\n")

    if config.quick:
        cleared = _timed("carve", carve, grid, config.difficulty, rng=rng)
        logger.info("Cleared {} cell(s) without uniqueness check", len(cleared))
    else:
        digger = PuzzleDigger(grid, config.difficulty, randomizer=rng)
        report = _timed("dig", digger.dig)
        if report.exhausted:
            logger.info(
                "Ran out of removable cells: removed {}/{}",
                len(report.removed),
                report.budget,
            )
        else:
            logger.info("Removed {} cell(s)", len(report.removed))

    out.write(format_board(grid) + "\n\n")
    out.write(board_to_line(grid) + "\n\n")

    solved = _timed("solve", solve, grid, observer=observer)
    out.write(format_board(grid) + "\n")
    if not solved:
        logger.error("Puzzle could not be solved")
    return solved


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    config = build_config(args)
    try:
        config.validate()
    except SudokuConfigError as exc:
        logger.error("Invalid configuration: {}", exc)
        return 2

    overall_start = time.perf_counter()
    try:
        solved = run(config)
    except SudokuSearchError as exc:
        logger.error("{}", exc)
        return 1
    logger.info("All tasks completed in {:.1f}s.", time.perf_counter() - overall_start)
    return 0 if solved else 1


if __name__ == "__main__":
    sys.exit(main())
