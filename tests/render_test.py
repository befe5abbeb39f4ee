import io

from sudoku_grid import EMPTY, Grid
from sudoku_render import CLEAR_SCREEN, StepPrinter, board_to_line, format_board


def test_format_board_draws_block_separators(solved_4x4):
    lines = format_board(solved_4x4).splitlines()

    assert len(lines) == 5
    assert lines[0] == "  1  2 | 3  4"
    assert lines[2] == " " + "-" * 13
    assert lines[4] == "  4  3 | 2  1"


def test_format_board_marks_empty_cells(solved_4x4):
    solved_4x4[0, 0] = EMPTY

    assert format_board(solved_4x4).splitlines()[0] == "  .  2 | 3  4"


def test_format_board_pads_two_digit_values():
    grid = Grid(16)
    grid[0, 0] = 16
    grid[0, 1] = 3

    first = format_board(grid).splitlines()[0]
    assert first.startswith("  16  3 ")


def test_board_to_line(solved_4x4):
    solved_4x4[0, 0] = EMPTY

    assert board_to_line(solved_4x4) == ".234341221434321"


def test_step_printer_redraws_board(solved_4x4):
    stream = io.StringIO()
    StepPrinter(0, stream=stream)(solved_4x4)

    output = stream.getvalue()
    assert output.startswith(CLEAR_SCREEN)
    assert "3  4" in output


def test_step_printer_disabled_by_negative_delay(solved_4x4):
    stream = io.StringIO()
    printer = StepPrinter(-1, stream=stream)
    printer(solved_4x4)

    assert not printer.enabled
    assert stream.getvalue() == ""
