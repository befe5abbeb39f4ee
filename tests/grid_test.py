import pytest

from sudoku_grid import EMPTY, Grid, SudokuConfigError, candidates, eraser_budget, is_valid

# ---------- Construction ----------


@pytest.mark.parametrize("size,box", [(1, 1), (4, 2), (9, 3), (16, 4), (25, 5)])
def test_grid_starts_empty_with_block_side(size, box):
    grid = Grid(size)

    assert grid.box_size == box
    assert grid.filled_count() == 0
    assert len(grid.empty_cells()) == size * size


@pytest.mark.parametrize("size", [0, -4, 2, 10, 15])
def test_grid_rejects_bad_sizes(size):
    with pytest.raises(SudokuConfigError):
        Grid(size)


def test_from_rows_rejects_non_square_board():
    with pytest.raises(SudokuConfigError):
        Grid.from_rows([[1, 2, 3, 4], [3, 4, 1, 2]])


def test_from_rows_rejects_out_of_range_value():
    rows = [[0] * 4 for _ in range(4)]
    rows[2][3] = 5

    with pytest.raises(SudokuConfigError):
        Grid.from_rows(rows)


def test_rows_returns_independent_copy(solved_4x4):
    rows = solved_4x4.rows()
    rows[0][0] = 0

    assert solved_4x4[0, 0] == 1
    assert solved_4x4.copy() == solved_4x4


# ---------- Constraint checks ----------


def test_is_valid_checks_row_column_and_block(solved_4x4):
    solved_4x4[0, 0] = EMPTY

    assert is_valid(solved_4x4, 0, 0, 1)
    assert not is_valid(solved_4x4, 0, 0, 2)  # row
    assert not is_valid(solved_4x4, 0, 0, 3)  # row and column
    assert not is_valid(solved_4x4, 0, 0, 4)  # row and block


def test_is_valid_scans_whole_block():
    grid = Grid(9)
    grid[2, 2] = 7

    assert not is_valid(grid, 0, 0, 7)
    assert not is_valid(grid, 1, 1, 7)
    assert is_valid(grid, 3, 3, 7)


def test_is_valid_scans_cells_after_the_current_one():
    grid = Grid(4)
    grid[3, 0] = 2
    grid[0, 3] = 3

    assert not is_valid(grid, 0, 0, 2)
    assert not is_valid(grid, 0, 0, 3)


def test_candidates_are_ascending(solved_4x4):
    solved_4x4[0, 0] = EMPTY
    solved_4x4[1, 1] = EMPTY

    assert candidates(solved_4x4, 0, 0) == [1]
    assert solved_4x4.candidates(1, 1) == [4]

    grid = Grid(4)
    grid[0, 1] = 2
    assert grid.candidates(0, 0) == [1, 3, 4]
    assert Grid(4).candidates(3, 3) == [1, 2, 3, 4]


def test_conflicts_report_duplicates():
    grid = Grid.from_rows(
        [
            [1, 1, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
        ]
    )

    assert grid.conflicts() == [((0, 0), (0, 1))]
    assert not grid.is_consistent()


def test_solved_grid_is_consistent(solved_4x4):
    assert solved_4x4.is_solved()
    solved_4x4[3, 3] = EMPTY
    assert not solved_4x4.is_solved()
    assert solved_4x4.is_consistent()


# ---------- Eraser budget ----------


def test_eraser_budget_is_capped_at_cell_count():
    assert eraser_budget(9, 2) == 18
    assert eraser_budget(4, 0) == 0
    assert eraser_budget(4, 100) == 16


def test_eraser_budget_rejects_bad_input():
    with pytest.raises(SudokuConfigError):
        eraser_budget(10, 2)
    with pytest.raises(SudokuConfigError):
        eraser_budget(9, -1)
