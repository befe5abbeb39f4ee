import random

import pytest
from tools import SOLVED_4X4

from sudoku_grid import Grid


@pytest.fixture
def solved_4x4():
    return Grid.from_rows(SOLVED_4X4)


@pytest.fixture
def rng():
    return random.Random(2024)
