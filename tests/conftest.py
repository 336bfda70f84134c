"""Shared fixtures for the test suite."""

import matplotlib

matplotlib.use("Agg")

import pytest

from sudoku_grid.core.grid import Grid
from sudoku_grid.puzzles import SAMPLE_PUZZLES


# The solution to the "classic" sample puzzle
CLASSIC_SOLUTION = [
    5, 3, 4, 6, 7, 8, 9, 1, 2,
    6, 7, 2, 1, 9, 5, 3, 4, 8,
    1, 9, 8, 3, 4, 2, 5, 6, 7,
    8, 5, 9, 7, 6, 1, 4, 2, 3,
    4, 2, 6, 8, 5, 3, 7, 9, 1,
    7, 1, 3, 9, 2, 4, 8, 5, 6,
    9, 6, 1, 5, 3, 7, 2, 8, 4,
    2, 8, 7, 4, 1, 9, 6, 3, 5,
    3, 4, 5, 2, 8, 6, 1, 7, 9,
]


@pytest.fixture
def classic_solution():
    return list(CLASSIC_SOLUTION)


@pytest.fixture
def sample_grid():
    return Grid.from_sequence(SAMPLE_PUZZLES["sample"])


@pytest.fixture
def classic_grid():
    return Grid.from_sequence(SAMPLE_PUZZLES["classic"])


@pytest.fixture
def mini_grid():
    return Grid.from_sequence(SAMPLE_PUZZLES["mini"])
