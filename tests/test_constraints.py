"""Unit tests for the row, column and box checks."""

from sudoku_grid.core.grid import Grid
from sudoku_grid.core.constraints import (
    row_contains,
    col_contains,
    box_contains,
    is_safe,
    is_valid_board,
    validate_solution,
)
from sudoku_grid.puzzles import SAMPLE_PUZZLES


class TestUnitChecks:
    """Tests against the 4x4 mini puzzle:

        1 _ _ _
        _ _ 1 _
        _ 1 _ _
        _ _ _ 1
    """

    def test_row_contains(self, mini_grid):
        assert row_contains(mini_grid, 0, 1)
        assert not row_contains(mini_grid, 0, 2)
        assert row_contains(mini_grid, 3, 1)

    def test_col_contains(self, mini_grid):
        assert col_contains(mini_grid, 0, 1)
        assert col_contains(mini_grid, 2, 1)
        assert not col_contains(mini_grid, 3, 2)

    def test_box_contains(self, mini_grid):
        # positions are (col, row)
        assert box_contains(mini_grid, (1, 1), 1)
        assert box_contains(mini_grid, (3, 0), 1)
        assert box_contains(mini_grid, (0, 3), 1)
        assert not box_contains(mini_grid, (2, 2), 2)

    def test_is_safe(self, mini_grid):
        assert is_safe(mini_grid, (1, 0), 2)
        assert not is_safe(mini_grid, (1, 0), 1)

    def test_checks_do_not_modify(self, mini_grid):
        before = mini_grid.get_board()
        is_safe(mini_grid, (2, 2), 3)
        assert mini_grid.get_board() == before


class TestPlacement:
    """Tests for placements on a 9x9 grid."""

    def test_is_safe_9x9(self):
        grid = Grid()
        grid.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_safe(grid, (5, 0), 5)

        # Can't place 5 in same column
        assert not is_safe(grid, (0, 5), 5)

        # Can't place 5 in same box
        assert not is_safe(grid, (1, 1), 5)

        # Can place different value
        assert is_safe(grid, (5, 0), 7)

        # Outside the row, column and box
        assert is_safe(grid, (4, 4), 5)

    def test_last_box(self):
        grid = Grid()
        grid.set(8, 8, 3)
        assert box_contains(grid, (6, 6), 3)
        assert not box_contains(grid, (5, 5), 3)


class TestBoardChecks:
    """Tests for whole-board validation."""

    def test_is_valid_board(self, classic_grid, classic_solution):
        assert is_valid_board(classic_grid)
        assert is_valid_board(Grid.from_sequence(classic_solution))

        broken = classic_grid.copy()
        broken.set(0, 2, 5)
        assert not is_valid_board(broken)

    def test_validate_solution(self, classic_grid, classic_solution):
        solution = Grid.from_sequence(classic_solution)
        assert validate_solution(classic_grid, solution)

    def test_validate_solution_rejects_changed_clue(self, classic_solution):
        puzzle = Grid.from_sequence(SAMPLE_PUZZLES["classic"])
        puzzle.set(0, 2, 1)  # solution has 4 here
        assert not validate_solution(puzzle, Grid.from_sequence(classic_solution))

    def test_validate_solution_rejects_incomplete(self, classic_grid):
        assert not validate_solution(classic_grid, classic_grid)

    def test_validate_solution_size_mismatch(self, classic_grid, mini_grid):
        assert not validate_solution(classic_grid, mini_grid)
