"""Row, column and box uniqueness checks for candidate placements."""

from __future__ import annotations
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .grid import Grid


def row_contains(grid: Grid, row: int, value: int) -> bool:
    """True if any cell of the given row holds value."""
    start = row * grid.side
    return value in grid.cells[start:start + grid.side]


def col_contains(grid: Grid, col: int, value: int) -> bool:
    """True if any cell of the given column holds value."""
    return value in grid.cells[col:grid.side * grid.side:grid.side]


def box_contains(grid: Grid, position: Tuple[int, int], value: int) -> bool:
    """
    True if the box holding position contains value.

    Args:
        grid: The grid to inspect.
        position: (col, row) of any cell inside the box.
        value: Value to look for.
    """
    col, row = position
    box = grid.box_size
    # top left corner of the box
    left = col - col % box
    start = (row - row % box) * grid.side + left
    for _ in range(box):
        if value in grid.cells[start:start + box]:
            return True
        start += grid.side
    return False


def is_safe(grid: Grid, position: Tuple[int, int], value: int) -> bool:
    """
    Check if value can be placed at position without a conflict.

    Args:
        grid: The grid to inspect.
        position: (col, row) of the candidate cell.
        value: Candidate value (1 to grid.side).

    Returns:
        True if neither the row, the column nor the box already holds value.
    """
    col, row = position
    return not (row_contains(grid, row, value)
                or col_contains(grid, col, value)
                or box_contains(grid, position, value))


def is_valid_board(grid: Grid) -> bool:
    """Check the whole board for conflicts among placed values."""
    return grid.is_valid()


def validate_solution(puzzle: Grid, solution: Grid) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is complete, valid and keeps every clue of puzzle.
    """
    if puzzle.side != solution.side:
        return False

    for clue, value in zip(puzzle.cells, solution.cells):
        if clue != 0 and clue != value:
            return False

    return solution.is_solved()
