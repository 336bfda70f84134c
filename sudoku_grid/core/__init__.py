"""Core module for the flat Sudoku grid and its constraint checks."""

from .grid import Grid
from .constraints import (
    row_contains,
    col_contains,
    box_contains,
    is_safe,
    is_valid_board,
    validate_solution,
)
from .errors import SudokuGridError, InvalidDimensionsError, UnsolvableError

__all__ = [
    "Grid",
    "row_contains",
    "col_contains",
    "box_contains",
    "is_safe",
    "is_valid_board",
    "validate_solution",
    "SudokuGridError",
    "InvalidDimensionsError",
    "UnsolvableError",
]
