"""Error types raised by the grid and solvers."""


class SudokuGridError(Exception):
    """Base class for all sudoku_grid errors."""


class InvalidDimensionsError(SudokuGridError, ValueError):
    """Raised when a value sequence cannot form a square Sudoku grid."""


class UnsolvableError(SudokuGridError):
    """Raised by Grid.solve_or_raise when no completion exists."""
