"""Backtracking Sudoku solver for square grids of any perfect-square side."""

from .core import Grid, SudokuGridError, InvalidDimensionsError, UnsolvableError
from .solvers import (
    BaseSolver,
    SolverStats,
    RecursiveBacktrackingSolver,
    IterativeBacktrackingSolver,
)

__version__ = "1.0.0"

__all__ = [
    "Grid",
    "SudokuGridError",
    "InvalidDimensionsError",
    "UnsolvableError",
    "BaseSolver",
    "SolverStats",
    "RecursiveBacktrackingSolver",
    "IterativeBacktrackingSolver",
]
