"""Backtracking engines for Sudoku grids."""

from .base_solver import BaseSolver, SolverStats
from .backtracking import RecursiveBacktrackingSolver
from .iterative import IterativeBacktrackingSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "RecursiveBacktrackingSolver",
    "IterativeBacktrackingSolver",
]
