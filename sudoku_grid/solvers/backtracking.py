"""Depth-first backtracking over the open cells of a grid."""

from __future__ import annotations
from typing import List

from .base_solver import BaseSolver
from ..core.constraints import is_safe
from ..core.grid import Grid, cell_position


class RecursiveBacktrackingSolver(BaseSolver):
    """
    Plain recursive backtracking search.

    Open cells are filled in scan order (left to right, top to bottom) and
    candidates are tried in ascending order, so the first solution found is
    always the same one. There is no propagation and no cell-ordering
    heuristic; pruning comes only from is_safe.

    Each open cell costs one stack frame, so very large grids can exceed the
    interpreter's recursion limit. IterativeBacktrackingSolver has no such
    limit.
    """

    name = "Recursive"

    def _search(self, grid: Grid, positions: List[int]) -> bool:
        return self._fill(grid, positions, 0)

    def _fill(self, grid: Grid, positions: List[int], depth: int) -> bool:
        """Fill positions[depth:], returning True once all are placed."""
        self.stats.iterations += 1
        if depth == len(positions):
            return True

        loc = positions[depth]
        position = cell_position(grid, loc)
        grid.cells[loc] = 0

        for value in range(1, grid.side + 1):
            if is_safe(grid, position, value):
                grid.cells[loc] = value
                self.stats.nodes_explored += 1
                if self._fill(grid, positions, depth + 1):
                    return True
            else:
                grid.cells[loc] = 0

        grid.cells[loc] = 0
        self.stats.backtracks += 1
        return False
