"""Backtracking search driven by an explicit stack of frames."""

from __future__ import annotations
from typing import List

from .base_solver import BaseSolver
from ..core.constraints import is_safe
from ..core.grid import Grid, cell_position


class IterativeBacktrackingSolver(BaseSolver):
    """
    The recursive search rewritten as a loop over a frame stack.

    Each frame is [flat index, next candidate to try]; the stack depth equals
    the number of cells currently assigned. Cells and candidates are visited
    in exactly the same order as RecursiveBacktrackingSolver, so both return
    the same solution and the same counters, but grid size is not bounded by
    the recursion limit.
    """

    name = "Iterative"

    def _search(self, grid: Grid, positions: List[int]) -> bool:
        self.stats.iterations += 1
        if not positions:
            return True

        frames = [self._push(grid, positions[0])]

        while frames:
            frame = frames[-1]
            loc, value = frame
            position = cell_position(grid, loc)

            placed = False
            while value <= grid.side:
                if is_safe(grid, position, value):
                    grid.cells[loc] = value
                    self.stats.nodes_explored += 1
                    placed = True
                    break
                grid.cells[loc] = 0
                value += 1

            if not placed:
                grid.cells[loc] = 0
                self.stats.backtracks += 1
                frames.pop()
                continue

            frame[1] = value + 1
            self.stats.iterations += 1
            depth = len(frames)
            if depth == len(positions):
                return True
            frames.append(self._push(grid, positions[depth]))

        return False

    @staticmethod
    def _push(grid: Grid, loc: int) -> List[int]:
        grid.cells[loc] = 0
        return [loc, 1]
