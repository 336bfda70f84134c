"""Base solver interface and run statistics."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import logging
import time
import tracemalloc

from ..core.grid import Grid

log = logging.getLogger(__name__)


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0

    # Search counters
    iterations: int = 0
    backtracks: int = 0
    nodes_explored: int = 0

    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """
    Abstract base class for the backtracking engines.

    Subclasses implement search(), which works on the grid in place.
    solve() wraps it with a copy, timing and memory tracking.
    """

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, grid: Grid) -> tuple[Optional[Grid], SolverStats]:
        """
        Solve a copy of the grid with timing and memory tracking.

        Args:
            grid: The puzzle to solve. It is not modified.

        Returns:
            Tuple of (solution or None, stats).
        """
        self.stats = SolverStats(algorithm=self.name)
        work = grid.copy()

        tracemalloc.start()
        start_time = time.perf_counter()

        try:
            found = self.search(work)
        except RecursionError as e:
            log.warning("%s ran out of stack on a %dx%d grid", self.name, grid.side, grid.side)
            self.stats.extra["error"] = str(e)
            found = False
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        self.stats.solved = found and work.is_solved()
        solution = work if self.stats.solved else None
        return solution, self.stats

    def search(self, grid: Grid) -> bool:
        """
        Fill the grid in place.

        Returns False without touching the grid when its clues already
        conflict, since no completion can exist.
        """
        self.reset_stats()
        if not grid.is_valid():
            log.debug("%s: clues conflict, skipping search", self.name)
            return False

        positions = grid.open_cell_positions()
        log.debug("%s: %d open cells on a %dx%d grid",
                  self.name, len(positions), grid.side, grid.side)
        found = self._search(grid, positions)
        log.debug("%s: %s after %d nodes, %d backtracks",
                  self.name, "solved" if found else "failed",
                  self.stats.nodes_explored, self.stats.backtracks)
        return found

    @abstractmethod
    def _search(self, grid: Grid, positions: list[int]) -> bool:
        """
        Assign values to the given open positions, in order.

        Args:
            grid: The grid to fill in place.
            positions: Flat indices of the open cells, in search order.

        Returns:
            True if every position was filled without conflict.
        """
        pass

    def reset_stats(self) -> None:
        """Reset the search counters, keeping any timing already recorded."""
        self.stats.iterations = 0
        self.stats.backtracks = 0
        self.stats.nodes_explored = 0
