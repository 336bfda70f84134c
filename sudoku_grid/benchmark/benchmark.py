"""Benchmarking framework for comparing the backtracking engines."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Sequence, Tuple, Type
import json
import logging
import multiprocessing
import os

from tqdm import tqdm

from ..core.grid import Grid
from ..puzzles import SAMPLE_PUZZLES, save_puzzles
from ..solvers import BaseSolver, RecursiveBacktrackingSolver, IterativeBacktrackingSolver

log = logging.getLogger(__name__)


def _solve_in_worker(solver: BaseSolver, grid: Grid):
    return solver.solve(grid)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle: str
    run: int
    algorithm: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle": self.puzzle,
            "run": self.run,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


class Benchmark:
    """
    Runs every engine on every puzzle and collects the solver statistics.

    Puzzles are (name, flat values) pairs; by default the built-in sample
    puzzles are used.
    """

    DEFAULT_SOLVERS: Dict[str, Type[BaseSolver]] = {
        "Recursive": RecursiveBacktrackingSolver,
        "Iterative": IterativeBacktrackingSolver,
    }

    def __init__(
        self,
        puzzles: Optional[Sequence[Tuple[str, List[int]]]] = None,
        solvers: Optional[Dict[str, BaseSolver]] = None,
        repeat: int = 1,
        timeout_seconds: float = 60.0
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: (name, values) pairs to solve (default: SAMPLE_PUZZLES).
            solvers: Dict of solver_name -> solver_instance (default: both engines).
            repeat: Number of runs per puzzle per solver.
            timeout_seconds: Maximum time to wait for a single run.
        """
        if puzzles is None:
            puzzles = list(SAMPLE_PUZZLES.items())
        self.puzzles: List[Tuple[str, Grid]] = [
            (name, Grid.from_sequence(values)) for name, values in puzzles
        ]
        self.repeat = repeat
        self.timeout_seconds = timeout_seconds

        if solvers is None:
            self.solvers = {name: cls() for name, cls in self.DEFAULT_SOLVERS.items()}
        else:
            self.solvers = solvers

        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        total_tests = len(self.puzzles) * len(self.solvers) * self.repeat

        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for puzzle_name, grid in self.puzzles:
            for run in range(self.repeat):
                for solver_name, solver in self.solvers.items():
                    result = self._run_single(grid, puzzle_name, run, solver_name, solver)
                    self.results.append(result)
                    pbar.update(1)

        pbar.close()
        log.info("Benchmark finished: %d runs", len(self.results))
        return self.results

    def _run_single(
        self,
        grid: Grid,
        puzzle_name: str,
        run: int,
        solver_name: str,
        solver: BaseSolver
    ) -> BenchmarkResult:
        """
        Run a single solver on a single puzzle.

        Each run happens in its own worker process, which is terminated on
        timeout, so an unfinished search never shares counters, the memory
        tracer or the interpreter with later runs.
        """
        with multiprocessing.Pool(processes=1) as pool:
            pending = pool.apply_async(_solve_in_worker, (solver, grid))
            try:
                _, stats = pending.get(timeout=self.timeout_seconds)
            except multiprocessing.TimeoutError:
                log.warning("%s timed out on %s after %.1fs",
                            solver_name, puzzle_name, self.timeout_seconds)
                return BenchmarkResult(
                    puzzle=puzzle_name,
                    run=run,
                    algorithm=solver_name,
                    solved=False,
                    time_seconds=self.timeout_seconds,
                    memory_bytes=0,
                    iterations=0,
                    backtracks=0,
                    nodes_explored=0,
                    extra={"error": "Timeout"}
                )

        return BenchmarkResult(
            puzzle=puzzle_name,
            run=run,
            algorithm=solver_name,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            extra=dict(stats.extra)
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.puzzles),
            "repeat": self.repeat,
            "solvers_tested": list(self.solvers.keys()),
            "results_by_algorithm": {},
            "results_by_puzzle": {}
        }

        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if solver_results:
                solved = [r for r in solver_results if r.solved]
                times = [r.time_seconds for r in solver_results]
                memory = [r.memory_bytes for r in solver_results]

                summary["results_by_algorithm"][solver_name] = {
                    "accuracy": len(solved) / len(solver_results) * 100,
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "min_time_seconds": min(times),
                    "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
                    "total_solved": len(solved),
                    "total_tested": len(solver_results)
                }

        for puzzle_name, _ in self.puzzles:
            puzzle_results = [r for r in self.results if r.puzzle == puzzle_name]
            if not puzzle_results:
                continue
            summary["results_by_puzzle"][puzzle_name] = {}
            for solver_name in self.solvers:
                runs = [r for r in puzzle_results if r.algorithm == solver_name]
                if runs:
                    times = [r.time_seconds for r in runs]
                    summary["results_by_puzzle"][puzzle_name][solver_name] = {
                        "solved": sum(1 for r in runs if r.solved),
                        "tested": len(runs),
                        "avg_time_seconds": sum(times) / len(times),
                        "nodes_explored": runs[0].nodes_explored,
                        "backtracks": runs[0].backtracks
                    }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and the puzzles used to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        save_puzzles(
            [(name, grid.get_board()) for name, grid in self.puzzles],
            os.path.join(output_dir, "puzzles.txt")
        )

        log.info("Results and puzzles saved to %s", output_dir)
