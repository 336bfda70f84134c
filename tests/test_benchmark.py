"""Tests for the engine benchmark and its charts."""

import json
import os

import pytest

from sudoku_grid.benchmark import Benchmark, BenchmarkResult, Visualizer
from sudoku_grid.core.grid import Grid
from sudoku_grid.puzzles import SAMPLE_PUZZLES
from sudoku_grid.solvers import RecursiveBacktrackingSolver

PUZZLES = [("mini", SAMPLE_PUZZLES["mini"]), ("classic", SAMPLE_PUZZLES["classic"])]

# Built so that scan-order backtracking needs hundreds of millions of steps
BRUTE_FORCE_HARD = [
    0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 3, 0, 8, 5,
    0, 0, 1, 0, 2, 0, 0, 0, 0,
    0, 0, 0, 5, 0, 7, 0, 0, 0,
    0, 0, 4, 0, 0, 0, 1, 0, 0,
    0, 9, 0, 0, 0, 0, 0, 0, 0,
    5, 0, 0, 0, 0, 0, 0, 7, 3,
    0, 0, 2, 0, 1, 0, 0, 0, 0,
    0, 0, 0, 0, 4, 0, 0, 0, 9,
]


@pytest.fixture
def benchmark():
    bench = Benchmark(puzzles=PUZZLES, repeat=2, timeout_seconds=30.0)
    bench.run(show_progress=False)
    return bench


class TestBenchmark:

    def test_default_puzzles_and_solvers(self):
        bench = Benchmark()
        assert [name for name, _ in bench.puzzles] == list(SAMPLE_PUZZLES)
        assert list(bench.solvers) == ["Recursive", "Iterative"]

    def test_run(self, benchmark):
        results = benchmark.results
        assert len(results) == 2 * 2 * 2
        assert all(isinstance(r, BenchmarkResult) for r in results)
        assert all(r.solved for r in results)

    def test_engines_agree(self, benchmark):
        for name, _ in PUZZLES:
            nodes = {r.nodes_explored for r in benchmark.results if r.puzzle == name}
            assert len(nodes) == 1

    def test_summary(self, benchmark):
        summary = benchmark.get_summary()

        assert summary["total_puzzles"] == 2
        assert summary["repeat"] == 2
        assert summary["results_by_algorithm"]["Recursive"]["accuracy"] == 100
        assert summary["results_by_algorithm"]["Iterative"]["total_tested"] == 4
        assert summary["results_by_puzzle"]["mini"]["Iterative"]["solved"] == 2

    def test_save_results(self, benchmark, tmp_path):
        benchmark.save_results(str(tmp_path))

        with open(tmp_path / "benchmark_results.json") as f:
            results = json.load(f)
        assert len(results) == 8
        assert results[0]["puzzle"] == "mini"
        assert os.path.exists(tmp_path / "benchmark_summary.json")
        assert os.path.exists(tmp_path / "puzzles.txt")

    def test_timeout(self):
        bench = Benchmark(puzzles=[("hard", BRUTE_FORCE_HARD)], repeat=1, timeout_seconds=0.5)
        results = bench.run(show_progress=False)

        assert len(results) == 2
        for result in results:
            assert result.extra["error"] == "Timeout"
            assert not result.solved
            assert result.nodes_explored == 0

    def test_run_after_timeout_is_unaffected(self):
        solver = RecursiveBacktrackingSolver()
        _, clean = RecursiveBacktrackingSolver().solve(Grid.from_sequence(SAMPLE_PUZZLES["classic"]))

        bench = Benchmark(
            puzzles=[("hard", BRUTE_FORCE_HARD), ("classic", SAMPLE_PUZZLES["classic"])],
            solvers={"Recursive": solver},
            timeout_seconds=5.0
        )
        hard, classic = bench.run(show_progress=False)

        assert hard.extra["error"] == "Timeout"
        assert classic.solved
        assert classic.nodes_explored == clean.nodes_explored
        assert classic.backtracks == clean.backtracks
        assert classic.iterations == clean.iterations
        assert "error" not in classic.extra
        # the shared instance never ran a search in this process
        assert solver.stats.nodes_explored == 0


class TestVisualizer:

    def test_generate_all(self, benchmark, tmp_path):
        visualizer = Visualizer(benchmark.results, str(tmp_path))
        charts = visualizer.generate_all()

        assert len(charts) == 2
        for chart in charts:
            assert os.path.exists(chart)

    def test_summary_table(self, benchmark, tmp_path):
        visualizer = Visualizer(benchmark.results, str(tmp_path))
        path = visualizer.generate_summary_table()

        with open(path) as f:
            content = f.read()
        assert "| Recursive | 4/4 |" in content
        assert "| Iterative | 4/4 |" in content
