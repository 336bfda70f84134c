"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for engine benchmark results.

    Compares the engines per puzzle on solve time and on search effort.
    """

    COLORS = {
        "Recursive": "#2ecc71",  # Green
        "Iterative": "#3498db",  # Blue
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_comparison(),
            self.plot_nodes_comparison(),
        ]

    def _grouped_bars(self, metric: str, ylabel: str, title: str, filename: str,
                      log_scale: bool = False) -> str:
        fig, ax = plt.subplots(figsize=(12, 6))

        algorithms = sorted(set(r.algorithm for r in self.results))
        puzzles = list(dict.fromkeys(r.puzzle for r in self.results))

        x = np.arange(len(puzzles))
        width = 0.8 / max(len(algorithms), 1)

        for i, algo in enumerate(algorithms):
            values = []
            for puzzle in puzzles:
                runs = [
                    getattr(r, metric) for r in self.results
                    if r.algorithm == algo and r.puzzle == puzzle
                ]
                values.append(np.mean(runs) if runs else 0)

            offset = (i - len(algorithms) / 2 + 0.5) * width
            ax.bar(x + offset, values, width,
                   label=algo,
                   color=self.COLORS.get(algo, "#95a5a6"),
                   edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel(ylabel, fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels(puzzles)
        ax.legend(title='Engine')
        if log_scale:
            ax.set_yscale('symlog')
        else:
            ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_time_comparison(self) -> str:
        """Grouped bar chart of average solve time per puzzle and engine."""
        return self._grouped_bars(
            "time_seconds", "Average Time (seconds)",
            "Solve Time by Puzzle and Engine", "time_comparison.png"
        )

    def plot_nodes_comparison(self) -> str:
        """Grouped bar chart of placements tried per puzzle and engine."""
        return self._grouped_bars(
            "nodes_explored", "Nodes Explored",
            "Search Effort by Puzzle and Engine", "nodes_comparison.png",
            log_scale=True
        )

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        algorithms = sorted(set(r.algorithm for r in self.results))

        lines = [
            "# Benchmark Summary\n",
            "| Engine | Solved | Avg Time | Avg Memory | Avg Nodes | Avg Backtracks |",
            "|--------|--------|----------|------------|-----------|----------------|"
        ]

        for algo in algorithms:
            algo_results = [r for r in self.results if r.algorithm == algo]

            solved = sum(1 for r in algo_results if r.solved)
            avg_time = np.mean([r.time_seconds for r in algo_results])
            avg_memory = np.mean([r.memory_bytes / (1024 * 1024) for r in algo_results])
            avg_nodes = np.mean([r.nodes_explored for r in algo_results])
            avg_backtracks = np.mean([r.backtracks for r in algo_results])

            lines.append(
                f"| {algo} | {solved}/{len(algo_results)} | {avg_time:.4f}s | "
                f"{avg_memory:.2f} MB | {int(avg_nodes):,} | {int(avg_backtracks):,} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
