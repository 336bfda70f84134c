"""Benchmark module for comparing the backtracking engines."""

from .benchmark import Benchmark, BenchmarkResult
from .visualizer import Visualizer

__all__ = ["Benchmark", "BenchmarkResult", "Visualizer"]
