"""Command-line interface for the backtracking Sudoku solver."""

import argparse
import logging
import sys
from typing import List, Optional

from .benchmark import Benchmark
from .benchmark.visualizer import Visualizer
from .core.errors import SudokuGridError
from .core.grid import Grid
from .puzzles import SAMPLE_PUZZLES, load_puzzles, parse_values
from .solvers import RecursiveBacktrackingSolver, IterativeBacktrackingSolver

ENGINES = {
    "recursive": RecursiveBacktrackingSolver,
    "iterative": IterativeBacktrackingSolver,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-grid",
        description="Backtracking Sudoku solver for square grids of any size",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a 9x9 puzzle given as one character per cell
  sudoku-grid solve --puzzle "420050008803000000..."

  # Solve every puzzle in a file with both engines
  sudoku-grid solve --file puzzles.txt --engine all

  # Fill a blank grid
  sudoku-grid demo blank

  # Compare the engines on the built-in puzzles
  sudoku-grid benchmark --repeat 3 --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve one or more puzzles")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle as one character per cell, or comma-separated values"
    )
    source.add_argument(
        "--file", "-f", type=str,
        help="File with one puzzle per line"
    )
    solve_parser.add_argument(
        "--engine", "-e",
        choices=["recursive", "iterative", "all"],
        default="recursive",
        help="Search engine to use (default: recursive)"
    )
    solve_parser.add_argument(
        "--stats", "-s", action="store_true",
        help="Show search statistics"
    )

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Solve a built-in puzzle")
    demo_parser.add_argument(
        "name", choices=["blank", "sample"],
        help="blank: fill an empty 9x9 grid; sample: solve the sample puzzle"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Compare the engines")
    bench_parser.add_argument(
        "--file", "-f", type=str, default=None,
        help="File with one puzzle per line (default: built-in puzzles)"
    )
    bench_parser.add_argument(
        "--repeat", "-n", type=int, default=1,
        help="Runs per puzzle per engine (default: 1)"
    )
    bench_parser.add_argument(
        "--timeout", "-t", type=float, default=60.0,
        help="Seconds to wait for a single run (default: 60)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "solve":
        return cmd_solve(args)
    elif args.command == "demo":
        return cmd_demo(args)
    elif args.command == "benchmark":
        return cmd_benchmark(args)
    return 1


def cmd_solve(args) -> int:
    """Handle the solve command."""
    try:
        if args.file:
            puzzles = [(name, Grid.from_sequence(values))
                       for name, values in load_puzzles(args.file)]
        else:
            puzzles = [("puzzle", Grid.from_sequence(parse_values(args.puzzle)))]
    except (SudokuGridError, OSError) as e:
        print(f"Error reading puzzle: {e}")
        return 1

    if args.engine == "all":
        engines = list(ENGINES.items())
    else:
        engines = [(args.engine, ENGINES[args.engine])]

    exit_code = 0
    for name, grid in puzzles:
        print(f"Input {name} ({grid.side}x{grid.side}, {grid.count_filled()} clues):")
        grid.print_board()
        print()

        for engine_name, engine_cls in engines:
            solution, stats = engine_cls().solve(grid)
            if stats.solved:
                print(f"✓ Solved with {engine_name} in {stats.time_seconds:.4f}s")
                solution.print_board()
            else:
                print(f"✗ No solution found with {engine_name}")
                if "error" in stats.extra:
                    print(f"  Error: {stats.extra['error']}")
                exit_code = 1
            if args.stats:
                print(f"  Nodes: {stats.nodes_explored:,}")
                print(f"  Backtracks: {stats.backtracks:,}")
                print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
            print()

    return exit_code


def cmd_demo(args) -> int:
    """Handle the demo command."""
    if args.name == "blank":
        grid = Grid()
        print("Starting:")
    else:
        grid = Grid.from_sequence(SAMPLE_PUZZLES["sample"])
        print("Before:")
    grid.print_board()
    print()

    solved = grid.solve()
    print("Solved:" if args.name == "blank" else "After:")
    grid.print_board()
    return 0 if solved else 1


def cmd_benchmark(args) -> int:
    """Handle the benchmark command."""
    try:
        puzzles = load_puzzles(args.file) if args.file else None
        benchmark = Benchmark(
            puzzles=puzzles,
            repeat=args.repeat,
            timeout_seconds=args.timeout
        )
    except (SudokuGridError, OSError) as e:
        print(f"Error reading puzzles: {e}")
        return 1

    print("=" * 60)
    print("SUDOKU ENGINE BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {', '.join(name for name, _ in benchmark.puzzles)}")
    print(f"Engines: {', '.join(benchmark.solvers.keys())}")
    print(f"Runs per puzzle: {args.repeat}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\nBy Engine:")
    print("-" * 50)
    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Solved: {stats['total_solved']}/{stats['total_tested']}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Memory: {stats['avg_memory_mb']:.2f} MB")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
