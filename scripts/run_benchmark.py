#!/usr/bin/env python3
"""
Script to benchmark Nurikabe solvers on a directory of puzzle files.

Usage:
    python scripts/run_benchmark.py data/puzzles --algorithms dfs --algorithms bfs
    python scripts/run_benchmark.py data/puzzles --pattern "small_*.txt" --time-limit 10
"""

import click
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from nurikabe import config as settings
from nurikabe.analysis.benchmark import Benchmark, BenchmarkConfig
from nurikabe.core.utils import load_puzzle_batch
from nurikabe.solvers import SOLVER_REGISTRY


@click.command()
@click.argument('puzzle_dir', type=click.Path(exists=True, file_okay=False),
                default=str(settings.PUZZLES_DIR))
@click.option('--algorithms', '-a', multiple=True,
              type=click.Choice(sorted(SOLVER_REGISTRY)),
              help='Algorithms to benchmark (default: all)')
@click.option('--pattern', '-p', default='*.txt',
              help='Glob pattern selecting puzzle files')
@click.option('--time-limit', '-t', type=float, default=settings.DEFAULT_TIME_LIMIT,
              help='Time limit per puzzle in seconds')
@click.option('--max-iterations', type=int, default=settings.DEFAULT_MAX_ITERATIONS,
              help='Maximum number of search nodes per puzzle')
@click.option('--output-dir', '-o', type=click.Path(), default=str(settings.RESULTS_BENCHMARKS_DIR),
              help='Output directory for results')
@click.option('--save-solutions', is_flag=True,
              help='Save all solutions')
@click.option('--no-progress', is_flag=True,
              help='Disable the progress bar')
def main(puzzle_dir, algorithms, pattern, time_limit, max_iterations,
         output_dir, save_solutions, no_progress):
    """Run benchmarks on Nurikabe solvers."""

    settings.ensure_directories()

    click.echo("="*60)
    click.echo("Nurikabe Solver Benchmark")
    click.echo("="*60)

    puzzles = load_puzzle_batch(Path(puzzle_dir), pattern)
    if not puzzles:
        click.echo(f"Error: No puzzles matching '{pattern}' in {puzzle_dir}")
        sys.exit(1)

    algorithms = list(algorithms) or sorted(SOLVER_REGISTRY)
    click.echo(f"\nPuzzles: {len(puzzles)}")
    click.echo(f"Algorithms: {', '.join(algorithms)}")
    click.echo(f"Time limit: {time_limit}s")

    benchmark_config = BenchmarkConfig(
        algorithms=algorithms,
        time_limit=time_limit,
        max_iterations=max_iterations,
        output_dir=output_dir,
        save_solutions=save_solutions,
        show_progress=not no_progress
    )

    # Run benchmark
    click.echo("\nStarting benchmark...\n")

    benchmark = Benchmark(benchmark_config)
    results_df = benchmark.run(puzzles)

    click.echo(f"\nBenchmark completed! Results summary:")
    click.echo(f"  Total tests: {len(results_df)}")
    click.echo(f"  Successful: {results_df['success'].sum()}")
    click.echo(f"  Failed: {(~results_df['success']).sum()}")
    click.echo(f"  Success rate: {results_df['success'].mean() * 100:.1f}%")

    # Display algorithm summary
    click.echo("\nAlgorithm Performance:")
    for algorithm in algorithms:
        alg_data = results_df[results_df['algorithm'] == algorithm]
        click.echo(f"  {algorithm}:")
        click.echo(f"    Success rate: {alg_data['success'].mean() * 100:.1f}%")
        click.echo(f"    Avg time: {alg_data['solve_time'].mean():.3f}s")
        click.echo(f"    Avg iterations: {alg_data['iterations'].mean():.0f}")

    click.echo(f"\nResults saved to {output_dir}")


if __name__ == '__main__':
    main()
