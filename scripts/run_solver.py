#!/usr/bin/env python3
"""
Script to solve a single Nurikabe puzzle.

Usage:
    python scripts/run_solver.py data/puzzles/small_5x5.txt --algorithm dfs --visualize
    python scripts/run_solver.py puzzle.txt --all-solutions --save-solution solution.txt
"""

import click
import sys
from pathlib import Path
import json

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from nurikabe import config as settings
from nurikabe.core.puzzle import Puzzle, PuzzleNotFoundError, MalformedPuzzleError
from nurikabe.core.validator import PuzzleValidator
from nurikabe.core.utils import setup_logger, calculate_solution_stats
from nurikabe.solvers import get_solver, SolverConfig, SOLVER_REGISTRY
from nurikabe.visualization.static_viz import PuzzleVisualizer


def load_puzzle(path: Path) -> Puzzle:
    """Load a puzzle from the text format, or JSON for `.json` files"""
    if path.suffix == '.json':
        if not path.is_file():
            raise PuzzleNotFoundError(f"File not found: {path}")
        return Puzzle.load(path)
    return Puzzle.load_from_text(path)


@click.command()
@click.argument('puzzle_file', type=click.Path())
@click.option('--algorithm', '-a', type=click.Choice(sorted(SOLVER_REGISTRY)),
              default=settings.DEFAULT_ALGORITHM, help='Search strategy to use')
@click.option('--time-limit', '-t', type=float, default=settings.DEFAULT_TIME_LIMIT,
              help='Time limit in seconds')
@click.option('--max-iterations', type=int, default=settings.DEFAULT_MAX_ITERATIONS,
              help='Maximum number of search nodes to visit')
@click.option('--all-solutions', is_flag=True,
              help='Keep searching to report whether the solution is unique')
@click.option('--visualize', '-v', is_flag=True,
              help='Visualize the puzzle and solution')
@click.option('--save-solution', '-s', type=click.Path(),
              help='Save solution to file (.json or text format)')
@click.option('--verbose', is_flag=True, help='Enable verbose output')
@click.option('--log-file', type=click.Path(), default=None,
              help='Also write solver logs to this file')
@click.option('--output-dir', '-o', type=click.Path(), default=str(settings.RESULTS_SOLUTIONS_DIR),
              help='Output directory for visualizations')
def main(puzzle_file, algorithm, time_limit, max_iterations, all_solutions,
         visualize, save_solution, verbose, log_file, output_dir):
    """Solve a Nurikabe puzzle by backtracking search."""

    # Setup
    logger = setup_logger("PuzzleSolver", level="DEBUG" if verbose else settings.LOG_LEVEL)
    settings.ensure_directories()
    output_path = Path(output_dir)

    # Load puzzle
    puzzle_path = Path(puzzle_file)
    try:
        puzzle = load_puzzle(puzzle_path)
        logger.info(f"Loaded puzzle from {puzzle_path}")
    except PuzzleNotFoundError as e:
        click.echo(f"Error: {e}")
        sys.exit(1)
    except MalformedPuzzleError as e:
        click.echo(f"Error loading puzzle: {e}")
        sys.exit(1)

    # Display puzzle info
    click.echo(f"Puzzle ({puzzle.rows}x{puzzle.cols}):")
    click.echo(str(puzzle))

    # Validate puzzle
    validation = PuzzleValidator.validate_puzzle_structure(puzzle)
    if not validation:
        click.echo(f"Error: Invalid puzzle - {'; '.join(validation.errors)}")
        sys.exit(1)

    config = SolverConfig(
        time_limit=time_limit,
        max_iterations=max_iterations,
        verbose=verbose,
        log_file=Path(log_file) if log_file else None,
        check_multiple_solutions=all_solutions
    )

    # Create and run solver
    logger.info(f"Starting {algorithm} solver...")
    solver = get_solver(algorithm, config)

    # Add progress callback if verbose
    if verbose:
        def progress_callback(iteration, node, stats):
            logger.debug(f"Iteration {iteration}: {stats}")

        solver.add_progress_callback(progress_callback)

    result = solver.solve(puzzle)

    # Display results
    click.echo("\n" + "="*50)
    click.echo(f"Algorithm: {algorithm}")
    click.echo(f"Status: {'SUCCESS' if result.success else 'FAILED'}")
    click.echo(f"Time: {result.solve_time:.3f} seconds")
    click.echo(f"Iterations: {result.iterations}")
    click.echo(f"Memory: {result.memory_used:.1f} MB")

    if result.message:
        click.echo(f"Message: {result.message}")

    if result.stats:
        click.echo(f"Search stats: {json.dumps(result.stats, indent=2)}")

    click.echo("="*50 + "\n")

    if not (result.success and result.solution):
        click.echo("No solution")
        sys.exit(1)

    click.echo(str(result.solution))

    if all_solutions:
        click.echo("\nSolution is " + ("NOT unique" if result.has_multiple_solutions else "unique"))

    if verbose:
        click.echo(f"\nSolution stats: {json.dumps(calculate_solution_stats(result.solution), indent=2)}")

    # Save solution if requested
    if save_solution:
        save_path = Path(save_solution)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        solved = result.solution.to_puzzle()
        if save_path.suffix == '.json':
            solved.save(save_path)
        else:
            solved.save_to_text(save_path)
        click.echo(f"\nSolution saved to {save_path}")

    # Visualize if requested
    if visualize:
        viz = PuzzleVisualizer()
        output_path.mkdir(parents=True, exist_ok=True)
        stem = puzzle_path.stem

        viz.visualize(
            puzzle,
            title=f"Puzzle ({puzzle.rows}x{puzzle.cols})",
            save_path=output_path / f"{stem}_puzzle.png",
            show_plot=False
        )
        viz.visualize(
            result.solution,
            title=f"Solution by {algorithm.upper()} ({result.solve_time:.2f}s)",
            save_path=output_path / f"{stem}_solution_{algorithm}.png",
            show_plot=False
        )
        viz.create_comparison_plot(
            [puzzle, result.solution],
            ["Puzzle", f"{algorithm.upper()} Solution"],
            save_path=output_path / f"{stem}_comparison_{algorithm}.png"
        )

        click.echo(f"\nVisualizations saved to {output_path}")


if __name__ == '__main__':
    main()
