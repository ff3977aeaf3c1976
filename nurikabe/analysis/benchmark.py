"""
Benchmark system for comparing solver performance on a set of puzzles.
"""

import time
import json
import pandas as pd
from pathlib import Path
from typing import List, Dict, Any, Optional, Tuple
from dataclasses import dataclass, asdict, field
from datetime import datetime
import traceback
from tqdm import tqdm

from .. import config as settings
from ..core.puzzle import Puzzle
from ..core.validator import PuzzleValidator
from ..core.utils import setup_logger, memory_usage, load_puzzle_batch
from ..solvers import get_solver, SolverConfig


@dataclass
class BenchmarkResult:
    """Result from a single benchmark test"""
    puzzle_id: str
    algorithm: str
    success: bool
    solve_time: float
    iterations: int
    memory_mb: float

    # Puzzle characteristics
    rows: int
    cols: int
    numbered_cells: int
    island_budget: int

    # Solution quality
    is_valid: bool = False
    error_message: str = ""

    # Search statistics
    nodes_expanded: int = 0
    nodes_pruned: int = 0
    max_frontier: int = 0

    timestamp: str = ""
    extra_stats: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return asdict(self)


class BenchmarkConfig:
    """Configuration for benchmark tests"""

    def __init__(self, **kwargs):
        self.algorithms: List[str] = kwargs.get('algorithms', ['dfs', 'bfs'])

        # Solver parameters
        self.time_limit: float = kwargs.get('time_limit', settings.DEFAULT_TIME_LIMIT)
        self.max_iterations: int = kwargs.get('max_iterations', settings.DEFAULT_MAX_ITERATIONS)

        # Output parameters
        self.output_dir: Path = Path(kwargs.get('output_dir', settings.RESULTS_BENCHMARKS_DIR))
        self.save_solutions: bool = kwargs.get('save_solutions', False)
        self.show_progress: bool = kwargs.get('show_progress', True)


class Benchmark:
    """Run benchmarks on Nurikabe solvers"""

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.logger = setup_logger(self.__class__.__name__)

        # Create output directory
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        # Results storage
        self.results: List[BenchmarkResult] = []

    def run(self, puzzles: List[Tuple[str, Puzzle]]) -> pd.DataFrame:
        """
        Run every configured algorithm on every puzzle.

        Args:
            puzzles: (puzzle id, puzzle) pairs

        Returns:
            DataFrame with all benchmark results
        """
        self.logger.info(f"Starting benchmark: {len(puzzles)} puzzles, algorithms {self.config.algorithms}")
        start_time = time.time()

        total_tests = len(puzzles) * len(self.config.algorithms)
        with tqdm(total=total_tests, desc="Running benchmarks", disable=not self.config.show_progress) as pbar:
            for puzzle_id, puzzle in puzzles:
                for algorithm in self.config.algorithms:
                    self.results.append(self._run_single_test(puzzle_id, puzzle, algorithm))
                    pbar.update(1)

        results_df = pd.DataFrame([r.to_dict() for r in self.results])

        # Save results
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        results_file = self.config.output_dir / f"benchmark_results_{timestamp}.csv"
        results_df.drop(columns=['extra_stats'], errors='ignore').to_csv(results_file, index=False)

        # Save detailed JSON
        json_file = self.config.output_dir / f"benchmark_results_{timestamp}.json"
        with open(json_file, 'w') as f:
            json.dump({
                'config': {
                    'algorithms': self.config.algorithms,
                    'time_limit': self.config.time_limit,
                    'max_iterations': self.config.max_iterations,
                },
                'results': [r.to_dict() for r in self.results],
                'summary': self._compute_summary(results_df)
            }, f, indent=2, default=str)

        total_time = time.time() - start_time
        self.logger.info(f"Benchmark completed in {total_time:.2f} seconds")
        self.logger.info(f"Results saved to {results_file}")

        return results_df

    def run_directory(self, directory: Path, pattern: str = "*.txt") -> pd.DataFrame:
        """Benchmark every puzzle file in a directory"""
        puzzles = load_puzzle_batch(directory, pattern)
        self.logger.info(f"Loaded {len(puzzles)} puzzles from {directory}")
        return self.run(puzzles)

    def _run_single_test(self, puzzle_id: str, puzzle: Puzzle,
                         algorithm: str) -> BenchmarkResult:
        """Run a single benchmark test"""
        solver_config = SolverConfig(
            time_limit=self.config.time_limit,
            max_iterations=self.config.max_iterations,
            verbose=False
        )

        result = BenchmarkResult(
            puzzle_id=puzzle_id,
            algorithm=algorithm,
            success=False,
            solve_time=0.0,
            iterations=0,
            memory_mb=0.0,
            rows=puzzle.rows,
            cols=puzzle.cols,
            numbered_cells=puzzle.numbered_count,
            island_budget=puzzle.island_budget,
            timestamp=datetime.now().isoformat()
        )

        try:
            solver = get_solver(algorithm, solver_config)
            initial_memory = memory_usage()

            solver_result = solver.solve(puzzle)

            result.success = solver_result.success
            result.solve_time = solver_result.solve_time
            result.iterations = solver_result.iterations
            result.memory_mb = memory_usage() - initial_memory
            result.nodes_expanded = solver_result.stats.get('nodes_expanded', 0)
            result.nodes_pruned = solver_result.stats.get('nodes_pruned', 0)
            result.max_frontier = solver_result.stats.get('max_frontier', 0)
            if not solver_result.success:
                result.error_message = solver_result.message

            # Validate solution if successful
            if solver_result.success and solver_result.solution:
                validation = PuzzleValidator.validate_solution(solver_result.solution)
                result.is_valid = validation.is_valid
                if not validation.is_valid:
                    result.error_message = "; ".join(validation.errors)

                if self.config.save_solutions:
                    solution_dir = self.config.output_dir / "solutions" / algorithm
                    solution_dir.mkdir(parents=True, exist_ok=True)
                    solver_result.solution.to_puzzle().save_to_text(solution_dir / f"{puzzle_id}.txt")

            result.extra_stats = dict(solver_result.stats)

        except Exception as e:
            result.error_message = f"Exception: {str(e)}"
            self.logger.error(f"Error in {algorithm} on {puzzle_id}: {str(e)}")
            self.logger.debug(traceback.format_exc())

        return result

    def _compute_summary(self, results_df: pd.DataFrame) -> dict:
        """Compute summary statistics"""
        summary = {}

        if results_df.empty:
            summary['total_tests'] = 0
            return summary

        # Overall statistics
        summary['total_tests'] = int(len(results_df))
        summary['successful_tests'] = int(results_df['success'].sum())
        summary['success_rate'] = float(results_df['success'].mean())

        # Per algorithm statistics
        summary['by_algorithm'] = {}
        for algorithm in self.config.algorithms:
            alg_data = results_df[results_df['algorithm'] == algorithm]
            if alg_data.empty:
                continue

            summary['by_algorithm'][algorithm] = {
                'success_rate': float(alg_data['success'].mean()),
                'avg_time': float(alg_data['solve_time'].mean()),
                'median_time': float(alg_data['solve_time'].median()),
                'avg_iterations': float(alg_data['iterations'].mean()),
                'max_frontier': int(alg_data['max_frontier'].max()),
                'valid_solutions': int(alg_data['is_valid'].sum()),
                'total_tests': int(len(alg_data))
            }

        return summary


class BenchmarkAnalyzer:
    """Analyze benchmark results"""

    def __init__(self, results_file: Path):
        """Load benchmark results from file"""
        self.results_df = pd.read_csv(results_file)
        self.logger = setup_logger(self.__class__.__name__)

    def get_summary_statistics(self) -> pd.DataFrame:
        """Get summary statistics by algorithm"""
        summary = self.results_df.groupby('algorithm').agg({
            'success': ['count', 'sum', 'mean'],
            'solve_time': ['mean', 'median', 'min', 'max'],
            'iterations': ['mean', 'max'],
            'max_frontier': ['mean', 'max']
        }).round(3)

        # Flatten column names
        summary.columns = ['_'.join(col).strip() for col in summary.columns.values]

        return summary

    def find_best_algorithm(self, metric: str = 'solve_time',
                            constraints: Optional[dict] = None) -> str:
        """
        Find best algorithm based on metric and constraints.

        Args:
            metric: Metric to optimize ('solve_time', 'iterations', 'success')
            constraints: Optional column -> value filters

        Returns:
            Best algorithm name
        """
        data = self.results_df.copy()

        if constraints:
            for col, value in constraints.items():
                if col in data.columns:
                    data = data[data[col] == value]

        performance = data.groupby('algorithm')[metric].mean()
        if metric == 'success':
            return performance.idxmax()
        # For time and iterations, lower is better
        return performance.idxmin()
