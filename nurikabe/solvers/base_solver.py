"""
Base solver class for Nurikabe puzzles.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List, Callable
from dataclasses import dataclass, field
import time
from pathlib import Path

from .. import config as settings
from ..core.puzzle import Puzzle
from ..core.node import Configuration
from ..core.configuration import NurikabeConfig
from ..core.validator import PuzzleValidator
from ..core.utils import setup_logger, memory_usage


class SearchLimitExceeded(RuntimeError):
    """Raised when a search runs past its time or iteration limit"""


@dataclass
class SolverConfig:
    """Configuration for puzzle solvers"""
    time_limit: float = settings.DEFAULT_TIME_LIMIT  # seconds
    max_iterations: int = settings.DEFAULT_MAX_ITERATIONS
    verbose: bool = False
    log_file: Optional[Path] = None
    check_multiple_solutions: bool = False
    progress_interval: int = 10000  # iterations between progress callbacks
    record_steps: bool = False  # keep the rendering of every valid node visited


@dataclass
class SolverResult:
    """Result from puzzle solver"""
    success: bool
    solution: Optional[NurikabeConfig] = None
    solve_time: float = 0.0
    iterations: int = 0
    memory_used: float = 0.0  # MB
    message: str = ""

    # Additional information
    has_multiple_solutions: bool = False
    steps: List[str] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self):
        status = "Success" if self.success else "Failed"
        return f"SolverResult({status}, time={self.solve_time:.2f}s, iterations={self.iterations})"


class BaseSolver(ABC):
    """Abstract base class for Nurikabe solvers"""

    def __init__(self, config: Optional[SolverConfig] = None):
        """Initialize solver with configuration."""
        self.config = config or SolverConfig()
        self.logger = setup_logger(
            self.__class__.__name__,
            self.config.log_file,
            "DEBUG" if self.config.verbose else settings.LOG_LEVEL
        )

        # Callbacks for monitoring progress
        self._progress_callbacks: List[Callable] = []

        # Statistics tracking
        self._start_time: Optional[float] = None
        self._iterations: int = 0

    def add_progress_callback(self, callback: Callable):
        """Add a callback function `(iterations, configuration, stats)` to monitor solving progress."""
        self._progress_callbacks.append(callback)

    def solve(self, puzzle: Puzzle) -> SolverResult:
        """Solve the puzzle."""
        self.logger.info(f"Starting {self.__class__.__name__} solver")
        self.logger.info(f"Puzzle: {puzzle!r}")

        # Validate input puzzle
        validation = PuzzleValidator.validate_puzzle_structure(puzzle)
        if not validation:
            return SolverResult(
                success=False,
                message=f"Invalid puzzle: {'; '.join(validation.errors)}"
            )
        for warning in validation.warnings:
            self.logger.warning(warning)

        # Initialize solving
        self._start_time = time.time()
        self._iterations = 0
        initial_memory = memory_usage()

        try:
            # Call the specific solver implementation
            result = self._solve(NurikabeConfig(puzzle))

            # Validate solution if found
            if result.success and result.solution:
                validation = PuzzleValidator.validate_solution(result.solution)
                if not validation:
                    result.success = False
                    result.message = f"Invalid solution: {'; '.join(validation.errors)}"

            # Add final statistics
            result.solve_time = time.time() - self._start_time
            result.memory_used = memory_usage() - initial_memory
            result.iterations = self._iterations

            # Log result
            if result.success:
                self.logger.info(f"Solved in {result.solve_time:.2f}s with {result.iterations} iterations")
            else:
                self.logger.warning(f"Failed to solve: {result.message}")

            return result

        except SearchLimitExceeded as e:
            self.logger.warning(f"Search stopped: {e}")
            return SolverResult(
                success=False,
                message=str(e),
                solve_time=time.time() - self._start_time,
                iterations=self._iterations
            )

        except Exception as e:
            self.logger.error(f"Error during solving: {str(e)}", exc_info=True)
            return SolverResult(
                success=False,
                message=f"Solver error: {str(e)}",
                solve_time=time.time() - self._start_time,
                iterations=self._iterations
            )

    @abstractmethod
    def _solve(self, root: Configuration) -> SolverResult:
        """Implement the specific search starting from the root configuration."""
        pass

    def _check_time_limit(self) -> bool:
        """Check if time limit has been exceeded"""
        if self._start_time is None:
            return False
        return (time.time() - self._start_time) > self.config.time_limit

    def _increment_iteration(self):
        """Increment iteration counter and check limits"""
        self._iterations += 1

        if self._iterations > self.config.max_iterations:
            raise SearchLimitExceeded(f"Maximum iterations ({self.config.max_iterations}) exceeded")

        # Clock is only read every 1024 nodes
        if self._iterations % 1024 == 0 and self._check_time_limit():
            raise SearchLimitExceeded(f"Time limit ({self.config.time_limit}s) exceeded")

    def _call_progress_callbacks(self, current: Optional[Configuration] = None,
                                 stats: Optional[Dict[str, Any]] = None):
        """Call all registered progress callbacks"""
        for callback in self._progress_callbacks:
            try:
                callback(self._iterations, current, stats or {})
            except Exception as e:
                self.logger.error(f"Error in progress callback: {e}")
