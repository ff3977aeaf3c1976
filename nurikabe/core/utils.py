"""
Utility functions for the Nurikabe solver.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Optional, Dict, Any
import time
from functools import wraps
import numpy as np

from .. import config
from .puzzle import Puzzle, Cell, CellState, MalformedPuzzleError, render_grid
from .validator import flood_fill, iter_seeds, sea_is_connected, find_pools


def setup_logger(name: str, log_file: Optional[Path] = None, level: str = config.LOG_LEVEL) -> logging.Logger:
    """
    Set up a logger with console and optional file output.

    Args:
        name: Logger name
        log_file: Optional log file path
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    logger.handlers = []

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper()))

    # Formatter
    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, level.upper()))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def timer(func):
    """Decorator to time function execution"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        execution_time = time.time() - start_time

        # Try to get logger from first argument (usually self)
        if args and hasattr(args[0], 'logger'):
            args[0].logger.debug(f"{func.__name__} took {execution_time:.3f} seconds")
        else:
            logging.getLogger(func.__module__).debug(f"{func.__name__} took {execution_time:.3f} seconds")

        return result
    return wrapper


def memory_usage():
    """Get current memory usage in MB"""
    import psutil
    import os
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


class PuzzleConverter:
    """Convert puzzles between different formats"""

    @staticmethod
    def to_grid(source) -> np.ndarray:
        """
        Convert a puzzle or configuration to a 2D integer array.
        0: empty, 1-9: numbered cell, 10: island, 11: sea
        """
        grid = np.zeros((source.rows, source.cols), dtype=int)
        for row_idx, row in enumerate(source.grid):
            for col_idx, cell in enumerate(row):
                grid[row_idx, col_idx] = cell.code
        return grid

    @staticmethod
    def from_grid(grid: np.ndarray) -> Puzzle:
        """Create puzzle from 2D integer array"""
        rows, cols = grid.shape
        cells = [[Cell.from_code(int(grid[row, col])) for col in range(cols)]
                 for row in range(rows)]
        return Puzzle(rows, cols, cells)

    @staticmethod
    def to_string(source) -> str:
        """Rendered grid without the dimension header"""
        return render_grid(source.grid)

    @staticmethod
    def from_string(s: str) -> Puzzle:
        """
        Create puzzle from a rendered grid (no dimension header).
        Dimensions are taken from the number of lines and tokens per line.
        """
        lines = [line.split() for line in s.strip().splitlines() if line.strip()]
        if not lines:
            raise MalformedPuzzleError("Empty grid")

        cols = len(lines[0])
        if any(len(tokens) != cols for tokens in lines):
            raise MalformedPuzzleError("Ragged rows: all rows must have the same number of cells")

        cells = [[Cell.from_token(token) for token in tokens] for tokens in lines]
        return Puzzle(len(lines), cols, cells)


def load_puzzle_batch(directory: Path, pattern: str = "*.txt") -> List[Tuple[str, Puzzle]]:
    """Load puzzles from a directory, keyed by file stem"""
    logger = logging.getLogger(__name__)
    puzzles = []

    for filepath in sorted(Path(directory).glob(pattern)):
        try:
            puzzle = Puzzle.load_from_text(filepath)
            puzzles.append((filepath.stem, puzzle))
        except (FileNotFoundError, ValueError) as e:
            logger.warning(f"Error loading {filepath}: {e}")

    return puzzles


def calculate_solution_stats(solution) -> Dict[str, Any]:
    """Calculate statistics for a solved grid (puzzle or configuration)"""
    grid = solution.grid
    counts = {state: 0 for state in CellState}
    for row in grid:
        for cell in row:
            counts[cell.state] += 1

    island_sizes = []
    visited = set()
    for seed, _ in iter_seeds(grid):
        visited.add(seed)
        island_sizes.append(1 + len(flood_fill(grid, seed, CellState.ISLAND, visited)))

    total = solution.rows * solution.cols
    stats = {
        'numbered_cells': counts[CellState.NUMBERED],
        'island_cells': counts[CellState.ISLAND],
        'sea_cells': counts[CellState.SEA],
        'empty_cells': counts[CellState.EMPTY],
        'sea_fraction': counts[CellState.SEA] / total,
        'is_complete': counts[CellState.EMPTY] == 0,
        'sea_connected': sea_is_connected(grid, counts[CellState.SEA]),
        'pools': len(find_pools(grid)),
    }

    if island_sizes:
        stats['largest_island'] = max(island_sizes)
        stats['avg_island_size'] = sum(island_sizes) / len(island_sizes)
    else:
        stats['largest_island'] = 0
        stats['avg_island_size'] = 0

    return stats
