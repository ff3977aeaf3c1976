# nurikabe/core/__init__.py
"""
Core data structures and utilities for the Nurikabe solver.
"""

from .puzzle import (
    Puzzle, Cell, CellState, Coordinates,
    PuzzleNotFoundError, MalformedPuzzleError
)
from .node import Configuration
from .configuration import NurikabeConfig
from .validator import PuzzleValidator, ValidationResult
from .utils import (
    setup_logger, timer, memory_usage,
    PuzzleConverter, load_puzzle_batch,
    calculate_solution_stats
)

__all__ = [
    # Data structures
    'Puzzle', 'Cell', 'CellState', 'Coordinates',
    'PuzzleNotFoundError', 'MalformedPuzzleError',

    # Search nodes
    'Configuration', 'NurikabeConfig',

    # Validation
    'PuzzleValidator', 'ValidationResult',

    # Utilities
    'setup_logger', 'timer', 'memory_usage',
    'PuzzleConverter', 'load_puzzle_batch',
    'calculate_solution_stats'
]
