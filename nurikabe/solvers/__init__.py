"""
Solvers for Nurikabe puzzles.
"""

from .base_solver import BaseSolver, SolverConfig, SolverResult, SearchLimitExceeded
from .backtracking_solver import BacktrackingSolver, DepthFirstSolver, BreadthFirstSolver

__all__ = [
    # Base classes
    'BaseSolver',
    'SolverConfig',
    'SolverResult',
    'SearchLimitExceeded',

    # Tree search
    'BacktrackingSolver',
    'DepthFirstSolver',
    'BreadthFirstSolver',
]


# Solver registry for easy access
SOLVER_REGISTRY = {
    'dfs': DepthFirstSolver,
    'bfs': BreadthFirstSolver,
}


def get_solver(name: str, config: SolverConfig = None) -> BaseSolver:
    """
    Get a solver by name.

    Args:
        name: Solver name (dfs, bfs)
        config: Optional solver configuration

    Returns:
        Solver instance

    Raises:
        ValueError: If solver name is not recognized
    """
    solver_class = SOLVER_REGISTRY.get(name.lower())
    if not solver_class:
        raise ValueError(f"Unknown solver: {name}. Available: {list(SOLVER_REGISTRY.keys())}")

    return solver_class(config or SolverConfig())
