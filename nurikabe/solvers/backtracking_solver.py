"""
Backtracking search over configuration nodes.
"""

from abc import abstractmethod
from collections import deque
from typing import Any, Dict, List, Set

from .base_solver import BaseSolver, SolverResult
from ..core.utils import timer
from ..core.node import Configuration


class BacktrackingSolver(BaseSolver):
    """
    Generic tree search over `Configuration` nodes.

    Pops a node, discards it when invalid, accepts it when it is a goal and
    otherwise pushes its successors. Subclasses only choose the frontier
    discipline.
    """

    @abstractmethod
    def _new_frontier(self, root: Configuration):
        """Frontier holding only the root"""
        pass

    @abstractmethod
    def _push(self, frontier, successors: List[Configuration]):
        pass

    @abstractmethod
    def _pop(self, frontier) -> Configuration:
        pass

    @timer
    def _solve(self, root: Configuration) -> SolverResult:
        frontier = self._new_frontier(root)
        stats: Dict[str, Any] = {
            'nodes_expanded': 0,
            'nodes_pruned': 0,
            'max_frontier': 1,
            'solutions_found': 0,
        }
        solution = None
        # Seeded and pre-marked cells give two identical successors, so the
        # same grid can be reached as a goal more than once
        distinct: Set[str] = set()
        steps: List[str] = []

        while frontier:
            node = self._pop(frontier)
            self._increment_iteration()

            if not node.is_valid():
                stats['nodes_pruned'] += 1
                continue

            if self.config.record_steps:
                steps.append(str(node))

            if node.is_goal():
                distinct.add(str(node))
                stats['solutions_found'] = len(distinct)
                if solution is None:
                    solution = node
                    self.logger.debug(f"Found solution after {self._iterations} nodes:\n{node}")
                if not self.config.check_multiple_solutions or stats['solutions_found'] > 1:
                    break
                continue

            self._push(frontier, node.get_successors())
            stats['nodes_expanded'] += 1
            stats['max_frontier'] = max(stats['max_frontier'], len(frontier))

            if self._iterations % self.config.progress_interval == 0:
                self.logger.debug(f"Iteration {self._iterations}: frontier={len(frontier)}")
                self._call_progress_callbacks(node, stats)

        if solution is None:
            return SolverResult(
                success=False,
                message="No valid solution exists",
                steps=steps,
                stats=stats
            )

        return SolverResult(
            success=True,
            solution=solution,
            message="Puzzle solved successfully",
            has_multiple_solutions=stats['solutions_found'] > 1,
            steps=steps,
            stats=stats
        )


class DepthFirstSolver(BacktrackingSolver):
    """Depth-first search; the island branch of each node is explored first"""

    def _new_frontier(self, root: Configuration):
        return [root]

    def _push(self, frontier, successors: List[Configuration]):
        frontier.extend(reversed(successors))

    def _pop(self, frontier) -> Configuration:
        return frontier.pop()


class BreadthFirstSolver(BacktrackingSolver):
    """Breadth-first search, level by level in successor order"""

    def _new_frontier(self, root: Configuration):
        return deque([root])

    def _push(self, frontier, successors: List[Configuration]):
        frontier.extend(successors)

    def _pop(self, frontier) -> Configuration:
        return frontier.popleft()
