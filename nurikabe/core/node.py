"""
Node interface consumed by the search drivers.
"""

from abc import ABC, abstractmethod
from typing import List


class Configuration(ABC):
    """A single node of a backtracking search tree"""

    @abstractmethod
    def get_successors(self) -> List['Configuration']:
        """Child configurations, possibly none"""
        pass

    @abstractmethod
    def is_valid(self) -> bool:
        """False when the node (and so its whole subtree) can be pruned"""
        pass

    @abstractmethod
    def is_goal(self) -> bool:
        """True when the node is a complete assignment"""
        pass

    @abstractmethod
    def __str__(self) -> str:
        pass
