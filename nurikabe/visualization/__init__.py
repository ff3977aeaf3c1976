"""
Visualization tools for Nurikabe puzzles.
"""

from .static_viz import PuzzleVisualizer

__all__ = [
    'PuzzleVisualizer',
]
