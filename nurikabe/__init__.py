"""
Backtracking solver for Nurikabe puzzles.
"""

__version__ = "0.1.0"
