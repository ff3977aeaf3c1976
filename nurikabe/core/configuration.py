"""
A single configuration (search node) of the Nurikabe backtracking solver.
"""

import copy
from pathlib import Path
from typing import List, Optional, Union

from .node import Configuration
from .puzzle import (
    Puzzle, Grid, Cell, CellState, Coordinates, ISLAND_CELL, SEA_CELL, render_grid
)
from .validator import forms_pool, islands_are_correct, sea_is_connected


# Reasons reported by NurikabeConfig.violation()
ISLAND_BUDGET_EXCEEDED = "island_budget_exceeded"
SEA_BUDGET_EXCEEDED = "sea_budget_exceeded"
POOL = "pool"
ISLAND_BUDGET_UNMET = "island_budget_unmet"
ISLAND_SIZE = "island_size"
SEA_DISCONNECTED = "sea_disconnected"


class NurikabeConfig(Configuration):
    """
    Immutable partial assignment of a Nurikabe grid.

    The cursor is the row-major index of the most recently decided cell
    (-1 before any decision). Each successor decides the next cell as island
    or sea; cells fixed by the puzzle are passed over unchanged. Successors
    copy only the row they change and share every other row with their
    parent, so configurations can be held across branches safely.
    """

    def __init__(self, puzzle: Puzzle):
        """
        Build the root configuration of a puzzle.

        Args:
            puzzle: The parsed puzzle
        """
        self._rows = puzzle.rows
        self._cols = puzzle.cols
        self._grid: Grid = puzzle.grid
        self._cursor = -1

        self._numbered_count = puzzle.numbered_count
        self._island_budget = puzzle.island_budget
        self._islands_placed = puzzle.preset_islands
        self._sea_placed = puzzle.preset_sea

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> 'NurikabeConfig':
        """Root configuration of a puzzle file"""
        return cls(Puzzle.load_from_text(filepath))

    @classmethod
    def from_text(cls, text: str) -> 'NurikabeConfig':
        """Root configuration of puzzle text"""
        return cls(Puzzle.parse(text))

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def cursor_position(self) -> Optional[Coordinates]:
        """Coordinates of the cursor, None at the root"""
        if self._cursor < 0:
            return None
        row, col = divmod(self._cursor, self._cols)
        return Coordinates(row, col)

    @property
    def total_cells(self) -> int:
        return self._rows * self._cols

    @property
    def numbered_count(self) -> int:
        return self._numbered_count

    @property
    def island_budget(self) -> int:
        return self._island_budget

    @property
    def islands_placed(self) -> int:
        return self._islands_placed

    @property
    def sea_placed(self) -> int:
        return self._sea_placed

    @property
    def total_decided(self) -> int:
        return self._numbered_count + self._islands_placed + self._sea_placed

    @property
    def sea_limit(self) -> int:
        """Most sea cells the grid can hold once every island is reserved"""
        return self.total_cells - (self._numbered_count + self._island_budget)

    def cell(self, row: int, col: int) -> Cell:
        return self._grid[row][col]

    def _expand(self, as_island: bool) -> 'NurikabeConfig':
        """Copy of this configuration with the next cell decided"""
        child = copy.copy(self)
        child._cursor = self._cursor + 1
        row, col = divmod(child._cursor, self._cols)

        if self._grid[row][col].state is CellState.EMPTY:
            if as_island:
                cell = ISLAND_CELL
                child._islands_placed += 1
            else:
                cell = SEA_CELL
                child._sea_placed += 1

            old_row = self._grid[row]
            new_row = old_row[:col] + (cell,) + old_row[col + 1:]
            child._grid = self._grid[:row] + (new_row,) + self._grid[row + 1:]

        return child

    def get_successors(self) -> List['NurikabeConfig']:
        """Island branch then sea branch, or nothing once the grid is decided"""
        if self.is_goal():
            return []
        return [self._expand(True), self._expand(False)]

    def _island_sum_correct(self) -> bool:
        return self._islands_placed <= self._island_budget

    def _sea_sum_correct(self) -> bool:
        return self._sea_placed <= self.sea_limit

    def _no_pool(self) -> bool:
        position = self.cursor_position
        return position is None or not forms_pool(self._grid, position)

    def violation(self) -> Optional[str]:
        """
        First rule this configuration breaks, or None.

        Cheap counter checks run first; the flood fills only run once the
        cursor has reached the last cell.
        """
        if not self._island_sum_correct():
            return ISLAND_BUDGET_EXCEEDED
        if not self._sea_sum_correct():
            return SEA_BUDGET_EXCEEDED
        if not self._no_pool():
            return POOL

        if self.is_goal():
            if self._islands_placed != self._island_budget:
                return ISLAND_BUDGET_UNMET
            if not islands_are_correct(self._grid):
                return ISLAND_SIZE
            if not sea_is_connected(self._grid, self._sea_placed):
                return SEA_DISCONNECTED

        return None

    def is_valid(self) -> bool:
        return self.violation() is None

    def is_goal(self) -> bool:
        return self._cursor == self.total_cells - 1

    def to_puzzle(self) -> Puzzle:
        """Puzzle holding this configuration's cells"""
        return Puzzle(self._rows, self._cols, self._grid)

    def __str__(self):
        return render_grid(self._grid)

    def __repr__(self):
        return (f"NurikabeConfig({self._rows}x{self._cols}, cursor={self._cursor}, "
                f"islands={self._islands_placed}/{self._island_budget}, sea={self._sea_placed})")
