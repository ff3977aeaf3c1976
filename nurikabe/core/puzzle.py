"""
Core data structures for Nurikabe puzzles.
"""

from dataclasses import dataclass
from typing import List, Tuple, Optional, Dict, Iterator, Sequence, Union
from enum import Enum
import json
from pathlib import Path


class PuzzleNotFoundError(FileNotFoundError):
    """Raised when a puzzle file is missing or cannot be read"""


class MalformedPuzzleError(ValueError):
    """Raised when puzzle text does not follow the puzzle grammar"""


class CellState(Enum):
    """Cell states of a Nurikabe grid"""
    EMPTY = "empty"
    NUMBERED = "numbered"
    ISLAND = "island"
    SEA = "sea"


# Numeric encoding used by array exports
EMPTY_CODE = 0
ISLAND_CODE = 10
SEA_CODE = 11

EMPTY_TOKEN = '.'
ISLAND_TOKEN = '#'
SEA_TOKEN = '@'


@dataclass(frozen=True)
class Cell:
    """A single grid cell; `number` is only meaningful for numbered cells"""
    state: CellState
    number: int = 0

    @classmethod
    def seed(cls, number: int) -> 'Cell':
        """Create a numbered cell"""
        if not 1 <= number <= 9:
            raise MalformedPuzzleError(f"Numbered cell must be between 1 and 9, got {number}")
        return cls(CellState.NUMBERED, number)

    @classmethod
    def from_token(cls, token: str) -> 'Cell':
        """Parse a single puzzle token"""
        if token == EMPTY_TOKEN:
            return EMPTY_CELL
        if token == ISLAND_TOKEN:
            return ISLAND_CELL
        if token == SEA_TOKEN:
            return SEA_CELL
        if len(token) == 1 and token in "123456789":
            return cls.seed(int(token))
        raise MalformedPuzzleError(f"Unexpected token '{token}'")

    @classmethod
    def from_code(cls, code: int) -> 'Cell':
        """Decode the numeric array encoding (0 / 1-9 / 10 / 11)"""
        if code == EMPTY_CODE:
            return EMPTY_CELL
        if code == ISLAND_CODE:
            return ISLAND_CELL
        if code == SEA_CODE:
            return SEA_CELL
        return cls.seed(code)

    @property
    def is_seed(self) -> bool:
        return self.state is CellState.NUMBERED

    @property
    def symbol(self) -> str:
        if self.state is CellState.NUMBERED:
            return str(self.number)
        if self.state is CellState.ISLAND:
            return ISLAND_TOKEN
        if self.state is CellState.SEA:
            return SEA_TOKEN
        return EMPTY_TOKEN

    @property
    def code(self) -> int:
        if self.state is CellState.NUMBERED:
            return self.number
        if self.state is CellState.ISLAND:
            return ISLAND_CODE
        if self.state is CellState.SEA:
            return SEA_CODE
        return EMPTY_CODE

    def __repr__(self):
        return f"Cell({self.symbol})"


EMPTY_CELL = Cell(CellState.EMPTY)
ISLAND_CELL = Cell(CellState.ISLAND)
SEA_CELL = Cell(CellState.SEA)


@dataclass(frozen=True)
class Coordinates:
    """Grid position, used as a lookup key for visited sets"""
    row: int
    col: int

    def neighbors(self) -> Iterator['Coordinates']:
        """Orthogonal neighbors (north, south, east, west), unbounded"""
        yield Coordinates(self.row - 1, self.col)
        yield Coordinates(self.row + 1, self.col)
        yield Coordinates(self.row, self.col + 1)
        yield Coordinates(self.row, self.col - 1)

    def __repr__(self):
        return f"({self.row}, {self.col})"


# Immutable row-major grid
Grid = Tuple[Tuple[Cell, ...], ...]


def render_grid(grid: Grid) -> str:
    """Render a grid as space separated symbols, one row per line"""
    return '\n'.join(' '.join(cell.symbol for cell in row) for row in grid)


class Puzzle:
    """A parsed Nurikabe puzzle: fixed dimensions plus the initial cell states"""

    def __init__(self, rows: int, cols: int, cells: Sequence[Sequence[Cell]]):
        """
        Initialize a Nurikabe puzzle.

        Args:
            rows: Number of grid rows
            cols: Number of grid columns
            cells: Row-major cell states, `rows` sequences of `cols` cells
        """
        if rows <= 0 or cols <= 0:
            raise MalformedPuzzleError(f"Invalid puzzle dimensions: {rows}x{cols}")
        if len(cells) != rows or any(len(row) != cols for row in cells):
            raise MalformedPuzzleError(f"Grid shape does not match dimensions {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self.grid: Grid = tuple(tuple(row) for row in cells)

        self._seeds: Dict[Coordinates, int] = {}
        self._preset_islands = 0
        self._preset_sea = 0
        self._scan_cells()

    def _scan_cells(self):
        """Collect seeds and pre-marked cells"""
        for row_idx, row in enumerate(self.grid):
            for col_idx, cell in enumerate(row):
                if cell.state is CellState.NUMBERED:
                    self._seeds[Coordinates(row_idx, col_idx)] = cell.number
                elif cell.state is CellState.ISLAND:
                    self._preset_islands += 1
                elif cell.state is CellState.SEA:
                    self._preset_sea += 1

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def seeds(self) -> Dict[Coordinates, int]:
        """Numbered cells in row-major order"""
        return dict(self._seeds)

    @property
    def numbered_count(self) -> int:
        return len(self._seeds)

    @property
    def island_budget(self) -> int:
        """Number of non-numbered island cells a solution must contain"""
        return sum(number - 1 for number in self._seeds.values())

    @property
    def preset_islands(self) -> int:
        return self._preset_islands

    @property
    def preset_sea(self) -> int:
        return self._preset_sea

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @classmethod
    def parse(cls, text: str, source: str = "<string>") -> 'Puzzle':
        """
        Parse puzzle text.

        Expected format:
        First token pair: rows cols
        Then rows*cols whitespace separated tokens in row-major order,
        each '.', a digit 1-9, '#' (island) or '@' (sea)
        """
        tokens = text.split()
        if len(tokens) < 2:
            raise MalformedPuzzleError(f"Invalid format in {source}: expected 'rows cols' header")

        try:
            rows = int(tokens[0])
            cols = int(tokens[1])
        except ValueError:
            raise MalformedPuzzleError(f"Invalid dimensions in {source}: {tokens[0]} {tokens[1]}")

        if rows <= 0 or cols <= 0:
            raise MalformedPuzzleError(f"Invalid dimensions in {source}: {rows}x{cols}")

        cell_tokens = tokens[2:]
        if len(cell_tokens) != rows * cols:
            raise MalformedPuzzleError(
                f"Invalid grid in {source}: expected {rows * cols} cells, found {len(cell_tokens)}"
            )

        cells: List[List[Cell]] = []
        for row_idx in range(rows):
            row: List[Cell] = []
            for col_idx in range(cols):
                token = cell_tokens[row_idx * cols + col_idx]
                try:
                    row.append(Cell.from_token(token))
                except MalformedPuzzleError as e:
                    raise MalformedPuzzleError(f"{e} at ({row_idx}, {col_idx}) in {source}") from e
            cells.append(row)

        return cls(rows, cols, cells)

    @classmethod
    def load_from_text(cls, filepath: Union[str, Path]) -> 'Puzzle':
        """Load a puzzle from a text file in the puzzle format"""
        filepath = Path(filepath)

        if not filepath.is_file():
            raise PuzzleNotFoundError(f"File not found: {filepath}")

        try:
            with open(filepath, 'r') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise PuzzleNotFoundError(f"Cannot read {filepath}: {e}") from e

        return cls.parse(text, source=str(filepath))

    def to_text(self) -> str:
        """Puzzle text including the dimension header"""
        return f"{self.rows} {self.cols}\n{render_grid(self.grid)}\n"

    def save_to_text(self, filepath: Union[str, Path]):
        """Save puzzle in the text format"""
        with open(filepath, 'w') as f:
            f.write(self.to_text())

    def to_dict(self) -> dict:
        """Convert puzzle to dictionary for serialization"""
        return {
            'rows': self.rows,
            'cols': self.cols,
            'grid': [[cell.symbol for cell in row] for row in self.grid],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Puzzle':
        """Create puzzle from dictionary"""
        try:
            rows, cols, grid = data['rows'], data['cols'], data['grid']
            if not all(isinstance(n, int) and not isinstance(n, bool) for n in (rows, cols)):
                raise MalformedPuzzleError(f"Invalid dimensions: {rows!r} {cols!r}")
            cells = [[Cell.from_token(str(token)) for token in row] for row in grid]
        except MalformedPuzzleError:
            raise
        except KeyError as e:
            raise MalformedPuzzleError(f"Missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise MalformedPuzzleError(f"Invalid puzzle data: {e}") from e
        return cls(rows, cols, cells)

    def save(self, filepath: Path):
        """Save puzzle to JSON file"""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path) -> 'Puzzle':
        """Load puzzle from JSON file"""
        try:
            with open(filepath, 'r') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise PuzzleNotFoundError(f"File not found: {filepath}") from e
        except json.JSONDecodeError as e:
            raise MalformedPuzzleError(f"Invalid JSON in {filepath}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise PuzzleNotFoundError(f"Cannot read {filepath}: {e}") from e
        return cls.from_dict(data)

    def __eq__(self, other):
        if isinstance(other, Puzzle):
            return self.grid == other.grid
        return False

    def __hash__(self):
        return hash(self.grid)

    def __str__(self):
        return render_grid(self.grid)

    def __repr__(self):
        return f"Puzzle({self.rows}x{self.cols}, seeds={self.numbered_count}, island_budget={self.island_budget})"
