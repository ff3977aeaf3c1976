"""
Validator for Nurikabe puzzle constraints.

The flood-fill checkers at the top of this module are the incremental search's
terminal checks. `PuzzleValidator` re-checks whole grids independently with
networkx and is used to accept solutions and to inspect puzzles.
"""

from typing import List, Optional, Set, Iterator, Tuple
import networkx as nx

from .puzzle import Puzzle, Grid, Cell, CellState, Coordinates


def _neighbors(grid: Grid, coords: Coordinates) -> Iterator[Coordinates]:
    """In-bounds orthogonal neighbors"""
    rows = len(grid)
    cols = len(grid[0])
    for neighbor in coords.neighbors():
        if 0 <= neighbor.row < rows and 0 <= neighbor.col < cols:
            yield neighbor


def _cell(grid: Grid, coords: Coordinates) -> Cell:
    return grid[coords.row][coords.col]


def flood_fill(grid: Grid, start: Coordinates, state: CellState,
               visited: Set[Coordinates]) -> List[Coordinates]:
    """
    Collect cells of `state` reachable from `start` through 4-connectivity.

    Args:
        grid: The grid to traverse
        start: Origin of the fill; not included in the result
        state: Cell state the fill may step onto
        visited: Shared visited set, updated in place

    Returns:
        Newly visited cells, in discovery order
    """
    region = []
    stack = [start]

    while stack:
        current = stack.pop()
        for neighbor in _neighbors(grid, current):
            if neighbor in visited or _cell(grid, neighbor).state is not state:
                continue
            visited.add(neighbor)
            region.append(neighbor)
            stack.append(neighbor)

    return region


def count_region(grid: Grid, start: Coordinates, state: CellState,
                 visited: Set[Coordinates]) -> int:
    """Number of newly visited `state` cells reachable from `start`"""
    return len(flood_fill(grid, start, state, visited))


def iter_seeds(grid: Grid) -> Iterator[Tuple[Coordinates, int]]:
    """Numbered cells in row-major order"""
    for row_idx, row in enumerate(grid):
        for col_idx, cell in enumerate(row):
            if cell.state is CellState.NUMBERED:
                yield Coordinates(row_idx, col_idx), cell.number


def find_first(grid: Grid, state: CellState) -> Optional[Coordinates]:
    """First cell of `state` in row-major order"""
    for row_idx, row in enumerate(grid):
        for col_idx, cell in enumerate(row):
            if cell.state is state:
                return Coordinates(row_idx, col_idx)
    return None


def islands_are_correct(grid: Grid) -> bool:
    """
    Check every island against its numbered cell.

    Each numbered cell floods its attached island cells; the region plus the
    numbered cell must match the number, and no cell of the region may touch a
    different numbered cell. The visited set is shared across numbered cells
    so a region is never counted twice.
    """
    visited: Set[Coordinates] = set()

    for seed, number in iter_seeds(grid):
        visited.add(seed)
        region = flood_fill(grid, seed, CellState.ISLAND, visited)
        if len(region) + 1 != number:
            return False

        for coords in [seed] + region:
            for neighbor in _neighbors(grid, coords):
                if neighbor != seed and _cell(grid, neighbor).state is CellState.NUMBERED:
                    return False

    return True


def sea_is_connected(grid: Grid, sea_count: int) -> bool:
    """True when the sea forms exactly one region of `sea_count` cells"""
    start = find_first(grid, CellState.SEA)
    if start is None:
        return sea_count == 0

    visited = {start}
    return 1 + count_region(grid, start, CellState.SEA, visited) == sea_count


def forms_pool(grid: Grid, corner: Coordinates) -> bool:
    """True when the 2x2 block whose bottom-right cell is `corner` is all sea"""
    if corner.row < 1 or corner.col < 1:
        return False
    block = [
        corner,
        Coordinates(corner.row - 1, corner.col),
        Coordinates(corner.row, corner.col - 1),
        Coordinates(corner.row - 1, corner.col - 1),
    ]
    return all(_cell(grid, coords).state is CellState.SEA for coords in block)


def find_pools(grid: Grid) -> List[Coordinates]:
    """Bottom-right corners of every 2x2 sea block"""
    return [
        Coordinates(row, col)
        for row in range(1, len(grid))
        for col in range(1, len(grid[0]))
        if forms_pool(grid, Coordinates(row, col))
    ]


class ValidationResult:
    """Result of puzzle validation"""

    def __init__(self):
        self.is_valid = True
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def add_error(self, error: str):
        """Add an error message"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)

    def __bool__(self):
        return self.is_valid

    def __repr__(self):
        status = "Valid" if self.is_valid else "Invalid"
        return f"ValidationResult({status}, {len(self.errors)} errors, {len(self.warnings)} warnings)"


class PuzzleValidator:
    """Validates Nurikabe puzzle constraints"""

    @staticmethod
    def validate_puzzle_structure(puzzle: Puzzle) -> ValidationResult:
        """Validate basic puzzle structure"""
        result = ValidationResult()

        # Check dimensions
        if puzzle.rows <= 0 or puzzle.cols <= 0:
            result.add_error("Invalid puzzle dimensions")
            return result

        # Check if puzzle has numbered cells
        if not puzzle.numbered_count:
            result.add_error("Puzzle has no numbered cells")

        for coords, number in puzzle.seeds.items():
            if not 1 <= number <= 9:
                result.add_error(f"Numbered cell at {coords} has invalid value: {number}")

        # Every numbered cell plus its island must fit in the grid
        required = puzzle.numbered_count + puzzle.island_budget
        if required > puzzle.total_cells:
            result.add_error(f"Islands need {required} cells but the grid only has {puzzle.total_cells}")

        if puzzle.preset_islands > puzzle.island_budget:
            result.add_error(
                f"Puzzle marks {puzzle.preset_islands} island cells, more than the {puzzle.island_budget} allowed"
            )

        # Touching numbered cells make the puzzle unsolvable, but it is still well formed
        for coords in puzzle.seeds:
            for neighbor in _neighbors(puzzle.grid, coords):
                if (neighbor.row, neighbor.col) > (coords.row, coords.col) and puzzle.cell(neighbor.row, neighbor.col).is_seed:
                    result.add_warning(f"Numbered cells at {coords} and {neighbor} are adjacent")

        return result

    @staticmethod
    def validate_solution(solution) -> ValidationResult:
        """
        Validate a fully decided grid.

        Args:
            solution: Any object exposing `rows`, `cols` and `grid`
                (a Puzzle or a NurikabeConfig)

        Returns:
            Validation result listing every broken rule
        """
        result = ValidationResult()
        grid = solution.grid
        graph = nx.grid_2d_graph(solution.rows, solution.cols)

        undecided = sum(1 for row in grid for cell in row if cell.state is CellState.EMPTY)
        if undecided:
            result.add_error(f"{undecided} cells are undecided")

        for corner in find_pools(grid):
            result.add_error(f"2x2 pool with bottom-right corner at {corner}")

        # Sea connectivity
        sea_nodes = [node for node in graph.nodes if grid[node[0]][node[1]].state is CellState.SEA]
        if sea_nodes:
            components = nx.number_connected_components(graph.subgraph(sea_nodes))
            if components > 1:
                result.add_error(f"Sea is split into {components} regions")

        # Each land region holds exactly one numbered cell of matching size
        land_states = (CellState.NUMBERED, CellState.ISLAND)
        land_nodes = [node for node in graph.nodes if grid[node[0]][node[1]].state in land_states]
        for component in nx.connected_components(graph.subgraph(land_nodes)):
            seeds = sorted(node for node in component if grid[node[0]][node[1]].is_seed)
            if not seeds:
                result.add_error(f"Island of {len(component)} cells has no numbered cell")
            elif len(seeds) > 1:
                result.add_error(f"Island joins {len(seeds)} numbered cells: {seeds}")
            else:
                row, col = seeds[0]
                number = grid[row][col].number
                if len(component) != number:
                    result.add_error(f"Island at ({row}, {col}) has {len(component)} cells, requires {number}")

        return result

    @staticmethod
    def get_puzzle_statistics(puzzle: Puzzle) -> dict:
        """Get various statistics about the puzzle"""
        stats = {
            'rows': puzzle.rows,
            'cols': puzzle.cols,
            'total_cells': puzzle.total_cells,
            'numbered_cells': puzzle.numbered_count,
            'island_budget': puzzle.island_budget,
            'sea_cells': puzzle.total_cells - puzzle.numbered_count - puzzle.island_budget,
            'preset_islands': puzzle.preset_islands,
            'preset_sea': puzzle.preset_sea,
            'density': puzzle.numbered_count / puzzle.total_cells,
        }

        # Island size distribution
        size_dist = {}
        for number in puzzle.seeds.values():
            size_dist[number] = size_dist.get(number, 0) + 1
        stats['size_distribution'] = size_dist

        return stats
