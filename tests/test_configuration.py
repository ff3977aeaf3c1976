import pytest

from conftest import SCENARIO_TEXT, SCENARIO_SOLUTION
from nurikabe.core.configuration import (
    NurikabeConfig,
    ISLAND_BUDGET_EXCEEDED, SEA_BUDGET_EXCEEDED, POOL,
    ISLAND_BUDGET_UNMET, ISLAND_SIZE, SEA_DISCONNECTED,
)
from nurikabe.core.puzzle import CellState, Coordinates, PuzzleNotFoundError
from nurikabe.core.utils import PuzzleConverter


def follow(config, choices):
    """Apply a sequence of choices; True picks the island branch"""
    for as_island in choices:
        island, sea = config.get_successors()
        config = island if as_island else sea
    return config


def test_root_configuration(scenario_puzzle):
    root = NurikabeConfig(scenario_puzzle)
    assert root.cursor == -1
    assert root.cursor_position is None
    assert root.rows == 3 and root.cols == 3
    assert root.numbered_count == 3
    assert root.island_budget == 2
    assert root.islands_placed == 1
    assert root.sea_placed == 1
    assert root.sea_limit == 4
    assert root.total_decided == 5
    assert root.is_valid()
    assert not root.is_goal()
    assert str(root) == "1 . #\n@ . 3\n1 . ."


def test_from_text_and_file(write_puzzle):
    assert str(NurikabeConfig.from_text(SCENARIO_TEXT)) == "1 . #\n@ . 3\n1 . ."
    assert str(NurikabeConfig.from_file(write_puzzle(SCENARIO_TEXT))) == "1 . #\n@ . 3\n1 . ."


def test_from_missing_file(tmp_path):
    with pytest.raises(PuzzleNotFoundError):
        NurikabeConfig.from_file(tmp_path / "missing.txt")


def test_successors_on_numbered_cell(scenario_puzzle):
    root = NurikabeConfig(scenario_puzzle)
    island, sea = root.get_successors()

    for child in (island, sea):
        assert child.cursor == 0
        assert child.cursor_position == Coordinates(0, 0)
        assert child.grid == root.grid
        assert child.islands_placed == root.islands_placed
        assert child.sea_placed == root.sea_placed


def test_successors_on_empty_cell(scenario_puzzle):
    parent = follow(NurikabeConfig(scenario_puzzle), [True])
    island, sea = parent.get_successors()

    assert island.cell(0, 1).state is CellState.ISLAND
    assert island.islands_placed == parent.islands_placed + 1
    assert island.sea_placed == parent.sea_placed

    assert sea.cell(0, 1).state is CellState.SEA
    assert sea.sea_placed == parent.sea_placed + 1
    assert sea.islands_placed == parent.islands_placed

    # The parent is untouched and unchanged rows are shared
    assert parent.cell(0, 1).state is CellState.EMPTY
    assert island.grid[1] is parent.grid[1]
    assert island.grid[2] is parent.grid[2]


def test_successors_on_premarked_cell(scenario_puzzle):
    parent = follow(NurikabeConfig(scenario_puzzle), [True, False])
    island, sea = parent.get_successors()
    assert island.grid == sea.grid == parent.grid
    assert island.cell(0, 2).state is CellState.ISLAND
    assert island.islands_placed == sea.islands_placed == parent.islands_placed


def test_goal_has_no_successors(scenario_puzzle):
    goal = follow(NurikabeConfig(scenario_puzzle), [True] * 9)
    assert goal.is_goal()
    assert goal.cursor == 8
    assert goal.get_successors() == []


def test_solution_path(scenario_puzzle):
    # Only the four empty cells matter: (0,1) sea, (1,1) sea, (2,1) sea, (2,2) island
    choices = [True, False, True, True, False, True, True, False, True]
    goal = follow(NurikabeConfig(scenario_puzzle), choices)
    assert goal.is_goal()
    assert goal.violation() is None
    assert goal.is_valid()
    assert str(goal) == SCENARIO_SOLUTION
    assert goal.islands_placed == 2
    assert goal.sea_placed == 4


def test_island_budget_exceeded(scenario_puzzle):
    config = follow(NurikabeConfig(scenario_puzzle), [True, True, True, True, True])
    assert config.islands_placed == 3
    assert config.violation() == ISLAND_BUDGET_EXCEEDED
    assert not config.is_valid()


def test_sea_budget_exceeded():
    config = follow(NurikabeConfig.from_text("1 3\n2 . ."), [True, False])
    assert config.sea_limit == 1
    assert config.is_valid()
    config = follow(config, [False])
    assert config.violation() == SEA_BUDGET_EXCEEDED


def test_pool_detected_at_cursor():
    config = follow(NurikabeConfig.from_text("3 3\n. . .\n. . .\n. . 1"), [False] * 4)
    assert config.is_valid()
    config = follow(config, [False])
    assert config.cursor_position == Coordinates(1, 1)
    assert config.violation() == POOL


def test_counters_cover_grid_at_goal(scenario_puzzle):
    goal = follow(NurikabeConfig(scenario_puzzle), [True, False, True, True, True, True, True, False, False])
    assert goal.is_goal()
    assert goal.total_decided == goal.total_cells
    # A sea count within its limit leaves exactly the island budget for islands
    assert goal.violation() != ISLAND_BUDGET_UNMET


def test_island_size_wrong():
    # The island touches no numbered cell, so the 2 keeps size one
    config = follow(NurikabeConfig.from_text("2 3\n2 . .\n. . ."), [True, False, True, False, False, False])
    assert config.is_goal()
    assert config.islands_placed == config.island_budget
    assert config.violation() == ISLAND_SIZE


def test_island_touching_other_numbered_cell():
    config = follow(NurikabeConfig.from_text("2 2\n2 .\n. 2"), [True, True, True, True])
    assert config.is_goal()
    assert config.violation() == ISLAND_SIZE


def test_sea_disconnected():
    config = follow(NurikabeConfig.from_text("1 3\n. 1 ."), [False, True, False])
    assert config.is_goal()
    assert config.violation() == SEA_DISCONNECTED


def test_goal_without_sea():
    config = follow(NurikabeConfig.from_text("2 2\n4 .\n. ."), [True] * 4)
    assert config.is_goal()
    assert config.sea_placed == 0
    assert config.is_valid()
    assert str(config) == "4 #\n# #"


def test_to_puzzle_keeps_cells(scenario_puzzle):
    choices = [True, False, True, True, False, True, True, False, True]
    goal = follow(NurikabeConfig(scenario_puzzle), choices)
    solved = goal.to_puzzle()
    assert str(solved) == SCENARIO_SOLUTION
    assert solved.preset_islands == 2
    assert solved.preset_sea == 4


def test_rendering_round_trip(scenario_puzzle):
    choices = [True, False, True, True, False, True, True, False, True]
    goal = follow(NurikabeConfig(scenario_puzzle), choices)
    reparsed = NurikabeConfig(PuzzleConverter.from_string(str(goal)))
    assert str(reparsed) == str(goal)
    assert reparsed.islands_placed == goal.islands_placed
    assert reparsed.sea_placed == goal.sea_placed
