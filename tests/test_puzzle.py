import json

import pytest

from conftest import SCENARIO_TEXT
from nurikabe.core.puzzle import (
    Puzzle, Cell, CellState, Coordinates,
    PuzzleNotFoundError, MalformedPuzzleError,
    EMPTY_CELL, ISLAND_CELL, SEA_CELL,
)


def test_parse_scenario(scenario_puzzle):
    assert scenario_puzzle.rows == 3
    assert scenario_puzzle.cols == 3
    assert scenario_puzzle.numbered_count == 3
    assert scenario_puzzle.island_budget == 2
    assert scenario_puzzle.preset_islands == 1
    assert scenario_puzzle.preset_sea == 1
    assert scenario_puzzle.seeds == {
        Coordinates(0, 0): 1,
        Coordinates(1, 2): 3,
        Coordinates(2, 0): 1,
    }
    assert scenario_puzzle.cell(0, 2) is ISLAND_CELL
    assert scenario_puzzle.cell(1, 0) is SEA_CELL
    assert scenario_puzzle.cell(1, 1) is EMPTY_CELL


def test_parse_ignores_line_layout():
    flat = Puzzle.parse("2 2 1 . . .")
    wrapped = Puzzle.parse("2\n2\n1\n.\n.\n.\n")
    assert flat == wrapped
    assert str(flat) == "1 .\n. ."


def test_seeds_is_a_copy(scenario_puzzle):
    seeds = scenario_puzzle.seeds
    seeds.clear()
    assert scenario_puzzle.numbered_count == 3


@pytest.mark.parametrize("text", [
    "",
    "3",
    "a 3 . . .",
    "0 3",
    "-1 2 .",
    "2 2 1 . .",
    "2 2 1 . . . .",
    "2 2 1 . x .",
    "2 2 1 . 0 .",
    "2 2 1 . 10 .",
])
def test_parse_malformed(text):
    with pytest.raises(MalformedPuzzleError):
        Puzzle.parse(text)


def test_malformed_token_reports_position():
    with pytest.raises(MalformedPuzzleError, match=r"\(1, 0\)"):
        Puzzle.parse("2 2\n1 .\nx .")


def test_load_missing_file(tmp_path):
    with pytest.raises(PuzzleNotFoundError):
        Puzzle.load_from_text(tmp_path / "missing.txt")


def test_load_directory_is_not_found(tmp_path):
    with pytest.raises(PuzzleNotFoundError):
        Puzzle.load_from_text(tmp_path)


def test_load_from_text(write_puzzle):
    puzzle = Puzzle.load_from_text(write_puzzle(SCENARIO_TEXT))
    assert puzzle == Puzzle.parse(SCENARIO_TEXT)


def test_text_round_trip(scenario_puzzle, tmp_path):
    path = tmp_path / "copy.txt"
    scenario_puzzle.save_to_text(path)
    assert path.read_text() == SCENARIO_TEXT
    assert Puzzle.load_from_text(path) == scenario_puzzle


def test_json_round_trip(scenario_puzzle, tmp_path):
    path = tmp_path / "puzzle.json"
    scenario_puzzle.save(path)
    data = json.loads(path.read_text())
    assert data['rows'] == 3
    assert data['grid'][0] == ['1', '.', '#']
    assert Puzzle.load(path) == scenario_puzzle


def test_json_missing_file(tmp_path):
    with pytest.raises(PuzzleNotFoundError):
        Puzzle.load(tmp_path / "missing.json")


@pytest.mark.parametrize("content", [
    "not json",
    '{"rows": 2}',
    '{"rows": "1", "cols": 1, "grid": [["1"]]}',
    '{"rows": true, "cols": 1, "grid": [["1"]]}',
    '{"rows": 1, "cols": 1, "grid": 5}',
    '{"rows": 1, "cols": 1, "grid": [["x"]]}',
    '[1, 2]',
])
def test_json_malformed(content, tmp_path):
    path = tmp_path / "puzzle.json"
    path.write_text(content)
    with pytest.raises(MalformedPuzzleError):
        Puzzle.load(path)


def test_from_dict_missing_field():
    with pytest.raises(MalformedPuzzleError, match="grid"):
        Puzzle.from_dict({'rows': 1, 'cols': 1})


def test_shape_mismatch():
    with pytest.raises(MalformedPuzzleError):
        Puzzle(2, 2, [[EMPTY_CELL, EMPTY_CELL]])


def test_cell_codes():
    assert Cell.from_code(0) is EMPTY_CELL
    assert Cell.from_code(10) is ISLAND_CELL
    assert Cell.from_code(11) is SEA_CELL
    assert Cell.from_code(7) == Cell(CellState.NUMBERED, 7)
    assert [c.code for c in (EMPTY_CELL, ISLAND_CELL, SEA_CELL, Cell.seed(4))] == [0, 10, 11, 4]
    with pytest.raises(MalformedPuzzleError):
        Cell.from_code(12)


def test_coordinates_neighbors_and_hashing():
    coords = Coordinates(1, 1)
    assert list(coords.neighbors()) == [
        Coordinates(0, 1), Coordinates(2, 1), Coordinates(1, 2), Coordinates(1, 0)
    ]
    assert {Coordinates(1, 1), Coordinates(1, 1)} == {coords}
    assert repr(coords) == "(1, 1)"
