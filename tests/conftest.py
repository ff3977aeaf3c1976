# tests/conftest.py
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import pytest

# Add project root to sys.path so "nurikabe" and "scripts" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nurikabe.core.puzzle import Puzzle

PUZZLES_DIR = ROOT / "data" / "puzzles"

SCENARIO_TEXT = "3 3\n1 . #\n@ . 3\n1 . .\n"
SCENARIO_SOLUTION = "1 @ #\n@ @ 3\n1 @ #"

TINY_TEXT = "2 3\n2 . .\n. . 1\n"
TINY_SOLUTION = "2 @ @\n# @ 1"


@pytest.fixture
def scenario_puzzle():
    return Puzzle.parse(SCENARIO_TEXT)


@pytest.fixture
def tiny_puzzle():
    return Puzzle.parse(TINY_TEXT)


@pytest.fixture
def puzzles_dir():
    return PUZZLES_DIR


@pytest.fixture
def write_puzzle(tmp_path):
    """Write puzzle text to a temporary file and return its path"""
    def _write(text, name="puzzle.txt"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
