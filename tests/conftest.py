import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from maze import Grid  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_maze_env(monkeypatch):
    # Keep developer shells from leaking settings into tests
    for key in ("MAZE_OUTPUT", "MAZE_ENABLE_SEARCH_METRICS", "MAZE_LOG_JSON"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def open_3x3():
    """1 level, start top-left, hazard top-right, everything else open."""
    return Grid([["S.H", "...", "..."]])


@pytest.fixture
def elevator_pair():
    """2 levels joined only by an elevator at (row 0, col 0); start (0,0,0) is the elevator itself."""
    return Grid([["E#", "##"], ["EH", "##"]])


@pytest.fixture
def walled_off():
    return Grid([["S.#", "..#", "##H"]])


@pytest.fixture
def tower():
    """3 levels; the hazard sits on level 2 behind two elevator rides."""
    return Grid(
        [
            ["S..E", ".##.", "....", "...."],
            ["E..E", "####", "####", "...."],
            ["E...", "###.", "H...", "...."],
        ]
    )
