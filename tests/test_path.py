import pytest

from maze import Coord, Grid, LevelJump, Position, RoutingMode, find_path
from maze.path import label, reconstruct, replay, step_label
from tests.maze_test_utils import random_levels

SEEDS = range(40)


def random_grid(seed):
    levels, start = random_levels(seed)
    return Grid(levels), Coord(*start)


def test_step_labels():
    a = Position(0, 1, 1)
    assert step_label(a, Position(0, 1, 2)) == "e"
    assert step_label(a, Position(0, 1, 0)) == "w"
    assert step_label(a, Position(0, 2, 1)) == "s"
    assert step_label(a, Position(0, 0, 1)) == "n"
    assert step_label(a, Position(3, 1, 1)) == LevelJump(3)


def test_label_borrows_second_label_for_start():
    path = [Position(0, 0, 0), Position(0, 0, 1, "e"), Position(0, 1, 1, "s"), Position(1, 1, 1, "s")]
    out = label(path)
    assert [p.direction for p in out] == ["s", "s", LevelJump(1), "s"]
    # input untouched
    assert path[0].direction == " "


def test_label_elevator_start():
    # Start rides the elevator straight onto the goal: the jump label is
    # replaced by the goal's own label.
    out = label([Position(0, 0, 0), Position(1, 0, 0, "s")])
    assert [p.direction for p in out] == ["s", "s"]


def test_label_single_and_empty():
    assert label([Position(0, 0, 0)]) == [Position(0, 0, 0)]
    assert label([Position(0, 0, 0)])[0].direction == " "
    assert label([]) == []


def test_position_identity_ignores_label():
    assert Position(0, 1, 2, "n") == Position(0, 1, 2, "s")
    assert hash(Position(0, 1, 2, "n")) == hash(Position(0, 1, 2, LevelJump(4)))
    assert Position(0, 1, 2).coord == Coord(0, 1, 2)


def test_level_jump_is_not_a_digit_string():
    assert LevelJump(12) != "12"
    assert str(LevelJump(12)) == "12"


def test_reconstruct_walks_to_start():
    s = Position(0, 0, 0)
    a = Position(0, 0, 1, "e")
    b = Position(0, 1, 1, "s")
    parents = {s.coord: s, a.coord: s, b.coord: a}
    assert reconstruct(parents, b, s) == [s, a, b]


def test_reconstruct_detects_cycle():
    s = Position(0, 0, 0)
    a = Position(0, 0, 1)
    b = Position(0, 1, 1)
    parents = {a.coord: b, b.coord: a}
    with pytest.raises(RuntimeError):
        reconstruct(parents, a, s)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("mode", [RoutingMode.STACK, RoutingMode.QUEUE])
def test_replaying_labels_rebuilds_path(seed, mode):
    grid, start = random_grid(seed)
    result = find_path(grid, start, mode)
    if not result.found:
        return
    coords = [p.coord for p in result.path]
    labels = [step_label(a, b) for a, b in zip(result.path, result.path[1:])]
    assert replay(start, labels, grid.depth) == coords
    # Labels stored on the path agree with re-derived ones (start borrows, goal keeps its own)
    stored = [p.direction for p in result.path[1:-1]]
    assert stored == labels[1:]


def test_replay_rejects_jump_outside_grid():
    with pytest.raises(ValueError):
        replay(Coord(0, 0, 0), [LevelJump(5)], grid_depth=2)


def test_ten_plus_levels_keep_full_level_number():
    # Elevator shaft at (0,1) through twelve levels; the hazard is on the last one
    levels = [[".E", ".."] for _ in range(12)]
    levels[0] = ["SE", ".."]
    levels[11] = [".E", ".H"]
    result = find_path(Grid(levels), Coord(0, 0, 0), RoutingMode.QUEUE)
    assert [tuple(p.coord) for p in result.path] == [(0, 0, 0), (0, 0, 1), (11, 0, 1), (11, 1, 1)]
    assert [p.direction for p in result.path] == [LevelJump(11), LevelJump(11), "s", "s"]
