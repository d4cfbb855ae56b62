"""Parent-map path reconstruction and direction labeling."""
from __future__ import annotations

from dataclasses import replace
from typing import List, Mapping

from .cells import Coord, Label, LevelJump, Path, Position
from .tiles import EAST, NORTH, SOUTH, WEST


def reconstruct(parents: Mapping[Coord, Position], goal: Position, start: Position) -> Path:
    """Walk parent pointers from ``goal`` back to ``start`` and return start->goal order.

    Parent pointers form a tree rooted at start, so the walk ends within
    ``len(parents)`` steps; running past that means the map is corrupt.
    """
    path: Path = []
    current = goal
    budget = len(parents)
    while current.coord != start.coord:
        if budget <= 0:
            raise RuntimeError(f"Parent map does not lead back to start from {goal.coord}")
        path.append(current)
        current = parents[current.coord]
        budget -= 1
    path.append(start)
    path.reverse()
    return path


def step_label(current: Position, nxt: Position) -> Label:
    if current.level != nxt.level:
        return LevelJump(nxt.level)
    if current.row == nxt.row:
        return EAST if current.col < nxt.col else WEST
    return SOUTH if current.row < nxt.row else NORTH


def label(path: Path) -> Path:
    """Label each step with the move toward its successor.

    The final element keeps the label it was reached with. The start's own
    incoming direction is undefined, so it borrows the second element's label.
    """
    labeled: List[Position] = [
        replace(pos, direction=step_label(pos, path[i + 1])) for i, pos in enumerate(path[:-1])
    ]
    labeled.extend(path[-1:])
    if len(labeled) > 1:
        labeled[0] = replace(labeled[0], direction=labeled[1].direction)
    return labeled


def replay(start: Coord, labels: List[Label], grid_depth: int | None = None) -> List[Coord]:
    """Apply outgoing step labels from ``start`` and return the visited coordinates.

    Inverse of ``label`` for the un-borrowed labels: feed the per-step labels
    before the start override and the original coordinate sequence comes back.
    """
    deltas = {NORTH: (-1, 0), EAST: (0, 1), SOUTH: (1, 0), WEST: (0, -1)}
    coords = [start]
    level, row, col = start
    for lbl in labels:
        if isinstance(lbl, LevelJump):
            if grid_depth is not None and not 0 <= lbl.level < grid_depth:
                raise ValueError(f"Level jump outside grid: {lbl.level}")
            level = lbl.level
        else:
            dr, dc = deltas[lbl]
            row, col = row + dr, col + dc
        coords.append(Coord(level, row, col))
    return coords


__all__ = ["reconstruct", "label", "step_label", "replay"]
