"""Frontier expansion: legal next cells from a current position."""
from __future__ import annotations

from typing import AbstractSet, List

from .cells import Coord, Position
from .grid import Grid
from .tiles import MOVES, NORTH, SOUTH


def neighbors(grid: Grid, current: Position, visited: AbstractSet[Coord]) -> List[Position]:
    """Return candidate moves from ``current`` in n, e, s, w order, then elevators.

    Planar moves stay on the current level and are kept when the target is
    traversable and unvisited. When standing on an elevator, every linked
    elevator on another level follows in ascending level order, labeled north
    for a lower level index and south otherwise.
    """
    out: List[Position] = []
    level, row, col = current.level, current.row, current.col
    for dr, dc, label in MOVES:
        nr, nc = row + dr, col + dc
        if grid.is_traversable(level, nr, nc) and Coord(level, nr, nc) not in visited:
            out.append(Position(level, nr, nc, label))
    for link in grid.elevator_links(current.coord):
        if link in visited:
            continue
        out.append(Position.at(link, NORTH if link.level < level else SOUTH))
    return out


__all__ = ["neighbors"]
