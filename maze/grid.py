"""Multi-level grid model.

A grid is an ordered list of square levels, each a list of row strings of the
same extent. The model is read-only: classification and traversability
queries never modify the level data, and ``overlay`` hands back a copy for
presentation.
"""
from __future__ import annotations

from typing import Dict, List, Sequence

from .cells import TRAVERSABLE, CellKind, Coord, Level
from .errors import MazeFormatError, MissingStart, OutOfBounds
from .tiles import ELEVATOR, START


class Grid:
    __slots__ = ("levels", "size")

    def __init__(self, levels: Sequence[Sequence[str]], size: int | None = None):
        self.levels: List[Level] = [list(rows) for rows in levels]
        if size is None:
            size = len(self.levels[0]) if self.levels else 0
        self.size = size
        for i, rows in enumerate(self.levels):
            if len(rows) != size:
                raise MazeFormatError(f"Level {i} has {len(rows)} rows, expected {size}")
            for j, row in enumerate(rows):
                if len(row) != size:
                    raise MazeFormatError(f"Invalid row length: level {i}, row {j} has {len(row)} columns, expected {size}")

    @property
    def depth(self) -> int:
        return len(self.levels)

    def in_bounds(self, level: int, row: int, col: int) -> bool:
        return 0 <= level < len(self.levels) and 0 <= row < self.size and 0 <= col < self.size

    def char_at(self, level: int, row: int, col: int) -> str:
        if not self.in_bounds(level, row, col):
            raise OutOfBounds((level, row, col), (len(self.levels), self.size))
        return self.levels[level][row][col]

    def classify(self, level: int, row: int, col: int) -> CellKind:
        return CellKind.from_char(self.char_at(level, row, col))

    def is_traversable(self, level: int, row: int, col: int) -> bool:
        if not self.in_bounds(level, row, col):
            return False
        return self.classify(level, row, col) in TRAVERSABLE

    def elevator_links(self, coord: Coord) -> List[Coord]:
        """Same-(row, col) elevators on every other level, ascending by level."""
        level, row, col = coord
        if self.classify(level, row, col) is not CellKind.ELEVATOR:
            return []
        return [
            Coord(other, row, col)
            for other in range(len(self.levels))
            if other != level and self.levels[other][row][col] == ELEVATOR
        ]

    def find_start(self) -> Coord:
        for i, rows in enumerate(self.levels):
            for j, row in enumerate(rows):
                k = row.find(START)
                if k >= 0:
                    return Coord(i, j, k)
        raise MissingStart()

    def overlay(self, glyphs: Dict[Coord, str]) -> List[List[str]]:
        """Return a copy of the levels with ``glyphs`` written over the given cells."""
        out = [[list(row) for row in rows] for rows in self.levels]
        for (level, row, col), ch in glyphs.items():
            if not self.in_bounds(level, row, col):
                raise OutOfBounds((level, row, col), (len(self.levels), self.size))
            out[level][row][col] = ch
        return [["".join(row) for row in rows] for rows in out]

    def __repr__(self) -> str:
        return f"Grid(depth={len(self.levels)}, size={self.size})"


__all__ = ["Grid"]
