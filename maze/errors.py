"""Exception types raised by the maze package.

Only genuine failures live here. A search that exhausts its frontier is a
normal outcome and is reported through ``SearchResult.state`` instead.
"""
from __future__ import annotations

from typing import Optional, Tuple


class MazeError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OutOfBounds(MazeError, IndexError):
    def __init__(self, coord: Tuple[int, int, int], extent: Optional[Tuple[int, int]] = None):
        level, row, col = coord
        super().__init__(f"Coordinate out of bounds: ({level},{row},{col})")
        self.coord = coord
        self.extent = extent


class MazeFormatError(MazeError, ValueError):
    """Raised by the input parser; ``message`` is what the CLI prints."""


class MissingStart(MazeFormatError):
    def __init__(self, message: str = "No start location found"):
        super().__init__(message)


__all__ = ["MazeError", "OutOfBounds", "MazeFormatError", "MissingStart"]
