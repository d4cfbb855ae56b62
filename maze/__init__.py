"""Public maze package interface."""

from .cells import CellKind, Coord, LevelJump, Position  # noqa: F401
from .config import OutputMode, RoutingMode, SearchConfig  # noqa: F401
from .errors import MazeError, MazeFormatError, MissingStart, OutOfBounds  # noqa: F401
from .grid import Grid  # noqa: F401
from .parser import parse_maze, parse_text  # noqa: F401
from .pipeline import route  # noqa: F401
from .search import SearchEngine, SearchResult, SearchState, find_path  # noqa: F401

__all__ = [
    "CellKind",
    "Coord",
    "LevelJump",
    "Position",
    "OutputMode",
    "RoutingMode",
    "SearchConfig",
    "MazeError",
    "MazeFormatError",
    "MissingStart",
    "OutOfBounds",
    "Grid",
    "parse_maze",
    "parse_text",
    "route",
    "SearchEngine",
    "SearchResult",
    "SearchState",
    "find_path",
]
