from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Union

from . import tiles
from .tiles import BLANK


class CellKind(Enum):
    OPEN = tiles.OPEN
    WALL = tiles.WALL
    ELEVATOR = tiles.ELEVATOR
    HAZARD = tiles.HAZARD
    START = tiles.START
    UNKNOWN = "?"

    @classmethod
    def from_char(cls, ch: str) -> "CellKind":
        try:
            return cls(ch)
        except ValueError:
            return cls.UNKNOWN


TRAVERSABLE = frozenset({CellKind.OPEN, CellKind.ELEVATOR, CellKind.HAZARD, CellKind.START})


class Coord(NamedTuple):
    """Spatial identity of a maze cell; the key for visited and parent bookkeeping."""
    level: int
    row: int
    col: int


class LevelJump(NamedTuple):
    """Label for a step that rides an elevator onto ``level``."""
    level: int

    def __str__(self) -> str:
        return str(self.level)


Label = Union[str, LevelJump]


@dataclass(frozen=True)
class Position:
    """A maze cell plus the direction label it carries along a path.

    The label is presentation only: equality and hashing use the coordinate.
    """
    level: int
    row: int
    col: int
    direction: Label = field(default=BLANK, compare=False)

    @property
    def coord(self) -> Coord:
        return Coord(self.level, self.row, self.col)

    @classmethod
    def at(cls, coord: Coord, direction: Label = BLANK) -> "Position":
        return cls(coord.level, coord.row, coord.col, direction)


Level = List[str]
Path = List[Position]
