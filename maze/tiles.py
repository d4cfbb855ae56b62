# Tile and label constants centralized for modular imports
OPEN = "."
WALL = "#"
ELEVATOR = "E"
HAZARD = "H"
START = "S"

MAP_CHARS = frozenset({OPEN, WALL, ELEVATOR, HAZARD, START})

# Direction labels attached to path steps
NORTH = "n"
EAST = "e"
SOUTH = "s"
WEST = "w"
BLANK = " "

# Fixed expansion order: (row delta, col delta, label)
MOVES = (
    (-1, 0, NORTH),
    (0, 1, EAST),
    (1, 0, SOUTH),
    (0, -1, WEST),
)

__all__ = [
    "OPEN",
    "WALL",
    "ELEVATOR",
    "HAZARD",
    "START",
    "MAP_CHARS",
    "NORTH",
    "EAST",
    "SOUTH",
    "WEST",
    "BLANK",
    "MOVES",
]
