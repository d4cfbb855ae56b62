"""Presentation of search results as an annotated map or a move list."""
from __future__ import annotations

from typing import Dict, List, Optional

from .cells import CellKind, Coord, Label, LevelJump, Path, Position
from .grid import Grid
from .tiles import BLANK

LIST_HEADER = "//path taken"


def glyph(lbl: Label, from_level: Optional[int] = None) -> str:
    """Single character for a label in the map form.

    Level jumps to levels 0-9 show the digit. Beyond that one character can't
    hold the level, so ``^`` marks a jump to a lower index and ``v`` a higher one.
    """
    if isinstance(lbl, LevelJump):
        if lbl.level < 10:
            return str(lbl.level)
        if from_level is not None and lbl.level < from_level:
            return "^"
        return "v"
    return lbl


def start_line(start: Position | Coord) -> str:
    return f"Start in level {start.level}, row {start.row}, column {start.col}"


def render_map(grid: Grid, start: Position | Coord, path: Path) -> str:
    """Original grid with each non-hazard path cell overwritten by its label."""
    glyphs: Dict[Coord, str] = {}
    for pos in path:
        if grid.classify(*pos.coord) is CellKind.HAZARD:
            continue
        glyphs[pos.coord] = glyph(pos.direction, pos.level)
    lines: List[str] = [start_line(start)]
    for i, rows in enumerate(grid.overlay(glyphs)):
        lines.append(f"//level {i}")
        lines.extend(rows)
    return "\n".join(lines) + "\n"


def render_list(path: Path) -> str:
    """One ``(level,row,col,label)`` line per step, goal step and blank labels omitted."""
    lines = [LIST_HEADER]
    for pos in path[:-1]:
        if pos.direction == BLANK:
            continue
        lines.append(f"({pos.level},{pos.row},{pos.col},{pos.direction})")
    return "\n".join(lines) + "\n"


__all__ = ["LIST_HEADER", "glyph", "start_line", "render_map", "render_list"]
