"""Input parsing for the two maze text formats.

Header (whitespace separated, may span lines):
    <type> <levels> <size>

``M`` (map) body: ``levels * size`` row lines, level by level. Blank lines
and lines starting with ``/`` are skipped.

``L`` (list) body: the grid starts all open floor; each line
``(level,row,col,char)`` sets one cell. ``/`` lines are comments and the first
blank line ends the input.

Errors raise ``MazeFormatError`` with the message the CLI prints.
"""
from __future__ import annotations

import io
import re
from typing import Iterator, List, TextIO, Tuple

from .errors import MazeFormatError
from .grid import Grid
from .tiles import MAP_CHARS, OPEN

LIST_RE = re.compile(r'^\((\d+),(\d+),(\d+),(.)')


def _read_header(stream: TextIO) -> Tuple[str, int, int]:
    tokens: List[str] = []
    while len(tokens) < 3:
        line = stream.readline()
        if not line:
            raise MazeFormatError("Unexpected end of input while reading header")
        tokens.extend(line.split())
    if len(tokens) > 3:
        raise MazeFormatError(f"Unexpected header content: {' '.join(tokens[3:])}")
    kind, levels_s, size_s = tokens
    if kind not in ('M', 'L'):
        raise MazeFormatError(f"Unknown map character: {kind}")
    try:
        levels, size = int(levels_s), int(size_s)
    except ValueError:
        raise MazeFormatError(f"Invalid header: {levels_s} {size_s}") from None
    if levels <= 0 or size <= 0:
        raise MazeFormatError(f"Invalid header: {levels} {size}")
    return kind, levels, size


def _content_lines(stream: TextIO) -> Iterator[str]:
    for raw in stream:
        line = raw.rstrip('\r\n')
        if not line or line.startswith('/'):
            continue
        yield line


def _parse_map(stream: TextIO, levels: int, size: int) -> Grid:
    lines = _content_lines(stream)
    out: List[List[str]] = []
    for i in range(levels):
        rows = []
        for j in range(size):
            line = next(lines, None)
            if line is None:
                raise MazeFormatError(f"Unexpected end of map input at level {i}, row {j}")
            for ch in line:
                if ch not in MAP_CHARS:
                    raise MazeFormatError(f"Unknown map character: {ch}")
            if len(line) != size:
                raise MazeFormatError(f"Invalid row length: level {i}, row {j} has {len(line)} columns, expected {size}")
            rows.append(line)
        out.append(rows)
    return Grid(out, size)


def _parse_list(stream: TextIO, levels: int, size: int) -> Grid:
    cells = [[[OPEN] * size for _ in range(size)] for _ in range(levels)]
    for raw in stream:
        line = raw.rstrip('\r\n')
        if not line:
            break
        if line.startswith('/'):
            continue
        m = LIST_RE.match(line)
        if not m:
            raise MazeFormatError("Unknown map character")
        level, row, col = int(m.group(1)), int(m.group(2)), int(m.group(3))
        ch = m.group(4)
        # Range errors win over a malformed tail such as "(5,0,0,.)x"
        if level >= levels:
            raise MazeFormatError(f"Invalid level number: {level}")
        bad = []
        if row >= size:
            bad.append(f"Invalid row number: {row}")
        if col >= size:
            bad.append(f"Invalid column number: {col}")
        if bad:
            raise MazeFormatError("\n".join(bad))
        if m.end() != len(line) - 1 or not line.endswith(')'):
            raise MazeFormatError("Unknown map character")
        if ch not in MAP_CHARS:
            raise MazeFormatError(f"Unknown map character: {ch}")
        cells[level][row][col] = ch
    return Grid([["".join(r) for r in rows] for rows in cells], size)


def parse_maze(stream: TextIO) -> Grid:
    kind, levels, size = _read_header(stream)
    if kind == 'M':
        return _parse_map(stream, levels, size)
    return _parse_list(stream, levels, size)


def parse_text(text: str) -> Grid:
    return parse_maze(io.StringIO(text))


__all__ = ["parse_maze", "parse_text"]
