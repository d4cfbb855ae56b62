"""Search engine driving a double-ended frontier in stack or queue discipline.

One engine owns one run: its frontier, visited set and parent map are created
when ``run`` starts and are never shared with another search. The state
machine is Idle -> Running -> Found | Exhausted; both outcomes are terminal.
"""
from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Deque, Dict, FrozenSet, Mapping, Optional, Set

from .cells import CellKind, Coord, Path, Position
from .config import RoutingMode
from .frontier import neighbors
from .grid import Grid
from .logging_utils import get_logger
from .metrics import init_metrics
from .path import label, reconstruct

logger = get_logger("maze.search")


class SearchState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class SearchResult:
    state: SearchState
    start: Position
    path: Path = field(default_factory=list)
    visited: FrozenSet[Coord] = frozenset()
    parents: Mapping[Coord, Position] = field(default_factory=dict)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.state is SearchState.FOUND

    @property
    def goal(self) -> Optional[Position]:
        return self.path[-1] if self.path else None


class SearchEngine:
    def __init__(self, grid: Grid, start: Coord, mode: RoutingMode, enable_metrics: bool = True):
        if not isinstance(mode, RoutingMode):
            raise TypeError("mode must be a RoutingMode")
        grid.classify(*start)  # fail fast on a start outside the grid
        self.grid = grid
        self.start = Position.at(Coord(*start))
        self.mode = mode
        self.enable_metrics = enable_metrics
        self.state = SearchState.IDLE
        self.metrics: Dict[str, Any] = init_metrics() if enable_metrics else {}

    def run(self) -> SearchResult:
        if self.state is not SearchState.IDLE:
            raise RuntimeError(f"Search already ran (state={self.state.value})")
        self.state = SearchState.RUNNING
        t0 = time.perf_counter()
        start = self.start
        frontier: Deque[Position] = deque([start])
        visited: Set[Coord] = {start.coord}
        parents: Dict[Coord, Position] = {start.coord: start}
        logger.debug(event="search_start", mode=self.mode.value, start=tuple(start.coord))

        path: Path = []
        while frontier:
            current = self.mode.pop(frontier)
            if self.grid.classify(*current.coord) is CellKind.HAZARD:
                self.state = SearchState.FOUND
                path = label(reconstruct(parents, current, start))
                break
            if self.enable_metrics:
                self.metrics['cells_expanded'] += 1
            for nxt in neighbors(self.grid, current, visited):
                if nxt.coord in visited:
                    continue
                visited.add(nxt.coord)
                parents[nxt.coord] = current
                frontier.append(nxt)
                if self.enable_metrics:
                    self.metrics['cells_enqueued'] += 1
            if self.enable_metrics and len(frontier) > self.metrics['frontier_peak']:
                self.metrics['frontier_peak'] = len(frontier)
        else:
            self.state = SearchState.EXHAUSTED

        if self.enable_metrics:
            self.metrics['path_length'] = max(len(path) - 1, 0)
            self.metrics['runtime_ms'] = round((time.perf_counter() - t0) * 1000, 3)
        logger.debug(event="search_" + self.state.value, mode=self.mode.value, visited=len(visited), path_length=len(path))
        return SearchResult(
            state=self.state,
            start=start,
            path=path,
            visited=frozenset(visited),
            parents=parents,
            metrics=dict(self.metrics),
        )


def find_path(grid: Grid, start: Coord, mode: RoutingMode, enable_metrics: bool = True) -> SearchResult:
    return SearchEngine(grid, start, mode, enable_metrics=enable_metrics).run()


__all__ = ["SearchState", "SearchResult", "SearchEngine", "find_path"]
