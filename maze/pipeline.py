"""Routing orchestration: search the grid, then render the outcome.

Provides ``route`` used by the CLI. No-path and trivial-path outcomes are
handled here explicitly rather than inside the renderers.
"""
from __future__ import annotations

from typing import Optional

from .cells import Coord
from .config import OutputMode, SearchConfig
from .grid import Grid
from .logging_utils import get_logger
from .render import render_list, render_map
from .search import SearchResult, find_path

logger = get_logger("maze.pipeline")


def search(grid: Grid, config: SearchConfig, start: Optional[Coord] = None) -> SearchResult:
    if start is None:
        start = grid.find_start()
    result = find_path(grid, Coord(*start), config.routing_mode, enable_metrics=config.enable_metrics)
    if result.metrics:
        logger.info(event="search_metrics", mode=config.routing_mode.value, state=result.state.value, **result.metrics)
    return result


def render(grid: Grid, result: SearchResult, output_mode: OutputMode) -> str:
    if not result.found:
        # No path: unmodified map, or the bare list header
        if output_mode is OutputMode.MAP:
            return render_map(grid, result.start, [])
        return render_list([])
    if len(result.path) == 1:
        logger.debug(event="trivial_path", start=tuple(result.start.coord))
    if output_mode is OutputMode.MAP:
        return render_map(grid, result.start, result.path)
    return render_list(result.path)


def route(grid: Grid, config: SearchConfig, start: Optional[Coord] = None) -> str:
    result = search(grid, config, start)
    return render(grid, result, config.output_mode)


__all__ = ["search", "render", "route"]
