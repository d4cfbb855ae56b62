"""Maze router CLI entry point.

Reads a multi-level maze (map or coordinate-list format) from a file or
stdin, searches from the start cell to a hazard cell with a stack- or
queue-based frontier, and prints the route as an annotated map or a move list.

Run `python run.py --help` for details.
"""

import argparse
import os
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

just_fix_windows_console()
_COLOR_ENABLED = True

# Disable colors if errors do not go to a real terminal (e.g., during pytest capture)
try:
    if not sys.stderr.isatty():  # pragma: no cover - environment dependent
        _COLOR_ENABLED = False
except (AttributeError, ValueError):  # pragma: no cover
    _COLOR_ENABLED = False


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "1.0.0"


__version__ = _load_version()


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Unknown command line option: {message}\n")


def parse_args(argv: list[str]) -> argparse.Namespace:
    from maze.config import RoutingMode

    description = """
    Multi-level maze router

    Finds a route from the start cell (S) to a hazard cell (H), walking open
    floor (.) and riding elevators (E) between levels. Walls (#) block.
    Exactly one of --stack or --queue selects the frontier discipline.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZE_OUTPUT                  Default output format, M or L (default: M)
          MAZE_LOG_LEVEL               debug, info, warn or error (default: warn)
          MAZE_LOG_JSON                Emit log records as JSON when truthy
          MAZE_ENABLE_SEARCH_METRICS   Collect search metrics (default: on)

        Examples:
          # Shortest route, annotated map
          python run.py --queue < maze.txt

          # Depth-first route as a move list
          python run.py --stack --output L maze.txt

          # Load variables from .env then route
          python run.py --env-file .env -q maze.txt
        """
    )

    parser = _Parser(
        prog="maze-router",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--stack",
        "-s",
        dest="routing",
        action="append_const",
        const=RoutingMode.STACK,
        help="Use the stack-based routing scheme",
    )
    parser.add_argument(
        "--queue",
        "-q",
        dest="routing",
        action="append_const",
        const=RoutingMode.QUEUE,
        help="Use the queue-based routing scheme",
    )
    parser.add_argument(
        "--output",
        "-o",
        dest="output",
        default=None,
        metavar="M|L",
        help="Output format: M for map, L for list (default: env MAZE_OUTPUT or M)",
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log search events and metrics to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"maze-router {__version__}",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Maze file to read (default: stdin)",
    )
    return parser.parse_args(argv)


def _error(message: str) -> int:
    text = f"{Fore.RED}{message}{Style.RESET_ALL}" if _COLOR_ENABLED else message
    print(text, file=sys.stderr)
    return 1


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    from maze.config import OutputMode, SearchConfig
    from maze.errors import MazeError
    from maze.logging_utils import log, set_level
    from maze.parser import parse_maze
    from maze.pipeline import route

    if args.debug:
        set_level("debug")

    routing = args.routing or []
    if not routing:
        return _error("Stack or queue must be specified")
    if len(routing) > 1:
        return _error("Stack or queue can only be specified once")

    flag = args.output or os.getenv("MAZE_OUTPUT") or "M"
    try:
        output_mode = OutputMode.from_flag(flag)
    except ValueError:
        return _error(f"Unknown command line option: {flag}")

    config = SearchConfig(routing_mode=routing[0], output_mode=output_mode)
    log.debug(event="startup", version=__version__, mode=config.routing_mode.value, output=config.output_mode.value)

    try:
        if args.input:
            with open(args.input, "r", encoding="utf-8") as f:
                grid = parse_maze(f)
        else:
            grid = parse_maze(sys.stdin)
        sys.stdout.write(route(grid, config))
    except (OSError, UnicodeDecodeError) as e:
        return _error(f"Cannot read input: {e}")
    except MazeError as e:
        log.debug(event="input_rejected", error=e.message)
        return _error(e.message)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
