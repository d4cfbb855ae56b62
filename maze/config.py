import os
from collections import deque
from dataclasses import dataclass
from enum import Enum


class RoutingMode(Enum):
    """Frontier discipline. Both modes push to the back; they differ only in pop end."""
    STACK = "stack"
    QUEUE = "queue"

    def pop(self, frontier: deque):
        if self is RoutingMode.STACK:
            return frontier.pop()
        return frontier.popleft()


class OutputMode(Enum):
    MAP = "M"
    LIST = "L"

    @classmethod
    def from_flag(cls, flag: str) -> "OutputMode":
        return cls(flag)


@dataclass
class SearchConfig:
    routing_mode: RoutingMode
    output_mode: OutputMode = OutputMode.MAP
    enable_metrics: bool = True

    def __post_init__(self):
        if not isinstance(self.routing_mode, RoutingMode):
            raise TypeError("routing_mode must be a RoutingMode")
        # Environment override support, same truthiness rules as other MAZE_* flags
        env_map = {
            'MAZE_ENABLE_SEARCH_METRICS': 'enable_metrics',
        }
        for env_key, attr in env_map.items():
            if env_key in os.environ:
                val = os.environ.get(env_key, '').lower()
                setattr(self, attr, val not in {'0', 'false', 'no', ''})


__all__ = ["RoutingMode", "OutputMode", "SearchConfig"]
