from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'cells_expanded': 0,
        'cells_enqueued': 0,
        'frontier_peak': 0,
        'path_length': 0,
        'runtime_ms': 0.0,
    }
