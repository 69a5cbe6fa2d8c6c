"""
engine/
-------
Run & recording layer.

    from engine import run_search, run_sort, run_mst, run_traversal
    from engine import run_list, run_stack, run_queue
    from engine import Recorder, compare
"""

from engine.runner   import (
    SearchResult, run_list, run_mst, run_queue, run_search, run_sort, run_stack, run_traversal,
)
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "SearchResult",
    "run_search",
    "run_sort",
    "run_mst",
    "run_traversal",
    "run_list",
    "run_stack",
    "run_queue",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
