"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete run of any registered algorithm (all Steps), then
computes the numbers the analytics panel and comparison mode show.

Usage:
    rec = Recorder()
    rec.start("dijkstra", grid, source=(0, 0), target=(4, 4))
    rec.run_to_completion()          # drives engine.runner, keeps the trace
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # JSON-safe snapshot for save / replay

`structure` depends on the family:
    search    → Grid or Graph (source / target required, target may be None)
    sort      → the values
    mst       → node ids (edges= the edge list)
    traversal → BinaryTree
    list      → LinkedList or values (target= the value list_search looks for)
    stack     → operation script, or the text for the string algorithms
    queue     → operation script, or the task list (quantum= the time slice)

Comparison Mode:
    Run two Recorders on the SAME structure, then compare(rec1, rec2).
"""

import logging
import sys
import time
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import LINKED_LIST, MST, QUEUE, SEARCH, SORT, STACK, TRAVERSAL, AlgoInfo, get_algorithm
from algorithms.step import Step, StepKind, to_plain
from engine.runner import (
    DEFAULT_QUANTUM, SearchResult, run_list, run_mst, run_queue, run_search, run_sort, run_stack,
    run_traversal,
)
from structures import Graph, InvalidInput


logger = logging.getLogger("engine.recorder")


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    family:        str   = ""
    source:        Any   = None
    target:        Any   = None
    total_steps:   int   = 0                    # number of Steps in the trace
    step_counts:   Dict[str, int] = field(default_factory=dict)   # per StepKind value
    nodes_visited: int   = 0
    path_length:   int   = 0                    # number of edges on the final path
    path_cost:     float = 0.0                  # total weight of the final path
    path_found:    bool  = False
    comparisons:   int   = 0
    swaps:         int   = 0
    mst_weight:    int   = 0
    mst_edges:     int   = 0
    outcome:       Any   = None                 # verdict of the final step (list, stack, queue)
    wall_time_ms:  float = 0.0                  # wall-clock time to run to completion
    memory_bytes:  int   = 0                    # approx size of the step buffer


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_nodes: str = ""   # which algo visited fewer nodes
    winner_steps: str = ""   # which algo needed fewer steps
    winner_path:  str = ""   # which algo found the cheaper path

    def to_dict(self) -> Dict[str, Any]:
        return to_plain(asdict(self))


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        result  : SearchResult for search runs, else None.
    """

    def __init__(self):
        self.steps:   List[Step]             = []
        self.metrics: Optional[RunMetrics]   = None
        self.result:  Optional[SearchResult] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._structure: Any                = None
        self._source:    Any                = None
        self._target:    Any                = None
        self._edges:     Any                = None
        self._quantum:   int                = DEFAULT_QUANTUM

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        structure: Any,
        source: Any = None,
        target: Any = None,
        edges: Any = None,
        quantum: int = DEFAULT_QUANTUM,
    ) -> None:
        """Pick the algorithm and remember its input.  Nothing runs yet."""
        info = get_algorithm(algo_key)
        if info is None:
            raise InvalidInput(f"Unknown algorithm: {algo_key}")
        if info.family == SEARCH and source is None:
            raise InvalidInput(f"{info.label} needs a source")

        self._algo_info = info
        self._structure = structure
        self._source    = source
        self._target    = target
        self._edges     = edges
        self._quantum   = quantum
        self.steps      = []
        self.metrics    = None
        self.result     = None

    def run_to_completion(self) -> RunMetrics:
        """Run the engine, record every step, compute metrics."""
        info = self._algo_info
        if info is None:
            raise RuntimeError("Call start() first.")

        t0 = time.monotonic()
        if info.family == SEARCH:
            self.result = run_search(self._structure, self._source, self._target, info.key)
            self.steps = self.result.steps
        elif info.family == SORT:
            self.steps = run_sort(self._structure, info.key)
        elif info.family == MST:
            self.steps = run_mst(self._structure, self._edges)
        elif info.family == TRAVERSAL:
            self.steps = run_traversal(self._structure, info.key)
        elif info.family == LINKED_LIST:
            self.steps = run_list(self._structure, info.key, self._target)
        elif info.family == STACK:
            self.steps = run_stack(self._structure, info.key)
        elif info.family == QUEUE:
            self.steps = run_queue(self._structure, info.key, self._quantum)
        else:
            raise RuntimeError(f"Unhandled algorithm family {info.family!r}")
        wall_ms = (time.monotonic() - t0) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.debug("recorded %s: %d steps in %.2f ms", info.key, len(self.steps), wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        info = self._algo_info
        out: Dict[str, Any] = {
            "algo_key": info.key if info else "",
            "family":   info.family if info else "",
            "source":   to_plain(self._source),
            "target":   to_plain(self._target),
            "metrics":  to_plain(asdict(self.metrics)) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }
        if hasattr(self._structure, "to_dict"):
            out["structure"] = self._structure.to_dict()
        if self.result is not None:
            out["visited_order"] = to_plain(self.result.visited_order)
            out["path"] = to_plain(self.result.path)
        return out

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        counts = Counter(s.kind.value for s in self.steps)

        path = self.result.path if self.result else []
        path_cost = 0.0
        if len(path) > 1:
            space = self.result.structure
            path_cost = float(space.path_cost(path)) if isinstance(space, Graph) else float(len(path) - 1)

        mst_edges = ()
        if info.family == MST and self.steps:
            mst_edges = self.steps[-1].mst_edges

        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s)

        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            family=info.family,
            source=self._source,
            target=self._target,
            total_steps=len(self.steps),
            step_counts=dict(counts),
            nodes_visited=len(self.result.visited_order) if self.result else 0,
            path_length=len(path) - 1 if len(path) > 1 else 0,
            path_cost=path_cost,
            path_found=bool(path),
            comparisons=counts.get(StepKind.COMPARE.value, 0),
            swaps=counts.get(StepKind.SWAP.value, 0),
            mst_weight=sum(w for _, _, w in mst_edges),
            mst_edges=len(mst_edges),
            outcome=getattr(self.steps[-1], "outcome", None) if self.steps else None,
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key, lower_is_better=True):
        if l_val == r_val:
            return "tie"
        if lower_is_better:
            return l_key if l_val < r_val else r_key
        return l_key if l_val > r_val else r_key

    # a run that found no path loses to one that did
    l_cost = l.path_cost if l.path_found else float("inf")
    r_cost = r.path_cost if r.path_found else float("inf")

    return ComparisonResult(
        left=l,
        right=r,
        winner_nodes=winner(l.nodes_visited, r.nodes_visited, l.algo_label, r.algo_label),
        winner_steps=winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
        winner_path =winner(l_cost, r_cost, l.algo_label, r.algo_label),
    )
