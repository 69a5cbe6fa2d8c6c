"""
step.py — Algorithm Step Events
================================
Every algorithm is a generator that yields Step objects.  A Step is one
discrete, replayable state transition:

    • a search finalising a node, exploring an edge, relaxing a distance
    • a sort comparing or swapping two indices
    • Kruskal considering, accepting or rejecting an edge
    • a tree walk moving to a child, processing a node, returning up
    • a list pointer landing on a node or a next link being redirected
    • a push, pop or peek on a stack, an enqueue or dequeue on a queue

Design decisions:
  - Step is a frozen dataclass.  It is a SNAPSHOT: the payload carries
    explicit ids / indices (and, for sorts, the whole array), never a
    reference to live loop state, so any single step can be rendered
    without re-running the algorithm.
  - One subclass per payload family; `kind` is the tag.  The replay
    driver switches on `kind` and reads only the fields that family owns.
  - `step_number` is stamped by the engine once the run is complete.
  - `explanation` is the plain-English "why" line shown next to the
    animation.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Hashable, Optional, Tuple


# ---------------------------------------------------------------------------
# Step kinds — the closed vocabulary every engine emits into
# ---------------------------------------------------------------------------
class StepKind(Enum):
    VISIT           = "visit"             # search finalised a node / cell
    EXPLORE_EDGE    = "explore_edge"      # search looked across an edge
    UPDATE_DISTANCE = "update_distance"   # a recorded distance dropped
    COMPARE         = "compare"           # two array slots compared
    SWAP            = "swap"              # two array slots exchanged
    COMPLETE        = "complete"          # terminal sort frame
    MST_CONSIDER    = "mst_consider"
    MST_ACCEPT      = "mst_accept"
    MST_REJECT      = "mst_reject"
    TREE_MOVE       = "tree_move"         # descend parent → child
    TREE_PROCESS    = "tree_process"      # emit the node's value
    TREE_RETURN     = "tree_return"       # climb child → parent
    LIST_VISIT      = "list_visit"        # pointer lands on a node and compares
    LIST_RELINK     = "list_relink"       # a next pointer is redirected
    LIST_ADVANCE    = "list_advance"      # two-pointer walk moved
    LIST_RESULT     = "list_result"
    STACK_PUSH      = "stack_push"
    STACK_POP       = "stack_pop"
    STACK_PEEK      = "stack_peek"
    STACK_RESULT    = "stack_result"
    QUEUE_ENQUEUE   = "queue_enqueue"
    QUEUE_DEQUEUE   = "queue_dequeue"
    QUEUE_PEEK      = "queue_peek"
    QUEUE_RUN       = "queue_run"         # scheduled task used the CPU


SEARCH_KINDS = frozenset({StepKind.VISIT, StepKind.EXPLORE_EDGE, StepKind.UPDATE_DISTANCE})
SORT_KINDS   = frozenset({StepKind.COMPARE, StepKind.SWAP, StepKind.COMPLETE})
MST_KINDS    = frozenset({StepKind.MST_CONSIDER, StepKind.MST_ACCEPT, StepKind.MST_REJECT})
TREE_KINDS   = frozenset({StepKind.TREE_MOVE, StepKind.TREE_PROCESS, StepKind.TREE_RETURN})
LIST_KINDS   = frozenset({StepKind.LIST_VISIT, StepKind.LIST_RELINK, StepKind.LIST_ADVANCE, StepKind.LIST_RESULT})
STACK_KINDS  = frozenset({StepKind.STACK_PUSH, StepKind.STACK_POP, StepKind.STACK_PEEK, StepKind.STACK_RESULT})
QUEUE_KINDS  = frozenset({StepKind.QUEUE_ENQUEUE, StepKind.QUEUE_DEQUEUE, StepKind.QUEUE_PEEK, StepKind.QUEUE_RUN})


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        kind        : StepKind tag.
        step_number : 0-based index of this step in the run.
        explanation : Human-readable "why" text.
    """

    kind:        StepKind
    step_number: int = 0
    explanation: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe form: enum → value, tuples → lists, ∞ → None."""
        out: Dict[str, Any] = {}
        for f in fields(self):
            out[f.name] = to_plain(getattr(self, f.name))
        return out


# ---------------------------------------------------------------------------
# Payload families
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SearchStep(Step):
    """
    visit           : node
    explore_edge    : source → target (weight)
    update_distance : source → target, old_distance → new_distance
    """

    node:         Optional[Hashable] = None
    source:       Optional[Hashable] = None
    target:       Optional[Hashable] = None
    weight:       Optional[float]    = None
    old_distance: Optional[float]    = None
    new_distance: Optional[float]    = None


@dataclass(frozen=True)
class SortStep(Step):
    """
    array     : snapshot of the ENTIRE working array (pre-swap for swaps)
    comparing : indices being compared
    swapping  : indices being exchanged
    sorted    : indices known to be in their final position
    """

    array:     Tuple[Any, ...] = ()
    comparing: Tuple[int, ...] = ()
    swapping:  Tuple[int, ...] = ()
    sorted:    Tuple[int, ...] = ()


@dataclass(frozen=True)
class MSTStep(Step):
    """
    source, target, weight : the edge this step is about
    edge_index             : its position in the caller's edge list
    mst_edges              : accepted (source, target, weight) edges so far
    """

    source:     Optional[int] = None
    target:     Optional[int] = None
    weight:     Optional[int] = None
    edge_index: Optional[int] = None
    mst_edges:  Tuple[Tuple[int, int, int], ...] = ()


@dataclass(frozen=True)
class TreeStep(Step):
    """
    tree_move    : source_id → target_id, direction "left" / "right"
    tree_process : node_id, value, path from root ("LR…"), level
    tree_return  : source_id (child) → target_id (parent), direction "up"
    """

    node_id:   Optional[int] = None
    value:     Any           = None
    source_id: Optional[int] = None
    target_id: Optional[int] = None
    direction: Optional[str] = None
    path:      str           = ""
    level:     int           = 0


@dataclass(frozen=True)
class ListStep(Step):
    """
    list_visit   : node_id / index under the "current" pointer
    list_relink  : node_id whose next was redirected, prev / current / next pointers
    list_advance : pointer positions after the move
    list_result  : outcome, plus the node it concerns (match, new head, cycle entry)

    links is the (node_id, next_id) pair of every node, by id, after the step.
    """

    node_id:  Optional[int] = None
    index:    Optional[int] = None
    pointers: Tuple[Tuple[str, Optional[int]], ...] = ()
    links:    Tuple[Tuple[int, Optional[int]], ...] = ()
    outcome:  Any           = None

    def to_dict(self) -> Dict[str, Any]:
        out = super().to_dict()
        out["pointers"] = dict(self.pointers)
        return out


@dataclass(frozen=True)
class StackStep(Step):
    """
    value    : what was pushed, popped or peeked (None on an empty stack)
    stack    : snapshot after the step, bottom first
    token    : input character that caused the step, if any
    position : index of the operation / character in the input
    """

    value:    Any             = None
    stack:    Tuple[Any, ...] = ()
    token:    Optional[str]   = None
    position: Optional[int]   = None
    outcome:  Any             = None


@dataclass(frozen=True)
class QueueStep(Step):
    """
    value     : what was enqueued, dequeued or peeked (task name when scheduling)
    queue     : snapshot after the step, front first
    remaining : work left on the task after a queue_run
    clock     : time after a queue_run
    """

    value:     Any             = None
    queue:     Tuple[Any, ...] = ()
    position:  Optional[int]   = None
    remaining: Optional[int]   = None
    clock:     Optional[int]   = None


def to_plain(value: Any) -> Any:
    """JSON-safe copy of a payload value: enums, tuples, dicts and ∞ handled."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, float) and value in (float("inf"), float("-inf")):
        return None
    if isinstance(value, (tuple, list)):
        return [to_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    return value


def sort_complete(array: Tuple[Any, ...]) -> SortStep:
    """Terminal sort frame: nothing compared, nothing swapping, every index settled."""
    return SortStep(
        kind=StepKind.COMPLETE,
        array=array,
        sorted=tuple(range(len(array))),
        explanation="Array sorted: every element is in its final position.",
    )
