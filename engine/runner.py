"""
runner.py — Engine Entry Points
================================
The calls a replay driver makes:

    run_search(grid_or_graph, start, end, variant) -> SearchResult
    run_sort(values, variant)                      -> [Step]
    run_mst(nodes, edges)                          -> [Step]
    run_traversal(tree, order)                     -> [Step]
    run_list(linked_list, variant, target=None)    -> [Step]
    run_stack(payload, variant)                    -> [Step]
    run_queue(payload, variant, quantum=2)         -> [Step]

Each call:
  1. validates its input (InvalidInput before any step exists)
  2. copies the structure, the algorithm only ever touches the copy
  3. exhausts the registered generator
  4. stamps step_number 0..n-1 onto the finished trace

Nothing is kept between calls.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from numbers import Real
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Type

from algorithms import LINKED_LIST, QUEUE, SEARCH, SORT, STACK, TRAVERSAL, AlgoInfo, get_algorithm
from algorithms.step import Step, StepKind, to_plain
from algorithms.variants import (
    ListOperation, QueueOperation, SearchVariant, SortVariant, StackOperation, TraversalOrder,
)
from structures import (
    BinaryTree, Edge, Graph, Grid, InvalidInput, LinkedList, Node, TreeNode, ValueArray,
    parse_operations, parse_tasks,
)


logger = logging.getLogger("engine.runner")

MST_ALGORITHM = "kruskal"
DEFAULT_QUANTUM = 2

STACK_OPERATIONS = {"push": True, "pop": False, "peek": False}
QUEUE_OPERATIONS = {"enqueue": True, "dequeue": False, "peek": False}


# ---------------------------------------------------------------------------
# SearchResult
# ---------------------------------------------------------------------------
@dataclass
class SearchResult:
    """
    Attributes:
        variant       : Registry key of the search that ran.
        visited_order : Ids in the order they were finalised.
        path          : start → end ids, empty when end is unreachable (or None).
        steps         : The full trace.
        structure     : The engine's private copy, with final search flags.
    """

    variant:       str
    visited_order: List[Hashable] = field(default_factory=list)
    path:          List[Hashable] = field(default_factory=list)
    steps:         List[Step]     = field(default_factory=list)
    structure:     Any            = None

    @property
    def path_found(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "variant":       self.variant,
            "visited_order": to_plain(self.visited_order),
            "path":          to_plain(self.path),
            "steps":         [s.to_dict() for s in self.steps],
        }


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------
def run_search(space, start, end, variant) -> SearchResult:
    """
    Args:
        space   : Grid or Graph; left untouched.
        start   : (row, col) for grids, node id for graphs.
        end     : Same form as start, or None to explore everything reachable.
        variant : SearchVariant or its string value.
    """
    try:
        info = _resolve(variant, SearchVariant, SEARCH)
        if not isinstance(space, (Grid, Graph)):
            raise InvalidInput(f"Search needs a Grid or Graph, got {type(space).__name__}")

        work = space.copy()
        start_id = work.coerce_id(start)
        end_id = work.coerce_id(end) if end is not None else None
        if work.is_blocked(start_id):
            raise InvalidInput(f"Start {start_id} is a wall / blocked node")
        if isinstance(work, Grid):
            work.set_start(start_id)
            if end_id is not None:
                work.set_end(end_id)
    except InvalidInput as exc:
        logger.warning("search rejected: %s", exc)
        raise

    logger.debug("search %s: %s → %s on %r", info.key, start_id, end_id, work)
    steps = _stamp(info.fn(work, start_id, end_id))

    visited_order = [s.node for s in steps if s.kind is StepKind.VISIT]
    path = work.path_to(end_id) if end_id is not None else []
    for node_id in path:
        work.node(node_id).is_path = True

    logger.debug(
        "search %s finished: %d steps, %d visited, path length %d",
        info.key, len(steps), len(visited_order), len(path),
    )
    return SearchResult(
        variant=info.key,
        visited_order=visited_order,
        path=path,
        steps=steps,
        structure=work,
    )


def run_sort(values, variant) -> List[Step]:
    """values: ValueArray or any sequence of numbers; left untouched."""
    try:
        info = _resolve(variant, SortVariant, SORT)
        raw = values.values if isinstance(values, ValueArray) else values
        work = ValueArray.from_values(raw)
    except InvalidInput as exc:
        logger.warning("sort rejected: %s", exc)
        raise

    logger.debug("sort %s: %d elements", info.key, len(work))
    steps = _stamp(info.fn(work))
    logger.debug("sort %s finished: %d steps", info.key, len(steps))
    return steps


def run_mst(nodes: Iterable, edges: Optional[Sequence]) -> List[Step]:
    """
    Args:
        nodes : Node ids (ints) or Node objects.
        edges : Edge objects, (a, b, weight) triples or {"source", "target", "weight"}
                dicts.  edge_index in the trace refers to this order.
    """
    try:
        node_ids = _mst_nodes(nodes)
        edge_list = _mst_edges(node_ids, edges)
    except InvalidInput as exc:
        logger.warning("mst rejected: %s", exc)
        raise

    info = get_algorithm(MST_ALGORITHM)
    logger.debug("mst %s: %d nodes, %d edges", info.key, len(node_ids), len(edge_list))
    steps = _stamp(info.fn(node_ids, edge_list))
    logger.debug("mst %s finished: %d steps", info.key, len(steps))
    return steps


def run_traversal(tree, order) -> List[Step]:
    """tree: BinaryTree (or a bare root TreeNode); left untouched."""
    try:
        info = _resolve(order, TraversalOrder, TRAVERSAL)
        if isinstance(tree, TreeNode):
            tree = BinaryTree(tree)
        if not isinstance(tree, BinaryTree):
            raise InvalidInput(f"Traversal needs a BinaryTree, got {type(tree).__name__}")
        work = tree.copy()
    except InvalidInput as exc:
        logger.warning("traversal rejected: %s", exc)
        raise

    logger.debug("traversal %s: %d nodes", info.key, work.size())
    steps = _stamp(info.fn(work))
    logger.debug("traversal %s finished: %d steps", info.key, len(steps))
    return steps


def run_list(linked_list, variant, target=None) -> List[Step]:
    """
    Args:
        linked_list : LinkedList or a sequence of numbers; left untouched.
        variant     : ListOperation or its string value.
        target      : Value to look for (list_search only).
    """
    try:
        info = _resolve(variant, ListOperation, LINKED_LIST)
        if not isinstance(linked_list, LinkedList):
            linked_list = LinkedList.from_values(linked_list)
        work = linked_list.copy()
        if work.head is None:
            raise InvalidInput("Linked list is empty")
        if info.key != ListOperation.CYCLE.value and work.has_cycle:
            raise InvalidInput(f"{info.label} needs a list without a cycle")
        if info.key == ListOperation.SEARCH.value:
            if target is None:
                raise InvalidInput("List search needs a target value")
            if isinstance(target, bool) or not isinstance(target, Real):
                raise InvalidInput(f"List search target must be a number, got {target!r}")
    except InvalidInput as exc:
        logger.warning("list rejected: %s", exc)
        raise

    logger.debug("list %s: %d nodes", info.key, len(work))
    gen = info.fn(work, target) if info.key == ListOperation.SEARCH.value else info.fn(work)
    steps = _stamp(gen)
    logger.debug("list %s finished: %d steps", info.key, len(steps))
    return steps


def run_stack(payload, variant) -> List[Step]:
    """
    Args:
        payload : Operation script for stack_ops, a string for the others.
        variant : StackOperation or its string value.
    """
    try:
        info = _resolve(variant, StackOperation, STACK)
        if info.key == StackOperation.OPERATIONS.value:
            work = parse_operations(payload, STACK_OPERATIONS)
        elif isinstance(payload, str):
            work = payload
        else:
            raise InvalidInput(f"{info.label} needs a string, got {type(payload).__name__}")
    except InvalidInput as exc:
        logger.warning("stack rejected: %s", exc)
        raise

    logger.debug("stack %s: %d inputs", info.key, len(work))
    steps = _stamp(info.fn(work))
    logger.debug("stack %s finished: %d steps", info.key, len(steps))
    return steps


def run_queue(payload, variant, quantum: int = DEFAULT_QUANTUM) -> List[Step]:
    """
    Args:
        payload : Operation script for queue_ops, a task list for round_robin.
        variant : QueueOperation or its string value.
        quantum : Time slice for round_robin (positive int).
    """
    try:
        info = _resolve(variant, QueueOperation, QUEUE)
        if info.key == QueueOperation.OPERATIONS.value:
            work = parse_operations(payload, QUEUE_OPERATIONS)
        else:
            work = parse_tasks(payload)
            if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
                raise InvalidInput(f"Quantum must be a positive integer, got {quantum!r}")
    except InvalidInput as exc:
        logger.warning("queue rejected: %s", exc)
        raise

    logger.debug("queue %s: %d inputs", info.key, len(work))
    gen = info.fn(work) if info.key == QueueOperation.OPERATIONS.value else info.fn(work, quantum)
    steps = _stamp(gen)
    logger.debug("queue %s finished: %d steps", info.key, len(steps))
    return steps


# ---------------------------------------------------------------------------
# Internal
# ---------------------------------------------------------------------------
def _resolve(variant, enum_cls: Type[Enum], family: str) -> AlgoInfo:
    """Map an enum member or its string value onto a registry card of the right family."""
    if isinstance(variant, enum_cls):
        key = variant.value
    elif isinstance(variant, str):
        key = variant.strip().lower()
    else:
        raise InvalidInput(f"Unknown {family} variant {variant!r}")

    try:
        enum_cls(key)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise InvalidInput(f"Unknown {family} variant {variant!r} (expected one of: {choices})") from None

    info = get_algorithm(key)
    if info is None or info.family != family:
        raise InvalidInput(f"No {family} algorithm registered for {key!r}")
    return info


def _stamp(gen: Iterable[Step]) -> List[Step]:
    return [replace(step, step_number=i) for i, step in enumerate(gen)]


def _mst_nodes(nodes) -> List[int]:
    if nodes is None or isinstance(nodes, (str, bytes)) or not hasattr(nodes, "__iter__"):
        raise InvalidInput("MST needs a collection of node ids")
    node_ids: List[int] = []
    seen = set()
    for raw in nodes:
        node_id = raw.id if isinstance(raw, Node) else raw
        if isinstance(node_id, bool) or not isinstance(node_id, int):
            raise InvalidInput(f"MST node ids must be integers, got {raw!r}")
        if node_id in seen:
            raise InvalidInput(f"Duplicate node id {node_id}")
        seen.add(node_id)
        node_ids.append(node_id)
    if not node_ids:
        raise InvalidInput("MST needs at least one node")
    return node_ids


def _mst_edges(node_ids: List[int], edges) -> List[Edge]:
    if edges is None:
        return []
    if isinstance(edges, (str, bytes, dict)) or not hasattr(edges, "__iter__"):
        raise InvalidInput("MST edges must be a list")
    known = set(node_ids)
    pairs = set()
    result: List[Edge] = []
    for raw in edges:
        edge = Edge.coerce(raw)
        for end in (edge.source, edge.target):
            if end not in known:
                raise InvalidInput(f"Edge {edge.source}-{edge.target} references unknown node {end}")
        if edge.key in pairs:
            raise InvalidInput(f"Nodes {edge.source} and {edge.target} already share an edge")
        pairs.add(edge.key)
        result.append(edge)
    return result
