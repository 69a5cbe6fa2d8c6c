"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engine can trace.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict keyed by the variant value:
    {
        "bfs":     AlgoInfo(key, label, family="search", fn, pseudocode, …),
        "bubble":  AlgoInfo(…, family="sort", …),
        "kruskal": AlgoInfo(…, family="mst", …),
        "inorder": AlgoInfo(…, family="traversal", …),
        "list_search": AlgoInfo(…, family="linked_list", …),
        "stack_ops":   AlgoInfo(…, family="stack", …),
        "round_robin": AlgoInfo(…, family="queue", …),
    }

The engine dispatches through it, so adding an algorithm means writing
the generator, adding its variant to algorithms.variants and one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.bfs            import bfs            as _bfs,       PSEUDOCODE as _bfs_pc
from algorithms.dfs            import dfs            as _dfs,       PSEUDOCODE as _dfs_pc
from algorithms.dijkstra       import dijkstra       as _dijkstra,  PSEUDOCODE as _dij_pc
from algorithms.astar          import astar          as _astar,     PSEUDOCODE as _ast_pc
from algorithms.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bub_pc
from algorithms.selection_sort import selection_sort as _selection, PSEUDOCODE as _sel_pc
from algorithms.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _ins_pc
from algorithms.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _mrg_pc
from algorithms.quick_sort     import quick_sort     as _quick,     PSEUDOCODE as _qck_pc
from algorithms.kruskal        import kruskal        as _kruskal,   PSEUDOCODE as _kru_pc
from algorithms.tree_traversal import (
    inorder as _inorder, preorder as _preorder, postorder as _postorder, levelorder as _levelorder,
    PSEUDOCODE as _tree_pc,
)
from algorithms.linked_list import (
    list_search as _list_search, list_reverse as _list_reverse, cycle_detection as _cycle,
    PSEUDOCODE as _list_pc,
)
from algorithms.stack_ops import (
    stack_operations as _stack_ops, balanced_parentheses as _balanced, reverse_string as _rev_string,
    PSEUDOCODE as _stack_pc,
)
from algorithms.queue_ops import queue_operations as _queue_ops, round_robin as _round_robin, PSEUDOCODE as _queue_pc
from algorithms.variants import (
    ListOperation, QueueOperation, SearchVariant, SortVariant, StackOperation, TraversalOrder,
)


SEARCH      = "search"
SORT        = "sort"
MST         = "mst"
TRAVERSAL   = "traversal"
LINKED_LIST = "linked_list"
STACK       = "stack"
QUEUE       = "queue"

FAMILIES = (SEARCH, SORT, MST, TRAVERSAL, LINKED_LIST, STACK, QUEUE)


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                 # registry key, e.g. "bfs"
    label:            str                 # human label, e.g. "Breadth-First Search"
    family:           str                 # one of FAMILIES
    fn:               Callable            # the generator function
    pseudocode:       List[str]           # lines for the side-panel
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""

    def to_dict(self) -> dict:
        """Card without the callable, for JSON listings."""
        return {
            "key":              self.key,
            "label":            self.label,
            "family":           self.family,
            "pseudocode":       list(self.pseudocode),
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    # -- search -------------------------------------------------------------
    SearchVariant.BFS.value: AlgoInfo(
        key="bfs", label="Breadth-First Search", family=SEARCH, fn=_bfs, pseudocode=_bfs_pc,
        tags=["unweighted", "shortest-path", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer. Finds the shortest path by hop count.",
    ),

    SearchVariant.DFS.value: AlgoInfo(
        key="dfs", label="Depth-First Search", family=SEARCH, fn=_dfs, pseudocode=_dfs_pc,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee the shortest path.",
    ),

    SearchVariant.DIJKSTRA.value: AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", family=SEARCH, fn=_dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily expands the closest node. Optimal for positive weights.",
    ),

    SearchVariant.ASTAR.value: AlgoInfo(
        key="astar", label="A* Search", family=SEARCH, fn=_astar, pseudocode=_ast_pc,
        tags=["weighted", "shortest-path", "heuristic"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Dijkstra + Manhattan guidance. Optimal when the heuristic is admissible.",
    ),

    # -- sort ---------------------------------------------------------------
    SortVariant.BUBBLE.value: AlgoInfo(
        key="bubble", label="Bubble Sort", family=SORT, fn=_bubble, pseudocode=_bub_pc,
        tags=["comparison", "stable", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs; the largest value bubbles to the end.",
    ),

    SortVariant.SELECTION.value: AlgoInfo(
        key="selection", label="Selection Sort", family=SORT, fn=_selection, pseudocode=_sel_pc,
        tags=["comparison", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted suffix and swaps it into place.",
    ),

    SortVariant.INSERTION.value: AlgoInfo(
        key="insertion", label="Insertion Sort", family=SORT, fn=_insertion, pseudocode=_ins_pc,
        tags=["comparison", "stable", "in-place", "adaptive"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Grows a sorted prefix, sliding each new key left into position.",
    ),

    SortVariant.MERGE.value: AlgoInfo(
        key="merge", label="Merge Sort", family=SORT, fn=_merge, pseudocode=_mrg_pc,
        tags=["comparison", "stable", "divide-and-conquer"],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits at the midpoint, sorts both halves and merges them back.",
    ),

    SortVariant.QUICK.value: AlgoInfo(
        key="quick", label="Quick Sort", family=SORT, fn=_quick, pseudocode=_qck_pc,
        tags=["comparison", "in-place", "divide-and-conquer"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then sorts each side.",
    ),

    # -- minimum spanning tree ---------------------------------------------
    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's MST", family=MST, fn=_kruskal, pseudocode=_kru_pc,
        tags=["weighted", "greedy", "union-find"],
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Takes edges cheapest-first, skipping any that would close a cycle.",
    ),

    # -- tree traversal -----------------------------------------------------
    TraversalOrder.INORDER.value: AlgoInfo(
        key="inorder", label="Inorder Traversal", family=TRAVERSAL, fn=_inorder,
        pseudocode=_tree_pc[TraversalOrder.INORDER],
        tags=["depth-first", "binary-tree"],
        complexity_time="O(n)", complexity_space="O(h)",
        description="Left, node, right. Visits a BST in sorted order.",
    ),

    TraversalOrder.PREORDER.value: AlgoInfo(
        key="preorder", label="Preorder Traversal", family=TRAVERSAL, fn=_preorder,
        pseudocode=_tree_pc[TraversalOrder.PREORDER],
        tags=["depth-first", "binary-tree"],
        complexity_time="O(n)", complexity_space="O(h)",
        description="Node, left, right. The order a tree is copied in.",
    ),

    TraversalOrder.POSTORDER.value: AlgoInfo(
        key="postorder", label="Postorder Traversal", family=TRAVERSAL, fn=_postorder,
        pseudocode=_tree_pc[TraversalOrder.POSTORDER],
        tags=["depth-first", "binary-tree"],
        complexity_time="O(n)", complexity_space="O(h)",
        description="Left, right, node. Children are finished before their parent.",
    ),

    TraversalOrder.LEVELORDER.value: AlgoInfo(
        key="levelorder", label="Level-Order Traversal", family=TRAVERSAL, fn=_levelorder,
        pseudocode=_tree_pc[TraversalOrder.LEVELORDER],
        tags=["breadth-first", "binary-tree"],
        complexity_time="O(n)", complexity_space="O(w)",
        description="Row by row from the root, using a FIFO queue.",
    ),

    # -- linked list --------------------------------------------------------
    ListOperation.SEARCH.value: AlgoInfo(
        key="list_search", label="Linked List Search", family=LINKED_LIST, fn=_list_search,
        pseudocode=_list_pc[ListOperation.SEARCH],
        tags=["linear", "linked-list"],
        complexity_time="O(n)", complexity_space="O(1)",
        description="Follows next pointers from the head until the value turns up.",
    ),

    ListOperation.REVERSE.value: AlgoInfo(
        key="list_reverse", label="Reverse Linked List", family=LINKED_LIST, fn=_list_reverse,
        pseudocode=_list_pc[ListOperation.REVERSE],
        tags=["in-place", "linked-list", "pointers"],
        complexity_time="O(n)", complexity_space="O(1)",
        description="Walks prev / current / next along the list, turning each link around.",
    ),

    ListOperation.CYCLE.value: AlgoInfo(
        key="cycle_detection", label="Floyd's Cycle Detection", family=LINKED_LIST, fn=_cycle,
        pseudocode=_list_pc[ListOperation.CYCLE],
        tags=["two-pointer", "linked-list"],
        complexity_time="O(n)", complexity_space="O(1)",
        description="A slow and a fast pointer meet only inside a cycle; a second walk finds its entry.",
    ),

    # -- stack --------------------------------------------------------------
    StackOperation.OPERATIONS.value: AlgoInfo(
        key="stack_ops", label="Stack Operations", family=STACK, fn=_stack_ops,
        pseudocode=_stack_pc[StackOperation.OPERATIONS],
        tags=["lifo", "stack"],
        complexity_time="O(1) per operation", complexity_space="O(n)",
        description="Push and pop at the top. Used for call frames, undo and expression evaluation.",
    ),

    StackOperation.BALANCED.value: AlgoInfo(
        key="balanced_parens", label="Balanced Brackets", family=STACK, fn=_balanced,
        pseudocode=_stack_pc[StackOperation.BALANCED],
        tags=["lifo", "stack", "parsing"],
        complexity_time="O(n)", complexity_space="O(n)",
        description="Openers wait on a stack until the matching closer pops them.",
    ),

    StackOperation.REVERSE.value: AlgoInfo(
        key="reverse_string", label="Reverse String", family=STACK, fn=_rev_string,
        pseudocode=_stack_pc[StackOperation.REVERSE],
        tags=["lifo", "stack"],
        complexity_time="O(n)", complexity_space="O(n)",
        description="Pushing then popping every character returns them in reverse.",
    ),

    # -- queue --------------------------------------------------------------
    QueueOperation.OPERATIONS.value: AlgoInfo(
        key="queue_ops", label="Queue Operations", family=QUEUE, fn=_queue_ops,
        pseudocode=_queue_pc[QueueOperation.OPERATIONS],
        tags=["fifo", "queue"],
        complexity_time="O(1) per operation", complexity_space="O(n)",
        description="Enqueue at the back, dequeue at the front. Used for buffers and BFS frontiers.",
    ),

    QueueOperation.ROUND_ROBIN.value: AlgoInfo(
        key="round_robin", label="Round-Robin Scheduling", family=QUEUE, fn=_round_robin,
        pseudocode=_queue_pc[QueueOperation.ROUND_ROBIN],
        tags=["fifo", "queue", "scheduling"],
        complexity_time="O(total burst / quantum)", complexity_space="O(n)",
        description="Each task gets a fixed time slice, then goes to the back of the queue.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_family(family: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.family == family]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "FAMILIES",
    "SEARCH",
    "SORT",
    "MST",
    "TRAVERSAL",
    "LINKED_LIST",
    "STACK",
    "QUEUE",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_family",
    "algorithms_by_tag",
]
