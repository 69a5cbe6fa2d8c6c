"""
variants.py — Variant Selectors
================================
Each engine accepts a small, closed set of variants.  The enum value is
also the registry key, so `SearchVariant("bfs")` and the string "bfs"
select the same generator.
"""

from enum import Enum


class SearchVariant(Enum):
    BFS      = "bfs"
    DFS      = "dfs"
    DIJKSTRA = "dijkstra"
    ASTAR    = "astar"


class SortVariant(Enum):
    BUBBLE    = "bubble"
    SELECTION = "selection"
    INSERTION = "insertion"
    MERGE     = "merge"
    QUICK     = "quick"


class TraversalOrder(Enum):
    INORDER    = "inorder"
    PREORDER   = "preorder"
    POSTORDER  = "postorder"
    LEVELORDER = "levelorder"


class ListOperation(Enum):
    SEARCH  = "list_search"
    REVERSE = "list_reverse"
    CYCLE   = "cycle_detection"


class StackOperation(Enum):
    OPERATIONS = "stack_ops"
    BALANCED   = "balanced_parens"
    REVERSE    = "reverse_string"


class QueueOperation(Enum):
    OPERATIONS  = "queue_ops"
    ROUND_ROBIN = "round_robin"
