"""
structures/
-----------
Core data layer.  Public API:

    from structures import Grid, Cell, Graph, Node, Edge
    from structures import BinaryTree, TreeNode, ValueArray, UnionFind
    from structures import LinkedList, ListNode, parse_operations, parse_tasks
    from structures import InvalidInput
"""

from structures.errors       import InvalidInput
from structures.grid         import Grid, Cell, CellId
from structures.node         import Node
from structures.edge         import Edge
from structures.graph        import Graph
from structures.tree         import BinaryTree, TreeNode
from structures.array        import ValueArray
from structures.union_find   import UnionFind
from structures.linked_list  import LinkedList, ListNode
from structures.operations   import Operation, Task, parse_operations, parse_tasks

__all__ = [
    "InvalidInput",
    "Grid",       "Cell",     "CellId",
    "Node",       "Edge",     "Graph",
    "BinaryTree", "TreeNode",
    "ValueArray", "UnionFind",
    "LinkedList", "ListNode",
    "Operation",  "Task",     "parse_operations", "parse_tasks",
]
