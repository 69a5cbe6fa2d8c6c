"""
tree.py — Binary Tree Model
============================
Nodes with exclusively owned left / right children.  The traversal tab
builds its tree by sequential BST insertion, so `insert` follows the same
rule: smaller values go left, equal-or-greater values go right.

Design decisions:
  - Ownership is strict: a node appears under exactly one parent.
    `validate` walks the tree with an identity guard and rejects cycles and
    shared subtrees before any traversal runs.
  - Node identifiers are preorder positions, assigned by `copy()`.  Values
    may repeat, so steps always carry the id alongside the value.
  - All walks are iterative, the traversal engine included, so depth is
    bounded by memory rather than the recursion limit.  Traversal only runs
    on a tree that has already passed validation.
"""

from collections import deque
from typing import Any, Iterable, Iterator, List, Optional

from structures.errors import InvalidInput


class TreeNode:
    """
    Attributes:
        value : The payload (any comparable value).
        left  : Left child or None.
        right : Right child or None.
        id    : Preorder position, set when the owning tree is copied.
    """

    __slots__ = ("value", "left", "right", "id")

    def __init__(self, value: Any, left: "Optional[TreeNode]" = None, right: "Optional[TreeNode]" = None):
        self.value = value
        self.left = left
        self.right = right
        self.id: Optional[int] = None

    def children(self) -> List["TreeNode"]:
        return [child for child in (self.left, self.right) if child is not None]

    def __repr__(self) -> str:
        return f"TreeNode(id={self.id}, value={self.value!r})"


class BinaryTree:
    def __init__(self, root: Optional[TreeNode] = None):
        self.root = root

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def insert(self, value: Any) -> TreeNode:
        """BST insertion: value < node goes left, otherwise right."""
        new = TreeNode(value)
        if self.root is None:
            self.root = new
            return new
        cur = self.root
        while True:
            if value < cur.value:
                if cur.left is None:
                    cur.left = new
                    return new
                cur = cur.left
            else:
                if cur.right is None:
                    cur.right = new
                    return new
                cur = cur.right

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> "BinaryTree":
        tree = cls()
        for v in values:
            try:
                tree.insert(v)
            except TypeError as exc:
                raise InvalidInput(f"Cannot order {v!r} against the values already in the tree") from exc
        return tree

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """Raise InvalidInput unless this is a non-empty, strict binary tree."""
        if self.root is None:
            raise InvalidInput("Tree is empty")
        if not isinstance(self.root, TreeNode):
            raise InvalidInput(f"Tree root must be a TreeNode, got {type(self.root).__name__}")
        seen = set()
        stack = [self.root]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                raise InvalidInput(f"Tree node {node.value!r} is reachable twice (cycle or shared subtree)")
            seen.add(id(node))
            for child in (node.right, node.left):
                if child is None:
                    continue
                if not isinstance(child, TreeNode):
                    raise InvalidInput(f"Child of {node.value!r} is not a TreeNode: {child!r}")
                stack.append(child)

    def nodes(self) -> Iterator[TreeNode]:
        """Preorder walk."""
        if self.root is None:
            return
        seen = set()
        stack = [self.root]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                raise InvalidInput(f"Tree node {node.value!r} is reachable twice (cycle or shared subtree)")
            seen.add(id(node))
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def size(self) -> int:
        return sum(1 for _ in self.nodes())

    def height(self) -> int:
        """Number of levels (0 for an empty tree)."""
        if self.root is None:
            return 0
        levels = 0
        frontier = deque([self.root])
        while frontier:
            levels += 1
            for _ in range(len(frontier)):
                frontier.extend(frontier.popleft().children())
        return levels

    # ------------------------------------------------------------------
    # Copy / serialisation
    # ------------------------------------------------------------------
    def copy(self) -> "BinaryTree":
        """Deep copy with ids assigned in preorder (0 = root)."""
        self.validate()
        new_root = TreeNode(self.root.value)
        pairs = [(self.root, new_root)]
        next_id = 0
        while pairs:
            src, dst = pairs.pop()
            dst.id = next_id
            next_id += 1
            # push right first so left is numbered first
            if src.right is not None:
                dst.right = TreeNode(src.right.value)
                pairs.append((src.right, dst.right))
            if src.left is not None:
                dst.left = TreeNode(src.left.value)
                pairs.append((src.left, dst.left))
        return BinaryTree(new_root)

    def to_dict(self) -> Optional[dict]:
        """Nested {"value", "left", "right"} form."""
        if self.root is None:
            return None
        self.validate()
        out = {"value": self.root.value, "left": None, "right": None}
        pairs = [(self.root, out)]
        while pairs:
            src, dst = pairs.pop()
            for side in ("left", "right"):
                child = getattr(src, side)
                if child is not None:
                    dst[side] = {"value": child.value, "left": None, "right": None}
                    pairs.append((child, dst[side]))
        return out

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "BinaryTree":
        if data is None:
            return cls()
        root = _node_from_dict(data)
        pairs = [(data, root)]
        while pairs:
            src, dst = pairs.pop()
            for side in ("left", "right"):
                child = src.get(side)
                if child is not None:
                    node = _node_from_dict(child)
                    setattr(dst, side, node)
                    pairs.append((child, node))
        return cls(root)

    def __repr__(self) -> str:
        return f"BinaryTree(size={self.size()}, height={self.height()})"


def _node_from_dict(data) -> TreeNode:
    if not isinstance(data, dict) or "value" not in data:
        raise InvalidInput(f"Tree node must be an object with a 'value', got {data!r}")
    return TreeNode(data["value"])
