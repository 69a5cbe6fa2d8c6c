"""
tree_traversal.py — Binary Tree Walks
======================================
Depth-first orders differ only in WHEN the node is processed:

    preorder   process → left → right
    inorder    left → process → right
    postorder  left → right → process

Every descent into a child is bracketed by TREE_MOVE (entering) and
TREE_RETURN (leaving), nested with stack discipline, so the replay driver
can light and unlight the edge it is walking.  The walk uses an explicit
frame stack rather than recursion; a frame's stage says which half of the
node's work is left.

Level order is a FIFO walk: dequeue → TREE_PROCESS, then each existing
child is announced with TREE_MOVE before being enqueued.  There are no
returns in level order.

Expects a tree copied by BinaryTree.copy() (ids = preorder positions).
"""

from collections import deque
from typing import Generator, Set

from algorithms.step import Step, StepKind, TreeStep
from algorithms.variants import TraversalOrder
from structures.tree import BinaryTree, TreeNode


PSEUDOCODE = {
    TraversalOrder.PREORDER: [
        "def Preorder(node):",
        "    if node is None: return",
        "    process(node)",
        "    Preorder(node.left)",
        "    Preorder(node.right)",
    ],
    TraversalOrder.INORDER: [
        "def Inorder(node):",
        "    if node is None: return",
        "    Inorder(node.left)",
        "    process(node)",
        "    Inorder(node.right)",
    ],
    TraversalOrder.POSTORDER: [
        "def Postorder(node):",
        "    if node is None: return",
        "    Postorder(node.left)",
        "    Postorder(node.right)",
        "    process(node)",
    ],
    TraversalOrder.LEVELORDER: [
        "def LevelOrder(root):",
        "    queue ← [root]",
        "    while queue:",
        "        node ← queue.dequeue(); process(node)",
        "        if node.left:  queue.enqueue(node.left)",
        "        if node.right: queue.enqueue(node.right)",
    ],
}

# frame stages
_ENTER, _BETWEEN, _LEAVE = 0, 1, 2


def preorder(tree: BinaryTree) -> Generator[Step, None, None]:
    return _depth_first(tree, TraversalOrder.PREORDER)


def inorder(tree: BinaryTree) -> Generator[Step, None, None]:
    return _depth_first(tree, TraversalOrder.INORDER)


def postorder(tree: BinaryTree) -> Generator[Step, None, None]:
    return _depth_first(tree, TraversalOrder.POSTORDER)


def levelorder(tree: BinaryTree) -> Generator[Step, None, None]:
    processed: Set[int] = set()
    queue = deque([(tree.root, "", 0)])

    while queue:
        node, path, level = queue.popleft()
        _guard(node, processed)
        yield _process(node, path, level)

        for direction, child in (("left", node.left), ("right", node.right)):
            if child is None:
                continue
            child_path = path + direction[0].upper()
            yield _move(node, child, direction, child_path, level + 1)
            queue.append((child, child_path, level + 1))


def _depth_first(tree: BinaryTree, order: TraversalOrder) -> Generator[Step, None, None]:
    processed: Set[int] = set()
    stack = [(tree.root, "", 0, _ENTER)]

    while stack:
        node, path, level, stage = stack.pop()

        if stage == _ENTER:
            _guard(node, processed)
            if order is TraversalOrder.PREORDER:
                yield _process(node, path, level)
            stack.append((node, path, level, _BETWEEN))
            if node.left is not None:
                yield _move(node, node.left, "left", path + "L", level + 1)
                stack.append((node.left, path + "L", level + 1, _ENTER))

        elif stage == _BETWEEN:
            if node.left is not None:
                yield _return(node.left, node, path + "L", level + 1)
            if order is TraversalOrder.INORDER:
                yield _process(node, path, level)
            stack.append((node, path, level, _LEAVE))
            if node.right is not None:
                yield _move(node, node.right, "right", path + "R", level + 1)
                stack.append((node.right, path + "R", level + 1, _ENTER))

        else:
            if node.right is not None:
                yield _return(node.right, node, path + "R", level + 1)
            if order is TraversalOrder.POSTORDER:
                yield _process(node, path, level)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _guard(node: TreeNode, processed: Set[int]) -> None:
    if node.id in processed:
        raise RuntimeError(f"Tree node {node.id} reached twice during traversal")
    processed.add(node.id)


def _process(node: TreeNode, path: str, level: int) -> TreeStep:
    return TreeStep(
        kind=StepKind.TREE_PROCESS,
        node_id=node.id,
        value=node.value,
        path=path,
        level=level,
        explanation=f"Process {node.value!r}" + (f" (path {path})." if path else " (root)."),
    )


def _move(parent: TreeNode, child: TreeNode, direction: str, path: str, level: int) -> TreeStep:
    return TreeStep(
        kind=StepKind.TREE_MOVE,
        node_id=child.id,
        value=child.value,
        source_id=parent.id,
        target_id=child.id,
        direction=direction,
        path=path,
        level=level,
        explanation=f"Go {direction} from {parent.value!r} to {child.value!r}.",
    )


def _return(child: TreeNode, parent: TreeNode, path: str, level: int) -> TreeStep:
    return TreeStep(
        kind=StepKind.TREE_RETURN,
        node_id=parent.id,
        value=parent.value,
        source_id=child.id,
        target_id=parent.id,
        direction="up",
        path=path,
        level=level,
        explanation=f"Return from {child.value!r} up to {parent.value!r}.",
    )
