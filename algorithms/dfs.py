"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields a Step at:
  1. Pop an unvisited node  →  VISIT
  2. Each open neighbour    →  EXPLORE_EDGE, then pushed onto the stack

Stack entries are (node, parent) pairs.  A node can sit on the stack more
than once; the first copy popped wins and later copies are skipped by the
visited check, so the parent recorded is always the node that led to the
visit.  Neighbours are pushed in reverse so the first one listed is the
first one explored, matching the recursive formulation.

No shortest-path guarantee.
"""

from typing import Generator, Hashable, List, Optional, Tuple

from algorithms.step import SearchStep, Step, StepKind


PSEUDOCODE: List[str] = [
    "def DFS(graph, source, target):",
    "    stack ← [(source, none)]",
    "    while stack is not empty:",
    "        (node, from) ← stack.pop()",
    "        if node in visited: continue",
    "        visited.add(node); parent[node] ← from",
    "        if node == target: return path",
    "        for neighbour in reversed(adj(node)):",
    "            if neighbour not visited:",
    "                stack.push((neighbour, node))",
    "    return NOT FOUND",
]


def dfs(space, source: Hashable, target: Optional[Hashable]) -> Generator[Step, None, None]:
    stack: List[Tuple[Hashable, Optional[Hashable]]] = [(source, None)]

    while stack:
        node, parent = stack.pop()
        state = space.node(node)

        # already visited (can happen because we mark-on-pop)
        if state.is_visited:
            continue

        state.is_visited = True
        state.parent = parent
        state.distance = 0 if parent is None else space.node(parent).distance + 1

        yield SearchStep(
            kind=StepKind.VISIT,
            node=node,
            new_distance=state.distance,
            explanation=(
                f"Pop {node} from the stack and mark it visited. "
                f"DFS explores its neighbours before backtracking."
            ),
        )

        if node == target:
            return

        fresh = []
        for nbr, weight in space.successors(node):
            if space.node(nbr).is_visited:
                continue
            fresh.append(nbr)
            yield SearchStep(
                kind=StepKind.EXPLORE_EDGE,
                source=node,
                target=nbr,
                weight=weight,
                explanation=f"Edge {node} → {nbr}: unvisited, push onto the stack.",
            )

        stack.extend((nbr, node) for nbr in reversed(fresh))
