"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over a Grid or Graph.  Yields a Step at every event:
  1. Dequeue a node             →  VISIT (it is now finalised)
  2. Look at each open neighbour →  EXPLORE_EDGE
  3. Discover a new neighbour   →  UPDATE_DISTANCE (∞ → depth), enqueue

Distances are edge counts, so the first time the target is dequeued its
parent chain is a fewest-edges path.  Walls / blocked nodes never enter
the queue.  The generator writes distance / parent / is_visited onto the
structure it is given; the engine always hands it a private copy.
"""

from collections import deque
from typing import Generator, Hashable, List, Optional

from algorithms.step import SearchStep, Step, StepKind


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, source, target):",
    "    queue ← [source]",
    "    discovered ← {source}",
    "    while queue is not empty:",
    "        node ← queue.dequeue()",
    "        if node == target: return path",
    "        for neighbour in adj(node):",
    "            if neighbour not discovered:",
    "                discovered.add(neighbour)",
    "                dist[neighbour] ← dist[node] + 1",
    "                parent[neighbour] ← node",
    "                queue.enqueue(neighbour)",
    "    return NOT FOUND",
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(space, source: Hashable, target: Optional[Hashable]) -> Generator[Step, None, None]:
    """
    Args:
        space  : Grid or Graph (private copy, mutated in place).
        source : Start id.
        target : Goal id, or None to explore everything reachable.
    """

    space.node(source).distance = 0
    queue = deque([source])
    discovered = {source}

    while queue:
        node = queue.popleft()
        state = space.node(node)
        state.is_visited = True

        yield SearchStep(
            kind=StepKind.VISIT,
            node=node,
            new_distance=state.distance,
            explanation=(
                f"Dequeue {node} at depth {state.distance:g}. "
                f"BFS always expands the node that was discovered earliest (FIFO)."
            ),
        )

        if node == target:
            return

        for nbr, weight in space.successors(node):
            nbr_state = space.node(nbr)
            if nbr_state.is_visited:
                continue

            yield SearchStep(
                kind=StepKind.EXPLORE_EDGE,
                source=node,
                target=nbr,
                weight=weight,
                explanation=(
                    f"Examine {node} → {nbr}: "
                    + ("already queued, skip." if nbr in discovered else "new, enqueue it.")
                ),
            )

            if nbr not in discovered:
                discovered.add(nbr)
                old = nbr_state.distance
                nbr_state.distance = state.distance + 1
                nbr_state.parent = node
                queue.append(nbr)

                yield SearchStep(
                    kind=StepKind.UPDATE_DISTANCE,
                    source=node,
                    target=nbr,
                    old_distance=old,
                    new_distance=nbr_state.distance,
                    explanation=f"{nbr} is {nbr_state.distance:g} edge(s) from the source (parent = {node}).",
                )
