"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra using a min-heap (heapq).

Yields a Step at:
  1. Pop the minimum-distance unvisited node  →  VISIT (distance is final)
  2. Each open neighbour                       →  EXPLORE_EDGE
  3. Successful relaxation                     →  UPDATE_DISTANCE, push

Heap entries are (distance, discovery_order, node).  Equal distances pop in
the order the nodes were first discovered, which keeps traces stable and
never compares node ids.  Stale entries (a node already finalised) are
skipped.  Nodes that are never reached stay at ∞ and are never pushed, so
an empty heap means "nothing finite left" and the run ends normally.

Grid moves cost 1; graph moves cost the edge weight.
"""

import heapq
from typing import Dict, Generator, Hashable, List, Optional

from algorithms.step import SearchStep, Step, StepKind


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, target):",
    "    dist ← {v: ∞ for v in V}; dist[source] ← 0",
    "    pq ← [(0, source)]",
    "    while pq is not empty:",
    "        (d, node) ← pq.pop_min()",
    "        if node visited: continue",
    "        visited.add(node)",
    "        if node == target: return path",
    "        for (neighbour, w) in adj(node):",
    "            if d + w < dist[neighbour]:",
    "                dist[neighbour] ← d + w",
    "                parent[neighbour] ← node",
    "                pq.push((dist[neighbour], neighbour))",
    "    return NOT FOUND",
]


def dijkstra(space, source: Hashable, target: Optional[Hashable]) -> Generator[Step, None, None]:
    discovered: Dict[Hashable, int] = {source: 0}
    space.node(source).distance = 0
    pq = [(0, 0, source)]

    while pq:
        d, _, node = heapq.heappop(pq)
        state = space.node(node)

        # stale entry
        if state.is_visited:
            continue

        state.is_visited = True

        yield SearchStep(
            kind=StepKind.VISIT,
            node=node,
            new_distance=d,
            explanation=(
                f"Pop {node} with distance {d:g}, the smallest in the priority queue. "
                f"This distance is now final."
            ),
        )

        if node == target:
            return

        for nbr, weight in space.successors(node):
            nbr_state = space.node(nbr)
            if nbr_state.is_visited:
                continue

            new_dist = d + weight
            improves = new_dist < nbr_state.distance

            yield SearchStep(
                kind=StepKind.EXPLORE_EDGE,
                source=node,
                target=nbr,
                weight=weight,
                explanation=(
                    f"Relax {node} → {nbr}: {d:g} + {weight:g} = {new_dist:g} "
                    + (f"< {nbr_state.distance:g}, update." if improves
                       else f"≥ {nbr_state.distance:g}, no improvement.")
                ),
            )

            if improves:
                discovered.setdefault(nbr, len(discovered))
                old = nbr_state.distance
                nbr_state.distance = new_dist
                nbr_state.parent = node
                heapq.heappush(pq, (new_dist, discovered[nbr], nbr))

                yield SearchStep(
                    kind=StepKind.UPDATE_DISTANCE,
                    source=node,
                    target=nbr,
                    weight=weight,
                    old_distance=old,
                    new_distance=new_dist,
                    explanation=f"dist[{nbr}] {old:g} → {new_dist:g} via {node}.",
                )
