"""
astar.py — A* Search
=====================
Generator-based A* with priority f = g + h, where h is the structure's own
estimate: Manhattan distance to the target (admissible on 4-connected
unit-cost grids, so the path returned there is optimal).

Open / closed bookkeeping is explicit:
  • a neighbour enters the open set the first time it is reached
  • an already-open neighbour is only updated when the new tentative g is
    STRICTLY smaller than its current g
  • closed nodes are never reopened

Ties on f pop in the order nodes first entered the open set.  Superseded
heap entries (f larger than the node's current g + h) are skipped.

Yields the same event kinds as Dijkstra.
"""

import heapq
from typing import Dict, Generator, Hashable, List, Optional, Set

from algorithms.step import SearchStep, Step, StepKind


PSEUDOCODE: List[str] = [
    "def AStar(graph, source, target, h):",
    "    g[source] ← 0",
    "    open_set ← [(h(source), source)]",
    "    while open_set:",
    "        node ← open_set.pop_min_f()",
    "        if node == target: return path",
    "        closed.add(node)",
    "        for (nbr, w) in adj(node):",
    "            if nbr in closed: continue",
    "            tentative_g ← g[node] + w",
    "            if nbr in open_set and tentative_g ≥ g[nbr]: continue",
    "            parent[nbr] ← node; g[nbr] ← tentative_g",
    "            f[nbr] ← g[nbr] + h(nbr)",
    "            open_set.push((f[nbr], nbr))",
    "    return NOT FOUND",
]


def astar(space, source: Hashable, target: Optional[Hashable]) -> Generator[Step, None, None]:
    start = space.node(source)
    start.distance = 0
    start.heuristic = space.estimate(source, target)

    open_set: Set[Hashable] = {source}
    closed: Set[Hashable] = set()
    entered: Dict[Hashable, int] = {source: 0}
    heap = [(start.heuristic, 0, source)]

    while heap:
        f, _, node = heapq.heappop(heap)
        if node in closed:
            continue
        state = space.node(node)
        if f > state.distance + state.heuristic:
            continue

        open_set.discard(node)
        closed.add(node)
        state.is_visited = True

        yield SearchStep(
            kind=StepKind.VISIT,
            node=node,
            new_distance=state.distance,
            explanation=(
                f"Pop {node}: g={state.distance:g}, h={state.heuristic:g}, f={f:g}. "
                f"Move it to the closed set and expand its neighbours."
            ),
        )

        if node == target:
            return

        for nbr, weight in space.successors(node):
            if nbr in closed:
                continue
            nbr_state = space.node(nbr)
            tentative = state.distance + weight
            already_open = nbr in open_set
            improves = not already_open or tentative < nbr_state.distance

            yield SearchStep(
                kind=StepKind.EXPLORE_EDGE,
                source=node,
                target=nbr,
                weight=weight,
                explanation=(
                    f"Edge {node} → {nbr}: tentative g={tentative:g}"
                    + ("" if improves else f" ≥ current g={nbr_state.distance:g}, no improvement.")
                ),
            )

            if not improves:
                continue

            if not already_open:
                open_set.add(nbr)
                entered[nbr] = len(entered)
                nbr_state.heuristic = space.estimate(nbr, target)

            old = nbr_state.distance
            nbr_state.distance = tentative
            nbr_state.parent = node
            heapq.heappush(heap, (tentative + nbr_state.heuristic, entered[nbr], nbr))

            yield SearchStep(
                kind=StepKind.UPDATE_DISTANCE,
                source=node,
                target=nbr,
                weight=weight,
                old_distance=old,
                new_distance=tentative,
                explanation=(
                    f"g[{nbr}] {old:g} → {tentative:g}, h={nbr_state.heuristic:g}, "
                    f"f={tentative + nbr_state.heuristic:g}."
                ),
            )
