"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Edges are sorted by weight (stable, so equal weights keep the caller's
order) and fed through a union-find over the node ids.

For every edge, in sorted order:
  1. MST_CONSIDER
  2. MST_ACCEPT if its endpoints are in different components (merge them)
     MST_REJECT otherwise, since the edge would close a cycle

No edge is skipped and none is revisited, even once the tree is complete,
so the trace always holds exactly 2 × len(edges) steps.  Nodes without
any edges are still a valid input; the trace is then empty, and the
spanning forest is just the isolated nodes.
"""

from typing import Generator, Iterable, List, Sequence

from algorithms.step import MSTStep, Step, StepKind
from structures.edge import Edge
from structures.node import default_label
from structures.union_find import UnionFind


PSEUDOCODE: List[str] = [
    "def Kruskal(V, E):",
    "    sort E by weight (stable)",
    "    for v in V: make_set(v)",
    "    for (u, v, w) in E:",
    "        if find(u) ≠ find(v):",
    "            union(u, v); accept (u, v)",
    "        else: reject (u, v)  # cycle",
]


def kruskal(nodes: Iterable[int], edges: Sequence[Edge]) -> Generator[Step, None, None]:
    order = sorted(range(len(edges)), key=lambda k: edges[k].weight)
    components = UnionFind(nodes)
    accepted = []

    for idx in order:
        edge = edges[idx]
        name = f"{default_label(edge.source)}-{default_label(edge.target)}"

        yield MSTStep(
            kind=StepKind.MST_CONSIDER,
            source=edge.source,
            target=edge.target,
            weight=edge.weight,
            edge_index=idx,
            mst_edges=tuple(accepted),
            explanation=f"Consider edge {name} (weight {edge.weight}).",
        )

        if components.union(edge.source, edge.target):
            accepted.append(edge.as_tuple())
            yield MSTStep(
                kind=StepKind.MST_ACCEPT,
                source=edge.source,
                target=edge.target,
                weight=edge.weight,
                edge_index=idx,
                mst_edges=tuple(accepted),
                explanation=f"Add {name} to the tree: its endpoints were in different components.",
            )
        else:
            yield MSTStep(
                kind=StepKind.MST_REJECT,
                source=edge.source,
                target=edge.target,
                weight=edge.weight,
                edge_index=idx,
                mst_edges=tuple(accepted),
                explanation=f"Reject {name}: it would create a cycle.",
            )
