"""
graph.py — Weighted Graph Container
====================================
Single source of truth for the graph tab.  The search engine and the MST
engine both talk to this object.

Responsibilities:
  1. CRUD on nodes & edges                  (add / get)
  2. Search surface                         (successors, estimate, …)
  3. Import from adjacency-list text        (text → graph)
  4. Serialisation round-trip               (to_dict / from_dict)
  5. Reset / copy helpers                   (wipe search state, keep structure)

Design decisions:
  - Nodes stored in a dict keyed by integer id, edges in a dict keyed by
    the normalised (low, high) pair, so there is at most one edge per pair.
  - A separate adjacency dict  `_adj[node_id] → [(neighbour_id, edge_key)]`
    is maintained incrementally so successor queries are O(degree), not O(E),
    and iterate in insertion order (deterministic traces).
  - The graph is undirected; the search surface (successors / estimate /
    path_to / copy) matches Grid so one search engine serves both.
"""

from typing import Dict, List, Optional, Tuple

from structures.errors import InvalidInput
from structures.node import Node
from structures.edge import Edge, EdgeKey


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}
        edges : {(low_id, high_id): Edge}
        _adj  : {node_id: [(neighbour_id, edge_key), …]}
    """

    def __init__(self):
        self.nodes: Dict[int, Node]                       = {}
        self.edges: Dict[EdgeKey, Edge]                   = {}
        self._adj:  Dict[int, List[Tuple[int, EdgeKey]]]  = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        if not isinstance(node.id, int) or isinstance(node.id, bool):
            raise InvalidInput(f"Node id must be an integer, got {node.id!r}")
        if node.id in self.nodes:
            raise InvalidInput(f"Duplicate node id {node.id}")
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, node_id: int, label: Optional[str] = None, x: float = 0.0, y: float = 0.0) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id, label=label, x=x, y=y))

    def node(self, node_id: int) -> Node:
        return self.nodes[node_id]

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        for end in (edge.source, edge.target):
            if end not in self.nodes:
                raise InvalidInput(f"Edge {edge.source}-{edge.target} references unknown node {end}")
        if edge.key in self.edges:
            raise InvalidInput(f"Nodes {edge.source} and {edge.target} already share an edge")
        self.edges[edge.key] = edge
        self._adj[edge.source].append((edge.target, edge.key))
        self._adj[edge.target].append((edge.source, edge.key))
        return edge

    def create_edge(self, source: int, target: int, weight: int = 1) -> Edge:
        return self.add_edge(Edge(source, target, weight))

    def get_edge_between(self, a: int, b: int) -> Optional[Edge]:
        return self.edges.get((a, b) if a <= b else (b, a))

    def edge_list(self) -> List[Edge]:
        """Edges in insertion order."""
        return list(self.edges.values())

    # ==================================================================
    # SEARCH SURFACE (shared with Grid)
    # ==================================================================
    def coerce_id(self, raw) -> int:
        if not isinstance(raw, int) or isinstance(raw, bool):
            raise InvalidInput(f"Graph node id must be an integer, got {raw!r}")
        if raw not in self.nodes:
            raise InvalidInput(f"Node {raw} is not in the graph")
        return raw

    def node_ids(self) -> List[int]:
        return list(self.nodes.keys())

    def __contains__(self, node_id) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def is_blocked(self, node_id: int) -> bool:
        return self.nodes[node_id].blocked

    def successors(self, node_id: int) -> List[Tuple[int, int]]:
        """Unblocked neighbours as [(neighbour_id, weight)] in insertion order."""
        return [
            (nbr, self.edges[key].weight)
            for nbr, key in self._adj.get(node_id, [])
            if not self.nodes[nbr].blocked
        ]

    def estimate(self, a: int, b: Optional[int]) -> float:
        """Manhattan distance between node coordinates (0 when unset)."""
        if b is None:
            return 0.0
        na, nb = self.nodes[a], self.nodes[b]
        return abs(na.x - nb.x) + abs(na.y - nb.y)

    def path_to(self, node_id: int) -> List[int]:
        """Follow parent ids back to the source.  Empty if never reached."""
        if not self.nodes[node_id].is_visited:
            return []
        path: List[int] = []
        seen = set()
        cur: Optional[int] = node_id
        while cur is not None:
            if cur in seen:
                raise RuntimeError(f"Parent chain cycles at node {cur}")
            seen.add(cur)
            path.append(cur)
            cur = self.nodes[cur].parent
        path.reverse()
        return path

    def path_cost(self, path: List[int]) -> int:
        return sum(self.edges[_key(path[i], path[i + 1])].weight for i in range(len(path) - 1))

    # ==================================================================
    # RESET / COPY (keep structure, wipe algo state)
    # ==================================================================
    def reset_search_state(self) -> None:
        for node in self.nodes.values():
            node.reset_search_state()

    def copy(self) -> "Graph":
        return Graph.from_dict(self.to_dict())

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        if not isinstance(data, dict):
            raise InvalidInput("Graph description must be an object")
        nodes, edges = data.get("nodes", []), data.get("edges", [])
        if not isinstance(nodes, list) or not isinstance(edges, list):
            raise InvalidInput("Graph 'nodes' and 'edges' must be lists")
        g = cls()
        for nd in nodes:
            if isinstance(nd, dict):
                try:
                    g.add_node(Node.from_dict(nd))
                except KeyError as exc:
                    raise InvalidInput(f"Node is missing {exc.args[0]!r}") from exc
            else:
                g.create_node(nd)
        for ed in edges:
            g.add_edge(Edge.coerce(ed))
        return g

    # ---------- Import from Adjacency List (text) ----------
    @classmethod
    def from_adjacency_list(cls, text: str) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line, integer ids):
            0: 1 2 3            → 0 connects to 1, 2, 3  (weight 1)
            0: 1(3) 2(7)        → 0–1 weight 3, 0–2 weight 7
            0 -> 1(5), 2(3)     → alternate arrow syntax, comma-separated

        An edge listed from both ends is added once (first weight wins).
        """
        g = cls()
        adjacency: Dict[int, List[Tuple[int, int]]] = {}

        for lineno, line in enumerate(text.strip().splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                parts = line.split(":", 1)
            elif "->" in line:
                parts = line.split("->", 1)
            else:
                raise InvalidInput(f"Line {lineno}: expected 'node: neighbours', got {line!r}")

            src = _parse_id(parts[0].strip(), lineno)
            adjacency.setdefault(src, [])

            for token in parts[1].replace(",", " ").split():
                # parse optional weight: "3(7)" or "3"
                if "(" in token and token.endswith(")"):
                    tgt_str, w_str = token[:-1].split("(", 1)
                    tgt, w = _parse_id(tgt_str, lineno), _parse_id(w_str, lineno)
                else:
                    tgt, w = _parse_id(token, lineno), 1
                adjacency.setdefault(tgt, [])
                adjacency[src].append((tgt, w))

        for node_id in adjacency:
            g.create_node(node_id)
        for src, targets in adjacency.items():
            for tgt, w in targets:
                if g.get_edge_between(src, tgt) is None:
                    g.create_edge(src, tgt, w)
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"


def _key(a: int, b: int) -> EdgeKey:
    return (a, b) if a <= b else (b, a)


def _parse_id(token: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidInput(f"Line {lineno}: {token!r} is not an integer") from None
