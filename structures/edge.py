"""
edge.py — Undirected Weighted Edge
===================================
Connects two graph nodes with a positive integer weight.

Design decisions:
  - `source` and `target` are node ids, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Edges are undirected: `key` normalises the pair so (a, b) and (b, a)
    name the same edge, and the Graph refuses a second edge on a pair.
"""

from typing import Sequence, Tuple, Union

from structures.errors import InvalidInput


EdgeKey = Tuple[int, int]


class Edge:
    """
    Attributes:
        source : ID of one endpoint (as given by the caller).
        target : ID of the other endpoint.
        weight : Positive integer cost.
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: int, target: int, weight: int = 1):
        if not _is_int(source) or not _is_int(target):
            raise InvalidInput(f"Edge endpoints must be integer node ids, got {source!r}, {target!r}")
        if source == target:
            raise InvalidInput(f"Self-loop on node {source} is not an edge")
        if not _is_int(weight) or weight <= 0:
            raise InvalidInput(f"Edge {source}-{target} needs a positive integer weight, got {weight!r}")
        self.source: int = source
        self.target: int = target
        self.weight: int = weight

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def key(self) -> EdgeKey:
        return (self.source, self.target) if self.source <= self.target else (self.target, self.source)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.source, self.target, self.weight)

    @classmethod
    def coerce(cls, raw: Union["Edge", Sequence, dict]) -> "Edge":
        """Accept an Edge, an (a, b, weight) triple or a {"source", "target", "weight"} dict."""
        if isinstance(raw, Edge):
            return raw
        if isinstance(raw, dict):
            return cls.from_dict(raw)
        if isinstance(raw, (tuple, list)) and len(raw) == 3:
            return cls(raw[0], raw[1], raw[2])
        raise InvalidInput(f"Cannot read an edge from {raw!r}")

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        try:
            return cls(data["source"], data["target"], data.get("weight", 1))
        except KeyError as exc:
            raise InvalidInput(f"Edge is missing {exc.args[0]!r}") from exc

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.key == other.key and self.weight == other.weight

    def __hash__(self) -> int:
        return hash((self.key, self.weight))


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
