import math
from numbers import Real
from typing import Optional

from structures.errors import InvalidInput


INF = float("inf")


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Immutable identity (id, label), optional position and search state.

    Attributes:
        id          : Unique integer identifier.
        label       : Human-readable name (defaults to A, B, C … by id).
        x, y        : Optional coordinates; A* estimates with them.
        blocked     : Obstacle flag; search never enters a blocked node.
        is_visited  : Set by the search engine when the node is finalised.
        is_path     : Set when the node lies on the reconstructed path.
        distance    : Best known distance from the source (INF = unreached).
        heuristic   : A* estimate to the target.
        parent      : Id of the predecessor on the best path, or None.
    """

    __slots__ = (
        "id", "label", "x", "y", "blocked",
        "is_visited", "is_path", "distance", "heuristic", "parent",
    )

    def __init__(
        self,
        node_id: int,
        label: Optional[str] = None,
        x: float = 0.0,
        y: float = 0.0,
    ):
        for axis, value in (("x", x), ("y", y)):
            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
                raise InvalidInput(f"Node {node_id!r} needs a numeric {axis} coordinate, got {value!r}")
        self.id:      int   = node_id
        self.label:   str   = label if label is not None else default_label(node_id)
        self.x:       float = x
        self.y:       float = y
        self.blocked: bool  = False
        self.reset_search_state()

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------
    def reset_search_state(self) -> None:
        """Softer reset: keep blocked flag, clear only algorithm state."""
        self.is_visited: bool          = False
        self.is_path:    bool          = False
        self.distance:   float         = INF
        self.heuristic:  float         = 0.0
        self.parent:     Optional[int] = None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":      self.id,
            "label":   self.label,
            "x":       self.x,
            "y":       self.y,
            "blocked": self.blocked,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        node = cls(data["id"], label=data.get("label"), x=data.get("x", 0.0), y=data.get("y", 0.0))
        node.blocked = bool(data.get("blocked", False))
        return node

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, blocked={self.blocked})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def default_label(node_id: int) -> str:
    """0 → 'A', 1 → 'B', … 26 → 'AA', the lettering the graph tab shows."""
    if not isinstance(node_id, int) or node_id < 0:
        return str(node_id)
    label = ""
    n = node_id
    while True:
        label = chr(65 + n % 26) + label
        n = n // 26 - 1
        if n < 0:
            return label
