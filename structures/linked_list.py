"""
linked_list.py — Singly Linked List Model
==========================================
Nodes holding a number and a `next` reference.  The list tab builds its
lists from a row of values, so `from_values` is the main constructor.

Design decisions:
  - Node ids are positions from the head at build time.  They survive a
    reversal, so a step can name a node after its position has changed.
  - The tail may point back at an earlier node (`cycle_to`).  Every walk
    keeps an identity guard and stops before revisiting a node, so a cyclic
    list is never walked forever.
"""

import math
from numbers import Real
from typing import Any, Iterable, List, Optional

from structures.errors import InvalidInput


class ListNode:
    """
    Attributes:
        value : The payload (a number).
        next  : Following node, or None at the tail.
        id    : Position from the head when the list was built.
    """

    __slots__ = ("value", "next", "id")

    def __init__(self, value: Real, next: "Optional[ListNode]" = None, node_id: Optional[int] = None):
        self.value = value
        self.next = next
        self.id = node_id

    def __repr__(self) -> str:
        return f"ListNode(id={self.id}, value={self.value!r})"


class LinkedList:
    def __init__(self, head: Optional[ListNode] = None):
        self.head = head

    @classmethod
    def from_values(cls, values: Iterable[Any], cycle_to: Optional[int] = None) -> "LinkedList":
        """Validated constructor.  `cycle_to` links the tail back to that index."""
        if isinstance(values, (str, bytes)) or not hasattr(values, "__iter__"):
            raise InvalidInput(f"Expected a sequence of numbers, got {type(values).__name__}")
        values = list(values)
        for i, v in enumerate(values):
            if isinstance(v, bool) or not isinstance(v, Real) or not math.isfinite(v):
                raise InvalidInput(f"List element {i} is not a number: {v!r}")

        nodes = [ListNode(v, node_id=i) for i, v in enumerate(values)]
        for node, nxt in zip(nodes, nodes[1:]):
            node.next = nxt

        if cycle_to is not None:
            if isinstance(cycle_to, bool) or not isinstance(cycle_to, int):
                raise InvalidInput(f"cycle_to must be an index, got {cycle_to!r}")
            if not 0 <= cycle_to < len(nodes):
                raise InvalidInput(f"cycle_to {cycle_to} is outside a list of {len(nodes)} nodes")
            nodes[-1].next = nodes[cycle_to]

        return cls(nodes[0] if nodes else None)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def nodes(self) -> List[ListNode]:
        """Head-first, stopping before the first node seen twice."""
        result: List[ListNode] = []
        seen = set()
        cur = self.head
        while cur is not None and id(cur) not in seen:
            if not isinstance(cur, ListNode):
                raise InvalidInput(f"List link must be a ListNode, got {cur!r}")
            seen.add(id(cur))
            result.append(cur)
            cur = cur.next
        return result

    def cycle_entry(self) -> Optional[int]:
        """Index of the node the tail links back to, or None."""
        nodes = self.nodes()
        if not nodes or nodes[-1].next is None:
            return None
        back = nodes[-1].next
        for i, node in enumerate(nodes):
            if node is back:
                return i
        raise RuntimeError("Tail links to a node outside the list")

    @property
    def has_cycle(self) -> bool:
        return self.cycle_entry() is not None

    def values(self) -> List[Any]:
        return [node.value for node in self.nodes()]

    def __len__(self) -> int:
        return len(self.nodes())

    # ------------------------------------------------------------------
    # Copy / serialisation
    # ------------------------------------------------------------------
    def copy(self) -> "LinkedList":
        """Fresh nodes, ids = positions, same cycle."""
        return LinkedList.from_values(self.values(), cycle_to=self.cycle_entry())

    def to_dict(self) -> dict:
        return {"values": self.values(), "cycle_to": self.cycle_entry()}

    @classmethod
    def from_dict(cls, data: dict) -> "LinkedList":
        if not isinstance(data, dict):
            raise InvalidInput("Linked list description must be an object")
        if "values" not in data:
            raise InvalidInput("Linked list description is missing 'values'")
        return cls.from_values(data["values"], cycle_to=data.get("cycle_to"))

    def __repr__(self) -> str:
        return f"LinkedList({self.values()}, cycle_to={self.cycle_entry()})"
