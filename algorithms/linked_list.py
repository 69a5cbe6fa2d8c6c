"""
linked_list.py — Linked List Walks
===================================
Three pointer algorithms over a singly linked list:

    list_search      walk from the head comparing each value to the target
    list_reverse     iterative prev / current / next reversal of the links
    cycle_detection  Floyd's tortoise and hare, then the walk to the cycle entry

Every step carries `links`, the (node_id, next_id) pair of every node after
the step, so a single frame can draw the arrows without replaying the run.

Expects a list copied by LinkedList.copy() (ids = positions from the head).
Search and reverse also expect it to be acyclic; the runner checks that.
"""

from typing import Generator, List, Optional, Tuple

from algorithms.step import ListStep, Step, StepKind
from algorithms.variants import ListOperation
from structures.linked_list import LinkedList, ListNode


PSEUDOCODE = {
    ListOperation.SEARCH: [
        "def Search(head, target):",
        "    current ← head; i ← 0",
        "    while current:",
        "        if current.value == target: return i",
        "        current ← current.next; i ← i + 1",
        "    return NOT FOUND",
    ],
    ListOperation.REVERSE: [
        "def Reverse(head):",
        "    prev ← None; current ← head",
        "    while current:",
        "        next ← current.next",
        "        current.next ← prev",
        "        prev ← current; current ← next",
        "    return prev",
    ],
    ListOperation.CYCLE: [
        "def HasCycle(head):",
        "    slow ← fast ← head",
        "    while fast and fast.next:",
        "        slow ← slow.next; fast ← fast.next.next",
        "        if slow is fast: break",
        "    else: return NO CYCLE",
        "    entry ← head",
        "    while entry is not slow:",
        "        entry ← entry.next; slow ← slow.next",
        "    return entry",
    ],
}


def list_search(lst: LinkedList, target) -> Generator[Step, None, None]:
    nodes = lst.nodes()
    cur: Optional[ListNode] = lst.head
    index = 0

    while cur is not None:
        match = cur.value == target
        yield ListStep(
            kind=StepKind.LIST_VISIT,
            node_id=cur.id,
            index=index,
            pointers=(("current", cur.id),),
            links=_links(nodes),
            explanation=(
                f"Node {index} holds {cur.value}"
                + (f", which equals {target}." if match else f", not {target}. Follow next.")
            ),
        )
        if match:
            yield ListStep(
                kind=StepKind.LIST_RESULT,
                node_id=cur.id,
                index=index,
                pointers=(("current", cur.id),),
                links=_links(nodes),
                outcome=True,
                explanation=f"Found {target} at index {index}.",
            )
            return
        cur = cur.next
        index += 1

    yield ListStep(
        kind=StepKind.LIST_RESULT,
        links=_links(nodes),
        outcome=False,
        explanation=f"Reached the end of the list without finding {target}.",
    )


def list_reverse(lst: LinkedList) -> Generator[Step, None, None]:
    nodes = lst.nodes()
    prev: Optional[ListNode] = None
    cur: Optional[ListNode] = lst.head

    while cur is not None:
        nxt = cur.next
        cur.next = prev
        yield ListStep(
            kind=StepKind.LIST_RELINK,
            node_id=cur.id,
            pointers=(("prev", _id(prev)), ("current", cur.id), ("next", _id(nxt))),
            links=_links(nodes),
            explanation=(
                f"Point node {cur.id} back at "
                + ("nothing: it becomes the new tail." if prev is None else f"node {prev.id}.")
            ),
        )
        prev, cur = cur, nxt

    lst.head = prev
    yield ListStep(
        kind=StepKind.LIST_RESULT,
        node_id=prev.id,
        index=0,
        pointers=(("head", prev.id),),
        links=_links(nodes),
        outcome=True,
        explanation=f"List reversed: node {prev.id} is the new head.",
    )


def cycle_detection(lst: LinkedList) -> Generator[Step, None, None]:
    nodes = lst.nodes()
    links = _links(nodes)
    slow = fast = lst.head
    met = False

    # phase 1: slow moves one node, fast moves two
    while fast is not None and fast.next is not None:
        slow, fast = slow.next, fast.next.next
        met = slow is fast
        yield ListStep(
            kind=StepKind.LIST_ADVANCE,
            node_id=slow.id,
            pointers=(("slow", slow.id), ("fast", fast.id)),
            links=links,
            explanation=(
                f"slow → node {slow.id}, fast → node {fast.id}."
                + (" They meet, so the list has a cycle." if met else "")
            ),
        )
        if met:
            break

    if not met:
        yield ListStep(
            kind=StepKind.LIST_RESULT,
            links=links,
            outcome=False,
            explanation="fast ran off the tail: the list has no cycle.",
        )
        return

    # phase 2: a pointer from the head and slow meet at the cycle entry
    entry = lst.head
    while entry is not slow:
        entry, slow = entry.next, slow.next
        yield ListStep(
            kind=StepKind.LIST_ADVANCE,
            node_id=entry.id,
            pointers=(("entry", entry.id), ("slow", slow.id)),
            links=links,
            explanation=f"entry → node {entry.id}, slow → node {slow.id}.",
        )

    yield ListStep(
        kind=StepKind.LIST_RESULT,
        node_id=entry.id,
        index=entry.id,
        pointers=(("entry", entry.id),),
        links=links,
        outcome=True,
        explanation=f"The cycle starts at node {entry.id}.",
    )


def _links(nodes: List[ListNode]) -> Tuple[Tuple[int, Optional[int]], ...]:
    return tuple((n.id, _id(n.next)) for n in nodes)


def _id(node: Optional[ListNode]) -> Optional[int]:
    return None if node is None else node.id
