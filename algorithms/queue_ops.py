"""
queue_ops.py — Queue Algorithms
================================
FIFO algorithms over collections.deque, each step carrying a snapshot of
the queue (front first) after the step:

    queue_ops    replay a script of enqueue / dequeue / peek
    round_robin  time-sliced scheduling: the front task runs for at most
                 `quantum` units, then rejoins the back if work remains

All tasks arrive at time 0 in input order.  Each scheduling turn yields
QUEUE_DEQUEUE, QUEUE_RUN and, for an unfinished task, QUEUE_ENQUEUE.
"""

from collections import deque
from typing import Deque, Generator, List, Tuple

from algorithms.step import QueueStep, Step, StepKind
from algorithms.variants import QueueOperation
from structures.operations import Operation, Task


PSEUDOCODE = {
    QueueOperation.OPERATIONS: [
        "for op in script:",
        "    enqueue(v): queue.append(v)",
        "    dequeue():  return queue.popleft() if queue else None",
        "    peek():     return queue[0]        if queue else None",
    ],
    QueueOperation.ROUND_ROBIN: [
        "def RoundRobin(tasks, quantum):",
        "    for t in tasks: enqueue(t)",
        "    clock ← 0",
        "    while queue:",
        "        t ← dequeue()",
        "        run ← min(quantum, t.remaining)",
        "        clock ← clock + run; t.remaining ← t.remaining - run",
        "        if t.remaining > 0: enqueue(t)",
        "        else: t finishes at clock",
    ],
}


def queue_operations(ops: List[Operation]) -> Generator[Step, None, None]:
    queue: deque = deque()

    for pos, op in enumerate(ops):
        if op.name == "enqueue":
            queue.append(op.value)
            yield QueueStep(
                kind=StepKind.QUEUE_ENQUEUE,
                value=op.value,
                queue=tuple(queue),
                position=pos,
                explanation=f"Enqueue {op.value} at the back. Length is now {len(queue)}.",
            )
        elif op.name == "dequeue":
            value = queue.popleft() if queue else None
            yield QueueStep(
                kind=StepKind.QUEUE_DEQUEUE,
                value=value,
                queue=tuple(queue),
                position=pos,
                explanation=(
                    "Queue is empty: nothing to dequeue." if value is None
                    else f"Dequeue {value} from the front (first in, first out)."
                ),
            )
        elif op.name == "peek":
            value = queue[0] if queue else None
            yield QueueStep(
                kind=StepKind.QUEUE_PEEK,
                value=value,
                queue=tuple(queue),
                position=pos,
                explanation=(
                    "Queue is empty: nothing at the front." if value is None
                    else f"Peek: {value} is at the front. The queue is unchanged."
                ),
            )
        else:
            raise RuntimeError(f"Unhandled queue operation {op.name!r}")


def round_robin(tasks: List[Task], quantum: int) -> Generator[Step, None, None]:
    queue: Deque[Tuple[str, int]] = deque()

    for pos, task in enumerate(tasks):
        queue.append((task.name, task.burst))
        yield QueueStep(
            kind=StepKind.QUEUE_ENQUEUE,
            value=task.name,
            queue=_names(queue),
            position=pos,
            remaining=task.burst,
            clock=0,
            explanation=f"{task.name} arrives needing {task.burst} unit(s).",
        )

    clock = 0
    while queue:
        name, remaining = queue.popleft()
        yield QueueStep(
            kind=StepKind.QUEUE_DEQUEUE,
            value=name,
            queue=_names(queue),
            remaining=remaining,
            clock=clock,
            explanation=f"{name} reaches the front and gets the CPU.",
        )

        run = min(quantum, remaining)
        clock += run
        remaining -= run
        yield QueueStep(
            kind=StepKind.QUEUE_RUN,
            value=name,
            queue=_names(queue),
            remaining=remaining,
            clock=clock,
            explanation=(
                f"{name} runs for {run} unit(s)"
                + (f", {remaining} left." if remaining else f" and finishes at t={clock}.")
            ),
        )

        if remaining:
            queue.append((name, remaining))
            yield QueueStep(
                kind=StepKind.QUEUE_ENQUEUE,
                value=name,
                queue=_names(queue),
                remaining=remaining,
                clock=clock,
                explanation=f"Quantum used up: {name} rejoins the back of the queue.",
            )


def _names(queue) -> Tuple[str, ...]:
    return tuple(name for name, _ in queue)
