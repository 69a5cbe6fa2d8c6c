"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
The last element of the active range is the pivot.  Every element tested
against it is a COMPARE step; SWAP steps appear only for real exchanges,
including the final move of the pivot to its partition point.  Placed
pivots (and single-element ranges) are reported in `sorted`.

Ranges are kept on an explicit stack, left part before right part, so a
sorted input of any length cannot hit the recursion limit.
"""

from typing import Generator, List, Set, Tuple

from algorithms.step import SortStep, Step, StepKind, sort_complete
from structures.array import ValueArray


PSEUDOCODE: List[str] = [
    "def QuickSort(a, lo, hi):",
    "    if lo ≥ hi: return",
    "    pivot ← a[hi]; i ← lo - 1",
    "    for j in lo … hi-1:",
    "        if a[j] < pivot:",
    "            i ← i + 1; swap(a[i], a[j])",
    "    swap(a[i+1], a[hi])",
    "    QuickSort(a, lo, i); QuickSort(a, i+2, hi)",
]


def quick_sort(arr: ValueArray) -> Generator[Step, None, None]:
    placed: Set[int] = set()
    ranges: List[Tuple[int, int]] = [(0, len(arr) - 1)]

    while ranges:
        lo, hi = ranges.pop()
        if lo > hi:
            continue
        if lo == hi:
            placed.add(lo)
            continue

        pivot = arr[hi]
        settled = tuple(sorted(placed))
        i = lo - 1
        for j in range(lo, hi):
            yield SortStep(
                kind=StepKind.COMPARE,
                array=arr.snapshot(),
                comparing=(j, hi),
                sorted=settled,
                explanation=f"Compare a[{j}]={arr[j]} with pivot {pivot}.",
            )
            if arr[j] < pivot:
                i += 1
                if i != j:
                    yield SortStep(
                        kind=StepKind.SWAP,
                        array=arr.snapshot(),
                        comparing=(j, hi),
                        swapping=(i, j),
                        sorted=settled,
                        explanation=f"{arr[j]} < pivot: move it left to slot {i}.",
                    )
                    arr.swap(i, j)

        p = i + 1
        if p != hi:
            yield SortStep(
                kind=StepKind.SWAP,
                array=arr.snapshot(),
                swapping=(p, hi),
                sorted=settled,
                explanation=f"Place pivot {pivot} at its final slot {p}.",
            )
            arr.swap(p, hi)
        placed.add(p)

        # right pushed first so the left part is handled first
        ranges.append((p + 1, hi))
        ranges.append((lo, p - 1))

    yield sort_complete(arr.snapshot())
