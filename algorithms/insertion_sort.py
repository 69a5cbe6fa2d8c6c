"""
insertion_sort.py — Insertion Sort
===================================
The key a[i] walks left one slot at a time while its left neighbour is
strictly greater.  Each step left is an adjacent exchange, which is the
same as shifting the larger elements right and dropping the key into the
gap, but keeps every snapshot a permutation of the input.
"""

from typing import Generator, List

from algorithms.step import SortStep, Step, StepKind, sort_complete
from structures.array import ValueArray


PSEUDOCODE: List[str] = [
    "def InsertionSort(a):",
    "    for i in 1 … n-1:",
    "        key ← a[i]; j ← i - 1",
    "        while j ≥ 0 and a[j] > key:",
    "            a[j+1] ← a[j]; j ← j - 1",
    "        a[j+1] ← key",
]


def insertion_sort(arr: ValueArray) -> Generator[Step, None, None]:
    n = len(arr)

    for i in range(1, n):
        settled = tuple(range(i))
        j = i
        while j > 0:
            yield SortStep(
                kind=StepKind.COMPARE,
                array=arr.snapshot(),
                comparing=(j - 1, j),
                sorted=settled,
                explanation=f"Is a[{j - 1}]={arr[j - 1]} greater than the key {arr[j]}?",
            )
            if arr[j - 1] <= arr[j]:
                break
            yield SortStep(
                kind=StepKind.SWAP,
                array=arr.snapshot(),
                comparing=(j - 1, j),
                swapping=(j - 1, j),
                sorted=settled,
                explanation=f"Shift {arr[j - 1]} right; the key moves to slot {j - 1}.",
            )
            arr.swap(j - 1, j)
            j -= 1

    yield sort_complete(arr.snapshot())
