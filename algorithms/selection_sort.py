"""
selection_sort.py — Selection Sort
===================================
Each pass scans the unsorted suffix for its minimum and swaps it into
place once.  The settled prefix is reported in `sorted`.
"""

from typing import Generator, List

from algorithms.step import SortStep, Step, StepKind, sort_complete
from structures.array import ValueArray


PSEUDOCODE: List[str] = [
    "def SelectionSort(a):",
    "    for i in 0 … n-2:",
    "        min ← i",
    "        for j in i+1 … n-1:",
    "            if a[j] < a[min]: min ← j",
    "        if min ≠ i: swap(a[i], a[min])",
]


def selection_sort(arr: ValueArray) -> Generator[Step, None, None]:
    n = len(arr)

    for i in range(n - 1):
        settled = tuple(range(i))
        min_idx = i
        for j in range(i + 1, n):
            yield SortStep(
                kind=StepKind.COMPARE,
                array=arr.snapshot(),
                comparing=(min_idx, j),
                sorted=settled,
                explanation=f"Is a[{j}]={arr[j]} smaller than the current minimum a[{min_idx}]={arr[min_idx]}?",
            )
            if arr[j] < arr[min_idx]:
                min_idx = j

        if min_idx != i:
            yield SortStep(
                kind=StepKind.SWAP,
                array=arr.snapshot(),
                swapping=(i, min_idx),
                sorted=settled,
                explanation=f"Move the minimum {arr[min_idx]} into slot {i}.",
            )
            arr.swap(i, min_idx)

    yield sort_complete(arr.snapshot())
