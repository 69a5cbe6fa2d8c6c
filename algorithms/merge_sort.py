"""
merge_sort.py — Merge Sort
===========================
Top-down: split at the midpoint, sort both halves, merge.

Every element-vs-element test during a merge is a COMPARE step whose
`array` is the ENTIRE working array, so one step is enough to draw the
frame.  The merged run is written back once the merge finishes; until
then the compared indices still point at the values being tested.
"""

from typing import Generator, List

from algorithms.step import SortStep, Step, StepKind, sort_complete
from structures.array import ValueArray


PSEUDOCODE: List[str] = [
    "def MergeSort(a, lo, hi):",
    "    if lo ≥ hi: return",
    "    mid ← (lo + hi) // 2",
    "    MergeSort(a, lo, mid); MergeSort(a, mid+1, hi)",
    "    i ← lo; j ← mid+1; out ← []",
    "    while i ≤ mid and j ≤ hi:",
    "        if a[i] ≤ a[j]: out.append(a[i]); i ← i+1",
    "        else:           out.append(a[j]); j ← j+1",
    "    a[lo … hi] ← out + a[i … mid] + a[j … hi]",
]


def merge_sort(arr: ValueArray) -> Generator[Step, None, None]:
    yield from _sort(arr, 0, len(arr) - 1)
    yield sort_complete(arr.snapshot())


def _sort(arr: ValueArray, lo: int, hi: int) -> Generator[Step, None, None]:
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    yield from _sort(arr, lo, mid)
    yield from _sort(arr, mid + 1, hi)
    yield from _merge(arr, lo, mid, hi)


def _merge(arr: ValueArray, lo: int, mid: int, hi: int) -> Generator[Step, None, None]:
    i, j = lo, mid + 1
    merged = []
    while i <= mid and j <= hi:
        yield SortStep(
            kind=StepKind.COMPARE,
            array=arr.snapshot(),
            comparing=(i, j),
            explanation=f"Merge [{lo}…{mid}] with [{mid + 1}…{hi}]: compare {arr[i]} and {arr[j]}.",
        )
        if arr[i] <= arr[j]:
            merged.append(arr[i])
            i += 1
        else:
            merged.append(arr[j])
            j += 1
    merged.extend(arr[i:mid + 1])
    merged.extend(arr[j:hi + 1])
    arr[lo:hi + 1] = merged
