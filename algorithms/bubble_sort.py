"""
bubble_sort.py — Bubble Sort
=============================
Sweeps left to right comparing adjacent pairs; after pass i the last i
slots hold their final values and are reported in `sorted`.

A COMPARE step precedes every comparison; a SWAP step (array shown before
the exchange) follows only when the pair is out of order.
"""

from typing import Generator, List

from algorithms.step import SortStep, Step, StepKind, sort_complete
from structures.array import ValueArray


PSEUDOCODE: List[str] = [
    "def BubbleSort(a):",
    "    for i in 0 … n-2:",
    "        for j in 0 … n-i-2:",
    "            if a[j] > a[j+1]:",
    "                swap(a[j], a[j+1])",
]


def bubble_sort(arr: ValueArray) -> Generator[Step, None, None]:
    n = len(arr)

    for i in range(n - 1):
        settled = tuple(range(n - i, n))
        for j in range(n - i - 1):
            yield SortStep(
                kind=StepKind.COMPARE,
                array=arr.snapshot(),
                comparing=(j, j + 1),
                sorted=settled,
                explanation=f"Compare a[{j}]={arr[j]} with a[{j + 1}]={arr[j + 1]}.",
            )
            if arr[j] > arr[j + 1]:
                yield SortStep(
                    kind=StepKind.SWAP,
                    array=arr.snapshot(),
                    comparing=(j, j + 1),
                    swapping=(j, j + 1),
                    sorted=settled,
                    explanation=f"{arr[j]} > {arr[j + 1]}: swap them.",
                )
                arr.swap(j, j + 1)

    yield sort_complete(arr.snapshot())
