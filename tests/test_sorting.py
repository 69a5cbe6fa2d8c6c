"""Sort engines, driven through run_sort."""

from __future__ import annotations

import json
from collections import Counter

import pytest

from algorithms.step import SORT_KINDS, StepKind
from algorithms.variants import SortVariant
from engine import run_sort
from structures import InvalidInput, ValueArray

ALL_VARIANTS = [v.value for v in SortVariant]
IN_PLACE = ["bubble", "selection", "insertion", "quick"]

INPUTS = [
    [5, 3, 1],
    [3, 1, 2, 3, 1],
    [2, 1],
    [1, 2, 3, 4],
    [4, 4, 4],
    [-1.5, 3, 0, 2.25],
    list(range(10, 0, -1)),
    [7, 2, 9, 4, 4, 1, 8, 0, 3],
]


@pytest.mark.parametrize("values", INPUTS)
@pytest.mark.parametrize("variant", ALL_VARIANTS)
def test_final_frame_is_sorted_permutation(variant, values) -> None:
    steps = run_sort(values, variant)
    final = steps[-1]
    assert final.kind is StepKind.COMPLETE
    assert list(final.array) == sorted(values)
    assert final.sorted == tuple(range(len(values)))
    assert final.swapping == ()


@pytest.mark.parametrize("values", INPUTS)
@pytest.mark.parametrize("variant", ALL_VARIANTS)
def test_every_frame_is_a_permutation_of_the_input(variant, values) -> None:
    expected = Counter(values)
    steps = run_sort(values, variant)
    for step in steps:
        assert step.kind in SORT_KINDS
        assert Counter(step.array) == expected
    assert [s.step_number for s in steps] == list(range(len(steps)))


@pytest.mark.parametrize("values", INPUTS)
@pytest.mark.parametrize("variant", IN_PLACE)
def test_array_changes_only_across_swaps(variant, values) -> None:
    steps = run_sort(values, variant)
    for current, following in zip(steps, steps[1:]):
        expected = list(current.array)
        if current.kind is StepKind.SWAP:
            i, j = current.swapping
            expected[i], expected[j] = expected[j], expected[i]
        assert list(following.array) == expected


@pytest.mark.parametrize("variant", ALL_VARIANTS)
def test_single_element(variant) -> None:
    steps = run_sort([7], variant)
    assert len(steps) == 1
    assert steps[0].kind is StepKind.COMPLETE
    assert steps[0].array == (7,)
    assert steps[0].sorted == (0,)


def test_bubble_trace() -> None:
    steps = run_sort([5, 3, 1], SortVariant.BUBBLE)
    assert [s.kind for s in steps] == [
        StepKind.COMPARE, StepKind.SWAP,
        StepKind.COMPARE, StepKind.SWAP,
        StepKind.COMPARE, StepKind.SWAP,
        StepKind.COMPLETE,
    ]
    # swap frames show the array before the exchange
    assert steps[1].array == (5, 3, 1)
    assert steps[1].swapping == (0, 1)
    assert steps[4].sorted == (2,)
    assert steps[-1].array == (1, 3, 5)
    assert steps[-1].sorted == (0, 1, 2)


def test_bubble_on_sorted_input_never_swaps() -> None:
    kinds = [s.kind for s in run_sort([1, 2, 3], "bubble")]
    assert kinds == [StepKind.COMPARE] * 3 + [StepKind.COMPLETE]


def test_selection_swaps_at_most_once_per_pass() -> None:
    steps = run_sort([3, 1, 2], "selection")
    assert [s.kind for s in steps] == [
        StepKind.COMPARE, StepKind.COMPARE, StepKind.SWAP,
        StepKind.COMPARE, StepKind.SWAP,
        StepKind.COMPLETE,
    ]
    assert steps[2].swapping == (0, 1)
    assert steps[3].sorted == (0,)


def test_insertion_trace() -> None:
    steps = run_sort([3, 1, 2], "insertion")
    assert [s.kind for s in steps] == [
        StepKind.COMPARE, StepKind.SWAP,
        StepKind.COMPARE, StepKind.SWAP, StepKind.COMPARE,
        StepKind.COMPLETE,
    ]
    assert steps[3].array == (1, 3, 2)
    assert steps[4].comparing == (0, 1)


def test_merge_compares_whole_array_snapshots() -> None:
    steps = run_sort([2, 1], "merge")
    assert [s.kind for s in steps] == [StepKind.COMPARE, StepKind.COMPLETE]
    assert steps[0].array == (2, 1)
    assert steps[0].comparing == (0, 1)


def test_merge_writes_back_after_each_merge() -> None:
    steps = run_sort([4, 3, 2, 1], "merge")
    compares = [s for s in steps if s.kind is StepKind.COMPARE]
    # first merge [4] + [3] is visible before the second pair is merged
    assert compares[1].array == (3, 4, 2, 1)
    assert not any(s.kind is StepKind.SWAP for s in steps)


def test_quick_sort_on_sorted_input_has_no_swaps() -> None:
    kinds = [s.kind for s in run_sort([1, 2, 3], "quick")]
    assert kinds == [StepKind.COMPARE] * 3 + [StepKind.COMPLETE]


def test_quick_sort_places_pivot_with_a_swap() -> None:
    steps = run_sort([3, 1, 2], "quick")
    swap = next(s for s in steps if s.kind is StepKind.SWAP)
    # 1 moves left past 3, then pivot 2 drops into slot 1
    assert swap.swapping == (0, 1)
    pivot_swap = [s for s in steps if s.kind is StepKind.SWAP][-1]
    assert pivot_swap.swapping == (1, 2)
    assert [s.kind for s in steps].count(StepKind.COMPARE) == 2


def test_quick_sort_handles_long_sorted_input() -> None:
    values = list(range(400))
    assert list(run_sort(values, "quick")[-1].array) == values


class TestRunContract:
    def test_input_list_is_not_mutated(self) -> None:
        values = [3, 2, 1]
        run_sort(values, "bubble")
        assert values == [3, 2, 1]

    def test_value_array_input_is_not_mutated(self) -> None:
        arr = ValueArray([3, 2, 1])
        run_sort(arr, "quick")
        assert arr.values == [3, 2, 1]

    @pytest.mark.parametrize("variant", ALL_VARIANTS)
    def test_identical_inputs_give_identical_traces(self, variant) -> None:
        first = [s.to_dict() for s in run_sort([4, 1, 3, 1], variant)]
        second = [s.to_dict() for s in run_sort([4, 1, 3, 1], variant)]
        assert json.dumps(first) == json.dumps(second)

    @pytest.mark.parametrize(
        "values, message",
        [
            ([], "at least one"),
            (["a", 1], "not a number"),
            ([1, True], "not a number"),
            ([1, float("nan")], "not a number"),
            ("321", "sequence of numbers"),
            (None, "sequence of numbers"),
        ],
    )
    def test_bad_values(self, values, message) -> None:
        with pytest.raises(InvalidInput, match=message):
            run_sort(values, "bubble")

    @pytest.mark.parametrize("variant", ["bfs", "heap", ""])
    def test_unknown_variant(self, variant) -> None:
        with pytest.raises(InvalidInput, match="sort variant"):
            run_sort([2, 1], variant)
