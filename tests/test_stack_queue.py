"""Stack and queue engines plus the script / task parsers behind them."""

from __future__ import annotations

import json

import pytest

from algorithms.step import QUEUE_KINDS, STACK_KINDS, StepKind
from algorithms.variants import QueueOperation, StackOperation
from engine import run_queue, run_stack
from engine.runner import QUEUE_OPERATIONS, STACK_OPERATIONS
from structures import InvalidInput, Operation, parse_operations, parse_tasks


def _verdict(text):
    return run_stack(text, "balanced_parens")[-1].outcome


class TestParsers:
    def test_every_operation_form(self) -> None:
        ops = parse_operations(["push 3", ["push", 2.5], {"op": "POP"}, "peek"], STACK_OPERATIONS)
        assert ops == [Operation("push", 3), Operation("push", 2.5), Operation("pop"), Operation("peek")]

    @pytest.mark.parametrize(
        "raw, match",
        [
            ("push 1", "must be a list"),
            ([], "at least one operation"),
            (["jump 1"], "unknown operation 'jump'"),
            (["push"], "push needs a number"),
            (["pop 3"], "pop takes no value"),
            (["push x"], "'x' is not a number"),
            (["push 1 2"], "expected 'name \\[value\\]'"),
            ([5], "cannot read"),
            ([[["push"]]], "unknown operation"),
        ],
    )
    def test_bad_operations(self, raw, match) -> None:
        with pytest.raises(InvalidInput, match=match):
            parse_operations(raw, STACK_OPERATIONS)

    def test_queue_names_are_not_stack_names(self) -> None:
        with pytest.raises(InvalidInput, match="unknown operation 'push'"):
            parse_operations(["push 1"], QUEUE_OPERATIONS)

    def test_tasks(self) -> None:
        tasks = parse_tasks([["A", 3], {"name": " B ", "burst": 1}])
        assert [(t.name, t.burst) for t in tasks] == [("A", 3), ("B", 1)]

    @pytest.mark.parametrize(
        "raw, match",
        [
            ({"A": 3}, "must be a list"),
            ([], "at least one task"),
            ([["A", 0]], "positive integer burst"),
            ([["A", 1.5]], "positive integer burst"),
            ([{"name": "", "burst": 1}], "non-empty string"),
            ([["A", 1], ["A", 2]], "Duplicate task name"),
            (["A"], "cannot read"),
        ],
    )
    def test_bad_tasks(self, raw, match) -> None:
        with pytest.raises(InvalidInput, match=match):
            parse_tasks(raw)


class TestStackOperations:
    def test_script(self) -> None:
        steps = run_stack(["push 1", ["push", 2], {"op": "peek"}, "pop", "pop", "pop"], "stack_ops")
        assert [s.kind for s in steps] == [
            StepKind.STACK_PUSH, StepKind.STACK_PUSH, StepKind.STACK_PEEK,
            StepKind.STACK_POP, StepKind.STACK_POP, StepKind.STACK_POP,
        ]
        assert [s.value for s in steps] == [1, 2, 2, 2, 1, None]
        assert [s.stack for s in steps] == [(1,), (1, 2), (1, 2), (1,), (), ()]
        assert [s.position for s in steps] == list(range(6))

    def test_peek_on_empty_stack(self) -> None:
        step = run_stack(["peek"], StackOperation.OPERATIONS)[0]
        assert step.value is None
        assert "empty" in step.explanation


class TestBalanced:
    @pytest.mark.parametrize("text", ["()", "(())", "(()())", "{[()]}", "a(b)c", ""])
    def test_balanced(self, text) -> None:
        assert _verdict(text) is True

    @pytest.mark.parametrize("text", ["(()", ")(", "([)]", "]"])
    def test_unbalanced(self, text) -> None:
        assert _verdict(text) is False

    def test_trace_of_nested_pair(self) -> None:
        steps = run_stack("(())", "balanced_parens")
        assert [s.kind for s in steps] == [
            StepKind.STACK_PUSH, StepKind.STACK_PUSH, StepKind.STACK_POP, StepKind.STACK_POP, StepKind.STACK_RESULT,
        ]
        assert [s.stack for s in steps[:4]] == [("(",), ("(", "("), ("(",), ()]

    def test_mismatch_stops_at_the_closer(self) -> None:
        steps = run_stack("([)]", "balanced_parens")
        assert [s.kind for s in steps] == [
            StepKind.STACK_PUSH, StepKind.STACK_PUSH, StepKind.STACK_POP, StepKind.STACK_RESULT,
        ]
        assert steps[-1].position == 2
        assert steps[2].value == "["

    def test_closer_on_empty_stack(self) -> None:
        steps = run_stack(")(", "balanced_parens")
        assert len(steps) == 1
        assert steps[0].token == ")"

    def test_needs_a_string(self) -> None:
        with pytest.raises(InvalidInput, match="needs a string"):
            run_stack(["(", ")"], "balanced_parens")


def test_reverse_string() -> None:
    steps = run_stack("HELLO", "reverse_string")
    assert len(steps) == 11
    assert [s.value for s in steps if s.kind is StepKind.STACK_POP] == list("OLLEH")
    assert steps[-1].outcome == "OLLEH"


class TestQueueOperations:
    def test_script(self) -> None:
        steps = run_queue(["enqueue 1", "enqueue 2", "peek", "dequeue", "dequeue", "dequeue"], "queue_ops")
        assert [s.value for s in steps] == [1, 2, 1, 1, 2, None]
        assert [s.queue for s in steps] == [(1,), (1, 2), (1, 2), (2,), (), ()]
        assert steps[-1].kind is StepKind.QUEUE_DEQUEUE

    def test_stack_names_are_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="unknown operation"):
            run_queue(["push 1"], QueueOperation.OPERATIONS)


class TestRoundRobin:
    def test_finish_times(self) -> None:
        steps = run_queue([["A", 3], ["B", 1], ["C", 2]], "round_robin", quantum=2)
        assert len(steps) == 12
        runs = [(s.value, s.remaining, s.clock) for s in steps if s.kind is StepKind.QUEUE_RUN]
        assert runs == [("A", 1, 2), ("B", 0, 3), ("C", 0, 5), ("A", 0, 6)]

    def test_unfinished_task_rejoins_the_back(self) -> None:
        steps = run_queue([["A", 3], ["B", 1], ["C", 2]], "round_robin", quantum=2)
        assert [s.kind for s in steps[:6]] == [
            StepKind.QUEUE_ENQUEUE, StepKind.QUEUE_ENQUEUE, StepKind.QUEUE_ENQUEUE,
            StepKind.QUEUE_DEQUEUE, StepKind.QUEUE_RUN, StepKind.QUEUE_ENQUEUE,
        ]
        assert steps[5].queue == ("B", "C", "A")

    def test_large_quantum_is_first_come_first_served(self) -> None:
        steps = run_queue([["A", 3], ["B", 1]], "round_robin", quantum=10)
        assert [s.clock for s in steps if s.kind is StepKind.QUEUE_RUN] == [3, 4]

    @pytest.mark.parametrize("quantum", [0, -1, 1.5, True, "2"])
    def test_bad_quantum(self, quantum) -> None:
        with pytest.raises(InvalidInput, match="Quantum must be a positive integer"):
            run_queue([["A", 1]], "round_robin", quantum=quantum)


@pytest.mark.parametrize(
    "runner, payload, variant, kinds",
    [
        (run_stack, ["push 1", "pop"], "stack_ops", STACK_KINDS),
        (run_stack, "{()}", "balanced_parens", STACK_KINDS),
        (run_stack, "abc", "reverse_string", STACK_KINDS),
        (run_queue, ["enqueue 1", "dequeue"], "queue_ops", QUEUE_KINDS),
        (run_queue, [["A", 2], ["B", 3]], "round_robin", QUEUE_KINDS),
    ],
)
def test_steps_are_numbered_and_json_safe(runner, payload, variant, kinds) -> None:
    steps = runner(payload, variant)
    assert [s.step_number for s in steps] == list(range(len(steps)))
    assert all(s.kind in kinds for s in steps)
    json.dumps([s.to_dict() for s in steps])
