"""
stack_ops.py — Stack Algorithms
================================
LIFO algorithms, each step carrying a snapshot of the whole stack
(bottom first) after the step:

    stack_ops        replay a script of push / pop / peek
    balanced_parens  match (), [] and {} with a stack of openers
    reverse_string   push every character, then pop them all

Popping or peeking an empty stack is not an error in a script: the step
is recorded with value None, the way the stack tab greys out the button.
"""

from typing import Generator, List

from algorithms.step import StackStep, Step, StepKind
from algorithms.variants import StackOperation
from structures.operations import Operation


PSEUDOCODE = {
    StackOperation.OPERATIONS: [
        "for op in script:",
        "    push(v): stack.append(v)",
        "    pop():   return stack.pop()  if stack else None",
        "    peek():  return stack[-1]    if stack else None",
    ],
    StackOperation.BALANCED: [
        "def Balanced(text):",
        "    stack ← []",
        "    for ch in text:",
        "        if ch is an opener: push(ch)",
        "        elif ch is a closer:",
        "            if stack is empty: return False",
        "            if pop() does not match ch: return False",
        "    return stack is empty",
    ],
    StackOperation.REVERSE: [
        "def Reverse(text):",
        "    for ch in text: push(ch)",
        "    out ← ''",
        "    while stack: out ← out + pop()",
        "    return out",
    ],
}

PAIRS = {")": "(", "]": "[", "}": "{"}
OPENERS = frozenset(PAIRS.values())


def stack_operations(ops: List[Operation]) -> Generator[Step, None, None]:
    stack: list = []

    for pos, op in enumerate(ops):
        if op.name == "push":
            stack.append(op.value)
            yield StackStep(
                kind=StepKind.STACK_PUSH,
                value=op.value,
                stack=tuple(stack),
                position=pos,
                explanation=f"Push {op.value} onto the top. Depth is now {len(stack)}.",
            )
        elif op.name == "pop":
            value = stack.pop() if stack else None
            yield StackStep(
                kind=StepKind.STACK_POP,
                value=value,
                stack=tuple(stack),
                position=pos,
                explanation=(
                    "Stack is empty: nothing to pop." if value is None
                    else f"Pop {value} off the top (last in, first out)."
                ),
            )
        elif op.name == "peek":
            value = stack[-1] if stack else None
            yield StackStep(
                kind=StepKind.STACK_PEEK,
                value=value,
                stack=tuple(stack),
                position=pos,
                explanation=(
                    "Stack is empty: nothing to peek at." if value is None
                    else f"Peek: the top is {value}. The stack is unchanged."
                ),
            )
        else:
            raise RuntimeError(f"Unhandled stack operation {op.name!r}")


def balanced_parentheses(text: str) -> Generator[Step, None, None]:
    stack: List[str] = []

    for pos, ch in enumerate(text):
        if ch in OPENERS:
            stack.append(ch)
            yield StackStep(
                kind=StepKind.STACK_PUSH,
                value=ch,
                stack=tuple(stack),
                token=ch,
                position=pos,
                explanation=f"'{ch}' opens a group: push it.",
            )
        elif ch in PAIRS:
            if not stack:
                yield StackStep(
                    kind=StepKind.STACK_RESULT,
                    token=ch,
                    position=pos,
                    outcome=False,
                    explanation=f"'{ch}' at {pos} has no opener on the stack: unbalanced.",
                )
                return
            top = stack.pop()
            yield StackStep(
                kind=StepKind.STACK_POP,
                value=top,
                stack=tuple(stack),
                token=ch,
                position=pos,
                explanation=f"'{ch}' closes a group: pop '{top}'.",
            )
            if top != PAIRS[ch]:
                yield StackStep(
                    kind=StepKind.STACK_RESULT,
                    stack=tuple(stack),
                    token=ch,
                    position=pos,
                    outcome=False,
                    explanation=f"'{top}' cannot be closed by '{ch}': unbalanced.",
                )
                return

    balanced = not stack
    yield StackStep(
        kind=StepKind.STACK_RESULT,
        stack=tuple(stack),
        outcome=balanced,
        explanation=(
            "Every opener was closed: balanced." if balanced
            else f"{len(stack)} opener(s) never closed: unbalanced."
        ),
    )


def reverse_string(text: str) -> Generator[Step, None, None]:
    stack: List[str] = []
    for pos, ch in enumerate(text):
        stack.append(ch)
        yield StackStep(
            kind=StepKind.STACK_PUSH,
            value=ch,
            stack=tuple(stack),
            token=ch,
            position=pos,
            explanation=f"Push '{ch}'.",
        )

    out = ""
    while stack:
        ch = stack.pop()
        out += ch
        yield StackStep(
            kind=StepKind.STACK_POP,
            value=ch,
            stack=tuple(stack),
            explanation=f"Pop '{ch}'; output so far is '{out}'.",
        )

    yield StackStep(
        kind=StepKind.STACK_RESULT,
        outcome=out,
        explanation=f"Popping in LIFO order gives '{out}'.",
    )
