"""
operations.py — Scripted Stack / Queue Input
=============================================
The stack and queue tabs are driven by a script of button presses
("push 3", "pop", …) and the scheduler by a list of tasks.  Both arrive as
JSON, so parsing lives here and the engines only ever see clean objects.

Accepted operation forms:
    "push 3"                     → Operation("push", 3)
    ["push", 3]  /  ["pop"]
    {"op": "push", "value": 3}

Accepted task forms:
    ["P1", 3]
    {"name": "P1", "burst": 3}
"""

import math
from numbers import Real
from typing import Any, Dict, List, Optional

from structures.errors import InvalidInput


class Operation:
    __slots__ = ("name", "value")

    def __init__(self, name: str, value: Optional[Real] = None):
        self.name = name
        self.value = value

    def __repr__(self) -> str:
        return f"Operation({self.name}{'' if self.value is None else ' ' + repr(self.value)})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Operation) and (self.name, self.value) == (other.name, other.value)


class Task:
    __slots__ = ("name", "burst")

    def __init__(self, name: str, burst: int):
        if not isinstance(name, str) or not name.strip():
            raise InvalidInput(f"Task name must be a non-empty string, got {name!r}")
        if isinstance(burst, bool) or not isinstance(burst, int) or burst <= 0:
            raise InvalidInput(f"Task {name!r} needs a positive integer burst, got {burst!r}")
        self.name = name.strip()
        self.burst = burst

    def __repr__(self) -> str:
        return f"Task({self.name}, burst={self.burst})"


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------
def parse_operations(raw: Any, allowed: Dict[str, bool]) -> List[Operation]:
    """
    Args:
        raw     : List of operations in any accepted form.
        allowed : {operation name: takes a value}, e.g. {"push": True, "pop": False}.
    """
    if not isinstance(raw, list):
        raise InvalidInput("Operations must be a list")
    if not raw:
        raise InvalidInput("Need at least one operation")

    ops: List[Operation] = []
    for i, item in enumerate(raw):
        if isinstance(item, str):
            parts = item.split()
            if not 1 <= len(parts) <= 2:
                raise InvalidInput(f"Operation {i}: expected 'name [value]', got {item!r}")
            name = parts[0]
            value = _parse_number(parts[1], i) if len(parts) == 2 else None
        elif isinstance(item, (list, tuple)) and 1 <= len(item) <= 2:
            name, value = item[0], (item[1] if len(item) == 2 else None)
        elif isinstance(item, dict):
            name, value = item.get("op"), item.get("value")
        else:
            raise InvalidInput(f"Operation {i}: cannot read {item!r}")

        name = name.strip().lower() if isinstance(name, str) else name
        if not isinstance(name, str) or name not in allowed:
            choices = ", ".join(allowed)
            raise InvalidInput(f"Operation {i}: unknown operation {name!r} (expected one of: {choices})")
        if allowed[name]:
            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
                raise InvalidInput(f"Operation {i}: {name} needs a number, got {value!r}")
        elif value is not None:
            raise InvalidInput(f"Operation {i}: {name} takes no value")
        ops.append(Operation(name, value))
    return ops


def parse_tasks(raw: Any) -> List[Task]:
    if not isinstance(raw, list):
        raise InvalidInput("Tasks must be a list")
    if not raw:
        raise InvalidInput("Need at least one task")

    tasks: List[Task] = []
    names = set()
    for i, item in enumerate(raw):
        if isinstance(item, dict):
            task = Task(item.get("name"), item.get("burst"))
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            task = Task(item[0], item[1])
        else:
            raise InvalidInput(f"Task {i}: cannot read {item!r}")
        if task.name in names:
            raise InvalidInput(f"Duplicate task name {task.name!r}")
        names.add(task.name)
        tasks.append(task)
    return tasks


def _parse_number(token: str, index: int) -> Real:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        value = float(token)
    except ValueError:
        raise InvalidInput(f"Operation {index}: {token!r} is not a number") from None
    if not math.isfinite(value):
        raise InvalidInput(f"Operation {index}: {token!r} is not a finite number")
    return value
