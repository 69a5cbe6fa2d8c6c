"""
array.py — Array Model
=======================
The ordered, mutable sequence of numbers the sorting tab works on.
Identity is positional: engines refer to elements only by index.
"""

from numbers import Real
from typing import Iterable, List, Tuple

from structures.errors import InvalidInput


class ValueArray:
    __slots__ = ("values",)

    def __init__(self, values: Iterable[Real] = ()):
        self.values: List[Real] = list(values)

    @classmethod
    def from_values(cls, values) -> "ValueArray":
        """Validated constructor: non-empty, numbers only (bools rejected)."""
        if isinstance(values, (str, bytes)) or not hasattr(values, "__iter__"):
            raise InvalidInput(f"Expected a sequence of numbers, got {type(values).__name__}")
        values = list(values)
        if not values:
            raise InvalidInput("Sorting needs at least one element")
        for i, v in enumerate(values):
            if isinstance(v, bool) or not isinstance(v, Real) or v != v:
                raise InvalidInput(f"Element {i} is not a number: {v!r}")
        return cls(values)

    def swap(self, i: int, j: int) -> None:
        self.values[i], self.values[j] = self.values[j], self.values[i]

    def snapshot(self) -> Tuple[Real, ...]:
        return tuple(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, idx):
        return self.values[idx]

    def __setitem__(self, idx, value) -> None:
        self.values[idx] = value

    def __repr__(self) -> str:
        return f"ValueArray({self.values})"
