from __future__ import annotations
from typing import Callable

from minilisp.types.value import Value


class Function(Value):
    """Reference to a builtin operation, callable by name only."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable):
        self.name = name
        self.fn = fn

    def copy(self) -> Function:
        # The builtin itself is shared, only the reference is duplicated
        return Function(self.name, self.fn)

    def __eq__(self, other) -> bool:
        return isinstance(other, Function) and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(id(self.fn))

    def __repr__(self):
        return f"Function({self.name!r})"

    def __str__(self):
        return "<function>"
