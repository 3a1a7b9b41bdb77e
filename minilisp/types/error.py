from __future__ import annotations

from minilisp.types.value import Value


class Error(Value):
    """An error marker. Terminal for the subtree that produced it."""

    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def copy(self) -> Error:
        return Error(self.message)

    def __eq__(self, other) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __repr__(self):
        return f"Error({self.message!r})"

    def __str__(self):
        return f"Error: {self.message}"
