from __future__ import annotations

from minilisp.types.value import Value


class Number(Value):
    __slots__ = ("value",)

    def __init__(self, value: float):
        self.value = float(value)

    def copy(self) -> Number:
        return Number(self.value)

    def __eq__(self, other) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value!r})"

    def __str__(self):
        return f"{self.value:f}"

    def render_element(self) -> str:
        # Shortest exact form inside lists: {1 2.5} rather than {1.000000 2.500000}
        if self.value.is_integer() and abs(self.value) < 1e16:
            return str(int(self.value))
        return repr(self.value)
