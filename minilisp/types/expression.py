"""S-expressions and Q-expressions.

Both are ordered containers that exclusively own their children. They are
structurally identical and differ only in how the evaluator treats them: an
SExpression is reduced, a QExpression is opaque data. Children are never
shared between two live containers; anything that must appear twice is
duplicated with `copy()` first.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from minilisp.types.value import Value


class Expression(Value):
    """Shared container behaviour for SExpression and QExpression."""

    __slots__ = ("children",)

    open_char = ""
    close_char = ""

    def __init__(self, children: Iterable[Value] | None = None):
        self.children: list[Value] = list(children) if children is not None else []

    @classmethod
    def adopt(cls, other: Expression) -> Expression:
        """Relabel `other` as this container type, moving its children without copying."""
        expr = cls()
        expr.children = other.children
        other.children = []
        return expr

    @property
    def count(self) -> int:
        return len(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.children)

    def __getitem__(self, index: int) -> Value:
        return self.children[index]

    def append(self, value: Value) -> Expression:
        self.children.append(value)
        return self

    def prepend(self, value: Value) -> Expression:
        self.children.insert(0, value)
        return self

    def extend(self, other: Expression) -> Expression:
        """Move every child of `other` onto the end of this container."""
        self.children.extend(other.children)
        other.children = []
        return self

    def pop(self, index: int = 0) -> Value:
        """Remove child `index` and hand ownership to the caller."""
        return self.children.pop(index)

    def take(self, index: int) -> Value:
        """Return child `index` and release the rest of the container."""
        value = self.children[index]
        self.children = []
        return value

    def copy(self) -> Expression:
        return type(self)(child.copy() for child in self.children)

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.children == other.children

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.children!r})"

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(self.open_char)
            buffer.write(" ".join(child.render_element() for child in self.children))
            buffer.write(self.close_char)
            return buffer.getvalue()


class SExpression(Expression):
    __slots__ = ()

    open_char = "("
    close_char = ")"


class QExpression(Expression):
    __slots__ = ()

    open_char = "{"
    close_char = "}"
