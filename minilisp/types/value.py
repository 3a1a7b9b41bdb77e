from __future__ import annotations


class Value:
    """Common base for every runtime datum.

    Subclasses render themselves through `__str__` and produce fully
    independent duplicates through `copy()`.
    """

    __slots__ = ()

    def copy(self) -> Value:
        raise NotImplementedError

    def render_element(self) -> str:
        """Rendering used when this value appears inside a container."""
        return str(self)

    @property
    def type_name(self) -> str:
        return type(self).__name__
