"""Core evaluator for Minilisp.

Reduces a value tree to its final value. Atoms (numbers, errors, symbols,
functions and Q-expressions) evaluate to themselves. An S-expression has its
children evaluated left to right in place; the leftmost Error among them
becomes the result, an empty expression stays empty, a single child is
unwrapped, and otherwise the leading symbol is dispatched to the builtin
table with the remaining children as operands.

Errors are ordinary return values at every level and bubble up through the
error scan of each enclosing expression.
"""

from __future__ import annotations

from minilisp.builtin.table import dispatch
from minilisp.errors import NOT_A_SYMBOL
from minilisp.types import Error, SExpression, Symbol, Value


def evaluate(value: Value) -> Value:
    match value:
        case SExpression():
            return evaluate_sexpr(value)
    # --- Atoms return as-is ---
    return value


def evaluate_sexpr(expr: SExpression) -> Value:
    """Reduce an S-expression, consuming it."""
    children = expr.children
    for i, child in enumerate(children):
        children[i] = evaluate(child)

    for i, child in enumerate(children):
        if isinstance(child, Error):
            return expr.take(i)

    if not children:
        return expr
    if len(children) == 1:
        return expr.take(0)

    head = expr.pop(0)
    if not isinstance(head, Symbol):
        expr.children.clear()
        return Error(NOT_A_SYMBOL)
    return dispatch(head.id, expr)
