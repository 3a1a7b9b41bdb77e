"""Arithmetic builtins.

Every operation reduces left to right with the first operand as the running
accumulator. Operands have already been checked to be Numbers by the dispatch
table; a domain error mid-reduction releases the remaining operands and
returns the Error in place of a result.
"""

from __future__ import annotations

import math
from typing import Callable

from minilisp.errors import BAD_OPERATOR, DIVISION_BY_ZERO, NON_NUMBER
from minilisp.types import Error, Number, SExpression, Value

# A binary step returns the new accumulator or an Error
Step = Callable[[float, float], "float | Error"]


def add(x: float, y: float) -> float:
    return x + y


def sub(x: float, y: float) -> float:
    return x - y


def mul(x: float, y: float) -> float:
    return x * y


def div(x: float, y: float) -> float | Error:
    if y == 0:
        return Error(DIVISION_BY_ZERO)
    return x / y


def mod(x: float, y: float) -> float | Error:
    """Remainder of the operands truncated toward zero; sign follows the dividend."""
    if math.isfinite(y) and int(y) == 0:
        return Error(DIVISION_BY_ZERO)
    if math.isnan(y) or not math.isfinite(x):
        return math.nan
    if math.isinf(y):
        return float(int(x))
    return math.fmod(int(x), int(y))


def power(x: float, y: float) -> float:
    """Real exponentiation with C `pow` results at the edges.

    Domain errors (negative base, fractional exponent) give NaN, zero to a
    negative power gives infinity, and overflow gives an infinity carrying
    the sign of the result.
    """
    try:
        return math.pow(x, y)
    except ValueError:
        return math.inf if x == 0 else math.nan
    except OverflowError:
        odd_exponent = y.is_integer() and int(y) % 2 == 1
        return -math.inf if x < 0 and odd_exponent else math.inf


def minimum(x: float, y: float) -> float:
    return min(x, y)


def maximum(x: float, y: float) -> float:
    return max(x, y)


def reduce_numbers(step: Step, operands: SExpression, negate_unary: bool = False) -> Value:
    """Fold `step` over the operand list, consuming it."""
    acc = operands.pop(0)
    if negate_unary and not operands:
        return Number(-acc.value)

    x = acc.value
    while operands:
        result = step(x, operands.pop(0).value)
        if isinstance(result, Error):
            operands.children.clear()
            return result
        x = result
    return Number(x)


def arithmetic(step: Step, negate_unary: bool = False) -> Callable[[SExpression], Value]:
    def builtin(operands: SExpression) -> Value:
        return reduce_numbers(step, operands, negate_unary)

    builtin.__name__ = step.__name__
    return builtin


def unknown_operator(operands: SExpression) -> Error:
    """Fallback for names missing from the table: the arithmetic type check, then 'bad operator'."""
    failed = any(not isinstance(operand, Number) for operand in operands)
    operands.children.clear()
    return Error(NON_NUMBER if failed else BAD_OPERATOR)
