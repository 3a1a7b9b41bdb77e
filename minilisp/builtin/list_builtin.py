"""List builtins over Q-expressions.

Operand lists arrive already validated for arity, type and emptiness by the
dispatch table. Each builtin consumes its operands: containers are relabelled
or mutated in place rather than copied.
"""

from __future__ import annotations

from minilisp.types import Number, QExpression, SExpression, Value


def builtin_list(operands: SExpression) -> QExpression:
    """(list a b c) => {a b c}"""
    return QExpression.adopt(operands)


def builtin_head(operands: SExpression) -> QExpression:
    """(head {a b c}) => {a}"""
    qexpr = operands.take(0)
    del qexpr.children[1:]
    return qexpr


def builtin_tail(operands: SExpression) -> QExpression:
    """(tail {a b c}) => {b c}"""
    qexpr = operands.take(0)
    qexpr.pop(0)
    return qexpr


def builtin_eval(operands: SExpression) -> Value:
    """(eval {+ 1 2}) => 3, the quoted list evaluated as an s-expression."""
    # Lazy import to avoid circular imports
    from minilisp.evaluation.evaluator import evaluate

    qexpr = operands.take(0)
    return evaluate(SExpression.adopt(qexpr))


def builtin_join(operands: SExpression) -> QExpression:
    """(join {a} {b c} {}) => {a b c}"""
    result = operands.pop(0)
    while operands.count:
        result.extend(operands.pop(0))
    return result


def builtin_cons(operands: SExpression) -> QExpression:
    """(cons a {b c}) => {a b c}"""
    value = operands.pop(0)
    qexpr = operands.take(0)
    return qexpr.prepend(value)


def builtin_len(operands: SExpression) -> Number:
    """(len {a b c}) => 3"""
    qexpr = operands.take(0)
    return Number(qexpr.count)
