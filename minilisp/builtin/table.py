"""Builtin dispatch table.

Maps operator names to `Builtin` descriptors. A descriptor declares the
operand requirements (arity, operand type and the positions it applies to,
non-emptiness) and `dispatch` validates an operand list against them before
handing it to the reduction function. Validation failures release the
operand list and return an Error value; nothing here raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from loguru import logger

from minilisp.builtin import arithmetic as ar
from minilisp.builtin import list_builtin as lb
from minilisp.errors import NON_NUMBER, arity_message, empty_message, type_message
from minilisp.types import Error, Function, Number, QExpression, SExpression, Value


@dataclass(frozen=True)
class Builtin:
    name: str
    fn: Callable[[SExpression], Value]
    # Exact operand count; None means any count of at least `min_arity`
    arity: int | None = None
    min_arity: int = 0
    operand_type: type[Value] | None = None
    # Operand positions `operand_type` applies to; None means every operand
    typed_positions: tuple[int, ...] | None = None
    non_empty: bool = False
    # Overrides the generic incorrect-type message
    type_error: str | None = None

    def validate(self, operands: SExpression) -> Error | None:
        """Return the first violated requirement as an Error, or None."""
        got = operands.count
        if self.arity is not None and got != self.arity:
            return Error(arity_message(self.name, got, self.arity))
        if got < self.min_arity:
            return Error(arity_message(self.name, got, self.min_arity, at_least=True))

        if self.operand_type is None:
            return None
        positions = self.typed_positions if self.typed_positions is not None else range(got)
        for i in positions:
            operand = operands[i]
            if not isinstance(operand, self.operand_type):
                if self.type_error is not None:
                    return Error(self.type_error)
                return Error(type_message(self.name, operand.type_name, self.operand_type.__name__))
            if self.non_empty and not operand.count:
                return Error(empty_message(self.name))
        return None

    def __call__(self, operands: SExpression) -> Value:
        error = self.validate(operands)
        if error is not None:
            operands.children.clear()
            return error
        return self.fn(operands)


def _numeric(name: str, step: ar.Step, negate_unary: bool = False) -> Builtin:
    return Builtin(
        name,
        ar.arithmetic(step, negate_unary),
        min_arity=1,
        operand_type=Number,
        type_error=NON_NUMBER,
    )


def _quoted(name: str, fn: Callable[[SExpression], Value], **requirements) -> Builtin:
    return Builtin(name, fn, operand_type=QExpression, **requirements)


def _table() -> dict[str, Builtin]:
    entries = [
        (("add", "+"), _numeric("add", ar.add)),
        (("sub", "-"), _numeric("sub", ar.sub, negate_unary=True)),
        (("mul", "*"), _numeric("mul", ar.mul)),
        (("div", "/"), _numeric("div", ar.div)),
        (("mod", "%"), _numeric("mod", ar.mod)),
        (("pow", "^"), _numeric("pow", ar.power)),
        (("min",), _numeric("min", ar.minimum)),
        (("max",), _numeric("max", ar.maximum)),
        (("list",), Builtin("list", lb.builtin_list)),
        (("head",), _quoted("head", lb.builtin_head, arity=1, non_empty=True)),
        (("tail",), _quoted("tail", lb.builtin_tail, arity=1, non_empty=True)),
        (("eval",), _quoted("eval", lb.builtin_eval, arity=1)),
        (("join",), _quoted("join", lb.builtin_join, min_arity=1)),
        (("cons",), _quoted("cons", lb.builtin_cons, arity=2, typed_positions=(1,))),
        (("len",), _quoted("len", lb.builtin_len, arity=1)),
    ]
    return {name: builtin for names, builtin in entries for name in names}


BUILTINS: dict[str, Builtin] = _table()


def dispatch(name: str, operands: SExpression) -> Value:
    """Apply the builtin called `name` to `operands`, consuming them."""
    logger.debug("dispatch {} with {} operand(s)", name, operands.count)
    builtin = BUILTINS.get(name)
    if builtin is None:
        return ar.unknown_operator(operands)
    result = builtin(operands)
    if isinstance(result, Error):
        logger.debug("{} -> {}", name, result)
    return result


def builtin_function(name: str) -> Function:
    """Return a Function value referring to the builtin called `name`.

    Raises KeyError if no builtin has that name.
    """
    builtin = BUILTINS[name]
    return Function(builtin.name, builtin)
