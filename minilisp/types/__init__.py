from minilisp.types.value import Value
from minilisp.types.number import Number
from minilisp.types.symbol import Symbol
from minilisp.types.error import Error
from minilisp.types.function import Function
from minilisp.types.expression import Expression, SExpression, QExpression

__all__ = [
    "Value",
    "Number",
    "Symbol",
    "Error",
    "Function",
    "Expression",
    "SExpression",
    "QExpression",
]
