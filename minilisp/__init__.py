# Core type aliases for the Minilisp data model.
# Every runtime datum is a `Value` subclass (Number, Error, Symbol, Function,
# SExpression, QExpression). Errors are values, never exceptions.

from loguru import logger

from minilisp.types import (
    Error,
    Expression,
    Function,
    Number,
    QExpression,
    SExpression,
    Symbol,
    Value,
)

# Runtime value alias
LispValue = Value

# Library logging is off until an application enables it
logger.disable("minilisp")

from minilisp.reader import parse, read  # noqa: E402
from minilisp.evaluation import evaluate  # noqa: E402
from minilisp.builtin import BUILTINS, dispatch  # noqa: E402
from minilisp.interpreter import Interpreter  # noqa: E402

__version__ = "0.0.1"

__all__ = [
    "LispValue",
    "Value",
    "Number",
    "Error",
    "Symbol",
    "Function",
    "Expression",
    "SExpression",
    "QExpression",
    "parse",
    "read",
    "evaluate",
    "dispatch",
    "BUILTINS",
    "Interpreter",
]
