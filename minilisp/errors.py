"""Host exceptions and canonical error-value messages for Minilisp.

Language-level failures are ordinary `Error` values and never raise. The
exceptions below are reserved for contract violations outside the evaluation
core: text the grammar rejects, or a syntax tree the reader cannot interpret.
"""

class MinilispError(Exception):
    """ Base class for all Minilisp host errors"""
    pass

class MinilispSyntaxError(MinilispError):
    """ Raised when source text does not match the grammar"""

class MinilispReaderError(MinilispError):
    """ Raised when a syntax tree node cannot be read into a value"""

class MinilispNestingError(MinilispError):
    """ Raised when input is nested too deeply to read or evaluate"""


INVALID_NUMBER = "invalid number"
NOT_A_SYMBOL = "S-expression does not start with a symbol"
NON_NUMBER = "cannot operate on non-numbers"
DIVISION_BY_ZERO = "division by zero"
BAD_OPERATOR = "bad operator"


def arity_message(name: str, got: int, expected: int, at_least: bool = False) -> str:
    bound = f"at least {expected}" if at_least else str(expected)
    return f"function '{name}' passed wrong number of arguments: got {got}, expected {bound}"


def type_message(name: str, got: str, expected: str) -> str:
    return f"function '{name}' passed incorrect type: got {got}, expected {expected}"


def empty_message(name: str) -> str:
    return f"function '{name}' passed {{}}"
