"""Reader: SyntaxNode trees to Minilisp values.

Numbers and symbols become atoms; the program root and every s-expression
node become an SExpression; q-expression nodes become a QExpression.
Punctuation leaves and regex anchors are structural noise and are skipped.
Children keep their source order.
"""

from __future__ import annotations

import math

from loguru import logger

from minilisp.errors import INVALID_NUMBER, MinilispReaderError
from minilisp.reader.parser import SyntaxNode
from minilisp.types import Error, Expression, Number, QExpression, SExpression, Symbol, Value

ROOT_TAG = "program"
PUNCTUATION = frozenset({"(", ")", "{", "}"})


def read(node: SyntaxNode) -> Value:
    """Convert a syntax tree into a value tree.

    Never fails except for malformed number literals, which read as
    `Error("invalid number")`. A tag the reader does not recognise is an
    upstream contract violation and raises MinilispReaderError.
    """
    if "number" in node.tag:
        return read_number(node.contents)
    if "symbol" in node.tag:
        return Symbol(node.contents)

    expr: Expression
    if node.tag == ROOT_TAG or "sexpr" in node.tag:
        expr = SExpression()
    elif "qexpr" in node.tag:
        expr = QExpression()
    else:
        raise MinilispReaderError(f"Cannot read syntax node tagged {node.tag!r}")

    for child in node.children:
        if child.contents in PUNCTUATION or child.tag == "regex":
            continue
        expr.append(read(child))
    return expr


def read_number(text: str) -> Number | Error:
    try:
        value = float(text)
    except ValueError:
        logger.debug("invalid number literal {!r}", text)
        return Error(INVALID_NUMBER)
    # Out of range for a double, or not a numeral at all (nan, inf)
    if not math.isfinite(value):
        logger.debug("number literal out of range {!r}", text)
        return Error(INVALID_NUMBER)
    return Number(value)
