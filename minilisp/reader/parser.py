"""Grammar front end for Minilisp.

Source text is parsed with lark and converted into `SyntaxNode` trees, the
library-neutral shape the reader consumes. Every node carries a grammar tag
and, for leaves, the literal text. Punctuation is kept in the tree as leaves
tagged `lpar`, `rpar`, `lbrace` and `rbrace`; the reader skips them.

    program
      sexpr
        lpar '('
        symbol '+'
        number '1'
        number '2'
        rpar ')'
"""

from __future__ import annotations

from dataclasses import dataclass, field

import lark
from loguru import logger

from minilisp.errors import MinilispSyntaxError


@dataclass
class SyntaxNode:
    tag: str
    contents: str = ""
    children: list[SyntaxNode] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


_parsers: dict[str, lark.Lark] = {}


def parse(source: str) -> SyntaxNode:
    """Parse source text into a SyntaxNode tree rooted at a `program` node.

    Raises MinilispSyntaxError if the text does not match the grammar.
    """
    parser = _lark_parser("minilisp")
    try:
        tree = parser.parse(source)
    except lark.exceptions.UnexpectedInput as e:
        message = _describe(e)
        logger.debug("parse failed: {}", message)
        raise MinilispSyntaxError(message) from e
    return from_lark(tree)


def from_lark(node: lark.Tree | lark.Token) -> SyntaxNode:
    """Convert a lark Tree/Token into a SyntaxNode tree."""
    if isinstance(node, lark.Token):
        return SyntaxNode(node.type.lower(), node.value)
    return SyntaxNode(str(node.data), "", [from_lark(kid) for kid in node.children])


def _describe(error: lark.exceptions.UnexpectedInput) -> str:
    match error:
        case lark.exceptions.UnexpectedCharacters():
            return f"unexpected character {error.char!r} at line {error.line}, column {error.column}"
        case lark.exceptions.UnexpectedToken() if error.token.type != "$END":
            return f"unexpected {error.token.value!r} at line {error.line}, column {error.column}"
        case _:
            return "unexpected end of input"


def _lark_parser(name: str) -> lark.Lark:
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    parser = lark.Lark.open(
        f"{name}.lark", rel_to=__file__, start="program", parser="lalr", keep_all_tokens=True
    )
    _parsers[name] = parser
    return parser
