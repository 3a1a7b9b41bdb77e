from minilisp.reader.parser import SyntaxNode, parse, from_lark
from minilisp.reader.reader import read, read_number

__all__ = ["SyntaxNode", "parse", "from_lark", "read", "read_number"]
