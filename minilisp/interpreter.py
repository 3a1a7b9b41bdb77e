from __future__ import annotations

from minilisp import LispValue
from minilisp.errors import MinilispError, MinilispNestingError
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import parse
from minilisp.reader.reader import read


class Interpreter:
    """
    Reads and evaluates Minilisp source one input at a time.
    The whole input is one program: its expressions form a single top-level
    S-expression, so `+ 1 2` and `(+ 1 2)` are equivalent.
    """

    def eval(self, code: str) -> LispValue:
        """Parse, read and evaluate `code`.

        Raises MinilispSyntaxError on malformed text and MinilispNestingError
        when the input nests deeper than the interpreter stack allows.
        """
        try:
            return evaluate(read(parse(code)))
        except RecursionError as e:
            raise MinilispNestingError("expression nested too deeply") from e

    def eval_to_str(self, code: str) -> str:
        """Evaluate `code` and render the result as a single output line."""
        try:
            result = self.eval(code)
        except MinilispError as e:
            return f"Error: {e}"
        return str(result)
