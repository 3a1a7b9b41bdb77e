import pytest

from minilisp.builtin import builtin_function
from minilisp.evaluation.evaluator import evaluate
from minilisp.types import Error, Number, QExpression, SExpression, Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("+ 1 2", "3.000000"),
        ("(+ 1 (* 2 3))", "7.000000"),
        ("/ 10 0", "Error: division by zero"),
        ("head {1 2 3}", "{1}"),
        ("join {1 2} {3 4}", "{1 2 3 4}"),
        ("eval {+ 1 2}", "3.000000"),
        ("(1 2 3)", "Error: S-expression does not start with a symbol"),
        ("", "()"),
        ("()", "()"),
        ("(6)", "6.000000"),
        ("((((6))))", "6.000000"),
        ("((+ 1 2))", "3.000000"),
        ("{1 (+ 2 3) {4}}", "{1 (+ 2 3) {4}}"),
        ("head", "head"),
        ("(+)", "+"),
        ("- (* 2 (+ 3 4)) (/ 12 3)", "10.000000"),
        ("eval (list 1 2 3)", "Error: S-expression does not start with a symbol"),
        ("eval (head {(+ 1 2) (+ 10 20)})", "3.000000"),
        ("eval (tail {tail tail {5 6 7}})", "{6 7}"),
    ],
)
def test_eval_source(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 (/ 2 0) (foo))", "Error: division by zero"),
        ("(+ (/ 1 0) (head {}))", "Error: division by zero"),
        ("(+ (head {}) (/ 1 0))", "Error: function 'head' passed {}"),
        ("+ 1 (* 2 (- 3 (/ 4 0)))", "Error: division by zero"),
        ("list 1 (1 2) 3", "Error: S-expression does not start with a symbol"),
        ("head {1 2} (+ 1 {})", "Error: cannot operate on non-numbers"),
        ("{1 2} 3 (% 1 0)", "Error: division by zero"),
    ],
)
def test_errors_short_circuit_enclosing_expressions(run, source, expected):
    assert run(source) == expected


def test_error_message_preserved_verbatim(interp):
    inner = interp.eval("(/ 1 0)")
    outer = interp.eval("(+ 1 (+ 2 (+ 3 (/ 1 0))))")
    assert inner == outer == Error("division by zero")


@pytest.mark.parametrize(
    "atom",
    [
        Number(1),
        Error("bad operator"),
        Symbol("x"),
        builtin_function("+"),
        QExpression([SExpression([Symbol("+"), Number(1), Number(2)])]),
    ],
)
def test_atoms_evaluate_to_themselves(atom):
    assert evaluate(atom) is atom


def test_qexpr_contents_are_not_evaluated():
    q = QExpression([SExpression([Symbol("/"), Number(1), Number(0)])])
    assert str(evaluate(q)) == "{(/ 1 0)}"


def test_sexpr_children_evaluated_in_place():
    expr = SExpression([Symbol("+"), SExpression([Symbol("*"), Number(2), Number(3)]), Number(1)])
    assert evaluate(expr) == Number(7)


def test_empty_sexpr_is_identity():
    empty = SExpression()
    assert evaluate(empty) is empty


def test_single_child_is_unwrapped():
    q = QExpression([Number(1)])
    assert evaluate(SExpression([q])) is q


def test_non_symbol_head():
    expr = SExpression([QExpression(), Number(1)])
    assert evaluate(expr) == Error("S-expression does not start with a symbol")
    assert expr.count == 0


def test_function_head_is_not_dispatched():
    expr = SExpression([builtin_function("+"), Number(1), Number(2)])
    assert evaluate(expr) == Error("S-expression does not start with a symbol")


def test_leftmost_error_wins():
    expr = SExpression([Symbol("+"), Error("first"), Number(1), Error("second")])
    assert evaluate(expr) == Error("first")
