import pytest

from minilisp.builtin import builtin_function
from minilisp.types import Error, Function, Number, QExpression, SExpression, Symbol


def nums(*xs):
    return [Number(x) for x in xs]


@pytest.mark.parametrize(
    "value,expected",
    [
        (Number(3), "3.000000"),
        (Number(-0.5), "-0.500000"),
        (Number(1 / 3), "0.333333"),
        (Error("division by zero"), "Error: division by zero"),
        (Symbol("head"), "head"),
        (Symbol("+"), "+"),
        (SExpression(), "()"),
        (QExpression(), "{}"),
        (SExpression([Symbol("+"), *nums(1, 2)]), "(+ 1 2)"),
        (QExpression(nums(1, 2, 3)), "{1 2 3}"),
        (QExpression(nums(2.5, -1)), "{2.5 -1}"),
        (QExpression([Number(1), SExpression([Symbol("x")]), QExpression()]), "{1 (x) {}}"),
        (SExpression([QExpression([QExpression(nums(4))])]), "({{4}})"),
        (builtin_function("head"), "<function>"),
    ],
)
def test_render(value, expected):
    assert str(value) == expected


def test_copy_is_deep_and_independent():
    original = QExpression([Number(1), QExpression([Symbol("a")]), SExpression([Symbol("b")])])
    duplicate = original.copy()

    assert duplicate == original
    assert duplicate is not original
    for mine, theirs in zip(original, duplicate):
        assert mine is not theirs

    duplicate[1].append(Number(2))
    duplicate.pop(0)
    assert str(original) == "{1 {a} (b)}"
    assert str(duplicate) == "{{a 2} (b)}"


@pytest.mark.parametrize(
    "value",
    [Number(7), Error("bad operator"), Symbol("tail"), builtin_function("join"), SExpression(), QExpression()],
)
def test_copy_preserves_variant_and_payload(value):
    duplicate = value.copy()
    assert type(duplicate) is type(value)
    assert duplicate == value
    assert str(duplicate) == str(value)


def test_function_copy_shares_the_builtin():
    fn = builtin_function("+")
    duplicate = fn.copy()
    assert duplicate.fn is fn.fn
    assert duplicate.name == "add"
    assert builtin_function("add") == fn


def test_function_wraps_callable():
    fn = Function("double", lambda operands: Number(operands.pop(0).value * 2))
    assert fn.fn(SExpression(nums(4))) == Number(8)


def test_sexpr_and_qexpr_are_distinct():
    assert SExpression(nums(1)) != QExpression(nums(1))
    assert SExpression() != QExpression()


def test_empty_container_is_not_an_error():
    empty = QExpression()
    assert empty.count == 0
    assert not isinstance(empty, Error)
    assert empty != Error("")


def test_adopt_moves_children():
    sexpr = SExpression(nums(1, 2, 3))
    children = sexpr.children
    qexpr = QExpression.adopt(sexpr)
    assert isinstance(qexpr, QExpression)
    assert qexpr.children is children
    assert sexpr.count == 0


def test_container_operations_preserve_order():
    q = QExpression(nums(2, 3))
    q.prepend(Number(1))
    q.append(Number(4))
    other = QExpression(nums(5, 6))
    q.extend(other)
    assert str(q) == "{1 2 3 4 5 6}"
    assert other.count == 0
    assert q.pop(0) == Number(1)
    assert q.take(1) == Number(3)
    assert q.count == 0


def test_symbols_compare_by_name():
    assert Symbol("eval") == Symbol("eval")
    assert Symbol("eval") != Symbol("list")
    assert hash(Symbol("x")) == hash(Symbol("x"))
    assert Symbol("1") != Number(1)
