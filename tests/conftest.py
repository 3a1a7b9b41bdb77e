import pytest

from minilisp.interpreter import Interpreter


@pytest.fixture
def interp():
    """Fresh interpreter for each test."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source text and return the rendered output line."""
    return interp.eval_to_str
