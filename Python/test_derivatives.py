import sympy as sy

from example_derivatives import derivatives
from stream import length, last


def test_polynomial_derivatives_end_at_constant():
    x = sy.symbols('x')
    ds = list(derivatives(x ** 3, x))
    assert ds == [x ** 3, 3 * x ** 2, 6 * x, 6]


def test_constant_has_no_derivatives():
    x = sy.symbols('x')
    assert list(derivatives(sy.Integer(5), x)) == [5]


def test_derivatives_can_be_traversed_again():
    x = sy.symbols('x')
    ds = derivatives(x ** 4 - 3 * x ** 2 + 7, x)
    assert length(ds) == 5
    assert last(ds) == 24
