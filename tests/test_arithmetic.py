"""Test the variadic arithmetic primitives and sqrt."""
import random

import pytest

from arithmetic_calculator.common.arithmetic import add, divide, multiply, sqrt, subtract
from arithmetic_calculator.common.errors import DivideByZeroError, InvalidArgumentError


@pytest.mark.parametrize("values,expected", [
    ((), 0.0),
    ((1, 1, 1), 3.0),              # 3 positive numbers
    ((-1, -1, -1), -3.0),          # 3 negative numbers
    ((-1, 1, 0), 0.0),             # negative and positive cancel out
    ((2.5,), 2.5),
])
def test_add(values, expected) -> None:
    """add returns the sum of its operands."""
    assert add(*values) == expected


@pytest.mark.parametrize("a,b", [(1.5, 2.25), (-3, 7), (0, 0), (1e6, -2.5)])
def test_add_is_commutative(a, b) -> None:
    """add(a, b) == add(b, a)."""
    assert add(a, b) == add(b, a)


def test_add_is_associative() -> None:
    """Grouping does not change the sum for exact magnitudes."""
    assert add(add(1, 2), 3) == add(1, add(2, 3)) == add(1, 2, 3)


@pytest.mark.parametrize("values,expected", [
    ((), 0.0),                     # empty input
    ((100,), 100.0),               # single operand is returned as is
    ((1, 1, 1), -1.0),
    ((5, 1, 1), 3.0),
    ((-1, -1, -1, -1), 2.0),
])
def test_subtract(values, expected) -> None:
    """subtract folds left from the first operand."""
    assert subtract(*values) == expected


def test_subtract_is_order_sensitive() -> None:
    """Swapping operands changes the sign of the difference."""
    assert subtract(10, 4) == 6.0
    assert subtract(4, 10) == -6.0


def test_multiply_empty_returns_zero() -> None:
    """An empty product is 0, not the multiplicative identity 1."""
    assert multiply() == 0.0
    assert multiply() != 1.0


def _random_products(count: int, seed: int = 1234):
    """Generate (operands, expected product) pairs from a seeded RNG."""
    rng = random.Random(seed)
    cases = []
    for _ in range(count):
        operands = [float(rng.randint(1, 10)) for _ in range(rng.randint(1, 9))]
        expected = 1.0
        for value in operands:
            expected *= value
        cases.append((operands, expected))
    return cases


@pytest.mark.parametrize("values,expected", [
    ((7,), 7.0),
    ((2, 3, 4), 24.0),
    ((-2, 3), -6.0),
    ((5, 0, 3), 0.0),
])
def test_multiply(values, expected) -> None:
    """multiply folds left over all operands."""
    assert multiply(*values) == expected


@pytest.mark.parametrize("values,expected", _random_products(50))
def test_multiply_random_operands(values, expected) -> None:
    """multiply matches a manual product for random small integers."""
    assert multiply(*values) == expected


@pytest.mark.parametrize("values,expected", [
    ((), 0.0),                     # empty input
    ((2,), 2.0),                   # single operand
    ((4, 2), 2.0),
    ((-4, -2), 2.0),
    ((-4, 2, 1), -2.0),
    ((0, 1), 0.0),                 # zero dividend is allowed
    ((2, 4), 0.5),
])
def test_divide(values, expected) -> None:
    """divide folds left from the first operand."""
    assert divide(*values) == expected


@pytest.mark.parametrize("values", [
    (4, 0),
    (4, 0, 1),
    (4, 2, 0.0),
    (4, -0.0),
])
def test_divide_by_zero(values) -> None:
    """Any zero divisor after the first operand fails."""
    with pytest.raises(DivideByZeroError):
        divide(*values)


@pytest.mark.parametrize("x,expected", [
    (4, 2.0),
    (0.25, 0.5),
    (0, 0.0),
    (2, pytest.approx(1.41421356)),
])
def test_sqrt(x, expected) -> None:
    """sqrt returns the non-negative root."""
    assert sqrt(x) == expected


@pytest.mark.parametrize("x", [-4, -0.25, -1e-12])
def test_sqrt_negative(x) -> None:
    """sqrt fails for every negative input."""
    with pytest.raises(InvalidArgumentError):
        sqrt(x)
