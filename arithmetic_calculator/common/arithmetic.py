"""Variadic arithmetic primitives and square root."""
import math

from arithmetic_calculator.common.errors import DivideByZeroError, InvalidArgumentError


def add(*values: float) -> float:
    """
    Return the sum of all values.

    :param float values: Operands, in order

    :return: Sum of the operands, 0 when none are given
    :rtype: float
    """
    total: float = 0.0
    for value in values:
        total += value
    return total


def subtract(*values: float) -> float:
    """
    Subtract every following value from the first one.

    :param float values: Operands, in order

    :return: Left fold of subtraction, 0 when none are given
    :rtype: float
    """
    if not values:
        return 0.0

    result: float = values[0]
    for value in values[1:]:
        result -= value
    return result


def multiply(*values: float) -> float:
    """
    Multiply all values together.

    An empty call returns 0, not the multiplicative identity 1.

    :param float values: Operands, in order

    :return: Left fold of multiplication, 0 when none are given
    :rtype: float
    """
    if not values:
        return 0.0

    result: float = values[0]
    for value in values[1:]:
        result *= value
    return result


def divide(*values: float) -> float:
    """
    Divide the first value by every following value in turn.

    :param float values: Operands, in order

    :return: Left fold of division, 0 when none are given
    :rtype: float
    :raises DivideByZeroError: If any divisor after the first operand is 0.0
    """
    if not values:
        return 0.0

    result: float = values[0]
    for position, value in enumerate(values[1:], start=2):
        if value == 0.0:
            raise DivideByZeroError(f"Division by zero (operand {position} of {len(values)})")
        result /= value
    return result


def sqrt(x: float) -> float:
    """
    Return the non-negative square root of x.

    :param float x: Radicand

    :return: Square root of x
    :rtype: float
    :raises InvalidArgumentError: If x is negative
    """
    if x < 0:
        raise InvalidArgumentError(f"Cannot take the square root of a negative number: {x}")
    return math.sqrt(x)
