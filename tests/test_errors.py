"""Test the calculator exception hierarchy."""
import pytest

from arithmetic_calculator.common.errors import (
    CalculatorError,
    DivideByZeroError,
    ExpressionSyntaxError,
    InvalidArgumentError,
    OperandParseError,
)


@pytest.mark.parametrize("error_cls", [
    DivideByZeroError,
    InvalidArgumentError,
    ExpressionSyntaxError,
    OperandParseError,
])
def test_errors_share_base_class(error_cls) -> None:
    """Every calculator error can be caught as CalculatorError."""
    with pytest.raises(CalculatorError):
        raise error_cls("boom")


def test_divide_by_zero_is_zero_division_error() -> None:
    """DivideByZeroError is also a builtin ZeroDivisionError."""
    assert issubclass(DivideByZeroError, ZeroDivisionError)


@pytest.mark.parametrize("error_cls", [InvalidArgumentError, ExpressionSyntaxError, OperandParseError])
def test_input_errors_are_value_errors(error_cls) -> None:
    """Input errors remain catchable as ValueError."""
    assert issubclass(error_cls, ValueError)
