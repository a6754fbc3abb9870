"""Exceptions raised by the calculator."""


class CalculatorError(Exception):
    """Base class for every error raised by the calculator."""


class DivideByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when a divisor after the first operand is exactly zero."""


class InvalidArgumentError(CalculatorError, ValueError):
    """Raised when an operand lies outside the domain of an operation."""


class ExpressionSyntaxError(CalculatorError, ValueError):
    """Raised when an expression has no operator or not exactly two operands."""


class OperandParseError(CalculatorError, ValueError):
    """Raised when an operand cannot be parsed as a float."""
