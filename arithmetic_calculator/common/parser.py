"""Parse and evaluate two-operand arithmetic expressions."""
from typing import Callable, Dict, List

from arithmetic_calculator.common.arithmetic import add, divide, multiply, subtract
from arithmetic_calculator.common.errors import ExpressionSyntaxError, OperandParseError
from arithmetic_calculator.common.logger import logger


# Type alias for the variadic arithmetic primitives
OperatorFn = Callable[..., float]

# Mapping of operator symbols to the primitive they dispatch to
OPERATORS: Dict[str, OperatorFn] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}


class ExpressionParser:
    """
    Parse and evaluate a single binary arithmetic expression.

    Design constraints:
        - No eval(), no dynamic code execution
        - Exactly one operator, exactly two operands
        - No precedence, parentheses or unary operators

    Algorithm:
        1. Find the first operator character in the expression
        2. Split the expression on every occurrence of that character
        3. Parse both operands as floats
        4. Dispatch to the matching arithmetic primitive

    Examples:
        - "1 + 1" -> 2.0
        - "10/2" -> 5.0
        - "-1 + 2" fails: the leading minus is taken as the operator
    """

    @staticmethod
    def find_operator(expr: str) -> str:
        """
        Return the first operator symbol found in an expression.

        :param str expr: Arithmetic expression as a string

        :return: Operator symbol
        :rtype: str
        :raises ExpressionSyntaxError: If the expression contains no operator
        """
        for char in expr:
            if char in OPERATORS:
                return char
        raise ExpressionSyntaxError(f"No operator found in expression: {expr!r}")

    @staticmethod
    def split_operands(expr: str, symbol: str) -> List[str]:
        """
        Split an expression into its two raw operands.

        :param str expr: Arithmetic expression as a string
        :param str symbol: Operator symbol used as delimiter

        :return: The two operand substrings, unstripped
        :rtype: List[str]
        :raises ExpressionSyntaxError: If the split does not yield exactly two operands
        """
        operands: List[str] = expr.split(symbol)
        if len(operands) != 2:
            raise ExpressionSyntaxError(
                f"Expected 2 operands around {symbol!r}, found {len(operands)}: {expr!r}"
            )
        return operands

    @staticmethod
    def parse_operand(text: str) -> float:
        """
        Parse a single operand.

        :param str text: Operand text, surrounding whitespace allowed

        :return: Operand value
        :rtype: float
        :raises OperandParseError: If the text is not a valid float
        """
        try:
            return float(text.strip())
        except ValueError:
            raise OperandParseError(f"Invalid operand: {text.strip()!r}") from None

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate a two-operand arithmetic expression.

        :param str expr: Arithmetic expression string

        :return: Computed result as float
        :rtype: float
        :raises ExpressionSyntaxError: If the operator is missing or the operand count is wrong
        :raises OperandParseError: If an operand is not a number
        :raises DivideByZeroError: If the expression divides by zero
        """
        symbol: str = ExpressionParser.find_operator(expr)
        left, right = ExpressionParser.split_operands(expr, symbol)

        a: float = ExpressionParser.parse_operand(left)
        b: float = ExpressionParser.parse_operand(right)

        logger.debug(f"🧮 Evaluating {a} {symbol} {b}")
        return OPERATORS[symbol](a, b)
