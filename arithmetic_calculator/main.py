"""
Command-line entrypoint for the calculator.

Subcommands:
- eval: evaluate a single two-operand expression
- add, subtract, multiply, divide: fold a list of numbers
- sqrt: square root of a number
- batch: evaluate a file (or archive) of expressions into a results file
"""

import argparse
from pathlib import Path
import sys
from typing import Callable, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, FilePath, ValidationError

from arithmetic_calculator.batch.runner import BatchEvaluator
from arithmetic_calculator.common.arithmetic import add, divide, multiply, sqrt, subtract
from arithmetic_calculator.common.errors import CalculatorError
from arithmetic_calculator.common.logger import logger, set_log_level
from arithmetic_calculator.common.parser import ExpressionParser


VARIADIC_COMMANDS: Dict[str, Callable[..., float]] = {
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
}

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    command : str
        Selected subcommand.
    log_level : LogLevel
        Verbosity of the package logger.
    expression : str, optional
        Expression for the ``eval`` command.
    values : list of float
        Operands for the variadic commands and ``sqrt``.
    file_path : FilePath, optional
        Input file for the ``batch`` command.
    output : Path, optional
        Output file for the ``batch`` command.
    """

    command: str
    log_level: LogLevel = "WARNING"
    expression: Optional[str] = None
    values: List[float] = Field(default_factory=list)
    file_path: Optional[FilePath] = None
    output: Optional[Path] = None


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser and its subcommands.

    :return: Configured parser
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="arithmetic-calculator",
        description="Minimal arithmetic calculator",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        help="Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    eval_parser = subparsers.add_parser(
        "eval",
        help="Evaluate a two-operand expression, e.g. '10 / 2'",
        epilog="Put '--' before an expression starting with '-': eval -- '-1 + 2'",
    )
    eval_parser.add_argument("expression", help="Expression to evaluate (prefix with '--' if it starts with '-')")

    for name in VARIADIC_COMMANDS:
        sub = subparsers.add_parser(name, help=f"{name.capitalize()} a list of numbers, left to right")
        sub.add_argument("values", nargs="*", help="Operands, in order")

    sqrt_parser = subparsers.add_parser("sqrt", help="Square root of a non-negative number")
    sqrt_parser.add_argument("values", nargs=1, metavar="x", help="Radicand")

    batch_parser = subparsers.add_parser("batch", help="Evaluate a file of expressions, one per line")
    batch_parser.add_argument("file_path", help="Path to a .txt file or a .zip, .tar.xz or .7z archive")
    batch_parser.add_argument("-o", "--output", default=None, help="Path to write results")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return CliArgs(**{key: value for key, value in vars(args).items() if value is not None})
    except ValidationError as exc:
        parser.error(str(exc))


def run(cli_args: CliArgs) -> Union[float, Path]:
    """
    Execute the selected subcommand.

    :param CliArgs cli_args: Validated CLI arguments
    :return: Computed value, or the results path for ``batch``
    :raises CalculatorError: If the computation fails
    """
    if cli_args.command == "eval":
        return ExpressionParser.evaluate(cli_args.expression)
    if cli_args.command == "sqrt":
        return sqrt(cli_args.values[0])
    if cli_args.command == "batch":
        evaluator = BatchEvaluator(output_file=cli_args.output)
        return evaluator.run(cli_args.file_path)
    return VARIADIC_COMMANDS[cli_args.command](*cli_args.values)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the ``arithmetic-calculator`` command.

    :param argv: Arguments to parse, defaults to sys.argv[1:]
    :return: Process exit status
    """
    cli_args = parse_args(argv)
    set_log_level(cli_args.log_level)
    logger.debug(f"🖥️ Running {cli_args.command!r}")

    try:
        outcome = run(cli_args)
    except (CalculatorError, ValueError, OSError) as exc:
        # ValueError: input file rejected by the loader, OSError: unreadable input or unwritable output
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(outcome)
    return 0


if __name__ == "__main__":
    sys.exit(main())
