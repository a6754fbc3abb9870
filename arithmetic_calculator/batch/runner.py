"""Evaluate a file of arithmetic expressions and write the results."""
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from arithmetic_calculator.batch.loader import ExpressionLoader
from arithmetic_calculator.common.errors import CalculatorError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.models import OperationRequest, OperationResult
from arithmetic_calculator.common.parser import ExpressionParser


def build_output_path(input_path: Path) -> Path:
    """
    Construct the output file path for an input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations.txt
    output: resources/operations_txt_results.txt

    input: resources/operations.tar.xz
    output: resources/operations_tar_xz_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    input_path = Path(input_path)
    stem = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


class BatchEvaluator(BaseModel):
    """
    Evaluate expressions one after another and collect their results.

    A failing expression never stops the batch: its error message is
    recorded in the corresponding OperationResult.
    """

    loader: ExpressionLoader = Field(default_factory=ExpressionLoader, description="Reader for the input file")
    output_file: Optional[Path] = Field(default=None, description="Path to write results, derived from the input when unset")

    def evaluate_line(self, expression: str, line_number: int = 1) -> OperationResult:
        """
        Evaluate a single expression, capturing calculator errors.

        :param str expression: Arithmetic expression
        :param int line_number: Position of the expression in the input, for logging

        :return: Result or error for the expression
        :rtype: OperationResult
        """
        request = OperationRequest(expression=expression)
        try:
            result: float = ExpressionParser.evaluate(request.expression)
        except CalculatorError as exc:
            logger.error(f"❌ Line {line_number}: could not evaluate {expression!r}: {exc}")
            return OperationResult(expression=request.expression, error=str(exc))

        logger.info(f"✅ Line {line_number}: {expression} = {result}")
        return OperationResult(expression=request.expression, result=result)

    def evaluate_lines(self, lines: Iterable[str]) -> List[OperationResult]:
        """
        Evaluate every expression in order.

        :param Iterable[str] lines: Arithmetic expressions

        :return: One result per expression, in input order
        :rtype: List[OperationResult]
        """
        return [self.evaluate_line(expr, line_number) for line_number, expr in enumerate(lines, start=1)]

    def run(self, input_file: Path) -> Path:
        """
        Load expressions from a file, evaluate them and write the results.

        :param Path input_file: Path to the input file or archive

        :return: Path of the written results file
        :rtype: Path
        """
        input_file = Path(input_file)
        output_file: Path = self.output_file or build_output_path(input_file)
        logger.info(f"🏁 Evaluating {input_file} into {output_file}")

        results = self.evaluate_lines(self.loader.load(input_file))

        with output_file.open("w", encoding="utf-8") as f_out:
            for result in results:
                f_out.write(f"{result.render()}\n")

        failed = sum(1 for result in results if not result.ok)
        logger.info(f"📝 Wrote {len(results)} results ({failed} failed) to {output_file}")
        return output_file
