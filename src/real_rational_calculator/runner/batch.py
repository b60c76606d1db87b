"""Evaluate many expressions in parallel worker processes."""
from multiprocessing import Pool, cpu_count
from pathlib import Path
from typing import Iterator, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from real_rational_calculator.client.formatter import format_result
from real_rational_calculator.common.logger import logger
from real_rational_calculator.common.operations import ErrorResult, EvaluationResult
from real_rational_calculator.engine.operation import Operation


def evaluate_line(expression: str) -> str:
    """
    Evaluate one expression and render it as an output line.

    :param str expression: Trimmed expression

    :return: "<expr> = <result>" or "<expr> -> ERROR: <message>"
    :rtype: str
    """
    result: EvaluationResult = Operation.evaluate(expression, diagnostics=logger)

    if isinstance(result, ErrorResult):
        logger.error(f"🧮❌ Invalid expression: {expression!r}")
        return f"{expression} -> ERROR: {result.message}"

    rendered: str = format_result(result)
    logger.info(f"🧮✅ {expression} = {rendered}")
    return f"{expression} = {rendered}"


class BatchEvaluator(BaseModel):
    """
    Evaluate a list of expressions with a pool of worker processes.

    Features:
        - Output lines keep the input order.
        - Each line is written and flushed as soon as it is available.
        - The pool never exceeds the CPU core count nor the number of expressions.
    """

    model_config = ConfigDict(frozen=True)

    workers: int = Field(default_factory=cpu_count, ge=1, description="Maximum number of worker processes")

    @field_validator("workers")
    def workers_within_cpu_count(cls, v: int) -> int:
        """Cap the number of workers to the CPU core count."""
        return min(v, cpu_count())

    def evaluate_all(self, expressions: List[str]) -> Iterator[str]:
        """
        Evaluate expressions and yield one output line per non-blank expression.

        :param List[str] expressions: Expressions, blank ones are skipped

        :return: Output lines in input order, as soon as each one is available
        :rtype: Iterator[str]
        """
        data: List[str] = [expr.strip() for expr in expressions if expr.strip()]
        logger.info(f"🖥️ Evaluating {len(data)} expressions with up to {self.workers} workers")
        if not data:
            return

        with Pool(processes=min(self.workers, len(data))) as pool:
            # imap keeps input order while yielding results as workers finish them
            yield from pool.imap(evaluate_line, data)

    def run_to_file(self, expressions: List[str], output_file: Path) -> int:
        """
        Evaluate expressions and write the output lines to a file.

        :param List[str] expressions: Expressions, blank ones are skipped
        :param Path output_file: Destination of the results

        :return: Number of lines written
        :rtype: int
        """
        written: int = 0
        with output_file.open("w", encoding="utf-8") as f_out:
            for line in self.evaluate_all(expressions):
                f_out.write(f"{line}\n")
                f_out.flush()
                written += 1

        logger.info(f"✉️ Results written to {output_file}")
        return written
