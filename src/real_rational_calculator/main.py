"""
Command-line entrypoint of the real / rational calculator.

This script:
- Evaluates the expressions given as arguments and prints one result per line
- Or evaluates every expression of a text file or archive and writes a results file

Examples:
    real-rational-calculator "5.1+4" "6/3:2/1"
    real-rational-calculator --file resources/operations.7z --workers 4
"""

import argparse
from pathlib import Path
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError

from real_rational_calculator.client.formatter import clean_expression, format_result
from real_rational_calculator.client.loader import load_expressions
from real_rational_calculator.common.logger import logger, set_log_level
from real_rational_calculator.engine.operation import Operation
from real_rational_calculator.runner.batch import BatchEvaluator


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expressions : List[str]
        Expressions to evaluate directly.
    file_path : Optional[FilePath]
        Path to a file or archive containing one expression per line.
    workers : Optional[int]
        Maximum number of worker processes for file evaluation.
    log_level : LogLevel
        Level of the package logger.
    """

    expressions: List[str] = Field(default_factory=list)
    file_path: Optional[FilePath] = None
    workers: Optional[int] = Field(default=None, ge=1)
    log_level: LogLevel = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Evaluate real (5.1+4) or rational (6/3:2/1) two-operand expressions"
    )

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, without spaces between operands and operator",
    )
    parser.add_argument(
        "--file",
        dest="file_path",
        help="Path to a .txt, .zip, .tar.xz or .7z file with one expression per line",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Maximum number of worker processes used with --file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    args = parser.parse_args(argv)

    if not args.expressions and args.file_path is None:
        parser.error("provide at least one expression or --file")

    try:
        return CliArgs(
            expressions=args.expressions,
            file_path=args.file_path,
            workers=args.workers,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct a safe output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations_short.7z
    output: resources/operations_short_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    stem = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def run_expressions(expressions: List[str]) -> List[str]:
    """
    Evaluate expressions in the current process.

    :param List[str] expressions: Raw expressions as typed

    :return: One formatted result per expression
    :rtype: List[str]
    """
    return [
        format_result(Operation.evaluate(clean_expression(expr), diagnostics=logger))
        for expr in expressions
    ]


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function of the command-line tool.
    """
    cli_args = parse_args(argv)
    set_log_level(cli_args.log_level)

    for line in run_expressions(cli_args.expressions):
        print(line)

    if cli_args.file_path is not None:
        input_path: Path = Path(cli_args.file_path)
        output_path: Path = build_output_path(input_path)

        try:
            expressions = load_expressions(input_path)
        except ValueError as exc:
            logger.error(f"📄❌ Could not read {input_path}: {exc}")
            sys.exit(1)

        batch = BatchEvaluator() if cli_args.workers is None else BatchEvaluator(workers=cli_args.workers)
        batch.run_to_file(expressions, output_path)
        print(output_path)


if __name__ == "__main__":
    main()
