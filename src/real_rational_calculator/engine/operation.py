"""Entry point of the calculator core: classify, extract and dispatch."""
import logging
from typing import Callable, Dict, Optional

from real_rational_calculator.common.operations import (
    ErrorResult,
    EvaluationResult,
    OperationKind,
    ParsedOperation,
)
from real_rational_calculator.common.parser import ExpressionClassifier, OperandExtractor
from real_rational_calculator.engine.evaluators import RationalEvaluator, RealEvaluator


INVALID_OPERATION: str = "invalid operation"

Evaluator = Callable[[ParsedOperation, Optional[logging.Logger]], EvaluationResult]

EVALUATORS: Dict[OperationKind, Evaluator] = {
    OperationKind.REAL: RealEvaluator.evaluate,
    OperationKind.RATIONAL: RationalEvaluator.evaluate,
}


class Operation:
    """
    Evaluate a single-line two-operand expression.

    Steps:
        1. Classify the expression (REAL, RATIONAL or INVALID).
        2. Return an ErrorResult for INVALID input.
        3. Extract operator and operands once.
        4. Hand the parsed operation to the evaluator of its kind.

    No exception leaves ``evaluate``: degenerate arithmetic is carried in the
    result (non-finite float, zero-denominator fraction).
    """

    @staticmethod
    def evaluate(raw_input: str, diagnostics: Optional[logging.Logger] = None) -> EvaluationResult:
        """
        Evaluate an expression such as "5.1+4" or "6/3:2/1".

        :param str raw_input: Trimmed expression, no whitespace between terms
        :param logging.Logger diagnostics: Optional logger for debug traces

        :return: RealValue, RationalValue or ErrorResult
        :rtype: EvaluationResult
        """
        kind: OperationKind = ExpressionClassifier.classify(raw_input)
        if diagnostics is not None:
            diagnostics.debug(f"🧮 {raw_input!r} classified as {kind.value}")

        if kind is OperationKind.INVALID:
            return ErrorResult(message=INVALID_OPERATION)

        parsed: ParsedOperation = OperandExtractor.extract(raw_input, kind)
        if parsed.kind is OperationKind.INVALID:
            return ErrorResult(message=INVALID_OPERATION)

        return EVALUATORS[parsed.kind](parsed, diagnostics)
