"""Render evaluation results for display."""
import math

from real_rational_calculator.common.operations import (
    ErrorResult,
    EvaluationResult,
    RationalValue,
    RealValue,
)


INVALID_RESULT: str = "invalid operation (e.g. division by zero)"


def clean_expression(text: str) -> str:
    """Trim the surrounding whitespace of a typed expression."""
    return text.strip()


def format_real(value: float) -> str:
    """
    Format a real result, without a fractional part when it is integral.

    :param float value: Finite float

    :return: Decimal string (e.g. "2", "9.1")
    :rtype: str
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_result(result: EvaluationResult) -> str:
    """
    Format an evaluation result for the user.

    - RealValue: decimal string, or the invalid-operation message if not finite
    - RationalValue: "n/d (≈ float)", or the invalid-operation message for a zero denominator
    - ErrorResult: its message

    :param EvaluationResult result: Result returned by Operation.evaluate

    :return: Display string
    :rtype: str
    """
    if isinstance(result, RealValue):
        if not math.isfinite(result.value):
            return INVALID_RESULT
        return format_real(result.value)

    if isinstance(result, RationalValue):
        if result.value.denominator == 0:
            return INVALID_RESULT
        # Exact fractions beyond the float range keep their "inf" approximation
        return f"{result.value} (≈ {format_real(result.value.to_float())})"

    if isinstance(result, ErrorResult):
        return result.message

    raise TypeError(f"Unsupported result type: {type(result).__name__}")
