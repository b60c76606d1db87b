"""Loose string-to-number coercion for operand tokens."""
import math
import re
from typing import Pattern

# Leading ASCII numeric prefix; anything after it is ignored
_INT_PREFIX: Pattern[str] = re.compile(r"\s*[+-]?[0-9]+")
_FLOAT_PREFIX: Pattern[str] = re.compile(r"\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")


def to_int(token: str) -> int:
    """
    Parse the leading integer of a token, falling back to 0.

    :param str token: Raw numeric token (e.g. "12", "-3", "7abc")

    :return: Parsed integer, or 0 if the token has no numeric prefix or exceeds
        the interpreter's integer string conversion limit
    :rtype: int
    """
    match = _INT_PREFIX.match(token)
    if match is None:
        return 0
    try:
        return int(match.group())
    except ValueError:
        return 0


def to_float(token: str) -> float:
    """
    Parse the leading decimal number of a token, falling back to 0.0.

    :param str token: Raw numeric token (e.g. "5.1", "-2", "3.5x")

    :return: Parsed float, or 0.0 if the token has no numeric prefix
    :rtype: float
    """
    match = _FLOAT_PREFIX.match(token)
    return float(match.group()) if match else 0.0


def ieee_divide(dividend: float, divisor: float) -> float:
    """
    Divide following IEEE-754 semantics instead of raising ZeroDivisionError.

    x/0 gives a signed infinity, 0/0 and nan/0 give nan.

    :param float dividend: Dividend
    :param float divisor: Divisor

    :return: Quotient
    :rtype: float
    """
    if divisor != 0:
        return dividend / divisor
    if dividend == 0 or math.isnan(dividend):
        return math.nan
    return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
