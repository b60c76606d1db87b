"""Real and rational evaluators for parsed two-operand expressions."""
import logging
import operator
from typing import Callable, Dict, Optional

from real_rational_calculator.common.coercion import ieee_divide, to_float
from real_rational_calculator.common.fraction import Fraction
from real_rational_calculator.common.operations import ParsedOperation, RationalValue, RealValue


# Type alias for real operator functions (taking two floats, returning a float)
RealOperatorFn = Callable[[float, float], float]

# Type alias for rational operator functions (taking two fractions, returning an unsimplified fraction)
RationalOperatorFn = Callable[[Fraction, Fraction], Fraction]


def add_fractions(f1: Fraction, f2: Fraction) -> Fraction:
    """
    Add two fractions without simplifying.

    :param Fraction f1: First term
    :param Fraction f2: Second term

    :return: (n1*d2 + d1*n2) / (d1*d2)
    :rtype: Fraction
    """
    return Fraction(
        f1.numerator * f2.denominator + f1.denominator * f2.numerator,
        f1.denominator * f2.denominator,
    )


def subtract_fractions(f1: Fraction, f2: Fraction) -> Fraction:
    """
    Subtract the second fraction from the first without simplifying.

    :param Fraction f1: Minuend
    :param Fraction f2: Subtrahend

    :return: (n1*d2 - d1*n2) / (d1*d2)
    :rtype: Fraction
    """
    return Fraction(
        f1.numerator * f2.denominator - f1.denominator * f2.numerator,
        f1.denominator * f2.denominator,
    )


def multiply_fractions(f1: Fraction, f2: Fraction) -> Fraction:
    """
    Multiply two fractions without simplifying.

    :param Fraction f1: First factor
    :param Fraction f2: Second factor

    :return: (n1*n2) / (d1*d2)
    :rtype: Fraction
    """
    return Fraction(f1.numerator * f2.numerator, f1.denominator * f2.denominator)


def divide_fractions(f1: Fraction, f2: Fraction) -> Fraction:
    """
    Divide the first fraction by the second without simplifying.

    A divisor with a zero numerator gives a zero denominator.

    :param Fraction f1: Dividend
    :param Fraction f2: Divisor

    :return: (n1*d2) / (d1*n2)
    :rtype: Fraction
    """
    return Fraction(f1.numerator * f2.denominator, f1.denominator * f2.numerator)


REAL_OPERATORS: Dict[str, RealOperatorFn] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": ieee_divide,
}

RATIONAL_OPERATORS: Dict[str, RationalOperatorFn] = {
    "+": add_fractions,
    "-": subtract_fractions,
    "*": multiply_fractions,
    ":": divide_fractions,
}


class RealEvaluator:
    """Floating-point arithmetic on the operands of a REAL operation."""

    @staticmethod
    def evaluate(parsed: ParsedOperation, diagnostics: Optional[logging.Logger] = None) -> RealValue:
        """
        Apply the operator to both operands coerced to float.

        Division by zero gives inf or nan rather than raising.

        :param ParsedOperation parsed: Operation classified as REAL
        :param logging.Logger diagnostics: Optional logger for debug traces

        :return: Real result
        :rtype: RealValue
        :raises ValueError: If the operator is not a real operator
        """
        if parsed.operator not in REAL_OPERATORS:
            raise ValueError(f"Unsupported real operator: {parsed.operator!r}")

        a: float = to_float(parsed.operand1)
        b: float = to_float(parsed.operand2)
        result: float = REAL_OPERATORS[parsed.operator](a, b)

        if diagnostics is not None:
            diagnostics.debug(f"🔢 {a} {parsed.operator} {b} = {result}")

        return RealValue(value=result)


class RationalEvaluator:
    """
    Fraction arithmetic on the operands of a RATIONAL operation.

    Rules, for n1/d1 (op) n2/d2:
        - "+": (n1*d2 + d1*n2) / (d1*d2)
        - "-": (n1*d2 - d1*n2) / (d1*d2)
        - "*": (n1*n2) / (d1*d2)
        - ":": (n1*d2) / (d1*n2)

    Every result is simplified. Dividing by a fraction with a zero numerator
    produces a zero denominator, which is kept as is.
    """

    @staticmethod
    def evaluate(parsed: ParsedOperation, diagnostics: Optional[logging.Logger] = None) -> RationalValue:
        """
        Build fractions from both operands, apply the operator and simplify.

        An unknown operator yields the identity fraction 1/1.

        :param ParsedOperation parsed: Operation classified as RATIONAL
        :param logging.Logger diagnostics: Optional logger for debug traces and degenerate results

        :return: Rational result
        :rtype: RationalValue
        """
        f1 = Fraction(parsed.operand1)
        f2 = Fraction(parsed.operand2)

        operation: Optional[RationalOperatorFn] = RATIONAL_OPERATORS.get(parsed.operator)
        if operation is None:
            return RationalValue(value=Fraction())

        raw: Fraction = operation(f1, f2)
        if diagnostics is not None:
            diagnostics.debug(f"🔢 {f1} {parsed.operator} {f2} = {raw}")

        return RationalValue(value=Fraction.simplify(raw, diagnostics))
