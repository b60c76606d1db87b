"""Classify two-operand expressions and split them into operator and operands."""
import re
from typing import Dict, Pattern

from real_rational_calculator.common.operations import OperationKind, ParsedOperation


# Longest digit run accepted in a single integer or decimal part
MAX_DIGITS: int = 1000

# Operand shapes, ASCII digits only
REAL_NUMBER: str = rf"-?[0-9]{{1,{MAX_DIGITS}}}(?:\.[0-9]{{1,{MAX_DIGITS}}})?"
RATIONAL_NUMBER: str = rf"-?(?:0|[1-9][0-9]{{0,{MAX_DIGITS - 1}}})(?:/[1-9][0-9]{{0,{MAX_DIGITS - 1}}})?"

# Operator classes: "/" is real division, ":" is rational division
REAL_OPERATORS: str = r"[+\-*/]"
RATIONAL_OPERATORS: str = r"[+\-*:]"

# Full-string grammars, checked in insertion order (REAL has priority)
GRAMMARS: Dict[OperationKind, Pattern[str]] = {
    OperationKind.REAL: re.compile(rf"{REAL_NUMBER}{REAL_OPERATORS}{REAL_NUMBER}"),
    OperationKind.RATIONAL: re.compile(rf"{RATIONAL_NUMBER}{RATIONAL_OPERATORS}{RATIONAL_NUMBER}"),
}

OPERATOR_CLASSES: Dict[OperationKind, Pattern[str]] = {
    OperationKind.REAL: re.compile(REAL_OPERATORS),
    OperationKind.RATIONAL: re.compile(RATIONAL_OPERATORS),
}


class ExpressionClassifier:
    """
    Decide whether an expression is real, rational or invalid from its shape alone.

    Grammars:
        - REAL: <real><op><real>, real = -?digits(.digits)?, op in + - * /
        - RATIONAL: <rat><op><rat>, rat = -?int(/int)? without leading zeros, op in + - * :

    The operator sets only differ on "/" and ":", so "6/3" is a real division
    while "6/3:2" is a rational one. A string matching both grammars
    (e.g. "3-1") is classified REAL.

    Examples:
        - "5.1+4" -> REAL
        - "6/3:2/1" -> RATIONAL
        - "5.2+5/1" -> INVALID
    """

    @staticmethod
    def classify(expr: str) -> OperationKind:
        """
        Classify an expression (trimmed, no whitespace between terms).

        :param str expr: Raw expression

        :return: REAL, RATIONAL or INVALID
        :rtype: OperationKind
        """
        for kind, grammar in GRAMMARS.items():
            if grammar.fullmatch(expr):
                return kind
        return OperationKind.INVALID


class OperandExtractor:
    """Split a classified expression at its operator."""

    @staticmethod
    def extract(expr: str, kind: OperationKind) -> ParsedOperation:
        """
        Locate the operator of the given kind and split the expression around it.

        A leading "-" is the sign of the first operand, never the operator.

        :param str expr: Expression already classified as ``kind``
        :param OperationKind kind: Classification of the expression

        :return: Parsed operation; empty operator and operands for INVALID
        :rtype: ParsedOperation
        """
        if kind is OperationKind.INVALID:
            return ParsedOperation(kind=kind)

        start: int = 1 if expr.startswith("-") else 0
        match = OPERATOR_CLASSES[kind].search(expr, start)
        if match is None:
            # Not reachable for an expression matching the grammar of its kind
            return ParsedOperation(kind=OperationKind.INVALID)

        return ParsedOperation(
            kind=kind,
            operator=match.group(),
            operand1=expr[: match.start()],
            operand2=expr[match.end():],
        )
