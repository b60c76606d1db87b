"""Immutable fraction value type used by rational arithmetic."""
import logging
import math
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from real_rational_calculator.common.coercion import ieee_divide, to_int


class Fraction(BaseModel):
    """
    Numerator/denominator pair representing a rational number.

    A zero denominator is accepted on construction: the degenerate value is
    only detected where it is consumed (``to_float`` gives inf or nan).
    After construction the sign lives in the numerator and the denominator
    is never negative.

    Examples:
        - Fraction(3, 4) -> 3/4
        - Fraction("6/3") -> 6/3
        - Fraction("5") -> 5/1
        - Fraction(1, -2) -> -1/2
    """

    model_config = ConfigDict(frozen=True)

    numerator: int = Field(default=1, description="Numerator, carries the sign")
    denominator: int = Field(default=1, ge=0, description="Non-negative denominator, may be 0")

    def __init__(self, numerator: Union[int, str] = 1, denominator: int = 1, **data: Any) -> None:
        """
        Build a fraction from two integers or from a "a/b" or "a" string.

        Malformed numeric tokens in a string parse to 0.

        :param numerator: Numerator, or a "numerator/denominator" string
        :param int denominator: Denominator, ignored when numerator is a string
        """
        if isinstance(numerator, str):
            numerator, denominator = self.parse_text(numerator)
        super().__init__(numerator=numerator, denominator=denominator, **data)

    @staticmethod
    def parse_text(text: str) -> tuple[int, int]:
        """Split a "a/b" or "a" string into integer fields."""
        parts = text.split("/", 1)
        numerator = to_int(parts[0])
        denominator = to_int(parts[1]) if len(parts) > 1 else 1
        return numerator, denominator

    @model_validator(mode="before")
    @classmethod
    def normalize_sign(cls, data: Any) -> Any:
        """Move a negative denominator's sign onto the numerator."""
        if isinstance(data, dict):
            denominator = data.get("denominator", 1)
            if isinstance(denominator, int) and denominator < 0:
                data = {
                    **data,
                    "numerator": -data.get("numerator", 1),
                    "denominator": -denominator,
                }
        return data

    def __str__(self) -> str:
        return self.to_display_string()

    def to_display_string(self) -> str:
        """
        Render the fraction as "numerator/denominator".

        :return: Display string
        :rtype: str
        """
        return f"{self.numerator}/{self.denominator}"

    def to_float(self) -> float:
        """
        Approximate the fraction as a float.

        Integer fields are divided directly, so large fields with a small
        quotient are rounded once; a quotient beyond the float range gives a signed inf.

        :return: numerator / denominator, inf or nan when the denominator is 0
        :rtype: float
        """
        if self.denominator == 0:
            sign: int = (self.numerator > 0) - (self.numerator < 0)
            return ieee_divide(float(sign), 0.0)

        try:
            return self.numerator / self.denominator
        except OverflowError:
            return math.inf if self.numerator > 0 else -math.inf

    @staticmethod
    def gcd(a: int, b: int) -> int:
        """
        Greatest common divisor using the Euclidean algorithm.

        :param int a: First integer
        :param int b: Second integer

        :return: gcd(|a|, |b|); gcd(a, 0) is |a| and gcd(0, 0) is 0
        :rtype: int
        """
        a, b = abs(a), abs(b)
        while b != 0:
            a, b = b, a % b
        return a

    @staticmethod
    def simplify(fraction: "Fraction", diagnostics: Optional[logging.Logger] = None) -> "Fraction":
        """
        Reduce a fraction to lowest terms.

        Degenerate input (denominator 0) is returned unchanged.

        :param Fraction fraction: Fraction to reduce
        :param logging.Logger diagnostics: Optional logger receiving a warning on degenerate input

        :return: New irreducible fraction
        :rtype: Fraction
        """
        if fraction.denominator == 0:
            if diagnostics is not None:
                diagnostics.warning(f"➗⚠️ Cannot simplify {fraction}: denominator is 0")
            return fraction

        divisor: int = Fraction.gcd(fraction.numerator, fraction.denominator)
        if divisor == 0:
            return fraction

        return Fraction(fraction.numerator // divisor, fraction.denominator // divisor)
