"""Pydantic models for parsed operations and evaluation results."""
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from real_rational_calculator.common.fraction import Fraction


class OperationKind(str, Enum):
    """Arithmetic family an expression belongs to, decided from its lexical shape."""

    REAL = "real"
    RATIONAL = "rational"
    INVALID = "invalid"


class ParsedOperation(BaseModel):
    """Operator and operand substrings extracted from a classified expression."""

    model_config = ConfigDict(frozen=True)

    kind: OperationKind = Field(..., description="Classification of the expression")
    operator: str = Field(default="", description="Operator symbol: one of + - * / :")
    operand1: str = Field(default="", description="First operand, as typed")
    operand2: str = Field(default="", description="Second operand, as typed")


class RealValue(BaseModel):
    """Result of a real operation. May be inf or nan after a division by zero."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["real"] = "real"
    value: float = Field(..., description="Floating-point result")


class RationalValue(BaseModel):
    """Result of a rational operation. The fraction may have a zero denominator."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rational"] = "rational"
    value: Fraction = Field(..., description="Simplified fraction result")


class ErrorResult(BaseModel):
    """Expression could not be classified."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str = Field(..., description="User-facing error message")


EvaluationResult = Union[RealValue, RationalValue, ErrorResult]
