"""Test class Fraction."""
import logging
import math

from pydantic import ValidationError
import pytest

from real_rational_calculator.common.fraction import Fraction


@pytest.mark.parametrize("args,expected", [
    ((3, 4), (3, 4)),
    ((5,), (5, 1)),
    (("6/3",), (6, 3)),
    (("7",), (7, 1)),
    (("-2/5",), (-2, 5)),
    ((), (1, 1)),
])
def test_construct(args, expected) -> None:
    """Fractions are built from integers or from "a/b" and "a" strings."""
    f = Fraction(*args)
    assert (f.numerator, f.denominator) == expected


@pytest.mark.parametrize("args,expected", [
    ((1, -2), (-1, 2)),
    ((-3, -4), (3, 4)),
    (("3/-4",), (-3, 4)),
])
def test_negative_denominator_moves_sign(args, expected) -> None:
    """A negative denominator flips the sign of both fields."""
    f = Fraction(*args)
    assert (f.numerator, f.denominator) == expected


def test_zero_denominator_is_accepted() -> None:
    """Construction tolerates a zero denominator."""
    f = Fraction(5, 0)
    assert f.denominator == 0
    assert str(f) == "5/0"


@pytest.mark.parametrize("text,expected", [
    ("abc", (0, 1)),
    ("12abc/3", (12, 3)),
    ("4/x", (4, 0)),
    ("", (0, 1)),
])
def test_malformed_tokens_fall_back_to_zero(text, expected) -> None:
    """Malformed numeric tokens parse to 0 instead of raising."""
    f = Fraction(text)
    assert (f.numerator, f.denominator) == expected


def test_fraction_is_immutable() -> None:
    """Fields cannot be reassigned after construction."""
    f = Fraction(1, 2)
    with pytest.raises(ValidationError):
        f.numerator = 3


def test_display_string() -> None:
    """to_display_string and str render "numerator/denominator"."""
    assert Fraction(-7, 3).to_display_string() == "-7/3"
    assert str(Fraction("6/3")) == "6/3"


def test_to_float() -> None:
    """to_float divides numerator by denominator."""
    assert Fraction(1, 4).to_float() == 0.25
    assert Fraction(-3, 2).to_float() == -1.5


@pytest.mark.parametrize("f,check", [
    (Fraction(5, 0), lambda v: v == math.inf),
    (Fraction(-5, 0), lambda v: v == -math.inf),
    (Fraction(0, 0), math.isnan),
])
def test_to_float_degenerate(f, check) -> None:
    """A zero denominator yields inf or nan instead of raising."""
    assert check(f.to_float())


@pytest.mark.parametrize("a,b,expected", [
    (12, 18, 6),
    (-12, 18, 6),
    (7, 13, 1),
    (9, 0, 9),
    (-9, 0, 9),
    (0, 0, 0),
    (0, 5, 5),
])
def test_gcd(a, b, expected) -> None:
    """gcd follows the Euclidean algorithm on absolute values."""
    assert Fraction.gcd(a, b) == expected


@pytest.mark.parametrize("f,expected", [
    (Fraction(6, 3), Fraction(2, 1)),
    (Fraction(6, 6), Fraction(1, 1)),
    (Fraction(-4, 8), Fraction(-1, 2)),
    (Fraction(0, 7), Fraction(0, 1)),
    (Fraction(12, 18), Fraction(2, 3)),
    (Fraction(35, 14), Fraction(5, 2)),
])
def test_simplify(f, expected) -> None:
    """simplify reduces fractions to lowest terms."""
    assert Fraction.simplify(f) == expected


def test_simplify_zero_denominator_is_noop(caplog) -> None:
    """Degenerate fractions are returned unchanged, with a warning when a logger is given."""
    f = Fraction(5, 0)
    diagnostics = logging.getLogger("test.fraction")
    with caplog.at_level(logging.WARNING, logger="test.fraction"):
        assert Fraction.simplify(f, diagnostics) == f
    assert "denominator is 0" in caplog.text


def test_simplify_without_logger_is_silent(caplog) -> None:
    """No diagnostic is emitted unless a logger is injected."""
    with caplog.at_level(logging.DEBUG):
        Fraction.simplify(Fraction(1, 0))
    assert caplog.records == []


@pytest.mark.parametrize("f", [
    Fraction(48, 180),
    Fraction(-100, 75),
    Fraction(17, 1),
    Fraction(0, 9),
])
def test_simplify_is_idempotent(f) -> None:
    """Simplifying twice gives the same fraction as simplifying once."""
    once = Fraction.simplify(f)
    assert Fraction.simplify(once) == once
    assert Fraction.gcd(once.numerator, once.denominator) == 1


def test_to_float_large_fields_small_quotient() -> None:
    """Fields beyond the float range still give a finite quotient."""
    assert Fraction(10**399 + 1, 10**399).to_float() == 1.0
    assert Fraction(-(10**400), 4 * 10**399).to_float() == -2.5


@pytest.mark.parametrize("f,expected", [
    (Fraction(10**400, 1), math.inf),
    (Fraction(-(10**400), 3), -math.inf),
])
def test_to_float_quotient_out_of_range(f, expected) -> None:
    """A quotient beyond the float range gives a signed inf instead of raising."""
    assert f.to_float() == expected


def test_to_float_huge_numerator_zero_denominator() -> None:
    """Zero denominators stay degenerate whatever the numerator size."""
    assert Fraction(10**400, 0).to_float() == math.inf


def test_token_over_int_conversion_limit_falls_back_to_zero() -> None:
    """Integer tokens too long to convert parse to 0 instead of raising."""
    assert Fraction("1" * 5000 + "/3") == Fraction(0, 3)


def test_non_ascii_digits_are_not_numeric() -> None:
    """Only ASCII digits are parsed."""
    assert Fraction("３/４") == Fraction(0, 0)
