"""Test class BatchEvaluator."""
from multiprocessing import cpu_count

from pydantic import ValidationError
import pytest

from real_rational_calculator.runner.batch import BatchEvaluator, evaluate_line


@pytest.mark.parametrize("expr,expected", [
    ("5.1+4", "5.1+4 = 9.1"),
    ("6/3:2/1", "6/3:2/1 = 1/1 (≈ 1)"),
    ("5/1:0/1", "5/1:0/1 = invalid operation (e.g. division by zero)"),
    ("52214+", "52214+ -> ERROR: invalid operation"),
])
def test_evaluate_line(expr, expected) -> None:
    """Each expression is rendered as a result or an error line."""
    assert evaluate_line(expr) == expected


def test_workers_capped_to_cpu_count() -> None:
    """The worker count never exceeds the CPU core count."""
    assert BatchEvaluator(workers=cpu_count() + 8).workers == cpu_count()


def test_workers_must_be_positive() -> None:
    """Zero workers is rejected."""
    with pytest.raises(ValidationError):
        BatchEvaluator(workers=0)


def test_evaluate_all_keeps_order_and_skips_blank_lines() -> None:
    """Results come back in input order, blank lines dropped."""
    lines = list(BatchEvaluator(workers=2).evaluate_all(["3-1", "", "  1/2+1/2 ", "5.2+5/1"]))
    assert lines == [
        "3-1 = 2",
        "1/2+1/2 = 1/1 (≈ 1)",
        "5.2+5/1 -> ERROR: invalid operation",
    ]


def test_evaluate_all_empty() -> None:
    """No expressions gives no output and no pool."""
    assert list(BatchEvaluator(workers=1).evaluate_all(["", "  "])) == []


def test_run_to_file(tmp_path) -> None:
    """run_to_file writes one line per expression."""
    output_file = tmp_path / "results.txt"
    written = BatchEvaluator(workers=2).run_to_file(["2*3", "1/3:1/3", "7/0"], output_file)

    assert written == 3
    assert output_file.read_text().splitlines() == [
        "2*3 = 6",
        "1/3:1/3 = 1/1 (≈ 1)",
        "7/0 = invalid operation (e.g. division by zero)",
    ]


def test_run_to_file_with_large_fraction_fields(tmp_path) -> None:
    """Fractions with fields beyond the float range do not abort the run."""
    output_file = tmp_path / "results.txt"
    big = f"{10**399 + 1}/{10**399}*1"
    written = BatchEvaluator(workers=1).run_to_file([big, "3-1"], output_file)

    assert written == 2
    assert output_file.read_text().splitlines() == [
        f"{big} = {10**399 + 1}/{10**399} (≈ 1)",
        "3-1 = 2",
    ]
