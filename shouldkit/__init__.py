"""Stable public API surface for shouldkit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from pathlib import Path

from shouldpack.assertions import (
    Actual,
    AssertionFailure,
    AssertionResult,
    check,
    should,
    should_raise,
)
from shouldpack.capture import ExpressionPair, capture_expressions
from shouldpack.messages import (
    DEFAULT_FORMATTER,
    FailureFormatter,
    FailureMessageFormatter,
    FormatterConfigError,
)

__version__ = "0.1.0"


def compare_text(
    expected: str,
    actual: str,
    *,
    expected_expr: str | None = None,
    actual_expr: str | None = None,
    message: str | None = None,
    formatter: FailureFormatter = DEFAULT_FORMATTER,
) -> AssertionResult:
    """Compare two strings and return the mismatch report as a result value.

    Args:
        expected: Expected text.
        actual: Actual text.
        expected_expr: Label shown for the expected operand.
        actual_expr: Label heading the report.
        message: Extra line appended to a failure report.
        formatter: Formatter used to compose the report.

    Returns:
        Assertion result with pass/fail, exit code and report text.
    """
    return check(
        lambda: should(actual, actual_expr, formatter=formatter).should_be(
            expected, message, expected_expr=expected_expr
        )
    )


def compare_files(
    expected: str | Path,
    actual: str | Path,
    *,
    message: str | None = None,
    encoding: str = "utf-8",
    formatter: FailureFormatter = DEFAULT_FORMATTER,
) -> AssertionResult:
    """Compare two text files, labelling the report with their paths.

    Args:
        expected: Path to the expected text.
        actual: Path to the actual text.
        message: Extra line appended to a failure report.
        encoding: Encoding used to read both files.
        formatter: Formatter used to compose the report.

    Returns:
        Assertion result with pass/fail, exit code and report text.
    """
    expected_path = Path(expected)
    actual_path = Path(actual)
    return compare_text(
        expected_path.read_text(encoding=encoding),
        actual_path.read_text(encoding=encoding),
        expected_expr=str(expected_path),
        actual_expr=str(actual_path),
        message=message,
        formatter=formatter,
    )


__all__ = [
    "__version__",
    "Actual",
    "AssertionFailure",
    "AssertionResult",
    "ExpressionPair",
    "FailureFormatter",
    "FailureMessageFormatter",
    "FormatterConfigError",
    "DEFAULT_FORMATTER",
    "capture_expressions",
    "check",
    "should",
    "should_raise",
    "compare_text",
    "compare_files",
]
