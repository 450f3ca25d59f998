"""Operand expression capture for shouldkit."""

from shouldpack.capture.context import (
    UNAVAILABLE,
    ExpressionPair,
    capture_expressions,
    get_actual,
    get_current_expressions,
    get_expected,
    normalize_expression,
)
from shouldpack.capture.source import clean_function_body, describe_callable

__all__ = [
    "ExpressionPair",
    "UNAVAILABLE",
    "capture_expressions",
    "get_current_expressions",
    "get_actual",
    "get_expected",
    "normalize_expression",
    "describe_callable",
    "clean_function_body",
]
