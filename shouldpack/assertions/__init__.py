"""Fluent assertion surface for shouldkit."""

from shouldpack.assertions.actual import Actual, should, should_raise
from shouldpack.assertions.exceptions import AssertionFailure
from shouldpack.assertions.numbers import FLOAT_EQUALITY_ERROR
from shouldpack.assertions.result import AssertionResult, check

__all__ = [
    "Actual",
    "AssertionFailure",
    "AssertionResult",
    "FLOAT_EQUALITY_ERROR",
    "check",
    "should",
    "should_raise",
]
