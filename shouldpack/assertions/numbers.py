"""Numeric assertions: tolerance equality, ordering and NaN."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from shouldpack.assertions.objects import ObjectAssertions
from shouldpack.core.compare import are_within_tolerance, is_greater_than, is_less_than, is_nan
from shouldpack.messages.models import AreEqual, NotEqual, NotGreaterThan, NotLessThan

FLOAT_EQUALITY_ERROR = (
    "Don't compare floating point numbers for direct equality. "
    "Please specify a tolerance instead."
)


class NumberAssertions(ObjectAssertions):
    __slots__ = ()

    def should_be(
        self,
        expected: Any,
        message: str | None = None,
        *,
        expected_expr: str | None = None,
        tolerance: float | None = None,
    ) -> Any:
        """Assert equality; floats must be compared within a ``tolerance``."""
        if tolerance is None:
            if isinstance(expected, float):
                raise TypeError(FLOAT_EQUALITY_ERROR)
            return super().should_be(expected, message, expected_expr=expected_expr)

        _validate_tolerance(tolerance)
        with self._capture(expected_expr):
            self._require_instance(Real, message)
            if not are_within_tolerance(self._value, expected, tolerance):
                self._fail(NotEqual(expected, self._value, message))
        return self

    def should_not_be(
        self,
        not_expected: Any,
        message: str | None = None,
        *,
        not_expected_expr: str | None = None,
        tolerance: float | None = None,
    ) -> Any:
        if tolerance is None:
            if isinstance(not_expected, float):
                raise TypeError(FLOAT_EQUALITY_ERROR)
            return super().should_not_be(
                not_expected, message, not_expected_expr=not_expected_expr
            )

        _validate_tolerance(tolerance)
        with self._capture(not_expected_expr):
            self._require_instance(Real, message)
            if are_within_tolerance(self._value, not_expected, tolerance):
                self._fail(AreEqual(not_expected, self._value, message))
        return self

    def should_be_greater_than(
        self,
        expected: Any,
        message: str | None = None,
        *,
        expected_expr: str | None = None,
    ) -> Any:
        with self._capture(expected_expr):
            if not is_greater_than(self._value, expected):
                self._fail(NotGreaterThan(expected, self._value, message))
        return self

    def should_be_less_than(
        self,
        expected: Any,
        message: str | None = None,
        *,
        expected_expr: str | None = None,
    ) -> Any:
        with self._capture(expected_expr):
            if not is_less_than(self._value, expected):
                self._fail(NotLessThan(expected, self._value, message))
        return self

    def should_be_nan(self, message: str | None = None) -> None:
        with self._capture(""):
            if not is_nan(self._value):
                self._fail(NotEqual(math.nan, self._value, message))

    def should_not_be_nan(self, message: str | None = None) -> Any:
        with self._capture(""):
            if is_nan(self._value):
                self._fail(AreEqual(math.nan, self._value, message))
        return self


def _validate_tolerance(tolerance: float) -> None:
    if isinstance(tolerance, bool) or not isinstance(tolerance, Real):
        raise TypeError("tolerance must be a real number")
    if is_nan(tolerance) or tolerance < 0:
        raise ValueError("tolerance must be a non-negative number")
