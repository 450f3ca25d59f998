"""Chaining wrapper and entry points for fluent assertions."""

from __future__ import annotations

from typing import Any, Callable

from shouldpack.assertions.numbers import NumberAssertions
from shouldpack.assertions.raising import capture_raised
from shouldpack.assertions.strings import StringAssertions
from shouldpack.capture.source import describe_callable
from shouldpack.messages.base import FailureFormatter
from shouldpack.messages.formatter import DEFAULT_FORMATTER


class Actual(NumberAssertions, StringAssertions):
    """A value under test; every passing assertion returns the same wrapper."""

    __slots__ = ()

    def should_raise(
        self,
        expected_type: type[BaseException],
        message: str | None = None,
    ) -> "Actual":
        """Call the wrapped function and assert that it raises ``expected_type``."""
        if not callable(self._value):
            raise TypeError("should_raise needs a callable value")
        label = self._expression or None
        error = capture_raised(
            expected_type,
            self._value,
            message,
            label=label,
            formatter=self._formatter,
        )
        return Actual(error, describe_callable(self._value, label), formatter=self._formatter)


def should(
    value: Any,
    expr: str | None = None,
    *,
    formatter: FailureFormatter = DEFAULT_FORMATTER,
) -> Actual:
    """Wrap ``value`` for fluent assertions.

    ``expr`` is the text the caller wrote for the value; it heads every
    failure report raised from this chain.
    """
    return Actual(value, expr, formatter=formatter)


def should_raise(
    expected_type: type[BaseException],
    function: Callable[[], Any],
    message: str | None = None,
    *,
    expr: str | None = None,
    formatter: FailureFormatter = DEFAULT_FORMATTER,
) -> Actual:
    """Call ``function`` and assert that it raises ``expected_type``.

    Returns a wrapper around the raised exception.
    """
    error = capture_raised(expected_type, function, message, label=expr, formatter=formatter)
    return Actual(error, describe_callable(function, expr), formatter=formatter)
