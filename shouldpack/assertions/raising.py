"""Exception expectations."""

from __future__ import annotations

from typing import Any, Callable

from shouldpack.assertions.exceptions import AssertionFailure
from shouldpack.capture.context import capture_expressions
from shouldpack.messages.base import FailureFormatter
from shouldpack.messages.formatter import DEFAULT_FORMATTER
from shouldpack.messages.models import NoException, WrongException


def capture_raised(
    expected_type: type[BaseException],
    function: Callable[[], Any],
    message: str | None = None,
    *,
    label: str | None = None,
    formatter: FailureFormatter = DEFAULT_FORMATTER,
) -> BaseException:
    """Call ``function`` and return the ``expected_type`` exception it raises.

    Any other ``Exception`` fails the assertion and is chained as the cause.
    Non-``Exception`` signals such as ``KeyboardInterrupt`` propagate untouched
    unless they are what was expected.
    """
    if not (isinstance(expected_type, type) and issubclass(expected_type, BaseException)):
        raise TypeError("expected_type must be an exception class")

    with capture_expressions(actual=label, expected=""):
        try:
            function()
        except BaseException as error:
            if isinstance(error, expected_type):
                return error
            if not isinstance(error, Exception):
                raise
            report = formatter.render(
                WrongException(expected_type, type(error), function, label, message)
            )
            raise AssertionFailure(report) from error

        raise AssertionFailure(
            formatter.render(NoException(expected_type, function, label, message))
        )
