"""Shared state and helpers for the chaining wrapper."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, NoReturn

from shouldpack.assertions.exceptions import AssertionFailure
from shouldpack.capture.context import ExpressionPair, capture_expressions, normalize_expression
from shouldpack.messages.base import FailureFormatter
from shouldpack.messages.formatter import DEFAULT_FORMATTER
from shouldpack.messages.models import Failure, NotEqual


class ActualBase:
    """Value under test, its call-site text and the formatter used on failure."""

    __slots__ = ("_value", "_expression", "_formatter")

    def __init__(
        self,
        value: Any,
        expression: str | None = None,
        *,
        formatter: FailureFormatter = DEFAULT_FORMATTER,
    ) -> None:
        self._value = value
        self._expression = normalize_expression(expression)
        self._formatter = formatter

    @property
    def value(self) -> Any:
        return self._value

    @property
    def and_(self) -> Any:
        """The same wrapper, for reading chained assertions aloud."""
        return self

    @property
    def expression(self) -> str:
        return self._expression

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r}, expression={self._expression!r})"

    def _capture(self, expected_expr: str | None = None) -> AbstractContextManager[ExpressionPair]:
        return capture_expressions(actual=self._expression, expected=expected_expr)

    def _fail(self, failure: Failure, cause: BaseException | None = None) -> NoReturn:
        error = AssertionFailure(self._formatter.render(failure))
        if cause is not None:
            raise error from cause
        raise error

    def _require_instance(self, expected_type: type, message: str | None) -> None:
        if isinstance(self._value, expected_type):
            return
        with capture_expressions(actual=self._expression, expected=""):
            self._fail(NotEqual(expected_type, type(self._value), message))
