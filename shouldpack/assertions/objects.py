"""Generic assertions: equality, None checks, identity and type."""

from __future__ import annotations

from typing import Any

from shouldpack.assertions.base import ActualBase
from shouldpack.core.compare import are_same, objects_are_equal
from shouldpack.messages.models import (
    AreEqual,
    AreSame,
    IsNone,
    NotEqual,
    NotNone,
    NotSame,
    StringsNotEqual,
)


class ObjectAssertions(ActualBase):
    __slots__ = ()

    def should_be(
        self,
        expected: Any,
        message: str | None = None,
        *,
        expected_expr: str | None = None,
    ) -> Any:
        """Assert equality using the operands' own ``==``."""
        with self._capture(expected_expr):
            if not objects_are_equal(self._value, expected):
                if isinstance(self._value, str) and isinstance(expected, str):
                    self._fail(StringsNotEqual(expected, self._value, message))
                self._fail(NotEqual(expected, self._value, message))
        return self

    def should_not_be(
        self,
        not_expected: Any,
        message: str | None = None,
        *,
        not_expected_expr: str | None = None,
    ) -> Any:
        """Assert inequality using the operands' own ``==``."""
        with self._capture(not_expected_expr):
            if objects_are_equal(self._value, not_expected):
                self._fail(AreEqual(not_expected, self._value, message))
        return self

    def should_be_none(self, message: str | None = None) -> None:
        with self._capture(""):
            if self._value is not None:
                self._fail(NotNone(self._value, message))

    def should_not_be_none(self, message: str | None = None) -> Any:
        with self._capture(""):
            if self._value is None:
                self._fail(IsNone(message))
        return self

    def should_refer_to(
        self,
        expected: Any,
        message: str | None = None,
        *,
        expected_expr: str | None = None,
    ) -> Any:
        """Assert that both operands are the same instance."""
        with self._capture(expected_expr):
            if not are_same(self._value, expected):
                self._fail(NotSame(expected, self._value, message))
        return self

    def should_not_refer_to(
        self,
        not_expected: Any,
        message: str | None = None,
        *,
        not_expected_expr: str | None = None,
    ) -> Any:
        with self._capture(not_expected_expr):
            if are_same(self._value, not_expected):
                self._fail(AreSame(self._value, message))
        return self

    def should_be_a(self, expected_type: type, message: str | None = None) -> Any:
        """Assert that the value is an instance of ``expected_type``."""
        with self._capture(""):
            self._require_instance(expected_type, message)
        return self
