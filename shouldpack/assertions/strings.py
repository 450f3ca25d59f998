"""String assertions: substring containment, prefixes and suffixes."""

from __future__ import annotations

from typing import Any

from shouldpack.assertions.sequences import CollectionAssertions
from shouldpack.messages.models import (
    DoesNotEndWith,
    DoesNotStartWith,
    StringContains,
    StringDoesNotContain,
)


class StringAssertions(CollectionAssertions):
    __slots__ = ()

    def should_contain(
        self,
        expected: Any,
        message: str | None = None,
        *,
        expected_expr: str | None = None,
    ) -> Any:
        """Assert that a string contains a substring (or a collection an item)."""
        if not self._is_string_operation(expected):
            return super().should_contain(expected, message, expected_expr=expected_expr)

        _require_argument(expected, "expected")
        with self._capture(expected_expr):
            self._require_instance(str, message)
            if expected not in self._value:
                self._fail(StringDoesNotContain(expected, self._value, message))
        return self

    def should_not_contain(
        self,
        not_expected: Any,
        message: str | None = None,
        *,
        not_expected_expr: str | None = None,
    ) -> Any:
        if not self._is_string_operation(not_expected):
            return super().should_not_contain(
                not_expected, message, not_expected_expr=not_expected_expr
            )

        _require_argument(not_expected, "not_expected")
        with self._capture(not_expected_expr):
            self._require_instance(str, message)
            index = self._value.find(not_expected)
            if index != -1:
                self._fail(StringContains(not_expected, self._value, index, message))
        return self

    def should_start_with(
        self,
        expected_start: str,
        message: str | None = None,
        *,
        expected_expr: str | None = None,
    ) -> Any:
        _require_argument(expected_start, "expected_start")
        with self._capture(expected_expr):
            self._require_instance(str, message)
            if not self._value.startswith(expected_start):
                self._fail(DoesNotStartWith(expected_start, self._value, message))
        return self

    def should_end_with(
        self,
        expected_end: str,
        message: str | None = None,
        *,
        expected_expr: str | None = None,
    ) -> Any:
        _require_argument(expected_end, "expected_end")
        with self._capture(expected_expr):
            self._require_instance(str, message)
            if not self._value.endswith(expected_end):
                self._fail(DoesNotEndWith(expected_end, self._value, message))
        return self

    def _is_string_operation(self, operand: Any) -> bool:
        if isinstance(self._value, str):
            return True
        return self._value is None and (operand is None or isinstance(operand, str))


def _require_argument(value: Any, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} must not be None")
