"""Collection assertions: emptiness, length, membership and ordered equality."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from shouldpack.assertions.base import ActualBase
from shouldpack.core.compare import are_same, compare_sequences, objects_are_equal
from shouldpack.messages.models import (
    Contains,
    DoesNotContain,
    IsEmpty,
    ItemsNotSame,
    LengthMismatch,
    NotEmpty,
    SequencesDiffer,
)


class CollectionAssertions(ActualBase):
    __slots__ = ()

    def should_be_empty(self, message: str | None = None) -> Any:
        with self._capture(""):
            items = self._items(message)
            if items:
                self._fail(NotEmpty(items, message))
        return self

    def should_not_be_empty(self, message: str | None = None) -> Any:
        with self._capture(""):
            if not self._items(message):
                self._fail(IsEmpty(message))
        return self

    def should_have_length(self, expected_length: int, message: str | None = None) -> Any:
        with self._capture(""):
            items = self._items(message)
            if len(items) != expected_length:
                self._fail(LengthMismatch(expected_length, items, message))
        return self

    def should_contain(
        self,
        expected: Any,
        message: str | None = None,
        *,
        expected_expr: str | None = None,
    ) -> Any:
        with self._capture(expected_expr):
            items = self._items(message)
            if not any(objects_are_equal(item, expected) for item in items):
                self._fail(DoesNotContain(expected, items, message))
        return self

    def should_not_contain(
        self,
        not_expected: Any,
        message: str | None = None,
        *,
        not_expected_expr: str | None = None,
    ) -> Any:
        with self._capture(not_expected_expr):
            items = self._items(message)
            for index, item in enumerate(items):
                if objects_are_equal(item, not_expected):
                    self._fail(Contains(not_expected, items, index, message))
        return self

    def should_match(
        self,
        expected: Iterable[Any],
        message: str | None = None,
        *,
        expected_expr: str | None = None,
    ) -> Any:
        """Assert element-wise equality, in order."""
        with self._capture(expected_expr):
            items = self._items(message)
            expected_items = tuple(expected)
            if not compare_sequences(expected_items, items):
                self._fail(SequencesDiffer(expected_items, items, message))
        return self

    def should_match_references(
        self,
        expected: Iterable[Any],
        message: str | None = None,
        *,
        expected_expr: str | None = None,
    ) -> Any:
        """Assert that both collections hold the same instances, in order."""
        with self._capture(expected_expr):
            items = self._items(message)
            expected_items = tuple(expected)
            if not compare_sequences(expected_items, items, predicate=are_same):
                self._fail(ItemsNotSame(expected_items, items, message))
        return self

    def _items(self, message: str | None) -> tuple[Any, ...]:
        self._require_instance(Iterable, message)
        return tuple(self._value)
