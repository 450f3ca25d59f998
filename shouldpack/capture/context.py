"""Assertion-scoped capture of operand expression text."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any, Iterator

_CURRENT_EXPRESSIONS: ContextVar["ExpressionPair | None"] = ContextVar(
    "shouldpack_current_expressions", default=None
)


@dataclass(frozen=True, slots=True)
class ExpressionPair:
    """Source text of the actual and expected operands of one assertion."""

    actual: str = ""
    expected: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"actual": self.actual, "expected": self.expected}


UNAVAILABLE = ExpressionPair()


def normalize_expression(text: Any) -> str:
    """Expression text, or ``""`` when none can be supplied."""
    if not isinstance(text, str):
        return ""
    return text.strip()


def get_current_expressions() -> ExpressionPair:
    return _CURRENT_EXPRESSIONS.get() or UNAVAILABLE


def get_actual() -> str:
    return get_current_expressions().actual


def get_expected() -> str:
    return get_current_expressions().expected


@contextmanager
def capture_expressions(
    actual: str | None = None,
    expected: str | None = None,
) -> Iterator[ExpressionPair]:
    # Fields left as None are inherited from an enclosing scope, so an assertion
    # that delegates to another one keeps reporting the outer call-site text.
    outer = _CURRENT_EXPRESSIONS.get()
    pair = outer or UNAVAILABLE
    if outer is None or actual is not None:
        pair = replace(pair, actual=normalize_expression(actual))
    if outer is None or expected is not None:
        pair = replace(pair, expected=normalize_expression(expected))

    token = _CURRENT_EXPRESSIONS.set(pair)
    try:
        yield pair
    finally:
        _CURRENT_EXPRESSIONS.reset(token)
