"""Equality, identity, ordering and tolerance predicates."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
import math
import struct
from typing import Any, Callable, Sequence

EqualityPredicate = Callable[[Any, Any], bool]


@dataclass(frozen=True, slots=True)
class ComparisonOutcome:
    """Result of an ordered comparison, with the first divergence if any."""

    equal: bool
    index: int | None = None
    length_mismatch: bool = False
    expected_length: int | None = None
    actual_length: int | None = None

    def __bool__(self) -> bool:
        return self.equal

    def to_dict(self) -> dict[str, Any]:
        return {
            "equal": self.equal,
            "index": self.index,
            "length_mismatch": self.length_mismatch,
            "expected_length": self.expected_length,
            "actual_length": self.actual_length,
        }


def objects_are_equal(actual: Any, expected: Any) -> bool:
    """Value equality using the operands' own ``==``; ``None`` only equals ``None``."""
    if actual is None or expected is None:
        return actual is expected
    return bool(actual == expected)


def are_same(actual: Any, expected: Any) -> bool:
    return actual is expected


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def are_within_tolerance(actual: Any, expected: Any, tolerance: Any) -> bool:
    """Check ``|actual - expected| <= tolerance``.

    NaN is never within tolerance of anything. Infinities only match the same
    infinity. A zero tolerance requires two floats to be bit-for-bit equal;
    other numbers are compared exactly in their own type.
    """
    if is_nan(actual) or is_nan(expected) or is_nan(tolerance):
        return False
    if tolerance < 0:
        return False
    if _is_infinite(actual) or _is_infinite(expected):
        return actual == expected
    if tolerance == 0:
        if isinstance(actual, float) and isinstance(expected, float):
            return _float_bits(actual) == _float_bits(expected)
        return bool(actual == expected)
    try:
        return bool(abs(actual - expected) <= tolerance)
    except OverflowError:
        # Mixing an int beyond the float range with a float; redo it exactly.
        return bool(abs(Fraction(actual) - Fraction(expected)) <= tolerance)


def compare_order(actual: Any, expected: Any) -> int:
    """Three-way comparison built on the operands' rich comparison methods."""
    return int(bool(actual > expected)) - int(bool(actual < expected))


def is_greater_than(actual: Any, expected: Any) -> bool:
    return compare_order(actual, expected) > 0


def is_less_than(actual: Any, expected: Any) -> bool:
    return compare_order(actual, expected) < 0


def compare_sequences(
    expected: Sequence[Any],
    actual: Sequence[Any],
    *,
    predicate: EqualityPredicate = objects_are_equal,
) -> ComparisonOutcome:
    """Compare two sequences element-wise by index.

    A length difference is reported on its own, without an index.
    """
    expected_length = len(expected)
    actual_length = len(actual)

    if expected_length != actual_length:
        return ComparisonOutcome(
            equal=False,
            length_mismatch=True,
            expected_length=expected_length,
            actual_length=actual_length,
        )

    for idx in range(expected_length):
        if not predicate(actual[idx], expected[idx]):
            return ComparisonOutcome(
                equal=False,
                index=idx,
                expected_length=expected_length,
                actual_length=actual_length,
            )

    return ComparisonOutcome(
        equal=True,
        expected_length=expected_length,
        actual_length=actual_length,
    )


def compare_strings(expected: str, actual: str) -> ComparisonOutcome:
    return compare_sequences(expected, actual, predicate=_chars_equal)


def first_difference(expected: Sequence[Any], actual: Sequence[Any]) -> int:
    """Position of the first differing element, or the shorter length for a prefix."""
    shared = min(len(expected), len(actual))
    for idx in range(shared):
        if not objects_are_equal(actual[idx], expected[idx]):
            return idx
    return shared


def _chars_equal(left: str, right: str) -> bool:
    return left == right


def _is_infinite(value: Any) -> bool:
    return isinstance(value, float) and math.isinf(value)


def _float_bits(value: float) -> bytes:
    return struct.pack("<d", value)
