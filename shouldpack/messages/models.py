"""Closed set of failure variants consumed by the failure message formatter.

Every variant carries the operands needed to describe one kind of mismatch
plus the optional caller-supplied message that ends the report.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, ClassVar, Union


@dataclass(frozen=True, slots=True)
class _Failure:
    kind: ClassVar[str] = "failure"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"kind": self.kind}
        for item in fields(self):
            payload[item.name] = getattr(self, item.name)
        return payload


@dataclass(frozen=True, slots=True)
class NotEqual(_Failure):
    kind: ClassVar[str] = "not_equal"

    expected: Any
    actual: Any
    message: str | None = None


@dataclass(frozen=True, slots=True)
class StringsNotEqual(_Failure):
    kind: ClassVar[str] = "strings_not_equal"

    expected: str
    actual: str
    message: str | None = None


@dataclass(frozen=True, slots=True)
class AreEqual(_Failure):
    kind: ClassVar[str] = "are_equal"

    not_expected: Any
    actual: Any
    message: str | None = None


@dataclass(frozen=True, slots=True)
class IsNone(_Failure):
    kind: ClassVar[str] = "is_none"

    message: str | None = None


@dataclass(frozen=True, slots=True)
class NotNone(_Failure):
    kind: ClassVar[str] = "not_none"

    actual: Any
    message: str | None = None


@dataclass(frozen=True, slots=True)
class NotSame(_Failure):
    kind: ClassVar[str] = "not_same"

    expected: Any
    actual: Any
    message: str | None = None


@dataclass(frozen=True, slots=True)
class AreSame(_Failure):
    kind: ClassVar[str] = "are_same"

    actual: Any
    message: str | None = None


@dataclass(frozen=True, slots=True)
class NotGreaterThan(_Failure):
    kind: ClassVar[str] = "not_greater_than"

    expected: Any
    actual: Any
    message: str | None = None


@dataclass(frozen=True, slots=True)
class NotLessThan(_Failure):
    kind: ClassVar[str] = "not_less_than"

    expected: Any
    actual: Any
    message: str | None = None


@dataclass(frozen=True, slots=True)
class NotEmpty(_Failure):
    kind: ClassVar[str] = "not_empty"

    actual: tuple[Any, ...]
    message: str | None = None


@dataclass(frozen=True, slots=True)
class IsEmpty(_Failure):
    kind: ClassVar[str] = "is_empty"

    message: str | None = None


@dataclass(frozen=True, slots=True)
class LengthMismatch(_Failure):
    kind: ClassVar[str] = "length_mismatch"

    expected_length: int
    actual: tuple[Any, ...]
    message: str | None = None


@dataclass(frozen=True, slots=True)
class DoesNotContain(_Failure):
    kind: ClassVar[str] = "does_not_contain"

    expected: Any
    actual: tuple[Any, ...]
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Contains(_Failure):
    kind: ClassVar[str] = "contains"

    not_expected: Any
    actual: tuple[Any, ...]
    index: int
    message: str | None = None


@dataclass(frozen=True, slots=True)
class SequencesDiffer(_Failure):
    kind: ClassVar[str] = "sequences_differ"

    expected: tuple[Any, ...]
    actual: tuple[Any, ...]
    message: str | None = None


@dataclass(frozen=True, slots=True)
class ItemsNotSame(_Failure):
    kind: ClassVar[str] = "items_not_same"

    expected: tuple[Any, ...]
    actual: tuple[Any, ...]
    message: str | None = None


@dataclass(frozen=True, slots=True)
class NoException(_Failure):
    kind: ClassVar[str] = "no_exception"

    expected_type: type[BaseException]
    function: Callable[..., Any]
    function_label: str | None = None
    message: str | None = None


@dataclass(frozen=True, slots=True)
class WrongException(_Failure):
    kind: ClassVar[str] = "wrong_exception"

    expected_type: type[BaseException]
    actual_type: type[BaseException]
    function: Callable[..., Any]
    function_label: str | None = None
    message: str | None = None


@dataclass(frozen=True, slots=True)
class StringDoesNotContain(_Failure):
    kind: ClassVar[str] = "string_does_not_contain"

    expected_substring: str
    actual: str
    message: str | None = None


@dataclass(frozen=True, slots=True)
class StringContains(_Failure):
    kind: ClassVar[str] = "string_contains"

    not_expected_substring: str
    actual: str
    index: int
    message: str | None = None


@dataclass(frozen=True, slots=True)
class DoesNotStartWith(_Failure):
    kind: ClassVar[str] = "does_not_start_with"

    expected_start: str
    actual: str
    message: str | None = None


@dataclass(frozen=True, slots=True)
class DoesNotEndWith(_Failure):
    kind: ClassVar[str] = "does_not_end_with"

    expected_end: str
    actual: str
    message: str | None = None


Failure = Union[
    NotEqual,
    StringsNotEqual,
    AreEqual,
    IsNone,
    NotNone,
    NotSame,
    AreSame,
    NotGreaterThan,
    NotLessThan,
    NotEmpty,
    IsEmpty,
    LengthMismatch,
    DoesNotContain,
    Contains,
    SequencesDiffer,
    ItemsNotSame,
    NoException,
    WrongException,
    StringDoesNotContain,
    StringContains,
    DoesNotStartWith,
    DoesNotEndWith,
]
