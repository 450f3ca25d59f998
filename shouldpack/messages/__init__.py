"""Failure report composition for shouldkit."""

from shouldpack.messages.base import FailureFormatter
from shouldpack.messages.exceptions import FormatterConfigError, MessageError
from shouldpack.messages.formatter import DEFAULT_FORMATTER, FailureMessageFormatter
from shouldpack.messages.models import (
    AreEqual,
    AreSame,
    Contains,
    DoesNotContain,
    DoesNotEndWith,
    DoesNotStartWith,
    Failure,
    IsEmpty,
    IsNone,
    ItemsNotSame,
    LengthMismatch,
    NoException,
    NotEmpty,
    NotEqual,
    NotGreaterThan,
    NotLessThan,
    NotNone,
    NotSame,
    SequencesDiffer,
    StringContains,
    StringDoesNotContain,
    StringsNotEqual,
    WrongException,
)

__all__ = [
    "MessageError",
    "FormatterConfigError",
    "FailureFormatter",
    "FailureMessageFormatter",
    "DEFAULT_FORMATTER",
    "Failure",
    "NotEqual",
    "StringsNotEqual",
    "AreEqual",
    "IsNone",
    "NotNone",
    "NotSame",
    "AreSame",
    "NotGreaterThan",
    "NotLessThan",
    "NotEmpty",
    "IsEmpty",
    "LengthMismatch",
    "DoesNotContain",
    "Contains",
    "SequencesDiffer",
    "ItemsNotSame",
    "NoException",
    "WrongException",
    "StringDoesNotContain",
    "StringContains",
    "DoesNotStartWith",
    "DoesNotEndWith",
]
