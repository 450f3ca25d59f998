"""Default failure message formatter.

Reports are deterministic: each label column is padded so that the values
on paired lines start at the same column, long strings are windowed with
``...`` markers, and a ``^`` pointer marks the first divergence.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass
import re
from typing import Any, Sequence

from shouldpack.capture.context import ExpressionPair, get_current_expressions
from shouldpack.capture.source import describe_callable
from shouldpack.core.compare import (
    are_same,
    compare_sequences,
    compare_strings,
    first_difference,
    objects_are_equal,
)
from shouldpack.core.rendering import object_value, render_value, string_value
from shouldpack.diff.snippet import (
    ELLIPSES,
    MAX_ARROW_INDEX,
    MAX_STRING_WIDTH,
    build_snippet,
    element_listing,
    get_snippet,
    pointer,
    string_snippets,
    tail_snippet,
)
from shouldpack.messages.exceptions import FormatterConfigError
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

EXPECTED_TEXT = "should be "
NOT_EXPECTED_TEXT = "should not be "
EXPECTED_INSTANCE_TEXT = "should be instance "
NOT_EXPECTED_INSTANCE_TEXT = "shouldn't be instance "
EXPECTED_EXCEPTION_TEXT = "should raise "
GREATER_THAN_TEXT = "should be greater than "
LESS_THAN_TEXT = "should be less than "
CONTAIN_TEXT = "should contain "
NOT_CONTAIN_TEXT = "should not contain "
START_WITH_TEXT = "should start with "
END_WITH_TEXT = "should end with "

ACTUAL_TEXT = "but was".ljust(len(EXPECTED_TEXT))
ACTUAL_NOT_EXPECTED_TEXT = "but was".ljust(len(NOT_EXPECTED_TEXT))
ACTUAL_INSTANCE_TEXT = "but was".ljust(len(EXPECTED_INSTANCE_TEXT))
ACTUAL_EXCEPTION_TEXT = "but raised".ljust(len(EXPECTED_EXCEPTION_TEXT))
ACTUAL_GREATER_THAN_TEXT = "but was".ljust(len(GREATER_THAN_TEXT))
ACTUAL_LESS_THAN_TEXT = "but was".ljust(len(LESS_THAN_TEXT))
ACTUAL_CONTAIN_TEXT = "but was".ljust(len(CONTAIN_TEXT))
ACTUAL_NOT_CONTAIN_TEXT = "but was".ljust(len(NOT_CONTAIN_TEXT))
ACTUAL_START_TEXT = "but starts with".ljust(len(START_WITH_TEXT))
ACTUAL_END_TEXT = "but ends with".ljust(len(END_WITH_TEXT))

# One extra column for the opening quote of the rendered actual string.
ARROW_PREFIX = " " * (len(ACTUAL_TEXT) + 1)

MAX_LISTED_ELEMENTS = 3
MAX_CONTAINED_ELEMENTS = 10

_NON_WHITESPACE = re.compile(r"\S")
_LITERAL_ERRORS = (ValueError, TypeError, SyntaxError, MemoryError, RecursionError)


@dataclass(frozen=True, slots=True)
class FailureMessageFormatter:
    """Immutable formatter; one instance can be shared freely."""

    max_string_width: int = MAX_STRING_WIDTH
    max_arrow_index: int = MAX_ARROW_INDEX
    max_listed_elements: int = MAX_LISTED_ELEMENTS
    max_contained_elements: int = MAX_CONTAINED_ELEMENTS
    newline: str = "\n"

    def __post_init__(self) -> None:
        minimum_width = 2 * len(ELLIPSES) + 1
        if not isinstance(self.max_string_width, int) or self.max_string_width < minimum_width:
            raise FormatterConfigError(
                f"max_string_width must be an integer >= {minimum_width}"
            )
        if not isinstance(self.max_arrow_index, int) or not (
            len(ELLIPSES) <= self.max_arrow_index < self.max_string_width - len(ELLIPSES)
        ):
            raise FormatterConfigError(
                "max_arrow_index must leave room for both ellipses inside max_string_width"
            )
        for name in ("max_listed_elements", "max_contained_elements"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise FormatterConfigError(f"{name} must be a positive integer")
        if self.newline not in ("\n", "\r\n"):
            raise FormatterConfigError("newline must be '\\n' or '\\r\\n'")

    def render(self, failure: Failure, expressions: ExpressionPair | None = None) -> str:
        """Compose the report for ``failure``.

        Without explicit ``expressions`` the pair captured for the current
        assertion call is used.
        """
        pair = expressions if expressions is not None else get_current_expressions()

        if isinstance(failure, NotEqual):
            lines = self._not_equal(failure, pair)
        elif isinstance(failure, StringsNotEqual):
            lines = self._strings_not_equal(failure, pair)
        elif isinstance(failure, AreEqual):
            lines = self._are_equal(failure, pair)
        elif isinstance(failure, IsNone):
            lines = self._header(pair) + ["should not be None, but was."]
        elif isinstance(failure, NotNone):
            lines = self._header(pair) + [f"should be None, but was {object_value(failure.actual)}."]
        elif isinstance(failure, NotSame):
            lines = self._not_same(failure, pair)
        elif isinstance(failure, AreSame):
            lines = self._header(pair) + self._expected(
                NOT_EXPECTED_INSTANCE_TEXT, failure.actual, pair.expected
            )
        elif isinstance(failure, NotGreaterThan):
            lines = self._ordering(
                failure, pair, GREATER_THAN_TEXT, ACTUAL_GREATER_THAN_TEXT
            )
        elif isinstance(failure, NotLessThan):
            lines = self._ordering(failure, pair, LESS_THAN_TEXT, ACTUAL_LESS_THAN_TEXT)
        elif isinstance(failure, NotEmpty):
            lines = self._header(pair) + [
                "should be empty",
                self._actual_length_elements(failure.actual),
            ]
        elif isinstance(failure, IsEmpty):
            lines = self._header(pair) + ["should not be empty, but was."]
        elif isinstance(failure, LengthMismatch):
            lines = self._header(pair) + self._length_difference(
                failure.expected_length, failure.actual
            )
        elif isinstance(failure, DoesNotContain):
            lines = self._does_not_contain(failure, pair)
        elif isinstance(failure, Contains):
            lines = (
                self._header(pair)
                + self._expected(NOT_CONTAIN_TEXT, failure.not_expected, pair.expected)
                + [f"but was found at index {failure.index}."]
            )
        elif isinstance(failure, SequencesDiffer):
            lines = self._sequences_differ(failure, pair)
        elif isinstance(failure, ItemsNotSame):
            lines = self._items_not_same(failure, pair)
        elif isinstance(failure, NoException):
            lines = self._function_body(failure.function, failure.function_label) + [
                EXPECTED_EXCEPTION_TEXT + object_value(failure.expected_type),
                "but didn't raise at all.",
            ]
        elif isinstance(failure, WrongException):
            lines = self._function_body(failure.function, failure.function_label) + [
                EXPECTED_EXCEPTION_TEXT + object_value(failure.expected_type),
                ACTUAL_EXCEPTION_TEXT + object_value(failure.actual_type),
            ]
        elif isinstance(failure, StringDoesNotContain):
            lines = self._string_does_not_contain(failure, pair)
        elif isinstance(failure, StringContains):
            lines = self._string_contains(failure, pair)
        elif isinstance(failure, DoesNotStartWith):
            lines = (
                self._header(pair)
                + self._expected_string(
                    START_WITH_TEXT, failure.expected_start, failure.expected_start, pair.expected
                )
                + [
                    ACTUAL_START_TEXT
                    + string_value(get_snippet(failure.actual, 0, self.max_string_width))
                ]
            )
        elif isinstance(failure, DoesNotEndWith):
            lines = (
                self._header(pair)
                + self._expected_string(
                    END_WITH_TEXT, failure.expected_end, failure.expected_end, pair.expected
                )
                + [ACTUAL_END_TEXT + string_value(tail_snippet(failure.actual, self.max_string_width))]
            )
        else:
            raise TypeError(f"Unsupported failure variant: {type(failure).__name__}")

        if failure.message is not None:
            lines.append(failure.message)
        return self.newline.join(lines)

    def _not_equal(self, failure: NotEqual, pair: ExpressionPair) -> list[str]:
        return (
            self._header(pair)
            + self._expected(EXPECTED_TEXT, failure.expected, pair.expected)
            + [ACTUAL_TEXT + object_value(failure.actual)]
        )

    def _strings_not_equal(self, failure: StringsNotEqual, pair: ExpressionPair) -> list[str]:
        outcome = compare_strings(failure.expected, failure.actual)
        index = (
            outcome.index
            if outcome.index is not None
            else first_difference(failure.expected, failure.actual)
        )
        snippets = string_snippets(
            failure.expected,
            failure.actual,
            index,
            max_width=self.max_string_width,
            max_arrow_index=self.max_arrow_index,
        )

        lines = self._header(pair) + self._expected_string(
            EXPECTED_TEXT, failure.expected, snippets.expected.text, pair.expected
        )
        lines.append(ACTUAL_TEXT + string_value(snippets.actual.text))
        lines.append(ARROW_PREFIX + snippets.arrow)
        if outcome.length_mismatch:
            lines.append(
                f"Length differs: expected {_count(len(failure.expected), 'character')}, "
                f"but was {len(failure.actual)}."
            )
        else:
            lines.append(f"Difference at index {index}.")
        return lines

    def _are_equal(self, failure: AreEqual, pair: ExpressionPair) -> list[str]:
        return (
            self._header(pair)
            + self._expected(NOT_EXPECTED_TEXT, failure.not_expected, pair.expected)
            + [ACTUAL_NOT_EXPECTED_TEXT + object_value(failure.actual)]
        )

    def _not_same(self, failure: NotSame, pair: ExpressionPair) -> list[str]:
        return (
            self._header(pair)
            + self._expected(EXPECTED_INSTANCE_TEXT, failure.expected, pair.expected)
            + [ACTUAL_INSTANCE_TEXT + object_value(failure.actual)]
        )

    def _ordering(
        self,
        failure: NotGreaterThan | NotLessThan,
        pair: ExpressionPair,
        expected_label: str,
        actual_label: str,
    ) -> list[str]:
        return (
            self._header(pair)
            + self._expected(expected_label, failure.expected, pair.expected)
            + [actual_label + object_value(failure.actual)]
        )

    def _does_not_contain(self, failure: DoesNotContain, pair: ExpressionPair) -> list[str]:
        return (
            self._header(pair)
            + self._expected(CONTAIN_TEXT, failure.expected, pair.expected)
            + ["but was " + self._actual_elements(failure.actual)]
        )

    def _sequences_differ(self, failure: SequencesDiffer, pair: ExpressionPair) -> list[str]:
        outcome = compare_sequences(failure.expected, failure.actual)
        if outcome.index is None:
            return self._header(pair, self._expected_collection(pair.expected)) + (
                self._length_difference(len(failure.expected), failure.actual)
            )

        index = outcome.index
        tail = self._expected_collection(pair.expected, f" differs at index {index}.")
        return self._header(pair, tail) + [
            EXPECTED_TEXT + object_value(failure.expected[index]),
            ACTUAL_TEXT + object_value(failure.actual[index]),
        ]

    def _items_not_same(self, failure: ItemsNotSame, pair: ExpressionPair) -> list[str]:
        outcome = compare_sequences(failure.expected, failure.actual, predicate=are_same)
        if outcome.index is None:
            return self._header(pair) + self._length_difference(
                len(failure.expected), failure.actual
            )

        index = outcome.index
        return self._header(pair, f" differs at index {index}.") + [
            EXPECTED_INSTANCE_TEXT + object_value(failure.expected[index]),
            ACTUAL_INSTANCE_TEXT + object_value(failure.actual[index]),
        ]

    def _string_does_not_contain(
        self, failure: StringDoesNotContain, pair: ExpressionPair
    ) -> list[str]:
        actual_snippet = get_snippet(failure.actual, 0, self.max_string_width)
        return (
            self._header(pair)
            + self._expected_string(
                CONTAIN_TEXT, failure.expected_substring, failure.expected_substring, pair.expected
            )
            + [ACTUAL_CONTAIN_TEXT + string_value(actual_snippet)]
        )

    def _string_contains(self, failure: StringContains, pair: ExpressionPair) -> list[str]:
        offset = max(0, failure.index - self.max_arrow_index)
        snippet = build_snippet(failure.actual, offset, self.max_string_width)
        arrow = pointer(snippet.text, failure.index - offset)
        return (
            self._header(pair)
            + self._expected_string(
                NOT_CONTAIN_TEXT,
                failure.not_expected_substring,
                failure.not_expected_substring,
                pair.expected,
            )
            + [
                ACTUAL_NOT_CONTAIN_TEXT + string_value(snippet.text),
                " " * (len(ACTUAL_NOT_CONTAIN_TEXT) + 1) + arrow,
                f"Found at index {failure.index}.",
            ]
        )

    def _header(self, pair: ExpressionPair, tail: str = "") -> list[str]:
        if pair.actual:
            return [pair.actual + tail]
        tail = _capitalize(tail.strip())
        return [tail] if tail else []

    def _function_body(self, function: Any, label: str | None) -> list[str]:
        body = describe_callable(function, label)
        return [body] if body else []

    def _expected(self, label: str, value: Any, expression: str) -> list[str]:
        rendered = render_value(value)
        if _expression_shows_value(expression, value, rendered):
            return [f"{label}<{rendered}>"]
        return [label + expression, f"{' ' * len(label)}<{rendered}>"]

    def _expected_string(self, label: str, value: str, snippet: str, expression: str) -> list[str]:
        if _expression_shows_value(expression, value, value):
            return [label + string_value(snippet)]
        return [label + expression, " " * len(label) + string_value(snippet)]

    def _expected_collection(self, expression: str, next_part: str = "") -> str:
        if not expression or _is_collection_literal(expression):
            return next_part
        return f" doesn't match {expression}." + _capitalize(next_part)

    def _length_difference(self, expected_length: int, actual: Sequence[Any]) -> list[str]:
        return [
            f"should have {_count(expected_length, 'element')}",
            self._actual_length_elements(actual),
        ]

    def _actual_length_elements(self, actual: Sequence[Any]) -> str:
        if not actual:
            return "but was empty."
        if len(actual) == 1:
            return f"but had 1 element: {object_value(actual[0])}"
        return f"but had {len(actual)} elements: " + element_listing(
            actual, self.max_listed_elements, newline=self.newline
        )

    def _actual_elements(self, actual: Sequence[Any]) -> str:
        if not actual:
            return "empty."
        if len(actual) == 1:
            return f"      [{object_value(actual[0])}]"
        return element_listing(actual, self.max_contained_elements, newline=self.newline)


DEFAULT_FORMATTER = FailureMessageFormatter()


def _expression_shows_value(expression: str, value: Any, rendered: str) -> bool:
    if not expression or expression == rendered:
        return True
    try:
        literal = ast.literal_eval(expression)
    except _LITERAL_ERRORS:
        return False
    try:
        return type(literal) is type(value) and objects_are_equal(literal, value)
    except (ValueError, TypeError):
        return False


def _is_collection_literal(expression: str) -> bool:
    try:
        tree = ast.parse(expression, mode="eval")
    except SyntaxError:
        return False
    return isinstance(
        tree.body,
        (ast.List, ast.Tuple, ast.Set, ast.Dict, ast.ListComp, ast.SetComp, ast.DictComp),
    )


def _capitalize(value: str) -> str:
    return _NON_WHITESPACE.sub(lambda match: match.group(0).upper(), value, count=1)


def _count(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
