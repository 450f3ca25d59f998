"""Truncated string windows, divergence pointers and element listings."""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from shouldpack.core.rendering import ESCAPED_CHARACTERS, object_value
from shouldpack.diff.models import DivergenceSnippets, StringSnippet

T = TypeVar("T")

ELLIPSES = "..."
MAX_STRING_WIDTH = 60
MAX_ARROW_INDEX = 20
ELEMENT_INDENT = "    "
ARROW = "^"


def build_snippet(whole: str, from_index: int, max_width: int = MAX_STRING_WIDTH) -> StringSnippet:
    """Cut at most ``max_width`` characters out of ``whole`` starting at ``from_index``.

    A leading ``...`` takes the place of the first three characters after
    ``from_index``, so column ``c`` of the snippet still lines up with
    ``whole[from_index + c]``. A trailing ``...`` is added when the window
    stops short of the end. Offsets outside the string are clamped, and a
    marker is left out when ``max_width`` has no room for it beside at least
    one character of text.
    """
    from_index = max(0, min(from_index, len(whole)))
    width = max(0, max_width)
    prefix = ""
    suffix = ""
    start = from_index

    if from_index > 0 and width > len(ELLIPSES):
        prefix = ELLIPSES
        width -= len(prefix)
        start = min(from_index + len(prefix), len(whole))

    if start + width >= len(whole):
        width = len(whole) - start
    elif width > len(ELLIPSES):
        suffix = ELLIPSES
        width -= len(suffix)

    end = start + width
    return StringSnippet(
        text=prefix + whole[start:end] + suffix,
        offset=from_index,
        truncated_start=from_index > 0,
        truncated_end=end < len(whole),
    )


def get_snippet(whole: str, from_index: int, max_width: int = MAX_STRING_WIDTH) -> str:
    return build_snippet(whole, from_index, max_width).text


def tail_snippet(whole: str, max_width: int = MAX_STRING_WIDTH) -> str:
    return get_snippet(whole, max(0, len(whole) - max_width), max_width)


def string_snippets(
    expected: str,
    actual: str,
    index: int,
    *,
    max_width: int = MAX_STRING_WIDTH,
    max_arrow_index: int = MAX_ARROW_INDEX,
) -> DivergenceSnippets:
    """Window both strings so that ``index`` is visible, and point at it."""
    offset = max(0, index - max_arrow_index)
    expected_snippet = build_snippet(expected, offset, max_width)
    actual_snippet = build_snippet(actual, offset, max_width)

    return DivergenceSnippets(
        index=index,
        offset=offset,
        expected=expected_snippet,
        actual=actual_snippet,
        arrow=pointer(actual_snippet.text, index - offset),
    )


def pointer(rendered_from: str, column: int) -> str:
    """Spaces then ``^`` under ``column``, shifted once per two-character escape before it."""
    column = max(0, column)
    column += sum(1 for char in rendered_from[:column] if char in ESCAPED_CHARACTERS)
    return " " * column + ARROW


def select_first_few(
    count: int,
    items: Iterable[T],
    select: Callable[[T], str],
    extra: str,
) -> list[str]:
    """Render up to ``count`` items; a further item is replaced by ``extra``."""
    selected: list[str] = []
    for idx, item in enumerate(items):
        if idx == count:
            selected.append(extra)
            break
        selected.append(select(item))
    return selected


def element_listing(items: Iterable[Any], limit: int, *, newline: str = "\n") -> str:
    """Bracketed, one-per-line listing of at most ``limit`` elements."""
    rendered = select_first_few(
        limit,
        items,
        lambda item: f"{newline}{ELEMENT_INDENT}{object_value(item)}",
        f"{newline}{ELEMENT_INDENT}{ELLIPSES}",
    )
    return "[" + ",".join(rendered) + newline + "]"
