"""Deterministic text rendering of operand values for failure reports."""

from __future__ import annotations

import math
from typing import Any
import warnings

ESCAPES: tuple[tuple[str, str], ...] = (
    ("\r", "\\r"),
    ("\n", "\\n"),
)

ESCAPED_CHARACTERS = frozenset(raw for raw, _ in ESCAPES)

# Beyond this magnitude integral floats keep their exponent form.
_MAX_PLAIN_FLOAT = 1e16


def render_value(value: Any) -> str:
    """Render a value the way it appears between angle brackets."""
    if value is None:
        return "None"
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        return _render_float(value)
    if isinstance(value, type):
        return value.__qualname__
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception as error:
        type_name = value.__class__.__qualname__
        warnings.warn(
            (
                f"shouldkit could not render operand of type {type_name}: "
                f"{error.__class__.__name__}: {error}"
            ),
            RuntimeWarning,
            stacklevel=2,
        )
        return f"unprintable {type_name} object"


def object_value(value: Any) -> str:
    return f"<{render_value(value)}>"


def type_name(value: Any) -> str:
    if value is None:
        return "None"
    return value.__class__.__qualname__


def escape(value: str) -> str:
    for raw, escaped in ESCAPES:
        value = value.replace(raw, escaped)
    return value


def unescape(value: str) -> str:
    for raw, escaped in reversed(ESCAPES):
        value = value.replace(escaped, raw)
    return value


def string_value(snippet: str) -> str:
    return f'"{escape(snippet)}"'


def parse_string_value(rendered: str) -> str:
    """Strip the quotes from a :func:`string_value` and undo its escaping.

    Only the escaping of ``\\r`` and ``\\n`` is undone, so text that already
    held a backslash followed by ``r`` or ``n`` comes back as a control
    character. Truncated snippets keep their ``...`` markers.
    """
    if len(rendered) >= 2 and rendered[0] == '"' and rendered[-1] == '"':
        rendered = rendered[1:-1]
    return unescape(rendered)


def _render_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
        return str(int(value))
    return repr(value)
