"""Comparison predicates and value rendering for shouldkit."""

from shouldpack.core.compare import (
    ComparisonOutcome,
    are_same,
    are_within_tolerance,
    compare_order,
    compare_sequences,
    compare_strings,
    first_difference,
    is_greater_than,
    is_less_than,
    is_nan,
    objects_are_equal,
)
from shouldpack.core.rendering import (
    escape,
    object_value,
    parse_string_value,
    render_value,
    string_value,
    type_name,
    unescape,
)

__all__ = [
    "ComparisonOutcome",
    "objects_are_equal",
    "are_same",
    "are_within_tolerance",
    "is_nan",
    "compare_order",
    "is_greater_than",
    "is_less_than",
    "compare_sequences",
    "compare_strings",
    "first_difference",
    "render_value",
    "object_value",
    "type_name",
    "escape",
    "unescape",
    "string_value",
    "parse_string_value",
]
