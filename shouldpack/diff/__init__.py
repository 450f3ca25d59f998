"""Snippet and divergence rendering for shouldkit."""

from shouldpack.diff.models import DivergenceSnippets, StringSnippet
from shouldpack.diff.snippet import (
    ELLIPSES,
    MAX_ARROW_INDEX,
    MAX_STRING_WIDTH,
    build_snippet,
    element_listing,
    get_snippet,
    pointer,
    select_first_few,
    string_snippets,
    tail_snippet,
)

__all__ = [
    "ELLIPSES",
    "MAX_STRING_WIDTH",
    "MAX_ARROW_INDEX",
    "StringSnippet",
    "DivergenceSnippets",
    "build_snippet",
    "get_snippet",
    "tail_snippet",
    "string_snippets",
    "pointer",
    "select_first_few",
    "element_listing",
]
