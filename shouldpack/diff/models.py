"""Data models for bounded snippets and divergence pointers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class StringSnippet:
    """A bounded window onto a longer string."""

    text: str
    offset: int
    truncated_start: bool = False
    truncated_end: bool = False

    @property
    def truncated(self) -> bool:
        return self.truncated_start or self.truncated_end

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "offset": self.offset,
            "truncated_start": self.truncated_start,
            "truncated_end": self.truncated_end,
        }


@dataclass(frozen=True, slots=True)
class DivergenceSnippets:
    """Expected/actual windows aligned on the first divergence."""

    index: int
    offset: int
    expected: StringSnippet
    actual: StringSnippet
    arrow: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "offset": self.offset,
            "expected": self.expected.to_dict(),
            "actual": self.actual.to_dict(),
            "arrow": self.arrow,
        }
