"""Failure formatter contract."""

from __future__ import annotations

from typing import Protocol

from shouldpack.capture.context import ExpressionPair
from shouldpack.messages.models import Failure


class FailureFormatter(Protocol):
    """Protocol for turning a failure variant into report text."""

    def render(self, failure: Failure, expressions: ExpressionPair | None = None) -> str:
        """Compose the full failure report for ``failure``."""
