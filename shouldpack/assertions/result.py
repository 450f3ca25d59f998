"""Result values for callers that prefer not to catch assertion failures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from shouldpack.assertions.exceptions import AssertionFailure


@dataclass(slots=True)
class AssertionResult:
    """Outcome of running a block of assertions."""

    passed: bool
    message: str = ""

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "pass" if self.passed else "fail",
            "exit_code": self.exit_code,
            "message": self.message,
        }


def check(block: Callable[[], Any]) -> AssertionResult:
    """Run ``block`` and turn an assertion failure into a failed result.

    Errors other than :class:`AssertionFailure` propagate.
    """
    try:
        block()
    except AssertionFailure as failure:
        return AssertionResult(passed=False, message=str(failure))
    return AssertionResult(passed=True)
