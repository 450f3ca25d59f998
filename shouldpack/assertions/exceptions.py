"""Assertion subsystem exceptions."""


class AssertionFailure(AssertionError):
    """An assertion did not hold; the message is the composed failure report."""
