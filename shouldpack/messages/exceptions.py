"""Message subsystem exceptions."""


class MessageError(Exception):
    """Base class for failure message errors."""


class FormatterConfigError(MessageError):
    """Invalid failure message formatter configuration."""
