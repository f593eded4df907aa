"""Custom exceptions for the voice page stub."""


class StubError(Exception):
    """Base class for errors raised by the page stub."""


class UnsupportedExpressionError(StubError):
    """Raised when a snippet matches none of the recognized forms."""


class TimeoutExceededError(StubError, TimeoutError):
    """Raised when a polled condition does not hold before the deadline."""


class MissingKeyError(StubError, KeyError):
    """Raised when a test-state path walks through a key that does not exist."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ConfigError(StubError, ValueError):
    """Raised when settings fail validation."""
