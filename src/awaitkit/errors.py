"""Exceptions raised by awaitkit itself."""

from __future__ import annotations

__all__ = [
    'AwaitkitError',
    'NotInitializedError',
    'OptionUnwrapError',
    'ResultUnwrapError',
    'UnwrapError',
]


class AwaitkitError(Exception):
    """Base class for exceptions raised by awaitkit itself.

    Failures of awaited entries are never wrapped in this type; they
    propagate as the original exception objects.
    """


class NotInitializedError(AwaitkitError, RuntimeError):
    """get_config() was called before init()."""

    def __init__(self) -> None:
        super().__init__('awaitkit not initialized. Call awaitkit.init() first.')


# --- Unwrap Errors ---


class UnwrapError(AwaitkitError, RuntimeError):
    """Unwrap on an empty variant."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ResultUnwrapError(UnwrapError):
    """Called unwrap on Err, or unwrap_err on Ok.

    The Err payload is kept on ``error``; it is None for unwrap_err on Ok.
    """

    def __init__(self, message: str, error: object = None) -> None:
        self.error = error
        super().__init__(message)


class OptionUnwrapError(UnwrapError):
    """Called unwrap on Nothing."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or 'Option contained no value')
