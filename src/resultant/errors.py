"""Exception types raised or produced by the result algebra."""

from __future__ import annotations

__all__ = [
    'ConsumedError',
    'Failure',
    'ResultError',
]

CONSUMED_MESSAGE = 'mutable reference has already been consumed'


class ResultError(RuntimeError):
    """Base class for misuse of the result algebra itself."""


class ConsumedError(ResultError):
    """get() was called on an Ok whose value was already retrieved."""

    def __init__(self) -> None:
        super().__init__(CONSUMED_MESSAGE)


class Failure(Exception):
    """Error built from a plain message by err().

    Attributes:
        message: The message the failure was created with.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f'Failure({self.message!r})'
