"""
Explicit success/failure values for fallback chains.

Pipelines return a Result instead of raising for expected failures
(unavailable upstream, malformed model answers, missing input), so every
fallback transition can be chained with or_else() and tested on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class ErrorKind(str, Enum):
    """Failure categories recognised by the recommendation pipelines."""

    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    MALFORMED_ANSWER = "malformed_answer"
    RATE_LIMITED = "rate_limited"
    MISSING_INPUT = "missing_input"


class ResultError(Exception):
    """Raised by Result.unwrap() on a failed result."""

    def __init__(self, kind: ErrorKind, message: str = ""):
        super().__init__(f"{kind.value}: {message}" if message else kind.value)
        self.kind = kind
        self.message = message


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a value or an ErrorKind with a message.

    Examples:
        >>> Result.ok(3).map(lambda v: v + 1).unwrap()
        4
        >>> Result.fail(ErrorKind.MALFORMED_ANSWER).unwrap_or([])
        []
    """

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str = "") -> "Result[Any]":
        return cls(error=kind, message=message)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise ResultError(self.error, self.message)
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value if self.error is None else default

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        if self.error is not None:
            return self
        return Result.ok(fn(self.value))

    def and_then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        if self.error is not None:
            return self
        return fn(self.value)

    def or_else(self, fallback: Callable[["Result[T]"], "Result[T]"]) -> "Result[T]":
        """Return self when successful, otherwise the fallback's result."""
        if self.error is None:
            return self
        return fallback(self)
