"""Two-variant result envelope returned by every store operation.

A store call either produces a value (``Success``) or reports a domain
failure as data (``Failure``). Callers branch on the variant with ``match``;
there is no third case.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, assert_never

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying the produced value."""

    value: T
    message: str = "OK"

    def summarize(self) -> str:
        return f"SUCCESS: {self.message}"


@dataclass(frozen=True)
class Failure:
    """Domain failure carrying a status code and an error message."""

    status_code: int
    error: str

    def summarize(self) -> str:
        return f"ERROR {self.status_code}: {self.error}"


Result = Success[T] | Failure


def summarize(result: Result[T]) -> str:
    """Fixed-format summary of a result, meant for logs."""
    match result:
        case Success():
            return result.summarize()
        case Failure():
            return result.summarize()
        case _:
            assert_never(result)


def describe(result: Result[T]) -> str:
    """Human-readable description distinguishing empty successes."""
    match result:
        case Success(value=None):
            return "Operation succeeded with no content"
        case Success(message=message):
            return f"Operation succeeded: {message}"
        case Failure(status_code=status_code, error=error):
            return f"Operation failed [{status_code}]: {error}"
        case _:
            assert_never(result)
