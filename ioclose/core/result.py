"""Result type for close outcomes.

A close callback either succeeds or fails with an error value. Instead of
raising, the helpers in ``ioclose`` report the outcome as a Result so that
callers can keep closing the remaining resources and decide afterwards
what to do with the failure.

Usage:
    result = closers.close()
    if is_err(result):
        print(f"cleanup failed: {result.error}")

    # Or with pattern matching
    match close_all(stmt1, stmt2):
        case Ok():
            pass
        case Err(error):
            print(f"cleanup failed: {error}")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeGuard, TypeVar

__all__ = ["Ok", "Err", "Result", "is_ok", "is_err"]

U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome.

    Attributes:
        value: The success value (``None`` for a successful close).
    """

    value: T = None  # type: ignore[assignment]

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> None:
        """Raises ValueError since this is Ok."""
        raise ValueError(f"called unwrap_err on Ok: {self.value!r}")

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[object], F]) -> Ok[T]:
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed outcome.

    Attributes:
        error: The error value, usually the exception raised by a close
            callback.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raises ValueError with the error.

        When the error is an exception it is chained as the cause, so the
        original traceback stays visible.
        """
        if isinstance(self.error, BaseException):
            raise ValueError(f"called unwrap on Err: {self.error}") from self.error
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[object], U]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Type guard that checks if a Result is Ok."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard that checks if a Result is Err.

    Example:
        result = closers.close()
        if is_err(result):
            # Type checker knows result is Err here
            print(result.error)
    """
    return isinstance(result, Err)
