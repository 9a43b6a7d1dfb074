"""Result[T, E] — success-or-error values returned by every calculator.

A calculator never raises on malformed input. It returns Ok(digit) or
Err(error). Converters chain them with .bind, .map and .map_err.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success variant of Result."""

    value: T

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def bind[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Feed the value into f, which itself returns a Result."""
        return f(self.value)

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self

    def unwrap(self) -> T:
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Error variant of Result. Every transform except map_err short-circuits."""

    error: E

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def bind(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def unwrap(self) -> NoReturn:
        raise RuntimeError(f"Called unwrap on Err: {self.error}")


type Result[T, E] = Ok[T] | Err[E]


def unwrap[T](result: Ok[T] | Err[Any]) -> T:
    """Extract the Ok value or raise RuntimeError. Tests and boundaries only."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise RuntimeError(f"unwrap on Err: {result.error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")
