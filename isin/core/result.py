"""Result[T, E] — error-as-value returns for parsing and building ISINs.

Parsers never raise for bad input; they return Ok(ISIN) or Err(ISINError).
Callers branch with isinstance(), pattern matching, or the helpers below.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, NoReturn, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success variant of Result."""

    value: T

    def is_ok(self) -> bool:
        """Always True: this is the success variant."""
        return True

    def is_err(self) -> bool:
        """Always False."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply f to the value, returning Ok(f(value))."""
        return Ok(f(self.value))

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain a further fallible step."""
        return f(self.value)

    def unwrap(self) -> T:
        """The success value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Ignore default; the value is present."""
        return self.value

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Nothing to transform on success."""
        return self


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Error variant of Result."""

    error: E

    def is_ok(self) -> bool:
        """Always False: this is the failure variant."""
        return False

    def is_err(self) -> bool:
        """Always True."""
        return True

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Pass the error through; f is never called."""
        return self

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Stop the chain at this error."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise RuntimeError carrying the error's message."""
        raise RuntimeError(f"Called unwrap on Err: {_describe(self.error)}")

    def unwrap_or[T](self, default: T) -> T:
        """Fall back to default."""
        return default

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply f to the error, returning Err(f(error))."""
        return Err(f(self.error))


type Result[T, E] = Ok[T] | Err[E]


def _describe(error: object) -> str:
    message = getattr(error, "message", None)
    return message if isinstance(message, str) else str(error)


def unwrap[T](result: Ok[T] | Err[Any]) -> T:
    """Extract the Ok value or raise RuntimeError. Test/boundary code only."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise RuntimeError(f"unwrap on Err: {_describe(result.error)}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def sequence[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect Results into a Result of list. Short-circuits on the first Err."""
    values: list[T] = []
    for r in results:
        if isinstance(r, Err):
            return r
        values.append(r.value)
    return Ok(values)
