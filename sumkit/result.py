"""Result type for flat error handling (like Rust's Result<T, E>).

A fallible operation returns ``Ok(value)`` or ``Err(kind)`` where ``kind`` is
one member of a closed family of error classes. Callers either handle every
kind, hand the same ``Err`` back to their own caller, or translate it with
``map_err``:

    match load(name):
        case Ok(data):
            ...
        case Err(NotFound() as error):
            ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeVar

from sumkit.errors import UnwrapError

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success result."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def match[R](self, on_ok: Callable[[T], R], on_err: Callable[[Never], R]) -> R:
        return on_ok(self.value)

    def map[U](self, transform: Callable[[T], U]) -> "Ok[U]":
        return Ok(transform(self.value))

    def map_err(self, translate: Callable[[Never], object]) -> "Ok[T]":
        return self

    def unwrap_or(self, default: T) -> T:
        return self.value

    def force_unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Error result."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def match[R](self, on_ok: Callable[[Never], R], on_err: Callable[[E], R]) -> R:
        return on_err(self.error)

    def map(self, transform: Callable[[Never], object]) -> "Err[E]":
        return self

    def map_err[F](self, translate: Callable[[E], F]) -> "Err[F]":
        """Translate the error into another family, keeping it a failure."""
        return Err(translate(self.error))

    def unwrap_or[D](self, default: D) -> D:
        return default

    def force_unwrap(self) -> Never:
        message = f"force_unwrap() called on Err({self.error!r})"
        if isinstance(self.error, BaseException):
            raise UnwrapError(message) from self.error
        raise UnwrapError(message)


Result = Ok[T] | Err[E]
