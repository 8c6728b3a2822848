"""Optional container: a value that is either Present or Absent.

Option[T] is a closed sum type with exactly two variants. Callers extract
the payload through ``match`` (or a ``match`` statement), never by poking at
attributes of an unknown variant:

    label = found.match(lambda name: f"found {name}", lambda: "nothing")

    match found:
        case Present(name):
            ...
        case Absent():
            ...
        case _:
            assert_never(found)

``force_unwrap`` exists for call sites that know a value is present; calling
it on Absent is a programmer error and raises UnwrapError.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeVar

from sumkit.errors import UnwrapError

T = TypeVar("T")


@dataclass(frozen=True, slots=True, repr=False)
class Present[T]:
    """Container holding exactly one value."""

    value: T

    def __repr__(self) -> str:
        return f"Present({self.value!r})"

    @property
    def is_present(self) -> bool:
        return True

    @property
    def is_absent(self) -> bool:
        return False

    def match[R](self, on_present: Callable[[T], R], on_absent: Callable[[], R]) -> R:
        return on_present(self.value)

    def map[U](self, transform: Callable[[T], U]) -> "Present[U]":
        return Present(transform(self.value))

    def and_then[U](self, transform: "Callable[[T], Option[U]]") -> "Option[U]":
        return transform(self.value)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def force_unwrap(self) -> T:
        return self.value

    def to_nullable(self) -> T | None:
        return self.value


@dataclass(frozen=True, slots=True, repr=False)
class Absent:
    """Container holding no value. All Absent instances are equal."""

    def __repr__(self) -> str:
        return "Absent"

    @property
    def is_present(self) -> bool:
        return False

    @property
    def is_absent(self) -> bool:
        return True

    def match[R](self, on_present: Callable[[Never], R], on_absent: Callable[[], R]) -> R:
        return on_absent()

    def map(self, transform: Callable[[Never], object]) -> "Absent":
        # transform must not run on the absent path
        return self

    def and_then(self, transform: Callable[[Never], object]) -> "Absent":
        return self

    def unwrap_or[D](self, default: D) -> D:
        return default

    def force_unwrap(self) -> Never:
        raise UnwrapError("force_unwrap() called on Absent")

    def to_nullable(self) -> None:
        return None


Option = Present[T] | Absent


def present[V](value: V) -> Present[V]:
    """Wrap a value in the Present variant."""
    return Present(value)


def absent() -> Absent:
    """Return the Absent variant."""
    return Absent()


def from_nullable[V](value: V | None) -> "Option[V]":
    """Convert ``None`` to Absent and anything else to Present.

    Note that a present ``None`` payload cannot be expressed this way; build
    ``Present(None)`` directly when that distinction matters.
    """
    if value is None:
        return Absent()
    return Present(value)
