"""Fallible operations: typed failures from a closed family of error kinds.

An error family is a single class or a union of classes, known in full at
the call site:

    LookupFailure = NotFound | Forbidden

A fallible operation returns ``Result[T, LookupFailure]``. Functions that
signal failure by raising can opt into the contract with ``@fallible``:
raised kinds of the family become ``Err(kind)``, anything else propagates
untouched.

Callers handle failures with an ErrorHandler, which refuses to run until
every kind of the family has a branch or a catch-all is registered. The
catch-all may look unreachable today; it is what keeps call sites working
when the family grows.
"""

import functools
from collections.abc import Callable
from types import UnionType
from typing import Any, ParamSpec, Self, TypeVar, get_args

from sumkit.errors import HandlerDefinitionError, NonExhaustiveHandlingError
from sumkit.logging_config import get_logger
from sumkit.option import Absent, Option, Present
from sumkit.result import Err, Ok, Result

logger = get_logger("sumkit.fallible")

P = ParamSpec("P")
V = TypeVar("V")
E = TypeVar("E", bound=BaseException)


def error_kinds(family: type | UnionType) -> tuple[type, ...]:
    """Return the closed set of kinds in an error family.

    Args:
        family: A class, or a union of classes (``A | B | C``).

    Raises:
        TypeError: family is neither a class nor a union of classes
    """
    if isinstance(family, type):
        return (family,)
    kinds = get_args(family)
    if not kinds or not all(isinstance(kind, type) for kind in kinds):
        raise TypeError(f"Not an error family: {family!r}")
    return kinds


def family_name(kinds: tuple[type, ...]) -> str:
    return " | ".join(kind.__name__ for kind in kinds)


def fallible(*family: type[E] | UnionType) -> Callable[[Callable[P, V]], Callable[P, Result[V, E]]]:
    """Declare that a raising function fails only with kinds of ``family``.

    The wrapped function returns ``Ok(value)`` on success and ``Err(error)``
    when it raises one of the family's kinds. The family is given as one or
    more exception classes or unions of them; listing the classes lets a type
    checker infer the wrapped function's error type.
    """
    kinds = tuple(kind for member in family for kind in error_kinds(member))
    if not kinds:
        raise TypeError("fallible() needs at least one error kind")
    for kind in kinds:
        if not issubclass(kind, BaseException):
            raise TypeError(f"{kind.__name__} cannot be raised, so it cannot be a fallible kind")

    def decorator(func: Callable[P, V]) -> Callable[P, Result[V, E]]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[V, E]:
            try:
                value = func(*args, **kwargs)
            except kinds as error:
                logger.debug(
                    "fallible_operation_failed",
                    operation=func.__qualname__,
                    kind=type(error).__name__,
                )
                return Err(error)
            return Ok(value)

        wrapper.error_kinds = kinds  # type: ignore[attr-defined]
        return wrapper

    return decorator


class ErrorHandler[R]:
    """Exhaustive, branch-per-kind handling of a fallible operation's failures.

    Example:
        handler = (
            ErrorHandler(LookupFailure)
            .on(NotFound, lambda e: "missing")
            .on(Forbidden, lambda e: "denied")
            .otherwise(lambda e: "unexpected")
        )
        message = handler.resolve(lookup(name), on_ok=str)
    """

    def __init__(self, family: type | UnionType) -> None:
        self._kinds = error_kinds(family)
        self._branches: dict[type, Callable[[Any], R]] = {}
        self._catch_all: Callable[[Any], R] | None = None
        self._checked = False

    @property
    def kinds(self) -> tuple[type, ...]:
        return self._kinds

    def on[K](self, kind: type[K], branch: Callable[[K], R]) -> Self:
        """Register the branch for one kind of the family."""
        if kind not in self._kinds:
            raise HandlerDefinitionError(
                f"{kind.__name__} is not a kind of {family_name(self._kinds)}"
            )
        if kind in self._branches:
            raise HandlerDefinitionError(f"{kind.__name__} is already handled")
        self._branches[kind] = branch
        self._checked = False
        return self

    def otherwise(self, branch: Callable[[Any], R]) -> Self:
        """Register the catch-all branch for kinds without their own branch."""
        if self._catch_all is not None:
            raise HandlerDefinitionError("Catch-all branch is already registered")
        self._catch_all = branch
        self._checked = False
        return self

    def check(self) -> Self:
        """Verify the handler covers the whole family.

        Raises:
            NonExhaustiveHandlingError: kinds are unhandled and there is no catch-all
            HandlerDefinitionError: the catch-all is the only branch
        """
        missing = tuple(kind for kind in self._kinds if kind not in self._branches)
        if missing and self._catch_all is None:
            raise NonExhaustiveHandlingError(missing)
        if not self._branches:
            raise HandlerDefinitionError(
                "A catch-all cannot be the only branch; handle at least one kind explicitly"
            )
        self._checked = True
        return self

    def handle(self, error: Any) -> R:
        """Run the branch for ``error``'s kind, falling back to the catch-all."""
        if not self._checked:
            self.check()

        # Most specific registered kind wins, whatever the registration order
        for kind in type(error).__mro__:
            branch = self._branches.get(kind)
            if branch is not None:
                return branch(error)

        if self._catch_all is None:
            # Only reachable for values from outside the family
            raise TypeError(
                f"{type(error).__name__} is not a kind of {family_name(self._kinds)}"
            )

        logger.warning(
            "unclassified_error_handled",
            kind=type(error).__name__,
            family=family_name(self._kinds),
        )
        return self._catch_all(error)

    def resolve[T](self, result: Result[T, Any], on_ok: Callable[[T], R] | None = None) -> R | T:
        """Resolve a result to a local value.

        Args:
            result: Outcome of a fallible operation
            on_ok: Applied to the success value (default: returned unchanged)

        Returns:
            ``on_ok(value)`` for Ok, the matching branch's value for Err
        """
        match result:
            case Ok(value):
                return value if on_ok is None else on_ok(value)
            case Err(error):
                return self.handle(error)
            case _:
                raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def to_option[T](operation: Callable[..., Result[T, Any]], *args: Any, **kwargs: Any) -> Option[T]:
    """Run a fallible operation and downgrade its outcome to an Option.

    Success becomes Present(value). Every failure becomes Absent, and which
    kind occurred is discarded.
    """
    match operation(*args, **kwargs):
        case Ok(value):
            return Present(value)
        case Err(error):
            logger.debug(
                "failure_downgraded_to_absent",
                operation=getattr(operation, "__qualname__", repr(operation)),
                kind=type(error).__name__,
            )
            return Absent()
        case other:
            raise TypeError(f"{other!r} is not the outcome of a fallible operation")
