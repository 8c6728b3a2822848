"""Programmer-error exceptions raised by sumkit itself.

These are never part of a fallible contract: they signal misuse of the
containers or a malformed handler, and are not meant to be recovered from.
"""


class SumkitError(Exception):
    """Base class for sumkit programmer errors."""


class UnwrapError(SumkitError):
    """Forced unwrap of an Absent or Err value."""


class HandlerDefinitionError(SumkitError):
    """Error handler registered a kind outside its family, or twice."""


class NonExhaustiveHandlingError(HandlerDefinitionError):
    """Error handler leaves kinds unhandled and has no catch-all."""

    def __init__(self, missing: tuple[type, ...]):
        names = ", ".join(kind.__name__ for kind in missing)
        super().__init__(f"Unhandled error kinds: {names}")
        self.missing = missing
