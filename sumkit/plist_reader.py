"""Reading a title out of a plist resource.

Lookups run against an in-memory ResourceBundle. The lookup fails with
exactly one of three kinds, and the callers here show the two ways of
consuming that: itemized handling with a diagnostic per kind, and a plain
downgrade to an Option.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import assert_never

from sumkit.config import settings
from sumkit.constants import (
    MSG_FILE_DOES_NOT_EXIST,
    MSG_NOT_A_PLIST,
    MSG_UNEXPECTED_ERROR,
    MSG_UNTITLED_PLIST,
)
from sumkit.fallible import ErrorHandler, fallible, to_option
from sumkit.logging_config import console
from sumkit.option import Absent, Option, Present


class PlistReaderFailure(Exception):
    """Base class for plist reader error kinds."""

    def __init__(self, plist_name: str):
        super().__init__(plist_name)
        self.plist_name = plist_name


class FileDoesNotExist(PlistReaderFailure):
    """No resource with that name in the bundle."""


class NotAPlist(PlistReaderFailure):
    """Name does not carry the plist suffix."""


class UntitledPlist(PlistReaderFailure):
    """Resource exists but has no title entry."""


PlistReaderError = FileDoesNotExist | NotAPlist | UntitledPlist


@dataclass
class ResourceBundle:
    """In-memory stand-in for an application bundle.

    Resources are keyed by file name (``"my_plist.plist"``) and hold the
    plist's string entries.
    """

    resources: dict[str, dict[str, str]] = field(default_factory=dict)

    def path_for_resource(self, name: str, of_type: str) -> Option[str]:
        path = f"{name}.{of_type}"
        if path in self.resources:
            return Present(path)
        return Absent()

    def contents_of(self, path: str) -> dict[str, str]:
        return dict(self.resources[path])


@fallible(FileDoesNotExist, NotAPlist, UntitledPlist)
def get_title_from_plist(plist_name: str, bundle: ResourceBundle) -> str:
    """Return the title stored in the named plist.

    Raises (returned as Err by the fallible wrapper):
        NotAPlist: name lacks the plist suffix; checked before any lookup
        FileDoesNotExist: bundle has no such resource
        UntitledPlist: resource has no title entry
    """
    suffix = settings.plist_suffix
    if not plist_name.endswith(suffix):
        raise NotAPlist(plist_name)

    # Settings guarantee the suffix starts with a single dot
    found = bundle.path_for_resource(plist_name.removesuffix(suffix), suffix[1:])
    match found:
        case Present(path):
            plist = bundle.contents_of(path)
        case Absent():
            raise FileDoesNotExist(plist_name)
        case _:
            assert_never(found)

    title = plist.get(settings.title_key)
    if title is None:
        raise UntitledPlist(plist_name)
    return title


def diagnostic_for(error: PlistReaderError) -> str:
    """Return the fixed diagnostic for a plist reader failure.

    The match covers every kind of the family; a type checker flags the
    ``assert_never`` call as soon as a kind is added without a case.
    """
    match error:
        case FileDoesNotExist():
            return MSG_FILE_DOES_NOT_EXIST
        case NotAPlist():
            return MSG_NOT_A_PLIST
        case UntitledPlist():
            return MSG_UNTITLED_PLIST
        case _:
            assert_never(error)


def _diagnose(message: str) -> Callable[[PlistReaderFailure], None]:
    def branch(error: PlistReaderFailure) -> None:
        console.print(message, highlight=False)

    return branch


_title_handler: ErrorHandler[None] = (
    ErrorHandler(PlistReaderError)
    .on(FileDoesNotExist, _diagnose(MSG_FILE_DOES_NOT_EXIST))
    .on(NotAPlist, _diagnose(MSG_NOT_A_PLIST))
    .on(UntitledPlist, _diagnose(MSG_UNTITLED_PLIST))
    # Unreachable for the current kinds; covers kinds added later
    .otherwise(_diagnose(MSG_UNEXPECTED_ERROR))
    .check()
)


def title_or_none(bundle: ResourceBundle, plist_name: str | None = None) -> str | None:
    """Look up a plist title, printing a diagnostic and returning None on failure."""
    name = settings.default_plist_name if plist_name is None else plist_name
    return _title_handler.resolve(get_title_from_plist(name, bundle))


def title_option(bundle: ResourceBundle, plist_name: str | None = None) -> Option[str]:
    """Look up a plist title, discarding which failure occurred."""
    name = settings.default_plist_name if plist_name is None else plist_name
    return to_option(get_title_from_plist, name, bundle)
