"""Walkthrough of optional containers and fallible plist lookups."""

import sys

from sumkit.config import settings
from sumkit.logging_config import console, get_logger, setup_logging
from sumkit.option import absent, from_nullable, present
from sumkit.plist_reader import ResourceBundle, title_option, title_or_none

logger = get_logger("sumkit.main")

DEMO_BUNDLE = ResourceBundle(
    resources={
        "titled.plist": {"title": "A title"},
        "untitled.plist": {"subtitle": "No title here"},
    }
)


def show_optionals() -> None:
    x = absent()
    console.print(f"x = absent() ==> {x!r}", highlight=False)
    y = present(3)
    console.print(f"y = present(3) ==> {y!r}", highlight=False)
    console.print(f"from_nullable(None) ==> {from_nullable(None)!r}", highlight=False)
    console.print(f"from_nullable(4) ==> {from_nullable(4)!r}", highlight=False)


def show_plist_lookups(bundle: ResourceBundle) -> None:
    for name in ("titled.plist", "untitled.plist", settings.default_plist_name, "my_plist.txt"):
        logger.info("looking_up_title", plist_name=name)
        title = title_or_none(bundle, name)
        console.print(f"title_or_none({name!r}) ==> {title!r}", highlight=False)
        console.print(f"title_option({name!r}) ==> {title_option(bundle, name)!r}", highlight=False)


def main() -> int:
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    show_optionals()
    show_plist_lookups(DEMO_BUNDLE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
