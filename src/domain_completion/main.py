"""CLI front end for domain autocomplete."""

from __future__ import annotations

import argparse
import sys

from . import __version__
from .completion import DomainCompletion
from .config import settings
from .custom_source import CustomCompletionSource
from .logging_config import setup_logging
from .models import CompletionSourceError, CustomCompletionResult, Toggle
from .settings_store import SQLiteSettingsStore
from .top_domains import TopDomainsCompletionSource
from .yaml_config import get_strings

_TOGGLES = {
    "domain": Toggle.ENABLE_DOMAIN_AUTOCOMPLETE,
    "custom": Toggle.ENABLE_CUSTOM_DOMAIN_AUTOCOMPLETE,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domain-completion",
        description="Inline domain autocomplete backed by top and custom domain lists.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--db", default=None, help="Settings database path")
    subparsers = parser.add_subparsers(dest="command", required=True)

    complete = subparsers.add_parser("complete", help="Print the completion for typed text")
    complete.add_argument("text")

    subparsers.add_parser("list", help="List custom domains with their positions")

    add = subparsers.add_parser("add", help="Add a custom domain")
    add.add_argument("domain")
    add.add_argument("-i", "--index", type=int, default=None, help="Insert at this position")

    remove = subparsers.add_parser("remove", help="Remove the custom domain at a position")
    remove.add_argument("index", type=int)

    move = subparsers.add_parser("move", help="Move a custom domain to another position")
    move.add_argument("from_index", type=int)
    move.add_argument("to_index", type=int)

    toggle = subparsers.add_parser("toggle", help="Enable or disable a suggestion source")
    toggle.add_argument("source", choices=sorted(_TOGGLES))
    toggle.add_argument("state", choices=["on", "off"])

    return parser


def _error_message(error: CompletionSourceError) -> str:
    if error.message:
        return error.message
    strings = get_strings()
    match error:
        case CompletionSourceError.DUPLICATE_DOMAIN:
            return strings["autocomplete_duplicate_domain"]
        case _:
            return strings["autocomplete_index_out_of_range"]


def _report(result: CustomCompletionResult) -> int:
    if result.ok:
        return 0
    print(_error_message(result.error), file=sys.stderr)
    return 2


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(settings.log_level)

    store = SQLiteSettingsStore(args.db)
    custom = CustomCompletionSource(store)

    match args.command:
        case "complete":
            # Custom domains take priority over the bundled list
            completion = DomainCompletion([custom, TopDomainsCompletionSource(store)])
            result = completion.complete(args.text)
            if result is None:
                print(get_strings()["no_completion"], file=sys.stderr)
                return 1
            print(result)
            return 0
        case "list":
            domains = custom.get_suggestions()
            if not domains:
                print(get_strings()["no_custom_domains"])
            for i, domain in enumerate(domains):
                print(f"{i:3d}  {domain}")
            return 0
        case "add":
            if args.index is None:
                return _report(custom.add(args.domain))
            return _report(custom.insert(args.domain, args.index))
        case "remove":
            return _report(custom.remove(args.index))
        case "move":
            return _report(custom.move(args.from_index, args.to_index))
        case "toggle":
            store.set_toggle(_TOGGLES[args.source], args.state == "on")
            return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
