"""Command line tools for maintaining the community app collection."""

from __future__ import annotations

import argparse
from typing import Callable

from communityapps.generator import Generator
from communityapps.manifest import (
    Manifest,
    ManifestError,
    generate_file_name,
    generate_id,
    generate_package_name,
    validate_author,
    validate_desc,
    validate_name,
    validate_summary,
)
from communityapps.registry import find_manifest

InputFunc = Callable[[str], str]


def prompt(
    label: str, validate: Callable[[str], object], input_func: InputFunc = input
) -> str:
    """Ask for a value until ``validate`` accepts it, then return it."""
    while True:
        answer = input_func(f"{label}: ")
        try:
            validate(answer)
        except ManifestError as exc:
            print(f"invalid input: {exc}")
            continue
        return answer


def create(generator: Generator | None = None, input_func: InputFunc = input) -> Manifest:
    """Ask for an app's details and generate it."""
    name = prompt("Name (what do you want to call your app?)", validate_name, input_func)
    summary = prompt(
        "Summary (what's the short and sweet of what this app does?)",
        validate_summary,
        input_func,
    )
    desc = prompt(
        "Description (what's the long form of what this app does?)",
        validate_desc,
        input_func,
    )
    author = prompt(
        "Author (your name or your Github handle)", validate_author, input_func
    )
    app = Manifest(
        id=generate_id(name),
        name=name,
        summary=summary,
        desc=desc,
        author=author,
        file_name=generate_file_name(name),
        package_name=generate_package_name(name),
    )
    (generator or Generator()).generate_app(app)
    return app


def remove(generator: Generator | None, app_id: str) -> Manifest:
    """Remove the app with ``app_id`` and reindex."""
    generator = generator or Generator()
    app = find_manifest(app_id)
    generator.remove_app(app)
    return app


def sync(generator: Generator | None = None) -> None:
    """Regenerate the app index."""
    (generator or Generator()).update_apps()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="community-tools",
        description=(
            "This tool is used for supporting operations and functions for "
            "maintaining the Tidbyt community repo."
        ),
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser(
        "create",
        help="Creates a new app.",
        description=(
            "This command will prompt for all of the information we need to "
            "generate a new app in this repo."
        ),
    )
    remove_parser = commands.add_parser(
        "remove",
        help="Removes an app.",
        description="This command will remove an app from this repo.",
    )
    remove_parser.add_argument("-i", "--id", required=True, dest="app_id")
    commands.add_parser(
        "sync",
        help="Syncs app list.",
        description="This command will re-generate the apps list.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the tool and return its exit status."""
    parser = _parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    generator = Generator()
    if args.command == "create":
        try:
            create(generator)
        except (OSError, EOFError, KeyboardInterrupt) as exc:
            print(f"app creation failed {exc}")
            return 1
    elif args.command == "remove":
        try:
            app = find_manifest(args.app_id)
        except LookupError as exc:
            print(f"app creation failed {exc}")
            return 1
        try:
            generator.remove_app(app)
        except OSError as exc:
            print(f"app deletion failed {exc}")
            return 1
    elif args.command == "sync":
        try:
            generator.update_apps()
        except OSError as exc:
            print(f"app deletion failed {exc}")
            return 1
    return 0