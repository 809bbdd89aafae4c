"""
verparse CLI - Parse, bump and validate loosely structured version strings.

Usage:
    verparse parse TEXT [--json]
        Prints the canonical rendering (e.g. "2023-Nov-27-v1" -> "2023.11.27-p1").

    verparse bump {major,minor,patch} TEXT
        Prints the rendering with one component incremented, keeping zero padding.

    verparse check TEXT [--raw]
        Checks that the rendering of TEXT (or TEXT itself with --raw) is a valid
        composer version. Exits with status 1 if it is not.

    verparse batch FILE
        Parses every entry of a comma-separated version list.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from verparse.config import Settings, get_settings
from verparse.versions import (
    ComposerChecker,
    SemVer,
    VersionParseError,
    load_version_list,
    parse_version,
)

logger = logging.getLogger(__name__)

_BUMPS = {
    "major": SemVer.increment_major,
    "minor": SemVer.increment_minor,
    "patch": SemVer.increment_patch,
}


def _parse_or_exit(text: str) -> SemVer:
    """Parse ``text`` or print the error and exit with status 1."""
    try:
        return parse_version(text)
    except VersionParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_parse(args: argparse.Namespace, settings: Settings) -> None:
    """Execute the 'parse' subcommand: print the canonical rendering."""
    version = _parse_or_exit(args.text)
    if args.json:
        print(json.dumps(version.to_dict(), indent=2))
    else:
        print(version)


def cmd_bump(args: argparse.Namespace, settings: Settings) -> None:
    """Execute the 'bump' subcommand: print the incremented rendering."""
    version = _parse_or_exit(args.text)
    print(_BUMPS[args.part](version))


def cmd_check(args: argparse.Namespace, settings: Settings) -> None:
    """Execute the 'check' subcommand: validate against the composer grammar."""
    candidate = args.text if args.raw else str(_parse_or_exit(args.text))

    if ComposerChecker().is_valid(candidate):
        print(f"{candidate}: valid")
        return

    print(f"{candidate}: not a valid composer version", file=sys.stderr)
    sys.exit(1)


def cmd_batch(args: argparse.Namespace, settings: Settings) -> None:
    """Execute the 'batch' subcommand: parse every entry of a version list."""
    try:
        versions = load_version_list(
            Path(args.file),
            separator=settings.fixture_separator,
            ignored=settings.ignored_entries,
        )
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    checker = ComposerChecker()
    failures = 0

    for text in versions:
        try:
            rendered = str(parse_version(text))
        except VersionParseError as e:
            failures += 1
            print(f"  FAIL  {text}: {e.reason}")
            continue

        if settings.check_output and not checker.is_valid(rendered):
            failures += 1
            print(f"  FAIL  {text} -> {rendered} (rejected by composer grammar)")
            continue

        print(f"  OK    {text} -> {rendered}")

    print(f"{len(versions) - failures}/{len(versions)} versions parsed")
    logger.info(f"Batch {args.file}: {failures} failures out of {len(versions)}")

    if failures:
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="verparse",
        description="verparse - Parse and normalize version strings",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # 'parse' subcommand
    parse_parser = subparsers.add_parser("parse", help="Print the canonical form of a version")
    parse_parser.add_argument("text", type=str, help="Version string to parse")
    parse_parser.add_argument("--json", action="store_true", help="Print parsed fields as JSON")
    parse_parser.set_defaults(func=cmd_parse)

    # 'bump' subcommand
    bump_parser = subparsers.add_parser("bump", help="Increment one component of a version")
    bump_parser.add_argument("part", choices=list(_BUMPS), help="Component to increment")
    bump_parser.add_argument("text", type=str, help="Version string to bump")
    bump_parser.set_defaults(func=cmd_bump)

    # 'check' subcommand
    check_parser = subparsers.add_parser("check", help="Validate against the composer grammar")
    check_parser.add_argument("text", type=str, help="Version string to check")
    check_parser.add_argument(
        "--raw", action="store_true", help="Check the text as given instead of its rendering"
    )
    check_parser.set_defaults(func=cmd_check)

    # 'batch' subcommand
    batch_parser = subparsers.add_parser("batch", help="Parse a comma-separated version list")
    batch_parser.add_argument("file", type=str, help="Path to the version list file")
    batch_parser.set_defaults(func=cmd_batch)

    for subparser in (parse_parser, bump_parser, check_parser, batch_parser):
        subparser.add_argument("--config", type=str, default=None, help="Path to YAML config")
        subparser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    args = parser.parse_args(argv)

    try:
        settings = get_settings(args.config)
    except (FileNotFoundError, ValueError, ValidationError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    # Configure logging
    level = logging.DEBUG if args.verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    args.func(args, settings)


if __name__ == "__main__":
    main()
