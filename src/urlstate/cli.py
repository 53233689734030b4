#!/usr/bin/env python3
"""
urlstate - command-line interface.

Parses application location paths into navigation state:
- parse: Parse a URL and print its state
- clean: Print the normalized path of a URL
- check: Report invalid URLs from a file

The base URL and series list come from --base-url/--series or, when omitted,
from .urlstate/config.yaml in the project root.

Usage:
    urlstate parse http://abc.com:123/u/ant --base-url http://abc.com:123
    urlstate parse /haproxy/xenial --base-url / --format yaml
    urlstate clean http://abc.com:123/a//b/
    urlstate check urls.txt
    urlstate --help
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from urlstate.commands.state import StateCommand
from urlstate.state.parser import State, StateConfigError
from urlstate.utils.config import find_project_root, get_state_config, parse_series_option


def _build_state(args: argparse.Namespace, repo_root: Path) -> State:
    """Build a State from CLI flags, falling back to the project config."""
    config = get_state_config(repo_root)
    base_url = args.base_url or config["base_url"]
    if not base_url:
        raise StateConfigError(
            "No base URL configured.\n"
            "Pass --base-url or set state.base_url in .urlstate/config.yaml"
        )
    series = parse_series_option(args.series)
    if series is None:
        series = config["series"]
    return State(base_url, series)


def main(argv: Optional[List[str]] = None, repo_root: Optional[Path] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="urlstate",
        description="Parse application location paths into navigation state",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s parse http://abc.com:123/u/hatch/staging --base-url http://abc.com:123
  %(prog)s parse /ghost/xenial/i/machines --base-url / --format yaml
  %(prog)s parse /django/bundle/0 --base-url / --series trusty,xenial
  %(prog)s clean http://abc.com:123///a/b/c/d/ --base-url http://abc.com:123
  %(prog)s check urls.txt --format json
        """
    )
    parser.add_argument(
        "--base-url",
        type=str,
        help="Base URL stripped from every path (default: from config)"
    )
    parser.add_argument(
        "--series",
        type=str,
        help="Comma-separated series list (default: from config, else built-in)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ----- urlstate parse <url> -----
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a URL into navigation state"
    )
    parse_parser.add_argument("url", help="URL or path to parse")
    parse_parser.add_argument(
        "--format", "-f",
        type=str,
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)"
    )

    # ----- urlstate clean <url> -----
    clean_parser = subparsers.add_parser(
        "clean",
        help="Print the normalized path of a URL"
    )
    clean_parser.add_argument("url", help="URL or path to normalize")

    # ----- urlstate check <file> -----
    check_parser = subparsers.add_parser(
        "check",
        help="Report invalid URLs listed in a file"
    )
    check_parser.add_argument("source", help="File with one URL per line, or - for stdin")
    check_parser.add_argument(
        "--format", "-f",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        state = _build_state(args, repo_root or find_project_root())
    except StateConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    command = StateCommand(state)
    if args.command == "parse":
        return command.parse(args.url, format=args.format)
    elif args.command == "clean":
        return command.clean(args.url)
    elif args.command == "check":
        return command.check(args.source, format=args.format)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
