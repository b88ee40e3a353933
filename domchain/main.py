#!/usr/bin/env python3
"""
domchain - command line entry point.

Builds markup into an empty document and prints the resulting HTML or an
outline of the page tree.
"""

import sys
import argparse
import logging

from domchain import __version__
from domchain.exceptions import UnbalancedBraces
from domchain.page import Page
from domchain.parser import MarkupParser
from domchain.utils.config import Config
from domchain.utils.logging import setup_logging, get_default_log_file, log_exception

logger = logging.getLogger("domchain.cli")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="domchain",
        description="Build an element tree from domchain markup and print it")

    parser.add_argument("source", nargs="?", default="-",
                        help="File with markup, or '-' for stdin (default)")
    parser.add_argument("--tree", action="store_true", help="Print the page outline instead of HTML")
    parser.add_argument("--pretty", action="store_true", help="Indent the HTML output")
    parser.add_argument("--check", action="store_true", help="Only check that braces are balanced")
    parser.add_argument("--config", default=None, help="Path to a JSON config file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"domchain {__version__}")

    return parser.parse_args(argv)


def read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def main(argv=None) -> int:
    """Main entry point. Returns the process exit status."""
    args = parse_args(argv)
    config = Config(args.config)

    log_file = config.get("logging.file")
    if log_file == "default":
        log_file = get_default_log_file()
    console_level = "DEBUG" if args.debug else config.get("logging.console_level", "WARNING")
    setup_logging(log_file=log_file, console_level=console_level)

    try:
        text = read_source(args.source)
    except OSError as e:
        log_exception(logger, e, f"Cannot read {args.source}")
        print(f"domchain: cannot read {args.source}: {e}", file=sys.stderr)
        return 2

    parser = MarkupParser(config=config)
    try:
        if args.check:
            table = parser.validate(text)
            print(f"ok: {len(table)} brace pairs")
            return 0

        page = Page()
        parser.parse(page, text)
    except UnbalancedBraces as e:
        print(f"domchain: {e}", file=sys.stderr)
        return 1

    if args.tree:
        print(page.outline())
    else:
        pretty = args.pretty or bool(config.get("output.pretty", False))
        print(page.to_html(pretty=pretty, inner=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
