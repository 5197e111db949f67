"""
bible_nav CLI - Command Line Interface

Usage:
    python -m bible_nav get "Genesis 1:1"
    python -m bible_nav get Genesis 1 1
    python -m bible_nav get --json "Genesis 1"
    python -m bible_nav list "Genesis"
    python -m bible_nav books
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import structlog

from bible_nav.canon import BOOK_ORDER
from bible_nav.config import get_settings
from bible_nav.corpus import CorpusRoot
from bible_nav.exceptions import BibleNavError
from bible_nav.navigation import NavigationNode
from bible_nav.reference_parser import Query, is_number

logger = structlog.get_logger(__name__)


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def coerce_query(raw: str) -> Query:
    """Bare integers on the command line are ordinals/numbers, not keys."""
    return int(raw) if is_number(raw) else raw


def resolve(args) -> NavigationNode:
    """Load the corpus and apply each query in turn."""
    bible = CorpusRoot()
    bible.load_from(args.corpus or get_settings().corpus)

    node = bible.node
    for raw in args.queries:
        node = node.get(coerce_query(raw))
    return node


def cmd_get(args) -> int:
    """Print verse text, or the contents of a book/chapter."""
    node = resolve(args)

    if node.depth.is_terminal:
        print(node())
    elif args.json:
        print(json.dumps(node(), indent=2, ensure_ascii=False, default=dict))
    else:
        print(f"{node.reference or 'BIBLE'} ({node.depth.value}, {node.length()} entries)")
        for key in node.list():
            print(f"  {key}")
    return 0


def cmd_list(args) -> int:
    """Print the child keys of a node, one per line."""
    node = resolve(args)
    for key in node.list():
        print(key)
    return 0


def cmd_books(args) -> int:
    """Print the canonical book order with ordinals."""
    for ordinal, book in enumerate(BOOK_ORDER, start=1):
        print(f"{ordinal:>2}  {book}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="bible_nav - Scripture reference navigation"
    )
    parser.add_argument(
        "--log-level",
        help="Log level (default: BIBLE_NAV_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Get command
    get_parser = subparsers.add_parser("get", help="Resolve a reference")
    get_parser.add_argument("queries", nargs="*", help="References, applied in order")
    get_parser.add_argument("-c", "--corpus", help="Corpus JSON file or URL")
    get_parser.add_argument("--json", action="store_true", help="Dump sub-tree as JSON")

    # List command
    list_parser = subparsers.add_parser("list", help="List children of a reference")
    list_parser.add_argument("queries", nargs="*", help="References, applied in order")
    list_parser.add_argument("-c", "--corpus", help="Corpus JSON file or URL")

    # Books command
    subparsers.add_parser("books", help="Show canonical book order")

    args = parser.parse_args(argv)

    commands = {
        "get": cmd_get,
        "list": cmd_list,
        "books": cmd_books,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 1

    try:
        configure_logging(args.log_level or get_settings().log_level)
        return command(args)
    except BibleNavError as e:
        logger.debug("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
