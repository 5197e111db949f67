"""
bible_nav - Scripture Reference Navigation

Resolves human-written references against a corpus nested
Book -> Chapter -> Verse and returns either verse text or a navigable node.

Usage:
    from bible_nav import CorpusRoot

    bible = CorpusRoot()
    bible.load_from("bible.json")

    bible.get("Genesis 1:1")()            # verse text
    bible.get("Genesis 1").list()         # verse numbers
    bible.get(1)                          # first book by ordinal
    bible.get("Genesis").get(1).get(1)
    bible.get("Genesis").get("1:1")

Configuration:
    BIBLE_NAV_CORPUS, BIBLE_NAV_LOG_LEVEL, BIBLE_NAV_HTTP_TIMEOUT and
    BIBLE_NAV_HTTP_RETRIES (see bible_nav.config).
"""

__version__ = "0.1.0"

from bible_nav.canon import BOOK_ORDER, book_for_ordinal
from bible_nav.corpus import CorpusRoot
from bible_nav.exceptions import (
    BibleNavError,
    ConfigurationError,
    CorpusLoadError,
    InvalidDepthError,
    KeyNotFoundError,
    MalformedReferenceError,
    NavigationError,
    NotLoadedError,
    OutOfRangeError,
)
from bible_nav.loader import load_corpus
from bible_nav.models import Depth, LookupPath
from bible_nav.navigation import NavigationNode
from bible_nav.reference_parser import parse

__all__ = [
    # Entry point
    "CorpusRoot",
    "NavigationNode",
    "load_corpus",
    # Parsing
    "parse",
    "Depth",
    "LookupPath",
    "BOOK_ORDER",
    "book_for_ordinal",
    # Exceptions
    "BibleNavError",
    "NotLoadedError",
    "CorpusLoadError",
    "ConfigurationError",
    "NavigationError",
    "MalformedReferenceError",
    "OutOfRangeError",
    "KeyNotFoundError",
    "InvalidDepthError",
]
