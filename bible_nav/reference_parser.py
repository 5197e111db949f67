"""
Scripture reference parser.

Turns a raw query plus the current navigation depth into the keys to look up.
It never touches the corpus.

Handles:
- No query: "" or None (no descent)
- Book ordinals at the root: 1 -> "GENESIS"
- Chapter/verse numbers below the root: 1 -> "1"
- Plain keys: "Genesis"
- Compound references: "Genesis 1:1", "Genesis 1", "1:1"
"""

from __future__ import annotations

from typing import Optional, Union

import structlog

from bible_nav.canon import book_for_ordinal
from bible_nav.exceptions import InvalidDepthError, MalformedReferenceError
from bible_nav.models import Depth, LookupPath

logger = structlog.get_logger(__name__)

Query = Optional[Union[int, str]]


def has_digits(text: str) -> bool:
    """True if the string contains at least one ASCII decimal digit."""
    return any("0" <= ch <= "9" for ch in text)


def is_number(text: str) -> bool:
    """True if the string is made only of ASCII decimal digits."""
    return text.isascii() and text.isdigit()


def parse(query: Query, depth: Depth) -> LookupPath:
    """
    Parse a query relative to a navigation depth.

    Args:
        query: None, an int, or a reference string.
        depth: Depth of the node the query is applied to.

    Returns:
        LookupPath with the keys to apply and the resulting depth.

    Raises:
        MalformedReferenceError: Unsupported type or undecomposable string.
        OutOfRangeError: Book ordinal outside the canonical order.
        InvalidDepthError: Descent requested from a verse.
    """
    if query is None or query == "":
        return LookupPath(anchor=depth, depth=depth)

    # bool is an int subclass but never a valid reference
    if isinstance(query, bool) or not isinstance(query, (int, str)):
        raise MalformedReferenceError(
            f"Unsupported query type: {type(query).__name__}"
        )

    if depth.is_terminal:
        raise InvalidDepthError(f"Cannot query {query!r} below a verse")

    if isinstance(query, int):
        return parse_number(query, depth)

    if has_digits(query):
        return parse_compound(query, depth)

    return LookupPath(keys=(query.strip().upper(),), anchor=depth, depth=depth.next)


def parse_number(number: int, depth: Depth) -> LookupPath:
    """Resolve an integer: a book ordinal at the root, a plain key below it."""
    if depth is Depth.ROOT:
        key = book_for_ordinal(number)
    else:
        key = str(number)
    return LookupPath(keys=(key,), anchor=depth, depth=depth.next)


def split_reference(reference: str) -> tuple[str, str, str]:
    """
    Split a reference string into (book, chapter, verse) candidates.

    The last whitespace-delimited token is the locator ("1:1"); everything
    before it is the book. Missing parts come back as empty strings.

    Raises:
        MalformedReferenceError: If the locator has more than one colon.
    """
    tokens = reference.split()
    locator = tokens[-1]
    book = " ".join(tokens[:-1])

    parts = locator.split(":")
    if len(parts) > 2:
        raise MalformedReferenceError(f"Too many ':' in {reference!r}")

    chapter = parts[0]
    verse = parts[1] if len(parts) > 1 else ""
    return book.upper(), chapter.upper(), verse.upper()


def parse_compound(reference: str, depth: Depth) -> LookupPath:
    """
    Parse a reference containing digits.

    Three shapes are accepted:
    - book chapter:verse -> anchored at the root, ends at VERSE
    - book chapter       -> anchored at the root, ends at CHAPTER
    - chapter:verse      -> anchored at the book, ends at VERSE
    """
    book, chapter, verse = split_reference(reference.strip())

    if book and chapter and verse:
        keys, anchor, target = (book, chapter, verse), Depth.ROOT, Depth.VERSE
    elif book and chapter and not verse:
        keys, anchor, target = (book, chapter), Depth.ROOT, Depth.CHAPTER
    elif chapter and verse and not book:
        keys, anchor, target = (chapter, verse), Depth.BOOK, Depth.VERSE
    else:
        raise MalformedReferenceError(
            f"Cannot read {reference!r} as book/chapter/verse"
        )

    if depth.level < anchor.level:
        raise MalformedReferenceError(
            f"{reference!r} needs a {anchor.value.lower()} to start from, "
            f"node is at {depth.value}"
        )

    logger.debug(
        "compound_reference_parsed",
        reference=reference,
        keys=keys,
        anchor=anchor.value,
        depth=target.value,
    )
    return LookupPath(keys=keys, anchor=anchor, depth=target)
