"""
Navigation Node - Immutable Views over the Corpus

A NavigationNode wraps one sub-tree of the corpus (or the text of a single
verse) together with its depth. Every navigation step returns a new node;
nothing is ever mutated.

Usage:
    node = NavigationNode(corpus)
    genesis = node.get("Genesis")
    genesis.list()            # ["1", "2", ...]
    genesis.get("1:1").get()  # "In the beginning..."
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from bible_nav.exceptions import InvalidDepthError, KeyNotFoundError
from bible_nav.models import Depth
from bible_nav.reference_parser import Query, is_number, parse

logger = structlog.get_logger(__name__)


def natural_key_order(keys: list[str]) -> list[str]:
    """Integer-like keys ascending, then the rest in their original order."""
    numeric = sorted((k for k in keys if is_number(k)), key=int)
    other = [k for k in keys if not is_number(k)]
    return numeric + other


@dataclass(frozen=True)
class NavigationNode:
    """
    A sub-tree of the corpus at a known depth.

    Attributes:
        payload: Mapping of child keys, or the verse text at VERSE depth.
        depth: Levels already descended.
        path: Keys used to reach this node from the root.
    """

    payload: Any = field(repr=False, hash=False)
    depth: Depth = Depth.ROOT
    path: tuple[str, ...] = ()

    @property
    def reference(self) -> str:
        """Human-readable location, e.g. "GENESIS 1:1"."""
        if not self.path:
            return ""
        book = self.path[0]
        if len(self.path) == 1:
            return book
        locator = ":".join(self.path[1:])
        return f"{book} {locator}"

    def get(self, query: Query = None) -> Any:
        """
        Navigate from this node.

        Args:
            query: None for the raw payload, otherwise an int or reference
                string (see ``reference_parser.parse``).

        Returns:
            The raw payload when no query is given, else a new NavigationNode.
            Payloads are shared with the corpus, never copied; nodes handed
            out by CorpusRoot wrap read-only mappings.

        Raises:
            KeyNotFoundError: A key is missing at its level.
            InvalidDepthError: Called on a verse with a non-empty query.
            MalformedReferenceError, OutOfRangeError: From the parser.
        """
        lookup = parse(query, self.depth)
        if lookup.is_empty:
            return self.payload

        # Keys for levels this node has already descended must match its path
        skip = self.depth.level - lookup.anchor.level
        consumed = lookup.keys[:skip]
        expected = self.path[lookup.anchor.level:self.depth.level]
        if consumed != expected:
            raise KeyNotFoundError(
                f"{query!r} is outside the current node {self.reference!r}"
            )

        part = self.payload
        path = self.path
        for key in lookup.keys[skip:]:
            if not isinstance(part, Mapping) or key not in part:
                raise KeyNotFoundError(
                    f"{key!r} not found under {' '.join(path) or 'root'!r}"
                )
            part = part[key]
            path = path + (key,)

        logger.debug(
            "navigation_step",
            query=query,
            path=path,
            depth=lookup.depth.value,
        )
        return NavigationNode(part, lookup.depth, path)

    def list(self) -> list[str]:
        """Immediate child keys in natural order."""
        self._require_children("list")
        return natural_key_order(list(self.payload.keys()))

    def length(self) -> int:
        """Number of immediate children."""
        self._require_children("length")
        return len(self.payload)

    def _require_children(self, operation: str) -> None:
        if self.depth.is_terminal:
            raise InvalidDepthError(
                f"{operation}() is not available on a verse ({self.reference})"
            )

    def __call__(self) -> Any:
        return self.get()
