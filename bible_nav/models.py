"""
bible_nav Data Models

Depth levels, parse results and the corpus document shape.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping

from pydantic import BaseModel, ConfigDict, RootModel

from bible_nav.exceptions import InvalidDepthError


# =============================================================================
# Navigation Models
# =============================================================================


class Depth(str, Enum):
    """How many levels of the corpus a node has descended."""

    ROOT = "ROOT"
    BOOK = "BOOK"
    CHAPTER = "CHAPTER"
    VERSE = "VERSE"

    @property
    def level(self) -> int:
        return _DEPTH_ORDER.index(self)

    @property
    def is_terminal(self) -> bool:
        return self is Depth.VERSE

    @property
    def next(self) -> Depth:
        """The level one step down from this one."""
        if self.is_terminal:
            raise InvalidDepthError("Cannot descend below VERSE")
        return _DEPTH_ORDER[self.level + 1]


_DEPTH_ORDER = (Depth.ROOT, Depth.BOOK, Depth.CHAPTER, Depth.VERSE)


class LookupPath(BaseModel):
    """
    Result of parsing a query.

    Attributes:
        keys: Uppercase keys to apply in order, one level each.
        anchor: Depth at which the first key is applied.
        depth: Depth of the node the keys lead to.
    """

    model_config = ConfigDict(frozen=True)

    keys: tuple[str, ...] = ()
    anchor: Depth
    depth: Depth

    @property
    def is_empty(self) -> bool:
        return not self.keys


# =============================================================================
# Corpus Models
# =============================================================================

# book -> chapter -> verse -> text
Chapter = Dict[str, str]
Book = Dict[str, Chapter]
Corpus = Dict[str, Book]


class CorpusModel(RootModel[Dict[str, Dict[str, Dict[str, str]]]]):
    """Validated three-level corpus document."""

    model_config = ConfigDict(strict=True)

    def to_corpus(self) -> Corpus:
        """Return the corpus with book names uppercased."""
        return {book.upper(): chapters for book, chapters in self.root.items()}


def freeze_corpus(corpus: Corpus) -> Mapping[str, Mapping[str, Mapping[str, str]]]:
    """Wrap every level of the corpus in a read-only mapping view."""
    return MappingProxyType({
        book: MappingProxyType({
            chapter: MappingProxyType(dict(verses))
            for chapter, verses in chapters.items()
        })
        for book, chapters in corpus.items()
    })
