"""
Corpus Root - Entry Point for Queries

Holds the loaded corpus and hands out the root NavigationNode. There is no
global instance: construct one at startup and pass it to whoever needs it.

Usage:
    from bible_nav import CorpusRoot

    bible = CorpusRoot()
    bible.load_from("./bible.json")

    bible.get("Genesis 1:1").get()       # verse text
    bible.get("Genesis 1").list()        # ["1", "2", ...]
    bible.get(1) == bible.get("Genesis")
    bible.get("Genesis").get(1).get(1)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from bible_nav.config import Settings
from bible_nav.exceptions import NotLoadedError
from bible_nav.loader import load_corpus, validate_corpus
from bible_nav.models import Corpus, Depth, freeze_corpus
from bible_nav.navigation import NavigationNode
from bible_nav.reference_parser import Query

logger = structlog.get_logger(__name__)


class CorpusRoot:
    """
    Owns the corpus and answers top-level queries.

    Example:
        bible = CorpusRoot(corpus)
        verse = bible.get("Genesis 1:1")()
    """

    def __init__(self, corpus: Corpus | None = None):
        self._root: NavigationNode | None = None
        if corpus is not None:
            self.load(corpus)

    def load(self, corpus: Corpus) -> NavigationNode:
        """
        Install a corpus, replacing any previous one.

        Args:
            corpus: Mapping of book -> chapter -> verse -> text.

        Returns:
            The root NavigationNode.
        """
        return self._install(validate_corpus(corpus))

    def load_from(
        self,
        source: str | Path,
        settings: Settings | None = None,
    ) -> NavigationNode:
        """Load a corpus from a JSON file or URL and install it."""
        return self._install(load_corpus(source, settings))

    def _install(self, corpus: Corpus) -> NavigationNode:
        self._root = NavigationNode(freeze_corpus(corpus), Depth.ROOT)
        logger.info("corpus_installed", books=len(corpus))
        return self._root

    def is_loaded(self) -> bool:
        """True once a corpus has been installed."""
        return self._root is not None

    @property
    def node(self) -> NavigationNode:
        """The root NavigationNode."""
        if self._root is None:
            raise NotLoadedError("Bible not loaded")
        return self._root

    def get(self, query: Query = None) -> Any:
        """
        Query from the root.

        Raises:
            NotLoadedError: If no corpus has been installed.
        """
        return self.node.get(query)

    def __call__(self) -> Any:
        return self.get()
