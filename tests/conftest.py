"""Pytest configuration and shared fixtures."""

import json
import tempfile
from pathlib import Path

import pytest

from bible_nav.canon import BOOK_ORDER


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_corpus():
    """A corpus with every canonical book; Genesis and Exodus have real text."""
    corpus = {
        book: {"1": {"1": f"{book} 1:1"}}
        for book in BOOK_ORDER
    }
    corpus["GENESIS"] = {
        "1": {
            "1": "In the beginning God created the heaven and the earth.",
            "2": "And the earth was without form, and void.",
            "10": "And God called the dry land Earth.",
            "3": "And God said, Let there be light: and there was light.",
        },
        "2": {
            "1": "Thus the heavens and the earth were finished.",
            "2": "And on the seventh day God ended his work.",
        },
    }
    corpus["EXODUS"] = {
        "1": {
            "1": "Now these are the names of the children of Israel.",
        },
    }
    return corpus


@pytest.fixture
def bible(sample_corpus):
    """A loaded CorpusRoot."""
    from bible_nav.corpus import CorpusRoot

    return CorpusRoot(sample_corpus)


@pytest.fixture
def corpus_file(temp_dir, sample_corpus):
    """The sample corpus written to disk with mixed-case book names."""
    document = {book.title(): chapters for book, chapters in sample_corpus.items()}
    path = temp_dir / "bible.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path
