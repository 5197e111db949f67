"""Tests for NavigationNode."""

import dataclasses

import pytest

from bible_nav.canon import BOOK_ORDER
from bible_nav.exceptions import (
    InvalidDepthError,
    KeyNotFoundError,
    OutOfRangeError,
)
from bible_nav.models import Depth
from bible_nav.navigation import NavigationNode, natural_key_order

GENESIS_1_1 = "In the beginning God created the heaven and the earth."


@pytest.fixture
def root(sample_corpus):
    return NavigationNode(sample_corpus)


class TestGet:
    """Tests for get()."""

    def test_no_query_returns_payload(self, root, sample_corpus):
        assert root.get() is sample_corpus

    def test_get_is_idempotent(self, root):
        chapter = root.get("Genesis 1")
        assert chapter.get() == chapter.get()

    def test_book(self, root):
        genesis = root.get("Genesis")

        assert genesis.depth == Depth.BOOK
        assert genesis.path == ("GENESIS",)
        assert genesis.reference == "GENESIS"

    def test_step_by_step(self, root):
        verse = root.get("genesis").get(1).get(1)

        assert verse.depth == Depth.VERSE
        assert verse.get() == GENESIS_1_1
        assert verse.reference == "GENESIS 1:1"

    def test_compound_from_root(self, root):
        assert root.get("Genesis 1:1").get() == GENESIS_1_1

    def test_chapter_verse_from_book(self, root):
        verse = root.get("Genesis").get("2:1")

        assert verse.path == ("GENESIS", "2", "1")
        assert verse.get() == "Thus the heavens and the earth were finished."

    def test_chapter_verse_from_chapter(self, root):
        chapter = root.get("Genesis 1")
        assert chapter.get("1:1") == root.get("Genesis 1:1")

    def test_other_chapter_from_chapter(self, root):
        with pytest.raises(KeyNotFoundError):
            root.get("Genesis 1").get("2:1")

    def test_book_chapter_from_book(self, root):
        assert root.get("Genesis").get("Genesis 2") == root.get("Genesis 2")

    def test_other_book_from_book(self, root):
        with pytest.raises(KeyNotFoundError):
            root.get("Genesis").get("Exodus 1")

    def test_same_chapter_from_chapter(self, root):
        chapter = root.get("Genesis 1")
        assert chapter.get("Genesis 1") == chapter

    def test_ordinal(self, root):
        assert root.get(2) == root.get("Exodus")

    def test_ordinal_out_of_range(self, root):
        with pytest.raises(OutOfRangeError):
            root.get(67)

    @pytest.mark.parametrize("query", ["Nowhere", "Genesis 99", "Genesis 1:99"])
    def test_missing_key(self, root, query):
        with pytest.raises(KeyNotFoundError):
            root.get(query)

    def test_whitespace_query_is_a_missing_key(self, root):
        with pytest.raises(KeyNotFoundError):
            root.get("   ")

    def test_missing_chapter_number(self, root):
        with pytest.raises(KeyNotFoundError):
            root.get("Genesis").get(3)

    def test_call_is_get(self, root):
        chapter = root.get("Genesis 2")
        assert chapter() == chapter.get()


class TestVerseNode:
    """A verse is terminal."""

    @pytest.fixture
    def verse(self, root):
        return root.get("Genesis 1:1")

    def test_payload_is_text(self, verse):
        assert verse() == GENESIS_1_1
        assert verse.get("") == GENESIS_1_1

    @pytest.mark.parametrize("query", [1, "1", "a", "1:1", "Genesis 1:1"])
    def test_no_further_descent(self, verse, query):
        with pytest.raises(InvalidDepthError):
            verse.get(query)

    def test_list(self, verse):
        with pytest.raises(InvalidDepthError):
            verse.list()

    def test_length(self, verse):
        with pytest.raises(InvalidDepthError):
            verse.length()


class TestListing:
    """Tests for list() and length()."""

    def test_books_in_corpus_order(self, root):
        assert root.list() == list(BOOK_ORDER)
        assert root.length() == 66

    def test_chapters(self, root):
        assert root.get("Genesis").list() == ["1", "2"]
        assert root.get("Genesis").length() == 2

    def test_verses_in_numeric_order(self, root):
        assert root.get("Genesis 1").list() == ["1", "2", "3", "10"]

    def test_natural_key_order(self):
        keys = ["b", "10", "2", "a", "1"]
        assert natural_key_order(keys) == ["1", "2", "10", "b", "a"]

    def test_non_ascii_digits_sort_as_text(self):
        assert natural_key_order(["²", "2", "1"]) == ["1", "2", "²"]

    def test_list_with_superscript_key(self):
        node = NavigationNode({"1": "a", "²": "b"}, Depth.CHAPTER, ("GENESIS", "1"))
        assert node.list() == ["1", "²"]


class TestImmutability:
    """Nodes are values."""

    def test_frozen(self, root):
        with pytest.raises(dataclasses.FrozenInstanceError):
            root.depth = Depth.VERSE

    def test_navigation_leaves_parent_untouched(self, root):
        genesis = root.get("Genesis")
        genesis.get(1)

        assert genesis.depth == Depth.BOOK
        assert genesis.path == ("GENESIS",)

    def test_repr_omits_payload(self, root):
        text = repr(root.get("Genesis 1"))

        assert "CHAPTER" in text
        assert "beginning" not in text

    def test_root_reference_is_empty(self, root):
        assert root.reference == ""
