"""
Canonical book order.

Book names are the uppercase KJV titles used as keys of the corpus document,
in canonical order. Ordinals are 1-based.
"""

from __future__ import annotations

from bible_nav.exceptions import OutOfRangeError


BOOK_ORDER: tuple[str, ...] = (
    # Old Testament
    "GENESIS",
    "EXODUS",
    "LEVITICUS",
    "NUMBERS",
    "DEUTERONOMY",
    "THE BOOK OF JOSHUA",
    "THE BOOK OF JUDGES",
    "THE BOOK OF RUTH",
    "THE FIRST BOOK OF THE KINGS",
    "THE SECOND BOOK OF THE KINGS",
    "THE THIRD BOOK OF THE KINGS",
    "THE FOURTH BOOK OF THE KINGS",
    "THE FIRST BOOK OF THE CHRONICLES",
    "THE SECOND BOOK OF THE CHRONICLES",
    "EZRA",
    "THE BOOK OF NEHEMIAH",
    "THE BOOK OF ESTHER",
    "THE BOOK OF JOB",
    "THE BOOK OF PSALMS",
    "THE PROVERBS",
    "ECCLESIASTES",
    "THE SONG OF SOLOMON",
    "THE BOOK OF THE PROPHET ISAIAH",
    "THE BOOK OF THE PROPHET JEREMIAH",
    "THE LAMENTATIONS OF JEREMIAH",
    "THE BOOK OF THE PROPHET EZEKIEL",
    "THE BOOK OF DANIEL",
    "HOSEA",
    "JOEL",
    "AMOS",
    "OBADIAH",
    "JONAH",
    "MICAH",
    "NAHUM",
    "HABAKKUK",
    "ZEPHANIAH",
    "HAGGAI",
    "ZECHARIAH",
    "MALACHI",
    # New Testament
    "THE GOSPEL ACCORDING TO SAINT MATTHEW",
    "THE GOSPEL ACCORDING TO SAINT MARK",
    "THE GOSPEL ACCORDING TO SAINT LUKE",
    "THE GOSPEL ACCORDING TO SAINT JOHN",
    "THE ACTS OF THE APOSTLES",
    "THE EPISTLE OF PAUL THE APOSTLE TO THE ROMANS",
    "THE FIRST EPISTLE OF PAUL THE APOSTLE TO THE CORINTHIANS",
    "THE SECOND EPISTLE OF PAUL THE APOSTLE TO THE CORINTHIANS",
    "THE EPISTLE OF PAUL THE APOSTLE TO THE GALATIANS",
    "THE EPISTLE OF PAUL THE APOSTLE TO THE EPHESIANS",
    "THE EPISTLE OF PAUL THE APOSTLE TO THE PHILIPPIANS",
    "THE EPISTLE OF PAUL THE APOSTLE TO THE COLOSSIANS",
    "THE FIRST EPISTLE OF PAUL THE APOSTLE TO THE THESSALONIANS",
    "THE SECOND EPISTLE OF PAUL THE APOSTLE TO THE THESSALONIANS",
    "THE FIRST EPISTLE OF PAUL THE APOSTLE TO TIMOTHY",
    "THE SECOND EPISTLE OF PAUL THE APOSTLE TO TIMOTHY",
    "THE EPISTLE OF PAUL TO TITUS",
    "THE EPISTLE OF PAUL TO PHILEMON",
    "THE EPISTLE OF PAUL THE APOSTLE TO THE HEBREWS",
    "THE GENERAL EPISTLE OF JAMES",
    "THE FIRST EPISTLE GENERAL OF PETER",
    "THE SECOND EPISTLE GENERAL OF PETER",
    "THE FIRST GENERAL EPISTLE OF JOHN",
    "THE SECOND EPISTLE OF JOHN",
    "THE THIRD EPISTLE OF JOHN",
    "THE GENERAL EPISTLE OF JUDE",
    "THE REVELATION OF SAINT JOHN THE DIVINE",
)


def book_for_ordinal(ordinal: int) -> str:
    """
    Translate a 1-based book ordinal into its canonical name.

    Args:
        ordinal: Position of the book in canonical order (1 = Genesis).

    Returns:
        Uppercase book name as stored in the corpus.

    Raises:
        OutOfRangeError: If ordinal is outside [1, len(BOOK_ORDER)].
    """
    if ordinal < 1 or ordinal > len(BOOK_ORDER):
        raise OutOfRangeError(
            f"Book ordinal {ordinal} outside 1..{len(BOOK_ORDER)}"
        )
    return BOOK_ORDER[ordinal - 1]

