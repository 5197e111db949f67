"""
bible_nav Custom Exceptions

All module-specific exceptions inherit from BibleNavError.
"""


class BibleNavError(Exception):
    """Base exception for all bible_nav errors."""

    pass


class NotLoadedError(BibleNavError):
    """Raised when a query is attempted before a corpus is installed."""

    pass


class CorpusLoadError(BibleNavError):
    """Raised when a corpus document cannot be fetched, parsed or validated."""

    pass


class ConfigurationError(BibleNavError):
    """Raised when a BIBLE_NAV_* setting has an invalid value."""

    pass


# Navigation Exceptions
class NavigationError(BibleNavError):
    """Base exception for reference parsing and navigation errors."""

    pass


class MalformedReferenceError(NavigationError):
    """Raised when a reference does not decompose into book/chapter/verse."""

    pass


class OutOfRangeError(NavigationError):
    """Raised when a book ordinal falls outside the canonical book order."""

    pass


class KeyNotFoundError(NavigationError):
    """Raised when a well-formed key is absent at the expected level."""

    pass


class InvalidDepthError(NavigationError):
    """Raised when navigating past verse level or listing a verse."""

    pass
