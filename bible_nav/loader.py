"""
Corpus Loader - Fetch and Validate the Corpus Document

The corpus is a JSON object nested exactly three levels deep:
book name -> chapter number -> verse number -> verse text.

Usage:
    from bible_nav.loader import load_corpus

    corpus = load_corpus("./bible.json")
    corpus = load_corpus("https://example.org/bible.json")
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import requests
import structlog
from pydantic import ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from bible_nav.canon import BOOK_ORDER
from bible_nav.config import Settings, get_settings
from bible_nav.exceptions import CorpusLoadError
from bible_nav.models import Corpus, CorpusModel

logger = structlog.get_logger(__name__)

RETRY_EXCEPTIONS = (requests.ConnectionError, requests.Timeout)


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def validate_corpus(data: Any) -> Corpus:
    """
    Check the three-level shape and uppercase book names.

    Args:
        data: Decoded JSON document.

    Returns:
        The corpus, ready to be installed in a CorpusRoot.

    Raises:
        CorpusLoadError: If the document is not book -> chapter -> verse -> text.
    """
    try:
        model = CorpusModel.model_validate(data)
    except ValidationError as e:
        raise CorpusLoadError(
            f"Corpus is not book -> chapter -> verse -> text: "
            f"{e.error_count()} error(s), first at {e.errors()[0]['loc']}"
        ) from e

    corpus = model.to_corpus()

    missing = [book for book in BOOK_ORDER if book not in corpus]
    if missing:
        logger.warning(
            "corpus_missing_canonical_books",
            missing=len(missing),
            first=missing[0],
        )

    return corpus


def read_corpus_file(path: str | Path) -> Any:
    """Read a JSON corpus document from disk."""
    file_path = Path(path)
    try:
        with open(file_path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise CorpusLoadError(f"Cannot read corpus file {file_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CorpusLoadError(f"Corpus file {file_path} is not JSON: {e}") from e


def fetch_corpus(url: str, settings: Settings | None = None) -> Any:
    """
    Download a JSON corpus document.

    Connection errors and timeouts are retried with exponential backoff;
    HTTP error statuses are not.
    """
    settings = settings or get_settings()

    @retry(
        stop=stop_after_attempt(settings.http_retries),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(RETRY_EXCEPTIONS),
        reraise=True,
    )
    def _get() -> requests.Response:
        logger.info("downloading_corpus", url=url)
        response = requests.get(url, timeout=settings.http_timeout)
        response.raise_for_status()
        return response

    try:
        response = _get()
    except requests.RequestException as e:
        raise CorpusLoadError(f"Cannot download corpus from {url}: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        raise CorpusLoadError(f"Corpus at {url} is not JSON: {e}") from e


def load_corpus(source: str | Path, settings: Settings | None = None) -> Corpus:
    """
    Load and validate a corpus from a file path or an http(s) URL.

    Args:
        source: Path to a JSON file, or a URL.
        settings: Optional settings (defaults to the environment).

    Returns:
        The validated corpus.

    Raises:
        CorpusLoadError: If fetching, decoding or validation fails.
    """
    if is_url(source):
        data = fetch_corpus(str(source), settings)
    else:
        data = read_corpus_file(source)

    corpus = validate_corpus(data)
    logger.info("corpus_loaded", source=str(source), books=len(corpus))
    return corpus
