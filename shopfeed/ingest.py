"""Feed ingestion: fetch the raw feed and load it into a CatalogStore.

The store and parser never see the transport. ``refresh_catalog`` takes any
``fetch(source) -> str`` callable; the default one reads http(s) URLs with
requests and anything else as a local file.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

import requests  # type: ignore[import-untyped]

from shopfeed.config import FEED_URL, HEADERS, REQUEST_TIMEOUT
from shopfeed.feed_parser import parse_feed
from shopfeed.logging_config import get_logger, log_feed_event
from shopfeed.store import SOURCE_FEED, CatalogStore
from shopfeed.url_validation import URLValidationError, is_remote_source, validate_feed_url

__all__ = [
    "FeedFetchError",
    "create_session",
    "fetch_feed_text",
    "refresh_catalog",
]

logger = get_logger("ingest")

FeedFetcher = Callable[[str], str]


class FeedFetchError(Exception):
    """Raised when the feed text cannot be obtained from its source."""
    pass


def create_session() -> requests.Session:
    """Create a requests Session with the feed headers."""
    session = requests.Session()
    session.headers.update(HEADERS)
    session.headers.setdefault("Accept-Encoding", "gzip, deflate")
    return session


def _fetch_url(url: str, session: Optional[requests.Session], timeout: float) -> str:
    try:
        url = validate_feed_url(url)
    except URLValidationError as e:
        raise FeedFetchError(f"Invalid feed URL: {e}") from e

    sess = session or create_session()
    try:
        resp = sess.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise FeedFetchError(f"Timed out after {timeout}s fetching {url}") from e
    except requests.exceptions.HTTPError as e:
        status_code = e.response.status_code if e.response is not None else "unknown"
        raise FeedFetchError(f"HTTP Error {status_code} fetching {url}") from e
    except requests.exceptions.RequestException as e:
        raise FeedFetchError(f"Failed to fetch {url}: {e}") from e
    finally:
        if session is None:
            sess.close()

    # Published sheets are UTF-8 but rarely declare a charset
    if not resp.encoding or resp.encoding.lower() == "iso-8859-1":
        resp.encoding = "utf-8"
    return str(resp.text)


def _read_file(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FeedFetchError(f"Failed to read feed file {path}: {e}") from e


def fetch_feed_text(
    source: str,
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> str:
    """Fetch the raw feed text.

    Args:
        source: http(s) URL or local file path
        session: Optional requests.Session for connection reuse
        timeout: Request timeout in seconds (URLs only)

    Returns:
        Feed contents as text

    Raises:
        FeedFetchError: If the source is invalid or cannot be read
    """
    if not source:
        raise FeedFetchError("No feed source configured")

    if is_remote_source(source):
        logger.debug(f"Fetching feed from {source}")
        return _fetch_url(source, session, timeout)

    logger.debug(f"Reading feed from file {source}")
    return _read_file(source)


def refresh_catalog(
    store: CatalogStore,
    source: Optional[str] = None,
    fetch: FeedFetcher = fetch_feed_text,
) -> bool:
    """Load the catalog from the feed, falling back to the sample set.

    Args:
        store: Store to (re)populate
        source: Feed URL or path (default: config.FEED_URL)
        fetch: Callable returning the raw feed text for a source

    Returns:
        True if live feed data was loaded, False if the fallback set was used.
    """
    source = source or FEED_URL
    log_feed_event("feed_fetch", {"message": f"Loading catalog from {source}", "source": source},
                   level=logging.DEBUG)

    try:
        raw_text = fetch(source)
        products = parse_feed(raw_text)
    except Exception as e:
        log_feed_event(
            "feed_fallback",
            {
                "message": f"Error fetching product data, using sample data: {e}",
                "source": source,
                "error": str(e),
                "error_type": type(e).__name__,
            },
            level=logging.WARNING,
        )
        store.load_fallback()
        return False

    store.load(products, source=SOURCE_FEED)
    log_feed_event(
        "feed_loaded",
        {
            "message": f"Loaded {len(products)} products from feed",
            "source": source,
            "product_count": len(products),
        },
    )
    return True
