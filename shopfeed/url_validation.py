"""URL validation for feed sources.

The feed location comes from configuration or the command line, so it is
checked before anything is fetched from it.
"""

import re
from typing import Optional, Set
from urllib.parse import urlparse

from shopfeed.config import ALLOWED_FEED_SCHEMES

__all__ = [
    "URLValidationError",
    "sanitize_url",
    "is_remote_source",
    "validate_feed_url",
]


class URLValidationError(ValueError):
    """Raised when a feed URL is unsafe or malformed."""
    pass


# Dangerous URL schemes to reject
DANGEROUS_SCHEMES = {"javascript", "data", "vbscript", "file"}

_SUSPICIOUS_PATTERNS = [
    r"<script",          # XSS attempt
    r"javascript:",      # JS injection
]


def sanitize_url(url: str) -> str:
    """Strip whitespace and control characters from a URL."""
    if not url:
        return ""

    url = url.strip()
    url = re.sub(r"[\x00-\x1f\x7f-\x9f]", "", url)
    return url.replace("%00", "")


def is_remote_source(source: str) -> bool:
    """True if the source looks like a URL rather than a local path."""
    scheme = urlparse(sanitize_url(source)).scheme.lower()
    # Single letters are Windows drive letters ("C:\\feed.csv")
    return len(scheme) > 1


def validate_feed_url(url: str, allowed_schemes: Optional[Set[str]] = None) -> str:
    """Validate a feed URL.

    Args:
        url: URL to validate
        allowed_schemes: Accepted schemes (default: config.ALLOWED_FEED_SCHEMES)

    Returns:
        Sanitized URL

    Raises:
        URLValidationError: If the URL is empty, unsafe or has no host
    """
    if not url:
        raise URLValidationError("URL is empty")

    url = sanitize_url(url)
    parsed = urlparse(url)

    scheme = parsed.scheme.lower()
    if scheme in DANGEROUS_SCHEMES:
        raise URLValidationError(f"Dangerous URL scheme: {scheme}")

    schemes = allowed_schemes if allowed_schemes is not None else ALLOWED_FEED_SCHEMES
    if scheme not in schemes:
        raise URLValidationError(f"Invalid URL scheme: {scheme or '(none)'}")

    if not parsed.netloc:
        raise URLValidationError("URL has no domain")

    url_lower = url.lower()
    for pattern in _SUSPICIOUS_PATTERNS:
        if re.search(pattern, url_lower):
            raise URLValidationError(f"URL contains suspicious pattern: {pattern}")

    return url
