"""Product catalog built from a published CSV feed."""

__version__ = "0.1.0"

# Re-export main components for convenient imports
from shopfeed.config import FEED_URL, PLACEHOLDER_IMAGE_URL
from shopfeed.feed_parser import parse_feed
from shopfeed.ingest import FeedFetchError, fetch_feed_text, refresh_catalog
from shopfeed.models import Product, validate_product
from shopfeed.query import query_products, reset_query
from shopfeed.store import CatalogStore

__all__ = [
    # Version
    "__version__",
    # Config
    "FEED_URL",
    "PLACEHOLDER_IMAGE_URL",
    # Models
    "Product",
    "validate_product",
    # Core functions
    "parse_feed",
    "CatalogStore",
    "query_products",
    "reset_query",
    "fetch_feed_text",
    "refresh_catalog",
    "FeedFetchError",
]
