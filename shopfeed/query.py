"""Search and price filtering over the catalog.

Every query starts from the store's full product list, so successive
queries never narrow each other down.
"""

import re
import sys
from typing import List, Optional, Union

from shopfeed.models import Product
from shopfeed.store import CatalogStore

__all__ = [
    "query_products",
    "reset_query",
    "parse_price_bound",
    "MIN_PRICE_DEFAULT",
    "MAX_PRICE_DEFAULT",
]

MIN_PRICE_DEFAULT = 0
MAX_PRICE_DEFAULT = sys.maxsize

PriceBound = Union[int, str, None]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_price_bound(value: PriceBound, default: int) -> int:
    """Turn a user-supplied price bound into an int.

    Ints are used as-is; strings must be a whole number (surrounding
    whitespace allowed). Anything else counts as "no bound" and yields the
    default.

    Args:
        value: Raw bound, e.g. the contents of a price input box
        default: Value to use when the bound is absent or invalid

    Returns:
        The bound as an int.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_RE.fullmatch(text):
            return int(text)
    return default


def query_products(
    store: CatalogStore,
    search_text: Optional[str] = "",
    min_price: PriceBound = None,
    max_price: PriceBound = None,
) -> List[Product]:
    """Filter the catalog by name and price range.

    Args:
        store: Catalog to read from
        search_text: Case-insensitive substring of the product name; empty
            matches everything
        min_price: Inclusive lower price bound (default 0)
        max_price: Inclusive upper price bound (default: no limit)

    Returns:
        Matching products in catalog order.
    """
    needle = (search_text or "").lower()
    low = parse_price_bound(min_price, MIN_PRICE_DEFAULT)
    high = parse_price_bound(max_price, MAX_PRICE_DEFAULT)

    return [
        product
        for product in store.all()
        if needle in product.name.lower() and low <= product.price <= high
    ]


def reset_query(store: CatalogStore) -> List[Product]:
    """Return the unfiltered catalog, as a fresh query."""
    return query_products(store, "", None, None)
